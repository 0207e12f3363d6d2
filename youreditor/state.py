from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import ViewerConfig
from .document import Document
from .viewport import Viewport


class LoopStatus(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class EditorState:
    document: Document
    viewport: Viewport
    config: ViewerConfig = field(default_factory=ViewerConfig)
    status: LoopStatus = LoopStatus.RUNNING

    @property
    def terminated(self) -> bool:
        return self.status is LoopStatus.TERMINATED
