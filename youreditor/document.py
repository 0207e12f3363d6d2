"""Read-only document model: the rows of one loaded file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InputOutputError

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = b"\r\n"


@dataclass(frozen=True)
class Row:
    """One line of file content without its line terminator."""

    chars: bytes

    @property
    def size(self) -> int:
        return len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)


@dataclass
class Document:
    rows: list[Row] = field(default_factory=list)
    path: Path | None = None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def append_row(self, chars: bytes) -> None:
        self.rows.append(Row(bytes(chars)))

    @classmethod
    def from_bytes(cls, data: bytes, path: Path | None = None) -> "Document":
        """Split ``data`` on ``\\n`` and drop trailing ``\\n``/``\\r`` from each line.

        Empty lines are kept as zero-length rows. A final line without a
        terminator still becomes a row; a trailing terminator does not start
        a new one. A lone ``\\r`` inside a line is content, not a break.
        """
        document = cls(path=path)
        lines = data.split(b"\n")
        if lines[-1] == b"":
            lines.pop()
        for line in lines:
            document.append_row(line.rstrip(_LINE_TERMINATORS))
        return document

    @classmethod
    def open(cls, path: Path) -> "Document":
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise InputOutputError.from_os_error("fopen", exc) from exc
        document = cls.from_bytes(data, path=path)
        logger.info("loaded %s (%d rows)", path, document.row_count)
        return document
