"""Runtime configuration for the viewer.

Settings are read once at startup from the environment. Nothing is persisted.
Malformed values fall back to defaults instead of aborting startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_log_dir

from .input.keys import ctrl_key
from .input.reader import READ_TIMEOUT_MS

APP_NAME = "youreditor"
VERSION = "0.0.1"
AUTHOR_LINE = "by xiaofei"
LINE_HEAD = b"~"
LOG_FILENAME = "youreditor.log"

READ_TIMEOUT_ENV = "YOUREDITOR_READ_TIMEOUT_MS"
LOG_ENV = "YOUREDITOR_LOG"


@dataclass(frozen=True)
class ViewerConfig:
    """Immutable settings shared by the renderer, loop, and terminal."""

    version: str = VERSION
    author: str = AUTHOR_LINE
    line_head: bytes = LINE_HEAD
    read_timeout_ms: int = READ_TIMEOUT_MS
    quit_key: int = ctrl_key("q")
    log_path: Path | None = None

    @property
    def welcome_message(self) -> str:
        return f"Your editor -- version {self.version}"


def default_log_path() -> Path:
    """Return the per-user log file path used when ``YOUREDITOR_LOG=1``."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def _load_positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    """Parse a positive integer setting, returning ``default`` when unusable."""
    raw = environ.get(key)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _load_log_path(environ: Mapping[str, str]) -> Path | None:
    """Resolve ``YOUREDITOR_LOG``: ``1`` picks the platform log dir, other text is a path."""
    raw = environ.get(LOG_ENV, "").strip()
    if not raw or raw == "0":
        return None
    if raw == "1":
        return default_log_path()
    return Path(raw).expanduser()


def load_config(environ: Mapping[str, str] | None = None) -> ViewerConfig:
    """Build the session config from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    return ViewerConfig(
        read_timeout_ms=_load_positive_int(environ, READ_TIMEOUT_ENV, READ_TIMEOUT_MS),
        log_path=_load_log_path(environ),
    )
