"""Fatal error taxonomy for the viewer.

Every failure below the runtime bootstrap is raised as a ``ViewerError``
subclass. Only ``run_viewer`` handles them, after the terminal is restored.
"""

from __future__ import annotations

import os


class ViewerError(Exception):
    """Base class for unrecoverable viewer failures.

    ``context`` names the failing operation (``"read"``, ``"tcsetattr"``...)
    and ``str(error)`` renders ``"<context>: <description>"``.
    """

    def __init__(self, context: str, errno: int | None = None, detail: str = "") -> None:
        self.context = context
        self.errno = errno
        self.detail = detail
        super().__init__(str(self))

    @classmethod
    def from_os_error(cls, context: str, exc: OSError):
        return cls(context, errno=exc.errno, detail=exc.strerror or str(exc))

    def __str__(self) -> str:
        if self.errno:
            description = os.strerror(self.errno)
        else:
            description = self.detail or "unknown error"
        return f"{self.context}: {description}"


class TerminalError(ViewerError):
    """Terminal attribute or window-size query failed."""


class InputOutputError(ViewerError):
    """Read, write, or file-open failure other than "no data yet"."""


class ProtocolError(ViewerError):
    """Terminal replied with a malformed cursor-position report."""
