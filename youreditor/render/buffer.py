"""Append-only frame buffer.

A frame is assembled here and handed to the terminal in a single write,
so the screen never shows a half-drawn frame.
"""

from __future__ import annotations

import os

from ..errors import InputOutputError


class RenderBuffer:
    """Growable byte buffer holding one frame until it is flushed."""

    def __init__(self) -> None:
        """Start with an empty frame."""
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        """Add ``data`` to the end of the frame."""
        self._data += data

    def __len__(self) -> int:
        return len(self._data)

    def getvalue(self) -> bytes:
        """Return a copy of the bytes appended so far."""
        return bytes(self._data)

    def flush(self, fd: int) -> None:
        """Write the whole buffer to ``fd`` and empty it.

        Only a short write from the kernel causes a second ``os.write``.
        """
        pending = bytes(self._data)
        self._data.clear()
        try:
            while pending:
                written = os.write(fd, pending)
                pending = pending[written:]
        except OSError as exc:
            raise InputOutputError.from_os_error("write", exc) from exc
