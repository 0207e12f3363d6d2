"""Terminal window size detection.

Asks the kernel first. Some terminals report zero columns, so the fallback
parks the cursor in the bottom-right corner and asks the terminal where
it ended up.
"""

from __future__ import annotations

import logging
import os

from ..ansi import CURSOR_BOTTOM_RIGHT, CURSOR_POSITION_REPLY_RE, REQUEST_CURSOR_POSITION
from ..errors import InputOutputError, ProtocolError, TerminalError
from ..input.reader import READ_TIMEOUT_MS, _read_ready_byte

logger = logging.getLogger(__name__)

REPLY_BUFFER_SIZE = 32


def _write_all(fd: int, data: bytes, context: str) -> None:
    try:
        written = os.write(fd, data)
    except OSError as exc:
        raise InputOutputError.from_os_error(context, exc) from exc
    if written != len(data):
        raise InputOutputError(context, detail=f"short write ({written} of {len(data)} bytes)")


def get_cursor_position(stdin_fd: int, stdout_fd: int, timeout_ms: int = READ_TIMEOUT_MS) -> tuple[int, int]:
    """Return the cursor's ``(row, col)`` as reported by the terminal.

    Sends ``ESC [ 6 n`` and reads the ``ESC [ row ; col R`` reply one byte at
    a time, stopping at ``R``, at a read timeout, or when the reply buffer is
    full.
    """
    _write_all(stdout_fd, REQUEST_CURSOR_POSITION, "getCursorPosition")

    reply = bytearray()
    while len(reply) < REPLY_BUFFER_SIZE - 1:
        ch = _read_ready_byte(stdin_fd, timeout_ms)
        if ch is None or ch == ord("R"):
            break
        reply.append(ch)

    match = CURSOR_POSITION_REPLY_RE.fullmatch(bytes(reply))
    if match is None:
        raise ProtocolError("getCursorPosition", detail=f"malformed cursor position reply {bytes(reply)!r}")
    return int(match.group(1)), int(match.group(2))


def get_window_size(stdin_fd: int, stdout_fd: int, timeout_ms: int = READ_TIMEOUT_MS) -> tuple[int, int]:
    """Return the terminal size as ``(rows, cols)``."""
    try:
        size = os.get_terminal_size(stdout_fd)
    except OSError as exc:
        logger.debug("window size ioctl failed (%s); probing cursor", exc)
    else:
        if size.columns > 0 and size.lines > 0:
            logger.debug("window size %dx%d from ioctl", size.lines, size.columns)
            return size.lines, size.columns
        logger.debug("window size ioctl reported %dx%d; probing cursor", size.lines, size.columns)

    _write_all(stdout_fd, CURSOR_BOTTOM_RIGHT, "getWindowSize")
    rows, cols = get_cursor_position(stdin_fd, stdout_fd, timeout_ms)
    if rows <= 0 or cols <= 0:
        raise TerminalError("getWindowSize", detail=f"invalid window size {rows}x{cols}")
    logger.debug("window size %dx%d from cursor probe", rows, cols)
    return rows, cols
