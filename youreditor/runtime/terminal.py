"""Terminal control helpers for the viewer session.

Owns the raw-mode lifecycle: capture the original attributes, switch to
byte-at-a-time input with a read timeout (100 ms by default), and put
everything back on every exit path.
"""

from __future__ import annotations

import atexit
import contextlib
import logging
import termios
import tty

from ..errors import TerminalError
from ..input.reader import READ_TIMEOUT_MS

logger = logging.getLogger(__name__)

# VTIME is measured in tenths of a second and stored in one byte.
READ_TIMEOUT_DECISECONDS = 1
MAX_READ_TIMEOUT_DECISECONDS = 255


def read_timeout_deciseconds(timeout_ms: int) -> int:
    """Convert a millisecond read timeout to a VTIME value in ``[1, 255]``."""
    return max(READ_TIMEOUT_DECISECONDS, min(MAX_READ_TIMEOUT_DECISECONDS, round(timeout_ms / 100)))


def raw_attributes(saved: list, vtime: int = READ_TIMEOUT_DECISECONDS) -> list:
    """Return a copy of ``saved`` with raw-mode flags and a ``vtime`` read timeout applied."""
    mode = list(saved)
    mode[tty.CC] = list(saved[tty.CC])
    mode[tty.IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    mode[tty.OFLAG] &= ~termios.OPOST
    mode[tty.CFLAG] |= termios.CS8
    mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    mode[tty.CC][termios.VMIN] = 0
    mode[tty.CC][termios.VTIME] = vtime
    return mode


class TerminalController:
    """Switch the controlling terminal in and out of raw mode."""

    def __init__(self, stdin_fd: int, read_timeout_ms: int = READ_TIMEOUT_MS) -> None:
        """Bind the stdin fd and the read timeout applied while raw."""
        self.stdin_fd = stdin_fd
        self.vtime = read_timeout_deciseconds(read_timeout_ms)
        self._saved_tty_state: list | None = None
        self._raw_enabled = False

    @property
    def raw_enabled(self) -> bool:
        return self._raw_enabled

    def enable_raw_mode(self) -> None:
        """Capture current attributes, register restoration, then go raw."""
        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
        except (termios.error, OSError) as exc:
            raise _terminal_error("tcgetattr", exc) from exc
        atexit.register(self.disable_raw_mode)

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw_attributes(self._saved_tty_state, self.vtime))
        except (termios.error, OSError) as exc:
            atexit.unregister(self.disable_raw_mode)
            raise _terminal_error("tcsetattr", exc) from exc
        self._raw_enabled = True
        logger.debug("raw mode enabled on fd %d", self.stdin_fd)

    def disable_raw_mode(self) -> None:
        """Reapply the attributes captured by ``enable_raw_mode``. Safe to repeat."""
        if not self._raw_enabled or self._saved_tty_state is None:
            return
        self._raw_enabled = False
        atexit.unregister(self.disable_raw_mode)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except (termios.error, OSError) as exc:
            raise _terminal_error("tcsetattr", exc) from exc
        logger.debug("raw mode disabled on fd %d", self.stdin_fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that keeps the terminal raw for the enclosed block."""
        self.enable_raw_mode()
        try:
            yield self
        finally:
            self.disable_raw_mode()


def _terminal_error(context: str, exc: Exception) -> TerminalError:
    if isinstance(exc, OSError):
        return TerminalError.from_os_error(context, exc)
    # termios.error carries (errno, message).
    args = getattr(exc, "args", ())
    if len(args) >= 2 and isinstance(args[0], int):
        return TerminalError(context, errno=args[0], detail=str(args[1]))
    return TerminalError(context, detail=str(exc))
