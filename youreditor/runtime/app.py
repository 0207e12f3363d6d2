"""Runtime composition layer for the viewer.

Enters raw mode, sizes the viewport, loads the document, and runs the loop.
This is the only place fatal ``ViewerError``s are caught, so the screen is
cleared and the terminal restored on exactly one code path.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..config import ViewerConfig
from ..document import Document
from ..errors import ViewerError
from ..state import EditorState
from ..viewport import Viewport
from .loop import clear_screen, run_main_loop
from .terminal import TerminalController
from .window import get_window_size

logger = logging.getLogger(__name__)


def build_state(
    path: Path | None,
    config: ViewerConfig,
    stdin_fd: int,
    stdout_fd: int,
) -> EditorState:
    """Probe the window size and load ``path`` (if any) into a fresh state."""
    screenrows, screencols = get_window_size(stdin_fd, stdout_fd, config.read_timeout_ms)
    document = Document() if path is None else Document.open(path)
    return EditorState(
        document=document,
        viewport=Viewport(screenrows=screenrows, screencols=screencols),
        config=config,
    )


def run_viewer(
    path: Path | None,
    config: ViewerConfig | None = None,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
    terminal: TerminalController | None = None,
) -> EditorState:
    """Run an interactive session and return the final state.

    Fatal errors are re-raised after the screen is cleared and the original
    terminal attributes are back in place.
    """
    if config is None:
        config = ViewerConfig()
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()
    if terminal is None:
        terminal = TerminalController(stdin_fd, config.read_timeout_ms)

    try:
        with terminal.raw_mode():
            state = build_state(path, config, stdin_fd, stdout_fd)
            run_main_loop(state, stdin_fd, stdout_fd)
    except ViewerError as exc:
        _clear_screen_quietly(stdout_fd)
        logger.error("fatal: %s", exc)
        raise
    return state


def _clear_screen_quietly(stdout_fd: int) -> None:
    # Best effort: the write path itself may be what failed.
    try:
        clear_screen(stdout_fd)
    except ViewerError:
        logger.debug("could not clear screen during fatal exit")
