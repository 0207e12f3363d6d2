"""Main interactive loop: render a frame, read one key, apply it.

Runs until the quit key moves the state to ``TERMINATED``.
"""

from __future__ import annotations

import logging

from ..ansi import CLEAR_SCREEN, CURSOR_HOME
from ..input import ARROW_KEYS, Key, read_key
from ..render import RenderBuffer, refresh_screen
from ..state import EditorState, LoopStatus

logger = logging.getLogger(__name__)


def clear_screen(fd: int) -> None:
    """Blank the screen and home the cursor in one write."""
    buffer = RenderBuffer()
    buffer.append(CLEAR_SCREEN)
    buffer.append(CURSOR_HOME)
    buffer.flush(fd)


def process_keypress(state: EditorState, key: int, stdout_fd: int) -> None:
    """Apply one decoded key to ``state``. Unbound keys change nothing."""
    viewport = state.viewport
    numrows = state.document.row_count

    if key == state.config.quit_key:
        clear_screen(stdout_fd)
        state.status = LoopStatus.TERMINATED
        logger.info("quit requested")
        return

    if key in (Key.PAGE_UP, Key.PAGE_DOWN):
        step = Key.ARROW_UP if key == Key.PAGE_UP else Key.ARROW_DOWN
        for _ in range(viewport.screenrows):
            viewport.move_cursor(step, numrows)
    elif key == Key.HOME_KEY:
        viewport.cursor_home()
    elif key == Key.END_KEY:
        viewport.cursor_end()
    elif key in ARROW_KEYS:
        viewport.move_cursor(key, numrows)


def run_main_loop(state: EditorState, stdin_fd: int, stdout_fd: int) -> None:
    """Run render/read/apply cycles until the state is terminated."""
    timeout_ms = state.config.read_timeout_ms
    while not state.terminated:
        refresh_screen(state, stdout_fd)
        key = read_key(stdin_fd, timeout_ms)
        process_keypress(state, key, stdout_fd)
