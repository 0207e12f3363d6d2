"""Frame composition.

Builds one full frame from ``EditorState`` into a ``RenderBuffer``:
hide cursor, home, draw every screen row (clearing each to end of line),
place the cursor, show cursor. The frame is then written in one call.
"""

from __future__ import annotations

from ..ansi import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    ROW_SEPARATOR,
    SHOW_CURSOR,
    cursor_position,
)
from ..state import EditorState
from .buffer import RenderBuffer


def centered_line(text: bytes, screencols: int, line_head: bytes) -> bytes:
    """Center ``text`` on a row that still starts with the line head.

    The text is cut to ``screencols``. The line head takes the first padding
    column, so for 80 columns and 28 bytes of text the text starts after 26
    columns: ``~`` plus 25 spaces.
    """
    text = text[:screencols]
    padding = (screencols - len(text)) // 2
    out = bytearray()
    if padding:
        out += line_head
        padding -= 1
    out += b" " * padding
    out += text
    return bytes(out)


def draw_rows(state: EditorState, buffer: RenderBuffer) -> None:
    """Append every screen row: file text, welcome lines, or a bare line head."""
    document = state.document
    viewport = state.viewport
    config = state.config
    screenrows = viewport.screenrows
    screencols = viewport.screencols
    welcome_row = screenrows // 3
    author_row = welcome_row + 2

    for y, filerow in enumerate(viewport.visible_rows()):
        if filerow >= document.row_count:
            if document.is_empty and y == welcome_row:
                buffer.append(centered_line(config.welcome_message.encode(), screencols, config.line_head))
            elif document.is_empty and y == author_row:
                buffer.append(centered_line(config.author.encode(), screencols, config.line_head))
            else:
                buffer.append(config.line_head)
        else:
            buffer.append(document.rows[filerow].chars[:screencols])

        buffer.append(CLEAR_LINE)
        if y < screenrows - 1:
            buffer.append(ROW_SEPARATOR)


def render_frame(state: EditorState, buffer: RenderBuffer) -> None:
    """Scroll, then append one complete frame with the cursor placed last."""
    viewport = state.viewport
    viewport.scroll()

    buffer.append(HIDE_CURSOR)
    buffer.append(CURSOR_HOME)
    draw_rows(state, buffer)
    buffer.append(cursor_position(viewport.cy - viewport.rowoff, viewport.cx + 1))
    buffer.append(SHOW_CURSOR)


def refresh_screen(state: EditorState, fd: int) -> None:
    """Render the current state and flush it to ``fd`` in one write."""
    buffer = RenderBuffer()
    render_frame(state, buffer)
    buffer.flush(fd)


__all__ = [
    "RenderBuffer",
    "centered_line",
    "draw_rows",
    "refresh_screen",
    "render_frame",
]
