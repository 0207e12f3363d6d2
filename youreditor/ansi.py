"""VT100 escape sequences emitted by the viewer.

Kept as raw ``bytes`` because frames are assembled and written as bytes.
"""

from __future__ import annotations

import re

ESC = 0x1B

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_SCREEN = b"\x1b[2J"
CLEAR_LINE = b"\x1b[K"
CURSOR_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"
REQUEST_CURSOR_POSITION = b"\x1b[6n"
ROW_SEPARATOR = b"\r\n"

CURSOR_POSITION_REPLY_RE = re.compile(rb"\x1b\[(\d+);(\d+)")


def cursor_position(row: int, col: int) -> bytes:
    """Return the absolute cursor-move sequence for ``row``/``col``."""
    return b"\x1b[%d;%dH" % (row, col)
