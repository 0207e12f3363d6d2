"""Logical key values produced by the key decoder.

Plain bytes decode to their integer value; navigation keys decode to
``Key`` members, numbered above the byte range so the two never collide.
"""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    PAGE_UP = 1004
    PAGE_DOWN = 1005
    HOME_KEY = 1006
    END_KEY = 1007
    DEL_KEY = 1008


ARROW_KEYS = frozenset({Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_UP, Key.ARROW_DOWN})

# Final byte of ``ESC [ <digit> ~`` sequences.
TILDE_SEQUENCE_KEYS = {
    ord("1"): Key.HOME_KEY,
    ord("3"): Key.DEL_KEY,
    ord("4"): Key.END_KEY,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME_KEY,
    ord("8"): Key.END_KEY,
}

# Final byte of ``ESC [ <letter>`` sequences.
CSI_LETTER_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}

# Final byte of ``ESC O <letter>`` sequences.
SS3_LETTER_KEYS = {
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}


def ctrl_key(ch: str) -> int:
    """Return the control code a terminal sends for Ctrl+``ch``."""
    return ord(ch) & 0x1F


def key_name(key: int) -> str:
    """Human-readable key label for logs."""
    try:
        return Key(key).name
    except ValueError:
        pass
    if key < 0x20 or key == 0x7F:
        return f"0x{key:02x}"
    return repr(chr(key))
