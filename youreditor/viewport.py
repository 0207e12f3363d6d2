"""Cursor position and vertical scroll offset over a document."""

from __future__ import annotations

from dataclasses import dataclass

from .input.keys import Key


@dataclass
class Viewport:
    screenrows: int
    screencols: int
    cx: int = 0
    cy: int = 0
    rowoff: int = 0

    def scroll(self) -> None:
        """Bring ``rowoff`` back to a window that contains ``cy``.

        Runs once per frame, before drawing. Cursor moves never scroll.
        """
        if self.cy < self.rowoff:
            self.rowoff = self.cy
        if self.cy >= self.rowoff + self.screenrows:
            self.rowoff = self.cy - self.screenrows + 1

    def move_cursor(self, key: int, numrows: int) -> None:
        """Move one cell for an arrow key; other keys are ignored.

        ``cy`` may reach ``numrows``, one past the last row. ``cx`` is bounded
        by the screen width, not by the length of the row under the cursor.
        """
        if key == Key.ARROW_LEFT:
            if self.cx != 0:
                self.cx -= 1
        elif key == Key.ARROW_RIGHT:
            if self.cx != self.screencols - 1:
                self.cx += 1
        elif key == Key.ARROW_UP:
            if self.cy != 0:
                self.cy -= 1
        elif key == Key.ARROW_DOWN:
            if self.cy < numrows:
                self.cy += 1

    def cursor_home(self) -> None:
        self.cx = 0

    def cursor_end(self) -> None:
        self.cx = self.screencols - 1

    def visible_rows(self) -> range:
        """Logical row indexes covered by the screen at the current offset."""
        return range(self.rowoff, self.rowoff + self.screenrows)
