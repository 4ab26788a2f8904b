"""Cells of the playing grid."""

from __future__ import annotations

from dataclasses import dataclass

from .tools import Screen

BLOCK = "■"
CIRCLE = "●"
BLANK = "  "


@dataclass(frozen=True)
class Point:
    """A cell at column x, row y."""

    x: int
    y: int

    def _put(self, screen: Screen, text: str) -> None:
        screen.set_cursor_position(self.x, self.y)
        screen.write(text)

    def draw(self, screen: Screen) -> None:
        self._put(screen, BLOCK)

    def draw_circle(self, screen: Screen) -> None:
        self._put(screen, CIRCLE)

    def clear(self, screen: Screen) -> None:
        self._put(screen, BLANK)

    def shifted(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)