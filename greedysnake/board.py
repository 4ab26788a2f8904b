"""The walled playing field."""

from __future__ import annotations

import time
from collections.abc import Callable

from .point import Point
from .tools import Screen

WIDTH = 30
HEIGHT = 30
DRAW_DELAY = 0.010


class Board:
    """The ring of wall cells around the playing field."""

    def __init__(self) -> None:
        self._border = tuple(
            Point(x, y)
            for y in range(1, HEIGHT + 1)
            for x in range(1, WIDTH + 1)
            if y in (1, HEIGHT) or x in (1, WIDTH)
        )

    def border(self) -> tuple[Point, ...]:
        return self._border

    def draw(self, screen: Screen, sleep: Callable[[float], None] = time.sleep) -> None:
        """Draw the wall one cell at a time, pausing between cells."""
        for point in self._border:
            point.draw(screen)
            sleep(DRAW_DELAY)