"""The opening animation: a wriggling snake followed by the word SNAKE."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from .point import Point
from .tools import Screen

FRAME_DELAY = 0.035
TEXT_STOP = 33

_START_SNAKE = (
    (0, 14), (1, 14), (2, 15), (3, 16), (4, 17),
    (5, 18), (6, 17), (7, 16), (8, 15), (9, 14),
)

_TEXT = (
    # S
    (-26, 14), (-25, 14), (-27, 15), (-26, 16), (-25, 17), (-27, 18), (-26, 18),
    # N
    (-23, 14), (-23, 15), (-23, 16), (-23, 17), (-23, 18), (-22, 15), (-21, 16),
    (-20, 17), (-19, 14), (-19, 15), (-19, 16), (-19, 17), (-19, 18),
    # A
    (-17, 18), (-16, 17), (-15, 16), (-14, 15), (-14, 16), (-13, 14), (-13, 16),
    (-12, 15), (-12, 16), (-11, 16), (-10, 17), (-9, 18),
    # K
    (-7, 14), (-7, 15), (-7, 16), (-7, 17), (-7, 18), (-6, 16), (-5, 15),
    (-5, 17), (-4, 14), (-4, 18),
    # E
    (-2, 14), (-2, 15), (-2, 16), (-2, 17), (-2, 18), (-1, 14), (-1, 16),
    (-1, 18), (0, 14), (0, 16), (0, 18),
)


class StartInterface:
    """Plays the start screen animation."""

    def __init__(self, screen: Screen, sleep: Callable[[float], None] = time.sleep) -> None:
        self._screen = screen
        self._sleep = sleep
        self.snake = deque(Point(x, y) for x, y in _START_SNAKE)
        self.text = [Point(x, y) for x, y in _TEXT]

    def draw_first(self) -> None:
        """Draw the snake cell by cell."""
        for point in self.snake:
            point.draw(self._screen)
            self._sleep(FRAME_DELAY)

    def draw_second(self) -> None:
        """Move the snake from left to right along a zigzag."""
        for x in range(10, 40):
            phase = (x - 2) % 8
            y = 15 + phase if phase < 4 else 21 - phase
            self.snake.append(Point(x, y))
            self.snake[-1].draw(self._screen)
            self.snake.popleft().clear(self._screen)
            self._sleep(FRAME_DELAY)

    def draw_third(self) -> None:
        """Let the snake vanish while the text slides into place."""
        while self.snake or self.text[-1].x < TEXT_STOP:
            if self.snake:
                self.snake.popleft().clear(self._screen)
            self.clear_text()
            self.draw_text()
            self._sleep(FRAME_DELAY)

    def draw_text(self) -> None:
        for point in self.text:
            if point.x >= 0:
                point.draw(self._screen)

    def clear_text(self) -> None:
        """Erase the visible text and move all of it one cell right."""
        for point in self.text:
            if point.x >= 0:
                point.clear(self._screen)
        self.text = [point.shifted(1, 0) for point in self.text]

    def action(self) -> None:
        self.draw_first()
        self.draw_second()
        self.draw_third()