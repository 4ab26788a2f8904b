"""Ordinary and time-limited food."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from .point import BLANK, BLOCK, Point
from .tools import Screen

if TYPE_CHECKING:
    from .snake import Snake

FOOD_COLOR = 13
BIG_FOOD_COLOR = 18
BAR_COLOR = 11
PROGRESS_BAR_LENGTH = 42
BIG_FOOD_EVERY = 5
_GRID = 30
_ORIGIN = Point(0, 0)


class Food:
    """Where the food lies and the state of the time-limited bonus."""

    def __init__(self, screen: Screen, rng: random.Random | None = None) -> None:
        self._screen = screen
        self._rng = rng if rng is not None else random.Random()
        self.count = 0
        self._flash_on = False
        self.has_big_food = False
        self.position = _ORIGIN
        self.big_position = _ORIGIN
        self.progress_bar = 0

    def _coordinate(self) -> int:
        value = self._rng.randrange(_GRID)
        return value + 2 if value < 2 else value

    def _free_cell(self, snake: Snake) -> Point:
        occupied = set(snake)
        while True:
            candidate = Point(self._coordinate(), self._coordinate())
            if candidate != self.big_position and candidate not in occupied:
                return candidate

    def draw_food(self, snake: Snake) -> None:
        """Place new food; every fifth one also brings a bonus."""
        self.position = self._free_cell(snake)
        self._screen.set_cursor_position(self.position.x, self.position.y)
        self._screen.set_color(FOOD_COLOR)
        self._screen.write("★")
        self.count = (self.count + 1) % BIG_FOOD_EVERY
        if self.count == 0:
            self.draw_big_food(snake)

    def draw_big_food(self, snake: Snake) -> None:
        """Place the bonus and start its progress bar."""
        self._screen.set_cursor_position(5, 0)
        self._screen.set_color(BAR_COLOR)
        self._screen.write("-" * PROGRESS_BAR_LENGTH)
        self.progress_bar = PROGRESS_BAR_LENGTH

        self.big_position = self._free_cell(snake)
        self._screen.set_cursor_position(self.big_position.x, self.big_position.y)
        self._screen.set_color(BIG_FOOD_COLOR)
        self._screen.write(BLOCK)
        self.has_big_food = True
        self._flash_on = True

    def flash_big_food(self) -> None:
        """Blink the bonus and shorten its progress bar; remove it when time runs out."""
        self._screen.set_cursor_position(self.big_position.x, self.big_position.y)
        self._screen.set_color(BIG_FOOD_COLOR)
        self._screen.write(BLANK if self._flash_on else BLOCK)
        self._flash_on = not self._flash_on

        self._screen.set_cursor_position(26, 0)
        self._screen.set_color(BAR_COLOR)
        self._screen.write("\b \b" * (PROGRESS_BAR_LENGTH + 1 - self.progress_bar))
        self.progress_bar -= 1
        if self.progress_bar == 0:
            self._screen.set_cursor_position(self.big_position.x, self.big_position.y)
            self._screen.write(BLANK)
            self.has_big_food = False
            self.big_position = _ORIGIN

    def consume_big_food(self) -> None:
        """Remove the bonus after it is eaten and erase its progress bar."""
        self.has_big_food = False
        self.big_position = _ORIGIN
        self._screen.set_cursor_position(1, 0)
        self._screen.write(" " * 60)