"""The player's snake."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .board import HEIGHT, WIDTH
from .point import Point
from .tools import Key, Screen

if TYPE_CHECKING:
    from .food import Food

HEAD_COLOR = 14


class Direction(enum.Enum):
    """A heading on the grid as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Snake:
    """Body cells from tail to head, and the current heading."""

    def __init__(self, screen: Screen) -> None:
        self._screen = screen
        self._body = deque([Point(14, 8), Point(14, 9), Point(14, 10)])
        self.direction = Direction.DOWN

    def __iter__(self) -> Iterator[Point]:
        return iter(self._body)

    def __len__(self) -> int:
        return len(self._body)

    @property
    def head(self) -> Point:
        return self._body[-1]

    def draw(self) -> None:
        for point in self._body:
            point.draw_circle(self._screen)

    def move(self) -> None:
        """Grow one cell in the current direction."""
        self._body.append(self.head.shifted(*self.direction.value))
        self._screen.set_color(HEAD_COLOR)
        self.head.draw_circle(self._screen)

    def normal_move(self) -> None:
        """Advance one cell without growing."""
        self.move()
        self._body.popleft().clear(self._screen)

    def over_edge(self) -> bool:
        head = self.head
        return head.x <= 1 or head.x >= WIDTH or head.y <= 1 or head.y >= HEIGHT

    def hit_self(self) -> bool:
        head = self.head
        return any(point == head for point in list(self._body)[:-1])

    def change_direction(self, key: Key | None) -> bool:
        """Steer by key; return False when the player asks to pause."""
        if key is Key.ESC:
            return False
        wanted = _KEY_DIRECTIONS.get(key) if key is not None else None
        if wanted is not None and self.direction is not wanted.opposite:
            self.direction = wanted
        return True

    def eats_food(self, food: Food) -> bool:
        return self.head == food.position

    def eats_big_food(self, food: Food) -> bool:
        if self.head != food.big_position:
            return False
        self._screen.set_cursor_position(food.big_position.x, food.big_position.y)
        self._screen.write("● ")
        food.consume_big_food()
        return True