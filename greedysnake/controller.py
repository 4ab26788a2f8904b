"""Game flow: start screen, difficulty choice, play loop, pause menu and game over."""

from __future__ import annotations

import enum
import random
import sys
import time
from collections.abc import Callable, Sequence

from .board import Board
from .food import Food
from .intro import StartInterface
from .snake import Snake
from .tools import Key, Keyboard, Screen

START_COLOR = 2
PANEL_COLOR = 3
SNAKE_COLOR = 6
HIGHLIGHT_COLOR = 11
PARKED_CURSOR = (0, 31)
INITIAL_SPEED = 200

GAME_OVER_DELAY = 0.5
GAME_OVER_LINE_DELAY = 0.03
GAME_OVER_CHOICE_DELAY = 0.1

_GAME_OVER_RULE = "━" * 42
_GAME_OVER_BODY = (
    " ┃               Game Over !!!              ┃",
    " ┃                                          ┃",
    " ┃              很遗憾！你挂了              ┃",
    " ┃                                          ┃",
    " ┃             你的分数为：                 ┃",
    " ┃                                          ┃",
    " ┃    是否再来一局？                        ┃",
    " ┃                                          ┃",
    " ┃                                          ┃",
    " ┃    嗯，好的        不了，还是学习有意思  ┃",
    " ┃                                          ┃",
    " ┃                                          ┃",
)
_GAME_OVER_SCORE_ROW = 13

_MODE_POSITIONS = ((27, 22), (27, 24), (27, 26), (27, 28))
_MENU_LABELS = ("继续游戏", "重新开始", "退出游戏")
_MENU_POSITIONS = ((38, 22), (38, 24), (38, 26))
_GAME_OVER_LABELS = ("嗯，好的", "不了，还是学习有意思")
_GAME_OVER_POSITIONS = ((7, 18), (15, 18))


class Difficulty(enum.IntEnum):
    """Game difficulty; the value is the score multiplier."""

    EASY = 1
    NORMAL = 2
    HARD = 3
    HELL = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def speed(self) -> int:
        """Milliseconds between snake steps; smaller is faster."""
        return _SPEEDS[self]


_LABELS = {
    Difficulty.EASY: "简单模式",
    Difficulty.NORMAL: "普通模式",
    Difficulty.HARD: "困难模式",
    Difficulty.HELL: "炼狱模式",
}
_SPEEDS = {
    Difficulty.EASY: 135,
    Difficulty.NORMAL: 100,
    Difficulty.HARD: 60,
    Difficulty.HELL: 30,
}


class Controller:
    """Runs the screens and the main game loop."""

    def __init__(
        self,
        screen: Screen | None = None,
        keyboard: Keyboard | None = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self._screen = screen if screen is not None else Screen()
        self._keyboard = keyboard if keyboard is not None else Keyboard()
        self._sleep = sleep
        self._rng = rng
        self.speed = INITIAL_SPEED
        self.difficulty = Difficulty.EASY
        self.score = 0
        self.restart = False

    def _at(self, x: int, y: int, text: str) -> None:
        self._screen.set_cursor_position(x, y)
        self._screen.write(text)

    def _park_cursor(self) -> None:
        self._screen.set_cursor_position(*PARKED_CURSOR)

    def _show_options(
        self,
        labels: Sequence[str],
        positions: Sequence[tuple[int, int]],
        selected: int,
        normal_color: int,
    ) -> None:
        for index, (label, (x, y)) in enumerate(zip(labels, positions), start=1):
            self._screen.set_cursor_position(x, y)
            if index == selected:
                self._screen.set_back_color()
            else:
                self._screen.set_color(normal_color)
            self._screen.write(label)

    def _choose(
        self,
        count: int,
        previous: Key,
        following: Key,
        render: Callable[[int], None],
        choice: int = 1,
    ) -> int:
        """Cycle through numbered options with two keys until Enter is pressed."""
        while True:
            key = self._keyboard.read_key()
            if key is Key.ENTER:
                return choice
            if key is previous:
                choice = count if choice == 1 else choice - 1
                render(choice)
            elif key is following:
                choice = 1 if choice == count else choice + 1
                render(choice)
            self._park_cursor()

    def show_start_ui(self) -> None:
        """Play the intro animation and wait for any key."""
        self._screen.set_window_size_and_title(41, 32)
        self._screen.set_color(START_COLOR)
        StartInterface(self._screen, self._sleep).action()
        self._at(13, 26, "按任意键开始游戏... ")
        self._at(13, 27, "请按任意键继续. . .")
        self._keyboard.read_key()

    def _show_mode_selection(self, level: int) -> None:
        labels = [_LABELS[difficulty] for difficulty in Difficulty]
        self._show_options(labels, _MODE_POSITIONS, level, PANEL_COLOR)

    def show_mode_select_ui(self) -> None:
        """Let the player pick a difficulty with Up/Down and Enter."""
        self._screen.set_color(PANEL_COLOR)
        self._at(13, 26, " " * 26)
        self._at(13, 27, " " * 31)
        self._at(6, 21, "请选择游戏难度：")
        self._at(6, 22, "(上下键选择,回车确认)")

        self._show_mode_selection(Difficulty.EASY)
        self.score = 0
        level = self._choose(len(Difficulty), Key.UP, Key.DOWN, self._show_mode_selection)
        self.difficulty = Difficulty(level)
        self.speed = self.difficulty.speed

    def draw_game(self) -> None:
        """Clear the screen and draw the wall and the side panel."""
        self._screen.clear()
        self._screen.set_color(PANEL_COLOR)
        Board().draw(self._screen, self._sleep)

        self._screen.set_color(PANEL_COLOR)
        self._at(34, 10, "Greedy Snake（贪吃蛇）")
        self._at(34, 12, "难度：")
        self._at(38, 12, self.difficulty.label)
        self._at(34, 14, "得分：")
        self._at(39, 14, "     0")
        self._at(34, 16, "操作：方向键移动")
        self._at(34, 18, "ESC键暂停")

    def play_game(self) -> int:
        """Run one round; return the menu or game-over choice that ended it."""
        snake = Snake(self._screen)
        food = Food(self._screen, self._rng)

        self._screen.set_color(SNAKE_COLOR)
        snake.draw()
        food.draw_food(snake)

        while not snake.over_edge() and not snake.hit_self():
            key = self._keyboard.read_key() if self._keyboard.key_pressed() else None
            if not snake.change_direction(key):
                choice = self.show_menu()
                if choice != 1:
                    return choice

            if food.has_big_food:
                food.flash_big_food()

            if snake.eats_food(food):
                snake.move()
                self.update_score(1)
                self.rewrite_score()
                food.draw_food(snake)
            else:
                snake.normal_move()

            if snake.eats_big_food(food):
                snake.move()
                self.update_score(food.progress_bar // 5)
                self.rewrite_score()

            self._sleep(self.speed / 1000)

        return self.game_over()

    def update_score(self, weight: int) -> None:
        self.score += int(self.difficulty) * 10 * weight

    def rewrite_score(self) -> None:
        self._screen.set_cursor_position(39, 14)
        self._screen.set_color(HIGHLIGHT_COLOR)
        self._screen.write(f"{self.score:>6}")

    def _show_menu_text(self, choice: int) -> None:
        self._show_options(_MENU_LABELS, _MENU_POSITIONS, choice, PANEL_COLOR)

    def _clear_menu_text(self) -> None:
        for y in (18, 20, 22):
            self._at(38, y, " " * 10)

    def show_menu(self) -> int:
        """Pause menu: 1 continue, 2 restart, 3 back to difficulty choice."""
        self._screen.set_color(HIGHLIGHT_COLOR)
        self._at(34, 20, "菜单：")
        self._show_menu_text(1)
        choice = self._choose(len(_MENU_LABELS), Key.UP, Key.DOWN, self._show_menu_text)
        if choice == 1:
            self._clear_menu_text()
        return choice

    def _show_game_over_text(self, choice: int) -> None:
        self._show_options(_GAME_OVER_LABELS, _GAME_OVER_POSITIONS, choice, HIGHLIGHT_COLOR)

    def game_over(self) -> int:
        """Show the final score and ask whether to play again (1 yes, 2 no)."""
        self._sleep(GAME_OVER_DELAY)
        self._screen.set_color(HIGHLIGHT_COLOR)
        self._at(5, 8, _GAME_OVER_RULE)
        self._sleep(GAME_OVER_LINE_DELAY)
        for row, line in enumerate(_GAME_OVER_BODY, start=9):
            self._at(4, row, line)
            if row == _GAME_OVER_SCORE_ROW:
                self._at(19, row, str(self.score))
            self._sleep(GAME_OVER_LINE_DELAY)
        self._at(5, 21, _GAME_OVER_RULE)

        self._sleep(GAME_OVER_CHOICE_DELAY)
        self._screen.set_cursor_position(*_GAME_OVER_POSITIONS[0])
        self._screen.set_back_color()
        self._screen.write(_GAME_OVER_LABELS[0])
        self._park_cursor()

        choice = self._choose(
            len(_GAME_OVER_LABELS), Key.LEFT, Key.RIGHT, self._show_game_over_text
        )
        self._screen.set_color(HIGHLIGHT_COLOR)
        return choice

    def game(self) -> None:
        """Run the game until input ends or the process is interrupted."""
        self.show_start_ui()
        while True:
            if not self.restart:
                self.show_mode_select_ui()
            self.draw_game()
            choice = self.play_game()
            if choice == 2:
                self.restart = True
            if choice == 3:
                self.restart = False
            self._screen.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the current terminal."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8")
    screen = Screen()
    try:
        with Keyboard() as keyboard:
            Controller(screen, keyboard).game()
    except (KeyboardInterrupt, EOFError):
        pass
    finally:
        screen.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())