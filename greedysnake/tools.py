"""Terminal drawing and keyboard input used by the game."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Sequence
from typing import TextIO

_WINDOWS = sys.platform == "win32"

if _WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

TITLE = "贪吃蛇"
BACK_COLOR = 0x71  # blue text on a white background


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESC = "esc"
    ENTER = "enter"
    OTHER = "other"


_SCAN_CODES = {72: Key.UP, 80: Key.DOWN, 75: Key.LEFT, 77: Key.RIGHT}
_ANSI_ARROWS = {65: Key.UP, 66: Key.DOWN, 67: Key.RIGHT, 68: Key.LEFT}


def decode_key(codes: Sequence[int]) -> Key:
    """Turn the byte codes produced by one key press into a Key."""
    if not codes:
        raise ValueError("no key codes to decode")
    first, *rest = codes
    if first in (0, 224, -32):
        return _SCAN_CODES.get(rest[0], Key.OTHER) if rest else Key.OTHER
    if first == 27:
        if not rest:
            return Key.ESC
        if len(rest) >= 2 and rest[0] in (91, 79):
            return _ANSI_ARROWS.get(rest[1], Key.OTHER)
        return Key.OTHER
    if first in (10, 13):
        return Key.ENTER
    return Key.OTHER


def _swap_rgb(index: int) -> int:
    """Console colour bits are blue-green-red; ANSI ones are red-green-blue."""
    return ((index & 1) << 2) | (index & 2) | ((index & 4) >> 2)


def _ansi_attributes(attribute: int) -> str:
    foreground = attribute & 0x0F
    background = (attribute >> 4) & 0x0F
    parts = ["0"]
    base = 90 if foreground & 8 else 30
    parts.append(str(base + _swap_rgb(foreground & 7)))
    if background:
        base = 100 if background & 8 else 40
        parts.append(str(base + _swap_rgb(background & 7)))
    return "\x1b[" + ";".join(parts) + "m"


class Screen:
    """A character grid where every cell is two columns wide."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def _emit(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def set_window_size_and_title(self, cols: int, lines: int) -> None:
        """Set the window title and resize it to cols cells by lines rows."""
        self._emit(f"\x1b]0;{TITLE}\x07")
        self._emit(f"\x1b[8;{lines};{cols * 2}t")

    def set_cursor_position(self, x: int, y: int) -> None:
        self._emit(f"\x1b[{y + 1};{x * 2 + 1}H")

    def set_color(self, color_id: int) -> None:
        """Select a console colour attribute (low nibble text, high nibble background)."""
        self._emit(_ansi_attributes(color_id))

    def set_back_color(self) -> None:
        self.set_color(BACK_COLOR)

    def write(self, text: str) -> None:
        self._emit(text)

    def clear(self) -> None:
        self._emit("\x1b[0m\x1b[2J\x1b[H")


class Keyboard:
    """Non-blocking key polling; use as a context manager to enter raw mode."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved = None

    def __enter__(self) -> Keyboard:
        if not _WINDOWS and self._stream.isatty():
            fd = self._stream.fileno()
            self._saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def key_pressed(self) -> bool:
        if _WINDOWS:
            return bool(msvcrt.kbhit())
        ready, _, _ = select.select([self._stream], [], [], 0)
        return bool(ready)

    def read_key(self) -> Key:
        """Block until a key is pressed and return it."""
        return decode_key(self._read_codes())

    def _read_codes(self) -> tuple[int, ...]:
        if _WINDOWS:
            first = ord(msvcrt.getwch())
            if first in (0, 224):
                return first, ord(msvcrt.getwch())
            return (first,)
        fd = self._stream.fileno()
        codes = [self._read_byte(fd)]
        if codes[0] == 27:
            while len(codes) < 3 and select.select([fd], [], [], 0.01)[0]:
                codes.append(self._read_byte(fd))
        return tuple(codes)

    @staticmethod
    def _read_byte(fd: int) -> int:
        data = os.read(fd, 1)
        if not data:
            raise EOFError("keyboard input closed")
        return data[0]