# greedysnake

A snake game that runs in the terminal. It opens with an animated intro,
then asks you to pick a difficulty. After that you steer the snake around
a walled 30×30 board and eat food to grow.

The game draws with ANSI escape sequences, so it needs a terminal that
understands them. On Windows, keys are read through `msvcrt`. Elsewhere
the terminal is put into cbreak mode while the game runs.

## Installing

```
pip install .
```

## Playing

```
greedysnake
```

- At the intro screen, press any key to continue.
- Choose a difficulty with the Up and Down arrow keys, then press Enter.
  The four levels, from slowest to fastest, are 简单 (135 ms per step),
  普通 (100 ms), 困难 (60 ms) and 炼狱 (30 ms).
- Steer with the arrow keys. The snake cannot turn straight back on
  itself.
- Each ordinary food (★) scores `10 × level`, where the level runs from
  1 to 4.
- After every fifth ordinary food, a timed bonus (■) appears and flashes.
  A progress bar along the top row shrinks by one step on every move. If
  you eat the bonus before the bar runs out, it scores
  `10 × level × (bar remaining // 5)`.
- Press Esc to pause. The pause menu offers three choices:
  - continue the game,
  - restart with the same difficulty,
  - go back to difficulty selection.
- The round ends when the snake hits the wall or its own body. The
  game-over box shows your score. Use the Left and Right arrow keys and
  Enter to choose an answer. Either answer starts a new round.
- The game runs until you press Ctrl+C or keyboard input closes. The
  screen is cleared on the way out.

## Using it from code

`greedysnake.controller` provides `Controller`, the `Difficulty` enum and
`main()`.

`Controller(screen, keyboard, sleep, rng)` accepts the following, all of
which are optional:

- a `Screen`,
- a `Keyboard`,
- a sleep function that takes seconds,
- a `random.Random`.

Because of this you can drive it against any output stream, and with
your own key source and clock. `Controller.game()` runs the full loop.
`play_game()`, `show_menu()` and `game_over()` each run a single stage
and return the numbered choice that ended it.

`greedysnake.tools` holds the following:

- `Screen`, which draws on a text stream on a grid of cells, each two
  columns wide.
- `Keyboard`, which polls for keys and works as a context manager for
  raw mode.
- The `Key` enum.
- `decode_key()`, which turns raw key codes into a `Key`.

Each of the other building blocks has its own module:

| Module | Contents |
| --- | --- |
| `greedysnake.point` | `Point` |
| `greedysnake.board` | `Board` (the wall) |
| `greedysnake.snake` | `Snake`, `Direction` |
| `greedysnake.food` | `Food` |
| `greedysnake.intro` | `StartInterface` (the opening animation) |

## What it does not do

There is no high-score table and nothing is saved between runs. There is
also no menu option that quits the program.

## Running the tests

```
pip install .[test]
pytest
```