# townguard

A small real-time strategy game that runs in your terminal. You are a builder
on a walled field. You gather gold and elixir, put up walls, and place mines
and collectors. Enemies keep arriving from the edges and head for your town
hall. If one of them reaches it, the game is over.

## Installing

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Playing

```
townguard
```

The game needs a POSIX terminal, because it switches the terminal to
unbuffered, no-echo input through `termios`. The terminal should be at least
147 columns wide and 33 rows tall, and it must be able to show emoji.
`townguard --help` prints a short summary of the keys.

| Key          | Action                                                      |
|--------------|-------------------------------------------------------------|
| Arrow keys   | Move the builder (two columns sideways, one row up or down) |
| `W`          | Build a wall where you stand (10 gold, up to 200)           |
| `M`          | Build a gold mine around you (100 elixir, up to 3)          |
| `E`          | Build an elixir collector around you (100 gold, up to 3)    |
| `C`          | Collect from a full mine or collector you stand on          |
| `Q`          | Quit                                                        |

Letter keys work in upper or lower case. The letters `U`, `D`, `L` and `R`
also move the builder.

The world advances one step after each key press. Then it waits a tenth of a
second. You start with 400 gold and 400 elixir. Mines and collectors gain 5
each step until they hold 100. When one is full its icon changes. You stand
on it and press `C` to collect the 100. A building cannot overlap another
building or the town hall.

A new enemy appears every 30 steps on the left or right edge of the field.
Every third step it moves one cell toward the town hall. If it stands on a
wall, mine or collector, it strikes that building for 10 damage instead of
moving. A building with no health left is removed. You cannot walk through
your own walls. The game ends as soon as an enemy steps onto the town hall.

The panel on the left shows your resources and the number of buildings you
have. It also shows the town hall's health and how many enemies are on the
field.

## Using it as a library

`townguard.board.Board` holds the game state. You can drive it from your own
code:

```python
import random

from townguard.board import Board

board = Board(rng=random.Random(1))   # rng is optional; it decides where enemies appear
board.try_move_player("R")            # True if the builder moved
board.place_wall()                    # True if the wall was built
board.update()                        # advance one step
frame = board.render()                # the full frame as a string of terminal escapes
```

Other parts of the board:

- `can_build`, `is_position_occupied`, `place_gold_mine`,
  `place_elixir_collector`, `collect_resources` and `update_resources` are
  methods of `Board`.
- `player`, `townhall`, `walls`, `gold_mines`, `elixir_collectors`, `enemies`
  and `game_over` are its members.
- `townguard.game.handle_command(board, key)` applies one key's command to a
  board. It returns `False` for `Q`.
- `townguard.terminal.decode_key(read)` turns characters from a read function
  into command letters.
- `townguard.terminal.InputManager` is the context manager that sets up the
  terminal and restores it afterwards.
- The building classes (`Building`, `ResourceGenerator`, `GoldMine`,
  `ElixirCollector`, `TownHall`, `Wall`) are in `townguard.buildings`.
- `Player` and `Enemy` are in `townguard.entities`.
- `Resources` is in `townguard.resources`, and `Position` is in
  `townguard.position`.

## What it does not do

- There is no saving or loading of a game.
- There are no settings for the field size, the spawn rate or the difficulty.
- Enemies never damage the town hall's health. Reaching the town hall ends
  the game at once, so the health shown in the panel stays at 500.
- It does not run on terminals without `termios`, such as the Windows console.