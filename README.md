# memorpg

MEMO-RPG is a memory game for two to four players. It is played in the
terminal on a 7×7 board. The board is a wall around a 5×5 labyrinth of
hidden cases. Each hidden case holds one of these:

- a monster: a Basilic, a Zombie, a Harpie or a Troll, four of each
- one of four legendary weapons
- one of two treasure chests
- the magic portal
- one of two transmutation totems

The cases are shuffled at the start of every game.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
memorpg
```

`memorpg --help` prints a short description of the command.

Choose **1. Play a New Game** from the main menu. Then enter how many
players take part (2, 3 or 4) and each player's name. Roles are given out
in order:

| Player | Role     | Icon | Starts at | Legendary weapon   |
|--------|----------|------|-----------|--------------------|
| 1      | Warrior  | `W`  | top       | Epic Sword         |
| 2      | Ranger   | `R`  | right     | Lunar Crossbow     |
| 3      | Magician | `M`  | bottom    | Forbidden Grimoire |
| 4      | Thief    | `T`  | left      | Shadow Dagger      |

On your turn, move with `1` (up), `2` (left), `3` (down) and `4` (right).
From your starting place on the wall you must step into the labyrinth. Once
you are inside, you cannot step back onto the wall.

When you step onto a hidden case you have not cleared yet, you first pick a
weapon:

1. Shield, against the Basilic
2. Torch, against the Zombie
3. Long Bow, against the Harpie
4. Stone Axe, against the Troll

If you meet a monster with the right weapon, you live and keep moving. With
the wrong weapon you lose the treasure and the legendary weapon you were
carrying. Their cases become active for you again, you go back to your
start, and your turn ends.

The other cases work like this:

- **Treasure Chest**: you pick up a treasure.
- **Legendary weapon**: if it is yours, you take it. If it is not, keep
  looking.
- **Magic Portal**: your next move is a teleport to the column and row you
  enter (each from 1 to 5).
- **Transmutation Totem**: you choose a hidden case by column and row, and
  the totem swaps places with what is hidden there. If the case you choose
  is not valid, the totem fizzles out. Either way you go back to your start
  and your turn ends.

A case you have cleared stays cleared for you alone and is shown blank on
your map. Your turn goes on until something ends it. If you are inside the
labyrinth and no uncleared hidden case is next to you, you are sent back to
your start and your turn ends.

The first player to hold both a treasure and their own legendary weapon
wins.

To stop at any time, press Ctrl-D or Ctrl-C.

## What it does not do

The menu lists **2. Load a Saved Game** and **3. View High Scores**. Both
only print a "feature in progress" notice. The game does not save games and
does not keep scores.

## Using it from Python

The game reads from and writes to any pair of text streams through
`memorpg.console.Console`, so it can be driven from a script:

```python
import io
import random

from memorpg.console import Console
from memorpg.game import Game

console = Console(io.StringIO("2\nAda\nBob\n"), io.StringIO())
game = Game(console, random.Random(7))
game.add_players(game.ask_player_count())
```

`Game.play()` runs turns in seat order until someone wins, and returns the
winning `Player`.

The other modules:

- `memorpg.board` builds and draws the board: `new_labyrinth`,
  `new_hidden_map`, `render_labyrinth` and `coordinates_guide`.
- `memorpg.player` has the `Role` and `Player` types and the helpers
  `new_player`, `advance`, `choose_weapon` and `check_suffocation`.
- `memorpg.event.trigger_event` resolves what happens when a player lands
  on a case. It returns an `Outcome`: `CONTINUE`, `TURN_OVER` or `VICTORY`.
- `memorpg.menu.main_menu` shows the title menu. It returns `True` to play
  and `False` to quit.