"""What happens when a player uncovers a hidden cell."""

from __future__ import annotations

from enum import Enum

from memorpg.board import HIDDEN, EMPTY, Grid, coordinates_guide, interior
from memorpg.console import Console
from memorpg.player import Player, weapon_name

_WIDE = " " * 44
_MONSTER_PAD = " " * 39
_WEAPON_PAD = " " * 14

_RIGHT_WEAPON = ">>> SUCCESS!                             Right weapon... You live.\n"

# Monster code -> (announcement, weapon code that defeats it).
MONSTERS = {
    "B": ("A wild BASILIC appears!", "S"),
    "Z": ("A ZOMBIE rises from the ground!", "T"),
    "H": ("A HARPIE attacks from above!", "B"),
    "T": ("A TROLL blocks the path!", "A"),
}

LEGENDARY_WEAPONS = frozenset("ELGD")


class Outcome(Enum):
    """The result of an event for the player's turn."""

    TURN_OVER = 0
    CONTINUE = 1
    VICTORY = 2


def _totem(player: Player, hidden_map: Grid, labyrinth: Grid, console: Console) -> None:
    console.write(f"{_WIDE}You found a Transmutation Totem!\n\n")
    console.write(coordinates_guide())
    console.write(f"{_WIDE}Choose a hidden case to swap the Totem with (X Y) : ")
    try:
        x, y = console.read_ints(2)
    except ValueError:
        target = None
    else:
        target = (x, y)

    if target is not None and x in interior() and y in interior() and labyrinth[y][x] == HIDDEN:
        here = hidden_map[player.y][player.x]
        hidden_map[player.y][player.x] = hidden_map[y][x]
        hidden_map[y][x] = here
        console.write(f"{_WIDE}Totem swapped successfully!\n")
    else:
        console.write("Invalid target! The Totem fizzles out...\n")

    console.write(">>> The Totem's magic teleports you safely back to the start!\n")
    player.send_home(labyrinth)


def _defeat(player: Player, hidden_map: Grid, labyrinth: Grid, console: Console) -> None:
    console.write(">>> DEFEAT!                             Wrong weapon... You died.\n")
    player.forget_loot(hidden_map)
    console.write("You lost your items! They returned to the labyrinth.\n")
    player.send_home(labyrinth)
    console.write(f"{player.name} is teleported back to the start!\n")


def trigger_event(
    player: Player, hidden_map: Grid, labyrinth: Grid, console: Console
) -> Outcome:
    """Resolve the hidden cell under the player and report how the turn goes on."""
    if player.position in player.cleared:
        return Outcome.CONTINUE

    cell = hidden_map[player.y][player.x]
    if cell == EMPTY:
        return Outcome.CONTINUE

    console.write(f"\n{_WIDE}!!! EVENT !!!\n")
    survived = False

    if cell in MONSTERS:
        announcement, weapon = MONSTERS[cell]
        console.write(f"{_MONSTER_PAD}{announcement}\n")
        if player.active_weapon == weapon:
            survived = True
            console.write(_RIGHT_WEAPON)
    elif cell == "P":
        console.write(
            f"{_WIDE}You stepped on the Magic Portal! Your next move is a free teleport.\n"
        )
        player.has_portal = True
        survived = True
    elif cell == "K":
        _totem(player, hidden_map, labyrinth, console)
        return Outcome.TURN_OVER
    elif cell == "C":
        console.write(f"{_WIDE}You found a Treasure Chest!\n")
        console.write(">>> SUCCESS!                                  Lucky ... You live.\n")
        player.found_treasure = True
        if player.found_weapon:
            return Outcome.VICTORY
        survived = True
    elif cell in LEGENDARY_WEAPONS:
        if cell == player.sought_weapon:
            console.write(f"{_WEAPON_PAD}EPIC SUCCESS! You found your [{weapon_name(cell)}]!\n")
            player.found_weapon = True
            if player.found_treasure:
                return Outcome.VICTORY
        else:
            console.write(
                f"{_WEAPON_PAD}You found the [{weapon_name(cell)}]... "
                "It's not yours, keep looking.\n"
            )
        survived = True

    if survived:
        player.cleared.add(player.position)
        console.write("You can continue your turn.\n")
        return Outcome.CONTINUE

    _defeat(player, hidden_map, labyrinth, console)
    return Outcome.TURN_OVER