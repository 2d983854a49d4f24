"""Players, their roles, movement and weapon choice."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from memorpg.board import (
    HIDDEN,
    MAP_SIZE,
    WALL_HORIZONTAL,
    WALL_VERTICAL,
    WALLS,
    Grid,
    coordinates_guide,
)
from memorpg.console import Console

PAD = " " * 88

WEAPON_NAMES = {
    "S": "Shield",
    "T": "Torch",
    "B": "Long Bow",
    "A": "Stone Axe",
    "E": "Epic Sword",
    "L": "Lunar Crossbow",
    "G": "Forbidden Grimoire",
    "D": "Shadow Dagger",
}

WEAPON_CHOICES = {1: "S", 2: "T", 3: "B", 4: "A"}

MOVES = {1: (0, -1), 2: (-1, 0), 3: (0, 1), 4: (1, 0)}


class Role(Enum):
    """A player's role: its icon, the weapon it seeks and where it starts."""

    WARRIOR = ("Warrior", "W", "E", 3, 0, WALL_HORIZONTAL)
    RANGER = ("Ranger", "R", "L", 6, 3, WALL_VERTICAL)
    MAGICIAN = ("Magician", "M", "G", 3, 6, WALL_HORIZONTAL)
    THIEF = ("Thief", "T", "D", 0, 3, WALL_VERTICAL)

    def __init__(
        self, title: str, icon: str, weapon: str, start_x: int, start_y: int, start_tile: str
    ) -> None:
        self.title = title
        self.icon = icon
        self.weapon = weapon
        self.start_x = start_x
        self.start_y = start_y
        self.start_tile = start_tile


@dataclass
class Player:
    """One player: position, equipment and the cells it has already cleared."""

    name: str
    role: Role
    x: int
    y: int
    tile_under: str
    active_weapon: str = " "
    has_portal: bool = False
    found_weapon: bool = False
    found_treasure: bool = False
    cleared: set[tuple[int, int]] = field(default_factory=set)

    @property
    def icon(self) -> str:
        return self.role.icon

    @property
    def sought_weapon(self) -> str:
        return self.role.weapon

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def send_home(self, labyrinth: Grid) -> None:
        """Take the player off the board and put it back on its starting cell."""
        labyrinth[self.y][self.x] = self.tile_under
        self.x = self.role.start_x
        self.y = self.role.start_y
        self.tile_under = self.role.start_tile
        labyrinth[self.y][self.x] = self.icon

    def forget_loot(self, hidden_map: Grid) -> None:
        """Drop the weapon and treasure, making their cells active again."""
        self.found_weapon = False
        self.found_treasure = False
        self.cleared = {
            (x, y)
            for x, y in self.cleared
            if hidden_map[y][x] not in ("C", self.sought_weapon)
        }


def new_player(name: str, index: int) -> Player:
    """Create the player for seat ``index`` (0 to 3) at its starting cell."""
    roles = list(Role)
    if not 0 <= index < len(roles):
        raise ValueError(f"player index must be between 0 and {len(roles) - 1}")
    role = roles[index]
    return Player(name=name, role=role, x=role.start_x, y=role.start_y, tile_under=role.start_tile)


def movement_keys() -> str:
    """Return the key chart for moving."""
    return f"{PAD}      1:^ \n{PAD} 2:<   3:v   4:> \n"


def weapon_name(code: str) -> str:
    """Return the display name of a weapon code."""
    return WEAPON_NAMES.get(code, "Unknown Weapon")


def _weapon_menu() -> str:
    return (
        f"\n{PAD}--- WEAPON CHOICE ---\n"
        f"{PAD}1. Shield (against Basilic)\n"
        f"{PAD}2. Torch (against Zombie)\n"
        f"{PAD}3. Long Bow (against Harpie)\n"
        f"{PAD}4. Stone Axe (against Troll)\n\n"
        "Choose your weapon (1-4) : "
    )


def choose_weapon(console: Console) -> str:
    """Ask until a valid weapon is chosen and return its code."""
    while True:
        console.write(_weapon_menu())
        try:
            choice = console.read_int()
        except ValueError:
            console.write("Error : invalid entry.\n")
            continue
        if choice in WEAPON_CHOICES:
            return WEAPON_CHOICES[choice]
        console.write("Error : Invalid Choice.\n")


def _ask_target(player: Player, console: Console) -> tuple[int, int] | None:
    if player.has_portal:
        console.write("\n[MAGIC PORTAL] Choose ANY hidden case ('#') to teleport to!\n")
        console.write(coordinates_guide())
        console.write("Enter the column (X: 1-5) and row (Y: 1-5) separated by a space : ")
        try:
            x, y = console.read_ints(2)
        except ValueError:
            console.write("Invalid input.\n")
            return None
        player.has_portal = False
        console.discard_line()
        return (x, y)

    console.write(f"{PAD}Advance to a case \n")
    console.write(movement_keys())
    try:
        movement = console.read_int()
    except ValueError:
        console.write("\n[ERROR] Please enter a valid number!\n\n")
        return None
    console.discard_line()
    step = MOVES.get(movement)
    if step is None:
        console.write("Invalid choice.\n")
        return None
    return (player.x + step[0], player.y + step[1])


def advance(player: Player, labyrinth: Grid, console: Console) -> None:
    """Ask for a move until a legal one is given, then carry it out."""
    while True:
        target = _ask_target(player, console)
        if target is None:
            continue
        x, y = target
        if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
            console.write("\n[Border] You cannot leave the map area!\n\n")
            continue
        if labyrinth[y][x] in WALLS:
            if player.tile_under == HIDDEN:
                console.write(
                    "\n[Locked] The door is closed! You must stay inside the labyrinth.\n\n"
                )
            else:
                console.write("\n[Entry] You must enter the labyrinth (move to a # case)!\n\n")
            continue
        labyrinth[player.y][player.x] = player.tile_under
        player.x, player.y = x, y
        player.tile_under = labyrinth[y][x]
        labyrinth[y][x] = player.icon
        return


def check_suffocation(player: Player, labyrinth: Grid, console: Console) -> bool:
    """Send the player home if no unexplored hidden cell is next to it.

    Returns True when the player was blocked and sent back.
    """
    unexplored = 0
    for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        x, y = player.x + dx, player.y + dy
        if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
            continue
        if labyrinth[y][x] == HIDDEN and (x, y) not in player.cleared:
            unexplored += 1

    if player.tile_under in (WALL_HORIZONTAL, WALL_VERTICAL) or unexplored:
        return False

    console.write(
        "\n[BLOCKED] There are no hidden cases around you! "
        "You are teleported back to the start.\n"
    )
    player.send_home(labyrinth)
    return True