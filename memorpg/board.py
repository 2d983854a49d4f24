"""The visible labyrinth and the hidden map of events beneath it."""

from __future__ import annotations

import random
from collections.abc import Collection

MAP_SIZE = 7

WALL_HORIZONTAL = "-"
WALL_VERTICAL = "|"
CORNER = "+"
HIDDEN = "#"
EMPTY = " "
WALLS = frozenset({WALL_HORIZONTAL, WALL_VERTICAL, CORNER})

# 16 monsters, 4 legendary weapons, 2 chests, 1 portal and 2 totems.
HIDDEN_ELEMENTS = tuple("BBBBZZZZHHHHTTTTELGDCCPKK")

MARGIN = " " * 44

Grid = list[list[str]]


def interior() -> range:
    """Indices of the rows or columns inside the walls."""
    return range(1, MAP_SIZE - 1)


def new_labyrinth() -> Grid:
    """Return a fresh labyrinth: walls around, hidden cells inside."""
    last = MAP_SIZE - 1

    def cell(x: int, y: int) -> str:
        on_row_edge = y in (0, last)
        on_col_edge = x in (0, last)
        if on_row_edge and on_col_edge:
            return CORNER
        if on_row_edge:
            return WALL_HORIZONTAL
        if on_col_edge:
            return WALL_VERTICAL
        return HIDDEN

    return [[cell(x, y) for x in range(MAP_SIZE)] for y in range(MAP_SIZE)]


def new_hidden_map(rng: random.Random | None = None) -> Grid:
    """Return a hidden map with the shuffled elements laid out inside the walls."""
    rng = rng if rng is not None else random.Random()
    elements = list(HIDDEN_ELEMENTS)
    rng.shuffle(elements)
    grid = [[EMPTY] * MAP_SIZE for _ in range(MAP_SIZE)]
    placed = iter(elements)
    for y in interior():
        for x in interior():
            grid[y][x] = next(placed)
    return grid


def render_labyrinth(labyrinth: Grid, memory: Collection[tuple[int, int]]) -> str:
    """Render the labyrinth, blanking hidden cells listed in ``memory`` as (x, y)."""
    rows = (
        MARGIN
        + "".join(
            "  " if cell == HIDDEN and (x, y) in memory else f"{cell} "
            for x, cell in enumerate(row)
        )
        + "\n"
        for y, row in enumerate(labyrinth)
    )
    return "\n" + "".join(rows)


def coordinates_guide() -> str:
    """Return the chart showing how cells inside the walls are numbered."""
    return (
        "\n              --- COORDINATES GUIDE ---\n"
        "                 X (Columns: 1 to 5)  \n"
        "                  1 2 3 4 5 \n"
        "                + - - - - - +\n"
        "              1 | # # # # # |\n"
        "           Y  2 | # # # # # |\n"
        "         (Row)3 | # # # # # |\n"
        "              4 | # # # # # |\n"
        "              5 | # # # # # |\n"
        "                + - - - - - +\n\n"
    )