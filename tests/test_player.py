import io

import pytest

from memorpg.board import HIDDEN, new_labyrinth
from memorpg.console import Console
from memorpg.player import (
    Role,
    advance,
    check_suffocation,
    choose_weapon,
    movement_keys,
    new_player,
    weapon_name,
)


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def placed(index):
    lab = new_labyrinth()
    player = new_player("hero", index)
    lab[player.y][player.x] = player.icon
    return player, lab


def test_new_player_uses_role_start():
    player = new_player("ana", 1)
    assert player.role is Role.RANGER
    assert player.position == (Role.RANGER.start_x, Role.RANGER.start_y)
    assert player.tile_under == Role.RANGER.start_tile
    assert player.sought_weapon == "L"
    assert player.icon == "R"


def test_new_player_rejects_bad_index():
    with pytest.raises(ValueError):
        new_player("x", 4)


def test_weapon_names():
    assert weapon_name("S") == "Shield"
    assert weapon_name("G") == "Forbidden Grimoire"
    assert weapon_name("?") == "Unknown Weapon"


def test_movement_keys_lists_directions():
    keys = movement_keys()
    for label in ("1:^", "2:<", "3:v", "4:>"):
        assert label in keys


def test_choose_weapon_retries_until_valid():
    console, out = make("x\n9\n2\n")
    assert choose_weapon(console) == "T"
    text = out.getvalue()
    assert "Error : invalid entry." in text
    assert "Error : Invalid Choice." in text


def test_advance_enters_labyrinth():
    player, lab = placed(0)
    start = player.position
    console, _ = make("3\n")
    advance(player, lab, console)
    assert player.position == (start[0], start[1] + 1)
    assert player.tile_under == HIDDEN
    assert lab[player.y][player.x] == player.icon
    assert lab[start[1]][start[0]] == Role.WARRIOR.start_tile


def test_advance_refuses_walking_along_wall():
    player, lab = placed(0)
    console, out = make("2\n3\n")
    advance(player, lab, console)
    assert "[Entry]" in out.getvalue()
    assert player.tile_under == HIDDEN


def test_advance_refuses_leaving_map():
    player, lab = placed(0)
    console, out = make("1\n3\n")
    advance(player, lab, console)
    assert "[Border]" in out.getvalue()
    assert player.tile_under == HIDDEN


def test_advance_refuses_returning_to_wall():
    player, lab = placed(0)
    console, out = make("3\n")
    advance(player, lab, console)
    console2, out2 = make("1\n3\n")
    advance(player, lab, console2)
    assert "[Locked]" in out2.getvalue()
    assert player.tile_under == HIDDEN


def test_advance_bad_input_retries():
    player, lab = placed(3)
    console, out = make("zz\n7\n4\n")
    advance(player, lab, console)
    text = out.getvalue()
    assert "[ERROR] Please enter a valid number!" in text
    assert "Invalid choice." in text
    assert player.position == (Role.THIEF.start_x + 1, Role.THIEF.start_y)


def test_portal_teleports_and_is_consumed():
    player, lab = placed(2)
    player.has_portal = True
    console, _ = make("2 4 extra\n")
    advance(player, lab, console)
    assert player.position == (2, 4)
    assert player.has_portal is False
    assert lab[4][2] == player.icon


def test_portal_invalid_input_keeps_portal_until_valid():
    player, lab = placed(2)
    player.has_portal = True
    console, out = make("a\n5 5\n")
    advance(player, lab, console)
    assert "Invalid input." in out.getvalue()
    assert player.position == (5, 5)
    assert player.has_portal is False


def test_send_home_restores_start():
    player, lab = placed(1)
    console, _ = make("2\n")
    advance(player, lab, console)
    moved_to = player.position
    player.send_home(lab)
    assert player.position == (Role.RANGER.start_x, Role.RANGER.start_y)
    assert lab[moved_to[1]][moved_to[0]] == HIDDEN
    assert lab[player.y][player.x] == player.icon


def test_forget_loot_reactivates_treasure_and_own_weapon():
    player = new_player("w", 0)
    hidden = [[" "] * 7 for _ in range(7)]
    hidden[1][1] = "C"
    hidden[1][2] = "E"
    hidden[1][3] = "B"
    hidden[1][4] = "L"
    player.cleared = {(1, 1), (2, 1), (3, 1), (4, 1)}
    player.found_weapon = True
    player.found_treasure = True
    player.forget_loot(hidden)
    assert player.cleared == {(3, 1), (4, 1)}
    assert not player.found_weapon and not player.found_treasure


def test_suffocation_ignored_on_border():
    player, lab = placed(0)
    console, _ = make("")
    assert check_suffocation(player, lab, console) is False
    assert player.position == (Role.WARRIOR.start_x, Role.WARRIOR.start_y)


def test_suffocation_not_triggered_with_unexplored_neighbour():
    player, lab = placed(0)
    advance(player, lab, make("3\n")[0])
    console, _ = make("")
    assert check_suffocation(player, lab, console) is False


def test_suffocation_sends_blocked_player_home():
    player, lab = placed(0)
    advance(player, lab, make("3\n")[0])
    x, y = player.position
    player.cleared = {(x - 1, y), (x + 1, y), (x, y + 1)}
    console, out = make("")
    assert check_suffocation(player, lab, console) is True
    assert "[BLOCKED]" in out.getvalue()
    assert player.position == (Role.WARRIOR.start_x, Role.WARRIOR.start_y)
    assert lab[y][x] == HIDDEN