"""A whole game: setup, turns and the command entry point."""

from __future__ import annotations

import argparse
import random

from memorpg.board import HIDDEN, new_hidden_map, new_labyrinth, render_labyrinth
from memorpg.console import Console
from memorpg.event import Outcome, trigger_event
from memorpg.menu import main_menu
from memorpg.player import (
    Player,
    advance,
    check_suffocation,
    choose_weapon,
    new_player,
    weapon_name,
)

MIN_PLAYERS = 2
MAX_PLAYERS = 4

_RULE = " " * 33 + "=" * 36 + "\n"
_BANNER = " " * 44 + "=" * 56 + "\n"


class Game:
    """The shared board, the hidden map and the players taking turns on them."""

    def __init__(self, console: Console | None = None, rng: random.Random | None = None) -> None:
        self.console = console if console is not None else Console()
        self.labyrinth = new_labyrinth()
        self.hidden_map = new_hidden_map(rng)
        self.players: list[Player] = []

    def ask_player_count(self) -> int:
        """Ask until a player count between 2 and 4 is given."""
        while True:
            self.console.write("How many players (2, 3 or 4) ? ")
            try:
                count = self.console.read_int()
            except ValueError:
                self.console.write("[Error] Please enter a number.\n\n")
                continue
            if MIN_PLAYERS <= count <= MAX_PLAYERS:
                return count
            self.console.write("[Error] You must choose between 2 and 4 players.\n\n")

    def add_players(self, count: int) -> list[Player]:
        """Ask each player's name and place them on their starting cells."""
        if not MIN_PLAYERS <= count <= MAX_PLAYERS:
            raise ValueError(f"player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
        for index in range(count):
            self.console.write(f"Player [{index + 1}] name : ")
            player = new_player(self.console.read_token(), index)
            self.console.write(f"Your role : {player.role.title}\n\n")
            self.labyrinth[player.y][player.x] = player.icon
            self.players.append(player)
        return self.players

    def _take_turn(self, player: Player) -> bool:
        """Play one player's turn; True if the player won the game."""
        console = self.console
        console.write(f"\n{_RULE}")
        console.write(f"                                   >>> STARTING TURN FOR [{player.name}] <<<\n")
        console.write(_RULE)

        won = False
        while True:
            if check_suffocation(player, self.labyrinth, console):
                break
            console.write(render_labyrinth(self.labyrinth, player.cleared))
            advance(player, self.labyrinth, console)
            if player.tile_under == HIDDEN and player.position not in player.cleared:
                player.active_weapon = choose_weapon(console)
                console.write(f"              Equipped arm: [{weapon_name(player.active_weapon)}]\n")

            outcome = trigger_event(player, self.hidden_map, self.labyrinth, console)
            if outcome is Outcome.VICTORY:
                console.write(f"\n\n{_BANNER}")
                console.write(
                    " " * 53 + f"CONGRATULATIONS {player.name} ! YOU WON THE GAME !  \n"
                )
                console.write(f"{_BANNER}\n")
                won = True
                break
            if outcome is Outcome.TURN_OVER:
                break

        console.write(f"End of turn for {player.name}.\n")
        return won

    def play(self) -> Player:
        """Run turns in seat order until someone wins; return the winner."""
        if not self.players:
            raise ValueError("no players have joined the game")
        self.console.write("\n\n                                      --- THE GAME STARTS ! ---\n")
        while True:
            for player in self.players:
                if self._take_turn(player):
                    return player


def main(argv: list[str] | None = None) -> int:
    """Run the menu and, if asked to, a full game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="memorpg", description="A memory labyrinth game for 2 to 4 players."
    )
    parser.parse_args(argv)

    console = Console()
    try:
        if not main_menu(console):
            return 0
        game = Game(console)
        game.add_players(game.ask_player_count())
        game.play()
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0