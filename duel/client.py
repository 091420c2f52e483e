#!/usr/bin/env python3
# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Hot-seat console client.

Two players share one terminal: each places a fleet, then they take turns
firing at each other's board. The screen is cleared between turns so the
next player does not see the previous player's fleet.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from duel.config import fleet_from_config, load_config
from duel.coords import parse_placement, parse_target
from duel.match import Match, MatchPhase, other_player
from duel.render import render_board, render_fleet, render_side_by_side


logger = logging.getLogger(__name__)


class QuitGame(Exception):
    """Raised when a player asks to leave the game."""


def print_help():
    """Print help message."""
    print("""
Commands (at any prompt):
  help          - Show this help
  board         - Show your board(s)
  status        - Show both fleets
  quit          - Exit game

Setup:   x y h|v   (e.g. '3 4 h' places the ship from row 3, column 4 rightwards)
         auto      (place the rest of your fleet randomly)
Battle:  x y       (e.g. '3 4' fires at row 3, column 4)

A hit lets you fire again; a miss passes the turn.
""")


class ConsoleClient:
    """Drives a Match from terminal input."""

    def __init__(
        self,
        match: Match,
        rng: Optional[random.Random] = None,
        clear_lines: int = 30,
    ):
        self.match = match
        self.rng = rng or random.Random()
        self.clear_lines = clear_lines

    def current_player(self) -> int:
        return self.match.state.player

    def clear_screen(self):
        print("\n" * self.clear_lines)

    def prompt(self, message: str) -> str:
        """
        Read a non-empty line, handling the global commands.

        Raises:
            QuitGame: If the player typed quit.
        """
        while True:
            user_input = input(message).strip()

            if not user_input:
                continue

            cmd = user_input.lower()

            if cmd in ("quit", "exit", "q"):
                raise QuitGame()

            if cmd == "help":
                print_help()
                continue

            if cmd == "board":
                self.show_boards(self.current_player())
                continue

            if cmd == "status":
                self.show_status()
                continue

            return user_input

    def show_boards(self, player: int):
        print()
        if self.match.phase is MatchPhase.SETUP:
            print(render_board(self.match.board(player), reveal_ships=True))
        else:
            print(render_side_by_side(self.match.board(player), self.match.opponent(player)))
        print()

    def show_status(self):
        for player in (0, 1):
            status = self.match.board(player).fleet_status()
            print(f"\n--- Player {player + 1} fleet ---")
            print(f"Ships remaining: {status['ships_remaining']}/{status['total_ships']}")
            print(f"Ships sunk: {', '.join(status['sunk_ships']) or 'None'}")
            print(f"Shots taken: {status['shots_fired']} (hits: {status['hits']}, misses: {status['misses']})")
        print()

    def run_setup(self):
        """Let each player place their fleet."""
        while self.match.phase is MatchPhase.SETUP:
            player = self.current_player()
            board = self.match.board(player)
            print(f"Player {player + 1}, place your ships.")

            while self.match.phase is MatchPhase.SETUP and self.current_player() == player:
                spec = self.match.pending_spec()
                user_input = self.prompt(
                    f"Place {spec.name} (size {spec.size}) as 'x y h|v' (or 'auto'): "
                )

                if user_input.lower() == "auto":
                    try:
                        self.match.auto_place(self.rng)
                    except RuntimeError as e:
                        print(f"{e}. Place the ships by hand or type 'quit'.")
                        continue
                    print("Fleet placed:")
                    print(render_board(board, reveal_ships=True))
                    continue

                try:
                    x, y, orientation = parse_placement(user_input)
                except ValueError as e:
                    print(e)
                    continue

                if not self.match.place(x, y, orientation):
                    reason = board.rejection_reason(x, y, spec.size, orientation)
                    print(f"Cannot place the ship there ({reason}). Try again.")
                    continue

                print("Board after placement:")
                print(render_board(board, reveal_ships=True))

            input("Press Enter to hand over to the other player...")
            self.clear_screen()

    def run_battle(self):
        """Alternate attacks until one fleet is destroyed."""
        while not self.match.is_over:
            player = self.match.active_player

            user_input = self.prompt(f"\nPlayer {player + 1}, choose a target 'x y': ")
            try:
                x, y = parse_target(user_input)
            except ValueError as e:
                print(e)
                continue

            report = self.match.attack(x, y)
            print(f"\n{report.message}")

            if not report.outcome.resolved:
                continue

            self.show_boards(player)

            if report.turn_passed:
                input("Press Enter to pass the turn to your opponent...")
                self.clear_screen()

    def announce_winner(self):
        winner = self.match.winner
        loser_board = self.match.opponent(winner)
        status = loser_board.fleet_status()

        print("=" * 50)
        print(f"  PLAYER {winner + 1} WINS! All enemy ships destroyed!")
        print("=" * 50)
        print(f"\nFinal stats for player {winner + 1}:")
        print(f"  Shots fired: {status['shots_fired']}")
        print(f"  Hits: {status['hits']}")
        print(f"  Misses: {status['misses']}")
        print(f"  Accuracy: {status['hits'] / status['shots_fired'] * 100:.1f}%")
        print(f"\nPlayer {other_player(winner) + 1} fleet:")
        print(render_fleet(loser_board))

    def play(self) -> Optional[int]:
        """Run setup and battle. Returns the winning player (0 or 1)."""
        self.run_setup()
        self.match.start_play()
        self.run_battle()
        self.announce_winner()
        return self.match.winner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a hot-seat naval duel")
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (defaults built in)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for random ship placement (overrides config)'
    )
    parser.add_argument(
        '--auto-place',
        action='store_true',
        help='Place both fleets randomly and go straight to battle'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level, e.g. DEBUG or INFO (overrides config)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main console entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    # Override with command line arguments
    if args.seed is not None:
        config['client']['seed'] = args.seed
    if args.auto_place:
        config['client']['auto_place'] = True
    if args.log_level is not None:
        config['logging']['level'] = args.log_level

    logging.basicConfig(
        level=getattr(logging, str(config['logging']['level']).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        fleet = fleet_from_config(config)
    except ValueError as e:
        parser.error(str(e))

    match = Match(fleet=fleet, board_size=config['game']['board_size'])
    rng = random.Random(config['client']['seed'])
    client = ConsoleClient(match, rng=rng, clear_lines=config['client']['clear_lines'])

    print("=" * 50)
    print("       NAVAL DUEL")
    print("=" * 50)
    print(f"\n{len(fleet)} ships per player on a {match.board_size}x{match.board_size} board.")
    print("Type 'help' for commands.\n")

    if config['client']['auto_place']:
        try:
            while match.phase is MatchPhase.SETUP:
                match.auto_place(rng)
        except RuntimeError as e:
            parser.error(f"--auto-place: {e}")
        logger.info(f"Both fleets placed randomly (seed: {config['client']['seed']})")

    try:
        client.play()
    except (QuitGame, KeyboardInterrupt, EOFError):
        print("\nGoodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
