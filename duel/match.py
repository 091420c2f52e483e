# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Match controller.

Owns both players' boards and drives the turn state machine:

    Setup(0) -> Setup(1) -> Playing(active) -> Finished(winner)

Transitions are pure functions of (state, event) so they can be tested
without a board. A hit (including a sinking hit) keeps the turn; only a
miss passes it to the opponent.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .board import BOARD_SIZE, Board, Placement, ShotOutcome
from .errors import FleetIncomplete, MatchStateError
from .ship import STANDARD_FLEET, Orientation, ShipSpec


logger = logging.getLogger(__name__)

PLAYERS = (0, 1)


class MatchPhase(Enum):
    """Phase of a match."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


def other_player(player: int) -> int:
    return 1 - player


@dataclass(frozen=True)
class TurnState:
    """
    Whose move it is.

    `player` is the player placing ships in SETUP, the attacker in PLAYING
    and the winner in FINISHED.
    """
    phase: MatchPhase
    player: int = 0
    winner: Optional[int] = None

    def __post_init__(self):
        if self.player not in PLAYERS:
            raise ValueError(f"Invalid player: {self.player} (must be 0 or 1)")
        if (self.phase is MatchPhase.FINISHED) != (self.winner is not None):
            raise ValueError("A winner is set exactly when the match is finished")
        if self.winner is not None and self.winner != self.player:
            raise ValueError(f"Winner {self.winner} must be the recorded player {self.player}")


def after_setup(state: TurnState) -> TurnState:
    """Next state once the current setup player's fleet is complete."""
    if state.phase is not MatchPhase.SETUP:
        raise MatchStateError(f"Setup already finished (phase: {state.phase.value})")
    if state.player == 0:
        return TurnState(MatchPhase.SETUP, 1)
    return TurnState(MatchPhase.PLAYING, 0)


def after_shot(state: TurnState, outcome: ShotOutcome, defender_defeated: bool) -> TurnState:
    """
    Next state after the active player fired.

    Args:
        state: Current (PLAYING) state.
        outcome: Result of the shot.
        defender_defeated: Whether the defending fleet is now fully sunk.

    Returns:
        Unchanged state for rejected shots, the same attacker after a hit,
        the opponent after a miss, or FINISHED once the defender is beaten.
    """
    if state.phase is not MatchPhase.PLAYING:
        raise MatchStateError(f"No shots allowed in phase {state.phase.value}")

    if not outcome.resolved:
        return state

    if defender_defeated:
        return TurnState(MatchPhase.FINISHED, state.player, winner=state.player)

    if outcome is ShotOutcome.MISS:
        return TurnState(MatchPhase.PLAYING, other_player(state.player))

    return state


@dataclass
class AttackReport:
    """What happened when a player fired."""
    outcome: ShotOutcome
    x: int
    y: int
    attacker: int
    ship_name: Optional[str] = None
    turn_passed: bool = False
    winner: Optional[int] = None

    @property
    def message(self) -> str:
        if self.outcome is ShotOutcome.INVALID:
            return f"({self.x}, {self.y}) is not on the board. Try again."
        if self.outcome is ShotOutcome.ALREADY_TARGETED:
            return f"Already shot at ({self.x}, {self.y}). Choose another cell."
        if self.outcome is ShotOutcome.SUNK:
            return f"Hit and sunk! ({self.ship_name})"
        if self.outcome is ShotOutcome.HIT:
            return "Hit!"
        return "Miss!"


@dataclass
class Match:
    """
    A two-player game.

    Both boards start empty. Ships are placed through `place`/`auto_place`
    for player 0 then player 1, after which `attack` becomes available.
    """
    fleet: List[ShipSpec] = field(default_factory=lambda: list(STANDARD_FLEET))
    board_size: int = BOARD_SIZE
    boards: List[Board] = field(default_factory=list)
    state: TurnState = field(default_factory=lambda: TurnState(MatchPhase.SETUP, 0))
    history: List[AttackReport] = field(default_factory=list)

    def __post_init__(self):
        if not self.fleet:
            raise ValueError("Fleet must contain at least one ship")
        if not self.boards:
            self.boards = [Board(self.board_size) for _ in PLAYERS]
        if len(self.boards) != len(PLAYERS):
            raise ValueError(f"A match needs exactly 2 boards, got {len(self.boards)}")

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    @property
    def active_player(self) -> Optional[int]:
        """The attacker while playing, otherwise None."""
        if self.state.phase is MatchPhase.PLAYING:
            return self.state.player
        return None

    @property
    def winner(self) -> Optional[int]:
        return self.state.winner

    @property
    def is_over(self) -> bool:
        return self.state.phase is MatchPhase.FINISHED

    def board(self, player: int) -> Board:
        """The board holding `player`'s own fleet."""
        return self.boards[player]

    def opponent(self, player: int) -> Board:
        """The board `player` fires at."""
        return self.boards[other_player(player)]

    def remaining_specs(self, player: int) -> List[ShipSpec]:
        """Fleet entries not yet placed on `player`'s board."""
        return self.fleet[len(self.boards[player].ships):]

    def pending_spec(self) -> Optional[ShipSpec]:
        """Next ship the setup player has to place, or None outside setup."""
        if self.state.phase is not MatchPhase.SETUP:
            return None
        remaining = self.remaining_specs(self.state.player)
        return remaining[0] if remaining else None

    def _require_phase(self, phase: MatchPhase, action: str) -> None:
        if self.state.phase is not phase:
            raise MatchStateError(f"Cannot {action} during {self.state.phase.value}")

    def _finish_setup_if_complete(self) -> None:
        player = self.state.player
        if self.remaining_specs(player):
            return

        logger.info(f"Player {player + 1} fleet complete ({len(self.fleet)} ships)")
        self.state = after_setup(self.state)

        if self.state.phase is MatchPhase.PLAYING:
            logger.info("Both fleets placed, battle starts")

    def place(
        self,
        x: int,
        y: int,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> bool:
        """
        Place the pending ship for the player in setup.

        Returns:
            True if the ship was placed. A rejected attempt changes nothing
            and the same ship stays pending.

        Raises:
            MatchStateError: If the match is not in setup.
        """
        self._require_phase(MatchPhase.SETUP, "place ships")

        spec = self.pending_spec()
        if not self.boards[self.state.player].place(x, y, spec, orientation):
            return False

        self._finish_setup_if_complete()
        return True

    def auto_place(self, rng: Optional[random.Random] = None) -> List[Placement]:
        """
        Randomly place the rest of the setup player's fleet.

        Raises:
            MatchStateError: If the match is not in setup.
        """
        self._require_phase(MatchPhase.SETUP, "place ships")

        player = self.state.player
        placements = self.boards[player].place_randomly(self.remaining_specs(player), rng)
        self._finish_setup_if_complete()
        return placements

    def start_play(self) -> None:
        """
        Check that the match may enter play.

        Raises:
            FleetIncomplete: If any fleet entry is still unplaced.
            MatchStateError: If the match is already finished.
        """
        if self.state.phase is MatchPhase.FINISHED:
            raise MatchStateError("Match is already finished")
        self._check_fleets_complete()

    def _check_fleets_complete(self) -> None:
        for player in PLAYERS:
            remaining = self.remaining_specs(player)
            if remaining:
                raise FleetIncomplete(
                    f"Player {player + 1} still has {len(remaining)} ships to place"
                )

    def attack(self, x: int, y: int) -> AttackReport:
        """
        Fire at (x, y) on the opponent's board for the active player.

        Returns:
            Report of the shot and the resulting turn change.

        Raises:
            MatchStateError: If the match is not in play.
        """
        if self.state.phase is MatchPhase.SETUP:
            raise MatchStateError("Cannot attack before both fleets are placed")
        if self.state.phase is MatchPhase.FINISHED:
            raise MatchStateError("Match is already finished")

        attacker = self.state.player
        defender = self.opponent(attacker)

        outcome = defender.shoot(x, y)
        ship = defender.ship_at(x, y) if outcome.is_hit else None

        previous = self.state
        self.state = after_shot(previous, outcome, outcome.resolved and defender.all_sunk())

        report = AttackReport(
            outcome=outcome,
            x=x,
            y=y,
            attacker=attacker,
            ship_name=ship.name if ship else None,
            turn_passed=self.state.phase is MatchPhase.PLAYING and self.state.player != attacker,
            winner=self.state.winner,
        )

        if outcome.resolved:
            self.history.append(report)

        logger.debug(f"Player {attacker + 1} fired at ({x}, {y}): {outcome.value}")
        if self.is_over:
            logger.info(f"Player {attacker + 1} wins after {len(self.history)} shots")

        return report

    def to_dict(self) -> dict:
        """In-memory snapshot of the boards and turn state."""
        return {
            "fleet": [{"name": spec.name, "size": spec.size} for spec in self.fleet],
            "boards": [board.to_dict() for board in self.boards],
            "state": {
                "phase": self.state.phase.value,
                "player": self.state.player,
                "winner": self.state.winner,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Match":
        """
        Rebuild a match from `to_dict` output. History is not restored.

        Raises:
            ValueError: If the snapshot is inconsistent.
        """
        fleet = [ShipSpec(name=entry["name"], size=entry["size"]) for entry in data["fleet"]]
        boards = [Board.from_dict(board_data) for board_data in data["boards"]]
        state = TurnState(
            phase=MatchPhase(data["state"]["phase"]),
            player=data["state"]["player"],
            winner=data["state"]["winner"],
        )

        if len(boards) != len(PLAYERS):
            raise ValueError(f"A match needs exactly 2 boards, got {len(boards)}")
        if boards[0].size != boards[1].size:
            raise ValueError(f"Board sizes differ: {boards[0].size} and {boards[1].size}")

        for player, board in enumerate(boards):
            placed = [ShipSpec(name=ship.name, size=ship.size) for ship in board.ships]
            if placed != fleet[:len(placed)]:
                raise ValueError(f"Player {player + 1} ships do not match the fleet")

        match = cls(fleet=fleet, board_size=boards[0].size, boards=boards, state=state)
        match._check_restored_state()
        return match

    def _check_restored_state(self) -> None:
        """Reject a snapshot whose phase does not agree with the boards."""
        phase = self.state.phase

        if phase is MatchPhase.SETUP:
            player = self.state.player
            if not self.remaining_specs(player):
                raise ValueError(f"Player {player + 1} fleet is already complete during setup")
            if player == 1 and self.remaining_specs(0):
                raise ValueError("Player 2 is placing before player 1 finished")
            if player == 0 and self.boards[1].ships:
                raise ValueError("Player 2 has ships before player 1 finished")
            if any(board.shots_fired for board in self.boards):
                raise ValueError("Shots recorded during setup")
            return

        try:
            self._check_fleets_complete()
        except FleetIncomplete as e:
            raise ValueError(f"Cannot restore {phase.value} match: {e}") from e

        if phase is MatchPhase.PLAYING:
            for player in PLAYERS:
                if self.boards[player].all_sunk():
                    raise ValueError(f"Player {player + 1} fleet is sunk but the match is still playing")
            return

        loser = other_player(self.state.winner)
        if not self.boards[loser].all_sunk():
            raise ValueError(f"Player {loser + 1} lost with ships still afloat")
        if self.boards[self.state.winner].all_sunk():
            raise ValueError(f"Player {self.state.winner + 1} won with every ship sunk")
