# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Board module.

Provides one player's grid and fleet:
- Ship placement with bounds, overlap and adjacency (8-neighborhood) checks
- Random placement (seeded for reproducible layouts)
- Shot resolution with hit/sunk/miss detection
- Read access for renderers and a JSON-friendly snapshot
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import AlreadyTargeted, OutOfBounds, OverlapOrAdjacency, PlacementError
from .ship import CellState, Orientation, Ship, ShipSpec


logger = logging.getLogger(__name__)

BOARD_SIZE = 10


class ShotOutcome(Enum):
    """Result of a single shot at a board."""
    INVALID = "invalid"
    ALREADY_TARGETED = "already_targeted"
    HIT = "hit"
    SUNK = "sunk"
    MISS = "miss"

    @property
    def is_hit(self) -> bool:
        return self in (ShotOutcome.HIT, ShotOutcome.SUNK)

    @property
    def resolved(self) -> bool:
        """True if the shot changed the board (hit, sunk or miss)."""
        return self in (ShotOutcome.HIT, ShotOutcome.SUNK, ShotOutcome.MISS)


@dataclass(frozen=True)
class Placement:
    """Where a fleet entry goes on the board."""
    spec: ShipSpec
    x: int
    y: int
    orientation: Orientation = Orientation.HORIZONTAL


class Board:
    """
    A square grid holding one player's fleet.

    Coordinates are (x, y) with x the row and y the column, both 0-based.
    Horizontal ships extend along y, vertical ships along x.
    """

    def __init__(self, size: int = BOARD_SIZE):
        """
        Initialize an empty board.

        Args:
            size: Number of rows (and columns) of the grid.
        """
        if size <= 0:
            raise ValueError(f"Invalid board size: {size} (must be > 0)")

        self.size = size
        self.grid: List[List[CellState]] = [
            [CellState.EMPTY for _ in range(size)]
            for _ in range(size)
        ]

        # Ships on the board, in placement order
        self.ships: List[Ship] = []

        # Track all ship positions for quick lookup
        self._ship_positions: Dict[Tuple[int, int], Ship] = {}

        # Shot statistics (resolved shots only)
        self.shots_fired = 0
        self.hits = 0
        self.misses = 0

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        """Check that (x, y) lies on the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> CellState:
        """
        Get the state of a cell.

        Raises:
            OutOfBounds: If the coordinate is not on the grid.
        """
        if not self.is_valid_coordinate(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside the {self.size}x{self.size} grid")
        return self.grid[x][y]

    def ship_at(self, x: int, y: int) -> Optional[Ship]:
        """Return the ship occupying (x, y), hit or not, if any."""
        return self._ship_positions.get((x, y))

    @staticmethod
    def ship_cells(x: int, y: int, size: int,
                   orientation: Orientation) -> List[Tuple[int, int]]:
        """Cells covered by a ship of `size` starting at (x, y)."""
        dx, dy = orientation.step
        return [(x + i * dx, y + i * dy) for i in range(size)]

    def rejection_reason(
        self,
        x: int,
        y: int,
        size: int,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> Optional[PlacementError]:
        """
        Explain why a ship could not be placed at (x, y).

        Args:
            x: Starting row.
            y: Starting column.
            size: Ship length in cells.
            orientation: Direction the ship extends.

        Returns:
            The error describing the first violated rule, or None if the
            placement is allowed.
        """
        if size <= 0:
            return PlacementError(f"Invalid ship size: {size} (must be > 0)")

        for cx, cy in self.ship_cells(x, y, size, orientation):
            if not self.is_valid_coordinate(cx, cy):
                return OutOfBounds(
                    f"Cell ({cx}, {cy}) is outside the {self.size}x{self.size} grid"
                )

            if (cx, cy) in self._ship_positions:
                return OverlapOrAdjacency(
                    f"Cell ({cx}, {cy}) is occupied by {self._ship_positions[(cx, cy)].name}"
                )

            if self.grid[cx][cy] is not CellState.EMPTY:
                return PlacementError(f"Cell ({cx}, {cy}) has already been targeted")

            # Chebyshev distance 1, diagonals included
            for nx in range(cx - 1, cx + 2):
                for ny in range(cy - 1, cy + 2):
                    neighbour = self._ship_positions.get((nx, ny))
                    if neighbour is not None:
                        return OverlapOrAdjacency(
                            f"Cell ({cx}, {cy}) touches {neighbour.name} at ({nx}, {ny})"
                        )

        return None

    def can_place(
        self,
        x: int,
        y: int,
        size: int,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> bool:
        """Check whether a ship of `size` fits at (x, y) without touching another ship."""
        return self.rejection_reason(x, y, size, orientation) is None

    def place(
        self,
        x: int,
        y: int,
        spec: ShipSpec,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> bool:
        """
        Place a ship on the board.

        Validation happens before any mutation, so a rejected placement
        leaves the board untouched.

        Returns:
            True if the ship was placed.
        """
        reason = self.rejection_reason(x, y, spec.size, orientation)
        if reason is not None:
            logger.debug(f"Rejected {spec.name} at ({x}, {y}) {orientation.name}: {reason}")
            return False

        ship = Ship(
            name=spec.name,
            size=spec.size,
            positions=self.ship_cells(x, y, spec.size, orientation),
        )
        for pos in ship.positions:
            self.grid[pos[0]][pos[1]] = CellState.SHIP
            self._ship_positions[pos] = ship
        self.ships.append(ship)

        logger.debug(f"Placed {spec.name} at ({x}, {y}) {orientation.name}")
        return True

    def place_fleet(self, placements: List[Placement]) -> None:
        """
        Place several ships at once, all or nothing.

        Args:
            placements: Entries to place, in order.

        Raises:
            OutOfBounds: If an entry leaves the grid.
            OverlapOrAdjacency: If an entry overlaps or touches another ship.
            PlacementError: For any other rejected entry.
        """
        scratch = Board.from_dict(self.to_dict())

        for placement in placements:
            reason = scratch.rejection_reason(
                placement.x, placement.y, placement.spec.size, placement.orientation
            )
            if reason is not None:
                raise type(reason)(f"{placement.spec.name}: {reason}")
            scratch.place(placement.x, placement.y, placement.spec, placement.orientation)

        for placement in placements:
            self.place(placement.x, placement.y, placement.spec, placement.orientation)

    def place_randomly(
        self,
        specs: List[ShipSpec],
        rng: Optional[random.Random] = None,
        max_attempts: int = 1000,
        max_restarts: int = 100,
    ) -> List[Placement]:
        """
        Place ships at random positions.

        Each ship gets `max_attempts` tries; if one cannot fit, the layout
        starts over from the board as it was before the call.

        Args:
            specs: Ships to place, in order.
            rng: Random source (seed it for reproducible layouts).
            max_attempts: Tries per ship before restarting.
            max_restarts: Layouts to try before giving up.

        Returns:
            The placements that were applied.

        Raises:
            RuntimeError: If no layout was found.
        """
        rng = rng or random.Random()
        initial = self.to_dict()

        for restart in range(max_restarts):
            scratch = Board.from_dict(initial)
            chosen: List[Placement] = []

            for spec in specs:
                placed = False
                attempts = 0

                while not placed and attempts < max_attempts:
                    attempts += 1

                    x = rng.randint(0, self.size - 1)
                    y = rng.randint(0, self.size - 1)
                    orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])

                    if scratch.place(x, y, spec, orientation):
                        chosen.append(Placement(spec, x, y, orientation))
                        placed = True

                if not placed:
                    logger.debug(f"Could not fit {spec.name}, restarting layout ({restart + 1})")
                    break
            else:
                for placement in chosen:
                    self.place(placement.x, placement.y, placement.spec, placement.orientation)
                return chosen

        raise RuntimeError(f"Failed to place fleet after {max_restarts} layouts")

    def shoot(self, x: int, y: int) -> ShotOutcome:
        """
        Fire at (x, y).

        Out-of-bounds and repeated coordinates are reported without
        touching the board.

        Returns:
            The shot outcome.
        """
        if not self.is_valid_coordinate(x, y):
            logger.debug(f"Shot at ({x}, {y}) is off the board")
            return ShotOutcome.INVALID

        state = self.grid[x][y]

        # Check if already shot
        if state in (CellState.HIT, CellState.MISS):
            logger.debug(f"Shot at ({x}, {y}) repeats an earlier shot")
            return ShotOutcome.ALREADY_TARGETED

        self.shots_fired += 1

        # Check for hit
        if state is CellState.SHIP:
            ship = self._ship_positions[(x, y)]
            self.grid[x][y] = CellState.HIT
            ship.register_hit()
            self.hits += 1

            outcome = ShotOutcome.SUNK if ship.is_sunk else ShotOutcome.HIT
            logger.debug(f"Shot at ({x}, {y}): {outcome.value} ({ship.name})")
            return outcome

        self.grid[x][y] = CellState.MISS
        self.misses += 1
        logger.debug(f"Shot at ({x}, {y}): miss")
        return ShotOutcome.MISS

    def shoot_strict(self, x: int, y: int) -> ShotOutcome:
        """
        Fire at (x, y), raising instead of reporting rejected shots.

        Raises:
            OutOfBounds: If the coordinate is not on the grid.
            AlreadyTargeted: If the coordinate was already shot at.
        """
        outcome = self.shoot(x, y)
        if outcome is ShotOutcome.INVALID:
            raise OutOfBounds(f"({x}, {y}) is outside the {self.size}x{self.size} grid")
        if outcome is ShotOutcome.ALREADY_TARGETED:
            raise AlreadyTargeted(f"Already shot at ({x}, {y})")
        return outcome

    def all_sunk(self) -> bool:
        """Check if every placed ship has been sunk."""
        return all(ship.is_sunk for ship in self.ships)

    def fleet_status(self) -> dict:
        """
        Get fleet and shot statistics.

        Returns:
            Dict with ship counts, shot counters and sunk ship names.
        """
        ships_remaining = sum(1 for ship in self.ships if not ship.is_sunk)

        return {
            "all_sunk": self.all_sunk(),
            "ships_remaining": ships_remaining,
            "ships_sunk": len(self.ships) - ships_remaining,
            "total_ships": len(self.ships),
            "shots_fired": self.shots_fired,
            "hits": self.hits,
            "misses": self.misses,
            "sunk_ships": [ship.name for ship in self.ships if ship.is_sunk],
        }

    def to_dict(self) -> dict:
        """Snapshot of the grid and fleet using only JSON-friendly types."""
        return {
            "size": self.size,
            "grid": [[cell.value for cell in row] for row in self.grid],
            "ships": [
                {
                    "name": ship.name,
                    "size": ship.size,
                    "positions": [list(pos) for pos in ship.positions],
                    "hit_count": ship.hit_count,
                }
                for ship in self.ships
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Board":
        """
        Rebuild a board from `to_dict` output.

        Ships are re-placed through the normal placement rules and the
        grid is checked against the fleet.

        Raises:
            ValueError: If the snapshot is inconsistent.
        """
        board = cls(data["size"])

        for entry in data["ships"]:
            spec = ShipSpec(name=entry["name"], size=entry["size"])
            positions = [tuple(pos) for pos in entry["positions"]]
            if len(positions) != spec.size:
                raise ValueError(f"Ship {spec.name} has {len(positions)} positions, expected {spec.size}")

            shape = Ship(name=spec.name, size=spec.size, positions=positions)
            start_x, start_y = positions[0]

            if Board.ship_cells(start_x, start_y, spec.size, shape.orientation) != positions:
                raise ValueError(f"Ship {entry['name']} positions are not a straight line")
            if not board.place(start_x, start_y, spec, shape.orientation):
                reason = board.rejection_reason(start_x, start_y, spec.size, shape.orientation)
                raise ValueError(f"Ship {entry['name']} cannot be placed: {reason}")

        grid = data["grid"]
        if len(grid) != board.size or any(len(row) != board.size for row in grid):
            raise ValueError(f"Grid does not match board size {board.size}")

        for x, row in enumerate(grid):
            for y, value in enumerate(row):
                state = CellState(value)
                on_ship = (x, y) in board._ship_positions
                if on_ship != (state in (CellState.SHIP, CellState.HIT)):
                    raise ValueError(f"Cell ({x}, {y}) is {state.value} but ship presence is {on_ship}")
                board.grid[x][y] = state
                if state is CellState.HIT:
                    board.hits += 1
                elif state is CellState.MISS:
                    board.misses += 1

        for ship, entry in zip(board.ships, data["ships"]):
            ship.hit_count = sum(
                1 for x, y in ship.positions if board.grid[x][y] is CellState.HIT
            )
            if ship.hit_count != entry["hit_count"]:
                raise ValueError(
                    f"Ship {ship.name} records {entry['hit_count']} hits but the grid shows {ship.hit_count}"
                )

        board.shots_fired = board.hits + board.misses
        return board
