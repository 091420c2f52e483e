# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Ship and fleet model.

Defines the cell states of a board, ship orientation, the (name, size)
fleet specification entries and the placed ship with its damage counter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class CellState(Enum):
    """State of a cell on the board."""
    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"


class Orientation(Enum):
    """Direction a ship extends from its starting cell."""
    HORIZONTAL = "h"
    VERTICAL = "v"

    @property
    def step(self) -> Tuple[int, int]:
        """(dx, dy) between consecutive cells of a ship."""
        if self is Orientation.HORIZONTAL:
            return (0, 1)
        return (1, 0)


@dataclass(frozen=True)
class ShipSpec:
    """Fleet configuration entry: what kind of ship to place and how long it is."""
    name: str
    size: int

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Invalid ship size: {self.size} (must be > 0)")


@dataclass
class Ship:
    """Represents a ship placed on a board."""
    name: str
    size: int
    positions: List[Tuple[int, int]] = field(default_factory=list)
    hit_count: int = 0

    @property
    def is_sunk(self) -> bool:
        """Check if every cell of the ship has been hit."""
        return self.hit_count == self.size

    @property
    def orientation(self) -> Orientation:
        if len(self.positions) > 1 and self.positions[1][0] != self.positions[0][0]:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self.positions

    def register_hit(self) -> None:
        """
        Record one hit on this ship.

        Raises:
            ValueError: If the ship is already sunk.
        """
        if self.is_sunk:
            raise ValueError(f"{self.name} is already sunk")
        self.hit_count += 1


def expand_fleet(entries: List[Tuple[str, int, int]]) -> List[ShipSpec]:
    """Expand (name, size, count) entries into an ordered list of specs."""
    specs = []
    for name, size, count in entries:
        specs.extend(ShipSpec(name=name, size=size) for _ in range(count))
    return specs


# Standard fleet: 4x1, 3x2, 2x3, 1x4 (20 cells)
STANDARD_FLEET: List[ShipSpec] = expand_fleet([
    ("Single-masted", 1, 4),
    ("Two-masted", 2, 3),
    ("Three-masted", 3, 2),
    ("Four-masted", 4, 1),
])
