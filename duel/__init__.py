# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Naval duel game core module.
"""

from .board import BOARD_SIZE, Board, Placement, ShotOutcome
from .errors import (
    AlreadyTargeted,
    DuelError,
    FleetIncomplete,
    MatchStateError,
    OutOfBounds,
    OverlapOrAdjacency,
    PlacementError,
)
from .match import AttackReport, Match, MatchPhase, TurnState, after_setup, after_shot
from .ship import STANDARD_FLEET, CellState, Orientation, Ship, ShipSpec

__all__ = [
    'BOARD_SIZE',
    'Board',
    'Placement',
    'ShotOutcome',
    'AlreadyTargeted',
    'DuelError',
    'FleetIncomplete',
    'MatchStateError',
    'OutOfBounds',
    'OverlapOrAdjacency',
    'PlacementError',
    'AttackReport',
    'Match',
    'MatchPhase',
    'TurnState',
    'after_setup',
    'after_shot',
    'STANDARD_FLEET',
    'CellState',
    'Orientation',
    'Ship',
    'ShipSpec',
]
