# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Exceptions raised by the strict variants of board and match operations.

The non-strict operations report the same conditions through return values
(False, ShotOutcome.INVALID, ShotOutcome.ALREADY_TARGETED).
"""


class DuelError(Exception):
    """Base class for all game errors."""


class PlacementError(DuelError, ValueError):
    """A ship cannot be placed where requested."""


class OutOfBounds(PlacementError):
    """Coordinate lies outside the grid."""


class OverlapOrAdjacency(PlacementError):
    """Placement overlaps or touches (including diagonally) another ship."""


class AlreadyTargeted(DuelError, ValueError):
    """The coordinate was already shot at."""


class FleetIncomplete(DuelError):
    """A board still has fleet entries waiting to be placed."""


class MatchStateError(DuelError):
    """Operation is not allowed in the current match phase."""
