# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parsing of console input into coordinates.

Bounds are not checked here; the board reports off-grid coordinates itself.
"""

import re
from typing import List, Tuple

from .ship import Orientation


_SEPARATORS = re.compile(r"[\s,]+")

ORIENTATIONS = {
    "h": Orientation.HORIZONTAL,
    "v": Orientation.VERTICAL,
}


def _tokens(text: str) -> List[str]:
    return [token for token in _SEPARATORS.split(text.strip()) if token]


def _parse_int(token: str, axis: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid {axis} '{token}'. Must be a whole number.")


def parse_target(text: str) -> Tuple[int, int]:
    """
    Parse an attack like '3 4' or '3,4' into (x, y).

    Raises:
        ValueError: If the input is malformed.
    """
    tokens = _tokens(text)
    if len(tokens) != 2:
        raise ValueError(f"Invalid target: '{text.strip()}'. Enter 'x y'.")

    return (_parse_int(tokens[0], "x"), _parse_int(tokens[1], "y"))


def parse_placement(text: str) -> Tuple[int, int, Orientation]:
    """
    Parse a placement like '3 4 h' into (x, y, orientation).

    Orientation is 'h' (horizontal) or 'v' (vertical), case-insensitive.

    Raises:
        ValueError: If the input is malformed.
    """
    tokens = _tokens(text)
    if len(tokens) != 3:
        raise ValueError(f"Invalid placement: '{text.strip()}'. Enter 'x y h' or 'x y v'.")

    orientation = ORIENTATIONS.get(tokens[2].lower())
    if orientation is None:
        raise ValueError(f"Invalid orientation '{tokens[2]}'. Must be 'h' or 'v'.")

    return (_parse_int(tokens[0], "x"), _parse_int(tokens[1], "y"), orientation)
