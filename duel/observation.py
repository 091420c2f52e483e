# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Array views of a board.

Converts a board into numpy arrays for consumers that want the whole grid
at once (GUIs, analysis scripts, protocol encoders).
"""

from typing import List, Tuple

import numpy as np

from .board import Board
from .ship import CellState


CELL_CODES = {
    CellState.EMPTY: 0,
    CellState.SHIP: 1,
    CellState.HIT: 2,
    CellState.MISS: 3,
}


def board_array(board: Board, reveal_ships: bool = False) -> np.ndarray:
    """
    Encode a board as a grid of cell codes.

    Args:
        board: Board to encode
        reveal_ships: Show unhit ship cells; when False they read as empty

    Returns:
        int8 array of shape (size, size) with values from CELL_CODES
    """
    grid = np.zeros((board.size, board.size), dtype=np.int8)

    for row in range(board.size):
        for col in range(board.size):
            cell_state = board.cell(row, col)
            if cell_state == CellState.SHIP and not reveal_ships:
                cell_state = CellState.EMPTY
            grid[row, col] = CELL_CODES[cell_state]

    return grid


def board_planes(board: Board) -> np.ndarray:
    """
    Encode the opponent's view of a board as one-hot planes.

    Returns:
        float32 array of shape (3, size, size)
        - Channel 0: untargeted
        - Channel 1: hit
        - Channel 2: miss
    """
    grid = board_array(board, reveal_ships=False)
    planes = np.zeros((3, board.size, board.size), dtype=np.float32)

    planes[0][grid == CELL_CODES[CellState.EMPTY]] = 1.0
    planes[1][grid == CELL_CODES[CellState.HIT]] = 1.0
    planes[2][grid == CELL_CODES[CellState.MISS]] = 1.0

    return planes


def target_mask(board: Board) -> np.ndarray:
    """Boolean (size, size) mask of coordinates that can still be shot at."""
    return board_array(board, reveal_ships=False) == CELL_CODES[CellState.EMPTY]


def legal_targets(board: Board) -> List[Tuple[int, int]]:
    """Coordinates that can still be shot at, in row-major order."""
    return [(int(x), int(y)) for x, y in np.argwhere(target_mask(board))]
