# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Text rendering of boards for the console client.
"""

from typing import List

from .board import Board
from .ship import CellState


SYMBOLS = {
    CellState.HIT: "X",
    CellState.MISS: "O",
    CellState.SHIP: "S",
    CellState.EMPTY: ".",
}


def _symbol(state: CellState, reveal_ships: bool) -> str:
    if state == CellState.SHIP and not reveal_ships:
        return SYMBOLS[CellState.EMPTY]
    return SYMBOLS[state]


def render_board_lines(board: Board, reveal_ships: bool = False) -> List[str]:
    """Board as a list of lines: a column header, then one line per row."""
    width = len(str(board.size - 1))

    lines = [" " * (width + 1) + " ".join(f"{col:>{width}}" for col in range(board.size))]
    for row in range(board.size):
        cells = " ".join(
            f"{_symbol(board.cell(row, col), reveal_ships):>{width}}"
            for col in range(board.size)
        )
        lines.append(f"{row:>{width}} {cells}")

    return lines


def render_board(board: Board, reveal_ships: bool = False) -> str:
    """
    Get the board as an ASCII string.

    Args:
        board: Board to draw
        reveal_ships: Draw unhit ship cells as 'S' (own board) or hide them (opponent view)
    """
    return "\n".join(render_board_lines(board, reveal_ships))


def render_side_by_side(
    own: Board,
    target: Board,
    titles: tuple = ("Your board", "Opponent (hits/misses)"),
    gap: int = 6,
) -> str:
    """Draw a player's own board next to their view of the opponent."""
    left = render_board_lines(own, reveal_ships=True)
    right = render_board_lines(target, reveal_ships=False)
    column = max(len(line) for line in left) + gap

    lines = [f"{titles[0]:<{column}}{titles[1]}"]
    lines.extend(f"{l:<{column}}{r}" for l, r in zip(left, right))
    return "\n".join(lines)


def render_fleet(board: Board) -> str:
    """One line per ship: name, size and whether it is still afloat."""
    return "\n".join(
        f"{ship.name} ({ship.size}): {'sunk' if ship.is_sunk else 'afloat'}"
        for ship in board.ships
    )
