# hex_evaluator.py
#
# Decide whether a side owns a chain joining its two borders.
#   - Red  : any Red cell of row 0    must reach row n-1
#   - Blue : any Blue cell of column 0 must reach column n-1
#
# Reachability is a fixed-point flood fill over the adjacency matrix: every
# round marks each own-coloured cell that touches an already reached cell, and
# the search stops when a round adds nothing. A round is a single boolean
# reduction over the rows of the reached cells.

from __future__ import annotations

import numpy as np

from hex_board import HexBoard, State


def reachable(board: HexBoard, adjacency: np.ndarray, side: State) -> np.ndarray:
    """
    Flat boolean mask of the `side` cells connected to the side's first border.
    """
    n = board.size
    own = board.cells == side
    reached = np.zeros(n * n, dtype=bool)
    if side == State.RED:
        reached[:n] = own[:n]           # row 0
    elif side == State.BLUE:
        reached[::n] = own[::n]         # column 0
    else:
        raise ValueError("EMPTY is not a playable side.")

    while True:
        grown = reached | (own & adjacency[reached].any(axis=0))
        if np.array_equal(grown, reached):
            return reached
        reached = grown


def wins(board: HexBoard, adjacency: np.ndarray, side: State) -> bool:
    """True iff `side` connects its two target borders on `board`."""
    n = board.size
    reached = reachable(board, adjacency, side)
    if side == State.RED:
        return bool(reached[n * (n - 1):].any())     # row n-1
    return bool(reached[n - 1::n].any())             # column n-1


def winner(board: HexBoard, adjacency: np.ndarray) -> State:
    """RED or BLUE when that side is connected, otherwise EMPTY."""
    if wins(board, adjacency, State.RED):
        return State.RED
    if wins(board, adjacency, State.BLUE):
        return State.BLUE
    return State.EMPTY
