# random_player.py
# A minimal Hex "AI": choose_move(board, adjacency, side, opponent, rng) → (row, col)

from __future__ import annotations

import numpy as np

from hex_board import HexBoard, Move, State


def choose_move(
    board: HexBoard,
    adjacency: np.ndarray,
    side: State,
    opponent: State,
    rng: np.random.Generator | int | None = None,
) -> Move:
    """Return a random unoccupied cell; `adjacency` and the sides are unused."""
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    available = board.empty_cells()
    if not available:
        raise ValueError("Board is full, no legal moves remain.")
    return available[int(rng.integers(len(available)))]
