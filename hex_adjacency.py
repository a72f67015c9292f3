# hex_adjacency.py
#
# Fixed neighbour structure of an n×n Hex rhombus, as a symmetric boolean
# matrix over the n² cells (cell id = r*n + c).
#
#   corners (0,0), (n-1,n-1)      : 2 neighbours
#   corners (0,n-1), (n-1,0)      : 3 neighbours
#   other border cells            : 4 neighbours
#   interior cells                : 6 neighbours

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

Coord = Tuple[int, int]

# Neighbor deltas for a rhombus-shaped Hex board using (row, col)
NEIGHBORS = [(-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0)]


def in_bounds(n: int, r: int, c: int) -> bool:
    return 0 <= r < n and 0 <= c < n


def neighbors(n: int, r: int, c: int) -> Iterable[Coord]:
    for dr, dc in NEIGHBORS:
        nr, nc = r + dr, c + dc
        if in_bounds(n, nr, nc):
            yield (nr, nc)


def build_adjacency(n: int) -> np.ndarray:
    """
    Return the (n*n, n*n) adjacency matrix of the board.

    The matrix is built once per board size and marked read-only; every
    connectivity check and every simulated board shares it.
    """
    adj = np.zeros((n * n, n * n), dtype=bool)
    for r in range(n):
        for c in range(n):
            k = r * n + c
            for nr, nc in neighbors(n, r, c):
                adj[k, nr * n + nc] = True
    adj.setflags(write=False)
    return adj


def neighbor_counts(adjacency: np.ndarray, n: int) -> np.ndarray:
    """Degree of every cell, shaped (n, n)."""
    return adjacency.sum(axis=1).reshape(n, n)
