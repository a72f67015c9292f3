# hex_board.py
#
# Board occupancy for an n×n Hex rhombus.
#   - Red  (X) connects North↔South (row 0 ↔ row n-1) and always moves first
#   - Blue (O) connects West↔East  (col 0 ↔ col n-1)
# Cells live in one flat numpy buffer indexed by r*n + c.

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Tuple

import numpy as np

Move = Tuple[int, int]


class State(IntEnum):
    EMPTY = 0
    RED = 1
    BLUE = 2

    def opponent(self) -> "State":
        if self is State.RED:
            return State.BLUE
        if self is State.BLUE:
            return State.RED
        raise ValueError("EMPTY is not a playable side.")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {State.EMPTY: " ", State.RED: "X", State.BLUE: "O"}

# accepted characters for from_rows()
_PARSE = {
    ".": State.EMPTY, "_": State.EMPTY,
    "R": State.RED, "X": State.RED,
    "B": State.BLUE, "O": State.BLUE,
}


class HexBoard:
    """
    Per-cell occupancy of an n×n board.

    The size is fixed at construction. Once a cell holds RED or BLUE it is
    never reset or recoloured: place() refuses occupied cells.
    """

    def __init__(self, size: int):
        self.size = size
        self.cells = np.zeros(size * size, dtype=np.int8)

    @classmethod
    def create(cls, size: int) -> "HexBoard":
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "HexBoard":
        """Build a board from text rows, e.g. ["R.B", "...", "B.R"]."""
        rows = ["".join(row.split()) for row in rows]
        n = len(rows)
        board = cls(n)
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {n}.")
            for c, ch in enumerate(row):
                try:
                    board.cells[r * n + c] = _PARSE[ch.upper()]
                except KeyError:
                    raise ValueError(f"Unknown cell character {ch!r} at {(r, c)}") from None
        return board

    # ----- addressing -----

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def coords(self, index: int) -> Move:
        return divmod(int(index), self.size)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    # ----- queries -----

    def get(self, row: int, col: int) -> State:
        return State(int(self.cells[row * self.size + col]))

    def grid(self) -> np.ndarray:
        """(n, n) view of the occupancy buffer."""
        return self.cells.reshape(self.size, self.size)

    def empty_mask(self) -> np.ndarray:
        return self.cells == State.EMPTY

    def empty_cells(self) -> List[Move]:
        return [self.coords(i) for i in np.flatnonzero(self.empty_mask())]

    def is_full(self) -> bool:
        return not self.empty_mask().any()

    def count(self, side: State) -> int:
        return int(np.count_nonzero(self.cells == side))

    # ----- mutation -----

    def place(self, row: int, col: int, side: State) -> bool:
        """
        Put a tile of `side` on (row, col).

        Returns False (AlreadyOccupied) and leaves the board untouched when the
        cell is taken. Coordinates are not range-checked here.
        """
        if side == State.EMPTY:
            raise ValueError("Cannot place an EMPTY tile.")
        idx = row * self.size + col
        if self.cells[idx] != State.EMPTY:
            return False
        self.cells[idx] = side
        return True

    def clone(self) -> "HexBoard":
        b = HexBoard.__new__(HexBoard)
        b.size = self.size
        b.cells = self.cells.copy()
        return b

    # ----- misc -----

    def to_rows(self) -> List[str]:
        ch = {State.EMPTY: ".", State.RED: "R", State.BLUE: "B"}
        g = self.grid()
        return ["".join(ch[State(int(v))] for v in g[r]) for r in range(self.size)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexBoard):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"HexBoard({self.size}, {'/'.join(self.to_rows())})"
