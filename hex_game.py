# hex_game.py
#
# One human-vs-computer game: the real board, whose turn it is, and the
# winner once somebody connects. Red always moves first.

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

import monte_carlo_player
from hex_adjacency import build_adjacency
from hex_board import HexBoard, Move, State
from hex_config import DEFAULT_REPEATS, DEFAULT_SIZE
from hex_evaluator import wins

logger = logging.getLogger(__name__)


class HexGame:
    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        human: State = State.RED,
        repeats: int = DEFAULT_REPEATS,
        workers: int = 1,
        rng: np.random.Generator | int | None = None,
    ):
        if size <= 0:
            raise ValueError("Board size must be a positive integer.")
        if human == State.EMPTY:
            raise ValueError("The human must play RED or BLUE.")
        self.size = size
        self.human = State(human)
        self.computer = self.human.opponent()
        self.repeats = repeats
        self.workers = workers
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

        self.board = HexBoard(size)
        self.adjacency = build_adjacency(size)
        self.current = State.RED
        self.winner = State.EMPTY
        self.moves: List[Move] = []

    @property
    def is_over(self) -> bool:
        return self.winner != State.EMPTY

    def _commit(self, row: int, col: int, side: State) -> bool:
        if not self.board.place(row, col, side):
            return False
        self.moves.append((row, col))
        if wins(self.board, self.adjacency, side):
            self.winner = side
        else:
            self.current = side.opponent()
        return True

    def play_human(self, row: int, col: int) -> bool:
        """
        Commit the human's move. Returns False if the cell is already taken.
        """
        if self.is_over:
            raise ValueError("Game finished.")
        if self.current != self.human:
            raise ValueError("It is not the human's turn.")
        if not self.board.in_bounds(row, col):
            raise ValueError(f"Move out of bounds: {(row, col)}")
        return self._commit(row, col, self.human)

    def play_computer(self) -> Move:
        if self.is_over:
            raise ValueError("Game finished.")
        if self.current != self.computer:
            raise ValueError("It is not the computer's turn.")

        row, col = monte_carlo_player.choose_move(
            self.board, self.adjacency, self.computer, self.human,
            repeats=self.repeats, rng=self.rng, workers=self.workers,
        )
        if not self._commit(row, col, self.computer):
            # the selector's (0, 0) fallback can name a taken cell
            row, col = self.board.empty_cells()[0]
            logger.warning("Selected cell is occupied, playing first empty cell %s instead", (row, col))
            self._commit(row, col, self.computer)
        return (row, col)

    def last_stats(self) -> Optional[monte_carlo_player.SearchStats]:
        return monte_carlo_player.get_last_stats()
