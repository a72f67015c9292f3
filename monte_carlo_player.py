# monte_carlo_player.py
#
# Strategy:
#   1. Remember which cells each side already owns.
#   2. Repeat `repeats` times: copy the board, hand every empty cell to the
#      computer or the opponent with a fair coin, and check both sides.
#      • computer connected → +1 victory on each computer cell it did not already own
#      • opponent connected → +1 loss on each opponent cell it did not already own
#   3. Scan the cells row-major against a running best (starting at 0). A cell
#      with losses takes the lead if victories // losses beats the best;
#      otherwise any cell takes it if its raw victories do. Ties keep the
#      first cell, and if nothing beats zero the answer is (0, 0).
#
# The coin flips ignore turn order, so a random completion is not a legal game
# continuation. Playouts are independent; with workers > 1 they are split into
# chunks that run in separate processes and the tallies are summed.

from __future__ import annotations

import logging
import multiprocessing as mp
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from hex_board import HexBoard, Move, State
from hex_config import DEFAULT_REPEATS
from hex_evaluator import wins

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]


@dataclass
class Tally:
    victories: np.ndarray        # per cell, flat r*n + c
    losses: np.ndarray
    computer_wins: int = 0       # playouts the computer connected in
    opponent_wins: int = 0
    playouts: int = 0

    @classmethod
    def zeros(cls, cells: int) -> "Tally":
        return cls(np.zeros(cells, dtype=np.int64), np.zeros(cells, dtype=np.int64))

    def merge(self, other: "Tally") -> "Tally":
        self.victories += other.victories
        self.losses += other.losses
        self.computer_wins += other.computer_wins
        self.opponent_wins += other.opponent_wins
        self.playouts += other.playouts
        return self


@dataclass
class SearchStats:
    board_size: int
    empty_cells: int
    repeats: int
    workers: int
    duration: float
    computer_wins: int
    opponent_wins: int
    best_score: int
    move: Move


_last_stats: Optional[SearchStats] = None


def get_last_stats() -> Optional[SearchStats]:
    return _last_stats


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


# ----------------------------- playouts ------------------------------

def _run_playouts(
    board: HexBoard,
    adjacency: np.ndarray,
    computer: State,
    opponent: State,
    repeats: int,
    rng: np.random.Generator,
) -> Tally:
    played_by_computer = board.cells == computer
    played_by_opponent = board.cells == opponent
    tally = Tally.zeros(board.size * board.size)

    for _ in range(repeats):
        trial = board.clone()
        empty = trial.cells == State.EMPTY
        coins = rng.integers(0, 2, size=int(np.count_nonzero(empty)))
        trial.cells[empty] = np.where(coins == 0, int(computer), int(opponent))

        if wins(trial, adjacency, computer):
            tally.victories += (trial.cells == computer) & ~played_by_computer
            tally.computer_wins += 1
        if wins(trial, adjacency, opponent):
            tally.losses += (trial.cells == opponent) & ~played_by_opponent
            tally.opponent_wins += 1
        tally.playouts += 1

    return tally


def _playout_task(payload: Dict[str, Any]) -> Tally:
    """Worker entry point: one chunk of playouts with its own seed."""
    return _run_playouts(
        payload["board"],
        payload["adjacency"],
        payload["computer"],
        payload["opponent"],
        payload["repeats"],
        np.random.default_rng(payload["seed"]),
    )


def _split_repeats(repeats: int, workers: int) -> List[int]:
    base, extra = divmod(repeats, workers)
    chunks = [base + (1 if i < extra else 0) for i in range(workers)]
    return [c for c in chunks if c > 0]


def simulate(
    board: HexBoard,
    adjacency: np.ndarray,
    computer: State,
    opponent: State,
    repeats: int = DEFAULT_REPEATS,
    rng: RandomSource = None,
    workers: int = 1,
) -> Tally:
    """
    Run `repeats` random completions of `board` and tally them.

    With workers > 1 the chunk seeds are drawn from `rng` up front, so a given
    seed yields the same tally whatever order the workers finish in.
    """
    if repeats <= 0:
        raise ValueError("Number of simulations is not positive.")
    if workers <= 0:
        raise ValueError("Number of workers is not positive.")
    gen = _as_generator(rng)

    if workers == 1:
        return _run_playouts(board, adjacency, computer, opponent, repeats, gen)

    chunks = _split_repeats(repeats, workers)
    seeds = gen.integers(0, 2**32, size=len(chunks))
    tasks = [
        {
            "board": board,
            "adjacency": adjacency,
            "computer": computer,
            "opponent": opponent,
            "repeats": chunk,
            "seed": int(seed),
        }
        for chunk, seed in zip(chunks, seeds)
    ]

    # spawn behaves the same on every platform
    ctx = mp.get_context("spawn")
    with ctx.Pool(processes=len(tasks)) as pool:
        parts = pool.map(_playout_task, tasks)

    tally = Tally.zeros(board.size * board.size)
    for part in parts:
        tally.merge(part)
    return tally


# ----------------------------- selection -----------------------------

def scan_cells(tally: Tally) -> Tuple[int, int]:
    """
    Row-major scan with a running best starting at 0. A cell with losses
    first competes on victories // losses; when that does not beat the best
    (or the cell has no losses) it competes on raw victories. Strict `>`
    keeps the first cell on ties.

    Returns (flat index, best score); the index is 0 when nothing beat 0.
    """
    best, choice = 0, 0
    for i, (won, lost) in enumerate(zip(tally.victories.tolist(), tally.losses.tolist())):
        if lost > 0 and won // lost > best:
            best, choice = won // lost, i
        elif won > best:
            best, choice = won, i
    return choice, best


def select_cell(tally: Tally, size: int) -> Move:
    return divmod(scan_cells(tally)[0], size)


# ----------------------------- public API ----------------------------

def choose_move(
    board: HexBoard,
    adjacency: np.ndarray,
    computer: State,
    opponent: State,
    repeats: int = DEFAULT_REPEATS,
    rng: RandomSource = None,
    workers: int = 1,
) -> Move:
    """
    Parameters
    ----------
    board     : current position (left untouched)
    adjacency : matrix from hex_adjacency.build_adjacency(board.size)
    computer  : side to move
    opponent  : the other side
    repeats   : random playouts for this decision
    rng       : seed or numpy Generator; a fixed seed gives a fixed answer
    workers   : processes to spread the playouts over

    Returns the chosen (row, col). The caller commits it with board.place().
    """
    global _last_stats

    n_empty = int(np.count_nonzero(board.empty_mask()))
    if n_empty == 0:
        raise ValueError("No legal moves left (board is full).")

    t0 = time.perf_counter()
    tally = simulate(board, adjacency, computer, opponent, repeats, rng, workers)
    index, best_score = scan_cells(tally)
    move = divmod(index, board.size)
    duration = time.perf_counter() - t0

    logger.debug(
        "playouts=%d computer_wins=%d opponent_wins=%d best_score=%d in %.3fs",
        tally.playouts, tally.computer_wins, tally.opponent_wins, best_score, duration,
    )
    if best_score <= 0:
        logger.debug("no cell scored above zero, falling back to %s", move)
    logger.info("%s chooses %s after %d playouts", computer.name, move, repeats)

    _last_stats = SearchStats(
        board_size=board.size,
        empty_cells=n_empty,
        repeats=repeats,
        workers=workers,
        duration=duration,
        computer_wins=tally.computer_wins,
        opponent_wins=tally.opponent_wins,
        best_score=best_score,
        move=move,
    )
    return move
