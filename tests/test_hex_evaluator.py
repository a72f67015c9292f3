from collections import deque

import numpy as np
import pytest

from hex_adjacency import neighbors
from hex_board import HexBoard, State
from hex_evaluator import reachable, winner, wins


def bfs_connected(board: HexBoard, side: State) -> bool:
    """Independent verifier: plain BFS over (row, col) neighbours."""
    n = board.size
    if side == State.RED:
        starts = [(0, c) for c in range(n) if board.get(0, c) == side]
        done = lambda r, c: r == n - 1
    else:
        starts = [(r, 0) for r in range(n) if board.get(r, 0) == side]
        done = lambda r, c: c == n - 1
    seen = set(starts)
    q = deque(starts)
    while q:
        r, c = q.popleft()
        if done(r, c):
            return True
        for nr, nc in neighbors(n, r, c):
            if (nr, nc) not in seen and board.get(nr, nc) == side:
                seen.add((nr, nc))
                q.append((nr, nc))
    return False


def random_board(n, rng, fill=1.0):
    b = HexBoard(n)
    mask = rng.random(n * n) < fill
    b.cells[mask] = rng.integers(1, 3, size=int(mask.sum()))
    return b


def test_empty_board_has_no_winner(adjacency):
    b = HexBoard(4)
    assert not wins(b, adjacency(4), State.RED)
    assert not wins(b, adjacency(4), State.BLUE)
    assert winner(b, adjacency(4)) == State.EMPTY


def test_staircase_wins_for_red(adjacency):
    b = HexBoard(4)
    for r, c in [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 2), (3, 3)]:
        b.place(r, c, State.RED)
    assert wins(b, adjacency(4), State.RED)
    assert not wins(b, adjacency(4), State.BLUE)
    assert winner(b, adjacency(4)) == State.RED


def test_blue_row_wins(adjacency):
    b = HexBoard.from_rows(["....", "....", "BBBB", "...."])
    assert wins(b, adjacency(4), State.BLUE)
    assert not wins(b, adjacency(4), State.RED)


def test_anti_diagonal_connects_both_ways(adjacency):
    path = ["...X", "..X.", ".X..", "X..."]
    assert wins(HexBoard.from_rows(path), adjacency(4), State.RED)
    blue = [row.replace("X", "O") for row in path]
    assert wins(HexBoard.from_rows(blue), adjacency(4), State.BLUE)


def test_main_diagonal_is_not_a_chain(adjacency):
    b = HexBoard.from_rows(["R...", ".R..", "..R.", "...R"])
    assert not wins(b, adjacency(4), State.RED)
    b = HexBoard.from_rows(["B...", ".B..", "..B.", "...B"])
    assert not wins(b, adjacency(4), State.BLUE)


@pytest.mark.parametrize("cut", range(4))
def test_removing_a_cut_cell_breaks_the_chain(adjacency, cut):
    rows = [".R..", ".R..", ".R..", ".R.."]
    assert wins(HexBoard.from_rows(rows), adjacency(4), State.RED)
    rows[cut] = "...."
    assert not wins(HexBoard.from_rows(rows), adjacency(4), State.RED)


def test_chain_must_start_on_the_first_border(adjacency):
    # touches the south row but not the north row
    b = HexBoard.from_rows(["....", ".R..", ".R..", ".R.."])
    assert not wins(b, adjacency(4), State.RED)
    assert not reachable(b, adjacency(4), State.RED).any()


def test_single_cell_board(adjacency):
    assert wins(HexBoard.from_rows(["R"]), adjacency(1), State.RED)
    assert wins(HexBoard.from_rows(["B"]), adjacency(1), State.BLUE)
    assert not wins(HexBoard.from_rows(["B"]), adjacency(1), State.RED)


def test_reachable_marks_only_connected_own_cells(adjacency):
    b = HexBoard.from_rows(["RB.", "R.R", "..R"])
    got = reachable(b, adjacency(3), State.RED).reshape(3, 3)
    assert got.tolist() == [
        [True, False, False],
        [True, False, False],
        [False, False, False],
    ]


def test_inputs_are_not_modified(adjacency):
    b = HexBoard.from_rows(["RB..", ".R..", ".RB.", "..R."])
    before = b.clone()
    wins(b, adjacency(4), State.RED)
    wins(b, adjacency(4), State.BLUE)
    assert b == before


@pytest.mark.parametrize("n", [2, 3, 4, 5, 7])
def test_full_board_has_exactly_one_winner(adjacency, n):
    rng = np.random.default_rng(n)
    for _ in range(60):
        b = random_board(n, rng)
        assert wins(b, adjacency(n), State.RED) != wins(b, adjacency(n), State.BLUE)


def test_alternating_full_game_has_exactly_one_winner(adjacency):
    rng = np.random.default_rng(11)
    n = 6
    b = HexBoard(n)
    side = State.RED
    for idx in rng.permutation(n * n):
        assert b.place(*b.coords(idx), side)
        side = side.opponent()
    assert b.is_full()
    assert winner(b, adjacency(n)) != State.EMPTY
    assert wins(b, adjacency(n), State.RED) != wins(b, adjacency(n), State.BLUE)


@pytest.mark.parametrize("n", [3, 5, 8])
def test_agrees_with_independent_bfs(adjacency, n):
    rng = np.random.default_rng(100 + n)
    for _ in range(80):
        b = random_board(n, rng, fill=rng.uniform(0.3, 0.9))
        for side in (State.RED, State.BLUE):
            assert wins(b, adjacency(n), side) == bfs_connected(b, side)


def test_empty_is_not_a_side(adjacency):
    with pytest.raises(ValueError):
        wins(HexBoard(3), adjacency(3), State.EMPTY)
