import logging

import pytest

from hex_board import HexBoard, State
from hex_evaluator import wins
from hex_game import HexGame


def test_new_game():
    g = HexGame(4, State.RED, repeats=20, rng=0)
    assert g.current == State.RED
    assert g.computer == State.BLUE
    assert not g.is_over
    assert g.board.is_full() is False
    assert g.moves == []


def test_turns_alternate():
    g = HexGame(4, State.RED, repeats=30, rng=1)
    assert g.play_human(1, 1)
    assert g.current == State.BLUE
    with pytest.raises(ValueError):
        g.play_human(2, 2)
    move = g.play_computer()
    assert move != (1, 1)
    assert g.board.get(*move) == State.BLUE
    assert g.current == State.RED
    assert g.moves == [(1, 1), move]


def test_occupied_cell_is_refused():
    g = HexGame(4, State.RED, repeats=30, rng=2)
    g.play_human(0, 0)
    taken = g.play_computer()
    assert not g.play_human(*taken)
    assert not g.play_human(0, 0)
    assert g.current == State.RED
    assert len(g.moves) == 2


def test_out_of_range_is_rejected():
    g = HexGame(3, State.RED, repeats=10, rng=0)
    with pytest.raises(ValueError):
        g.play_human(3, 0)
    with pytest.raises(ValueError):
        g.play_human(0, -1)


def test_computer_moves_first_as_red():
    g = HexGame(3, State.BLUE, repeats=20, rng=3)
    assert g.computer == State.RED
    with pytest.raises(ValueError):
        g.play_human(0, 0)
    g.play_computer()
    assert g.board.count(State.RED) == 1
    assert g.current == State.BLUE


def test_game_runs_to_a_single_winner():
    g = HexGame(3, State.RED, repeats=25, rng=4)
    while not g.is_over:
        if g.current == g.human:
            assert g.play_human(*g.board.empty_cells()[-1])
        else:
            g.play_computer()
    assert g.winner in (State.RED, State.BLUE)
    assert wins(g.board, g.adjacency, g.winner)
    assert not wins(g.board, g.adjacency, g.winner.opponent())
    assert len(g.moves) <= 9
    with pytest.raises(ValueError):
        g.play_computer()


def test_occupied_fallback_plays_first_empty_cell(caplog):
    g = HexGame(4, State.BLUE, repeats=50, rng=5)
    g.board = HexBoard.from_rows(["RRRR", "BBBB", "RRRR", "RRR."])
    with caplog.at_level(logging.WARNING, logger="hex_game"):
        move = g.play_computer()
    assert move == (3, 3)
    assert g.board.get(3, 3) == State.RED
    assert "occupied" in caplog.text


def test_invalid_construction():
    with pytest.raises(ValueError):
        HexGame(0)
    with pytest.raises(ValueError):
        HexGame(3, State.EMPTY)
