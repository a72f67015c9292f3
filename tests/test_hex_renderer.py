from hex_board import HexBoard
from hex_renderer import board_to_text, render_board


def test_text_layout_2x2():
    text = board_to_text(HexBoard.from_rows(["RB", ".R"]))
    assert text.split("\n") == [
        "  0   1 ",
        "0 X - O",
        "   \\ / \\",
        "  1   - X",
    ]


def test_text_rows_are_indented_one_step_each():
    lines = board_to_text(HexBoard(4)).split("\n")
    assert len(lines) == 1 + 4 + 3
    rows = lines[1::2]
    assert [len(r) - len(r.lstrip()) for r in rows] == [0, 2, 4, 6]
    assert all(r.count(" - ") == 3 for r in rows)


def test_image_is_written(tmp_path):
    out = tmp_path / "board.png"
    render_board(HexBoard.from_rows(["RB.", ".R.", "B.R"]), output=str(out), highlight=(1, 1))
    assert out.exists() and out.stat().st_size > 0
