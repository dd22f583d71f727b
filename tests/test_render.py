import pytest

from tetrafill.board import Board
from tetrafill.render import COLORS, RESET, render_row, render_text
from tetrafill.solver import solve


def test_render_solved_board():
    result = solve(2, 4, [0, 2, 0, 0, 0, 0, 0])
    assert render_text(result.grid) == "JJJJ\nJJJJ"


def test_render_board_with_empty_cells():
    board = Board(1, 4)
    assert render_text(board) == "...."
    assert render_text([[1, 0], [7, 4]]) == "I.\nZO"


def test_render_degenerate_board_is_empty():
    assert render_text(Board(3, 3)) == ""


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        render_row([8])


def test_color_wraps_each_glyph():
    line = render_row([4, 0], color=True)
    assert line == f"{COLORS[4]}O{RESET}{COLORS[0]}.{RESET}"
    assert render_row([4, 0]) == "O."
