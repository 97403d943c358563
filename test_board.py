"""
Tests for the engine board.
Win detection, move application, positions and snapshots.
"""

import numpy as np
import pytest

from engine.board import Board, Cell, CellMarking, Move


# Three columns, five rows
TEST_BOARD_ROW_SIZE = 3
TEST_BOARD_COL_SIZE = 5

MARKINGS = [CellMarking.X, CellMarking.O]


def mark(board: Board, positions, marking: CellMarking):
    for pos in positions:
        board.apply_move(Move(pos, marking))


def test_has_won_row():
    """Every full row wins, for both markings."""
    for marked_row in range(TEST_BOARD_COL_SIZE):
        for marking in MARKINGS:
            board = Board.with_dimensions(TEST_BOARD_ROW_SIZE, TEST_BOARD_COL_SIZE)
            mark(board, [(marked_row, col) for col in range(TEST_BOARD_ROW_SIZE)], marking)
            assert board.has_won() == marking


def test_has_won_col():
    """Every full column wins, for both markings."""
    for marked_col in range(TEST_BOARD_ROW_SIZE):
        for marking in MARKINGS:
            board = Board.with_dimensions(TEST_BOARD_ROW_SIZE, TEST_BOARD_COL_SIZE)
            mark(board, [(row, marked_col) for row in range(TEST_BOARD_COL_SIZE)], marking)
            assert board.has_won() == marking


def test_has_won_diagonal():
    """Both corner diagonals win on non-square boards."""
    board = Board.with_dimensions(5, 3)
    mark(board, [(0, 0), (1, 1), (2, 2)], CellMarking.X)
    assert board.has_won() == CellMarking.X

    board = Board.with_dimensions(3, 5)
    mark(board, [(0, 2), (1, 1), (2, 0)], CellMarking.O)
    assert board.has_won() == CellMarking.O


def test_has_won_diagonal_incomplete():
    board = Board.with_dimensions(5, 3)
    mark(board, [(0, 0), (2, 2)], CellMarking.X)
    assert board.has_won() is None


def test_has_won_mixed_line():
    """A full line with both markings is not a win."""
    board = Board()
    mark(board, [(0, 0), (0, 2)], CellMarking.X)
    mark(board, [(0, 1)], CellMarking.O)
    assert board.has_won() is None


def test_has_won_ignores_off_corner_diagonal():
    """Only diagonals starting at a top corner are checked."""
    board = Board.with_dimensions(4, 3)
    mark(board, [(0, 1), (1, 2), (2, 3)], CellMarking.X)
    assert board.has_won() is None


def test_index_to_pos():
    """index_to_pos and cell_index are inverses on every valid position."""
    for row_size, col_size in [(3, 3), (3, 5), (5, 3), (1, 4), (4, 1)]:
        board = Board.with_dimensions(row_size, col_size)
        for row in range(board.col_size):
            for col in range(board.row_size):
                index = board.cell_index((row, col))
                assert board.index_to_pos(index) == (row, col)
        for index in range(len(board)):
            assert board.cell_index(board.index_to_pos(index)) == index


def test_default_board_is_empty_3x3():
    board = Board()
    assert (board.row_size, board.col_size) == (3, 3)
    assert len(board) == 9
    assert all(cell.is_empty for cell in board.cells)


def test_with_dimensions_rejects_non_positive():
    with pytest.raises(ValueError):
        Board.with_dimensions(0, 3)
    with pytest.raises(ValueError):
        Board.with_dimensions(3, -1)


def test_moves_row_major_order():
    board = Board.with_dimensions(3, 2)
    board.apply_move(Move((0, 1), CellMarking.X))

    moves = board.moves(CellMarking.O)
    assert [m.position for m in moves] == [(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert all(m.marking == CellMarking.O for m in moves)


def test_moves_empty_when_full():
    board = Board.with_dimensions(2, 1)
    mark(board, [(0, 0), (0, 1)], CellMarking.X)
    assert board.moves(CellMarking.O) == []
    assert board.is_full()


def test_apply_move_out_of_bounds_is_ignored():
    """Positions off the board never raise and never touch a cell."""
    board = Board()
    for pos in [(3, 0), (0, 3), (-1, 0), (0, -1), (10, 10)]:
        board.apply_move(Move(pos, CellMarking.X))
        board.undo_move(Move(pos, CellMarking.X))
        assert board.get_cell(pos) is None
    assert board == Board()


def test_apply_move_does_not_check_emptiness():
    board = Board()
    board.apply_move(Move((1, 1), CellMarking.X))
    board.apply_move(Move((1, 1), CellMarking.O))
    assert board.get_cell((1, 1)) == Cell(CellMarking.O)


def test_undo_move_clears_any_marking():
    board = Board()
    board.apply_move(Move((2, 1), CellMarking.O))
    board.undo_move(Move((2, 1), CellMarking.X))
    assert board.get_cell((2, 1)).is_empty


def test_to_string():
    board = Board.with_dimensions(3, 2)
    board.apply_move(Move((0, 0), CellMarking.X))
    board.apply_move(Move((1, 2), CellMarking.O))
    assert board.to_string() == "X__\n__O\n"
    assert str(board) == board.to_string()


def test_reset():
    board = Board.with_dimensions(4, 2)
    mark(board, [(0, 0), (1, 3)], CellMarking.X)
    board.reset()
    assert board == Board.with_dimensions(4, 2)


def test_copy_is_independent():
    board = Board()
    board.apply_move(Move((0, 0), CellMarking.X))
    copied = board.copy()
    copied.apply_move(Move((1, 1), CellMarking.O))

    assert board.get_cell((1, 1)).is_empty
    assert copied != board


def test_winning_line():
    board = Board()
    assert board.winning_line() is None

    mark(board, [(0, 2), (1, 1), (2, 0)], CellMarking.O)
    assert board.winning_line() == [(0, 2), (1, 1), (2, 0)]


def test_is_draw():
    board = Board.from_array([
        [1, -1, 1],
        [1, -1, -1],
        [-1, 1, 1],
    ])
    assert board.has_won() is None
    assert board.is_draw()


def test_to_array():
    board = Board.with_dimensions(3, 2)
    board.apply_move(Move((0, 1), CellMarking.X))
    board.apply_move(Move((1, 0), CellMarking.O))

    grid = board.to_array()
    assert grid.dtype == np.int8
    assert grid.shape == (2, 3)
    assert grid.tolist() == [[0, 1, 0], [-1, 0, 0]]
    assert Board.from_array(grid) == board


def test_from_array_rejects_bad_grids():
    with pytest.raises(ValueError):
        Board.from_array([[0, 2, 0]])
    with pytest.raises(ValueError):
        Board.from_array([0, 1, -1])

