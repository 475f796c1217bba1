import pytest

from tetro_board import Board, Collision
from tetro_piece import Piece, Point


def fill_row(board, row, skip=()):
    for c in range(board.width):
        if c not in skip:
            board.grid[row][c] = "T"


def test_new_board_is_empty(board):
    assert len(board.grid) == 16
    assert all(len(r) == 10 for r in board.grid)
    assert board.filled_count() == 0


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(0, 10)


def test_classify_point_kinds(board):
    board.grid[5][3] = "O"
    assert board.classify(Point(0, -1)) is Collision.WALL
    assert board.classify(Point(0, 10)) is Collision.WALL
    assert board.classify(Point(16, 4)) is Collision.FLOOR
    assert board.classify(Point(5, 3)) is Collision.LOCKED
    assert board.classify(Point(5, 4)) is Collision.NONE


def test_wall_checked_before_floor(board):
    # below the floor and outside the walls at once
    assert board.classify(Point(20, -3)) is Collision.WALL


def test_classify_piece_reports_first_cell_in_order(board):
    board.grid[15][4] = "I"
    # first cell hits the floor, last cell lands on the locked block
    p = Piece("I", [Point(16, 5), Point(15, 5), Point(15, 4), Point(14, 4)], Point(15, 5), 2)
    assert board.classify_piece(p) is Collision.FLOOR
    p.cells = [Point(15, 4), Point(16, 5), Point(15, 10), Point(14, 4)]
    assert board.classify_piece(p) is Collision.LOCKED


def test_lock_marks_cells(board):
    p = Piece.spawn("O", 15, 1)
    board.lock(p)
    assert board.filled_count() == 4
    assert board.occupied(14, 0) and board.occupied(15, 0)
    assert board.occupied(14, 1) and board.occupied(15, 1)
    assert board.grid[15][1] == "O"


def test_row_is_full(board):
    fill_row(board, 10, skip=(7,))
    assert not board.row_is_full(10)
    board.grid[10][7] = "J"
    assert board.row_is_full(10)


def test_clear_without_full_rows_leaves_grid(board):
    fill_row(board, 15, skip=(0,))
    board.grid[14][2] = "S"
    before = [r[:] for r in board.grid]
    assert board.clear_and_compact(15, 12) == 0
    assert board.grid == before
    assert board.last_cleared == []


def test_clear_shifts_rows_above_down(board):
    fill_row(board, 15)
    fill_row(board, 14)
    board.grid[13][3] = "Z"
    board.grid[10][8] = "L"
    before = board.filled_count()
    assert board.clear_and_compact(15, 13) == 2
    assert board.filled_count() == before - 2 * board.width
    assert board.occupied(15, 3) and board.occupied(12, 8)
    assert not board.occupied(13, 3)
    assert not any(board.grid[0]) and not any(board.grid[1])
    assert len(board.grid) == board.height


def test_clear_rechecks_index_after_removal(board):
    # two full rows separated by a partial one
    fill_row(board, 15)
    fill_row(board, 14, skip=(0,))
    fill_row(board, 13)
    assert board.clear_and_compact(15, 13) == 2
    assert board.last_cleared == [15, 13]
    assert not board.occupied(15, 0) and board.occupied(15, 1)
    assert board.filled_count() == 9


def test_completing_row_with_locked_piece(board):
    fill_row(board, 15, skip=(4,))
    board.grid[14][9] = "S"
    p = Piece.spawn("I", 1, 4)
    while p.translate(board, 1, 0):
        pass
    assert p.max_row == 15
    board.lock(p)
    assert board.clear_and_compact(p.max_row, p.min_row) == 1
    # I column drops one row and the block above row 15 lands in it
    assert board.occupied(15, 9)
    assert [board.occupied(15, c) for c in range(10)].count(True) == 2
    assert board.occupied(15, 4)
    assert not board.occupied(12, 4)


def test_clear_reports_original_indices_of_adjacent_rows(board):
    for r in range(12, 16):
        fill_row(board, r)
    board.grid[11][2] = "O"
    assert board.clear_and_compact(15, 12) == 4
    assert sorted(board.last_cleared) == [12, 13, 14, 15]
    assert board.occupied(15, 2)
    assert board.filled_count() == 1


def test_negative_row_rejected(board):
    with pytest.raises(ValueError):
        board.classify(Point(-1, 4))
