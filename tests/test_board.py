import numpy as np
import pytest

from blockfall.board import Board, CellState
from blockfall.tetromino import Tetromino, TetrominoType


def test_cell_state_distinguishes_out_of_bounds_from_empty():
    board = Board(4, 5)
    assert board.cell_state(-1, 0) is CellState.OUT_OF_BOUNDS
    assert board.cell_state(4, 0) is CellState.OUT_OF_BOUNDS
    assert board.cell_state(0, -1) is CellState.OUT_OF_BOUNDS
    assert board.cell_state(0, 0) is CellState.EMPTY
    # Rows above the board always read as empty.
    assert board.cell_state(0, 5) is CellState.EMPTY
    assert board.cell_state(3, 12) is CellState.EMPTY
    board.set_cell(1, 1, 3)
    assert board.cell_state(1, 1) is CellState.OCCUPIED


def test_is_occupied_raises_outside_columns_and_below_floor():
    board = Board(4, 5)
    with pytest.raises(IndexError):
        board.is_occupied(0, -1)
    with pytest.raises(IndexError):
        board.is_occupied(4, 2)
    assert board.is_occupied(2, 7) is False
    board.set_cell(2, 4, 1)
    assert board.is_occupied(2, 4) is True


def test_set_and_clear_cell_preconditions():
    board = Board(4, 5)
    with pytest.raises(IndexError):
        board.set_cell(0, 5, 1)
    with pytest.raises(IndexError):
        board.set_cell(-1, 0, 1)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, 0)
    board.set_cell(3, 4, 7)
    assert board.get_cell(3, 4) == 7
    board.clear_cell(3, 4)
    assert board.get_cell(3, 4) == 0
    with pytest.raises(IndexError):
        board.clear_cell(3, 5)


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Board(0, 5)


def test_is_row_full():
    board = Board(4, 5)
    for x in range(3):
        board.set_cell(x, 2, 1)
    assert not board.is_row_full(2)
    board.set_cell(3, 2, 1)
    assert board.is_row_full(2)


@pytest.mark.parametrize("row", [-1, 5])
def test_is_row_full_rejects_rows_outside_board(row):
    board = Board(4, 5)
    board.grid[4] = 1
    with pytest.raises(IndexError):
        board.is_row_full(row)


def test_compact_from_shifts_rows_above_down():
    board = Board(4, 5)
    board.set_cell(0, 1, 1)
    board.set_cell(1, 2, 2)
    board.set_cell(2, 4, 3)
    board.compact_from(1)
    assert board.occupied_cells() == [(1, 1, 2), (2, 3, 3)]
    assert not np.any(board.grid[4])


def test_clear_non_contiguous_rows_preserves_other_rows():
    board = Board(4, 8)
    for y in (2, 4):
        for x in range(4):
            board.set_cell(x, y, 1)
    board.set_cell(0, 0, 2)
    board.set_cell(1, 1, 3)
    board.set_cell(2, 3, 4)
    board.set_cell(3, 5, 5)
    board.set_cell(0, 6, 6)
    board.set_cell(1, 7, 7)

    assert board.scan_and_clear() == 2
    assert sorted(board.occupied_cells()) == sorted(
        [(0, 0, 2), (1, 1, 3), (2, 2, 4), (3, 3, 5), (0, 4, 6), (1, 5, 7)]
    )
    assert not np.any(board.grid[6:])


def test_clear_four_contiguous_rows_cascades():
    board = Board(4, 6)
    for y in range(4):
        for x in range(4):
            board.set_cell(x, y, 1)
    board.set_cell(2, 4, 5)
    assert board.clear_full_rows() == 4
    assert board.occupied_cells() == [(2, 0, 5)]


def test_full_board_clears_to_empty():
    board = Board(5, 5)
    board.grid[:] = 3
    assert board.clear_full_rows() == 5
    assert not np.any(board.grid)


def test_no_full_rows_leaves_board_untouched():
    board = Board(4, 5)
    board.set_cell(0, 0, 1)
    before = board.grid.copy()
    assert board.clear_full_rows() == 0
    assert np.array_equal(board.grid, before)


def test_lock_piece_writes_shape_value():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.O, anchor=(0, 0))
    assert board.lock_piece(piece) is True
    assert sorted(board.occupied_cells()) == [(0, 0, 4), (0, 1, 4), (1, 0, 4), (1, 1, 4)]


def test_lock_piece_drops_blocks_above_board():
    board = Board(4, 5)
    piece = Tetromino(TetrominoType.I, rotation=1, anchor=(2, 4))
    assert board.lock_piece(piece) is False
    assert sorted((x, y) for x, y, _ in board.occupied_cells()) == [(2, 2), (2, 3), (2, 4)]


def test_lock_piece_outside_columns_raises():
    board = Board(4, 5)
    with pytest.raises(IndexError):
        board.lock_piece(Tetromino(TetrominoType.I, anchor=(0, 0)))
