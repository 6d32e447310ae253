"""Board representation for the playfield.

The grid is stored as a ``(height, width)`` numpy array indexed ``grid[y, x]``
with row ``0`` at the bottom of the board.  Rows at or above ``height`` are
not stored; they always read as empty so pieces can spawn and rotate partly
above the visible board.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Tetromino


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]


class CellState(Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"
    OUT_OF_BOUNDS = "out_of_bounds"


class Board:
    """Board holding the locked cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = np.zeros((height, width), dtype=np.uint8)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) out of bounds")

    def cell_state(self, x: int, y: int) -> CellState:
        """Classify ``(x, y)`` as empty, occupied or outside the board.

        Columns outside ``[0, width)`` and rows below ``0`` are out of bounds.
        Rows at or above ``height`` are empty.
        """

        if not 0 <= x < self.width or y < 0:
            return CellState.OUT_OF_BOUNDS
        if y >= self.height or self.grid[y, x] == 0:
            return CellState.EMPTY
        return CellState.OCCUPIED

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` holds a locked block.

        Raises:
            IndexError: If ``x`` is outside the board or ``y`` is below the
                floor.
        """

        state = self.cell_state(x, y)
        if state is CellState.OUT_OF_BOUNDS:
            raise IndexError(f"Cell ({x}, {y}) out of bounds")
        return state is CellState.OCCUPIED

    def get_cell(self, x: int, y: int) -> int:
        """Return the shape value stored at ``(x, y)``, ``0`` when empty."""

        self._check_bounds(x, y)
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Mark ``(x, y)`` occupied with ``value``.

        Raises:
            IndexError: If the coordinates are outside the board.
            ValueError: If ``value`` is zero, which denotes an empty cell.
        """

        self._check_bounds(x, y)
        if value == 0:
            raise ValueError("Occupied cells need a non-zero value")
        self.grid[y, x] = np.uint8(value)

    def clear_cell(self, x: int, y: int) -> None:
        self._check_bounds(x, y)
        self.grid[y, x] = 0

    def is_row_full(self, y: int) -> bool:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of bounds")
        return bool(np.all(self.grid[y] != 0))

    def compact_from(self, cleared_row: int) -> None:
        """Shift every row above ``cleared_row`` down by one.

        ``cleared_row`` is overwritten and the top row becomes empty.
        """

        if not 0 <= cleared_row < self.height:
            raise IndexError(f"Row {cleared_row} out of bounds")
        self.grid[cleared_row:-1] = self.grid[cleared_row + 1 :]
        self.grid[-1] = 0

    def lock_piece(self, tetromino: Tetromino) -> bool:
        """Lock the tetromino's blocks into the board grid.

        Blocks above the visible board are not stored.  Returns ``True`` if
        every block landed on the board, ``False`` if some were dropped.

        Raises:
            IndexError: If a block lies left, right or below the board.
        """

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        xs, ys = coordinates.T
        if np.any(xs < 0) or np.any(xs >= self.width) or np.any(ys < 0):
            raise IndexError("Block out of bounds")

        visible = ys < self.height
        self.grid[ys[visible], xs[visible]] = np.uint8(tetromino.value)
        return bool(np.all(visible))

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned bottom-up.  After a full row is cleared the rows above
        drop by one, so the same index is scanned again before moving on.
        """

        cleared = 0
        y = 0
        while y < self.height:
            if self.is_row_full(y):
                self.grid[y] = 0
                self.compact_from(y)
                cleared += 1
            else:
                y += 1
        return cleared

    scan_and_clear = clear_full_rows

    def occupied_cells(self) -> List[Tuple[int, int, int]]:
        """Return ``(x, y, value)`` for every locked cell, bottom row first."""

        ys, xs = np.nonzero(self.grid)
        return [(int(x), int(y), int(self.grid[y, x])) for y, x in zip(ys, xs)]
