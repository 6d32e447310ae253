"""Utility helpers for the engine: collision, landing projection and timing."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .board import Board
from .tetromino import Tetromino


def can_move(board: Board, tetromino: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``tetromino`` can move by ``dx`` and ``dy`` on ``board``.

    Blocks must stay within the board's columns and above its floor.  Blocks
    above the top row are always legal and are not checked for occupancy;
    every other destination cell must be empty.
    """

    for x, y in tetromino.blocks():
        new_x = x + dx
        new_y = y + dy
        if not 0 <= new_x < board.width or new_y < 0:
            return False
        if new_y < board.height and board.is_occupied(new_x, new_y):
            return False
    return True


def can_place(board: Board, tetromino: Tetromino) -> bool:
    """Return ``True`` if ``tetromino`` fits on ``board`` at its current pose."""

    return can_move(board, tetromino, 0, 0)


def project(board: Board, tetromino: Tetromino) -> Tetromino:
    """Return a copy of ``tetromino`` dropped to its lowest legal position.

    Neither ``board`` nor ``tetromino`` is modified.  A piece that does not
    currently fit is returned unmoved.
    """

    ghost = replace(tetromino)
    while can_move(board, ghost, 0, -1):
        ghost.move(0, -1)
    return ghost


def render_grid(
    board: Board,
    active: Optional[Tetromino] = None,
    ghost: Optional[Tetromino] = None,
) -> List[str]:
    """Return text rows of the board, top row first.

    Locked cells render as ``#``, the active piece as ``@`` and its landing
    projection as ``+``.  Nothing is locked, so the board is left untouched.
    """

    rows = [["#" if cell else "." for cell in board.grid[y]] for y in range(board.height)]
    for piece, mark in ((ghost, "+"), (active, "@")):
        if piece is None:
            continue
        for x, y in piece.blocks():
            if 0 <= x < board.width and 0 <= y < board.height:
                rows[y][x] = mark
    return ["".join(row) for row in reversed(rows)]


class FallTimer:
    """Accumulate elapsed time and report how many gravity ticks are due.

    The engine keeps no timing state; a frame loop feeds ``advance`` with the
    seconds since the previous frame and calls ``on_fall_tick`` once per
    returned tick.
    """

    def __init__(self, fall_cycle: float) -> None:
        if fall_cycle <= 0:
            raise ValueError("fall_cycle must be positive")
        self.fall_cycle = fall_cycle
        self.elapsed = 0.0

    def advance(self, seconds: float) -> int:
        self.elapsed += seconds
        ticks = int(self.elapsed // self.fall_cycle)
        self.elapsed -= ticks * self.fall_cycle
        return ticks

    def reset(self) -> None:
        self.elapsed = 0.0
