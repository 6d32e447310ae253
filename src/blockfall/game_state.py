"""High level game state container and piece controller.

:class:`GameState` owns the board and the single active tetromino.  It is
driven from outside: an input layer calls :meth:`GameState.handle_intent` once
per player action and a timer calls :meth:`GameState.on_fall_tick` once per
fall cycle.  Renderers poll :meth:`occupied_cells`, :meth:`active_piece_cells`
and :meth:`ghost_cells`.

The controller cycles through the phases ``SPAWNING -> FALLING -> LOCKING ->
CLEARING -> SPAWNING``.  A piece locks only when a plain downward move fails;
failed sideways moves and rotations leave the piece exactly where it was.
``GAME_OVER`` is entered only when a freshly spawned piece does not fit.
Blocks of a locking piece that lie above the visible board are discarded.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .board import Board
from .config import EngineConfig
from .tetromino import SHAPE_ORDER, VALUE_COLORS, Color, Tetromino, TetrominoType
from .utils import can_place, project


LOGGER = logging.getLogger(__name__)


class Intent(str, Enum):
    """Discrete player actions accepted by :meth:`GameState.handle_intent`."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"


class Phase(str, Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    CLEARING = "clearing"
    GAME_OVER = "game_over"


# (dx, dy, rotate) for every intent resolved by a single move attempt.
_INTENT_MOVES: Dict[Intent, Tuple[int, int, bool]] = {
    Intent.MOVE_LEFT: (-1, 0, False),
    Intent.MOVE_RIGHT: (1, 0, False),
    Intent.SOFT_DROP: (0, -1, False),
    Intent.ROTATE: (0, 0, True),
}


class GameState:
    """Mutable state for a game session.

    Parameters
    ----------
    config:
        Board size and fall cycle.  Defaults to a 10x20 board.
    rng:
        Source of shape indices.  Anything with a ``randrange`` method works;
        defaults to :class:`random.Random` seeded from ``config.seed``.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.board = Board(self.config.width, self.config.height)
        self.active: Optional[Tetromino] = None
        self.ghost: Optional[Tetromino] = None
        self.phase = Phase.SPAWNING
        self.pieces = 0
        self.last_cleared = 0
        self.spawn_tetromino()

    @property
    def spawn_anchor(self) -> Tuple[int, int]:
        """Anchor of new pieces: horizontal centre of the top row."""

        return (self.board.width // 2, self.board.height - 1)

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def _set_phase(self, phase: Phase) -> None:
        LOGGER.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _random_type(self) -> TetrominoType:
        """Return a uniformly drawn tetromino type."""

        return SHAPE_ORDER[self.rng.randrange(len(SHAPE_ORDER))]

    def _refresh_ghost(self) -> None:
        self.ghost = project(self.board, self.active) if self.active else None

    def spawn_tetromino(self, shape: Optional[TetrominoType] = None) -> Optional[Tetromino]:
        """Spawn and return a new active tetromino.

        ``shape`` defaults to a random draw.  The piece starts at
        :attr:`spawn_anchor` with no rotation.  If it does not fit, the game is
        over and ``None`` is returned.
        """

        self._set_phase(Phase.SPAWNING)
        if shape is None:
            shape = self._random_type()
        piece = Tetromino(shape, rotation=0, anchor=self.spawn_anchor)
        if not can_place(self.board, piece):
            self.active = None
            self.ghost = None
            LOGGER.info("Game over: %s piece cannot spawn at %s", shape.value, piece.anchor)
            self._set_phase(Phase.GAME_OVER)
            return None

        self.active = piece
        self._refresh_ghost()
        self._set_phase(Phase.FALLING)
        return piece

    def attempt_move(self, dx: int, dy: int, rotate: bool = False) -> bool:
        """Try to translate and/or rotate the active piece.

        On collision the previous pose is restored and ``False`` is returned.
        A failed pure downward move (``dx == 0``, ``dy == -1``) additionally
        locks the piece, clears full rows and spawns the next piece.
        """

        if self.phase is not Phase.FALLING or self.active is None:
            return False

        piece = self.active
        old_anchor, old_rotation = piece.anchor, piece.rotation
        piece.move(dx, dy)
        if rotate:
            piece.rotate()

        if can_place(self.board, piece):
            self._refresh_ghost()
            return True

        piece.anchor = old_anchor
        piece.rotation = old_rotation
        if dx == 0 and dy == -1 and not rotate:
            self._lock_active()
        return False

    def _lock_active(self) -> None:
        """Write the active piece into the board and continue with the next one."""

        self._set_phase(Phase.LOCKING)
        piece = self.active
        self.active = None
        self.ghost = None
        self.last_cleared = 0
        landed = self.board.lock_piece(piece)
        self.pieces += 1
        if not landed:
            LOGGER.debug("Dropped %s blocks above the board", piece.shape.value)

        self._set_phase(Phase.CLEARING)
        self.last_cleared = self.board.clear_full_rows()
        if self.last_cleared:
            LOGGER.info("Cleared %d row(s)", self.last_cleared)
        self.spawn_tetromino()

    def hard_drop(self) -> int:
        """Drop the active piece until it locks and return the rows fallen."""

        if self.phase is not Phase.FALLING:
            return 0
        dropped = 0
        while self.attempt_move(0, -1):
            dropped += 1
        return dropped

    def on_fall_tick(self) -> bool:
        """Apply one gravity step; identical to a soft drop."""

        return self.attempt_move(0, -1)

    def handle_intent(self, intent: Intent) -> bool:
        """Apply one player intent and return whether it took effect.

        Intents are ignored once the game is over.
        """

        intent = Intent(intent)
        if self.game_over:
            LOGGER.debug("Ignoring %s after game over", intent.value)
            return False
        if intent is Intent.HARD_DROP:
            self.hard_drop()
            return True
        dx, dy, rotate = _INTENT_MOVES[intent]
        return self.attempt_move(dx, dy, rotate)

    def occupied_cells(self) -> List[Tuple[int, int, Color]]:
        """Return ``(x, y, color)`` for every locked cell."""

        return [(x, y, VALUE_COLORS[value]) for x, y, value in self.board.occupied_cells()]

    def active_piece_cells(self) -> List[Tuple[int, int, Color]]:
        if self.active is None:
            return []
        color = self.active.color
        return [(x, y, color) for x, y in self.active.blocks()]

    def ghost_cells(self) -> List[Tuple[int, int]]:
        if self.ghost is None:
            return []
        return self.ghost.blocks()

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        LOGGER.info("Resetting game")
        self.board = Board(self.config.width, self.config.height)
        self.active = None
        self.ghost = None
        self.phase = Phase.SPAWNING
        self.pieces = 0
        self.last_cleared = 0
        self.spawn_tetromino()
