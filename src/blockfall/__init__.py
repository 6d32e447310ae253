"""Falling-block puzzle engine: board, pieces, collisions and line clears."""

from .board import Board, CellState
from .config import ConfigError, EngineConfig
from .tetromino import ShapeDefinition, Tetromino, TetrominoType, shape_blocks, shape_for
from .game_state import GameState, Intent, Phase
from .utils import FallTimer, can_move, can_place, project, render_grid

__all__ = [
    "Board",
    "CellState",
    "ConfigError",
    "EngineConfig",
    "FallTimer",
    "GameState",
    "Intent",
    "Phase",
    "ShapeDefinition",
    "Tetromino",
    "TetrominoType",
    "can_move",
    "can_place",
    "project",
    "render_grid",
    "shape_blocks",
    "shape_for",
]
