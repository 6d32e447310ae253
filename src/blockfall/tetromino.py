"""Tetromino catalog and the active falling piece.

Each of the seven shapes is a set of four ``(x, y)`` offsets relative to the
piece's anchor, with ``y`` growing upwards.  Rotations are quarter turns
counter-clockwise about the anchor; no offset normalisation or wall-kick is
applied, so a rotated piece may shift relative to its spawn footprint.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple

Offset = Tuple[int, int]
RotationState = Tuple[Offset, ...]
Color = Tuple[int, int, int]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes.

    Definition order is the catalog index used by :func:`shape_for`.
    """

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


class ShapeDefinition(NamedTuple):
    offsets: RotationState
    color: Color


# Spawn orientation of every shape.  ``y`` points up, the anchor is ``(0, 0)``.
_BASE_SHAPES: Dict[TetrominoType, ShapeDefinition] = {
    TetrominoType.I: ShapeDefinition(((-2, 0), (-1, 0), (0, 0), (1, 0)), (115, 251, 253)),
    TetrominoType.J: ShapeDefinition(((-1, 0), (0, 0), (1, 0), (-1, 1)), (0, 33, 245)),
    TetrominoType.L: ShapeDefinition(((-1, 0), (0, 0), (1, 0), (1, 1)), (243, 168, 59)),
    TetrominoType.O: ShapeDefinition(((0, 0), (1, 0), (0, 1), (1, 1)), (255, 253, 84)),
    TetrominoType.S: ShapeDefinition(((-1, -1), (0, -1), (0, 0), (1, 0)), (117, 250, 76)),
    TetrominoType.T: ShapeDefinition(((-1, 0), (0, 0), (1, 0), (0, 1)), (155, 47, 246)),
    TetrominoType.Z: ShapeDefinition(((-1, 1), (0, 1), (0, 0), (1, 0)), (235, 51, 35)),
}

SHAPE_ORDER: Tuple[TetrominoType, ...] = tuple(TetrominoType)

# Value stored in the board grid for each shape.  ``0`` is an empty cell.
PIECE_VALUES: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(SHAPE_ORDER)}

VALUE_COLORS: Dict[int, Color] = {
    PIECE_VALUES[t]: definition.color for t, definition in _BASE_SHAPES.items()
}


def _rotate(state: RotationState) -> RotationState:
    """Return ``state`` turned 90 degrees counter-clockwise about the anchor."""

    return tuple((-y, x) for x, y in state)


def _quarter_turns(offsets: RotationState) -> List[RotationState]:
    """Offsets after 0, 1, 2 and 3 counter-clockwise quarter turns."""

    turns = [offsets]
    while len(turns) < 4:
        turns.append(_rotate(turns[-1]))
    return turns


TETROMINO_SHAPES: Dict[TetrominoType, List[RotationState]] = {
    t_type: _quarter_turns(definition.offsets)
    for t_type, definition in _BASE_SHAPES.items()
}


def shape_for(index: int) -> ShapeDefinition:
    """Return the offsets and color of the shape at catalog ``index``.

    Raises:
        IndexError: If ``index`` is not in ``range(7)``.
    """

    if not 0 <= index < len(SHAPE_ORDER):
        raise IndexError(f"Shape index {index} out of range")
    return _BASE_SHAPES[SHAPE_ORDER[index]]


def shape_blocks(shape: TetrominoType, rotation: int) -> RotationState:
    """Return the anchor-relative offsets of ``shape`` after ``rotation`` turns.

    Each turn is 90 degrees counter-clockwise about the anchor, mapping an
    offset ``(x, y)`` to ``(-y, x)``.  ``rotation`` is taken modulo four, so
    ``-1`` is one clockwise turn.
    """

    return TETROMINO_SHAPES[shape][rotation % 4]


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    shape: TetrominoType
    rotation: int = 0
    anchor: Tuple[int, int] = (0, 0)  # (x, y)

    @property
    def color(self) -> Color:
        return _BASE_SHAPES[self.shape].color

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.shape]

    def rotate(self, direction: int = 1) -> None:
        """Rotate the piece about its anchor.

        Positive ``direction`` turns counter-clockwise, negative clockwise.
        """

        states = TETROMINO_SHAPES[self.shape]
        self.rotation = (self.rotation + direction) % len(states)

    def move(self, dx: int, dy: int) -> None:
        """Translate the anchor by ``dx`` columns and ``dy`` rows."""

        x, y = self.anchor
        self.anchor = (x + dx, y + dy)

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` cells covered by this piece."""

        x, y = self.anchor
        return [(x + dx, y + dy) for dx, dy in shape_blocks(self.shape, self.rotation)]
