"""Simple pygame front-end for the engine.

This module is only glue: it turns key presses into :class:`Intent` values,
turns frame time into gravity ticks through :class:`FallTimer`, and draws what
the engine's queries report.  Board row ``0`` is the bottom, so rows are
flipped when converted to screen coordinates.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pygame

from .config import EngineConfig
from .game_state import GameState, Intent
from .utils import FallTimer

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

BACKGROUND_COLOR = (128, 128, 128, 128)
BORDER_COLOR = (128, 128, 128)
GHOST_COLOR = (255, 255, 255, 77)
GRID_LINE_COLOR = (50, 50, 50)

KEY_INTENTS: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_UP: Intent.ROTATE,
    pygame.K_SPACE: Intent.ROTATE,
    pygame.K_RSHIFT: Intent.HARD_DROP,
    pygame.K_RETURN: Intent.HARD_DROP,
}

LOGGER = logging.getLogger(__name__)


def intent_for_key(key: int) -> Optional[Intent]:
    """Return the intent bound to ``key`` or ``None`` if it is unbound."""

    return KEY_INTENTS.get(key)


def window_size(config: EngineConfig) -> Tuple[int, int]:
    """Pixel size of the board plus a one-cell border on the sides and bottom."""

    return ((config.width + 2) * CELL_SIZE, (config.height + 1) * CELL_SIZE)


def cell_rect(x: int, y: int, height: int) -> pygame.Rect:
    """Return the screen rectangle of board cell ``(x, y)``.

    The left border occupies screen column ``0``; the bottom border sits
    below row ``0``.
    """

    left = (x + 1) * CELL_SIZE
    top = (height - 1 - y) * CELL_SIZE
    return pygame.Rect(left, top, CELL_SIZE, CELL_SIZE)


def draw_background(screen: pygame.Surface, state: GameState) -> None:
    """Render the translucent playfield and the solid side and floor borders."""

    width, height = state.board.width, state.board.height
    field = pygame.Surface((width * CELL_SIZE, height * CELL_SIZE), pygame.SRCALPHA)
    field.fill(BACKGROUND_COLOR)
    screen.blit(field, cell_rect(0, height - 1, height).topleft)
    for y in range(-1, height):
        pygame.draw.rect(screen, BORDER_COLOR, cell_rect(-1, y, height))
        pygame.draw.rect(screen, BORDER_COLOR, cell_rect(width, y, height))
    for x in range(width):
        pygame.draw.rect(screen, BORDER_COLOR, cell_rect(x, -1, height))


def draw_cells(screen: pygame.Surface, state: GameState) -> None:
    """Render locked cells, the ghost and the active piece, in that order."""

    height = state.board.height
    for x, y, color in state.occupied_cells():
        rect = cell_rect(x, y, height)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)

    ghost = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
    ghost.fill(GHOST_COLOR)
    for x, y in state.ghost_cells():
        if y < height:
            screen.blit(ghost, cell_rect(x, y, height).topleft)

    for x, y, color in state.active_piece_cells():
        if y >= height:
            continue
        rect = cell_rect(x, y, height)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)


def handle_key(event: pygame.event.Event, state: GameState) -> None:
    """Process one key press against the engine."""

    if event.key == pygame.K_r:
        state.reset_game()
        return
    intent = intent_for_key(event.key)
    if intent is not None:
        state.handle_intent(intent)


def run(config: Optional[EngineConfig] = None) -> None:
    """Open a window and play until it is closed.

    ``P`` pauses, ``R`` starts a new game.  Gravity stops once the game is
    over.
    """

    config = config or EngineConfig()
    pygame.init()
    screen = pygame.display.set_mode(window_size(config))
    clock = pygame.time.Clock()
    state = GameState(config)
    timer = FallTimer(config.fall_cycle)
    paused = False
    running = True
    LOGGER.info("Game started on a %dx%d board", config.width, config.height)

    try:
        while running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    paused = not paused
                    LOGGER.info("Paused" if paused else "Resumed")
                elif event.type == pygame.KEYDOWN and not paused:
                    if event.key == pygame.K_r:
                        timer.reset()
                    handle_key(event, state)

            if not paused and not state.game_over:
                for _ in range(timer.advance(dt)):
                    state.on_fall_tick()

            screen.fill((0, 0, 0))
            draw_background(screen, state)
            draw_cells(screen, state)
            status = "Game Over - press R" if state.game_over else "Paused" if paused else ""
            pygame.display.set_caption(f"Blockfall{' - ' + status if status else ''}")
            pygame.display.flip()
    finally:
        pygame.quit()
        LOGGER.info("Game stopped")
