import os
import types

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from blockfall import run_pygame
from blockfall.config import EngineConfig
from blockfall.game_state import GameState, Intent
from blockfall.tetromino import shape_for


class ScriptedRandom:
    def randrange(self, stop: int) -> int:
        return 3


def test_key_bindings():
    assert run_pygame.intent_for_key(pygame.K_LEFT) is Intent.MOVE_LEFT
    assert run_pygame.intent_for_key(pygame.K_SPACE) is Intent.ROTATE
    assert run_pygame.intent_for_key(pygame.K_RSHIFT) is Intent.HARD_DROP
    assert run_pygame.intent_for_key(pygame.K_a) is None


def test_board_rows_are_flipped_on_screen():
    size = run_pygame.CELL_SIZE
    assert run_pygame.cell_rect(0, 0, 20) == pygame.Rect(size, 19 * size, size, size)
    assert run_pygame.cell_rect(0, 19, 20).top == 0
    assert run_pygame.window_size(EngineConfig()) == (12 * size, 21 * size)


def test_handle_key_applies_intent_and_reset():
    state = GameState(rng=ScriptedRandom())
    run_pygame.handle_key(types.SimpleNamespace(key=pygame.K_RIGHT), state)
    assert state.active.anchor == (6, 19)
    run_pygame.handle_key(types.SimpleNamespace(key=pygame.K_RSHIFT), state)
    assert state.pieces == 1
    run_pygame.handle_key(types.SimpleNamespace(key=pygame.K_r), state)
    assert state.pieces == 0


def test_draw_cells_paints_active_piece():
    config = EngineConfig()
    state = GameState(config, rng=ScriptedRandom())
    screen = pygame.Surface(run_pygame.window_size(config))
    run_pygame.draw_background(screen, state)
    run_pygame.draw_cells(screen, state)
    center = run_pygame.cell_rect(5, 19, config.height).center
    assert tuple(screen.get_at(center))[:3] == shape_for(3).color
