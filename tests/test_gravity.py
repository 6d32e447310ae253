import pytest

from blockfall.config import EngineConfig
from blockfall.game_state import GameState
from blockfall.utils import FallTimer


class ScriptedRandom:
    def randrange(self, stop: int) -> int:
        return 0


def test_fall_timer_reports_due_ticks():
    timer = FallTimer(1.0)
    assert timer.advance(0.5) == 0
    assert timer.advance(0.6) == 1
    assert timer.elapsed == pytest.approx(0.1)
    assert timer.advance(2.5) == 2
    assert timer.elapsed == pytest.approx(0.6)
    timer.reset()
    assert timer.elapsed == 0.0


def test_fall_timer_rejects_non_positive_cycle():
    with pytest.raises(ValueError):
        FallTimer(0)


def test_timer_driven_ticks_lock_piece():
    config = EngineConfig(fall_cycle=0.5)
    state = GameState(config, rng=ScriptedRandom())
    timer = FallTimer(config.fall_cycle)
    for _ in range(40):
        for _ in range(timer.advance(0.25)):
            state.on_fall_tick()
    # 20 ticks: 19 moves down, the last one locks the I piece on the floor.
    assert state.pieces == 1
    assert sorted((x, y) for x, y, _ in state.occupied_cells()) == [(x, 0) for x in range(3, 7)]
