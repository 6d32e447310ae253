"""Engine configuration consumed when a game is constructed."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional

from .board import HEIGHT, WIDTH

MIN_WIDTH, MAX_WIDTH = 4, 40
MIN_HEIGHT, MAX_HEIGHT = 5, 20
DEFAULT_FALL_CYCLE = 1.0


class ConfigError(ValueError):
    """Raised when an :class:`EngineConfig` value is outside its allowed range."""


@dataclass(frozen=True)
class EngineConfig:
    """Board size, gravity cadence and optional random seed.

    ``fall_cycle`` is the number of seconds between gravity ticks.  The engine
    does not keep time itself; the value is read by whatever drives
    :meth:`GameState.on_fall_tick`.
    """

    width: int = WIDTH
    height: int = HEIGHT
    fall_cycle: float = DEFAULT_FALL_CYCLE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigError(f"width must be an integer, got {self.width!r}")
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise ConfigError(f"width must be in [{MIN_WIDTH}, {MAX_WIDTH}], got {self.width}")
        if isinstance(self.height, bool) or not isinstance(self.height, int):
            raise ConfigError(f"height must be an integer, got {self.height!r}")
        if not MIN_HEIGHT <= self.height <= MAX_HEIGHT:
            raise ConfigError(
                f"height must be in [{MIN_HEIGHT}, {MAX_HEIGHT}], got {self.height}"
            )
        if isinstance(self.fall_cycle, bool) or not isinstance(self.fall_cycle, Real):
            raise ConfigError(f"fall_cycle must be a number, got {self.fall_cycle!r}")
        if not self.fall_cycle > 0:
            raise ConfigError(f"fall_cycle must be positive, got {self.fall_cycle}")
