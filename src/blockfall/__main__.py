"""Command line demo for the engine.

Run with: ``python -m blockfall``

By default a short random session is simulated headlessly and the final board
is printed as text.  Pass ``--play`` to open the pygame front-end instead.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .config import ConfigError, EngineConfig
from .game_state import GameState, Intent
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

_DEMO_INTENTS = list(Intent)


def _print_grid(rows: List[str]) -> None:
    for row in rows:
        print(row)


def run_demo(state: GameState, steps: int, rng: random.Random) -> int:
    """Play ``steps`` random intents, each followed by a gravity tick.

    Returns the number of steps actually played before the game ended.
    """

    played = 0
    for _ in range(steps):
        if state.game_over:
            break
        state.handle_intent(rng.choice(_DEMO_INTENTS))
        state.on_fall_tick()
        played += 1
    return played


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__)
    parser.add_argument("--width", type=int, default=10, help="Board width (4-40).")
    parser.add_argument("--height", type=int, default=20, help="Board height (5-20).")
    parser.add_argument(
        "--fall-cycle",
        type=float,
        default=1.0,
        help="Seconds between gravity ticks in the pygame front-end.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument("--steps", type=int, default=200, help="Steps in the headless demo.")
    parser.add_argument("--play", action="store_true", help="Open the pygame front-end.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    args = parser.parse_args(argv)
    try:
        args.config = EngineConfig(
            width=args.width,
            height=args.height,
            fall_cycle=args.fall_cycle,
            seed=args.seed,
        )
    except ConfigError as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.play:
        from .run_pygame import run

        run(args.config)
        return

    state = GameState(args.config)
    played = run_demo(state, args.steps, random.Random(args.seed))
    LOGGER.info("Played %d step(s), locked %d piece(s)", played, state.pieces)
    _print_grid(render_grid(state.board, state.active, state.ghost))
    if state.game_over:
        print("Game over")


if __name__ == "__main__":
    main()
