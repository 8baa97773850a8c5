from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .config import FPS
from .path import cell_center
from .placement import place_tower
from .simulation import step
from .state import GameState, LogFn


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TowerFrog tower defense")
    parser.add_argument("--headless", action="store_true", help="Run the simulation without a window")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated time for headless runs")
    parser.add_argument("--fps", type=int, default=FPS, help="Simulation steps per simulated second")
    parser.add_argument(
        "--tower",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("COL", "ROW"),
        help="Build a tower on a grid cell before a headless run (repeatable)",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print simulation log lines")
    parser.add_argument("--no-sound", action="store_true", help="Disable sound effects")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logger: LogFn | None = None if args.quiet else print
    if args.headless:
        state = run_headless(args.seconds, args.fps, args.tower, logger)
        print(
            f"wave={state.wave} lives={state.lives} money={state.money} "
            f"towers={len(state.towers)} alive_enemies={len(state.alive_enemies())} game_over={state.game_over}"
        )
        return 0

    from .game import TowerDefenseGame

    game = TowerDefenseGame(logger=logger, sound=not args.no_sound)
    game.run()
    return 0


def run_headless(seconds: float, fps: int, towers: Sequence[Sequence[int]] = (), logger: LogFn | None = None) -> GameState:
    """Run a session without rendering and return its final state."""
    state = GameState(logger=logger)
    for column, row in towers:
        place_tower(state, cell_center(column, row))
    dt = 1.0 / fps
    for _ in range(int(seconds * fps)):
        step(state, dt)
        if state.game_over:
            break
    return state


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
