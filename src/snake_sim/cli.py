"""CLI launcher for headless snake simulations."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Fixed-timestep snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Simulate a game driven by a simple autopilot.",
    )
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    run_p.add_argument("--columns", type=int, default=None)
    run_p.add_argument("--rows", type=int, default=None)
    run_p.add_argument("--initial-length", type=int, default=None)
    run_p.add_argument("--steps-per-second", type=float, default=None)
    run_p.add_argument(
        "--food-placement", type=str, default=None,
        choices=["sample", "exhaustive"],
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--seconds", type=float, default=10.0)
    run_p.add_argument("--fps", type=float, default=60.0)
    run_p.add_argument(
        "--turn-chance", type=float, default=0.1,
        help="Probability of a random turn on each frame.",
    )
    run_p.add_argument("--highscore-file", type=str, default=None)
    run_p.add_argument(
        "--show", action="store_true", help="Print every rendered frame.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config to a JSON file.",
    )
    init_p.add_argument("path", help="Destination JSON path.")

    return parser


def _autopilot(engine, rng: np.random.Generator, turn_chance: float) -> None:
    """Steer away from walls and the body, turning at random now and then."""
    from snake_sim.grid import CellType
    from snake_sim.snake import Direction

    current = engine.current_direction
    candidates = [d for d in Direction if not current.is_opposite(d)]

    def safe(direction) -> bool:
        x, y = engine.body[0]
        nx, ny = x + direction.dx, y + direction.dy
        return (
            engine.grid.in_bounds(nx, ny)
            and engine.grid.get(nx, ny) != CellType.SNAKE
        )

    if safe(current) and rng.random() >= turn_chance:
        return
    options = [d for d in candidates if safe(d)] or candidates
    engine.set_heading(options[int(rng.integers(len(options)))])


def _build_config(args: argparse.Namespace):
    from snake_sim.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "columns": "columns",
        "rows": "rows",
        "initial_length": "initial_length",
        "steps_per_second": "steps_per_second",
        "food_placement": "food_placement",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_simulation(args: argparse.Namespace) -> int:
    from snake_sim.engine import GameEngine
    from snake_sim.highscore import HighScoreTracker
    from snake_sim.loop import LoopDriver
    from snake_sim.render import TextRenderer

    if args.fps <= 0 or args.seconds < 0:
        logger.error("--fps must be positive and --seconds non-negative.")
        return 2

    try:
        config = _build_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    tracker = HighScoreTracker(args.highscore_file)
    engine = GameEngine(config, score_sink=tracker)
    driver = LoopDriver(
        engine, render=TextRenderer() if args.show else None,
    )
    pilot_rng = np.random.default_rng(config.seed)

    frame_ms = 1000.0 / args.fps
    engine.start()
    now = 0.0
    for _ in range(int(args.seconds * args.fps)):
        _autopilot(engine, pilot_rng, args.turn_chance)
        now += frame_ms
        driver.frame(now)

    result = engine.snapshot().to_dict()
    result["high_score"] = tracker.best
    print(json.dumps(result))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from snake_sim.config import GameConfig

    GameConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_simulation,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
