"""Entry point: ``python -m mazechase``.

Supports two modes:
  - ``python -m mazechase``            → Launch the FastAPI host with a live game loop
  - ``python -m mazechase cli``        → Headless run steered by the autopilot
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze-chase simulation engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI host (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--lives", type=int, default=3)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless game with the autopilot")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--steps", type=int, default=3600)
    cli.add_argument("--lives", type=int, default=3)
    cli.add_argument("--replay", type=str, default="replay.json")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from mazechase.api.app import create_app
    from mazechase.config import GameConfig

    config = GameConfig(seed=args.seed, initial_lives=args.lives, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from mazechase.ai.autopilot import Autopilot
    from mazechase.config import GameConfig
    from mazechase.engine.game_loop import GameLoop
    from mazechase.render.surface import TextSurface
    from mazechase.session import GameSession
    from mazechase.systems.rng import DeterministicRNG
    from mazechase.utils.logging import setup_logging
    from mazechase.utils.replay import ReplayRecorder

    config = GameConfig(
        seed=args.seed,
        initial_lives=args.lives,
        replay_file=args.replay,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    session = GameSession(config, rng=DeterministicRNG(config.seed))
    loop = GameLoop(config, session)
    pilot = Autopilot()
    recorder = ReplayRecorder(config.replay_file, config.seed)

    logger.info("=== Game started (seed=%d) ===", config.seed)
    for _ in range(args.steps):
        if not session.can_step:
            break
        session.steer(pilot.steer(session.world))
        events = loop.tick_once()
        recorder.record_step(session.world, events)

    surface = TextSurface()
    session.world.render(surface)
    print(surface.text())
    logger.info(
        "=== Finished at step %d: score=%d lives=%d level=%d%s ===",
        session.world.step_count, session.score, session.lives, session.level,
        " (game over)" if session.game_over else "",
    )
    recorder.flush()


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
