#!/usr/bin/env python3
"""Automated engine profiler.

Usage:
    python scripts/profile_simulation.py --steps 5000 --seed 42
    python scripts/profile_simulation.py --steps 20000 --seed 42 --cprofile profile.prof

Reports:
    - Per-step timing statistics (min, max, mean, p50, p95, p99)
    - Throughput (steps/sec) against the real-time budget at the configured fps
    - Final score, lives and level
    - Optional: cProfile dump for flame graph generation
"""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from mazechase.ai.autopilot import Autopilot
from mazechase.config import GameConfig
from mazechase.engine.game_loop import GameLoop
from mazechase.session import GameSession
from mazechase.systems.rng import DeterministicRNG


def _run(cfg: GameConfig, num_steps: int) -> tuple[list[float], GameSession]:
    session = GameSession(cfg, rng=DeterministicRNG(cfg.seed))
    loop = GameLoop(cfg, session)
    pilot = Autopilot()
    step_times: list[float] = []

    for _ in range(num_steps):
        if session.game_over:
            session.restart()
        t0 = time.perf_counter()
        session.steer(pilot.steer(session.world))
        loop.tick_once()
        step_times.append(time.perf_counter() - t0)
    return step_times, session


def _percentile(values: list[float], pct: float) -> float:
    ordered = sorted(values)
    idx = min(len(ordered) - 1, int(len(ordered) * pct / 100))
    return ordered[idx]


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the maze-chase engine")
    parser.add_argument("--steps", type=int, default=5000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--cprofile", type=str, default=None, help="Write cProfile stats to this file")
    args = parser.parse_args()

    cfg = GameConfig(seed=args.seed, log_level="WARNING")

    profiler = cProfile.Profile() if args.cprofile else None
    if profiler:
        profiler.enable()
    t_start = time.perf_counter()
    step_times, session = _run(cfg, args.steps)
    total = time.perf_counter() - t_start
    if profiler:
        profiler.disable()
        profiler.dump_stats(args.cprofile)

    ms = [t * 1000 for t in step_times]
    print(f"Steps:      {len(ms)}")
    print(f"Total:      {total:.3f}s  ({len(ms) / total:,.0f} steps/s, budget {cfg.fps}/s)")
    print(f"Per step:   min={min(ms):.4f}ms  mean={statistics.mean(ms):.4f}ms  max={max(ms):.4f}ms")
    print(f"            p50={_percentile(ms, 50):.4f}ms  p95={_percentile(ms, 95):.4f}ms  p99={_percentile(ms, 99):.4f}ms")
    print(f"Final:      score={session.score} lives={session.lives} level={session.level}")

    if profiler:
        buf = io.StringIO()
        pstats.Stats(profiler, stream=buf).sort_stats("cumulative").print_stats(15)
        print(buf.getvalue())


if __name__ == "__main__":
    main()
