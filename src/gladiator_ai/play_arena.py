"""Headless skirmish entrypoint: guards against strategists."""

from __future__ import annotations

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import argparse
import logging

from gladiator_ai.arena import ArenaGame
from gladiator_ai.config import ARENA, DEFAULT_RUN_SECONDS, FLAGS, TICK_RATE, TICK_SECONDS, WINDOW_TITLE
from gladiator_ai.core import PickupCategory
from gladiator_ai.logging_utils import configure_logging, log_key_values, log_run_context
from gladiator_ai.runtime import Vec3, heading_to_vector
from gladiator_ai.utils import validate_team_sizes

GUARD_TEAM = "red"
STRATEGIST_TEAM = "blue"


def build_demo_arena(guards: int = 2, strategists: int = 2, seed: int | None = None) -> ArenaGame:
    """Two cover pillars, two low walls, pickups on the flanks, teams on opposite sides."""
    validate_team_sizes({"guard": guards, "strategist": strategists})
    game = ArenaGame(ARENA, seed=seed)
    half_w = ARENA.half_width
    half_d = ARENA.half_depth

    game.world.add_obstacle(Vec3(-6.0, 1.5, 0.0), Vec3(2.0, 3.0, 2.0))
    game.world.add_obstacle(Vec3(6.0, 1.5, 0.0), Vec3(2.0, 3.0, 2.0))
    game.world.add_obstacle(Vec3(0.0, 1.0, -8.0), Vec3(8.0, 2.0, 1.0))
    game.world.add_obstacle(Vec3(0.0, 1.0, 8.0), Vec3(8.0, 2.0, 1.0))

    game.add_pickup(PickupCategory.HEALTH, Vec3(-half_w * 0.75, 0.0, 0.0))
    game.add_pickup(PickupCategory.HEALTH, Vec3(half_w * 0.75, 0.0, 0.0))
    game.add_pickup(PickupCategory.AMMO, Vec3(0.0, 0.0, -half_d * 0.5))
    game.add_pickup(PickupCategory.AMMO, Vec3(0.0, 0.0, half_d * 0.5))

    patrol_route = [
        Vec3(-half_w * 0.5, 0.0, half_d * 0.75),
        Vec3(half_w * 0.5, 0.0, half_d * 0.75),
        Vec3(half_w * 0.5, 0.0, half_d * 0.25),
        Vec3(-half_w * 0.5, 0.0, half_d * 0.25),
    ]
    for index in range(guards):
        start = len(patrol_route) * index // max(1, guards)
        route = patrol_route[start:] + patrol_route[:start]
        game.add_guard(
            f"guard-{index + 1}",
            GUARD_TEAM,
            route[0],
            waypoints=route,
            facing=heading_to_vector(180.0),
        )

    spacing = ARENA.width / (strategists + 1)
    for index in range(strategists):
        game.add_strategist(
            f"strategist-{index + 1}",
            STRATEGIST_TEAM,
            Vec3(-half_w + spacing * (index + 1), 0.0, -half_d * 0.75),
        )
    return game


def run_arena(
    seconds: float = DEFAULT_RUN_SECONDS,
    guards: int = 2,
    strategists: int = 2,
    seed: int | None = None,
) -> dict:
    configure_logging(FLAGS.log_level)
    if FLAGS.verbose_brains:
        logging.getLogger("gladiator_ai.guard").setLevel(logging.DEBUG)
        logging.getLogger("gladiator_ai.strategist").setLevel(logging.DEBUG)

    game = build_demo_arena(guards=guards, strategists=strategists, seed=seed)
    log_run_context(
        "play-arena",
        {
            "title": WINDOW_TITLE,
            "seconds": float(seconds),
            "tick_rate": TICK_RATE,
            "guards": guards,
            "strategists": strategists,
            "seed": seed,
        },
    )

    summary = game.run(seconds, dt=TICK_SECONDS)
    log_key_values("gladiator_ai.run", summary["team_kills"], prefix="Team kills")
    for name, stats in summary["combatants"].items():
        log_key_values("gladiator_ai.run", stats, prefix=name)
    return summary


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless Gladiator AI skirmish.")
    parser.add_argument("--seconds", type=float, default=DEFAULT_RUN_SECONDS)
    parser.add_argument("--guards", type=int, default=2)
    parser.add_argument("--strategists", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    run_arena(seconds=args.seconds, guards=args.guards, strategists=args.strategists, seed=args.seed)


if __name__ == "__main__":
    main()
