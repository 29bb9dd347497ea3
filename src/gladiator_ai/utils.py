"""Shared utility helpers."""

from __future__ import annotations

from typing import Sequence

from gladiator_ai.config import GuardConfig, PerceptionConfig, StrategistConfig


def _require_non_negative(owner: str, values: dict[str, float]) -> None:
    negative = sorted(name for name, value in values.items() if float(value) < 0)
    if negative:
        raise ValueError(f"{owner} values must be non-negative, got negative: {negative}")


def validate_perception_config(config: PerceptionConfig) -> None:
    _require_non_negative(
        "PerceptionConfig",
        {"detection_radius": config.detection_radius, "eye_height": config.eye_height},
    )


def validate_guard_config(config: GuardConfig) -> None:
    _require_non_negative(
        "GuardConfig",
        {
            "patrol_speed": config.patrol_speed,
            "waypoint_tolerance": config.waypoint_tolerance,
            "chase_speed": config.chase_speed,
            "search_speed": config.search_speed,
            "search_duration": config.search_duration,
        },
    )


def validate_strategist_config(config: StrategistConfig) -> None:
    _require_non_negative(
        "StrategistConfig",
        {
            "decision_interval": config.decision_interval,
            "action_lock_duration": config.action_lock_duration,
            "normal_speed": config.normal_speed,
            "flee_speed": config.flee_speed,
            "flee_distance": config.flee_distance,
            "flee_sample_radius": config.flee_sample_radius,
            "weights.engage": config.weights.engage,
            "weights.heal": config.weights.heal,
            "weights.collect_ammo": config.weights.collect_ammo,
            "weights.flee": config.weights.flee,
        },
    )
    for name in ("critical_health01", "ammo_satisfied01"):
        value = float(getattr(config, name))
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"StrategistConfig.{name} must be within [0, 1], got {value}")


def validate_team_sizes(team_sizes: dict[str, int], valid_brains: Sequence[str] = ("guard", "strategist")) -> None:
    unknown = sorted(set(team_sizes) - set(valid_brains))
    if unknown:
        raise ValueError(f"Unknown brain kinds {unknown}; expected one of {list(valid_brains)}")
    for brain, count in team_sizes.items():
        if int(count) < 0:
            raise ValueError(f"Team size for '{brain}' must be non-negative, got {count}")
