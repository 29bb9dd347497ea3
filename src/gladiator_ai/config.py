"""Central configuration for Gladiator AI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}

def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default

class Layer(IntFlag):
    """Collision categories used by spatial queries."""

    NONE = 0
    ACTOR = 1
    OBSTACLE = 2
    COVER = 4
    PICKUP = 8

@dataclass(frozen=True)
class RuntimeFlags:
    log_level: str
    tick_rate: float
    verbose_brains: bool

FLAGS = RuntimeFlags(
    log_level=os.getenv("GLADIATOR_LOG_LEVEL", "INFO"),
    tick_rate=_env_float("GLADIATOR_TICK_RATE", 30.0),
    verbose_brains=_env_flag("GLADIATOR_VERBOSE_BRAINS", False),
)

@dataclass(frozen=True)
class PerceptionConfig:
    detection_radius: float = 15.0
    eye_height: float = 1.2
    target_layers: Layer = Layer.ACTOR
    occlusion_layers: Layer = Layer.OBSTACLE | Layer.COVER

@dataclass(frozen=True)
class GuardConfig:
    patrol_speed: float = 3.5
    waypoint_tolerance: float = 1.2
    chase_speed: float = 5.0
    search_speed: float = 3.75
    search_duration: float = 3.0

@dataclass(frozen=True)
class UtilityWeights:
    engage: float = 1.0
    heal: float = 1.25
    collect_ammo: float = 0.8
    flee: float = 1.2

@dataclass(frozen=True)
class StrategistConfig:
    decision_interval: float = 0.5
    action_lock_duration: float = 1.0
    critical_health01: float = 0.25
    normal_speed: float = 4.0
    flee_speed: float = 5.5
    flee_distance: float = 10.0
    flee_sample_radius: float = 4.0
    ammo_satisfied01: float = 0.6
    weights: UtilityWeights = field(default_factory=UtilityWeights)

@dataclass(frozen=True)
class WeaponConfig:
    damage: float = 10.0
    projectile_speed: float = 18.0
    fire_cooldown: float = 0.35
    ammo_cost: int = 1
    projectile_lifetime: float = 3.0
    muzzle_height: float = 1.2
    muzzle_offset: float = 0.8

@dataclass(frozen=True)
class PickupConfig:
    heal_amount: float = 40.0
    ammo_amount: int = 10
    respawn: bool = True
    respawn_delay: float = 8.0
    pickup_radius: float = 1.0

@dataclass(frozen=True)
class ArenaConfig:
    width: float = 40.0
    depth: float = 40.0
    max_health: float = 100.0
    max_ammo: int = 30
    actor_radius: float = 0.5
    respawn_delay: float = 3.0
    respawn_jitter: float = 2.0

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_depth(self) -> float:
        return self.depth / 2.0

PERCEPTION = PerceptionConfig()
GUARD = GuardConfig()
STRATEGIST = StrategistConfig()
WEAPON = WeaponConfig()
PICKUP = PickupConfig()
ARENA = ArenaConfig()

# Runtime
TICK_RATE = FLAGS.tick_rate
TICK_SECONDS = 1.0 / max(1.0, TICK_RATE)
DEFAULT_RUN_SECONDS = 60.0
WINDOW_TITLE = "Gladiator AI"

# Scoring normalization distances
ENGAGE_DISTANCE_NORMALIZATION = 20.0
PICKUP_DISTANCE_NORMALIZATION = 25.0
THREAT_DISTANCE_NORMALIZATION = 12.0
NO_THREAT_DISTANCE = 999.0
NO_TARGET_ENGAGE_SCORE = 0.1
FLEE_MIN_AWAY_SQUARED = 0.01
AIM_MIN_SQUARED = 0.001

# Navigation
ARRIVAL_EPSILON = 0.05
NAV_SAMPLE_RINGS = 4
NAV_SAMPLE_DIRECTIONS = 8

# Learned-agent interface shape (recorded only, no policy ships here)
OBSERVATION_FEATURE_NAMES = [
    "health01",
    "ammo01",
    "has_target",
    "target_local_x",
    "target_local_z",
    "target_distance01",
    "velocity_local_x",
    "velocity_local_z",
]
CONTINUOUS_ACTION_NAMES = [
    "move_x",
    "move_z",
    "turn",
]
DISCRETE_ACTION_NAMES = [
    "fire",
]
NUM_OBSERVATION_FEATURES = len(OBSERVATION_FEATURE_NAMES)
NUM_CONTINUOUS_ACTIONS = len(CONTINUOUS_ACTION_NAMES)
NUM_DISCRETE_ACTIONS = len(DISCRETE_ACTION_NAMES)
OBSERVATION_TARGET_DISTANCE_NORMALIZATION = 25.0
