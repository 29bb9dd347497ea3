"""Utility-scored planner with a survival override and action hysteresis.

Every ``decision_interval`` the strategist tries to pick one of four actions
(engage, heal, collect ammo, flee). The attempt is skipped while the current
action is still inside its lock window, so a chosen action always runs for at
least ``action_lock_duration`` seconds.

Picking happens in two layers:

1. Survival override. At or below ``critical_health01`` scoring is bypassed:
   heal if any health pickup exists, otherwise flee.
2. Utility scoring. Each action gets a weighted score from the current
   health, ammo, target distance and pickup distances. The best score wins,
   unless it is the action that ran before the current one; then the best
   of the other three is taken instead.

Execution runs every tick on whatever action is current, independent of the
decision cadence. Heal and collect-ammo can end themselves early (no pickup
left, or ammo already good enough) and switch without waiting for the lock.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import TYPE_CHECKING

from gladiator_ai.config import (
    ENGAGE_DISTANCE_NORMALIZATION,
    FLEE_MIN_AWAY_SQUARED,
    NO_TARGET_ENGAGE_SCORE,
    NO_THREAT_DISTANCE,
    PICKUP_DISTANCE_NORMALIZATION,
    STRATEGIST,
    THREAT_DISTANCE_NORMALIZATION,
    StrategistConfig,
)
from gladiator_ai.core.pickups import PickupCategory
from gladiator_ai.runtime import Vec3, clamp01, flatten, length_squared, normalized
from gladiator_ai.utils import validate_strategist_config

if TYPE_CHECKING:
    from gladiator_ai.ai.perception import PerceptionSensor
    from gladiator_ai.core.interfaces import AmmoReadout, HealthReadout, Navigation, PickupLookup, Weapon

logger = logging.getLogger("gladiator_ai.strategist")


class PlannerAction(Enum):
    NONE = "none"
    ENGAGE = "engage"
    HEAL = "heal"
    COLLECT_AMMO = "collect_ammo"
    FLEE = "flee"


# Tie-break order: the first action with the maximum score wins.
SCORED_ACTIONS = (
    PlannerAction.ENGAGE,
    PlannerAction.HEAL,
    PlannerAction.COLLECT_AMMO,
    PlannerAction.FLEE,
)


@dataclass
class ActionLock:
    current_action: PlannerAction = PlannerAction.NONE
    last_action: PlannerAction = PlannerAction.NONE
    locked_until: float = 0.0

    def is_locked(self, now: float) -> bool:
        return now < self.locked_until


@dataclass(frozen=True)
class UtilityScores:
    engage: float
    heal: float
    collect_ammo: float
    flee: float

    def as_pairs(self) -> list[tuple[PlannerAction, float]]:
        return [(action, getattr(self, action.value)) for action in SCORED_ACTIONS]


def best_action(scores: list[tuple[PlannerAction, float]]) -> PlannerAction | None:
    """Return the strictly highest-scoring action, first in order on ties."""
    best: PlannerAction | None = None
    best_score = float("-inf")
    for action, score in scores:
        if score > best_score:
            best_score = score
            best = action
    return best


def select_action(scores: UtilityScores, last_action: PlannerAction) -> PlannerAction:
    """Pick the best action, never repeating ``last_action`` while an alternative is viable."""
    pairs = scores.as_pairs()
    chosen = best_action(pairs)
    if chosen is not None and chosen is not last_action:
        return chosen

    viable = [(action, score) for action, score in pairs if action is not last_action and score > 0.0]
    fallback = best_action(viable)
    return fallback if fallback is not None else last_action


class UtilityStrategist:
    """Hierarchical utility planner for one agent."""

    def __init__(
        self,
        perception: PerceptionSensor,
        navigation: Navigation,
        weapon: Weapon,
        health: HealthReadout,
        pickups: PickupLookup,
        ammo: AmmoReadout | None = None,
        config: StrategistConfig = STRATEGIST,
    ) -> None:
        validate_strategist_config(config)
        self.perception = perception
        self.navigation = navigation
        self.weapon = weapon
        self.health = health
        self.ammo = ammo
        self.pickups = pickups
        self.config = config

        self.lock = ActionLock()
        self.next_decision_time = 0.0
        self.last_scores: UtilityScores | None = None

    @property
    def current_action(self) -> PlannerAction:
        return self.lock.current_action

    @property
    def last_action(self) -> PlannerAction:
        return self.lock.last_action

    @property
    def _position(self) -> Vec3:
        return self.perception.owner.position

    def reset(self) -> None:
        self.perception.reset()
        self.lock = ActionLock()
        self.next_decision_time = 0.0
        self.last_scores = None

    def tick(self, now: float) -> None:
        self.perception.tick()

        if now >= self.next_decision_time:
            self.next_decision_time = now + self.config.decision_interval
            self.decide(now)

        self.execute(now)

    # -------- Decision --------

    def decide(self, now: float) -> None:
        if self.lock.is_locked(now):
            return

        if self.health.health01 <= self.config.critical_health01:
            self.set_action(self.survival_plan(), now)
            return

        scores = self.score_actions()
        self.last_scores = scores
        self.set_action(select_action(scores, self.lock.last_action), now)

    def survival_plan(self) -> PlannerAction:
        if self.pickups.find_nearest(PickupCategory.HEALTH, self._position) is not None:
            return PlannerAction.HEAL
        return PlannerAction.FLEE

    def set_action(self, action: PlannerAction, now: float) -> None:
        lock = self.lock
        if action is lock.current_action:
            return

        logger.debug(
            "%s: %s -> %s (locked %.2fs)",
            self.perception.owner.name,
            lock.current_action.value,
            action.value,
            self.config.action_lock_duration,
        )
        lock.last_action = lock.current_action
        lock.current_action = action
        lock.locked_until = now + self.config.action_lock_duration

        # A fresh path keeps consecutive actions from blending together.
        self.navigation.reset_path()

    # -------- Utility scoring --------

    def score_actions(self) -> UtilityScores:
        weights = self.config.weights
        return UtilityScores(
            engage=self.score_engage() * weights.engage,
            heal=self.score_heal() * weights.heal,
            collect_ammo=self.score_collect_ammo() * weights.collect_ammo,
            flee=self.score_flee() * weights.flee,
        )

    def score_engage(self) -> float:
        target = self.perception.current_target
        if not self.perception.has_line_of_sight or target is None:
            return NO_TARGET_ENGAGE_SCORE

        health_factor = clamp01(self.health.health01)
        ammo_factor = 1.0 if self.ammo is None else clamp01(self.ammo.ammo01)
        distance = self._position.distance(target.position)
        proximity_factor = 1.0 - clamp01(distance / ENGAGE_DISTANCE_NORMALIZATION)

        return 0.45 * health_factor + 0.35 * ammo_factor + 0.20 * proximity_factor

    def score_heal(self) -> float:
        pickup = self.pickups.find_nearest(PickupCategory.HEALTH, self._position)
        if pickup is None:
            return 0.0

        need = 1.0 - self.health.health01
        distance = self._position.distance(pickup.position)
        distance_factor = 1.0 - clamp01(distance / PICKUP_DISTANCE_NORMALIZATION)
        return 0.7 * need + 0.3 * distance_factor

    def score_collect_ammo(self) -> float:
        if self.ammo is None:
            return 0.0

        pickup = self.pickups.find_nearest(PickupCategory.AMMO, self._position)
        if pickup is None:
            return 0.0

        need = 1.0 - self.ammo.ammo01
        distance = self._position.distance(pickup.position)
        distance_factor = 1.0 - clamp01(distance / PICKUP_DISTANCE_NORMALIZATION)
        return 0.7 * need + 0.3 * distance_factor

    def score_flee(self) -> float:
        health_need = 1.0 - self.health.health01

        threat_distance = NO_THREAT_DISTANCE
        target = self.perception.current_target
        if target is not None:
            threat_distance = self._position.distance(target.position)
        close_threat = 1.0 - clamp01(threat_distance / THREAT_DISTANCE_NORMALIZATION)

        return clamp01(0.6 * health_need + 0.4 * close_threat)

    # -------- Execution --------

    def execute(self, now: float) -> None:
        self.navigation.speed = self.config.normal_speed

        action = self.lock.current_action
        if action is PlannerAction.ENGAGE:
            self._execute_engage()
        elif action is PlannerAction.HEAL:
            self._execute_heal(now)
        elif action is PlannerAction.COLLECT_AMMO:
            self._execute_collect_ammo(now)
        elif action is PlannerAction.FLEE:
            self._execute_flee()

    def _execute_engage(self) -> None:
        target = self.perception.current_target
        if not self.perception.has_line_of_sight or target is None:
            self.navigation.set_destination(self.perception.last_known_target_position)
            return

        target_position = target.position
        self.navigation.set_destination(target_position)

        self.weapon.aim_at(target_position)
        if self.weapon.can_fire():
            self.weapon.fire()

    def _execute_heal(self, now: float) -> None:
        pickup = self.pickups.find_nearest(PickupCategory.HEALTH, self._position)
        if pickup is None:
            self.set_action(PlannerAction.FLEE, now)
            return

        self.navigation.set_destination(pickup.position)

    def _execute_collect_ammo(self, now: float) -> None:
        if self.ammo is not None and self.ammo.ammo01 > self.config.ammo_satisfied01:
            self.set_action(PlannerAction.ENGAGE, now)
            return

        pickup = self.pickups.find_nearest(PickupCategory.AMMO, self._position)
        if pickup is None:
            self.set_action(PlannerAction.ENGAGE, now)
            return

        self.navigation.set_destination(pickup.position)

    def _execute_flee(self) -> None:
        self.navigation.speed = self.config.flee_speed

        owner = self.perception.owner
        target = self.perception.current_target
        threat_position = target.position if target is not None else self.perception.last_known_target_position

        away = flatten(owner.position - threat_position)
        if length_squared(away) < FLEE_MIN_AWAY_SQUARED:
            away = flatten(owner.facing)

        flee_point = owner.position + normalized(away) * self.config.flee_distance
        destination = self.navigation.sample_navigable_point(flee_point, self.config.flee_sample_radius)
        if destination is not None:
            self.navigation.set_destination(destination)
