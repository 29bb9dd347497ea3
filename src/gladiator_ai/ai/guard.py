"""Reactive patrol/chase/search brain."""

from __future__ import annotations

from enum import Enum
import logging
from typing import TYPE_CHECKING, Sequence

from gladiator_ai.config import GUARD, GuardConfig
from gladiator_ai.runtime import Vec3
from gladiator_ai.utils import validate_guard_config

if TYPE_CHECKING:
    from gladiator_ai.ai.perception import PerceptionSensor
    from gladiator_ai.core.interfaces import Navigation, Weapon

logger = logging.getLogger("gladiator_ai.guard")


class GuardState(Enum):
    PATROL = "patrol"
    CHASE = "chase"
    SEARCH = "search"


class ReactiveGuard:
    """Three-state machine driven only by what the sensor reports this tick.

    Patrol walks a circular waypoint list, Chase runs at the visible target
    and shoots, Search walks to the last sighting and waits there until the
    search window closes.
    """

    def __init__(
        self,
        perception: PerceptionSensor,
        navigation: Navigation,
        weapon: Weapon,
        waypoints: Sequence[Vec3] = (),
        config: GuardConfig = GUARD,
    ) -> None:
        validate_guard_config(config)
        self.perception = perception
        self.navigation = navigation
        self.weapon = weapon
        self.waypoints = list(waypoints)
        self.config = config

        self.state = GuardState.PATROL
        self.patrol_index = 0
        self.search_until = 0.0

    def reset(self) -> None:
        self.perception.reset()
        self.state = GuardState.PATROL
        self.patrol_index = 0
        self.search_until = 0.0

    def _sees_target(self) -> bool:
        return self.perception.has_line_of_sight and self.perception.current_target is not None

    def _set_state(self, state: GuardState) -> None:
        logger.debug("%s: %s -> %s", self.perception.owner.name, self.state.value, state.value)
        self.state = state

    def tick(self, now: float) -> None:
        self.perception.tick()

        if self.state is GuardState.PATROL:
            self._tick_patrol()
        elif self.state is GuardState.CHASE:
            self._tick_chase(now)
        else:
            self._tick_search(now)

    def _tick_patrol(self) -> None:
        self.navigation.speed = self.config.patrol_speed

        if self._sees_target():
            self._set_state(GuardState.CHASE)
            return

        if not self.waypoints:
            return

        if not self.navigation.has_path():
            self.navigation.set_destination(self.waypoints[self.patrol_index])

        if (
            not self.navigation.has_pending_path()
            and self.navigation.remaining_distance() <= self.config.waypoint_tolerance
        ):
            self.patrol_index = (self.patrol_index + 1) % len(self.waypoints)
            self.navigation.set_destination(self.waypoints[self.patrol_index])

    def _tick_chase(self, now: float) -> None:
        self.navigation.speed = self.config.chase_speed

        target = self.perception.current_target
        if self.perception.has_line_of_sight and target is not None:
            target_position = target.position
            self.navigation.set_destination(target_position)

            self.weapon.aim_at(target_position)
            if self.weapon.can_fire():
                self.weapon.fire()
            return

        self._set_state(GuardState.SEARCH)
        self.search_until = now + self.config.search_duration
        self.navigation.speed = self.config.search_speed
        self.navigation.set_destination(self.perception.last_known_target_position)

    def _tick_search(self, now: float) -> None:
        self.navigation.speed = self.config.search_speed

        if self._sees_target():
            self._set_state(GuardState.CHASE)
            return

        if now >= self.search_until:
            self._set_state(GuardState.PATROL)
            self.navigation.reset_path()
            return

        # Arrived at the last sighting: stand still until the timer runs out.
        if (
            self.navigation.has_path()
            and not self.navigation.has_pending_path()
            and self.navigation.remaining_distance() <= self.config.waypoint_tolerance
        ):
            self.navigation.reset_path()
