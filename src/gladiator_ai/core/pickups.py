"""Health and ammo pickups plus the registry agents search."""

from __future__ import annotations

from enum import Enum
import logging
import threading
from typing import TYPE_CHECKING, Iterator

from gladiator_ai.config import PICKUP, PickupConfig
from gladiator_ai.runtime import Vec3, length_squared

if TYPE_CHECKING:
    from gladiator_ai.core.actor import Actor

logger = logging.getLogger("gladiator_ai.pickups")


class PickupCategory(Enum):
    HEALTH = "health"
    AMMO = "ammo"

    def apply(self, actor: Actor, config: PickupConfig) -> bool:
        """Give ``actor`` this category's resource. Returns False if it cannot take it."""
        if not actor.is_alive:
            return False
        if self is PickupCategory.HEALTH:
            actor.health.heal(config.heal_amount)
            return True
        if actor.ammo is None:
            return False
        actor.ammo.add(config.ammo_amount)
        return True


class PickupRegistry:
    """Active pickups of one arena, searched by category and distance.

    Membership changes and lookups share one re-entrant lock, so agents may
    query while pickups are collected or respawned from another thread.
    """

    def __init__(self) -> None:
        self._pickups: list[Pickup] = []
        self._lock = threading.RLock()

    def add(self, pickup: Pickup) -> None:
        with self._lock:
            if pickup not in self._pickups:
                self._pickups.append(pickup)

    def remove(self, pickup: Pickup) -> None:
        with self._lock:
            if pickup in self._pickups:
                self._pickups.remove(pickup)

    def find_nearest(self, category: PickupCategory, from_point: Vec3) -> Pickup | None:
        with self._lock:
            best: Pickup | None = None
            best_distance = float("inf")
            for pickup in self._pickups:
                if pickup.category is not category:
                    continue
                distance = length_squared(pickup.position - from_point)
                if distance < best_distance:
                    best_distance = distance
                    best = pickup
            return best

    def __contains__(self, pickup: object) -> bool:
        with self._lock:
            return pickup in self._pickups

    def __len__(self) -> int:
        with self._lock:
            return len(self._pickups)

    def __iter__(self) -> Iterator[Pickup]:
        with self._lock:
            return iter(list(self._pickups))


class Pickup:
    """A collectible that hides itself after use and optionally comes back.

    Respawn is a stored timestamp: ``update(now)`` re-registers the pickup
    once the clock passes ``active_again_at``.
    """

    def __init__(
        self,
        category: PickupCategory,
        position: Vec3,
        registry: PickupRegistry,
        config: PickupConfig = PICKUP,
    ) -> None:
        self.category = category
        self.position = position
        self.registry = registry
        self.config = config
        self.active = True
        self.consumed = False
        self.active_again_at: float | None = None
        registry.add(self)

    def apply(self, actor: Actor, now: float) -> bool:
        if not self.active:
            return False
        if not self.category.apply(actor, self.config):
            return False

        self.active = False
        self.registry.remove(self)
        if self.config.respawn:
            self.active_again_at = now + self.config.respawn_delay
        else:
            self.consumed = True
        logger.debug("%s pickup collected by %s", self.category.value, actor.name)
        return True

    def update(self, now: float) -> None:
        if self.active or self.consumed or self.active_again_at is None:
            return
        if now >= self.active_again_at:
            self.active = True
            self.active_again_at = None
            self.registry.add(self)

    def __repr__(self) -> str:
        return f"Pickup({self.category.value}, active={self.active})"
