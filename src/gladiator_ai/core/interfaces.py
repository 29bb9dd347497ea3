"""Capabilities the brains consume from the surrounding simulation.

The brains only talk to these protocols. ``gladiator_ai.arena`` ships
headless implementations; a host engine can provide its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

from gladiator_ai.config import Layer
from gladiator_ai.runtime import Vec3

if TYPE_CHECKING:
    from gladiator_ai.core.actor import Actor
    from gladiator_ai.core.pickups import Pickup, PickupCategory


class SpatialQuery(Protocol):
    def overlap_sphere(self, center: Vec3, radius: float, layer_mask: Layer) -> Iterable[Actor]:
        """Return the entities on ``layer_mask`` within ``radius`` of ``center``."""
        ...

    def raycast(self, origin: Vec3, direction: Vec3, max_distance: float, layer_mask: Layer) -> bool:
        """Return True when a non-trigger collider on ``layer_mask`` blocks the ray."""
        ...


class Navigation(Protocol):
    speed: float

    def set_destination(self, point: Vec3) -> None: ...

    def has_path(self) -> bool: ...

    def has_pending_path(self) -> bool: ...

    def remaining_distance(self) -> float: ...

    def reset_path(self) -> None: ...

    def sample_navigable_point(self, near: Vec3, max_radius: float) -> Vec3 | None: ...


class Weapon(Protocol):
    def can_fire(self) -> bool: ...

    def fire(self) -> None: ...

    def aim_at(self, point: Vec3) -> None: ...


class HealthReadout(Protocol):
    @property
    def health01(self) -> float: ...


class AmmoReadout(Protocol):
    @property
    def ammo01(self) -> float: ...


class PickupLookup(Protocol):
    def find_nearest(self, category: PickupCategory, from_point: Vec3) -> Pickup | None: ...
