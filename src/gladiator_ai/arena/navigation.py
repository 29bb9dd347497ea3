"""Straight-line stand-in for a navmesh agent."""

from __future__ import annotations

from gladiator_ai.arena.world import ArenaWorld
from gladiator_ai.config import ARRIVAL_EPSILON
from gladiator_ai.core.actor import Actor
from gladiator_ai.runtime import Vec3, flatten, length_squared, move_towards, normalized, vector_length


class StraightLineNavigator:
    """Moves one actor toward its destination in a straight line.

    A new destination is "pending" until the next ``advance`` call, which
    mirrors a navmesh agent computing its path asynchronously. Movement that
    would end inside an obstacle is refused, leaving the actor in place.
    """

    def __init__(self, actor: Actor, world: ArenaWorld, speed: float = 3.5) -> None:
        self.actor = actor
        self.world = world
        self.speed = float(speed)
        self.destination: Vec3 | None = None
        self._pending = False

    def set_destination(self, point: Vec3) -> None:
        destination = self.world.clamp_to_bounds(point)
        if destination == self.destination:
            return
        self.destination = destination
        self._pending = True

    def has_path(self) -> bool:
        return self.destination is not None

    def has_pending_path(self) -> bool:
        return self._pending

    def remaining_distance(self) -> float:
        if self.destination is None:
            return 0.0
        return vector_length(flatten(self.destination - self.actor.position))

    def reset_path(self) -> None:
        self.destination = None
        self._pending = False

    def sample_navigable_point(self, near: Vec3, max_radius: float) -> Vec3 | None:
        return self.world.nearest_walkable_point(near, max_radius)

    def advance(self, dt: float) -> None:
        self._pending = False
        if self.destination is None or not self.actor.is_alive:
            return

        current = self.actor.position
        target = Vec3(self.destination.x, current.y, self.destination.z)
        if length_squared(target - current) <= ARRIVAL_EPSILON * ARRIVAL_EPSILON:
            return

        next_position = move_towards(current, target, self.speed * dt)
        if not self.world.is_walkable(next_position):
            return
        self.actor.facing = normalized(flatten(target - current))
        self.actor.position = next_position
