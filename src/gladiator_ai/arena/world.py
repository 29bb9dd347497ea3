"""Headless arena geometry: actors, box obstacles, and spatial queries."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

from gladiator_ai.config import ARENA, NAV_SAMPLE_DIRECTIONS, NAV_SAMPLE_RINGS, ArenaConfig, Layer
from gladiator_ai.core.actor import Actor
from gladiator_ai.runtime import Box, Vec3, length_squared, ray_intersects_box, segment_intersects_box


@dataclass(frozen=True)
class Obstacle:
    box: Box
    layer: Layer = Layer.OBSTACLE
    is_trigger: bool = False


class ArenaWorld:
    """Flat rectangular arena centred on the origin, y up.

    Implements the spatial queries perception needs: sphere overlap over
    actors and ray occlusion against obstacle boxes.
    """

    def __init__(self, config: ArenaConfig = ARENA) -> None:
        self.config = config
        self.actors: list[Actor] = []
        self.obstacles: list[Obstacle] = []

    def add_actor(self, actor: Actor) -> None:
        if actor not in self.actors:
            self.actors.append(actor)

    def remove_actor(self, actor: Actor) -> None:
        if actor in self.actors:
            self.actors.remove(actor)

    def add_obstacle(
        self,
        center: Vec3,
        size: Vec3,
        layer: Layer = Layer.OBSTACLE,
        is_trigger: bool = False,
    ) -> Obstacle:
        obstacle = Obstacle(Box.from_center(center, size), layer=layer, is_trigger=is_trigger)
        self.obstacles.append(obstacle)
        return obstacle

    def overlap_sphere(self, center: Vec3, radius: float, layer_mask: Layer) -> list[Actor]:
        radius_squared = radius * radius
        return [
            actor
            for actor in self.actors
            if actor.layer & layer_mask and length_squared(actor.position - center) <= radius_squared
        ]

    def _blocking(self, layer_mask: Layer) -> Iterable[Obstacle]:
        return (
            obstacle
            for obstacle in self.obstacles
            if not obstacle.is_trigger and obstacle.layer & layer_mask
        )

    def raycast(self, origin: Vec3, direction: Vec3, max_distance: float, layer_mask: Layer) -> bool:
        return any(
            ray_intersects_box(origin, direction, max_distance, obstacle.box)
            for obstacle in self._blocking(layer_mask)
        )

    def segment_blocked(self, point_a: Vec3, point_b: Vec3, layer_mask: Layer = Layer.OBSTACLE | Layer.COVER) -> bool:
        return any(segment_intersects_box(point_a, point_b, obstacle.box) for obstacle in self._blocking(layer_mask))

    def in_bounds(self, point: Vec3) -> bool:
        return abs(point.x) <= self.config.half_width and abs(point.z) <= self.config.half_depth

    def clamp_to_bounds(self, point: Vec3) -> Vec3:
        return Vec3(
            max(-self.config.half_width, min(self.config.half_width, point.x)),
            0.0,
            max(-self.config.half_depth, min(self.config.half_depth, point.z)),
        )

    def is_walkable(self, point: Vec3) -> bool:
        if not self.in_bounds(point):
            return False
        return not any(
            obstacle.box.contains_ground_point(point)
            for obstacle in self.obstacles
            if not obstacle.is_trigger
        )

    def nearest_walkable_point(self, near: Vec3, max_radius: float) -> Vec3 | None:
        """Closest walkable ground point to ``near`` within ``max_radius``, or None."""
        ground = Vec3(near.x, 0.0, near.z)
        clamped = self.clamp_to_bounds(ground)
        if self.is_walkable(clamped) and length_squared(clamped - ground) <= max_radius * max_radius:
            return clamped

        best: Vec3 | None = None
        best_distance = math.inf
        for ring in range(1, NAV_SAMPLE_RINGS + 1):
            ring_radius = max_radius * ring / NAV_SAMPLE_RINGS
            for step in range(NAV_SAMPLE_DIRECTIONS):
                angle = 2.0 * math.pi * step / NAV_SAMPLE_DIRECTIONS
                probe = clamped + Vec3(math.cos(angle) * ring_radius, 0.0, math.sin(angle) * ring_radius)
                if not self.is_walkable(probe):
                    continue
                distance = length_squared(probe - ground)
                if distance <= max_radius * max_radius and distance < best_distance:
                    best = probe
                    best_distance = distance
            if best is not None:
                return best
        return None
