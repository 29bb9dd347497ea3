"""Generic 3D geometry helpers for a y-up arena space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyglet.math import Vec3

UP = Vec3(0.0, 1.0, 0.0)
FORWARD = Vec3(0.0, 0.0, 1.0)
ZERO = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Box:
    """Axis-aligned box in world space."""

    min_corner: Vec3
    max_corner: Vec3

    @classmethod
    def from_center(cls, center: Vec3, size: Vec3) -> "Box":
        half = size * 0.5
        return cls(center - half, center + half)

    @property
    def center(self) -> Vec3:
        return (self.min_corner + self.max_corner) * 0.5

    def contains(self, point: Vec3) -> bool:
        return (
            self.min_corner.x <= point.x <= self.max_corner.x
            and self.min_corner.y <= point.y <= self.max_corner.y
            and self.min_corner.z <= point.z <= self.max_corner.z
        )

    def contains_ground_point(self, point: Vec3) -> bool:
        return (
            self.min_corner.x <= point.x <= self.max_corner.x
            and self.min_corner.z <= point.z <= self.max_corner.z
        )


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def length_squared(vector: Vec3) -> float:
    return vector.dot(vector)


def vector_length(vector: Vec3) -> float:
    return math.sqrt(length_squared(vector))


def normalized(vector: Vec3) -> Vec3:
    magnitude = vector_length(vector)
    if magnitude == 0:
        return ZERO
    return vector * (1.0 / magnitude)


def flatten(vector: Vec3) -> Vec3:
    """Drop the vertical component."""
    return Vec3(vector.x, 0.0, vector.z)


def move_towards(current: Vec3, target: Vec3, max_delta: float) -> Vec3:
    offset = target - current
    distance = vector_length(offset)
    if distance <= max_delta or distance == 0:
        return target
    return current + offset * (max_delta / distance)


def heading_to_vector(angle_degrees: float) -> Vec3:
    """Unit ground-plane vector for a yaw angle, 0 degrees facing +z."""
    radians = math.radians(angle_degrees)
    return Vec3(math.sin(radians), 0.0, math.cos(radians))


def segment_intersects_box(point_a: Vec3, point_b: Vec3, box: Box) -> bool:
    delta = point_b - point_a
    starts = (point_a.x, point_a.y, point_a.z)
    deltas = (delta.x, delta.y, delta.z)
    mins = (box.min_corner.x, box.min_corner.y, box.min_corner.z)
    maxs = (box.max_corner.x, box.max_corner.y, box.max_corner.z)

    u1 = 0.0
    u2 = 1.0

    for start, d, low, high in zip(starts, deltas, mins, maxs):
        for pi, qi in ((-d, start - low), (d, high - start)):
            if pi == 0:
                if qi < 0:
                    return False
                continue

            t = qi / pi
            if pi < 0:
                if t > u2:
                    return False
                u1 = max(u1, t)
            else:
                if t < u1:
                    return False
                u2 = min(u2, t)

    return True


def ray_intersects_box(origin: Vec3, direction: Vec3, max_distance: float, box: Box) -> bool:
    end = origin + normalized(direction) * max_distance
    return segment_intersects_box(origin, end, box)
