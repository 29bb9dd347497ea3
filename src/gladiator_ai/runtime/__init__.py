"""Runtime helpers for Gladiator AI."""

from .geometry import (
    FORWARD,
    UP,
    ZERO,
    Box,
    Vec3,
    clamp01,
    flatten,
    heading_to_vector,
    length_squared,
    move_towards,
    normalized,
    ray_intersects_box,
    segment_intersects_box,
    vector_length,
)

__all__ = [
    "FORWARD",
    "UP",
    "ZERO",
    "Box",
    "Vec3",
    "clamp01",
    "flatten",
    "heading_to_vector",
    "length_squared",
    "move_towards",
    "normalized",
    "ray_intersects_box",
    "segment_intersects_box",
    "vector_length",
]
