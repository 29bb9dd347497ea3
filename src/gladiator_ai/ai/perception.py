"""Per-agent sensing of the nearest visible enemy.

The sensor answers "whom can this agent see right now?" and nothing else.
Targets are enemies (different team, alive, not the agent itself) inside the
detection radius with an unobstructed eye-height ray to them. Of those, the
nearest wins.

Occlusion rays are expensive, so a candidate is only ray-tested when it is
strictly closer than the best target found so far.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING
import weakref

from gladiator_ai.config import PERCEPTION, PerceptionConfig
from gladiator_ai.runtime import UP, ZERO, Vec3
from gladiator_ai.utils import validate_perception_config

if TYPE_CHECKING:
    from gladiator_ai.core.actor import Actor
    from gladiator_ai.core.interfaces import SpatialQuery


@dataclass
class PerceptionResult:
    """What the sensor saw on its latest tick.

    Attributes:
        last_known_target_position: Where a target was last seen. Kept when
            sight is lost; only a new sighting or a reset changes it.
        has_line_of_sight: True when a target was selected this tick.
    """

    last_known_target_position: Vec3 = ZERO
    has_line_of_sight: bool = False
    _target_ref: weakref.ref | None = field(default=None, repr=False)

    @property
    def current_target(self) -> Actor | None:
        """The selected target, or None if it was never set or no longer exists."""
        if self._target_ref is None:
            return None
        return self._target_ref()


class PerceptionSensor:
    """Nearest-enemy sensor for one agent.

    Attributes:
        result: Latest PerceptionResult, replaced on every ``tick()``.
    """

    def __init__(
        self,
        owner: Actor,
        spatial: SpatialQuery,
        config: PerceptionConfig = PERCEPTION,
    ) -> None:
        validate_perception_config(config)
        self.owner = owner
        self.spatial = spatial
        self.config = config
        self.result = PerceptionResult()

    @property
    def current_target(self) -> Actor | None:
        return self.result.current_target

    @property
    def has_line_of_sight(self) -> bool:
        return self.result.has_line_of_sight

    @property
    def last_known_target_position(self) -> Vec3:
        return self.result.last_known_target_position

    def tick(self) -> None:
        owner = self.owner
        eye_offset = UP * self.config.eye_height
        origin = owner.position + eye_offset

        best: Actor | None = None
        best_distance = math.inf

        candidates = self.spatial.overlap_sphere(
            owner.position, self.config.detection_radius, self.config.target_layers
        )
        for candidate in candidates:
            if candidate is owner:
                continue
            if candidate.team == owner.team:
                continue
            if not candidate.is_alive:
                continue

            destination = candidate.position + eye_offset
            distance = origin.distance(destination)
            if distance >= best_distance:
                continue

            # Only candidates that would improve the result pay for a ray.
            if not self.spatial.raycast(origin, destination - origin, distance, self.config.occlusion_layers):
                best = candidate
                best_distance = distance

        if best is not None:
            self.result = PerceptionResult(
                last_known_target_position=best.position,
                has_line_of_sight=True,
                _target_ref=weakref.ref(best),
            )
        else:
            self.result = PerceptionResult(
                last_known_target_position=self.result.last_known_target_position,
            )

    def reset(self) -> None:
        self.result = PerceptionResult()
