"""Entity model for arena combatants."""

from __future__ import annotations

from dataclasses import dataclass

from gladiator_ai.config import ARENA, Layer
from gladiator_ai.core.resources import Ammo, Health
from gladiator_ai.runtime import FORWARD, Vec3


@dataclass(frozen=True)
class AgentIdentity:
    """Team tag used for friend/foe filtering."""

    team: str


class Actor:
    """A combatant with a pose, a team, and resource components.

    ``ammo`` is optional; actors without it fire for free and never look for
    ammo pickups.
    """

    def __init__(
        self,
        name: str,
        position: Vec3,
        team: str,
        *,
        health: Health | None = None,
        ammo: Ammo | None = None,
        facing: Vec3 = FORWARD,
        radius: float = ARENA.actor_radius,
        layer: Layer = Layer.ACTOR,
    ) -> None:
        self.name = name
        self.identity = AgentIdentity(team)
        self.position = position
        self.facing = facing
        self.health = health if health is not None else Health(ARENA.max_health)
        self.ammo = ammo
        self.radius = float(radius)
        self.layer = layer
        self.spawn_position = position
        self.spawn_facing = facing

    @property
    def team(self) -> str:
        return self.identity.team

    @property
    def is_alive(self) -> bool:
        return not self.health.is_dead

    def respawn(self, position: Vec3 | None = None) -> None:
        self.position = position if position is not None else self.spawn_position
        self.facing = self.spawn_facing
        self.health.reset()
        if self.ammo is not None:
            self.ammo.reset()

    def __repr__(self) -> str:
        return f"Actor({self.name!r}, team={self.team!r})"
