"""Cooldown-gated projectile weapon."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from gladiator_ai.config import AIM_MIN_SQUARED, WEAPON, WeaponConfig
from gladiator_ai.core.actor import Actor
from gladiator_ai.core.clock import SimulationClock
from gladiator_ai.runtime import UP, Vec3, flatten, length_squared, normalized


@dataclass
class Projectile:
    position: Vec3
    direction: Vec3
    speed: float
    damage: float
    owner: Actor
    die_at: float


class SimpleWeapon:
    """Fires one projectile per cooldown window, paying ammo when the owner has any."""

    def __init__(
        self,
        owner: Actor,
        clock: SimulationClock,
        spawn_projectile: Callable[[Projectile], None],
        config: WeaponConfig = WEAPON,
    ) -> None:
        self.owner = owner
        self.clock = clock
        self.spawn_projectile = spawn_projectile
        self.config = config
        self.aim_direction = owner.facing
        self.next_fire_time = 0.0

    def can_fire(self) -> bool:
        if self.clock.now < self.next_fire_time:
            return False
        ammo = self.owner.ammo
        return ammo is None or ammo.current >= self.config.ammo_cost

    def fire(self) -> None:
        if not self.can_fire():
            return
        ammo = self.owner.ammo
        if ammo is not None and not ammo.consume(self.config.ammo_cost):
            return

        self.next_fire_time = self.clock.now + self.config.fire_cooldown
        muzzle = (
            self.owner.position
            + UP * self.config.muzzle_height
            + self.aim_direction * self.config.muzzle_offset
        )
        self.spawn_projectile(
            Projectile(
                position=muzzle,
                direction=self.aim_direction,
                speed=self.config.projectile_speed,
                damage=self.config.damage,
                owner=self.owner,
                die_at=self.clock.now + self.config.projectile_lifetime,
            )
        )

    def aim_at(self, point: Vec3) -> None:
        direction = flatten(point - self.owner.position)
        if length_squared(direction) <= AIM_MIN_SQUARED:
            return
        self.aim_direction = normalized(direction)
        self.owner.facing = self.aim_direction

    def reset(self) -> None:
        self.next_fire_time = 0.0
        self.aim_direction = self.owner.facing
