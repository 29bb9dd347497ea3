"""Core arena simulation that hosts brains, projectiles and pickups."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Any, Sequence, Union

from gladiator_ai.ai import PerceptionSensor, ReactiveGuard, UtilityStrategist
from gladiator_ai.arena.navigation import StraightLineNavigator
from gladiator_ai.arena.world import ArenaWorld
from gladiator_ai.config import (
    ARENA,
    GUARD,
    PERCEPTION,
    PICKUP,
    STRATEGIST,
    TICK_SECONDS,
    WEAPON,
    ArenaConfig,
    GuardConfig,
    PerceptionConfig,
    PickupConfig,
    StrategistConfig,
    WeaponConfig,
)
from gladiator_ai.core import Actor, Ammo, Health, Pickup, PickupCategory, PickupRegistry, SimulationClock
from gladiator_ai.core.weapon import Projectile, SimpleWeapon
from gladiator_ai.runtime import Vec3, flatten, length_squared

logger = logging.getLogger("gladiator_ai.arena")

Brain = Union[ReactiveGuard, UtilityStrategist]

PROJECTILE_RADIUS = 0.1


@dataclass
class Combatant:
    actor: Actor
    navigator: StraightLineNavigator
    weapon: SimpleWeapon
    brain: Brain
    kind: str
    respawn_at: float | None = None
    last_damaged_by: Actor | None = None
    kills: int = 0
    deaths: int = 0


class ArenaGame:
    """Frame-driven arena: one ``step()`` ticks every live brain exactly once.

    Step order: due respawns, pickup respawn timers, brains (each refreshes
    its own perception first), navigation, projectiles, pickup collection,
    then the clock advances.
    """

    def __init__(self, config: ArenaConfig = ARENA, seed: int | None = None) -> None:
        self.config = config
        self.rng = random.Random(seed)
        self.clock = SimulationClock()
        self.world = ArenaWorld(config)
        self.pickup_registry = PickupRegistry()
        self.pickups: list[Pickup] = []
        self.projectiles: list[Projectile] = []
        self.combatants: list[Combatant] = []
        self.team_kills: dict[str, int] = {}

    @property
    def now(self) -> float:
        return self.clock.now

    # -------- Setup --------

    def _build_actor(self, name: str, team: str, position: Vec3, facing: Vec3 | None) -> Actor:
        actor = Actor(
            name,
            position,
            team,
            health=Health(self.config.max_health),
            ammo=Ammo(self.config.max_ammo),
            radius=self.config.actor_radius,
        )
        if facing is not None:
            actor.facing = facing
            actor.spawn_facing = facing
        self.world.add_actor(actor)
        self.team_kills.setdefault(team, 0)
        return actor

    def _register(self, combatant: Combatant) -> Combatant:
        combatant.actor.health.subscribe_damaged(
            lambda amount, source: self._on_damaged(combatant, amount, source)
        )
        combatant.actor.health.subscribe_died(lambda _health: self._on_died(combatant))
        self.combatants.append(combatant)
        return combatant

    def add_guard(
        self,
        name: str,
        team: str,
        position: Vec3,
        waypoints: Sequence[Vec3] = (),
        *,
        facing: Vec3 | None = None,
        config: GuardConfig = GUARD,
        perception_config: PerceptionConfig = PERCEPTION,
        weapon_config: WeaponConfig = WEAPON,
    ) -> Combatant:
        actor = self._build_actor(name, team, position, facing)
        navigator = StraightLineNavigator(actor, self.world, speed=config.patrol_speed)
        weapon = SimpleWeapon(actor, self.clock, self.projectiles.append, weapon_config)
        brain = ReactiveGuard(
            PerceptionSensor(actor, self.world, perception_config),
            navigator,
            weapon,
            waypoints=waypoints,
            config=config,
        )
        return self._register(Combatant(actor, navigator, weapon, brain, kind="guard"))

    def add_strategist(
        self,
        name: str,
        team: str,
        position: Vec3,
        *,
        facing: Vec3 | None = None,
        config: StrategistConfig = STRATEGIST,
        perception_config: PerceptionConfig = PERCEPTION,
        weapon_config: WeaponConfig = WEAPON,
    ) -> Combatant:
        actor = self._build_actor(name, team, position, facing)
        navigator = StraightLineNavigator(actor, self.world, speed=config.normal_speed)
        weapon = SimpleWeapon(actor, self.clock, self.projectiles.append, weapon_config)
        brain = UtilityStrategist(
            PerceptionSensor(actor, self.world, perception_config),
            navigator,
            weapon,
            health=actor.health,
            pickups=self.pickup_registry,
            ammo=actor.ammo,
            config=config,
        )
        return self._register(Combatant(actor, navigator, weapon, brain, kind="strategist"))

    def add_pickup(self, category: PickupCategory, position: Vec3, config: PickupConfig = PICKUP) -> Pickup:
        pickup = Pickup(category, position, self.pickup_registry, config)
        self.pickups.append(pickup)
        return pickup

    # -------- Life cycle --------

    def _on_damaged(self, combatant: Combatant, _amount: float, source: Any) -> None:
        if isinstance(source, Actor):
            combatant.last_damaged_by = source

    def _on_died(self, combatant: Combatant) -> None:
        combatant.deaths += 1
        combatant.respawn_at = self.clock.now + self.config.respawn_delay
        combatant.navigator.reset_path()

        killer = combatant.last_damaged_by
        killer_name = killer.name if killer is not None else "unknown"
        if killer is not None and killer.team != combatant.actor.team:
            self.team_kills[killer.team] = self.team_kills.get(killer.team, 0) + 1
            for other in self.combatants:
                if other.actor is killer:
                    other.kills += 1
        logger.info("%s killed by %s at t=%.2f", combatant.actor.name, killer_name, self.clock.now)

    def _respawn_position(self, actor: Actor) -> Vec3:
        jitter = self.config.respawn_jitter
        candidate = actor.spawn_position + Vec3(
            self.rng.uniform(-jitter, jitter), 0.0, self.rng.uniform(-jitter, jitter)
        )
        walkable = self.world.nearest_walkable_point(candidate, max(jitter, 1.0))
        return walkable if walkable is not None else actor.spawn_position

    def _respawn(self, combatant: Combatant) -> None:
        actor = combatant.actor
        actor.respawn(self._respawn_position(actor))
        combatant.respawn_at = None
        combatant.last_damaged_by = None
        combatant.weapon.reset()
        combatant.navigator.reset_path()
        combatant.brain.reset()
        logger.info("%s respawned at t=%.2f", actor.name, self.clock.now)

    def _respawn_due(self, now: float) -> None:
        for combatant in self.combatants:
            if combatant.respawn_at is not None and now >= combatant.respawn_at:
                self._respawn(combatant)

    # -------- Simulation --------

    def _step_projectiles(self, now: float, dt: float) -> None:
        next_projectiles: list[Projectile] = []

        for projectile in self.projectiles:
            if now >= projectile.die_at:
                continue

            start = projectile.position
            end = start + projectile.direction * (projectile.speed * dt)
            if self.world.segment_blocked(start, end):
                continue

            victim = self._projectile_victim(projectile, end)
            if victim is not None:
                victim.health.take_damage(projectile.damage, projectile.owner)
                continue

            projectile.position = end
            next_projectiles.append(projectile)

        self.projectiles[:] = next_projectiles

    def _projectile_victim(self, projectile: Projectile, position: Vec3) -> Actor | None:
        for actor in self.world.actors:
            if actor is projectile.owner or not actor.is_alive:
                continue
            reach = actor.radius + PROJECTILE_RADIUS
            if length_squared(flatten(actor.position - position)) <= reach * reach:
                return actor
        return None

    def _collect_pickups(self, now: float) -> None:
        for pickup in list(self.pickup_registry):
            reach = pickup.config.pickup_radius
            for combatant in self.combatants:
                actor = combatant.actor
                if not actor.is_alive:
                    continue
                if length_squared(flatten(actor.position - pickup.position)) > reach * reach:
                    continue
                if pickup.apply(actor, now):
                    break

    def step(self, dt: float = TICK_SECONDS) -> None:
        now = self.clock.now
        self._respawn_due(now)
        for pickup in self.pickups:
            pickup.update(now)

        for combatant in self.combatants:
            if combatant.actor.is_alive:
                combatant.brain.tick(now)

        for combatant in self.combatants:
            combatant.navigator.advance(dt)

        self._step_projectiles(now, dt)
        self._collect_pickups(now)
        self.clock.advance(dt)

    def run(self, seconds: float, dt: float = TICK_SECONDS) -> dict[str, Any]:
        for _ in range(max(0, round(seconds / dt))):
            self.step(dt)
        return self.summary()

    def summary(self) -> dict[str, Any]:
        return {
            "time": self.clock.now,
            "frames": self.clock.frame_count,
            "team_kills": dict(self.team_kills),
            "combatants": {
                combatant.actor.name: {
                    "team": combatant.actor.team,
                    "kind": combatant.kind,
                    "kills": combatant.kills,
                    "deaths": combatant.deaths,
                    "alive": combatant.actor.is_alive,
                }
                for combatant in self.combatants
            },
        }
