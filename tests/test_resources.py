from gladiator_ai.config import PickupConfig
from gladiator_ai.core import Ammo, Health, Pickup, PickupCategory, PickupRegistry
from gladiator_ai.runtime import Vec3

from tests.fakes import kill, make_actor


def test_damage_notifies_subscribers_then_death_once():
    health = Health(50)
    events = []
    health.subscribe_damaged(lambda amount, source: events.append(("damaged", amount, source)))
    health.subscribe_died(lambda _health: events.append(("died",)))

    health.take_damage(20, "turret")
    health.take_damage(40, "turret")
    health.take_damage(10, "turret")

    assert events == [("damaged", 20, "turret"), ("damaged", 40, "turret"), ("died",)]
    assert health.current == 0.0
    assert health.is_dead


def test_heal_is_clamped_and_ignored_when_dead():
    health = Health(100)
    health.take_damage(30)
    health.heal(80)
    assert health.current == 100.0

    health.take_damage(100)
    health.heal(50)
    assert health.is_dead

    health.reset()
    assert health.health01 == 1.0


def test_negative_damage_does_not_heal():
    health = Health(100)

    health.take_damage(-25)

    assert health.current == 100.0


def test_ammo_consume_and_add():
    ammo = Ammo(10)

    assert ammo.consume(4)
    assert ammo.current == 6
    assert not ammo.consume(7)
    assert ammo.current == 6

    ammo.add(100)
    assert ammo.current == 10
    assert ammo.ammo01 == 1.0


def test_registry_finds_nearest_of_category():
    registry = PickupRegistry()
    near_ammo = Pickup(PickupCategory.AMMO, Vec3(1.0, 0.0, 0.0), registry)
    Pickup(PickupCategory.AMMO, Vec3(8.0, 0.0, 0.0), registry)
    health = Pickup(PickupCategory.HEALTH, Vec3(20.0, 0.0, 0.0), registry)

    assert registry.find_nearest(PickupCategory.AMMO, Vec3(0.0, 0.0, 0.0)) is near_ammo
    assert registry.find_nearest(PickupCategory.HEALTH, Vec3(0.0, 0.0, 0.0)) is health
    assert len(registry) == 3


def test_empty_registry_returns_none():
    assert PickupRegistry().find_nearest(PickupCategory.HEALTH, Vec3(0.0, 0.0, 0.0)) is None


def test_health_pickup_heals_hides_and_respawns():
    registry = PickupRegistry()
    pickup = Pickup(PickupCategory.HEALTH, Vec3(0.0, 0.0, 0.0), registry, PickupConfig(heal_amount=40, respawn_delay=8))
    actor = make_actor("runner", 0.0, 0.0)
    actor.health.take_damage(60)

    assert pickup.apply(actor, 2.0)

    assert actor.health.current == 80.0
    assert pickup not in registry
    assert not pickup.apply(actor, 2.5)

    pickup.update(9.9)
    assert pickup not in registry
    pickup.update(10.0)
    assert pickup in registry
    assert pickup.active


def test_one_shot_pickup_is_consumed():
    registry = PickupRegistry()
    pickup = Pickup(PickupCategory.AMMO, Vec3(0.0, 0.0, 0.0), registry, PickupConfig(ammo_amount=5, respawn=False))
    actor = make_actor("runner", 0.0, 0.0, ammo=Ammo(30))
    actor.ammo.current = 0

    assert pickup.apply(actor, 0.0)
    pickup.update(1000.0)

    assert actor.ammo.current == 5
    assert pickup.consumed
    assert pickup not in registry


def test_pickup_rejects_actor_that_cannot_use_it():
    registry = PickupRegistry()
    ammo_pickup = Pickup(PickupCategory.AMMO, Vec3(0.0, 0.0, 0.0), registry)
    health_pickup = Pickup(PickupCategory.HEALTH, Vec3(1.0, 0.0, 0.0), registry)
    unarmed = make_actor("unarmed", 0.0, 0.0)
    corpse = make_actor("corpse", 1.0, 0.0)
    kill(corpse)

    assert not ammo_pickup.apply(unarmed, 0.0)
    assert not health_pickup.apply(corpse, 0.0)
    assert ammo_pickup in registry
    assert health_pickup in registry


def test_actor_respawn_restores_resources():
    actor = make_actor("fighter", 3.0, 4.0, ammo=Ammo(30))
    actor.ammo.consume(20)
    kill(actor)
    actor.position = Vec3(10.0, 0.0, 10.0)

    actor.respawn()

    assert actor.is_alive
    assert actor.health.current == actor.health.max_health
    assert actor.ammo.current == 30
    assert actor.position == Vec3(3.0, 0.0, 4.0)
