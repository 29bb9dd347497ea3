from gladiator_ai.ai import GuardState
from gladiator_ai.arena import ArenaGame, ArenaWorld, StraightLineNavigator
from gladiator_ai.config import ArenaConfig, Layer
from gladiator_ai.core import PickupCategory
from gladiator_ai.core.weapon import Projectile
from gladiator_ai.runtime import Vec3, length_squared

from tests.fakes import assert_vec, make_actor


def _navigator(speed=10.0):
    world = ArenaWorld()
    actor = make_actor("walker", 0.0, 0.0)
    world.add_actor(actor)
    return StraightLineNavigator(actor, world, speed=speed), world, actor


# -------- Navigation --------


def test_new_destination_is_pending_until_advance():
    navigator, _world, actor = _navigator()

    navigator.set_destination(Vec3(5.0, 0.0, 0.0))
    assert navigator.has_path()
    assert navigator.has_pending_path()

    navigator.advance(0.1)

    assert not navigator.has_pending_path()
    assert_vec(actor.position, (1.0, 0.0, 0.0))
    assert navigator.remaining_distance() == 4.0
    assert_vec(actor.facing, (1.0, 0.0, 0.0))


def test_repeating_destination_keeps_path():
    navigator, _world, _actor = _navigator()
    navigator.set_destination(Vec3(5.0, 0.0, 0.0))
    navigator.advance(0.1)

    navigator.set_destination(Vec3(5.0, 0.0, 0.0))

    assert not navigator.has_pending_path()


def test_destination_is_clamped_to_arena():
    navigator, world, _actor = _navigator()

    navigator.set_destination(Vec3(500.0, 3.0, -500.0))

    assert_vec(navigator.destination, (world.config.half_width, 0.0, -world.config.half_depth))


def test_movement_into_obstacle_is_refused():
    navigator, world, actor = _navigator()
    world.add_obstacle(Vec3(1.0, 1.0, 0.0), Vec3(1.0, 2.0, 2.0))
    navigator.set_destination(Vec3(5.0, 0.0, 0.0))

    navigator.advance(0.1)

    assert_vec(actor.position, (0.0, 0.0, 0.0))
    assert navigator.has_path()


def test_reset_path_clears_destination():
    navigator, _world, _actor = _navigator()
    navigator.set_destination(Vec3(5.0, 0.0, 0.0))

    navigator.reset_path()

    assert not navigator.has_path()
    assert not navigator.has_pending_path()
    assert navigator.remaining_distance() == 0.0


def test_nearest_walkable_point_escapes_obstacle():
    world = ArenaWorld()
    world.add_obstacle(Vec3(0.0, 1.0, 0.0), Vec3(2.0, 2.0, 2.0))

    point = world.nearest_walkable_point(Vec3(0.0, 0.0, 0.0), 4.0)

    assert point is not None
    assert world.is_walkable(point)
    assert length_squared(point) <= 16.0


def test_nearest_walkable_point_out_of_reach():
    world = ArenaWorld()
    world.add_obstacle(Vec3(0.0, 1.0, 0.0), Vec3(10.0, 2.0, 10.0))

    assert world.nearest_walkable_point(Vec3(0.0, 0.0, 0.0), 2.0) is None


def test_overlap_sphere_respects_layer_mask():
    world = ArenaWorld()
    actor = make_actor("a", 1.0, 0.0)
    decoy = make_actor("decoy", 1.0, 1.0, layer=Layer.PICKUP)
    world.add_actor(actor)
    world.add_actor(decoy)

    assert world.overlap_sphere(Vec3(0.0, 0.0, 0.0), 5.0, Layer.ACTOR) == [actor]


# -------- Arena simulation --------


def _duel():
    game = ArenaGame(ArenaConfig(respawn_delay=3.0), seed=7)
    shooter = game.add_guard("shooter", "red", Vec3(-15.0, 0.0, 0.0))
    target = game.add_guard("target", "blue", Vec3(15.0, 0.0, 0.0))
    return game, shooter, target


def test_projectile_kill_credits_team_and_schedules_respawn():
    game, shooter, target = _duel()
    target.actor.health.current = 10.0
    game.projectiles.append(
        Projectile(
            position=Vec3(13.0, 1.2, 0.0),
            direction=Vec3(1.0, 0.0, 0.0),
            speed=18.0,
            damage=10.0,
            owner=shooter.actor,
            die_at=10.0,
        )
    )

    for _ in range(5):
        game.step(0.1)

    assert not target.actor.is_alive
    assert game.team_kills == {"red": 1, "blue": 0}
    assert shooter.kills == 1
    assert target.deaths == 1
    assert target.respawn_at == 3.0
    assert game.projectiles == []


def test_dead_actor_respawns_after_delay():
    game, shooter, target = _duel()
    target.actor.health.take_damage(1000.0, shooter.actor)

    summary = game.run(3.5, dt=0.1)

    assert target.actor.is_alive
    assert target.actor.health.current == target.actor.health.max_health
    assert target.respawn_at is None
    assert target.brain.state is GuardState.PATROL
    assert game.world.is_walkable(target.actor.position)
    assert summary["combatants"]["target"]["deaths"] == 1
    assert summary["combatants"]["shooter"]["kills"] == 1


def test_projectile_stops_at_obstacle():
    game, shooter, target = _duel()
    game.world.add_obstacle(Vec3(14.0, 1.5, 0.0), Vec3(0.5, 3.0, 2.0))
    game.projectiles.append(
        Projectile(Vec3(12.0, 1.2, 0.0), Vec3(1.0, 0.0, 0.0), 18.0, 10.0, shooter.actor, 10.0)
    )

    game.step(0.1)
    game.step(0.1)

    assert game.projectiles == []
    assert target.actor.health.current == target.actor.health.max_health


def test_expired_projectile_is_dropped():
    game, shooter, _target = _duel()
    game.projectiles.append(
        Projectile(Vec3(0.0, 1.2, 0.0), Vec3(0.0, 0.0, 1.0), 1.0, 10.0, shooter.actor, 0.0)
    )

    game.step(0.1)

    assert game.projectiles == []


def test_walking_over_pickup_collects_it():
    game, shooter, _target = _duel()
    pickup = game.add_pickup(PickupCategory.HEALTH, Vec3(-15.0, 0.0, 0.5))
    shooter.actor.health.take_damage(50.0)

    game.step(0.1)

    assert shooter.actor.health.current == 90.0
    assert pickup not in game.pickup_registry
    assert not pickup.active
