from gladiator_ai.ai import GuardState, PerceptionSensor, ReactiveGuard
from gladiator_ai.arena import ArenaWorld
from gladiator_ai.config import GuardConfig
from gladiator_ai.runtime import Vec3

from tests.fakes import FakeNavigation, FakeWeapon, assert_vec, make_actor

WAYPOINTS = [Vec3(0.0, 0.0, 0.0), Vec3(10.0, 0.0, 0.0), Vec3(10.0, 0.0, 10.0)]
OUT_OF_SIGHT = Vec3(60.0, 0.0, 60.0)


def _guard(waypoints=(), enemy_position=OUT_OF_SIGHT, **config):
    world = ArenaWorld()
    owner = make_actor("guard", 0.0, 0.0, team="red")
    enemy = make_actor("intruder", enemy_position.x, enemy_position.z, team="blue")
    world.add_actor(owner)
    world.add_actor(enemy)
    navigation = FakeNavigation()
    weapon = FakeWeapon()
    guard = ReactiveGuard(
        PerceptionSensor(owner, world),
        navigation,
        weapon,
        waypoints=waypoints,
        config=GuardConfig(**config),
    )
    return guard, navigation, weapon, enemy


def _chasing_guard():
    guard, navigation, weapon, enemy = _guard(enemy_position=Vec3(5.0, 0.0, 0.0))
    guard.tick(0.0)
    assert guard.state is GuardState.CHASE
    return guard, navigation, weapon, enemy


def test_patrol_without_waypoints_is_a_no_op():
    guard, navigation, _weapon, _enemy = _guard()

    guard.tick(0.0)

    assert guard.state is GuardState.PATROL
    assert navigation.destinations == []
    assert navigation.speed == GuardConfig().patrol_speed


def test_patrol_advances_and_wraps_waypoints():
    guard, navigation, _weapon, _enemy = _guard(waypoints=WAYPOINTS)

    guard.tick(0.0)
    assert navigation.destinations == [WAYPOINTS[0]]

    navigation.remaining = 0.5
    guard.tick(0.1)
    guard.tick(0.2)
    guard.tick(0.3)

    assert navigation.destinations == [WAYPOINTS[0], WAYPOINTS[1], WAYPOINTS[2], WAYPOINTS[0]]
    assert guard.patrol_index == 0


def test_patrol_waits_for_pending_path():
    guard, navigation, _weapon, _enemy = _guard(waypoints=WAYPOINTS)
    navigation.pending_on_set = True
    navigation.remaining = 0.0

    guard.tick(0.0)
    guard.tick(0.1)

    assert navigation.destinations == [WAYPOINTS[0]]
    assert guard.patrol_index == 0


def test_sighting_switches_patrol_to_chase():
    guard, _navigation, weapon, _enemy = _chasing_guard()

    assert weapon.shots == 0


def test_chase_retargets_aims_and_fires():
    guard, navigation, weapon, enemy = _chasing_guard()

    guard.tick(0.1)
    enemy.position = Vec3(6.0, 0.0, 1.0)
    weapon.ready = False
    guard.tick(0.2)

    assert navigation.destinations[-2:] == [Vec3(5.0, 0.0, 0.0), Vec3(6.0, 0.0, 1.0)]
    assert weapon.aims == [Vec3(5.0, 0.0, 0.0), Vec3(6.0, 0.0, 1.0)]
    assert weapon.shots == 1
    assert navigation.speed == GuardConfig().chase_speed


def test_losing_sight_starts_search_toward_last_known_position():
    guard, navigation, _weapon, enemy = _chasing_guard()

    enemy.position = OUT_OF_SIGHT
    guard.tick(2.0)

    assert guard.state is GuardState.SEARCH
    assert guard.search_until == 2.0 + GuardConfig().search_duration
    assert_vec(navigation.destination, (5.0, 0.0, 0.0))
    assert navigation.speed == GuardConfig().search_speed


def test_regaining_sight_during_search_returns_to_chase():
    guard, _navigation, _weapon, enemy = _chasing_guard()
    enemy.position = OUT_OF_SIGHT
    guard.tick(2.0)

    enemy.position = Vec3(3.0, 0.0, 3.0)
    guard.tick(3.0)

    assert guard.state is GuardState.CHASE


def test_search_timeout_returns_to_patrol_and_clears_path():
    guard, navigation, _weapon, enemy = _chasing_guard()
    enemy.position = OUT_OF_SIGHT
    guard.tick(2.0)
    resets_before = navigation.resets

    guard.tick(4.9)
    assert guard.state is GuardState.SEARCH

    guard.tick(5.0)

    assert guard.state is GuardState.PATROL
    assert navigation.destination is None
    assert navigation.resets == resets_before + 1


def test_search_stops_at_last_known_position_and_waits():
    guard, navigation, _weapon, enemy = _chasing_guard()
    enemy.position = OUT_OF_SIGHT
    guard.tick(2.0)

    navigation.remaining = 0.3
    guard.tick(2.5)

    assert navigation.destination is None
    assert guard.state is GuardState.SEARCH

    destinations = list(navigation.destinations)
    guard.tick(3.0)
    assert navigation.destinations == destinations


def test_reset_returns_to_patrol():
    guard, _navigation, _weapon, enemy = _chasing_guard()
    enemy.position = OUT_OF_SIGHT
    guard.tick(2.0)

    guard.reset()

    assert guard.state is GuardState.PATROL
    assert guard.patrol_index == 0
    assert guard.perception.current_target is None
