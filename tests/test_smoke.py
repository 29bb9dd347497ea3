from gladiator_ai.play_arena import build_demo_arena


def test_import_package():
    import gladiator_ai

    assert gladiator_ai.__version__


def test_demo_arena_runs_headless():
    game = build_demo_arena(guards=2, strategists=2, seed=3)

    summary = game.run(seconds=10.0, dt=0.1)

    assert summary["frames"] == 100
    assert set(summary["team_kills"]) == {"red", "blue"}
    assert len(summary["combatants"]) == 4
    assert {stats["kind"] for stats in summary["combatants"].values()} == {"guard", "strategist"}


def test_demo_arena_rejects_negative_team_size():
    import pytest

    with pytest.raises(ValueError):
        build_demo_arena(guards=-1)


def test_learned_agent_interface_shape():
    from gladiator_ai import config

    assert config.NUM_OBSERVATION_FEATURES == len(config.OBSERVATION_FEATURE_NAMES) == 8
    assert config.NUM_CONTINUOUS_ACTIONS == 3
    assert config.NUM_DISCRETE_ACTIONS == 1
    assert config.OBSERVATION_TARGET_DISTANCE_NORMALIZATION > 0
