"""Tests for configuration defaults and validation."""

import pytest

from dodge_sim.sim.config import ARENA, SIM, ArenaConfig


def test_defaults():
    assert ARENA.arena_size == 512.0
    assert ARENA.enemy_count == 500
    assert ARENA.half_extent == 256.0
    assert ARENA.collision_mode == "box"
    assert ARENA.clamp_when_dead is False
    assert SIM.seed == 42


def test_validate_returns_self():
    cfg = ArenaConfig()
    assert cfg.validate() is cfg


@pytest.mark.parametrize("field,value", [
    ("arena_size", 0),
    ("enemy_count", -1),
    ("entity_radius", 0.0),
    ("spawn_margin", 0.0),
    ("spawn_margin", 1.5),
    ("walk_step", -0.1),
    ("collision_mode", "sphere"),
])
def test_validate_rejects(field, value):
    with pytest.raises(ValueError, match=field):
        ArenaConfig(**{field: value}).validate()


def test_zero_enemies_is_allowed():
    ArenaConfig(enemy_count=0).validate()
