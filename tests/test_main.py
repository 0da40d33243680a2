"""Tests for the headless CLI run."""

import numpy as np
import pytest

from dodge_sim.main import config_from_args, build_parser, run, run_headless, scripted_pointer
from dodge_sim.sim.config import ArenaConfig
from dodge_sim.sim.models import Position, default_enemy
from dodge_sim.sim.world import World


def test_scripted_pointer():
    assert scripted_pointer(10, 0.0) == (0.0, 0.0)
    x, y = scripted_pointer(0, 50.0)
    assert (x, y) == pytest.approx((50.0, 0.0))
    x, y = scripted_pointer(60, 50.0)
    assert (x, y) == pytest.approx((0.0, 50.0), abs=1e-9)


def test_config_from_args():
    args = build_parser().parse_args(["--enemies", "12", "--collision", "circle", "--clamp-dead"])
    cfg = config_from_args(args)
    assert cfg.enemy_count == 12
    assert cfg.collision_mode == "circle"
    assert cfg.clamp_when_dead


def test_bad_config_is_a_usage_error():
    with pytest.raises(SystemExit):
        run(["--enemies", "-3"])


def test_headless_run(capsys):
    summary = run(["--frames", "25", "--enemies", "10", "--seed", "2"])
    assert summary["frames"] == 25
    assert summary["enemies"] == 10
    assert "[headless] frames=25" in capsys.readouterr().out


def test_headless_death_then_auto_reset(capsys):
    world = World(ArenaConfig(enemy_count=0), seed=1)
    world._state.enemies.append(default_enemy(Position(2.0, -2.0)))
    summary = run_headless(world, frames=5, auto_reset=True)
    assert summary["deaths"] == [1]
    assert summary["resets"] == 1
    assert summary["alive"] is True
    out = capsys.readouterr().out
    assert "player died" in out
    assert "reset #1" in out


def test_without_auto_reset_player_stays_dead():
    world = World(ArenaConfig(enemy_count=0), seed=1)
    world._state.enemies.append(default_enemy(Position(2.0, -2.0)))
    summary = run_headless(world, frames=5)
    assert summary["resets"] == 0
    assert summary["alive"] is False


def test_record_flag_writes_npz(tmp_path):
    out = tmp_path / "rec.npz"
    run(["--frames", "6", "--enemies", "4", "--record", str(out)])
    data = np.load(out)
    assert data["enemy_pos"].shape == (6, 4, 2)
