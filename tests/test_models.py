"""Tests for entity defaults and the read-only snapshot types."""

import dataclasses

import pytest

from dodge_sim.sim.models import (
    BLACK, RED, WHITE, Drawable, Enemy, Player, Position, Snapshot,
    default_enemy, default_player,
)


def test_default_player():
    p = default_player()
    assert isinstance(p, Player)
    assert p.position == Position(0.0, 0.0)
    assert p.radius == 5.0
    assert p.color == WHITE
    assert p.alive


def test_default_enemy():
    e = default_enemy()
    assert isinstance(e, Enemy)
    assert e.position == Position(0.0, 0.0)
    assert e.radius == 5.0
    assert e.color == RED
    assert e.alive


def test_default_enemy_takes_position():
    e = default_enemy(Position(4.0, -2.0))
    assert e.position.as_tuple() == (4.0, -2.0)


def test_enemies_do_not_share_positions():
    a, b = default_enemy(), default_enemy()
    a.position.x = 9.0
    assert b.position.x == 0.0


def test_kill_turns_player_black():
    p = default_player()
    p.kill()
    assert not p.alive
    assert p.color == BLACK


def test_drawable_is_a_copy():
    p = default_player()
    d = p.drawable()
    p.position.x = 50.0
    assert d.x == 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.x = 1.0


def test_snapshot_draws_player_last():
    player = Drawable(0, 0, 5, WHITE, True)
    enemy = Drawable(20, 20, 5, RED, True)
    snap = Snapshot(player=player, enemies=(enemy,))
    assert snap.circles() == [enemy, player]
