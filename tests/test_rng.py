"""Tests for the seedable random source."""

from dodge_sim.sim.rng import RNG


def test_same_seed_same_sequence():
    a, b = RNG(3), RNG(3)
    assert [a.uniform(0, 1) for _ in range(5)] == [b.uniform(0, 1) for _ in range(5)]


def test_reseed_restarts_sequence():
    r = RNG(10)
    first = [r.uniform(-1, 1) for _ in range(3)]
    r.seed(10)
    assert [r.uniform(-1, 1) for _ in range(3)] == first


def test_uniform_range():
    r = RNG(0)
    for _ in range(200):
        assert 2.0 <= r.uniform(2.0, 3.0) <= 3.0


def test_coin_hits_both_faces():
    r = RNG(0)
    flips = {r.coin() for _ in range(100)}
    assert flips == {True, False}
