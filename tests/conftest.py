import os

# headless backends for pygame / matplotlib
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from dodge_sim.sim.config import ArenaConfig
from dodge_sim.sim.rng import RNG


@pytest.fixture
def rng():
    return RNG(1234)


@pytest.fixture
def small_config():
    return ArenaConfig(enemy_count=20)
