"""Tests for the matplotlib snapshot plot."""

import matplotlib.pyplot as plt

from dodge_sim.sim.config import ArenaConfig
from dodge_sim.sim.visualize import snapshot
from dodge_sim.sim.world import World


def test_snapshot_figure():
    world = World(ArenaConfig(enemy_count=12), seed=4)
    fig = snapshot(world.snapshot(), world.bounds)
    ax = fig.axes[0]
    assert len(ax.patches) == 13
    assert ax.get_xlim() == (-256.0, 256.0)
    assert "player alive" in ax.get_title()
    plt.close(fig)
