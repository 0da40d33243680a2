# dodge_sim/sim/visualize.py
from __future__ import annotations
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .geometry import Rect
from .models import Snapshot

BG_RGB = (47, 79, 79)  # dark slate gray


def _rgb01(c):
    return (c[0] / 255.0, c[1] / 255.0, c[2] / 255.0)


def snapshot(snap: Snapshot, bounds: Rect, title: str = "", show: bool = False):
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_xlim(bounds.left, bounds.right)
    ax.set_ylim(bounds.bottom, bounds.top)
    ax.set_aspect("equal")
    ax.set_facecolor(_rgb01(BG_RGB))
    for d in snap.circles():
        ax.add_patch(Circle((d.x, d.y), d.radius, color=_rgb01(d.color)))
    status = "alive" if snap.player.alive else "dead"
    ax.set_title(title or f"Frame {snap.frame} | resets={snap.resets} | player {status}")
    plt.tight_layout()
    if show:
        plt.show()
    return fig
