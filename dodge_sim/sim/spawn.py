# dodge_sim/sim/spawn.py
from __future__ import annotations
from typing import List, Optional, Tuple

from .models import Enemy, Entity, Position, default_enemy
from .rng import RNG

DEFAULT_MARGIN = 0.80


def _sides(coord: float, clearance: float, bound: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    low = (-bound, coord - clearance)
    high = (coord + clearance, bound)
    return low, high


def _is_empty(side: Tuple[float, float]) -> bool:
    return side[0] > side[1]


def _sample_axis(rng: RNG, coord: float, clearance: float, bound: float) -> float:
    low, high = _sides(coord, clearance, bound)
    pick_low = rng.coin()
    chosen, other = (low, high) if pick_low else (high, low)

    if _is_empty(chosen):
        if not _is_empty(other):
            chosen = other
        else:
            # nothing fits on either side: collapse to the chosen side's outer bound
            edge = -bound if pick_low else bound
            return edge
    return rng.uniform(chosen[0], chosen[1])


def spawn_enemy_position(player: Entity, arena_half_extent: float, rng: RNG,
                         margin: float = DEFAULT_MARGIN) -> Position:
    """
    Random position at least 2x the player's radius away on *each* axis.

    Each axis flips a coin for the side of the player to sample from, then
    draws uniformly between that side's edge (arena_half_extent * margin)
    and the player's coordinate +/- the clearance. Clearing both axes keeps
    the spawn out of the bounding-box overlap zone.
    """
    clearance = player.radius * 2.0
    bound = arena_half_extent * margin
    return Position(
        x=_sample_axis(rng, player.position.x, clearance, bound),
        y=_sample_axis(rng, player.position.y, clearance, bound),
    )


def degenerate_axes(player: Entity, arena_half_extent: float,
                    margin: float = DEFAULT_MARGIN) -> List[str]:
    """Axes on which at least one spawn side is empty."""
    clearance = player.radius * 2.0
    bound = arena_half_extent * margin
    bad = []
    for name, coord in (("x", player.position.x), ("y", player.position.y)):
        low, high = _sides(coord, clearance, bound)
        if _is_empty(low) or _is_empty(high):
            bad.append(name)
    return bad


def spawn_enemies(player: Entity, count: int, arena_half_extent: float, rng: RNG,
                  margin: float = DEFAULT_MARGIN, radius: Optional[float] = None) -> List[Enemy]:
    if radius is None:
        radius = player.radius
    bad = degenerate_axes(player, arena_half_extent, margin)
    if bad and count > 0:
        print(f"[spawn] clearance {player.radius * 2.0:.2f} does not fit inside "
              f"bound {arena_half_extent * margin:.2f} on axis {','.join(bad)}; "
              f"using the opposite side or the arena edge")
    return [
        default_enemy(spawn_enemy_position(player, arena_half_extent, rng, margin), radius=radius)
        for _ in range(count)
    ]
