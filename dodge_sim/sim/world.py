# dodge_sim/sim/world.py
from __future__ import annotations
from typing import Optional

from .config import ARENA, ArenaConfig
from .engine import FrameInput, collision_test, handle_bounds, step_alive, wants_reset
from .geometry import Rect
from .models import Snapshot, WorldState, default_player
from .rng import RNG
from .spawn import spawn_enemies


def setup_world(config: ArenaConfig, rng: RNG) -> WorldState:
    """Fresh player at the origin plus `enemy_count` enemies scattered around it."""
    player = default_player(radius=config.entity_radius)
    enemies = spawn_enemies(
        player, int(config.enemy_count), config.half_extent, rng,
        margin=config.spawn_margin, radius=config.entity_radius,
    )
    return WorldState(player=player, enemies=enemies)


class World:
    """
    Owns the player and the enemies. The host calls `update` then `snapshot`
    once per frame. A reset builds a whole new WorldState and swaps it in.
    """
    def __init__(self, config: ArenaConfig = ARENA, rng: Optional[RNG] = None, seed: Optional[int] = None):
        self.config = config.validate()
        self.rng = rng if rng is not None else RNG(seed)
        self.bounds = Rect.centered(config.arena_size)
        self._collides = collision_test(config.collision_mode)
        self._state: WorldState = setup_world(self.config, self.rng)
        self.frame: int = 0
        self.resets: int = 0

    def reset(self) -> None:
        fresh = setup_world(self.config, self.rng)
        self._state = fresh
        self.resets += 1

    def update(self, inp: FrameInput) -> bool:
        """Advance one frame. Returns True if the world was reset."""
        self.frame += 1
        self.bounds = inp.bounds
        state = self._state

        if wants_reset(state, inp):
            self.reset()
            return True

        if not state.player.alive:
            if self.config.clamp_when_dead:
                handle_bounds(state, inp.bounds)
            return False

        step_alive(state, inp, self.rng, self.config.walk_step, self._collides)
        return False

    def snapshot(self) -> Snapshot:
        s = self._state
        return Snapshot(
            player=s.player.drawable(),
            enemies=tuple(e.drawable() for e in s.enemies),
            frame=self.frame,
            resets=self.resets,
        )

    # convenience views
    @property
    def player_alive(self) -> bool:
        return self._state.player.alive

    @property
    def enemy_count(self) -> int:
        return len(self._state.enemies)
