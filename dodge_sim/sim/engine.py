# dodge_sim/sim/engine.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Tuple

from .models import Enemy, Entity, Player, Position, WorldState
from .geometry import COLLISION_TESTS, Rect, clamp_position, overlaps
from .rng import RNG

Vec = Tuple[float, float]
OverlapTest = Callable[[Entity, Entity], bool]


@dataclass(frozen=True)
class FrameInput:
    """What the host hands the core each frame (pointer already in world coords)."""
    pointer: Vec
    pressed: bool
    bounds: Rect


def collision_test(mode: str) -> OverlapTest:
    return COLLISION_TESTS[mode]


def wants_reset(state: WorldState, inp: FrameInput) -> bool:
    # Left click while dead: restart
    return inp.pressed and not state.player.alive


def follow_pointer(player: Player, pointer: Vec) -> None:
    player.position = Position(x=float(pointer[0]), y=float(pointer[1]))


def random_walk(enemy: Enemy, rng: RNG, step: float = 1.0) -> None:
    p = enemy.position
    p.x = rng.uniform(p.x - step, p.x + step)
    p.y = rng.uniform(p.y - step, p.y + step)


def apply_movement(state: WorldState, pointer: Vec, rng: RNG, step: float = 1.0) -> None:
    follow_pointer(state.player, pointer)
    for enemy in state.enemies:
        random_walk(enemy, rng, step)


def detect_collisions(state: WorldState, test: OverlapTest = overlaps) -> bool:
    """Kill the player if any enemy overlaps it. Returns True on a hit."""
    player = state.player
    for enemy in state.enemies:
        if test(player, enemy):
            player.kill()
            # further hits cannot change the outcome
            return True
    return False


def handle_bounds(state: WorldState, bounds: Rect) -> None:
    # both player and enemies are held inside the arena
    clamp_position(state.player.position, bounds)
    for enemy in state.enemies:
        clamp_position(enemy.position, bounds)


def step_alive(state: WorldState, inp: FrameInput, rng: RNG,
               walk_step: float = 1.0, test: OverlapTest = overlaps) -> bool:
    """
    One gameplay frame for a living player:
      movement -> collision detection -> boundary clamping.
    Clamping still runs on the frame the player dies.
    Returns True if the player died this frame.
    """
    apply_movement(state, inp.pointer, rng, walk_step)
    died = detect_collisions(state, test)
    handle_bounds(state, inp.bounds)
    return died

