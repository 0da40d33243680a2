# dodge_sim/sim/config.py
from dataclasses import dataclass

COLLISION_MODES = ("box", "circle")

# ------------------------------------------------------------
# ARENA / ENTITY SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so the CLI can override before the world is built
class ArenaConfig:
    # square window, centred on the origin
    arena_size: float = 512.0
    enemy_count: int = 500
    entity_radius: float = 5.0
    # spawn inside this fraction of the half extent
    spawn_margin: float = 0.80
    # random walk: each axis moves within +/- walk_step per frame
    walk_step: float = 1.0
    # "box" = per-axis radius test, "circle" = true distance
    collision_mode: str = "box"
    # clamping is skipped on frames where the player is already dead
    clamp_when_dead: bool = False

    @property
    def half_extent(self) -> float:
        return self.arena_size / 2.0

    def validate(self) -> "ArenaConfig":
        if self.arena_size <= 0:
            raise ValueError(f"arena_size must be positive, got {self.arena_size}")
        if self.enemy_count < 0:
            raise ValueError(f"enemy_count must be >= 0, got {self.enemy_count}")
        if self.entity_radius <= 0:
            raise ValueError(f"entity_radius must be positive, got {self.entity_radius}")
        if not (0.0 < self.spawn_margin <= 1.0):
            raise ValueError(f"spawn_margin must be in (0, 1], got {self.spawn_margin}")
        if self.walk_step < 0:
            raise ValueError(f"walk_step must be >= 0, got {self.walk_step}")
        if self.collision_mode not in COLLISION_MODES:
            raise ValueError(
                f"collision_mode must be one of {COLLISION_MODES}, got {self.collision_mode!r}"
            )
        return self

# ------------------------------------------------------------
# RUN SETTINGS (headless + UI)
# ------------------------------------------------------------
@dataclass(frozen=False)
class SimConfig:
    seed: int = 42
    fps: int = 60
    frames: int = 600          # headless run length
    record_stride: int = 1     # capture every N frames
    recordings_dir: str = "recordings"

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
ARENA = ArenaConfig()
SIM = SimConfig()
