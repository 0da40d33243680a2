# dodge_sim/sim/models.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
RED: RGB = (255, 0, 0)
BLACK: RGB = (0, 0, 0)

DEFAULT_RADIUS = 5.0

@dataclass
class Position:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

@dataclass
class Entity:
    position: Position
    radius: float = DEFAULT_RADIUS
    color: RGB = WHITE
    alive: bool = True

    def drawable(self) -> "Drawable":
        return Drawable(
            x=self.position.x, y=self.position.y,
            radius=self.radius, color=self.color, alive=self.alive,
        )

class Player(Entity):
    """Follows the pointer and dies on first contact."""

    def kill(self) -> None:
        self.color = BLACK
        self.alive = False

class Enemy(Entity):
    """Wiggles around at random. Never dies; `alive` stays True."""

def default_player(radius: float = DEFAULT_RADIUS) -> Player:
    return Player(position=Position(0.0, 0.0), radius=radius, color=WHITE, alive=True)

def default_enemy(position: Optional[Position] = None, radius: float = DEFAULT_RADIUS) -> Enemy:
    if position is None:
        position = Position(0.0, 0.0)
    return Enemy(position=position, radius=radius, color=RED, alive=True)

# ------------------------------------------------------------
# READ-ONLY VIEWS FOR THE RENDERER
# ------------------------------------------------------------
@dataclass(frozen=True)
class Drawable:
    x: float
    y: float
    radius: float
    color: RGB
    alive: bool

@dataclass(frozen=True)
class Snapshot:
    player: Drawable
    enemies: Tuple[Drawable, ...]
    frame: int = 0
    resets: int = 0

    def circles(self) -> List[Drawable]:
        # enemies first so the player is painted on top
        return list(self.enemies) + [self.player]

@dataclass
class WorldState:
    player: Player
    enemies: List[Enemy] = field(default_factory=list)
