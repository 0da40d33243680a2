# dodge_sim/ui/renderer.py
from __future__ import annotations
import pygame
from ..sim.geometry import Rect
from ..sim.models import Snapshot

# ---------- Colors / Theme ----------
BG_COLOR     = (47, 79, 79)     # dark slate gray
HUD_COLOR    = (220, 220, 220)
DEAD_HINT    = (240, 160, 60)

HUD_PAD_X    = 8
HUD_PAD_Y    = 6

# ---------- coordinate helpers ----------
def world_to_screen(x, y, screen_rect: pygame.Rect, bounds: Rect):
    """World (origin centre, y up) -> screen pixels (origin top-left, y down)."""
    rx, ry, rw, rh = screen_rect
    sx = rx + (x - bounds.left) / (bounds.right - bounds.left) * rw
    sy = ry + (bounds.top - y) / (bounds.top - bounds.bottom) * rh
    return int(round(sx)), int(round(sy))

def screen_to_world(sx, sy, screen_rect: pygame.Rect, bounds: Rect):
    rx, ry, rw, rh = screen_rect
    x = bounds.left + (sx - rx) / rw * (bounds.right - bounds.left)
    y = bounds.top - (sy - ry) / rh * (bounds.top - bounds.bottom)
    return float(x), float(y)

def radius_to_screen(r, screen_rect: pygame.Rect, bounds: Rect) -> int:
    return max(1, int(round(r * screen_rect.w / (bounds.right - bounds.left))))

class Renderer:
    def __init__(self, screen, bounds: Rect, font_name="Menlo", show_hud=True):
        self.screen = screen
        self.bounds = bounds
        self.world_rect = screen.get_rect()
        self.show_hud = show_hud
        self.font = pygame.font.SysFont(font_name, 14) if show_hud else None

    def draw_world(self, snap: Snapshot):
        self.screen.fill(BG_COLOR)
        for d in snap.circles():
            center = world_to_screen(d.x, d.y, self.world_rect, self.bounds)
            pygame.draw.circle(self.screen, d.color, center,
                               radius_to_screen(d.radius, self.world_rect, self.bounds))

    def draw_hud(self, snap: Snapshot, recording: bool):
        if not self.show_hud:
            return
        lines = [f"frame {snap.frame}  resets {snap.resets}  enemies {len(snap.enemies)}"
                 + ("  [REC]" if recording else "")]
        if not snap.player.alive:
            lines.append("dead - click to restart")
        y = HUD_PAD_Y
        for i, txt in enumerate(lines):
            col = DEAD_HINT if i > 0 else HUD_COLOR
            surf = self.font.render(txt, True, col)
            self.screen.blit(surf, (HUD_PAD_X, y))
            y += surf.get_height() + 2
