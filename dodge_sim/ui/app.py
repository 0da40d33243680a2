# dodge_sim/ui/app.py
from __future__ import annotations
import pygame
from .renderer import Renderer, screen_to_world
from .recorder import Recorder
from ..sim.config import ARENA, SIM
from ..sim.engine import FrameInput
from ..sim.world import World


def run_ui(world: World | None = None, seed: int | None = None):
    if world is None:
        world = World(ARENA, seed=SIM.seed if seed is None else seed)

    pygame.init()
    pygame.display.set_caption("Environment")
    size = int(world.config.arena_size)
    screen = pygame.display.set_mode((size, size))
    clock = pygame.time.Clock()

    renderer = Renderer(screen, world.bounds)
    recorder = Recorder(enabled=False, stride_steps=SIM.record_stride,
                        arena_size=world.config.arena_size, out_dir=SIM.recordings_dir)

    running = True
    while running:
        clock.tick(SIM.fps)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE: running = False
                elif e.key == pygame.K_v: recorder.toggle()
                elif e.key == pygame.K_c: recorder.clear()
                elif e.key == pygame.K_s: recorder.save_npz()

        mx, my = pygame.mouse.get_pos()
        pointer = screen_to_world(mx, my, renderer.world_rect, world.bounds)
        pressed = pygame.mouse.get_pressed()[0]
        world.update(FrameInput(pointer=pointer, pressed=pressed, bounds=world.bounds))

        snap = world.snapshot()
        recorder.maybe_capture(snap)
        renderer.draw_world(snap)
        renderer.draw_hud(snap, recorder.enabled)
        pygame.display.flip()

    pygame.quit()
