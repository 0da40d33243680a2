# dodge_sim/main.py
from __future__ import annotations
import argparse
import math
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .sim.config import ARENA, SIM, COLLISION_MODES, ArenaConfig
from .sim.engine import FrameInput
from .sim.world import World
from .sim.visualize import snapshot as plot_snapshot
from .ui.recorder import Recorder
from .ui.app import run_ui

ORBIT_PERIOD = 240  # frames per lap of the scripted pointer

def scripted_pointer(frame: int, orbit: float) -> Tuple[float, float]:
    if orbit <= 0:
        return (0.0, 0.0)
    ang = 2.0 * math.pi * (frame % ORBIT_PERIOD) / ORBIT_PERIOD
    return (orbit * math.cos(ang), orbit * math.sin(ang))

def run_headless(world: World, frames: int, orbit: float = 0.0, auto_reset: bool = False,
                 recorder: Optional[Recorder] = None) -> Dict[str, object]:
    """
    Drive the world without a window. The pointer either sits at the centre or
    circles it. With `auto_reset` the button is pressed the frame after a death.
    """
    deaths: List[int] = []
    for _ in range(frames):
        was_alive = world.player_alive
        pressed = auto_reset and not was_alive
        inp = FrameInput(pointer=scripted_pointer(world.frame, orbit), pressed=pressed, bounds=world.bounds)
        if world.update(inp):
            print(f"[headless] frame {world.frame:5d} | reset #{world.resets}")
        elif was_alive and not world.player_alive:
            deaths.append(world.frame)
            print(f"[headless] frame {world.frame:5d} | player died")
        if recorder is not None:
            recorder.maybe_capture(world.snapshot())
    return dict(
        frames=world.frame, deaths=deaths, resets=world.resets,
        alive=world.player_alive, enemies=world.enemy_count,
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dodge arena: avoid the wandering enemies")
    parser.add_argument("--ui", action="store_true", help="launch the real-time window")
    parser.add_argument("--seed", type=int, default=SIM.seed)
    parser.add_argument("--frames", type=int, default=SIM.frames, help="headless run length")
    parser.add_argument("--arena-size", type=float, default=ARENA.arena_size)
    parser.add_argument("--enemies", type=int, default=ARENA.enemy_count)
    parser.add_argument("--collision", choices=COLLISION_MODES, default=ARENA.collision_mode)
    parser.add_argument("--clamp-dead", action="store_true", default=ARENA.clamp_when_dead,
                        help="keep clamping entities to the arena after the player dies")
    parser.add_argument("--orbit", type=float, default=0.0,
                        help="headless pointer circles the centre at this radius")
    parser.add_argument("--auto-reset", action="store_true", help="headless: click after each death")
    parser.add_argument("--record", type=str, default=None, help="save an NPZ recording to this path")
    parser.add_argument("--plot", action="store_true", help="plot the final snapshot (matplotlib)")
    return parser

def config_from_args(args: argparse.Namespace) -> ArenaConfig:
    return replace(
        ARENA,
        arena_size=args.arena_size,
        enemy_count=args.enemies,
        collision_mode=args.collision,
        clamp_when_dead=args.clamp_dead,
    ).validate()

def run(argv: Optional[List[str]] = None) -> Dict[str, object]:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    world = World(config, seed=args.seed)

    if args.ui:
        run_ui(world)
        return {}

    recorder = None
    if args.record:
        recorder = Recorder(enabled=True, stride_steps=SIM.record_stride, arena_size=config.arena_size)

    summary = run_headless(world, args.frames, orbit=args.orbit,
                           auto_reset=args.auto_reset, recorder=recorder)
    print(
        f"[headless] frames={summary['frames']} deaths={len(summary['deaths'])} "
        f"resets={summary['resets']} alive={summary['alive']} enemies={summary['enemies']}"
    )
    if recorder is not None:
        recorder.save_npz(args.record)
    if args.plot:
        plot_snapshot(world.snapshot(), world.bounds, show=True)
    return summary

def cli() -> None:
    run()

if __name__ == "__main__":
    cli()
