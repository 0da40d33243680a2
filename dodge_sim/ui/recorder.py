# dodge_sim/ui/recorder.py
from __future__ import annotations
import os, time
from typing import Optional
import numpy as np

from ..sim.models import Snapshot

class Recorder:
    """
    Capture a snapshot every `stride_steps` frames for offline playback (NPZ).
    Stores: player pos/alive, enemy positions (NaN padded), frame/reset counters.
    """
    def __init__(self, enabled=False, stride_steps=1, arena_size=512.0, out_dir="recordings"):
        self.enabled = enabled
        self.stride_steps = max(1, int(stride_steps))
        self.arena_size = float(arena_size)
        self.out_dir = out_dir
        self._tstep = 0
        self.player_list = []
        self.alive_list = []
        self.enemy_list = []
        self.frame_list = []
        self.maxN = 0

    def __len__(self): return len(self.player_list)

    def toggle(self): self.enabled = not self.enabled; print(f"[Recorder] {'ON' if self.enabled else 'OFF'}")
    def clear(self):
        self._tstep = 0
        self.player_list.clear(); self.alive_list.clear(); self.enemy_list.clear(); self.frame_list.clear()
        self.maxN = 0
        print("[Recorder] cleared")

    def maybe_capture(self, snap: Snapshot):
        if not self.enabled: return
        self._tstep += 1
        if ((self._tstep - 1) % self.stride_steps) != 0: return

        N = len(snap.enemies); self.maxN = max(self.maxN, N)
        ep = np.zeros((N, 2), np.float32)
        for i, e in enumerate(snap.enemies):
            ep[i] = (e.x, e.y)

        self.player_list.append((snap.player.x, snap.player.y))
        self.alive_list.append(snap.player.alive)
        self.enemy_list.append(ep)
        self.frame_list.append((snap.frame, snap.resets))

    def save_npz(self, out_path: Optional[str]=None):
        if not self.player_list:
            print("[Recorder] nothing to save"); return None

        T = len(self.player_list); maxN = self.maxN
        enemy_pos = np.full((T, maxN, 2), np.nan, np.float32)
        enemy_count = np.zeros((T,), np.int32)
        for t in range(T):
            N = self.enemy_list[t].shape[0]
            enemy_count[t] = N
            if N: enemy_pos[t, :N] = self.enemy_list[t]

        if out_path is None:
            stamp = time.strftime("%Y%m%d_%H%M%S")
            out_path = os.path.join(self.out_dir, f"dodge_run_{stamp}.npz")
        elif not out_path.endswith(".npz"):
            out_path += ".npz"  # numpy would append it anyway
        parent = os.path.dirname(out_path)
        if parent: os.makedirs(parent, exist_ok=True)

        np.savez_compressed(
            out_path,
            arena_size=np.float32(self.arena_size),
            stride=np.int32(self.stride_steps),
            player_pos=np.asarray(self.player_list, np.float32).reshape(T, 2),
            player_alive=np.asarray(self.alive_list, np.bool_),
            enemy_pos=enemy_pos,
            enemy_count=enemy_count,
            frame_resets=np.asarray(self.frame_list, np.int32).reshape(T, 2),
        )
        print(f"[Recorder] saved: {out_path} (T={T}, maxN={maxN})")
        return out_path
