"""
junction/sim_bridge.py
======================
Host adapter between :class:`junction.world.World` and the renderer.

The view owns the frame clock and calls :meth:`SimBridge.step` once per
frame, so one rendered frame is exactly one simulated tick.  Between steps
the bridge serves the cached snapshot to the drawing code.

Public API consumed by :mod:`ui.pygame_view`
--------------------------------------------
* ``step()``                  → ``None``
* ``get_vehicles()``          → ``List[dict]``
* ``get_intersection()``      → ``dict``
* ``is_finished()``           → ``bool``
* ``reset()``                 → ``None``
* ``set_paused(bool)``        → ``None``
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from junction.traffic_policy import SimulationPolicy
from junction.types import DIRECTIONS
from junction.world import World

log = logging.getLogger("sim_bridge")


class SimBridge:
    """Frame-driven simulation orchestrator.

    Parameters
    ----------
    policy : SimulationPolicy or None
        Tunable constants.
    random_seed : int or None
        Seed for reproducibility.
    preload : int
        Vehicles parked on every arm before the first tick.
    world : World or None
        Pre-built world; overrides *policy* and *random_seed*.
    """

    def __init__(
        self,
        policy: Optional[SimulationPolicy] = None,
        random_seed: Optional[int] = None,
        preload: int = 0,
        world: Optional[World] = None,
    ) -> None:
        self._world = world or World(policy=policy, seed=random_seed)
        self._preload = max(0, int(preload))
        self._paused = False
        self._snapshot: Dict[str, Any] = {}
        self._seed_world()

    @property
    def world(self) -> World:
        return self._world

    @property
    def paused(self) -> bool:
        return self._paused

    def _seed_world(self) -> None:
        if self._preload:
            self._world.preload_queues(self._preload)
        self._snapshot = self._world.snapshot()

    # ── Frame API ─────────────────────────────────────────────────────────────

    def step(self) -> None:
        """Advance one tick unless paused and refresh the cached snapshot."""
        if self._paused:
            return
        self._world.advance_simulation()
        self._snapshot = self._world.snapshot()

    def run_headless(self, ticks: int, log_every: int = 0) -> Dict[str, Any]:
        """Advance *ticks* frames without a window; returns the last snapshot."""
        for i in range(max(0, ticks)):
            self._world.advance_simulation()
            if log_every and (i + 1) % log_every == 0:
                signal = self._world.signal
                waiting = self._world.waiting_counts()
                log.info(
                    "tick %d: %s %s %ds  live=%d  waiting %s",
                    self._world.tick_count,
                    signal.active_direction.name, signal.phase.value,
                    signal.seconds_remaining, len(self._world.vehicles),
                    " ".join(f"{d.short}={waiting[d]}" for d in DIRECTIONS),
                )
        self._snapshot = self._world.snapshot()
        return dict(self._snapshot)

    # ── Bus adapter API ───────────────────────────────────────────────────────

    def get_snapshot(self) -> Dict[str, Any]:
        return dict(self._snapshot)

    def get_vehicles(self) -> List[Dict[str, Any]]:
        return list(self._snapshot.get("vehicles", []))

    def get_intersection(self) -> Dict[str, Any]:
        """Signal, queue and metrics data for the road and HUD renderers."""
        layout = self._world.layout
        return {
            "signal": dict(self._snapshot.get("signal", {})),
            "waiting": dict(self._snapshot.get("waiting", {})),
            "metrics": dict(self._snapshot.get("metrics", {})),
            "tick": self._snapshot.get("tick", 0),
            "road_width": self._world.policy.road_width,
            "stop_line_offset": layout.stop_line_offset,
            "lane_offset": layout.lane_offset,
            "fps": self._world.policy.fps,
        }

    def is_finished(self) -> bool:
        """The junction runs until the host stops requesting frames."""
        return False

    def reset(self) -> None:
        """Re-initialise the world so the scenario replays."""
        self._world.reset()
        self._seed_world()
        log.info("SimBridge reset")

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick."""
        self._paused = bool(paused)
