#!/usr/bin/env python3
"""
junction/world.py
=================
Simulation context for one four-way junction.

The :class:`World` owns every piece of mutable state (the vehicle list,
the signal controller, the slot reservation table, the spawner and the
metrics), so nothing lives at module level.  The host calls
:meth:`World.advance_simulation` once per frame and reads the result back
through :meth:`World.snapshot`.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from junction.geometry import Layout
from junction.metrics import SimMetrics
from junction.occupancy import SlotOccupancy
from junction.signal_controller import SignalController
from junction.spawner import Spawner
from junction.traffic_policy import SimulationPolicy
from junction.types import DIRECTIONS, Direction, SignalPhase, VehicleKind
from junction.vehicle import Vehicle

log = logging.getLogger("world")

# Ticks between periodic debug dumps of the queue state.
_DEBUG_EVERY = 600


class World:
    """Junction scenario driven one tick at a time.

    Parameters
    ----------
    policy : SimulationPolicy or None
        Tunable constants; uses defaults when *None*.
    seed : int or None
        Random seed for reproducibility (spawn order, kinds, speeds).
    """

    def __init__(
        self,
        policy: Optional[SimulationPolicy] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.policy = policy or SimulationPolicy()
        self.layout = Layout.from_policy(self.policy)
        self.seed = seed
        self._init_state()

    # ── initialisation / reset ────────────────────────────────────────────

    def _init_state(self) -> None:
        self._rng = random.Random(self.seed)
        self.vehicles: List[Vehicle] = []
        self.metrics = SimMetrics()
        self.signal = SignalController(self.policy)
        self.occupancy = SlotOccupancy(self.layout, self.policy)
        self.spawner = Spawner(
            self.policy, self.layout, self.occupancy, self._rng, self.metrics,
        )
        self.metrics.record_green(self.signal.active_direction)
        self.tick_count = 0

    def reset(self) -> None:
        """Restore the initial state so the scenario replays identically."""
        self._init_state()
        log.info("world reset (seed=%s)", self.seed)

    def place_vehicle(
        self,
        direction: Direction,
        slot: int,
        kind: Optional[VehicleKind] = None,
    ) -> Optional[Vehicle]:
        """Park a stationary vehicle on *slot*; ``None`` if the slot is taken.

        Raises
        ------
        IndexError
            If *slot* is outside ``0..slot_count-1``.
        """
        self.layout.slot_distance(slot)
        if self.occupancy.is_held(direction, slot):
            return None
        vehicle = self.spawner.spawn(direction, slot, kind or VehicleKind.CAR)
        self.vehicles.append(vehicle)
        return vehicle

    def preload_queues(
        self,
        per_direction: int,
        kind: VehicleKind = VehicleKind.CAR,
    ) -> List[Vehicle]:
        """Fill slots ``0..per_direction-1`` on every arm."""
        count = min(per_direction, self.layout.slot_count)
        placed: List[Vehicle] = []
        for direction in DIRECTIONS:
            for slot in range(count):
                vehicle = self.place_vehicle(direction, slot, kind)
                if vehicle is not None:
                    placed.append(vehicle)
        return placed

    # ── tick ──────────────────────────────────────────────────────────────

    def advance_simulation(self) -> None:
        """Run one tick: signal → spawn → nearest-first update → cleanup."""
        self.tick_count += 1

        changed = self.signal.tick(self.occupancy.waiting_counts())
        if changed and self.signal.phase is SignalPhase.GREEN:
            self.metrics.record_green(self.signal.active_direction)

        spawned = self.spawner.try_spawn(len(self.vehicles))
        if spawned is not None:
            self.vehicles.append(spawned)

        crossed = self.occupancy.update(self.vehicles, self.signal)
        for vehicle in crossed:
            self.metrics.record_crossed(vehicle.direction, vehicle.wait_ticks)

        self._remove_departed()

        waiting = self.occupancy.waiting_counts()
        self.metrics.record_waiting(waiting)

        if self.tick_count % _DEBUG_EVERY == 1:
            log.debug(
                "=== TICK %d === %s %s %ds  live=%d  waiting N=%d E=%d S=%d W=%d",
                self.tick_count,
                self.signal.active_direction.name, self.signal.phase.value,
                self.signal.seconds_remaining, len(self.vehicles),
                waiting[Direction.NORTH], waiting[Direction.EAST],
                waiting[Direction.SOUTH], waiting[Direction.WEST],
            )

    def _remove_departed(self) -> None:
        kept: List[Vehicle] = []
        for vehicle in self.vehicles:
            if vehicle.crossed and self.layout.is_past_exit(vehicle.distance):
                self.metrics.removed += 1
                continue
            kept.append(vehicle)
        self.vehicles = kept

    # ── read model ────────────────────────────────────────────────────────

    def waiting_counts(self) -> Dict[Direction, int]:
        return self.occupancy.waiting_counts()

    def vehicles_view(self) -> List[Dict[str, Any]]:
        return [vehicle.as_dict(self.layout) for vehicle in self.vehicles]

    def signal_view(self) -> Dict[str, Any]:
        return self.signal.as_dict()

    def snapshot(self) -> Dict[str, Any]:
        """Everything the renderer needs for one frame."""
        return {
            "tick": self.tick_count,
            "vehicles": self.vehicles_view(),
            "signal": self.signal_view(),
            "waiting": {d.short: n for d, n in self.waiting_counts().items()},
            "metrics": self.metrics.report(),
        }
