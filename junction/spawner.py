#!/usr/bin/env python3
"""
junction/spawner.py
===================
Rate-limited vehicle admission.

Every ``spawn_interval`` ticks one vehicle is offered to the junction.
Arms are tried in a random order; an arm accepts the vehicle only when its
farthest slot is free.  When the global cap is reached or all four arms
are full the attempt is declined, which is a normal outcome.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from junction.geometry import Layout
from junction.metrics import SimMetrics
from junction.occupancy import SlotOccupancy
from junction.traffic_policy import SimulationPolicy, draw_kind
from junction.types import DIRECTIONS, Direction, VehicleKind
from junction.vehicle import Vehicle

log = logging.getLogger("spawner")


class Spawner:
    """Creates vehicles on free tail slots.

    Parameters
    ----------
    policy : SimulationPolicy
        Spawn interval, cap and kind mix.
    layout : Layout
        Slot geometry for initial placement.
    occupancy : SlotOccupancy
        Reservation table consulted (and updated) on admission.
    rng : random.Random
        Shared seeded generator.
    metrics : SimMetrics
        Counters for admitted / declined spawns.
    """

    def __init__(
        self,
        policy: SimulationPolicy,
        layout: Layout,
        occupancy: SlotOccupancy,
        rng: random.Random,
        metrics: SimMetrics,
    ) -> None:
        self.policy = policy
        self.layout = layout
        self.occupancy = occupancy
        self._rng = rng
        self.metrics = metrics
        self._countdown = 0
        self._next_id = 0

    def try_spawn(self, live_count: int) -> Optional[Vehicle]:
        """Advance the spawn timer and admit at most one vehicle."""
        interval = self.policy.spawn_interval
        if interval <= 0:
            return None
        self._countdown += 1
        if self._countdown < interval:
            return None
        self._countdown = 0

        if live_count >= self.policy.max_vehicles:
            self.metrics.spawn_skipped += 1
            log.debug("spawn skipped: cap of %d reached", self.policy.max_vehicles)
            return None

        order = list(DIRECTIONS)
        self._rng.shuffle(order)
        for direction in order:
            slot = self.occupancy.free_tail_slot(direction)
            if slot is None:
                continue
            return self.spawn(direction, slot, draw_kind(self._rng, self.policy))

        self.metrics.spawn_skipped += 1
        log.debug("spawn skipped: every arm is full")
        return None

    def spawn(self, direction: Direction, slot: int, kind: VehicleKind) -> Vehicle:
        """Create a vehicle parked on *slot* and reserve it.

        The caller guarantees the slot is free.
        """
        vehicle = Vehicle.create(
            vehicle_id=f"VEH_{self._next_id:04d}",
            direction=direction,
            kind=kind,
            slot=slot,
            layout=self.layout,
            policy=self.policy,
            rng=self._rng,
        )
        self._next_id += 1
        self.occupancy.register(vehicle)
        self.metrics.spawned += 1
        log.debug("spawned %s (%s) on %s slot %d",
                  vehicle.id, kind.value, direction.name, slot)
        return vehicle
