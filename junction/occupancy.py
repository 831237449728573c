#!/usr/bin/env python3
"""
junction/occupancy.py
=====================
Slot-based car-following model.

Each approach arm has ``slot_count`` fixed queue slots.  A queued vehicle
holds exactly one slot and may only move toward the slot directly ahead
of it, and only while that slot is free.  Vehicles are evaluated nearest
to the junction first, within a single pass, so a slot released during a
tick is already visible to the vehicle behind it in the same tick.

Because a vehicle only ever checks the one slot ahead of its own, and no
one else can take that slot once it is seen free, two non-crossed vehicles
of one arm can never hold the same slot index.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Sequence

from junction.geometry import Layout
from junction.physics import approach_speed_limit
from junction.traffic_policy import SimulationPolicy
from junction.types import DIRECTIONS, Direction
from junction.vehicle import CLAIM_EPSILON, FREE_RUN, MovePlan, Vehicle

log = logging.getLogger("occupancy")


class SignalView(Protocol):
    """Read-only view of the signal needed by the occupancy model."""

    def is_green(self, direction: Direction) -> bool: ...


class SlotOccupancy:
    """Slot reservation table plus the per-tick update pass.

    Parameters
    ----------
    layout : Layout
        Slot geometry.
    policy : SimulationPolicy
        Speed-model rates.
    """

    def __init__(self, layout: Layout, policy: SimulationPolicy) -> None:
        self.layout = layout
        self.policy = policy
        self._held: Dict[Direction, Dict[int, Vehicle]] = {d: {} for d in DIRECTIONS}
        # Rearmost crossed vehicle per arm, as moved so far in the current pass.
        self._last_crossed: Dict[Direction, Vehicle] = {}

    # ── reservation table ─────────────────────────────────────────────────

    def holder(self, direction: Direction, index: int) -> Optional[Vehicle]:
        return self._held[direction].get(index)

    def is_held(
        self,
        direction: Direction,
        index: int,
        exclude: Optional[Vehicle] = None,
    ) -> bool:
        holder = self._held[direction].get(index)
        return holder is not None and holder is not exclude

    def register(self, vehicle: Vehicle) -> None:
        """Record *vehicle*'s slot.  The caller guarantees the slot is free."""
        if vehicle.crossed or vehicle.slot is None:
            return
        self._held[vehicle.direction][vehicle.slot] = vehicle

    def queue(self, direction: Direction) -> List[Vehicle]:
        """Non-crossed vehicles of *direction*, nearest slot first."""
        table = self._held[direction]
        return [table[i] for i in sorted(table)]

    def free_tail_slot(self, direction: Direction) -> Optional[int]:
        """Farthest slot index a new vehicle may enter, or ``None``.

        Searching from the far end, the candidate is the last slot; it is
        only usable when no vehicle holds it, since a vehicle parked or
        rolling there would share the new arrival's footprint.
        """
        last = self.layout.slot_count - 1
        if self.is_held(direction, last):
            return None
        return last

    def waiting_counts(self) -> Dict[Direction, int]:
        """Number of non-crossed vehicles per arm."""
        return {d: len(self._held[d]) for d in DIRECTIONS}

    # ── car-following ─────────────────────────────────────────────────────

    def plan(self, vehicle: Vehicle, signal: SignalView) -> MovePlan:
        """Decide how far and how fast *vehicle* may move this tick."""
        if vehicle.crossed or vehicle.slot is None:
            return self.follow(vehicle)

        direction = vehicle.direction
        index = vehicle.slot
        here = self.layout.slot_distance(index)

        if index == 0:
            departed = vehicle.distance < here - CLAIM_EPSILON
            if departed or signal.is_green(direction):
                # Committed: once rolling off slot 0 it clears the line.
                return self.follow(vehicle)
            return MovePlan(allowed=False, floor=here)

        ahead = index - 1
        if self.is_held(direction, ahead, exclude=vehicle):
            return MovePlan(allowed=False, floor=here)

        target = self.layout.slot_distance(ahead)
        if ahead == 0:
            onward = signal.is_green(direction)
        else:
            onward = not self.is_held(direction, ahead - 1, exclude=vehicle)
        cap = None
        if not onward:
            cap = approach_speed_limit(vehicle.distance - target, self.policy.decel_rate)
        return MovePlan(allowed=True, floor=target, claim=ahead, speed_cap=cap)

    def follow(self, vehicle: Vehicle) -> MovePlan:
        """Plan for a vehicle released past its queue.

        It runs freely unless another released vehicle of its arm is less
        than one slot gap ahead; then it is held to that vehicle's speed
        and may not close in beyond ``slot_margin`` between bumpers.
        """
        leader = self._last_crossed.get(vehicle.direction)
        if leader is None or leader is vehicle or leader.distance >= vehicle.distance:
            return FREE_RUN
        floor = leader.distance + (leader.length + vehicle.length) / 2.0 + self.policy.slot_margin
        floor = min(floor, vehicle.distance)
        cap = None
        if vehicle.distance - floor < self.layout.slot_gap:
            cap = leader.speed
        return MovePlan(allowed=True, floor=floor, speed_cap=cap)

    def evaluation_order(self, vehicles: Sequence[Vehicle]) -> List[Vehicle]:
        """Crossed vehicles first, farthest along first, then every arm's
        queue nearest first."""
        ordered = sorted(
            (v for v in vehicles if v.crossed or v.slot is None),
            key=lambda v: v.distance,
        )
        for direction in DIRECTIONS:
            ordered.extend(self.queue(direction))
        return ordered

    def update(self, vehicles: Sequence[Vehicle], signal: SignalView) -> List[Vehicle]:
        """Run one single-pass update over *vehicles*.

        Returns the vehicles that crossed their stop line during this tick.
        """
        newly_crossed: List[Vehicle] = []
        self._last_crossed = {}
        for vehicle in self.evaluation_order(vehicles):
            before = vehicle.slot
            was_crossed = vehicle.crossed
            vehicle.advance(signal, self, self.policy)
            if vehicle.slot != before:
                self._move_reservation(vehicle, before)
            if vehicle.crossed or vehicle.slot is None:
                self._last_crossed[vehicle.direction] = vehicle
            if vehicle.crossed and not was_crossed:
                newly_crossed.append(vehicle)
                log.debug("%s crossed %s stop line", vehicle.id, vehicle.direction.name)
        return newly_crossed

    def _move_reservation(self, vehicle: Vehicle, previous: Optional[int]) -> None:
        table = self._held[vehicle.direction]
        if previous is not None and table.get(previous) is vehicle:
            del table[previous]
        if vehicle.slot is not None:
            table[vehicle.slot] = vehicle
