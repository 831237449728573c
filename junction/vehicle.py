"""
junction/vehicle.py
===================
A single vehicle on one approach arm.

The vehicle owns its kinematic state (distance to the stop line, speed,
slot, crossed flag) and applies the speed model.  *Whether* it may move is
decided by :class:`junction.occupancy.SlotOccupancy`; the vehicle only
executes the resulting :class:`MovePlan`.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from junction.traffic_policy import SimulationPolicy
from junction.types import Direction, VehicleKind

if TYPE_CHECKING:
    from junction.geometry import Layout
    from junction.occupancy import SignalView, SlotOccupancy

# Distance below which a moving vehicle counts as having reached a slot.
CLAIM_EPSILON = 1e-6


@dataclass(frozen=True)
class MovePlan:
    """Per-tick movement permission computed by the occupancy model.

    Attributes
    ----------
    allowed : bool
        True to accelerate toward desired speed, False to brake.
    floor : float or None
        Smallest distance the vehicle may reach this tick (its hold point).
    claim : int or None
        Slot index taken over on reaching *floor*.
    speed_cap : float or None
        Upper bound on speed, used to arrive softly at a hold point.
    """

    allowed: bool
    floor: Optional[float] = None
    claim: Optional[int] = None
    speed_cap: Optional[float] = None


FREE_RUN = MovePlan(allowed=True)


@dataclass
class Vehicle:
    """A straight-through vehicle.

    Attributes
    ----------
    id : str
        Unique identifier (e.g. ``VEH_0007``).
    direction : Direction
        Arm the vehicle approaches from.
    kind : VehicleKind
        Car, bike or auto.
    distance : float
        Signed distance of the vehicle centre from its stop line; positive
        before the line.
    desired_speed : float
        Cruise speed, fixed for the vehicle's lifetime.
    length, breadth : float
        Footprint along / across the direction of travel.
    slot : int or None
        Reserved queue slot; ``None`` once crossed.
    speed : float
        Current speed in units per tick.
    crossed : bool
        True once the leading edge has passed the stop line.  Never reverts.
    wait_ticks : int
        Ticks spent stopped on a slot before crossing.
    """

    id: str
    direction: Direction
    kind: VehicleKind
    distance: float
    desired_speed: float
    length: float
    breadth: float
    slot: Optional[int] = None
    speed: float = 0.0
    crossed: bool = False
    wait_ticks: int = field(default=0, repr=False)

    @classmethod
    def create(
        cls,
        vehicle_id: str,
        direction: Direction,
        kind: VehicleKind,
        slot: int,
        layout: "Layout",
        policy: SimulationPolicy,
        rng: random.Random,
    ) -> "Vehicle":
        """Build a stationary vehicle parked exactly on *slot*."""
        spec = policy.kind_spec(kind)
        return cls(
            id=vehicle_id,
            direction=direction,
            kind=kind,
            distance=layout.slot_distance(slot),
            desired_speed=rng.uniform(spec.min_speed, spec.max_speed),
            length=spec.length,
            breadth=spec.breadth,
            slot=slot,
        )

    # ── geometry ──────────────────────────────────────────────────────────

    @property
    def leading_edge(self) -> float:
        """Distance of the front bumper from the stop line."""
        return self.distance - self.length / 2.0

    @property
    def is_stopped(self) -> bool:
        return self.speed <= 0.0

    def position(self, layout: "Layout") -> tuple:
        return layout.position_for(self.direction, self.distance)

    # ── speed model ───────────────────────────────────────────────────────

    def update_speed(
        self,
        allowed: bool,
        accel_rate: float,
        decel_rate: float,
        speed_cap: Optional[float] = None,
    ) -> float:
        """Apply one tick of the linear accel / decel model.

        Blocked vehicles lose *decel_rate* (floored at zero).  Allowed
        vehicles gain *accel_rate* up to their desired speed and otherwise
        hold it.  *speed_cap* further limits an allowed vehicle, but never
        by more than *decel_rate* below the previous speed.
        """
        previous = self.speed
        if not allowed:
            self.speed = max(0.0, self.speed - decel_rate)
        elif self.speed < self.desired_speed:
            self.speed = min(self.desired_speed, self.speed + accel_rate)
        if allowed and speed_cap is not None and self.speed > speed_cap:
            self.speed = max(0.0, speed_cap, previous - decel_rate)
        return self.speed

    # ── tick ──────────────────────────────────────────────────────────────

    def advance(
        self,
        signal: "SignalView",
        neighbours: "SlotOccupancy",
        policy: SimulationPolicy,
    ) -> MovePlan:
        """Advance one tick under the plan *neighbours* grants for *signal*."""
        plan = neighbours.plan(self, signal)
        self.apply(plan, policy)
        return plan

    def apply(self, plan: MovePlan, policy: SimulationPolicy) -> None:
        self.update_speed(plan.allowed, policy.accel_rate, policy.decel_rate, plan.speed_cap)

        target = self.distance - self.speed
        if plan.floor is not None:
            if target <= plan.floor + CLAIM_EPSILON:
                target = plan.floor
                if plan.claim is not None:
                    self.slot = plan.claim
                if not plan.allowed:
                    # Pinned on the hold point: no longer moving.
                    self.speed = 0.0
            if not plan.allowed and self.speed <= 0.0:
                # Snap onto the hold point to keep sub-unit drift out.
                target = plan.floor
        self.distance = target

        if not self.crossed and self.slot is not None and self.is_stopped:
            self.wait_ticks += 1
        if not self.crossed and self.leading_edge < 0.0:
            self.crossed = True
            self.slot = None

    # ── serialisation ─────────────────────────────────────────────────────

    def as_dict(self, layout: "Layout") -> Dict[str, Any]:
        """Read-model entry consumed by the renderer."""
        x, y = self.position(layout)
        w, h = layout.extent(self.direction, self.kind)
        hx, hy = self.direction.heading
        return {
            "id": self.id,
            "direction": self.direction.short,
            "kind": self.kind.value,
            "x": x,
            "y": y,
            "width": w,
            "height": h,
            "heading": math.degrees(math.atan2(hy, hx)) % 360.0,
            "speed": self.speed,
            "crossed": self.crossed,
            "slot": self.slot,
            "wait_ticks": self.wait_ticks,
        }
