#!/usr/bin/env python3
"""
junction/traffic_policy.py
==========================
Tunable geometry, signal, spawn and speed parameters for the junction
simulation.  Every constant lives in the frozen :class:`SimulationPolicy`
dataclass so that experiments can swap policies without touching code.

Also provides two stateless helpers:

* :func:`green_seconds`: density-based green duration.
* :func:`draw_kind`: weighted vehicle-kind draw.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Mapping

from junction.physics import clamp
from junction.types import Direction, VehicleKind


@dataclass(frozen=True)
class KindSpec:
    """Static attributes of one vehicle kind.

    ``length`` is measured along the direction of travel, ``breadth``
    across it.  Speeds are in position units per tick.
    """

    length: float
    breadth: float
    min_speed: float
    max_speed: float


def default_kinds() -> Dict[VehicleKind, KindSpec]:
    # Cars are the slowest, bikes the fastest, autos sit in between.
    return {
        VehicleKind.CAR:  KindSpec(length=36.0, breadth=18.0, min_speed=0.70, max_speed=1.00),
        VehicleKind.AUTO: KindSpec(length=30.0, breadth=14.0, min_speed=0.80, max_speed=1.10),
        VehicleKind.BIKE: KindSpec(length=26.0, breadth=12.0, min_speed=0.90, max_speed=1.20),
    }


@dataclass(frozen=True)
class SimulationPolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: timing, geometry, signal controller, speed model, spawn
    envelope, vehicle kinds.
    """

    # ── Timing ────────────────────────────────────────────────────────────
    fps: int = 60
    """Ticks per simulated second (one rendered frame per tick)."""

    # ── Geometry ──────────────────────────────────────────────────────────
    road_width: float = 160.0
    """Full width of each road; lane centres sit at a quarter of it."""

    stop_line_offset: float = 110.0
    """Distance from the junction centre to every stop line."""

    slot_count: int = 8
    """Queue slots per approach arm."""

    slot_gap: float = 50.0
    """Centre-to-centre spacing of neighbouring slots."""

    slot_margin: float = 8.0
    """Minimum bumper gap between vehicles parked in neighbouring slots."""

    exit_distance: float = 600.0
    """Crossed vehicles are removed once this far past their stop line."""

    # ── Signal controller ─────────────────────────────────────────────────
    start_direction: Direction = Direction.NORTH
    initial_green_seconds: float = 15.0
    base_green_seconds: float = 10.0
    max_green_seconds: float = 35.0
    yellow_seconds: float = 2.0

    density_factor: float = 1.5
    """Extra green seconds granted per waiting vehicle."""

    starvation_limit: int = 3
    """Consecutive green phases a waiting arm may be passed over before it
    preempts the density choice.  ``0`` disables the guard."""

    # ── Speed model ───────────────────────────────────────────────────────
    accel_rate: float = 0.006
    """Speed gained per tick while allowed to move."""

    decel_rate: float = 0.06
    """Speed lost per tick while blocked."""

    # ── Spawn envelope ────────────────────────────────────────────────────
    spawn_interval: int = 80
    """Ticks between spawn attempts.  ``0`` disables spawning."""

    max_vehicles: int = 160
    """Global cap on live vehicles, crossed ones included."""

    bike_probability: float = 0.08
    auto_probability: float = 0.06

    # ── Vehicle kinds ─────────────────────────────────────────────────────
    kinds: Mapping[VehicleKind, KindSpec] = field(default_factory=default_kinds)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.slot_count < 1:
            raise ValueError(f"slot_count must be at least 1, got {self.slot_count}")
        if self.slot_gap <= 0.0 or self.slot_margin < 0.0:
            raise ValueError("slot_gap must be positive and slot_margin non-negative")
        for name in ("initial_green_seconds", "base_green_seconds",
                     "yellow_seconds", "density_factor"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.starvation_limit < 0:
            raise ValueError(f"starvation_limit must be non-negative, got {self.starvation_limit}")
        if self.max_green_seconds < self.base_green_seconds:
            raise ValueError("max_green_seconds must not be below base_green_seconds")
        if self.spawn_interval < 0 or self.max_vehicles < 0:
            raise ValueError("spawn_interval and max_vehicles must be non-negative")
        for name in ("bike_probability", "auto_probability"):
            p = getattr(self, name)
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {p}")
        if self.bike_probability + self.auto_probability > 1.0:
            raise ValueError("bike_probability + auto_probability exceeds 1")
        if self.accel_rate <= 0.0 or self.decel_rate <= 0.0:
            raise ValueError("accel_rate and decel_rate must be positive")
        missing = [k.value for k in VehicleKind if k not in self.kinds]
        if missing:
            raise ValueError(f"no KindSpec for: {', '.join(missing)}")
        for kind, spec in self.kinds.items():
            if spec.min_speed > spec.max_speed:
                raise ValueError(f"{kind.value}: min_speed above max_speed")

    @property
    def max_vehicle_length(self) -> float:
        return max(spec.length for spec in self.kinds.values())

    def kind_spec(self, kind: VehicleKind) -> KindSpec:
        return self.kinds[kind]

    def seconds_to_frames(self, seconds: float) -> int:
        return int(round(self.fps * seconds))


def green_seconds(waiting: int, policy: SimulationPolicy) -> float:
    """Green duration for an arm with *waiting* queued vehicles.

    ``clamp(base + density_factor * waiting, base, max)``.
    """
    raw = policy.base_green_seconds + policy.density_factor * max(0, waiting)
    return clamp(raw, policy.base_green_seconds, policy.max_green_seconds)


def draw_kind(rng: random.Random, policy: SimulationPolicy) -> VehicleKind:
    """Weighted kind draw: mostly cars, a few bikes and autos."""
    r = rng.random()
    if r < policy.bike_probability:
        return VehicleKind.BIKE
    if r < policy.bike_probability + policy.auto_probability:
        return VehicleKind.AUTO
    return VehicleKind.CAR
