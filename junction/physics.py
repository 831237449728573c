#!/usr/bin/env python3
"""
junction/physics.py
===================
Low-level kinematics helpers used by :mod:`junction.vehicle` and
:mod:`junction.occupancy`.

All quantities are per tick: distances in position units, speeds in
units per tick, rates in units per tick².
"""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def approach_speed_limit(remaining: float, decel_rate: float) -> float:
    """Highest speed from which a vehicle can still stop within *remaining*.

    Braking at *decel_rate* from ``sqrt(2 * decel_rate * remaining)`` covers
    exactly *remaining*.  Zero once *remaining* is zero or negative.
    """
    if remaining <= 0.0:
        return 0.0
    return math.sqrt(2.0 * decel_rate * remaining)


def frames_to_seconds(frames: int, fps: int) -> int:
    """Whole seconds shown on a countdown; never negative."""
    return int(math.ceil(max(0, frames) / float(fps)))
