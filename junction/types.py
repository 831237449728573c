"""
junction/types.py
=================
Enums shared by every simulation module.

World coordinates put the origin at the junction centre with +x east and
+y north.  A :class:`Direction` names the arm a vehicle *approaches from*,
so a NORTH vehicle travels south.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Approach arm of the junction, in fixed cyclic order."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def short(self) -> str:
        return self.name[0]

    def next(self) -> "Direction":
        """Next arm in the N → E → S → W rotation."""
        return _ORDER[(self.value + 1) % len(_ORDER)]

    @property
    def heading(self) -> Tuple[float, float]:
        """Unit travel vector of a vehicle on this arm."""
        return _HEADINGS[self]

    @property
    def outward(self) -> Tuple[float, float]:
        """Unit vector pointing from the junction out along this arm."""
        hx, hy = _HEADINGS[self]
        return -hx, -hy

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.NORTH, Direction.SOUTH)

    @classmethod
    def parse(cls, value: str) -> "Direction":
        """Accept ``"N"``, ``"north"`` or ``"NORTH"``."""
        text = str(value).strip().upper()
        for direction in _ORDER:
            if text in (direction.name, direction.short):
                return direction
        raise ValueError(f"unknown direction: {value!r}")


_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

DIRECTIONS: Tuple[Direction, ...] = _ORDER

_HEADINGS = {
    Direction.NORTH: (0.0, -1.0),
    Direction.EAST:  (-1.0, 0.0),
    Direction.SOUTH: (0.0, 1.0),
    Direction.WEST:  (1.0, 0.0),
}


class SignalPhase(Enum):
    """Phase of the single active arm.  Every other arm is red."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"


class VehicleKind(Enum):
    """Vehicle class; selects footprint and desired-speed range."""
    CAR = "car"
    BIKE = "bike"
    AUTO = "auto"
