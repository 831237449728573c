#!/usr/bin/env python3
"""
junction/geometry.py
====================
Static junction layout: stop lines, lane centres and queue slots.

Positions along an approach are expressed as a signed *distance* from the
arm's stop line, measured outward from the junction: positive before the
line, negative once past it.  :class:`Layout` converts such distances to
world ``(x, y)`` coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, NamedTuple, Tuple

from junction.traffic_policy import KindSpec, SimulationPolicy
from junction.types import DIRECTIONS, Direction, VehicleKind


class Box(NamedTuple):
    """Axis-aligned bounding box in world coordinates."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def overlaps(self, other: "Box") -> bool:
        """True when the interiors intersect; touching edges do not count."""
        return (
            self.x_min < other.x_max and other.x_min < self.x_max
            and self.y_min < other.y_max and other.y_min < self.y_max
        )


@dataclass(frozen=True)
class Layout:
    """Immutable geometry derived once from a :class:`SimulationPolicy`.

    Build it with :meth:`from_policy`; the effective slot gap is widened
    when needed so that two of the longest vehicles parked in neighbouring
    slots still keep ``slot_margin`` between bumpers.
    """

    stop_line_offset: float
    lane_offset: float
    slot_gap: float
    slot_count: int
    exit_distance: float
    kinds: Mapping[VehicleKind, KindSpec]

    @classmethod
    def from_policy(cls, policy: SimulationPolicy) -> "Layout":
        gap = max(policy.slot_gap, policy.max_vehicle_length + policy.slot_margin)
        return cls(
            stop_line_offset=policy.stop_line_offset,
            lane_offset=policy.road_width / 4.0,
            slot_gap=gap,
            slot_count=policy.slot_count,
            exit_distance=policy.exit_distance,
            kinds=policy.kinds,
        )

    # ── stop lines / lanes ────────────────────────────────────────────────

    def stop_line(self, direction: Direction) -> float:
        """Coordinate of the stop line on the arm's own axis.

        ``y`` for NORTH/SOUTH, ``x`` for EAST/WEST.
        """
        ox, oy = direction.outward
        return (ox + oy) * self.stop_line_offset

    def lane_center(self, direction: Direction) -> float:
        """Perpendicular coordinate of the arm's lane centre.

        Right-hand traffic: the lane sits to the driver's right, so the
        four inbound lanes never share a line.
        """
        rx, ry = _right_of(direction)
        return (rx + ry) * self.lane_offset

    def stop_lines(self) -> Dict[Direction, float]:
        return {d: self.stop_line(d) for d in DIRECTIONS}

    # ── slots ─────────────────────────────────────────────────────────────

    def slot_distance(self, index: int) -> float:
        """Distance of slot *index* from the stop line (slot 0 is nearest)."""
        if not 0 <= index < self.slot_count:
            raise IndexError(f"slot index {index} out of range 0..{self.slot_count - 1}")
        return (index + 1) * self.slot_gap

    def slot_position(self, direction: Direction, index: int) -> Tuple[float, float]:
        return self.position_for(direction, self.slot_distance(index))

    def slot_positions(self, direction: Direction) -> List[Tuple[float, float]]:
        return [self.slot_position(direction, i) for i in range(self.slot_count)]

    @property
    def spawn_distance(self) -> float:
        return self.slot_distance(self.slot_count - 1)

    # ── coordinates / footprints ──────────────────────────────────────────

    def position_for(self, direction: Direction, distance: float) -> Tuple[float, float]:
        """World position of a vehicle centre *distance* before the stop line."""
        ox, oy = direction.outward
        rx, ry = _right_of(direction)
        along = self.stop_line_offset + distance
        return (
            ox * along + rx * self.lane_offset,
            oy * along + ry * self.lane_offset,
        )

    def extent(self, direction: Direction, kind: VehicleKind) -> Tuple[float, float]:
        """Axis-aligned ``(width, height)`` of *kind* travelling on *direction*."""
        spec = self.kinds[kind]
        if direction.is_vertical:
            return spec.breadth, spec.length
        return spec.length, spec.breadth

    def footprint(self, direction: Direction, distance: float, kind: VehicleKind) -> Box:
        x, y = self.position_for(direction, distance)
        w, h = self.extent(direction, kind)
        return Box(x - w / 2.0, y - h / 2.0, x + w / 2.0, y + h / 2.0)

    def is_past_exit(self, distance: float) -> bool:
        return distance < -self.exit_distance


def _right_of(direction: Direction) -> Tuple[float, float]:
    """Unit vector to the driver's right for vehicles on *direction*."""
    hx, hy = direction.heading
    return hy, -hx
