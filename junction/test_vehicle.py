#!/usr/bin/env python3
"""
Speed model and per-tick movement of a single vehicle.
"""

from __future__ import annotations

import random
import unittest

from junction.geometry import Layout
from junction.traffic_policy import SimulationPolicy
from junction.types import Direction, VehicleKind
from junction.vehicle import FREE_RUN, MovePlan, Vehicle


def _vehicle(distance: float = 50.0, speed: float = 0.0, desired: float = 1.0,
             slot: int = 0) -> Vehicle:
    return Vehicle(
        id="VEH_T",
        direction=Direction.NORTH,
        kind=VehicleKind.CAR,
        distance=distance,
        desired_speed=desired,
        length=36.0,
        breadth=18.0,
        slot=slot,
        speed=speed,
    )


class SpeedModelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = SimulationPolicy()

    def test_allowed_ticks_rise_monotonically_to_desired(self) -> None:
        v = _vehicle(desired=0.8)
        previous = v.speed
        for _ in range(400):
            v.update_speed(True, self.policy.accel_rate, self.policy.decel_rate)
            self.assertGreaterEqual(v.speed, previous)
            self.assertLessEqual(v.speed, v.desired_speed)
            previous = v.speed
        self.assertEqual(v.speed, 0.8)

    def test_blocked_ticks_fall_to_exactly_zero(self) -> None:
        v = _vehicle(speed=0.95)
        previous = v.speed
        for _ in range(40):
            v.update_speed(False, self.policy.accel_rate, self.policy.decel_rate)
            self.assertLessEqual(v.speed, previous)
            self.assertGreaterEqual(v.speed, 0.0)
            previous = v.speed
        self.assertEqual(v.speed, 0.0)

    def test_speed_above_desired_is_held(self) -> None:
        v = _vehicle(speed=1.2, desired=1.0)
        v.update_speed(True, self.policy.accel_rate, self.policy.decel_rate)
        self.assertEqual(v.speed, 1.2)

    def test_speed_cap_limits_allowed_vehicle(self) -> None:
        v = _vehicle(speed=0.9)
        v.update_speed(True, self.policy.accel_rate, self.policy.decel_rate, speed_cap=0.86)
        self.assertEqual(v.speed, 0.86)

    def test_speed_cap_never_brakes_harder_than_decel(self) -> None:
        v = _vehicle(speed=0.9)
        previous = v.speed
        for cap in (0.5, 0.1, 0.0, 0.0):
            v.update_speed(True, self.policy.accel_rate, self.policy.decel_rate, speed_cap=cap)
            self.assertAlmostEqual(v.speed, max(cap, previous - self.policy.decel_rate))
            self.assertLessEqual(previous - v.speed, self.policy.decel_rate + 1e-12)
            previous = v.speed


class ApplyPlanTests(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = SimulationPolicy()

    def test_blocked_vehicle_is_held_on_its_slot(self) -> None:
        v = _vehicle(distance=50.0, speed=0.5)
        v.apply(MovePlan(allowed=False, floor=50.0), self.policy)
        self.assertEqual(v.distance, 50.0)
        self.assertEqual(v.speed, 0.0)

    def test_vehicle_pinned_on_arrival_reports_no_speed(self) -> None:
        # Reached slot 0 at speed just as the arm stopped being green.
        v = _vehicle(distance=50.3, speed=0.4)
        v.apply(MovePlan(allowed=False, floor=50.0), self.policy)
        self.assertEqual(v.distance, 50.0)
        self.assertEqual(v.speed, 0.0)
        self.assertEqual(v.as_dict(Layout.from_policy(self.policy))["speed"], 0.0)

    def test_blocked_vehicle_short_of_hold_point_keeps_braking(self) -> None:
        v = _vehicle(distance=60.0, speed=0.5)
        v.apply(MovePlan(allowed=False, floor=50.0), self.policy)
        self.assertAlmostEqual(v.distance, 59.56)
        self.assertAlmostEqual(v.speed, 0.44)

    def test_arrival_clamps_overshoot_and_claims(self) -> None:
        v = _vehicle(distance=100.4, speed=1.0, slot=1)
        v.apply(MovePlan(allowed=True, floor=100.0, claim=0), self.policy)
        self.assertEqual(v.distance, 100.0)
        self.assertEqual(v.slot, 0)

    def test_leading_edge_past_line_marks_crossed(self) -> None:
        v = _vehicle(distance=18.5, speed=1.0)
        v.apply(FREE_RUN, self.policy)
        self.assertTrue(v.crossed)
        self.assertIsNone(v.slot)
        self.assertLess(v.leading_edge, 0.0)

    def test_crossed_never_reverts(self) -> None:
        v = _vehicle(distance=18.5, speed=1.0)
        v.apply(FREE_RUN, self.policy)
        for _ in range(10):
            v.apply(MovePlan(allowed=False), self.policy)
            self.assertTrue(v.crossed)

    def test_wait_ticks_count_while_parked(self) -> None:
        v = _vehicle(distance=50.0)
        for _ in range(5):
            v.apply(MovePlan(allowed=False, floor=50.0), self.policy)
        self.assertEqual(v.wait_ticks, 5)
        self.assertEqual(v.as_dict(Layout.from_policy(self.policy))["wait_ticks"], 5)


class CreateTests(unittest.TestCase):
    def test_create_parks_on_slot_with_kind_speed(self) -> None:
        policy = SimulationPolicy()
        layout = Layout.from_policy(policy)
        v = Vehicle.create("VEH_0001", Direction.EAST, VehicleKind.BIKE, 2,
                           layout, policy, random.Random(3))
        spec = policy.kind_spec(VehicleKind.BIKE)
        self.assertEqual(v.distance, layout.slot_distance(2))
        self.assertEqual(v.speed, 0.0)
        self.assertEqual((v.length, v.breadth), (spec.length, spec.breadth))
        self.assertTrue(spec.min_speed <= v.desired_speed <= spec.max_speed)

    def test_read_model_entry(self) -> None:
        policy = SimulationPolicy()
        layout = Layout.from_policy(policy)
        v = Vehicle.create("VEH_0002", Direction.NORTH, VehicleKind.CAR, 0,
                           layout, policy, random.Random(3))
        view = v.as_dict(layout)
        self.assertEqual(view["direction"], "N")
        self.assertEqual(view["kind"], "car")
        self.assertAlmostEqual(view["x"], -40.0)
        self.assertAlmostEqual(view["y"], 160.0)
        self.assertEqual((view["width"], view["height"]), (18.0, 36.0))
        self.assertAlmostEqual(view["heading"], 270.0)
        self.assertEqual(view["slot"], 0)


if __name__ == "__main__":
    unittest.main()
