#!/usr/bin/env python3
"""
Spawn admission: interval, tail-slot rule, global cap.
"""

from __future__ import annotations

import random
import unittest

from junction.geometry import Layout
from junction.metrics import SimMetrics
from junction.occupancy import SlotOccupancy
from junction.spawner import Spawner
from junction.traffic_policy import SimulationPolicy
from junction.types import DIRECTIONS, Direction, VehicleKind


class SpawnerTests(unittest.TestCase):
    def _spawner(self, **overrides) -> Spawner:
        policy = SimulationPolicy(**overrides)
        layout = Layout.from_policy(policy)
        self.occupancy = SlotOccupancy(layout, policy)
        self.metrics = SimMetrics()
        return Spawner(policy, layout, self.occupancy, random.Random(9), self.metrics)

    def test_spawns_once_per_interval_on_the_tail_slot(self) -> None:
        spawner = self._spawner(spawn_interval=5)
        for _ in range(4):
            self.assertIsNone(spawner.try_spawn(0))
        vehicle = spawner.try_spawn(0)
        self.assertIsNotNone(vehicle)
        self.assertEqual(vehicle.id, "VEH_0000")
        self.assertEqual(vehicle.slot, spawner.layout.slot_count - 1)
        self.assertEqual(vehicle.distance, spawner.layout.spawn_distance)
        self.assertIs(self.occupancy.holder(vehicle.direction, vehicle.slot), vehicle)
        self.assertEqual(self.metrics.spawned, 1)

    def test_zero_interval_disables_spawning(self) -> None:
        spawner = self._spawner(spawn_interval=0)
        for _ in range(200):
            self.assertIsNone(spawner.try_spawn(0))
        self.assertEqual(self.metrics.spawned, 0)
        self.assertEqual(self.metrics.spawn_skipped, 0)

    def test_cap_declines_the_attempt(self) -> None:
        spawner = self._spawner(spawn_interval=1, max_vehicles=2)
        self.assertIsNone(spawner.try_spawn(2))
        self.assertEqual(self.metrics.spawn_skipped, 1)
        self.assertIsNotNone(spawner.try_spawn(1))

    def test_full_arms_decline_the_attempt(self) -> None:
        spawner = self._spawner(spawn_interval=1)
        last = spawner.layout.slot_count - 1
        for direction in DIRECTIONS:
            spawner.spawn(direction, last, VehicleKind.CAR)
        self.assertIsNone(spawner.try_spawn(4))
        self.assertEqual(self.metrics.spawn_skipped, 1)
        self.assertEqual(self.metrics.spawned, 4)

    def test_picks_the_arm_with_a_free_tail(self) -> None:
        spawner = self._spawner(spawn_interval=1)
        last = spawner.layout.slot_count - 1
        for direction in (Direction.NORTH, Direction.EAST, Direction.WEST):
            spawner.spawn(direction, last, VehicleKind.CAR)
        vehicle = spawner.try_spawn(3)
        self.assertIs(vehicle.direction, Direction.SOUTH)

    def test_ids_are_sequential(self) -> None:
        spawner = self._spawner(spawn_interval=1)
        ids = []
        for direction in DIRECTIONS:
            ids.append(spawner.spawn(direction, 0, VehicleKind.BIKE).id)
        self.assertEqual(ids, ["VEH_0000", "VEH_0001", "VEH_0002", "VEH_0003"])


if __name__ == "__main__":
    unittest.main()
