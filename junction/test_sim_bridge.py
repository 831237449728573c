#!/usr/bin/env python3
"""
Host adapter: frame stepping, pause, reset and the renderer read model.
"""

from __future__ import annotations

import unittest

from junction.sim_bridge import SimBridge
from junction.traffic_policy import SimulationPolicy


class SimBridgeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bridge = SimBridge(
            policy=SimulationPolicy(spawn_interval=0), random_seed=4, preload=2,
        )

    def test_preload_is_visible_before_the_first_step(self) -> None:
        self.assertEqual(len(self.bridge.get_vehicles()), 8)
        self.assertEqual(self.bridge.get_intersection()["tick"], 0)

    def test_step_advances_one_tick(self) -> None:
        self.bridge.step()
        self.bridge.step()
        self.assertEqual(self.bridge.world.tick_count, 2)
        self.assertEqual(self.bridge.get_snapshot()["tick"], 2)

    def test_paused_bridge_does_not_advance(self) -> None:
        self.bridge.set_paused(True)
        self.assertTrue(self.bridge.paused)
        for _ in range(10):
            self.bridge.step()
        self.assertEqual(self.bridge.world.tick_count, 0)
        self.bridge.set_paused(False)
        self.bridge.step()
        self.assertEqual(self.bridge.world.tick_count, 1)

    def test_reset_restores_the_preloaded_scenario(self) -> None:
        before = self.bridge.get_vehicles()
        for _ in range(300):
            self.bridge.step()
        self.bridge.reset()
        self.assertEqual(self.bridge.world.tick_count, 0)
        self.assertEqual(self.bridge.get_vehicles(), before)

    def test_intersection_read_model(self) -> None:
        info = self.bridge.get_intersection()
        self.assertEqual(info["road_width"], 160.0)
        self.assertEqual(info["stop_line_offset"], 110.0)
        self.assertEqual(info["lane_offset"], 40.0)
        self.assertEqual(info["fps"], 60)
        self.assertEqual(info["waiting"], {"N": 2, "E": 2, "S": 2, "W": 2})
        self.assertEqual(info["signal"]["phase"], "GREEN")
        self.assertEqual(info["signal"]["seconds_remaining"], 15)

    def test_run_headless_returns_last_snapshot(self) -> None:
        snapshot = self.bridge.run_headless(1020, log_every=600)
        self.assertEqual(snapshot["tick"], 1020)
        self.assertEqual(snapshot["signal"]["phase"], "GREEN")
        self.assertEqual(snapshot["waiting"]["N"], 0)

    def test_never_finishes(self) -> None:
        self.assertFalse(self.bridge.is_finished())


if __name__ == "__main__":
    unittest.main()
