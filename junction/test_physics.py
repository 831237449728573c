#!/usr/bin/env python3
"""
Kinematics helpers.
"""

from __future__ import annotations

import unittest

from junction.physics import approach_speed_limit, clamp, frames_to_seconds


class PhysicsTests(unittest.TestCase):
    def test_clamp(self) -> None:
        self.assertEqual(clamp(5.0, 0.0, 3.0), 3.0)
        self.assertEqual(clamp(-1.0, 0.0, 3.0), 0.0)
        self.assertEqual(clamp(2.0, 0.0, 3.0), 2.0)

    def test_speed_limit_stops_within_remaining(self) -> None:
        for remaining in (0.5, 8.0, 50.0):
            v = approach_speed_limit(remaining, 0.06)
            self.assertAlmostEqual(v * v / (2 * 0.06), remaining)

    def test_no_room_means_no_speed(self) -> None:
        self.assertEqual(approach_speed_limit(0.0, 0.06), 0.0)
        self.assertEqual(approach_speed_limit(-3.0, 0.06), 0.0)

    def test_frames_to_seconds_rounds_up(self) -> None:
        self.assertEqual(frames_to_seconds(900, 60), 15)
        self.assertEqual(frames_to_seconds(61, 60), 2)
        self.assertEqual(frames_to_seconds(1, 60), 1)
        self.assertEqual(frames_to_seconds(0, 60), 0)
        self.assertEqual(frames_to_seconds(-5, 60), 0)


if __name__ == "__main__":
    unittest.main()
