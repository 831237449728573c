"""
SimMetrics: Tracks simple statistics for the junction simulation.
"""

from typing import Dict, Mapping

from junction.types import DIRECTIONS, Direction


class SimMetrics:
    """
    Tracks counters for spawned, declined, crossed and removed vehicles.

    Attributes:
        spawned (int): Vehicles admitted by the spawner.
        spawn_skipped (int): Spawn attempts declined (cap reached or every arm full).
        crossed (int): Vehicles whose leading edge passed their stop line.
        removed (int): Crossed vehicles dropped after leaving the scene.
        greens (dict): Green phases granted per arm, keyed by short name.
        peak_waiting (dict): Longest queue seen per arm.
        total_wait_ticks (dict): Ticks spent stopped on a slot by crossed
            vehicles, summed per arm.
    """

    def __init__(self):
        """Initialize all counters to zero."""
        self.spawned = 0
        self.spawn_skipped = 0
        self.crossed = 0
        self.removed = 0
        self.greens: Dict[str, int] = {d.short: 0 for d in DIRECTIONS}
        self.peak_waiting: Dict[str, int] = {d.short: 0 for d in DIRECTIONS}
        self.total_wait_ticks: Dict[str, int] = {d.short: 0 for d in DIRECTIONS}
        self._crossed_by_arm: Dict[str, int] = {d.short: 0 for d in DIRECTIONS}

    def record_green(self, direction: Direction) -> None:
        self.greens[direction.short] += 1

    def record_crossed(self, direction: Direction, wait_ticks: int) -> None:
        self.crossed += 1
        self._crossed_by_arm[direction.short] += 1
        self.total_wait_ticks[direction.short] += wait_ticks

    def average_wait_ticks(self) -> Dict[str, float]:
        """Mean stopped time per crossed vehicle, per arm (0 before any crossing)."""
        return {
            key: (self.total_wait_ticks[key] / count if count else 0.0)
            for key, count in self._crossed_by_arm.items()
        }

    def record_waiting(self, waiting: Mapping[Direction, int]) -> None:
        for direction, count in waiting.items():
            key = direction.short
            if count > self.peak_waiting[key]:
                self.peak_waiting[key] = count

    def report(self) -> dict:
        """
        Return a snapshot of current metrics.

        Returns:
            dict: Copies of every counter, safe to hand to the renderer.
        """
        return {
            "spawned": self.spawned,
            "spawn_skipped": self.spawn_skipped,
            "crossed": self.crossed,
            "removed": self.removed,
            "greens": dict(self.greens),
            "peak_waiting": dict(self.peak_waiting),
            "avg_wait_ticks": self.average_wait_ticks(),
        }
