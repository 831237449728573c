#!/usr/bin/env python3
"""
junction/signal_controller.py
=============================
Single-arm traffic signal: exactly one arm is active (GREEN or YELLOW),
the other three are RED.

State machine
-------------
``GREEN(d)  --frames hit 0-->  YELLOW(d)``
``YELLOW(d) --frames hit 0-->  GREEN(d')`` with *d'* chosen by
:func:`choose_next_direction` and a density-based duration from
:func:`junction.traffic_policy.green_seconds`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from junction.physics import frames_to_seconds
from junction.traffic_policy import SimulationPolicy, green_seconds
from junction.types import DIRECTIONS, Direction, SignalPhase

log = logging.getLogger("signal")

_RED = "RED"


@dataclass
class SignalState:
    """Active arm, its phase and the frames left before the next change."""

    active_direction: Direction
    phase: SignalPhase
    frames_remaining: int


def choose_next_direction(
    current: Direction,
    waiting: Mapping[Direction, int],
    missed: Optional[Mapping[Direction, int]] = None,
    starvation_limit: int = 0,
) -> Direction:
    """Pick the arm that receives the next green.

    1. No arm has waiting vehicles: rotate to the arm after *current*.
    2. An arm with waiting vehicles that has sat through
       *starvation_limit* consecutive greens of other arms takes
       precedence (most starved first, ties in N, E, S, W order).
    3. Otherwise the busiest arm wins; *current* keeps the green on a tie,
       remaining ties go in N, E, S, W order.
    """
    counts = {d: max(0, int(waiting.get(d, 0))) for d in DIRECTIONS}
    busiest = max(counts.values())
    if busiest == 0:
        return current.next()

    if starvation_limit > 0 and missed:
        starved = [
            d for d in DIRECTIONS
            if d is not current and counts[d] > 0
            and missed.get(d, 0) >= starvation_limit
        ]
        if starved:
            most = max(missed.get(d, 0) for d in starved)
            return next(d for d in starved if missed.get(d, 0) == most)

    if counts[current] == busiest:
        return current
    return next(d for d in DIRECTIONS if counts[d] == busiest)


class SignalController:
    """Density-driven signal with a fixed yellow between greens.

    Parameters
    ----------
    policy : SimulationPolicy
        Timing constants and start arm.
    """

    def __init__(self, policy: SimulationPolicy) -> None:
        self.policy = policy
        self.reset()

    def reset(self) -> None:
        start = self.policy.start_direction
        self.state = SignalState(
            active_direction=start,
            phase=SignalPhase.GREEN,
            frames_remaining=self.policy.seconds_to_frames(self.policy.initial_green_seconds),
        )
        # Greens of other arms sat through since each arm's own last green.
        self._missed: Dict[Direction, int] = {
            d: 0 if d is start else 1 for d in DIRECTIONS
        }
        self.greens_granted = 1
        self.last_waiting: Dict[Direction, int] = {d: 0 for d in DIRECTIONS}

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def active_direction(self) -> Direction:
        return self.state.active_direction

    @property
    def phase(self) -> SignalPhase:
        return self.state.phase

    @property
    def frames_remaining(self) -> int:
        return self.state.frames_remaining

    @property
    def seconds_remaining(self) -> int:
        return frames_to_seconds(self.state.frames_remaining, self.policy.fps)

    def is_green(self, direction: Direction) -> bool:
        return self.state.phase is SignalPhase.GREEN and self.state.active_direction is direction

    def color_for(self, direction: Direction) -> str:
        """``GREEN``, ``YELLOW`` or ``RED`` as shown to *direction*."""
        if direction is self.state.active_direction:
            return self.state.phase.value
        return _RED

    def missed_greens(self) -> Dict[Direction, int]:
        return dict(self._missed)

    def as_dict(self) -> Dict[str, Any]:
        """Signal read model for the renderer."""
        return {
            "active_direction": self.state.active_direction.short,
            "phase": self.state.phase.value,
            "frames_remaining": max(0, self.state.frames_remaining),
            "seconds_remaining": self.seconds_remaining,
            "colors": {d.short: self.color_for(d) for d in DIRECTIONS},
        }

    # ── tick ──────────────────────────────────────────────────────────────

    def tick(self, waiting: Mapping[Direction, int]) -> bool:
        """Count down one frame; returns True when the phase changed."""
        if self.state.frames_remaining > 0:
            self.state.frames_remaining -= 1
        if self.state.frames_remaining > 0:
            return False
        if self.state.phase is SignalPhase.GREEN:
            self._begin_yellow()
        else:
            self._begin_green(waiting)
        return True

    def _begin_yellow(self) -> None:
        self.state.phase = SignalPhase.YELLOW
        self.state.frames_remaining = self.policy.seconds_to_frames(self.policy.yellow_seconds)
        log.debug("YELLOW %s for %d frames",
                  self.state.active_direction.name, self.state.frames_remaining)

    def _begin_green(self, waiting: Mapping[Direction, int]) -> None:
        self.last_waiting = {d: max(0, int(waiting.get(d, 0))) for d in DIRECTIONS}
        previous = self.state.active_direction
        nxt = choose_next_direction(
            previous,
            self.last_waiting,
            self._missed,
            self.policy.starvation_limit,
        )
        seconds = green_seconds(self.last_waiting[nxt], self.policy)

        for d in DIRECTIONS:
            self._missed[d] = 0 if d is nxt else self._missed[d] + 1
        self.greens_granted += 1

        self.state.active_direction = nxt
        self.state.phase = SignalPhase.GREEN
        self.state.frames_remaining = self.policy.seconds_to_frames(seconds)
        log.info(
            "GREEN %s for %.1fs (waiting N=%d E=%d S=%d W=%d)",
            nxt.name, seconds,
            self.last_waiting[Direction.NORTH], self.last_waiting[Direction.EAST],
            self.last_waiting[Direction.SOUTH], self.last_waiting[Direction.WEST],
        )
