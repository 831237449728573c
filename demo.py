#!/usr/bin/env python3
"""
Quick demo: opens the Pygame view on a fixed scenario with three vehicles
parked on every arm and spawning switched off, so you can watch the
controller drain the queues one arm at a time.

Usage:
    python3 demo.py
"""

import logging

from junction.sim_bridge import SimBridge
from junction.traffic_policy import SimulationPolicy
from logging_setup import setup_logging

DEMO_SEED = 7
DEMO_PRELOAD = 3


def build_demo_bridge() -> SimBridge:
    """Bridge over a seeded world with queues preloaded and no new arrivals."""
    policy = SimulationPolicy(spawn_interval=0)
    return SimBridge(policy=policy, random_seed=DEMO_SEED, preload=DEMO_PRELOAD)


if __name__ == "__main__":
    from ui import run_pygame_view

    setup_logging(logging.INFO)
    print("Starting demo: 3 vehicles per arm, spawning disabled...")
    print("Controls: SPACE=pause  +/-=zoom  F3=debug  L=legend  F12=screenshot  R=reset")
    run_pygame_view(build_demo_bridge())
