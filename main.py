#!/usr/bin/env python3
"""
main.py
=======
Entry point.  Builds the simulation from :mod:`config` defaults, applies
``JUNCTION_*`` environment overrides and either opens the pygame window or
runs a fixed number of ticks headless.

Environment variables
---------------------
``JUNCTION_SEED``            random seed (integer)
``JUNCTION_FPS``             ticks per second
``JUNCTION_SPAWN_INTERVAL``  ticks between spawn attempts (0 disables)
``JUNCTION_MAX_VEHICLES``    global vehicle cap
``JUNCTION_PRELOAD``         vehicles parked per arm at start
``JUNCTION_START``           first green arm (N, E, S or W)
``JUNCTION_HEADLESS_TICKS``  run this many ticks without a window (0 = windowed)
``JUNCTION_LOG_LEVEL``       DEBUG, INFO, WARNING …
"""

import logging
import os
from typing import Optional

import config
from logging_setup import setup_logging
from junction.sim_bridge import SimBridge
from junction.traffic_policy import SimulationPolicy
from junction.types import Direction


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger("main").warning("ignoring %s=%r (not an integer)", name, raw)
        return default


def build_policy() -> SimulationPolicy:
    """Policy from :mod:`config` defaults plus environment overrides."""
    start = os.environ.get("JUNCTION_START", config.DEFAULT_START_DIRECTION)
    return SimulationPolicy(
        fps=_env_int("JUNCTION_FPS", config.DEFAULT_FPS),
        spawn_interval=_env_int("JUNCTION_SPAWN_INTERVAL", config.DEFAULT_SPAWN_INTERVAL),
        max_vehicles=_env_int("JUNCTION_MAX_VEHICLES", config.DEFAULT_MAX_VEHICLES),
        start_direction=Direction.parse(start),
    )


def main() -> None:
    level_name = os.environ.get("JUNCTION_LOG_LEVEL", config.DEFAULT_LOG_LEVEL).upper()
    setup_logging(getattr(logging, level_name, logging.INFO))
    log = logging.getLogger("main")

    policy = build_policy()
    bridge = SimBridge(
        policy=policy,
        random_seed=_env_int("JUNCTION_SEED", config.DEFAULT_RANDOM_SEED),
        preload=_env_int("JUNCTION_PRELOAD", config.DEFAULT_PRELOAD_PER_ARM),
    )

    ticks = _env_int("JUNCTION_HEADLESS_TICKS", config.DEFAULT_HEADLESS_TICKS)
    if ticks:
        log.info("Running %d ticks headless...", ticks)
        snapshot = bridge.run_headless(ticks, log_every=config.HEADLESS_LOG_EVERY)
        log.info("Done: %s", snapshot["metrics"])
        return

    from ui import run_pygame_view

    log.info("Starting junction view at %d fps...", policy.fps)
    try:
        run_pygame_view(
            bridge,
            width=config.WINDOW_WIDTH,
            height=config.WINDOW_HEIGHT,
            fps=policy.fps,
        )
    except KeyboardInterrupt:
        log.info("Shutting down...")


if __name__ == "__main__":
    main()
