#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf; it never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_RANDOM_SEED = None
DEFAULT_FPS: int = 60
DEFAULT_SPAWN_INTERVAL: int = 80
DEFAULT_MAX_VEHICLES: int = 160
DEFAULT_PRELOAD_PER_ARM: int = 5
DEFAULT_START_DIRECTION: str = "N"

# ── Headless runs ────────────────────────────────────────────────────────────
DEFAULT_HEADLESS_TICKS: int = 0
HEADLESS_LOG_EVERY: int = 600

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 900
WINDOW_HEIGHT: int = 900

# ── Logging ──────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_FILE: str = "junction.log"
SIGNAL_DEBUG_LOG_FILE: str = "signal_debug.log"
