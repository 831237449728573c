#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .types import ColorRGB

# ── Scene palette ─────────────────────────────────────────────────────────────
COLOR_BACKGROUND: ColorRGB = (38, 38, 38)
COLOR_ROAD: ColorRGB = (35, 35, 35)
COLOR_BOX_OUTLINE: ColorRGB = (255, 255, 255)
COLOR_STOP_LINE: ColorRGB = (255, 255, 255)
COLOR_CENTRE_DASH: ColorRGB = (31, 31, 31)

# ── Signal heads ──────────────────────────────────────────────────────────────
COLOR_LIGHT_HOUSING: ColorRGB = (26, 26, 26)
COLOR_LIGHT_RED: ColorRGB = (214, 58, 58)
COLOR_LIGHT_YELLOW: ColorRGB = (240, 200, 60)
COLOR_LIGHT_GREEN: ColorRGB = (54, 199, 42)
COLOR_LIGHT_OFF: ColorRGB = (55, 55, 55)

DASH_LEN: float = 12.0
DASH_GAP: float = 16.0
STOP_LINE_WIDTH: float = 3.0


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)
    HUD_TEXT_COLOR: ColorRGB = (230, 230, 235)
    HUD_DIM_COLOR: ColorRGB = (140, 140, 140)
    WINDSHIELD_COLOR: ColorRGB = (159, 216, 255)

    KIND_COLORS: Dict[str, ColorRGB] = {
        "car": (201, 87, 82),
        "bike": (255, 212, 106),
        "auto": (155, 224, 123),
    }

    PHASE_COLORS: Dict[str, ColorRGB] = {
        "GREEN": COLOR_LIGHT_GREEN,
        "YELLOW": COLOR_LIGHT_YELLOW,
        "RED": COLOR_LIGHT_RED,
    }

    LEGEND_ITEMS: Sequence[Tuple[str, ColorRGB]] = (
        ("CAR", (201, 87, 82)),
        ("BIKE", (255, 212, 106)),
        ("AUTO", (155, 224, 123)),
    )

    STATUS_BAR_HEIGHT = 30
    MIN_ZOOM = 0.4
    MAX_ZOOM = 2.5

    SCREENSHOT_DIR = "screenshots"
