#!/usr/bin/env python3

from .types import Camera, ColorRGB, ColorRGBA
from .constants import ViewConstants
from .draw_road import draw_junction
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer, status_line
from .pygame_view import PygameJunctionView, run_pygame_view

__all__ = [
    "Camera",
    "ColorRGB",
    "ColorRGBA",
    "ViewConstants",
    "draw_junction",
    "VehicleRenderer",
    "HudRenderer",
    "status_line",
    "PygameJunctionView",
    "run_pygame_view",
]
