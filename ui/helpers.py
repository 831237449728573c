"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
world ↔ screen rectangles, alpha-surface drawing, text and painter order.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence, Tuple

import pygame

from ui.types import Camera, ColorRGBA


# ── Rectangles ───────────────────────────────────────────────────────────────

def world_rect(cam: Camera, x1: float, y1: float, x2: float, y2: float) -> pygame.Rect:
    """Convert two world-space corners to a screen-space Rect (y-flipped)."""
    sx1, sy1 = cam.world_to_screen(min(x1, x2), max(y1, y2))
    sx2, sy2 = cam.world_to_screen(max(x1, x2), min(y1, y2))
    return pygame.Rect(int(sx1), int(sy1), max(1, int(sx2 - sx1)), max(1, int(sy2 - sy1)))


def vehicle_rect(cam: Camera, vehicle: Dict[str, Any]) -> pygame.Rect:
    """Screen rect of a read-model vehicle (``x``/``y`` are its centre)."""
    hw = vehicle["width"] / 2.0
    hh = vehicle["height"] / 2.0
    x, y = vehicle["x"], vehicle["y"]
    return world_rect(cam, x - hw, y - hh, x + hw, y + hh)


# ── Painter order ────────────────────────────────────────────────────────────

def paint_order(vehicles: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Vehicles sorted by distance from the junction centre, nearest first."""
    return sorted(vehicles, key=lambda v: math.hypot(v["x"], v["y"]))


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_rect(
    target: pygame.Surface,
    color: ColorRGBA,
    rect: pygame.Rect,
    border_radius: int = 0,
) -> None:
    """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
    tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, (0, 0, rect.w, rect.h), border_radius=border_radius)
    target.blit(tmp, rect.topleft)


# ── Text helper ──────────────────────────────────────────────────────────────

def render_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (230, 230, 235),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render text with flexible *anchor* ('topleft', 'center', 'midright' …)."""
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect
