"""
ui/draw_road.py
===============
Renders the static junction: road surfaces, the junction box, centre
dashes, stop lines, and one signal head per arm with the countdown shown
over the active arm's head.

All functions are *pure renderers*: they read data and draw to a surface.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import pygame

from ui.constants import (
    COLOR_BACKGROUND, COLOR_ROAD, COLOR_BOX_OUTLINE, COLOR_STOP_LINE,
    COLOR_CENTRE_DASH,
    COLOR_LIGHT_HOUSING, COLOR_LIGHT_RED, COLOR_LIGHT_YELLOW,
    COLOR_LIGHT_GREEN, COLOR_LIGHT_OFF,
    DASH_LEN, DASH_GAP, STOP_LINE_WIDTH,
)
from ui.helpers import world_rect
from ui.types import Camera

_APPROACHES = ("N", "E", "S", "W")

_COLOR_FOR_PHASE = {
    "GREEN":  COLOR_LIGHT_GREEN,
    "YELLOW": COLOR_LIGHT_YELLOW,
    "RED":    COLOR_LIGHT_RED,
}


def draw_junction(
    screen: pygame.Surface,
    camera: Camera,
    intersection: Dict[str, Any],
    font: Optional[pygame.font.Font] = None,
) -> None:
    """Draw the complete junction background and signal heads in z-order."""
    road_w = float(intersection.get("road_width", 160.0))
    stop = float(intersection.get("stop_line_offset", 110.0))
    half_w, half_h = _half_extent(camera)
    reach = max(half_w, half_h) + road_w

    screen.fill(COLOR_BACKGROUND)
    _draw_road_surfaces(screen, camera, road_w, reach)
    _draw_centre_dashes(screen, camera, road_w, reach)
    _draw_junction_box(screen, camera, road_w)
    _draw_stop_lines(screen, camera, road_w, stop)
    _draw_signal_heads(
        screen, camera, intersection.get("signal", {}), road_w, stop, font,
    )


# ══════════════════════════════════════════════════════════════════════════════
#  PRIVATE helpers
# ══════════════════════════════════════════════════════════════════════════════

def _half_extent(cam: Camera) -> Tuple[float, float]:
    return cam.screen_w / (2.0 * cam.zoom), cam.screen_h / (2.0 * cam.zoom)


def _draw_road_surfaces(
    screen: pygame.Surface, cam: Camera, road_w: float, reach: float,
) -> None:
    hw = road_w / 2.0
    pygame.draw.rect(screen, COLOR_ROAD, world_rect(cam, -reach, -hw, reach, hw))
    pygame.draw.rect(screen, COLOR_ROAD, world_rect(cam, -hw, -reach, hw, reach))


def _draw_centre_dashes(
    screen: pygame.Surface, cam: Camera, road_w: float, reach: float,
) -> None:
    hw = road_w / 2.0
    period = DASH_LEN + DASH_GAP
    thickness = 2.0 / cam.zoom

    pos = -reach
    while pos < reach:
        end = pos + DASH_LEN
        if end < -hw or pos > hw:
            pygame.draw.rect(screen, COLOR_CENTRE_DASH,
                             world_rect(cam, pos, -thickness / 2, end, thickness / 2))
            pygame.draw.rect(screen, COLOR_CENTRE_DASH,
                             world_rect(cam, -thickness / 2, pos, thickness / 2, end))
        pos += period


def _draw_junction_box(screen: pygame.Surface, cam: Camera, road_w: float) -> None:
    hw = road_w / 2.0
    pygame.draw.rect(screen, COLOR_BOX_OUTLINE, world_rect(cam, -hw, -hw, hw, hw),
                     width=max(1, cam.scale(3.0)))


def _draw_stop_lines(
    screen: pygame.Surface, cam: Camera, road_w: float, stop: float,
) -> None:
    hw = road_w / 2.0
    t = STOP_LINE_WIDTH / 2.0
    # Each stop line spans the inbound half of its road only.
    lines = {
        "N": (-hw, stop - t, 0.0, stop + t),
        "S": (0.0, -stop - t, hw, -stop + t),
        "E": (stop - t, 0.0, stop + t, hw),
        "W": (-stop - t, -hw, -stop + t, 0.0),
    }
    for x1, y1, x2, y2 in lines.values():
        pygame.draw.rect(screen, COLOR_STOP_LINE, world_rect(cam, x1, y1, x2, y2))


def _signal_anchor(approach: str, road_w: float, stop: float) -> Tuple[float, float]:
    """World position of an arm's signal head: kerb side, just past the line."""
    side = road_w / 2.0 + 18.0
    back = stop + 40.0
    return {
        "N": (-side, back),
        "S": (side, -back),
        "E": (back, side),
        "W": (-back, -side),
    }[approach]


def _draw_signal_heads(
    screen: pygame.Surface, cam: Camera, signal: Dict[str, Any],
    road_w: float, stop: float, font: Optional[pygame.font.Font],
) -> None:
    colors = signal.get("colors", {})
    active = signal.get("active_direction")
    for approach in _APPROACHES:
        wx, wy = _signal_anchor(approach, road_w, stop)
        sx, sy = cam.world_to_screen(wx, wy)
        phase = colors.get(approach, "RED")
        housing = _draw_single_light(screen, cam, int(sx), int(sy), phase)
        if font is not None and approach == active:
            seconds = max(0, int(signal.get("seconds_remaining", 0)))
            img = font.render(str(seconds), True, (255, 255, 255))
            screen.blit(img, img.get_rect(midbottom=(housing.centerx, housing.top - 4)))


def _draw_single_light(
    screen: pygame.Surface, cam: Camera, sx: int, sy: int, phase: str,
) -> pygame.Rect:
    bulb_r = cam.scale(8.0)
    spacing = int(bulb_r * 2.5)
    housing_w = bulb_r * 2 + cam.scale(6.0)
    housing_h = spacing * 2 + bulb_r * 2 + cam.scale(6.0)

    hr = pygame.Rect(sx - housing_w // 2, sy - housing_h // 2,
                     housing_w, housing_h)
    pygame.draw.rect(screen, COLOR_LIGHT_HOUSING, hr,
                     border_radius=max(1, bulb_r // 2))
    pygame.draw.rect(screen, (0, 0, 0), hr, width=1,
                     border_radius=max(1, bulb_r // 2))

    bulb_defs = [
        ("RED",    sy - spacing),
        ("YELLOW", sy),
        ("GREEN",  sy + spacing),
    ]
    for bulb_phase, by in bulb_defs:
        c = _COLOR_FOR_PHASE[bulb_phase] if bulb_phase == phase else COLOR_LIGHT_OFF
        pygame.draw.circle(screen, c, (sx, by), bulb_r)
    return hr
