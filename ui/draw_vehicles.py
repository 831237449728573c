#!/usr/bin/env python3
"""Vehicle body rendering from the simulation read model (mixin)."""

from __future__ import annotations

from typing import Any, Dict, Sequence

import pygame

from .helpers import paint_order, vehicle_rect
from .types import Camera, ColorRGB


class VehicleRenderer:
    """Mixin that draws every live vehicle as a coloured body with a windshield."""

    def draw_vehicles(
        self, surface: pygame.Surface, camera: Camera, vehicles: Sequence[Dict[str, Any]]
    ) -> int:
        """Draw *vehicles* in painter order; returns how many were drawn."""
        drawn = 0
        for vehicle in paint_order(vehicles):
            self.draw_vehicle(surface, camera, vehicle)
            drawn += 1
        return drawn

    def draw_vehicle(
        self, surface: pygame.Surface, camera: Camera, vehicle: Dict[str, Any]
    ) -> None:
        body = vehicle_rect(camera, vehicle)
        radius = max(1, camera.scale(3.0))
        pygame.draw.rect(surface, self._vehicle_color(vehicle), body, border_radius=radius)
        pygame.draw.rect(surface, (235, 235, 235), body, width=1, border_radius=radius)

        shield = self._windshield_rect(body, vehicle.get("direction", "N"), camera)
        if shield.w > 0 and shield.h > 0:
            pygame.draw.rect(surface, self.WINDSHIELD_COLOR, shield,
                             border_radius=max(1, radius // 2))

    # ------------------------------------------------------------------ #
    #  Helpers                                                             #
    # ------------------------------------------------------------------ #

    def _vehicle_color(self, vehicle: Dict[str, Any]) -> ColorRGB:
        return self.KIND_COLORS.get(str(vehicle.get("kind", "car")), self.KIND_COLORS["car"])

    @staticmethod
    def _windshield_rect(body: pygame.Rect, approach: str, camera: Camera) -> pygame.Rect:
        """Strip across the front of *body*; the front faces the junction."""
        depth = max(1, camera.scale(5.0))
        inset = max(1, camera.scale(2.0))
        front = camera.scale(3.0)
        # Screen y grows downward, so a southbound (N arm) car's front is its bottom.
        if approach == "N":
            return pygame.Rect(body.x + inset, body.bottom - front - depth,
                               body.w - 2 * inset, depth)
        if approach == "S":
            return pygame.Rect(body.x + inset, body.y + front,
                               body.w - 2 * inset, depth)
        if approach == "E":
            return pygame.Rect(body.x + front, body.y + inset,
                               depth, body.h - 2 * inset)
        return pygame.Rect(body.right - front - depth, body.y + inset,
                           depth, body.h - 2 * inset)
