#!/usr/bin/env python3
"""
Main view class: combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ColorRGBA, Camera
    ├── constants.py       – palette + ViewConstants mixin
    ├── helpers.py         – world rects, painter order, text helpers
    ├── draw_road.py       – roads, stop lines, signal heads
    ├── draw_vehicles.py   – VehicleRenderer mixin (vehicle bodies)
    ├── hud.py             – HudRenderer mixin  (status bar, queues, legend, debug)
    └── pygame_view.py     – PygameJunctionView (this file – main loop)
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

import pygame

from .constants import ViewConstants
from .draw_road import draw_junction
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer
from .types import Camera

log = logging.getLogger("ui")


class PygameJunctionView(
    ViewConstants,
    VehicleRenderer,
    HudRenderer,
):
    """Junction visualiser powered by Pygame.

    Every frame advances the bridge by exactly one tick (unless paused)
    and then redraws the scene from the bridge's read model.
    """

    def __init__(self, bridge: Any, width: int = 900, height: int = 900, fps: int = 60):
        self.bridge = bridge
        self.width = width
        self.height = height
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.camera = Camera(width, height)
        self.time_seconds = 0.0

        # UI state
        self.paused = False
        self.show_debug = False
        self.show_legend = True
        self._screenshot_flash_until = 0.0

    # ------------------------------------------------------------------ #
    #  Fonts / resize                                                      #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("arial,helvetica", size, bold=bold)

    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(400, new_w)
        self.height = max(300, new_h)
        self.camera.resize(self.width, self.height)
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    # ------------------------------------------------------------------ #
    #  Screenshot                                                          #
    # ------------------------------------------------------------------ #
    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"junction_{stamp}.png")
        pygame.image.save(self.screen, path)
        log.info("Screenshot saved to %s", path)
        self._screenshot_flash_until = self.time_seconds + 0.35

    # ------------------------------------------------------------------ #
    #  Controls                                                            #
    # ------------------------------------------------------------------ #
    def _set_paused(self, paused: bool) -> None:
        self.paused = paused
        self.bridge.set_paused(paused)

    def _reset(self) -> None:
        self.camera.zoom = 1.0
        self.bridge.reset()
        self._set_paused(False)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self._set_paused(not self.paused)
        elif key == pygame.K_F3:
            self.show_debug = not self.show_debug
        elif key == pygame.K_l:
            self.show_legend = not self.show_legend
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_F12:
            self._take_screenshot()
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
            self.camera.zoom = min(self.MAX_ZOOM, self.camera.zoom + 0.1)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.camera.zoom = max(self.MIN_ZOOM, self.camera.zoom - 0.1)

    # ------------------------------------------------------------------ #
    #  Frame                                                               #
    # ------------------------------------------------------------------ #
    def _advance(self) -> None:
        if self.paused:
            return
        try:
            self.bridge.step()
        except Exception:
            log.exception("Simulation tick failed; pausing")
            self._set_paused(True)

    def render_frame(self, surface: pygame.Surface, dt: float = 0.0) -> None:
        """Draw one complete frame of the current read model onto *surface*."""
        vehicles: List[Dict[str, Any]] = self.bridge.get_vehicles()
        intersection: Dict[str, Any] = self.bridge.get_intersection()

        draw_junction(surface, self.camera, intersection, self.font_small)
        self.draw_vehicles(surface, self.camera, vehicles)

        # HUD layers (drawn on top, unzoomed)
        self.draw_status_bar(surface, intersection, len(vehicles))
        self.draw_queue_panel(surface, intersection)
        if self.show_legend:
            self._draw_legend(surface)
        if self.show_debug:
            self._draw_debug_overlay(surface, intersection, len(vehicles), dt)
        if self.paused:
            self._draw_pause_banner(surface)

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("JUNCTION SIGNAL SIM")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(14)
        self.font_tiny = self._load_font(11)
        self.font_title = self._load_font(28, bold=True)

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0
            self.time_seconds += delta_time

            # ---- events ------------------------------------------------- #
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        self.handle_key(event.key)

            # ---- simulation tick ---------------------------------------- #
            self._advance()

            # ---- render ------------------------------------------------- #
            self.render_frame(self.screen, delta_time)
            if self.time_seconds < self._screenshot_flash_until:
                flash = pygame.Surface(
                    (self.width, self.height), pygame.SRCALPHA
                )
                flash.fill((255, 255, 255, 40))
                self.screen.blit(flash, (0, 0))

            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    bridge: Any, width: int = 900, height: int = 900, fps: int = 60
) -> None:
    view = PygameJunctionView(bridge=bridge, width=width, height=height, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a simulation bridge. Run `python main.py` "
        "or call run_pygame_view(your_bridge)."
    )
