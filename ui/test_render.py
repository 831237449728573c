#!/usr/bin/env python3
"""
Off-screen rendering smoke tests: no display and no fonts required.
"""

from __future__ import annotations

import unittest

import pygame

from junction.sim_bridge import SimBridge
from junction.traffic_policy import SimulationPolicy
from ui.constants import COLOR_BACKGROUND, COLOR_ROAD
from ui.draw_road import draw_junction
from ui.helpers import paint_order, vehicle_rect, world_rect
from ui.hud import status_line
from ui.pygame_view import PygameJunctionView
from ui.types import Camera


class CameraTests(unittest.TestCase):
    def test_world_origin_maps_to_screen_centre(self) -> None:
        cam = Camera(800, 600)
        self.assertEqual(cam.world_to_screen(0.0, 0.0), (400.0, 300.0))
        self.assertEqual(cam.world_to_screen(10.0, 10.0), (410.0, 290.0))
        self.assertEqual(cam.screen_to_world(410.0, 290.0), (10.0, 10.0))

    def test_world_rect_flips_y(self) -> None:
        cam = Camera(200, 200)
        rect = world_rect(cam, -10.0, 0.0, 10.0, 20.0)
        self.assertEqual((rect.x, rect.y, rect.w, rect.h), (90, 80, 20, 20))

    def test_vehicle_rect_is_centred_on_position(self) -> None:
        cam = Camera(200, 200)
        rect = vehicle_rect(cam, {"x": 0.0, "y": 0.0, "width": 18.0, "height": 36.0})
        self.assertEqual(rect.center, (100, 100))


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bridge = SimBridge(
            policy=SimulationPolicy(spawn_interval=0), random_seed=8, preload=3,
        )
        self.surface = pygame.Surface((600, 600))

    def test_draw_junction_paints_background_and_roads(self) -> None:
        cam = Camera(600, 600)
        draw_junction(self.surface, cam, self.bridge.get_intersection())
        self.assertEqual(tuple(self.surface.get_at((5, 5)))[:3], COLOR_BACKGROUND)
        # Point on the east arm's outbound lane, clear of any marking.
        sx, sy = cam.world_to_screen(250.0, -40.0)
        self.assertEqual(tuple(self.surface.get_at((int(sx), int(sy))))[:3], COLOR_ROAD)

    def test_view_renders_a_full_frame_without_fonts(self) -> None:
        view = PygameJunctionView(self.bridge, width=600, height=600)
        view.render_frame(self.surface)
        view.paused = True
        view.render_frame(self.surface)

    def test_view_steps_once_per_frame_and_honours_pause(self) -> None:
        view = PygameJunctionView(self.bridge, width=600, height=600)
        view._advance()
        self.assertEqual(self.bridge.world.tick_count, 1)
        view.handle_key(pygame.K_SPACE)
        view._advance()
        self.assertEqual(self.bridge.world.tick_count, 1)
        view.handle_key(pygame.K_r)
        self.assertFalse(view.paused)
        self.assertEqual(self.bridge.world.tick_count, 0)

    def test_zoom_is_clamped(self) -> None:
        view = PygameJunctionView(self.bridge, width=600, height=600)
        for _ in range(50):
            view.handle_key(pygame.K_EQUALS)
        self.assertAlmostEqual(view.camera.zoom, view.MAX_ZOOM)
        for _ in range(50):
            view.handle_key(pygame.K_MINUS)
        self.assertAlmostEqual(view.camera.zoom, view.MIN_ZOOM)

    def test_paint_order_nearest_first(self) -> None:
        vehicles = [{"x": 0.0, "y": 300.0}, {"x": 0.0, "y": 120.0}]
        self.assertEqual(paint_order(vehicles)[0]["y"], 120.0)

    def test_status_line_text(self) -> None:
        line = status_line(self.bridge.get_intersection(), 12)
        self.assertEqual(line, "Current Green: N | Time Left: 15s | Cars: 12")


if __name__ == "__main__":
    unittest.main()
