#!/usr/bin/env python3
"""Status bar, queue panel, legend, debug overlay and pause banner (mixin)."""

from __future__ import annotations

from typing import Any, Dict, Mapping

import pygame

from .helpers import draw_alpha_rect, render_text

_ARMS = ("N", "E", "S", "W")


def status_line(intersection: Mapping[str, Any], vehicle_count: int) -> str:
    """Text of the top status bar for one frame."""
    signal = intersection.get("signal", {})
    active = signal.get("active_direction", "?")
    seconds = max(0, int(signal.get("seconds_remaining", 0)))
    line = f"Current Green: {active} | Time Left: {seconds}s | Cars: {vehicle_count}"
    if signal.get("phase") == "YELLOW":
        line += " | YELLOW"
    return line


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Status bar                                                          #
    # ------------------------------------------------------------------ #

    def draw_status_bar(
        self, surface: pygame.Surface, intersection: Mapping[str, Any], vehicle_count: int
    ) -> None:
        bar = pygame.Rect(0, 0, self.width, self.STATUS_BAR_HEIGHT)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, bar)
        pygame.draw.line(surface, self.HUD_BORDER_COLOR,
                         (0, bar.bottom), (self.width, bar.bottom))
        if self.font_small is None:
            return

        signal = intersection.get("signal", {})
        phase_color = self.PHASE_COLORS.get(signal.get("phase", "GREEN"), self.HUD_TEXT_COLOR)
        pygame.draw.circle(surface, phase_color, (16, bar.centery), 6)
        render_text(surface, self.font_small, status_line(intersection, vehicle_count),
                    (30, bar.centery), self.HUD_TEXT_COLOR, anchor="midleft")

    # ------------------------------------------------------------------ #
    #  Queue / metrics panel                                               #
    # ------------------------------------------------------------------ #

    def draw_queue_panel(self, surface: pygame.Surface, intersection: Mapping[str, Any]) -> None:
        if self.font_small is None or self.font_tiny is None:
            return

        waiting: Dict[str, int] = intersection.get("waiting", {})
        metrics: Dict[str, Any] = intersection.get("metrics", {})
        colors = intersection.get("signal", {}).get("colors", {})
        greens = metrics.get("greens", {})
        avg_wait = metrics.get("avg_wait_ticks", {})
        fps = intersection.get("fps", 60) or 60

        row_h = 18
        panel = pygame.Rect(16, self.height - 16 - (len(_ARMS) + 3) * row_h - 12, 290,
                            (len(_ARMS) + 3) * row_h + 12)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, panel, border_radius=6)
        pygame.draw.rect(surface, self.HUD_BORDER_COLOR, panel, width=1, border_radius=6)

        y = panel.y + 6
        render_text(surface, self.font_tiny, "ARM  WAITING  GREENS  AVG WAIT", (panel.x + 10, y),
                    (180, 180, 180))
        y += row_h
        for arm in _ARMS:
            color = self.PHASE_COLORS.get(colors.get(arm, "RED"), self.HUD_DIM_COLOR)
            pygame.draw.circle(surface, color, (panel.x + 16, y + 7), 4)
            render_text(
                surface, self.font_small,
                f"{arm}    {waiting.get(arm, 0):>4}     {greens.get(arm, 0):>4}"
                f"    {avg_wait.get(arm, 0.0) / fps:>5.1f}s",
                (panel.x + 28, y), self.HUD_TEXT_COLOR,
            )
            y += row_h

        render_text(
            surface, self.font_tiny,
            f"SPAWNED {metrics.get('spawned', 0)}   CROSSED {metrics.get('crossed', 0)}",
            (panel.x + 10, y + 4), self.HUD_DIM_COLOR,
        )
        render_text(
            surface, self.font_tiny,
            f"SKIPPED {metrics.get('spawn_skipped', 0)}   REMOVED {metrics.get('removed', 0)}",
            (panel.x + 10, y + 4 + row_h), self.HUD_DIM_COLOR,
        )

    # ------------------------------------------------------------------ #
    #  Legend                                                               #
    # ------------------------------------------------------------------ #

    def _draw_legend(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        x = self.width - 120
        y = self.height - 16 - len(self.LEGEND_ITEMS) * 18 - 8
        box_w, box_h = 112, len(self.LEGEND_ITEMS) * 18 + 10
        pygame.draw.rect(
            surface, self.HUD_BG_COLOR, (x - 6, y - 4, box_w, box_h), border_radius=4
        )
        pygame.draw.rect(
            surface, self.HUD_BORDER_COLOR, (x - 6, y - 4, box_w, box_h), width=1, border_radius=4
        )
        for label, color in self.LEGEND_ITEMS:
            pygame.draw.rect(surface, color, (x, y + 2, 9, 9), border_radius=2)
            render_text(surface, self.font_tiny, label, (x + 14, y), (200, 200, 200))
            y += 18

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(
        self, surface: pygame.Surface, intersection: Mapping[str, Any],
        vehicle_count: int, dt: float,
    ) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        signal = intersection.get("signal", {})
        lines = [
            f"FPS  {fps:.1f}",
            f"DT   {dt * 1000:.1f} ms",
            f"TICK {intersection.get('tick', 0)}",
            f"VEH  {vehicle_count}",
            f"SIG  {signal.get('active_direction', '?')} {signal.get('phase', '?')} "
            f"{signal.get('frames_remaining', 0)}f",
            f"ZOOM {self.camera.zoom:.1f}x",
            f"RES  {self.width}x{self.height}",
        ]
        x, y = 16, self.STATUS_BAR_HEIGHT + 10
        for line in lines:
            render_text(surface, self.font_tiny, line, (x, y), (0, 255, 127))
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        draw_alpha_rect(surface, (0, 0, 0, 100), pygame.Rect(0, 0, self.width, self.height))
        if self.font_title:
            render_text(surface, self.font_title, "PAUSED",
                        (self.width // 2, self.height // 2), (220, 220, 220), anchor="center")
