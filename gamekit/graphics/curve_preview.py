"""
Easing preview renderer.

Draws one cell per easing shape: the curve itself as a polyline plus a marker driven by
a live Easing, so shapes and loop behaviors can be tuned by eye.

Expected app integration:
- begin() once
- update() once per tick (after the clock ticked)
- render(surface)
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pygame

from config import (
    COLOR_AXIS,
    COLOR_CELL_BG,
    COLOR_CELL_BORDER,
    COLOR_CURVE,
    COLOR_MARKER,
    COLOR_PAUSED,
    COLOR_TEXT,
    EASING_DEFAULT_DURATION,
    PREVIEW_CELL_PADDING,
    PREVIEW_COLUMNS,
    PREVIEW_PLOT_SAMPLES,
)
from gamekit.graphics.curves import Keyframe, KeyframeCurve
from gamekit.graphics.easing import PLAYABLE_BEHAVIORS, Easing, EasingBehavior, LoopBehavior, ease
from gamekit.sim.timebase import GameClock

# Vertical plot range; leaves room for BACK_* / ELASTIC_* overshoot.
PLOT_MIN = -0.5
PLOT_MAX = 1.5

_FONT_CACHE: Dict[int, pygame.font.Font] = {}
_LABEL_CACHE: Dict[Tuple[int, str, Tuple[int, int, int]], pygame.Surface] = {}


def _label(size: int, text: str, color: Tuple[int, int, int]) -> pygame.Surface:
    key = (int(size), str(text), tuple(color))
    surf = _LABEL_CACHE.get(key)
    if surf is None:
        font = _FONT_CACHE.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            _FONT_CACHE[size] = font
        surf = font.render(text, True, color)
        _LABEL_CACHE[key] = surf
    return surf


def demo_curve() -> KeyframeCurve:
    """Overshoot-and-settle curve shown in the CURVE cell."""
    return KeyframeCurve(
        [
            Keyframe(0.0, 0.0, 0.0, 0.0),
            Keyframe(0.6, 1.15, 0.0, 0.0),
            Keyframe(1.0, 1.0, 0.0, 0.0),
        ]
    )


def plot_y(rect: pygame.Rect, value: float) -> int:
    f = (value - PLOT_MIN) / (PLOT_MAX - PLOT_MIN)
    return int(round(rect.bottom - f * rect.height))


class CurvePreview:
    def __init__(
        self,
        size: Tuple[int, int],
        clock: GameClock,
        *,
        loop_type: LoopBehavior = LoopBehavior.PING_PONG,
        duration: float = EASING_DEFAULT_DURATION,
        columns: int = PREVIEW_COLUMNS,
        curve: Optional[KeyframeCurve] = None,
    ):
        self.size = (int(size[0]), int(size[1]))
        self.clock = clock
        self.columns = max(1, int(columns))
        self.curve = curve if curve is not None else demo_curve()
        self.loop_type = loop_type
        self.duration = float(duration)
        self.paused = False

        self.easings: List[Tuple[EasingBehavior, Easing]] = []
        for behavior in PLAYABLE_BEHAVIORS:
            easing = Easing(behavior, loop_type, duration, animation_curve=self.curve, clock=clock)
            self.easings.append((behavior, easing))
        self.values: List[float] = [0.0 for _ in self.easings]

    def begin(self) -> None:
        for _, easing in self.easings:
            easing.loop_type = self.loop_type
            easing.begin(0.0, 1.0, self.duration)
        self.values = [e.sample() for _, e in self.easings]

    def restart(self) -> None:
        for _, easing in self.easings:
            easing.reset()
        self.begin()

    def set_paused(self, paused: bool) -> None:
        self.paused = bool(paused)
        for _, easing in self.easings:
            easing.paused = self.paused

    def update(self) -> None:
        self.values = [e.sample() for _, e in self.easings]

    @property
    def all_finished(self) -> bool:
        return all(e.is_finished for _, e in self.easings)

    # ------------------------------------------------------------------
    # Layout + drawing
    # ------------------------------------------------------------------

    def cell_rects(self) -> List[pygame.Rect]:
        w, h = self.size
        rows = (len(self.easings) + self.columns - 1) // self.columns
        cell_w = w // self.columns
        cell_h = h // max(1, rows)
        pad = PREVIEW_CELL_PADDING
        rects = []
        for i in range(len(self.easings)):
            col = i % self.columns
            row = i // self.columns
            rects.append(
                pygame.Rect(col * cell_w + pad, row * cell_h + pad, max(1, cell_w - 2 * pad), max(1, cell_h - 2 * pad))
            )
        return rects

    def plot_points(self, behavior: EasingBehavior, rect: pygame.Rect) -> List[Tuple[int, int]]:
        n = max(2, PREVIEW_PLOT_SAMPLES)
        pts = []
        for i in range(n):
            t = i / (n - 1)
            x = int(round(rect.left + t * (rect.width - 1)))
            pts.append((x, plot_y(rect, ease(behavior, t, self.curve))))
        return pts

    def render(self, surface: pygame.Surface, show_labels: bool = True) -> None:
        for (behavior, easing), value, rect in zip(self.easings, self.values, self.cell_rects()):
            pygame.draw.rect(surface, COLOR_CELL_BG, rect)
            pygame.draw.rect(surface, COLOR_CELL_BORDER, rect, 1)
            pygame.draw.line(surface, COLOR_AXIS, (rect.left, plot_y(rect, 0.0)), (rect.right - 1, plot_y(rect, 0.0)))
            pygame.draw.line(surface, COLOR_AXIS, (rect.left, plot_y(rect, 1.0)), (rect.right - 1, plot_y(rect, 1.0)))
            pygame.draw.lines(surface, COLOR_CURVE, False, self.plot_points(behavior, rect), 2)

            # Marker: x follows the pass progress, y the sampled value.
            mx = int(round(rect.left + easing.progress * (rect.width - 1)))
            if easing.start_value > easing.end_value:
                # Ping-pong return pass runs right to left.
                mx = rect.right - 1 - (mx - rect.left)
            pygame.draw.circle(surface, COLOR_MARKER, (mx, plot_y(rect, value)), 4)

            if show_labels:
                color = COLOR_PAUSED if self.paused else COLOR_TEXT
                surface.blit(_label(18, behavior.name, color), (rect.left + 4, rect.top + 4))
