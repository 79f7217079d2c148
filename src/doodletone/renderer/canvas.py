"""Drawing surface: strokes, playback markers, and quadrant guides."""

from __future__ import annotations

import pygame

from doodletone.models import Point
from doodletone.renderer.colors import DIVIDER, MARKER, STROKE

STROKE_WIDTH = 3
MARKER_RADIUS = 4


class PygameRenderer:
    """Renderer backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def draw_line(self, p1: Point, p2: Point) -> None:
        pygame.draw.line(self.surface, STROKE, (p1.x, p1.y), (p2.x, p2.y), STROKE_WIDTH)

    def draw_marker(self, point: Point) -> None:
        pygame.draw.circle(self.surface, MARKER, (int(point.x), int(point.y)), MARKER_RADIUS)


def render_dividers(surface: pygame.Surface) -> None:
    """Draw faint lines splitting the canvas into its four pitch quadrants."""
    w, h = surface.get_size()
    pygame.draw.line(surface, DIVIDER, (w // 2, 0), (w // 2, h))
    pygame.draw.line(surface, DIVIDER, (0, h // 2), (w, h // 2))
