"""Drawing canvas: pointer input becomes strokes that play and fade."""

from __future__ import annotations

import pygame

from doodletone.renderer import colors as colors_mod
from doodletone.renderer.canvas import PygameRenderer, render_dividers
from doodletone.renderer.hud import render_hud
from doodletone.views.base import ViewAction, ViewContext


class CanvasView:
    name = "canvas"
    display_name = "Canvas"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._finger: int | None = None  # finger drawing the current stroke

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        context.strokes.resize(*context.screen_size)

    def on_exit(self) -> None:
        if self._context:
            self._context.strokes.pointer_up()
            self._context.dispatcher.silence()
        self._finger = None

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if not self._context:
            return None
        strokes = self._context.strokes

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return ViewAction(kind="pop")
            elif event.key == pygame.K_c:
                strokes.clear()
                self._finger = None
                self._context.dispatcher.silence()
            return None

        # Touch input also arrives as emulated mouse events; handle it once.
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False):
                return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            strokes.pointer_down(*event.pos)
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            strokes.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            strokes.pointer_up()
        elif event.type == pygame.FINGERDOWN:
            if strokes.pointer_down(*self._finger_pos(event)) is not None:
                self._finger = event.finger_id
        elif event.type == pygame.FINGERMOTION and event.finger_id == self._finger:
            strokes.pointer_move(*self._finger_pos(event))
        elif event.type == pygame.FINGERUP and event.finger_id == self._finger:
            strokes.pointer_up()
            self._finger = None

        return None

    def _finger_pos(self, event: pygame.event.Event) -> tuple[float, float]:
        # Finger coordinates are normalized to 0..1
        w, h = self._context.screen_size
        return event.x * w, event.y * h

    def update(self, dt: float) -> ViewAction | None:
        if not self._context:
            return None
        self._context.strokes.tick()
        self._context.dispatcher.flush()
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(colors_mod.BG)
        render_dividers(surface)
        if not self._context:
            return
        self._context.strokes.display(PygameRenderer(surface))
        render_hud(
            surface,
            self._context.dispatcher.audio_enabled,
            "Drag to draw | C: clear | Esc: back",
        )
