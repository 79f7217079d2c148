"""Title screen: instructions and audio status before drawing starts."""

from __future__ import annotations

import pygame

from doodletone.renderer import colors as colors_mod
from doodletone.renderer.hud import render_hud
from doodletone.views.base import ViewAction, ViewContext


class TitleView:
    name = "title"
    display_name = "Title"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 20)
        self._title_font = pygame.font.SysFont("monospace", 36)

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return ViewAction(kind="quit")
            return ViewAction(kind="push", target="canvas")
        if event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP):
            return ViewAction(kind="push", target="canvas")
        return None

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if not self._font or not self._title_font or not self._context:
            return

        surface.fill(colors_mod.BG)
        w, h = surface.get_size()

        title = self._title_font.render("DoodleTone", True, colors_mod.STROKE)
        surface.blit(title, (w // 2 - title.get_width() // 2, h // 2 - 80))

        if self._context.dispatcher.audio_enabled:
            status = "Draw to make music. Click or press any key to start."
        else:
            status = "No audio output found. Drawing will be silent."
        text = self._font.render(status, True, colors_mod.HUD_TEXT)
        surface.blit(text, (w // 2 - text.get_width() // 2, h // 2))

        render_hud(surface, self._context.dispatcher.audio_enabled, "Esc: quit")
