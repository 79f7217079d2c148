"""Heads-up display: audio status and key hints."""

from __future__ import annotations

import pygame

from doodletone.renderer.colors import AUDIO_OFF, AUDIO_ON, HINT_TEXT


def render_hud(surface: pygame.Surface, audio_enabled: bool, hint: str = "") -> None:
    w, h = surface.get_size()
    color = AUDIO_ON if audio_enabled else AUDIO_OFF
    pygame.draw.circle(surface, color, (w - 30, 30), 5)

    if hint:
        font = pygame.font.SysFont("monospace", 16)
        text = font.render(hint, True, HINT_TEXT)
        surface.blit(text, (20, h - 30))
