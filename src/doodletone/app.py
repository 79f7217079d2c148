"""Top-level application: initializes pygame, builds the session, and runs the main loop."""

from __future__ import annotations

import logging

import pygame

from doodletone.audio import AudioSink, FluidSynthSink, MidiOutSink, NoteDispatcher
from doodletone.clock import PlaybackClock
from doodletone.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from doodletone.stroke_manager import StrokeManager
from doodletone.views.base import ViewContext, ViewManager
from doodletone.views.canvas_view import CanvasView
from doodletone.views.title_view import TitleView

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        soundfont: str = "",
        midi_port: str | None = None,
        size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # Audio is optional: without a sink the canvas still draws and fades
        sink = self._try_audio(soundfont, midi_port)
        playback_clock = PlaybackClock()
        self.dispatcher = NoteDispatcher(sink, playback_clock)
        strokes = StrokeManager(playback_clock, self.dispatcher, size)

        context = ViewContext(screen_size=size, dispatcher=self.dispatcher, strokes=strokes)
        self.views = ViewManager(context)
        self.views.register(TitleView)
        self.views.register(CanvasView)
        self.views.push("title")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.views.resize((event.w, event.h))
                elif not self.views.handle_event(event):
                    running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        self.dispatcher.shutdown()

    @staticmethod
    def _try_audio(soundfont: str, midi_port: str | None) -> AudioSink | None:
        if midi_port is None:
            try:
                return FluidSynthSink(soundfont or None)
            except Exception as exc:
                logger.warning("FluidSynth unavailable (%s); trying MIDI output", exc)
        try:
            return MidiOutSink(midi_port)
        except Exception as exc:
            logger.warning("MIDI output unavailable (%s); running without sound", exc)
        return None
