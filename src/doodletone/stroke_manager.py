"""Stroke manager: owns live strokes, routes pointer input, culls dead strokes."""

from __future__ import annotations

import logging

from doodletone.audio import NoteDispatcher
from doodletone.clock import PlaybackClock
from doodletone.config import NOTE_SPACING, STROKE_LIFESPAN_MS
from doodletone.pitch import PitchMapper, note_name
from doodletone.stroke import Renderer, Stroke

logger = logging.getLogger(__name__)


class StrokeManager:
    """Session object holding every live stroke and the one being drawn.

    At most one stroke is in the drawing state at a time. Completed strokes
    play and fade independently, so several may sound at once.
    """

    def __init__(
        self,
        clock: PlaybackClock,
        dispatcher: NoteDispatcher,
        canvas_size: tuple[int, int],
        mapper: PitchMapper | None = None,
        note_spacing: float = NOTE_SPACING,
        lifespan_ms: float = STROKE_LIFESPAN_MS,
    ) -> None:
        self.clock = clock
        self.dispatcher = dispatcher
        self.canvas_size = canvas_size
        self.mapper = mapper or PitchMapper()
        self.note_spacing = note_spacing
        self.lifespan_ms = lifespan_ms
        self._strokes: list[Stroke] = []
        self._current: Stroke | None = None

    @property
    def strokes(self) -> list[Stroke]:
        return list(self._strokes)

    @property
    def current(self) -> Stroke | None:
        return self._current

    @property
    def is_drawing(self) -> bool:
        return self._current is not None

    def __len__(self) -> int:
        return len(self._strokes)

    # -- stroke operations -------------------------------------------------

    def begin_stroke(self, x: float, y: float, note: int | None) -> Stroke | None:
        """Start a new stroke. Returns None if one is already being drawn."""
        if self._current is not None:
            return None
        now = self.clock.now()
        self.remove_dead(now)
        stroke = Stroke(
            x, y, created_at=now, note=note,
            dispatcher=self.dispatcher, lifespan_ms=self.lifespan_ms,
        )
        self._strokes.append(stroke)
        self._current = stroke
        if note is not None:
            logger.debug("Note %s recorded at (%.0f, %.0f)", note_name(note), x, y)
        return stroke

    def extend_stroke(self, x: float, y: float, note: int | None = None) -> None:
        """Add a point to the current stroke.

        The note is kept only when the pointer has moved more than
        `note_spacing` from the last point; closer points are recorded for
        line geometry without a note.
        """
        stroke = self._current
        if stroke is None:
            return
        if note is not None and stroke.last_point.distance_to(x, y) > self.note_spacing:
            stroke.add_point(x, y, note)
            logger.debug("Note %s recorded at (%.0f, %.0f)", note_name(note), x, y)
        else:
            stroke.add_point(x, y)

    def end_stroke(self) -> Stroke | None:
        stroke = self._current
        if stroke is None:
            return None
        stroke.complete(self.clock.now())
        self._current = None
        return stroke

    def tick(self, now: float | None = None) -> None:
        """Advance every stroke and drop the ones that have died."""
        if now is None:
            now = self.clock.now()
        for stroke in self._strokes:
            stroke.update(now)
        self.remove_dead(now)

    def remove_dead(self, now: float) -> int:
        alive = [s for s in self._strokes if not s.is_dead(now)]
        removed = len(self._strokes) - len(alive)
        if self._current is not None and self._current not in alive:
            # A stroke held past its lifespan expires mid-draw.
            self._current = None
        self._strokes = alive
        return removed

    def clear(self) -> None:
        self._strokes.clear()
        self._current = None

    def display(self, renderer: Renderer) -> None:
        for stroke in self._strokes:
            stroke.display(renderer)

    # -- input events ------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        self.canvas_size = (width, height)

    def _map(self, x: float, y: float) -> int:
        w, h = self.canvas_size
        return self.mapper.note_info(x, y, w, h).midi_note

    def pointer_down(self, x: float, y: float) -> Stroke | None:
        if self._current is not None:
            return None
        return self.begin_stroke(x, y, self._map(x, y))

    def pointer_move(self, x: float, y: float) -> None:
        if self._current is None:
            return
        self.extend_stroke(x, y, self._map(x, y))

    def pointer_up(self) -> Stroke | None:
        return self.end_stroke()
