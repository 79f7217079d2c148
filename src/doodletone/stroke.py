"""Stroke: one drawn path, its notes, and its fade/playback state machine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from doodletone.config import (
    DOT_THRESHOLD,
    FADE_DELAY_MS,
    LOOP_SILENCE_MS,
    NOTE_INTERVAL_MS,
    STROKE_LIFESPAN_MS,
)
from doodletone.models import NoteEvent, Point

if TYPE_CHECKING:
    from doodletone.audio import NoteDispatcher

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """Drawing primitives a stroke needs to display itself."""

    def draw_line(self, p1: Point, p2: Point) -> None: ...
    def draw_marker(self, point: Point) -> None: ...


class Stroke:
    """A timestamped path of points with notes anchored to some of them.

    While drawing, every point that carries a note is sounded straight away.
    Once `complete()` is called the stroke loops through its notes every
    `note_interval_ms`; after half its lifespan it starts fading from the
    first point onward, one point every `fade_delay_ms`. All timing is driven
    by the `now` values passed to `update()`, never by frame counts.
    """

    def __init__(
        self,
        x: float,
        y: float,
        created_at: float,
        note: int | None = None,
        dispatcher: NoteDispatcher | None = None,
        lifespan_ms: float = STROKE_LIFESPAN_MS,
        fade_delay_ms: float = FADE_DELAY_MS,
        note_interval_ms: float = NOTE_INTERVAL_MS,
        loop_silence_ms: float = LOOP_SILENCE_MS,
    ) -> None:
        self.created_at = created_at
        self.lifespan_ms = lifespan_ms
        self.fade_delay_ms = fade_delay_ms
        self.note_interval_ms = note_interval_ms
        self.loop_silence_ms = loop_silence_ms
        self._dispatcher = dispatcher

        self.points: list[Point] = []
        self.notes: list[NoteEvent] = []
        self.path_length: float = 0.0
        self.is_complete: bool = False
        self.playback_index: int = 0
        self.loops_played: int = 0
        self.fade_index: int = 0
        self.fade_started_at: float | None = None
        self.last_fade_at: float = 0.0
        self.last_note_played_at: float = 0.0

        self._append(x, y, note)

    # -- drawing ---------------------------------------------------------

    def add_point(self, x: float, y: float, note: int | None = None) -> None:
        """Append a point while drawing. Ignored once the stroke is complete."""
        if self.is_complete:
            return
        self.path_length += self.points[-1].distance_to(x, y)
        self._append(x, y, note)

    def _append(self, x: float, y: float, note: int | None) -> None:
        point = Point(x=float(x), y=float(y), sequence_index=len(self.points))
        self.points.append(point)
        if note is None:
            return
        self.notes.append(NoteEvent(midi_note=note, point_index=point.sequence_index))
        if self._dispatcher is not None:
            self._dispatcher.request(note)

    def complete(self, now: float) -> None:
        """Finish drawing and start looped playback from the first note."""
        if not self.is_complete:
            self.is_complete = True
            self.playback_index = 0
            logger.debug(
                "Stroke completed with %d notes over %.1f px", len(self.notes), self.path_length,
            )
        self.last_note_played_at = now

    @property
    def last_point(self) -> Point:
        return self.points[-1]

    @property
    def is_dot(self) -> bool:
        return self.path_length <= DOT_THRESHOLD

    @property
    def current_note(self) -> NoteEvent | None:
        if not self.notes:
            return None
        return self.notes[self.playback_index]

    # -- per-frame -------------------------------------------------------

    def update(self, now: float) -> None:
        age = now - self.created_at

        if self.is_complete and self.fade_started_at is None and age > self.lifespan_ms * 0.5:
            self.fade_started_at = now
            self.last_fade_at = now

        if (
            self.fade_started_at is not None
            and now - self.last_fade_at > self.fade_delay_ms
            and self.fade_index < len(self.points)
        ):
            self.fade_index += 1
            self.last_fade_at = now

        if self.is_complete and self.notes and now - self.last_note_played_at > self.note_interval_ms:
            note = self.notes[self.playback_index]
            if self._dispatcher is not None:
                self._dispatcher.request(note.midi_note, now)
            self.playback_index = (self.playback_index + 1) % len(self.notes)
            if self.playback_index == 0:
                self.loops_played += 1
            self.last_note_played_at = now

    def is_dead(self, now: float) -> bool:
        fully_faded = self.fade_index >= len(self.points)
        expired = now - self.created_at > self.lifespan_ms
        finished_loop = (
            self.is_complete
            and bool(self.notes)
            and self.loops_played > 0
            and self.playback_index == 0
            and now - self.last_note_played_at > self.loop_silence_ms
        )
        return fully_faded or expired or finished_loop

    def display(self, renderer: Renderer) -> None:
        """Draw the unfaded part of the path and the playback marker."""
        if self.fade_index >= len(self.points):
            return

        for i in range(self.fade_index, len(self.points) - 1):
            renderer.draw_line(self.points[i], self.points[i + 1])

        if self.is_complete and (note := self.current_note) is not None:
            if note.point_index >= self.fade_index:
                renderer.draw_marker(self.points[note.point_index])
