"""Shared fakes: a hand-driven clock, a recording audio sink and renderer."""

import pytest

from doodletone.audio import NoteDispatcher
from doodletone.stroke_manager import StrokeManager


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.t = start

    def now(self) -> float:
        return self.t

    def advance(self, ms: float) -> float:
        self.t += ms
        return self.t


class RecordingSink:
    def __init__(self) -> None:
        self.played: list[tuple[int, int]] = []
        self.flushes = 0
        self.silenced = 0

    def play(self, midi_note: int, duration_ms: int) -> None:
        self.played.append((midi_note, duration_ms))

    def flush_pending_offs(self) -> None:
        self.flushes += 1

    def all_notes_off(self) -> None:
        self.silenced += 1

    def shutdown(self) -> None:
        pass

    @property
    def notes(self) -> list[int]:
        return [n for n, _ in self.played]


class RecordingRenderer:
    def __init__(self) -> None:
        self.lines = []
        self.markers = []

    def draw_line(self, p1, p2) -> None:
        self.lines.append((p1.sequence_index, p2.sequence_index))

    def draw_marker(self, point) -> None:
        self.markers.append(point.sequence_index)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def dispatcher(sink, clock):
    return NoteDispatcher(sink, clock)


@pytest.fixture
def manager(clock, dispatcher):
    return StrokeManager(clock, dispatcher, canvas_size=(800, 600))


@pytest.fixture
def renderer():
    return RecordingRenderer()
