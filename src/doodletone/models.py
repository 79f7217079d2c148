"""Core value types shared across the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto


class Quadrant(Enum):
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()


@dataclass(frozen=True)
class Point:
    """A canvas position and its 0-based order within a stroke."""

    x: float
    y: float
    sequence_index: int

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")
        if self.sequence_index < 0:
            raise ValueError(f"sequence_index must be >= 0, got {self.sequence_index}")

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.x, y - self.y)


@dataclass(frozen=True)
class NoteEvent:
    """A note anchored to one point of a stroke."""

    midi_note: int  # MIDI note number 0-127
    point_index: int  # Point.sequence_index of the anchor

    def __post_init__(self) -> None:
        if not 0 <= self.midi_note <= 127:
            raise ValueError(f"midi_note must be in 0..127, got {self.midi_note}")
        if self.point_index < 0:
            raise ValueError(f"point_index must be >= 0, got {self.point_index}")


@dataclass(frozen=True)
class NoteInfo:
    """Full result of mapping a canvas position to a note."""

    midi_note: int
    scale_name: str
    quadrant: Quadrant
    zone_index: int
    note_name: str
