"""Pitch mapping: quantize canvas positions onto per-quadrant scales."""

from __future__ import annotations

import math

from doodletone.config import ZONES_PER_HALF
from doodletone.models import NoteInfo, Quadrant

# One 8-note ascending scale per quadrant (MIDI numbers, roughly one octave each)
SCALES: dict[Quadrant, tuple[str, tuple[int, ...]]] = {
    Quadrant.TOP_LEFT: ("C Major", (60, 62, 64, 65, 67, 69, 71, 72)),
    Quadrant.TOP_RIGHT: ("A Major", (69, 71, 72, 74, 76, 77, 79, 81)),
    Quadrant.BOTTOM_LEFT: ("G Major", (67, 69, 71, 72, 74, 76, 77, 79)),
    Quadrant.BOTTOM_RIGHT: ("F Major", (65, 67, 69, 71, 73, 74, 76, 77)),
}

_NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def note_name(midi_note: int) -> str:
    """Scientific pitch name, e.g. 60 -> "C4"."""
    return f"{_NOTE_NAMES[midi_note % 12]}{midi_note // 12 - 1}"


def midi_to_frequency(midi_note: int) -> float:
    return 440.0 * 2 ** ((midi_note - 69) / 12)


def quadrant_for(x: float, y: float, width: float, height: float) -> Quadrant:
    right = x >= width / 2
    bottom = y >= height / 2
    if bottom:
        return Quadrant.BOTTOM_RIGHT if right else Quadrant.BOTTOM_LEFT
    return Quadrant.TOP_RIGHT if right else Quadrant.TOP_LEFT


class PitchMapper:
    """Maps canvas positions to notes for a canvas of a given size.

    The canvas is split into four quadrants, each with its own scale. The
    horizontal half holding the point is cut into equal zones and the zone
    number, reduced modulo the scale length, picks the note. Positions outside
    the canvas are clamped onto its edge first.
    """

    def __init__(self, zones_per_half: int = ZONES_PER_HALF) -> None:
        self.zones_per_half = zones_per_half

    def note_info(self, x: float, y: float, width: float, height: float) -> NoteInfo:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        # NaN has no position on the canvas; treat it as the origin
        if math.isnan(x):
            x = 0.0
        if math.isnan(y):
            y = 0.0
        x = min(max(x, 0.0), float(width))
        y = min(max(y, 0.0), float(height))

        quadrant = quadrant_for(x, y, width, height)
        scale_name, scale = SCALES[quadrant]

        half_width = width / 2
        relative_x = x - half_width if x >= half_width else x
        zone_index = math.floor(relative_x * self.zones_per_half / half_width)

        midi_note = scale[zone_index % len(scale)]
        return NoteInfo(
            midi_note=midi_note,
            scale_name=scale_name,
            quadrant=quadrant,
            zone_index=zone_index,
            note_name=note_name(midi_note),
        )

    def map_point_to_note(self, x: float, y: float, width: float, height: float) -> tuple[int, str]:
        info = self.note_info(x, y, width, height)
        return info.midi_note, info.scale_name
