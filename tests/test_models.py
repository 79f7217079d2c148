"""Tests for core value types."""

import math

import pytest

from doodletone.models import NoteEvent, Point


def test_point_is_immutable():
    p = Point(x=1.0, y=2.0, sequence_index=0)
    with pytest.raises(AttributeError):
        p.x = 5.0


@pytest.mark.parametrize("x, y, idx", [
    (math.nan, 0.0, 0),
    (0.0, math.inf, 0),
    (0.0, 0.0, -1),
])
def test_point_validation(x, y, idx):
    with pytest.raises(ValueError):
        Point(x=x, y=y, sequence_index=idx)


def test_point_distance():
    assert Point(0.0, 0.0, 0).distance_to(3.0, 4.0) == pytest.approx(5.0)


@pytest.mark.parametrize("midi, idx", [(-1, 0), (128, 0), (60, -3)])
def test_note_event_validation(midi, idx):
    with pytest.raises(ValueError):
        NoteEvent(midi_note=midi, point_index=idx)
