"""Tests for the playback clock."""

from doodletone.clock import PlaybackClock


def test_reports_milliseconds_since_creation():
    readings = iter([10.0, 10.25, 11.0])
    clock = PlaybackClock(source=lambda: next(readings))
    assert clock.now() == 250.0
    assert clock.now() == 1000.0


def test_default_source_is_monotonic():
    clock = PlaybackClock()
    first = clock.now()
    assert first >= 0.0
    assert clock.now() >= first
