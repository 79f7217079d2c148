"""Tests for the stroke fade/playback state machine."""

from doodletone.models import NoteEvent
from doodletone.stroke import Stroke


def test_new_stroke_has_one_point_and_note():
    s = Stroke(10, 20, created_at=0, note=60)
    assert len(s.points) == 1
    assert s.notes == [NoteEvent(midi_note=60, point_index=0)]
    assert not s.is_complete
    assert s.is_dot


def test_path_length_and_dot():
    s = Stroke(10, 20, created_at=0)
    s.add_point(13, 24)
    assert s.path_length == 5.0
    s.add_point(13, 24)
    assert s.path_length == 5.0
    assert s.is_dot
    s.add_point(13, 34)
    assert s.path_length == 15.0
    assert not s.is_dot
    assert [p.sequence_index for p in s.points] == [0, 1, 2, 3]


def test_notes_are_played_while_drawing(dispatcher, sink, clock):
    s = Stroke(0, 0, created_at=0, note=60, dispatcher=dispatcher)
    assert sink.notes == [60]
    clock.advance(100)
    s.add_point(20, 0, 62)
    s.add_point(40, 0, 64)  # inside the rate-limit window
    assert sink.notes == [60, 62]
    assert [n.midi_note for n in s.notes] == [60, 62, 64]
    assert [n.point_index for n in s.notes] == [0, 1, 2]


def test_add_point_ignored_after_complete():
    s = Stroke(0, 0, created_at=0, note=60)
    s.complete(0)
    s.add_point(50, 50, 62)
    assert len(s.points) == 1
    assert len(s.notes) == 1


def test_no_playback_before_complete(dispatcher, sink):
    s = Stroke(0, 0, created_at=0, note=60, dispatcher=dispatcher)
    s.add_point(30, 0, 62)
    s.update(1000)
    assert sink.notes == [60]
    assert s.playback_index == 0
    assert s.fade_started_at is None


def test_complete_is_idempotent():
    s = Stroke(0, 0, created_at=0, note=60)
    s.add_point(30, 0, 62)
    s.complete(100)
    assert s.playback_index == 0
    s.update(301)
    assert s.playback_index == 1
    s.complete(400)
    assert s.is_complete
    assert s.playback_index == 1
    assert s.last_note_played_at == 400


def test_playback_cycles_at_interval(dispatcher, sink):
    s = Stroke(0, 0, created_at=0, note=60, dispatcher=dispatcher)
    s.add_point(30, 0, 64)
    s.add_point(60, 0, 67)
    s.complete(0)
    indices = []
    for t in range(1, 2000):
        s.update(t)
        indices.append(s.playback_index)
    assert set(indices) == {0, 1, 2}
    assert max(indices) < len(s.notes)
    # one note every 201 ms: 201, 402, ... 1809
    assert sink.notes[1:] == [60, 64, 67] * 3
    assert s.loops_played == 3


def test_fade_starts_after_half_lifespan_and_is_monotonic():
    s = Stroke(0, 0, created_at=0, note=60)
    s.add_point(20, 0)
    s.add_point(40, 0)
    s.complete(0)

    s.update(2500)
    assert s.fade_started_at is None
    s.update(2501)
    assert s.fade_started_at == 2501
    assert s.fade_index == 0

    previous = 0
    t = 2501
    while not s.is_dead(t):
        t += 10
        s.update(t)
        assert s.fade_index >= previous
        assert s.fade_index <= len(s.points)
        previous = s.fade_index
    assert s.fade_index == len(s.points)
    assert t < s.created_at + s.lifespan_ms


def test_fade_advances_one_point_per_delay():
    s = Stroke(0, 0, created_at=0)
    for x in range(10, 100, 10):
        s.add_point(x, 0)
    s.complete(0)
    s.update(2600)
    s.update(2651)
    assert s.fade_index == 1
    s.update(2660)
    assert s.fade_index == 1
    s.update(2702)
    assert s.fade_index == 2


def test_hard_expiry_regardless_of_state():
    s = Stroke(0, 0, created_at=0, note=60)
    s.update(4000)
    assert s.fade_started_at is None
    assert not s.is_dead(5000)
    assert s.is_dead(5001)


def test_dead_after_full_loop_and_silence():
    s = Stroke(0, 0, created_at=0, note=60)
    s.complete(0)
    s.update(201)
    assert s.loops_played == 1
    assert s.playback_index == 0
    assert not s.is_dead(1100)
    assert s.is_dead(1202)


def test_display_skips_faded_points(renderer):
    s = Stroke(0, 0, created_at=0, note=60)
    s.add_point(10, 0)
    s.add_point(20, 0, 64)
    s.add_point(30, 0)

    s.display(renderer)
    assert renderer.lines == [(0, 1), (1, 2), (2, 3)]
    assert renderer.markers == []

    s.complete(0)
    renderer.lines.clear()
    s.display(renderer)
    assert renderer.markers == [0]

    s.fade_index = 1
    renderer.lines.clear()
    renderer.markers.clear()
    s.display(renderer)
    assert renderer.lines == [(1, 2), (2, 3)]
    assert renderer.markers == []

    s.playback_index = 1
    s.display(renderer)
    assert renderer.markers == [2]


def test_display_nothing_when_fully_faded(renderer):
    s = Stroke(0, 0, created_at=0, note=60)
    s.add_point(10, 0)
    s.complete(0)
    s.fade_index = 2
    s.display(renderer)
    assert renderer.lines == []
    assert renderer.markers == []
