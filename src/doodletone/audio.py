"""Audio output: sink back ends and the global note rate limiter."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import mido

from doodletone.config import MIN_PLAY_INTERVAL_MS, NOTE_DURATION_MS, NOTE_VELOCITY
from doodletone.pitch import note_name

if TYPE_CHECKING:
    from doodletone.clock import PlaybackClock

logger = logging.getLogger(__name__)


class AudioUnavailableError(Exception):
    """Raised when an audio back end cannot be started."""


@runtime_checkable
class AudioSink(Protocol):
    """Fire-and-forget note output."""

    def play(self, midi_note: int, duration_ms: int) -> None: ...
    def flush_pending_offs(self) -> None: ...
    def all_notes_off(self) -> None: ...
    def shutdown(self) -> None: ...


def _detect_audio_driver() -> str:
    """Auto-detect the appropriate FluidSynth audio driver for the platform."""
    if sys.platform == "linux":
        return "pulseaudio"
    elif sys.platform == "darwin":
        return "coreaudio"
    elif sys.platform == "win32":
        return "dsound"
    return "alsa"


class _PendingOffs:
    """Note-off bookkeeping shared by the sinks: (off_time, pitch) pairs."""

    def __init__(self) -> None:
        self._pending: list[tuple[float, int]] = []

    def add(self, pitch: int, duration_ms: int) -> None:
        self._pending.append((time.monotonic() + duration_ms / 1000.0, pitch))

    def due(self) -> list[int]:
        now = time.monotonic()
        released = [pitch for off_time, pitch in self._pending if now >= off_time]
        self._pending = [(t, p) for t, p in self._pending if now < t]
        return released

    def clear(self) -> None:
        self._pending.clear()


class FluidSynthSink:
    """Plays notes on a FluidSynth synthesizer loaded with a SoundFont."""

    def __init__(
        self,
        soundfont_path: str | Path | None = None,
        channel: int = 0,
        velocity: int = NOTE_VELOCITY,
    ) -> None:
        try:
            import fluidsynth
        except ImportError as exc:
            raise AudioUnavailableError(f"pyfluidsynth is not usable: {exc}") from exc

        self.fs = fluidsynth.Synth(gain=0.8)
        self.fs.start(driver=_detect_audio_driver())
        self.channel = channel
        self.velocity = velocity
        self._sfid: int | None = None
        self._offs = _PendingOffs()
        if soundfont_path:
            self.load_soundfont(soundfont_path)

    def load_soundfont(self, path: str | Path) -> None:
        self._sfid = self.fs.sfload(str(path))
        self.fs.program_select(self.channel, self._sfid, 0, 0)

    def play(self, midi_note: int, duration_ms: int) -> None:
        self.fs.noteon(self.channel, midi_note, self.velocity)
        self._offs.add(midi_note, duration_ms)

    def flush_pending_offs(self) -> None:
        """Call each frame to release notes whose duration has elapsed."""
        for pitch in self._offs.due():
            self.fs.noteoff(self.channel, pitch)

    def all_notes_off(self) -> None:
        for pitch in range(128):
            self.fs.noteoff(self.channel, pitch)
        self._offs.clear()

    def shutdown(self) -> None:
        self.all_notes_off()
        self.fs.delete()


class MidiOutSink:
    """Sends notes to an external MIDI output port (hardware or software synth)."""

    def __init__(
        self,
        port_name: str | None = None,
        channel: int = 0,
        velocity: int = NOTE_VELOCITY,
    ) -> None:
        names = mido.get_output_names()
        if not names:
            raise AudioUnavailableError("No MIDI output ports found")
        if port_name is not None and port_name not in names:
            raise AudioUnavailableError(f"MIDI output port {port_name!r} not found")
        self.port = mido.open_output(port_name or names[0])
        self.channel = channel
        self.velocity = velocity
        self._offs = _PendingOffs()

    def play(self, midi_note: int, duration_ms: int) -> None:
        self.port.send(mido.Message(
            "note_on", note=midi_note, velocity=self.velocity, channel=self.channel,
        ))
        self._offs.add(midi_note, duration_ms)

    def flush_pending_offs(self) -> None:
        for pitch in self._offs.due():
            self.port.send(mido.Message("note_off", note=pitch, channel=self.channel))

    def all_notes_off(self) -> None:
        self.port.reset()
        self._offs.clear()

    def shutdown(self) -> None:
        self.all_notes_off()
        self.port.close()


class NoteDispatcher:
    """Forwards note requests to a sink, at most one per `min_interval_ms`.

    Requests arriving before the interval has elapsed are dropped, not queued.
    Sink failures are logged and swallowed so drawing carries on without sound.
    """

    def __init__(
        self,
        sink: AudioSink | None,
        clock: PlaybackClock,
        min_interval_ms: float = MIN_PLAY_INTERVAL_MS,
        duration_ms: int = NOTE_DURATION_MS,
    ) -> None:
        self.sink = sink
        self.clock = clock
        self.min_interval_ms = min_interval_ms
        self.duration_ms = duration_ms
        self._last_sent_at: float | None = None
        self.sent = 0
        self.dropped = 0

    @property
    def audio_enabled(self) -> bool:
        return self.sink is not None

    def request(self, midi_note: int, now: float | None = None) -> bool:
        """Ask for a note to be played. Returns True if it was handed to the sink."""
        if now is None:
            now = self.clock.now()
        if self._last_sent_at is not None and now - self._last_sent_at < self.min_interval_ms:
            self.dropped += 1
            return False
        self._last_sent_at = now

        if self.sink is None:
            return False
        try:
            self.sink.play(midi_note, self.duration_ms)
        except Exception as exc:
            logger.warning("Failed to play %s: %s", note_name(midi_note), exc)
            return False
        self.sent += 1
        logger.debug("Played %s", note_name(midi_note))
        return True

    def flush(self) -> None:
        """Per-frame housekeeping: release finished notes."""
        if self.sink is None:
            return
        try:
            self.sink.flush_pending_offs()
        except Exception as exc:
            logger.warning("Failed to release notes: %s", exc)

    def silence(self) -> None:
        if self.sink is None:
            return
        try:
            self.sink.all_notes_off()
        except Exception as exc:
            logger.warning("Failed to silence audio: %s", exc)

    def shutdown(self) -> None:
        if self.sink is None:
            return
        try:
            self.sink.shutdown()
        except Exception as exc:
            logger.warning("Audio shutdown failed: %s", exc)
        self.sink = None
