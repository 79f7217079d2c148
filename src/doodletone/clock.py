"""Wall-clock timing for stroke fade and playback, independent of frame rate."""

from __future__ import annotations

import time
from typing import Callable


class PlaybackClock:
    """Monotonic millisecond clock.

    `source` returns seconds (``time.monotonic`` by default); `now()` reports
    milliseconds elapsed since the clock was created.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._origin = source()

    def now(self) -> float:
        return (self._source() - self._origin) * 1000.0
