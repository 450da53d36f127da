"""Simulated playback clock and the polling loop that drives a session.

WHY: Outside a browser there is no video element ticking away, but the
caption logic should be exercised exactly the way the player uses it:
a clock advances on its own and the session re-reads it on a fixed
cadence. This module supplies both halves for the terminal.

HOW: SimulatedClock implements the VideoElement protocol on top of a
monotonic timer, with optional speed-up. run_playback() polls the clock
through PlayerSession.sync_from_video() until the clock reaches its end,
like the browser's timeupdate callback.

RULES:
- The clock never runs past its duration and never below 0
- Polling frequency affects only responsiveness, never which caption is
  shown for a given time
- timer and sleep are injectable so tests can run without real waiting
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from subtitle_companion.session import PlayerSession, PlayerState

logger = logging.getLogger(__name__)


class SimulatedClock:
    """A play/pause/seek clock that behaves like a media element."""

    def __init__(
        self,
        duration: float,
        speed: float = 1.0,
        timer: Optional[Callable[[], float]] = None,
    ) -> None:
        if speed <= 0:
            raise ValueError("Playback speed must be positive, got {}".format(speed))
        self.duration = max(0.0, float(duration))
        self.speed = speed
        self._timer = timer or time.monotonic
        self._offset = 0.0
        self._started_at: Optional[float] = None

    @property
    def paused(self) -> bool:
        return self._started_at is None

    @property
    def current_time(self) -> float:
        if self._started_at is None:
            return self._offset
        elapsed = (self._timer() - self._started_at) * self.speed
        return min(self.duration, self._offset + elapsed)

    @property
    def ended(self) -> bool:
        return self.current_time >= self.duration

    def play(self) -> None:
        if self._started_at is None:
            self._started_at = self._timer()

    def pause(self) -> None:
        if self._started_at is not None:
            self._offset = self.current_time
            self._started_at = None

    def seek(self, position: float) -> None:
        self._offset = min(self.duration, max(0.0, position))
        if self._started_at is not None:
            self._started_at = self._timer()


def run_playback(
    session: PlayerSession,
    interval: float,
    sleep: Callable[[float], None] = time.sleep,
) -> PlayerState:
    """Play the session's video element to the end, polling every interval.

    Returns:
        The final PlayerState after the clock has ended.
    """
    clock = session.video
    if clock is None:
        raise ValueError("Session has no video element to play")

    if clock.paused:
        session.toggle_play()
    logger.info("Playback started at %.3fs", clock.current_time)

    session.sync_from_video()
    while clock.current_time < clock.duration:
        sleep(interval)
        session.sync_from_video()

    if not clock.paused:
        session.toggle_play()
    logger.info("Playback ended at %.3fs", clock.current_time)
    return session.sync_from_video()
