"""Unit tests for the simulated clock and the polling playback loop.

WHY: The terminal player stands in for the browser's video element and
timeupdate callback. If the clock drifts past its end or the loop stops
early, the CLI shows an incomplete caption sequence.

HOW: A FakeTimer replaces the monotonic clock and a fake sleep advances
it, so every test runs instantly and deterministically.
"""

import pytest

from subtitle_companion.playback import SimulatedClock, run_playback
from subtitle_companion.session import PlayerSession


class FakeTimer:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class TestSimulatedClock:

    def test_starts_paused_at_zero(self):
        clock = SimulatedClock(duration=10, timer=FakeTimer())
        assert clock.paused
        assert clock.current_time == 0.0

    def test_advances_while_playing(self):
        timer = FakeTimer()
        clock = SimulatedClock(duration=10, timer=timer)
        clock.play()
        timer.sleep(2.5)
        assert clock.current_time == 2.5

    def test_speed_multiplier(self):
        timer = FakeTimer()
        clock = SimulatedClock(duration=10, speed=4.0, timer=timer)
        clock.play()
        timer.sleep(1.0)
        assert clock.current_time == 4.0

    def test_pause_freezes_time(self):
        timer = FakeTimer()
        clock = SimulatedClock(duration=10, timer=timer)
        clock.play()
        timer.sleep(3.0)
        clock.pause()
        timer.sleep(5.0)
        assert clock.current_time == 3.0

    def test_clamped_to_duration(self):
        timer = FakeTimer()
        clock = SimulatedClock(duration=10, timer=timer)
        clock.play()
        timer.sleep(60.0)
        assert clock.current_time == 10.0
        assert clock.ended

    def test_seek_while_playing(self):
        timer = FakeTimer()
        clock = SimulatedClock(duration=10, timer=timer)
        clock.play()
        timer.sleep(3.0)
        clock.seek(1.0)
        timer.sleep(1.0)
        assert clock.current_time == 2.0

    def test_seek_clamped(self):
        clock = SimulatedClock(duration=10, timer=FakeTimer())
        clock.seek(-5)
        assert clock.current_time == 0.0
        clock.seek(50)
        assert clock.current_time == 10.0

    def test_rejects_non_positive_speed(self):
        with pytest.raises(ValueError, match="speed must be positive"):
            SimulatedClock(duration=10, speed=0)


class TestRunPlayback:

    def test_collects_every_caption(self, sample_srt):
        timer = FakeTimer()
        session = PlayerSession()
        session.load_subtitles("movie.srt", sample_srt)
        clock = SimulatedClock(duration=session.state.track.duration, timer=timer)
        session.video = clock

        shown = []
        session.subscribe(
            lambda old, new: shown.append(new.current_caption)
            if new.current_caption and new.current_caption != old.current_caption else None
        )
        final = run_playback(session, interval=0.25, sleep=timer.sleep)

        assert shown == ["Hello world", "Second caption", "Third caption spans two lines"]
        assert final.current_time == 68.25
        assert not final.is_playing
        assert clock.paused

    def test_start_offset(self, sample_srt):
        timer = FakeTimer()
        session = PlayerSession()
        session.load_subtitles("movie.srt", sample_srt)
        clock = SimulatedClock(duration=70, timer=timer)
        clock.seek(60)
        session.video = clock

        shown = []
        session.subscribe(lambda old, new: shown.append(new.current_caption))
        run_playback(session, interval=0.5, sleep=timer.sleep)
        assert "Hello world" not in shown
        assert "Third caption spans two lines" in shown

    def test_requires_video(self):
        with pytest.raises(ValueError, match="no video element"):
            run_playback(PlayerSession(), interval=0.25)
