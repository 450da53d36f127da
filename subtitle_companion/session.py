"""Player session: the single owner of caption and playback state.

WHY: The host UI delivers discrete events (file chosen, time updated,
media loaded, play/pause pressed). Something has to own the current
CaptionTrack and the caption on screen, apply each event, and tell the
view when to re-render. Keeping that here leaves caption_sync pure.

HOW: Three components work together:
  PlayerState   : frozen dataclass snapshot of everything the view shows
  VideoElement  : protocol for the host's media element (the clock)
  PlayerSession : applies events by building a new PlayerState and
                  notifying subscribed listeners when it changed

RULES:
- State is replaced as a whole on every event, never mutated in place
- Loading subtitles discards the previous track atomically (no merge)
- Loading a new video resets the clock to 0
- The caption is looked up through a CaptionCursor built for the current
  track on every clock event. The cursor answers exactly what
  active_caption() would, so repeated or backward time values are safe
- Listeners run only when the new state differs from the old one; a NaN
  clock equals a NaN clock
- Single-threaded: callers deliver events from one event loop
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol

from caption_sync import CaptionCursor, CaptionTrack, parse

logger = logging.getLogger(__name__)

StateListener = Callable[["PlayerState", "PlayerState"], None]


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _same_state(old: "PlayerState", new: "PlayerState") -> bool:
    """State equality that treats two NaN clock readings as equal."""
    if new == old:
        return True
    for name in ("current_time", "duration"):
        a, b = getattr(old, name), getattr(new, name)
        if not (a == b or (_is_nan(a) and _is_nan(b))):
            return False
    return dataclasses.replace(
        new, current_time=old.current_time, duration=old.duration
    ) == old


class VideoElement(Protocol):
    """The host media element that owns the playback clock."""

    current_time: float
    duration: float
    paused: bool

    def play(self) -> None: ...

    def pause(self) -> None: ...


@dataclass(frozen=True)
class PlayerState:
    """Snapshot of the player as the view should render it.

    RULES:
    - video_name / subtitle_name: display names, "" when nothing is loaded
    - video_source: host-specific handle (path, URL), None when unloaded
    - track: the one active CaptionTrack (empty when none is loaded)
    - current_caption: text on screen, "" for none
    - current_time / duration: seconds from the playback clock
    """

    video_name: str = ""
    video_source: Optional[str] = None
    subtitle_name: str = ""
    track: CaptionTrack = field(default_factory=CaptionTrack)
    current_caption: str = ""
    current_time: float = 0.0
    duration: float = 0.0
    is_playing: bool = False

    @property
    def has_video(self) -> bool:
        return self.video_source is not None or bool(self.video_name)

    @property
    def has_subtitles(self) -> bool:
        return bool(self.track)


class PlayerSession:
    """Event processor for one player instance.

    WHY: Replaces framework-reactive cells with an explicit state struct
    and an explicit "state changed, re-render" callback contract.

    HOW: Each event method computes the next PlayerState with
    dataclasses.replace() and hands it to _commit(), which swaps it in and
    notifies listeners if anything changed.

    RULES:
    - subscribe() returns an unsubscribe callable
    - A listener receives (old_state, new_state)
    - Events never raise for bad clock values; see active_caption()
    """

    def __init__(self, video: Optional[VideoElement] = None) -> None:
        self._state = PlayerState()
        self._cursor = CaptionCursor(self._state.track)
        self._listeners: List[StateListener] = []
        self.video = video

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def cursor(self) -> CaptionCursor:
        """Caption lookup for the current track, rebuilt on every load."""
        return self._cursor

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: PlayerState) -> PlayerState:
        old_state = self._state
        if _same_state(old_state, new_state):
            return old_state
        self._state = new_state
        if new_state.current_caption != old_state.current_caption:
            logger.debug(
                "Caption at %.3fs: %r", new_state.current_time, new_state.current_caption
            )
        for listener in list(self._listeners):
            listener(old_state, new_state)
        return new_state

    # -----------------------------------------------------------------------
    # Events
    # -----------------------------------------------------------------------

    def load_video(self, name: str, source: Optional[str] = None) -> PlayerState:
        """A new video was selected: reset the clock to 0."""
        logger.info("Loaded video %s", name)
        state = self._state
        return self._commit(dataclasses.replace(
            state,
            video_name=name,
            video_source=source if source is not None else name,
            current_time=0.0,
            duration=0.0,
            is_playing=False,
            current_caption=self._cursor.caption_at(0.0),
        ))

    def load_subtitles(self, name: str, text: str) -> PlayerState:
        """A new subtitle file was read: replace the track wholesale."""
        track = parse(text)
        logger.info("Parsed %d caption(s) from %s", len(track), name)
        self._cursor = CaptionCursor(track)
        if track and not self._cursor.indexed:
            logger.debug("Track %s overlaps or is unordered; using linear lookup", name)
        state = self._state
        return self._commit(dataclasses.replace(
            state,
            subtitle_name=name,
            track=track,
            current_caption=self._cursor.caption_at(state.current_time),
        ))

    def video_loaded(self, duration: float) -> PlayerState:
        """Media metadata is available; record its duration."""
        return self._commit(dataclasses.replace(self._state, duration=duration))

    def time_update(self, current_time: float, paused: Optional[bool] = None) -> PlayerState:
        """The playback clock advanced, jumped, or simply ticked again."""
        state = self._state
        is_playing = state.is_playing if paused is None else not paused
        return self._commit(dataclasses.replace(
            state,
            current_time=current_time,
            is_playing=is_playing,
            current_caption=self._cursor.caption_at(current_time),
        ))

    def sync_from_video(self) -> PlayerState:
        """Read the attached video element's clock and apply it."""
        if self.video is None:
            return self._state
        return self.time_update(self.video.current_time, paused=self.video.paused)

    def toggle_play(self) -> PlayerState:
        """Play if paused, pause if playing. No-op without a video element."""
        if self.video is None:
            return self._state
        if self.video.paused:
            self.video.play()
        else:
            self.video.pause()
        return self._commit(dataclasses.replace(
            self._state, is_playing=not self.video.paused
        ))

    def reset(self) -> PlayerState:
        """Drop video, subtitles and clock, back to the initial state."""
        if self._state.video_source is not None:
            logger.info("Released video %s", self._state.video_source)
        new_state = PlayerState()
        self._cursor = CaptionCursor(new_state.track)
        return self._commit(new_state)
