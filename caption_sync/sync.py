"""Clock synchronization: map a playback time onto the active caption.

WHY: The player re-evaluates the caption on every time-update callback
(several times per second) and after every seek. The answer must depend
only on the track and the time, never on how often or in which order the
callbacks arrive.

HOW: active_caption() is the reference behaviour: a linear scan in stored
order returning the first record whose closed interval contains the time.
CaptionCursor is an optional accelerator for long, well-ordered tracks that
returns exactly what the linear scan would.

RULES:
- Both bounds are inclusive: start_time <= t <= end_time.
- Overlaps are resolved by stored order: the first matching record wins.
- No match, no track, None, NaN or non-numeric time: the result is "".
- Any real number is a valid time (see timecode.as_seconds).
- Inverted records (start_time > end_time) never match and are not fixed up.
"""

import bisect
import math
from typing import List, Optional

from .models import CaptionRecord, CaptionTrack
from .timecode import as_seconds


def find_active(
    track: Optional[CaptionTrack], current_time: Optional[float]
) -> Optional[CaptionRecord]:
    """Return the first record covering current_time, or None."""
    seconds = as_seconds(current_time)
    if not track or seconds is None:
        return None
    for record in track:
        if record.start_time <= seconds <= record.end_time:
            return record
    return None


def active_caption(track: Optional[CaptionTrack], current_time: Optional[float]) -> str:
    """Return the caption text to display at current_time.

    Pure function of (track, current_time), O(n) over the track, re-evaluated
    from scratch on every call. Returns "" when no caption is active.
    """
    record = find_active(track, current_time)
    return record.text if record is not None else ""


def is_sequential(track: CaptionTrack) -> bool:
    """True if records are time-ordered, non-inverted and strictly disjoint.

    For such tracks at most one record can cover any given time, so the
    first match in stored order is also the only match.
    """
    previous_end = None  # type: Optional[float]
    for record in track:
        if not record.start_time <= record.end_time:
            return False
        if previous_end is not None and not previous_end < record.start_time:
            return False
        previous_end = record.end_time
    return True


class CaptionCursor:
    """Stateful caption lookup for a single track.

    Remembers the position of the last answer so steady forward playback
    checks one or two records per call. Backward seeks and jumps fall back
    to a binary search over start times. Tracks with overlaps, inverted
    ranges or out-of-order blocks are answered with the plain linear scan,
    so results always equal active_caption(track, t).
    """

    def __init__(self, track: Optional[CaptionTrack]) -> None:
        self.track = track if track is not None else CaptionTrack()
        self.indexed = is_sequential(self.track)
        self._starts = [r.start_time for r in self.track]  # type: List[float]
        self._position = 0

    def find(self, current_time: Optional[float]) -> Optional[CaptionRecord]:
        seconds = as_seconds(current_time)
        if not self.track or seconds is None:
            return None
        if not self.indexed or math.isinf(seconds):
            return find_active(self.track, seconds)

        records = self.track.records
        for position in (self._position, self._position + 1):
            if position < len(records) and records[position].covers(seconds):
                self._position = position
                return records[position]

        position = bisect.bisect_right(self._starts, seconds) - 1
        if position < 0:
            self._position = 0
            return None
        self._position = position
        if records[position].covers(seconds):
            return records[position]
        return None

    def caption_at(self, current_time: Optional[float]) -> str:
        record = self.find(current_time)
        return record.text if record is not None else ""
