"""Subtitle parsing and playback synchronization library.

WHY: A media companion player needs to turn an SRT file into timed
captions and pick the caption that matches the video's playback clock.
This package is that core, free of any UI, file or network concerns, so
the host application (or any other front end) can call it directly.

HOW: Three public functions cover the whole contract:
  parse(text)                       -> CaptionTrack
  active_caption(track, time)       -> str ("" when nothing is active)
  format_time(seconds)              -> "M:SS" / "H:MM:SS"
CaptionCursor adds a stateful accelerator with identical results.

RULES:
- parse, active_caption, find_active, format_time, seconds_to_srt_time and
  CaptionCursor are total: no exception escapes for any input.
- parse_timestamp is the strict exception: it raises ValueError for text
  that is not an HH:MM:SS,mmm timestamp.
- No global state; every call works only on its arguments.
- Python 3.9 compatible (no match/case, no X | Y unions).
"""

from .core import parse
from .models import CaptionRecord, CaptionTrack
from .sync import CaptionCursor, active_caption, find_active
from .timecode import format_time, parse_timestamp, seconds_to_srt_time

__all__ = [
    "parse",
    "active_caption",
    "find_active",
    "format_time",
    "parse_timestamp",
    "seconds_to_srt_time",
    "CaptionCursor",
    "CaptionRecord",
    "CaptionTrack",
]
