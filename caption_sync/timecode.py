"""Timestamp conversion and playback-time display formatting.

WHY: Subtitle files express times as fixed-width SRT timestamps, the
player shows elapsed time as a short clock string, and the SRT exporter
needs to write timestamps back out. Keeping the three conversions together
makes their rounding rules easy to compare.

HOW: parse_timestamp() reads HH:MM:SS,mmm via a strict regex and builds
an exact millisecond total before dividing. format_time() floors to whole
seconds for display. seconds_to_srt_time() rounds to the nearest
millisecond.

RULES:
- SRT timestamps use a comma as the fractional separator, never a period.
- Hours, minutes and seconds are exactly two digits; milliseconds three.
- Digits are ASCII 0-9 only.
- format_time() never raises: non-finite or non-numeric input gives "00:00".
- seconds_to_srt_time() never raises: non-finite input gives 00:00:00,000.
- Any real number counts as a time (int, float, Fraction, Decimal, numpy
  scalars); bool does not.
"""

import decimal
import math
import numbers
import re
from typing import Any, Optional

TIMESTAMP_PATTERN = r"([0-9]{2}):([0-9]{2}):([0-9]{2}),([0-9]{3})"
TIMESTAMP_RE = re.compile(r"^" + TIMESTAMP_PATTERN + r"$")

# Placeholder shown while the media duration or clock is unknown.
UNKNOWN_TIME = "00:00"


def as_seconds(value: Any) -> Optional[float]:
    """Return value as float seconds, or None if it is not a usable number.

    None, bool, strings and NaN are unusable. Infinities are returned as-is.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, decimal.Decimal)):
        return None
    try:
        seconds = float(value)
    except (ValueError, OverflowError):
        # Signalling Decimal NaN, or an integer too large for a float.
        return None
    if math.isnan(seconds):
        return None
    return seconds


def timestamp_parts_to_seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    """Combine the four captured timestamp fields into seconds.

    The total is summed in integer milliseconds and divided once, so
    "01:02:03,456" gives exactly 3723.456.
    """
    total_ms = (
        int(hours) * 3600000
        + int(minutes) * 60000
        + int(seconds) * 1000
        + int(millis)
    )
    return total_ms / 1000


def parse_timestamp(text: str) -> float:
    """Convert an SRT timestamp (HH:MM:SS,mmm) to seconds.

    Args:
        text: Timestamp string; surrounding whitespace is ignored.

    Returns:
        Time in seconds.

    Raises:
        ValueError: If text is not a fixed-width SRT timestamp.
    """
    match = TIMESTAMP_RE.match(text.strip())
    if not match:
        raise ValueError("Invalid SRT timestamp: {!r}".format(text))
    return timestamp_parts_to_seconds(*match.groups())


def seconds_to_srt_time(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    value = as_seconds(seconds)
    if value is None or not math.isfinite(value):
        value = 0.0
    total_ms = max(0, int(round(value * 1000)))
    hours, rest = divmod(total_ms, 3600000)
    minutes, rest = divmod(rest, 60000)
    secs, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


def format_time(seconds: Any) -> str:
    """Format a playback position for display.

    WHY: The player shows current time and duration next to the video.
    Durations are unknown (NaN) until the media metadata has loaded, so
    the formatter has to accept anything the clock reports.

    HOW: Floors to whole seconds, then renders H:MM:SS when there is at
    least one hour, otherwise M:SS.

    RULES:
    - Minutes and seconds are zero-padded to two digits; hours and the
      leading minutes field are not.
    - NaN, infinities, None and non-numbers render as "00:00".
    - Negative values are clamped to zero.

    Examples:
        format_time(65) -> "1:05"
        format_time(3665) -> "1:01:05"
    """
    value = as_seconds(seconds)
    if value is None or not math.isfinite(value):
        return UNKNOWN_TIME

    total = max(0, int(math.floor(value)))
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60

    if h > 0:
        return "{}:{:02d}:{:02d}".format(h, m, s)
    return "{}:{:02d}".format(m, s)
