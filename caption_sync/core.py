"""Subtitle parsing: raw SRT text to an ordered CaptionTrack.

WHY: Subtitle files in the wild are only semi-structured. Editors leave
extra blank lines, trailing spaces, Windows line endings, half-written
blocks at the end of the file. The caption overlay should show whatever
can be recovered instead of failing on the first irregularity.

HOW: A line-oriented scanner that moves through these states:
  SEEK_INDEX      : skip blank lines until a decimal index line appears
                    (the time range may follow on the same line)
  SEEK_TIMERANGE  : skip blank lines until "start --> end" is complete;
                    a range broken across lines is joined piece by piece
  TEXT            : collect body lines until a blank line
  (terminated)    : emit the record if it has a body, back to SEEK_INDEX
Each state transition is a single line decision, so the skipping rules for
malformed input can be read (and tested) one line at a time.

RULES:
- parse() never raises for any string input; malformed blocks are dropped.
- Blocks are emitted in scan order; indices are stored, not used to sort.
- A block needs at least one body line. A time range with no body is skipped.
- Whitespace-only lines count as blank lines (block separators).
- The final block may end at end of input without a blank line.
- Overlapping or out-of-order time ranges are kept unchanged.
"""

import enum
import logging
import re
from typing import List, Optional

from .models import CaptionRecord, CaptionTrack
from .timecode import TIMESTAMP_PATTERN, timestamp_parts_to_seconds

logger = logging.getLogger(__name__)

# =============================================================================
# Line Classification
# =============================================================================

INDEX_RE = re.compile(r"^[0-9]+$")
INDEXED_LINE_RE = re.compile(r"^([0-9]+)\s+(\S.*)$")
TIMERANGE_RE = re.compile(
    r"^" + TIMESTAMP_PATTERN + r"\s*-->\s*" + TIMESTAMP_PATTERN + r"$"
)
# Start of a time range broken across lines: "start" or "start -->".
PARTIAL_TIMERANGE_RE = re.compile(r"^" + TIMESTAMP_PATTERN + r"(?:\s*-->)?$")
BOM = "\ufeff"


def normalize_newlines(raw: str) -> str:
    """Convert CRLF and lone CR line endings to LF and drop a leading BOM."""
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text


def is_blank(line: str) -> bool:
    return not line.strip()


def match_index(line: str) -> Optional[int]:
    """Return the sequence index if line is a bare decimal integer."""
    stripped = line.strip()
    if INDEX_RE.match(stripped):
        return int(stripped)
    return None


def match_timerange(line: str) -> Optional[tuple]:
    """Return (start, end) in seconds if line is an SRT time range."""
    match = TIMERANGE_RE.match(line.strip())
    if not match:
        return None
    groups = match.groups()
    return (
        timestamp_parts_to_seconds(*groups[:4]),
        timestamp_parts_to_seconds(*groups[4:]),
    )


def is_partial_timerange(line: str) -> bool:
    return PARTIAL_TIMERANGE_RE.match(line.strip()) is not None


def split_indexed_line(line: str) -> Optional[tuple]:
    """Return (index, rest) for an index sharing its line with a time range.

    "1 00:00:01,000 --> 00:00:02,000" gives (1, "00:00:01,000 --> ...").
    The rest must be a whole or partial time range, so body text such as
    "2019 was a good year" is not mistaken for a block start.
    """
    match = INDEXED_LINE_RE.match(line.strip())
    if not match:
        return None
    rest = match.group(2)
    if match_timerange(rest) is None and not is_partial_timerange(rest):
        return None
    return int(match.group(1)), rest


# =============================================================================
# Block Scanner
# =============================================================================

class ScanState(enum.Enum):
    SEEK_INDEX = "seek_index"
    SEEK_TIMERANGE = "seek_timerange"
    TEXT = "text"


class BlockScanner:
    """Incremental scanner that turns lines into CaptionRecords.

    Feed lines one at a time with feed(), then call finish() at end of
    input. Completed records accumulate in .records.
    """

    def __init__(self) -> None:
        self.records = []  # type: List[CaptionRecord]
        self.skipped = 0
        self._reset_block()

    def _reset_block(self) -> None:
        self.state = ScanState.SEEK_INDEX
        self._index = None  # type: Optional[int]
        self._start = 0.0
        self._end = 0.0
        self._body = []  # type: List[str]
        self._fragments = []  # type: List[str]

    def _abandon(self, line_no: int, reason: str) -> None:
        self.skipped += 1
        logger.debug("Skipping malformed block at line %d: %s", line_no, reason)
        self._reset_block()

    def _terminate(self, line_no: int) -> None:
        text = " ".join(self._body).strip()
        if not text:
            self._abandon(line_no, "time range without caption text")
            return
        self.records.append(CaptionRecord(
            sequence_index=self._index,
            start_time=self._start,
            end_time=self._end,
            text=text,
        ))
        self._reset_block()

    def feed(self, line: str, line_no: int = 0) -> None:
        """Advance the scanner by one input line."""
        if self.state is ScanState.SEEK_INDEX:
            if is_blank(line):
                return
            index = match_index(line)
            if index is not None:
                self._index = index
                self.state = ScanState.SEEK_TIMERANGE
                return
            indexed = split_indexed_line(line)
            if indexed is None:
                logger.debug("Ignoring stray line %d outside a block", line_no)
                return
            self._index, rest = indexed
            self.state = ScanState.SEEK_TIMERANGE
            self._seek_timerange(rest, line_no)

        elif self.state is ScanState.SEEK_TIMERANGE:
            if is_blank(line):
                return
            self._seek_timerange(line, line_no)

        else:
            if is_blank(line):
                self._terminate(line_no)
                return
            self._body.append(line)

    def _seek_timerange(self, line: str, line_no: int) -> None:
        """Match line as the time range, or as one piece of a broken one.

        A range split at the arrow ("start", "-->", "end" on separate lines)
        is collected fragment by fragment and matched once complete.
        """
        fragment = line.strip()
        candidate = " ".join(self._fragments + [fragment])
        if match_timerange(candidate) is None and not is_partial_timerange(candidate):
            if self._fragments and (
                match_timerange(fragment) is not None or is_partial_timerange(fragment)
            ):
                logger.debug("Dropping incomplete time range before line %d", line_no)
                self._fragments = []
                candidate = fragment

        times = match_timerange(candidate)
        if times is not None:
            self._start, self._end = times
            self._fragments = []
            self.state = ScanState.TEXT
            return
        if is_partial_timerange(candidate):
            self._fragments.append(fragment)
            return

        index = match_index(line)
        if index is not None:
            # The pending index had no time range; this line starts over.
            self._abandon(line_no, "index without time range")
            self._index = index
            self.state = ScanState.SEEK_TIMERANGE
            return
        indexed = split_indexed_line(line)
        if indexed is not None:
            self._abandon(line_no, "index without time range")
            self._index, rest = indexed
            self.state = ScanState.SEEK_TIMERANGE
            self._seek_timerange(rest, line_no)
            return
        self._abandon(line_no, "expected time range, got {!r}".format(fragment))

    def finish(self, line_no: int = 0) -> List[CaptionRecord]:
        """Flush the final block at end of input and return all records."""
        if self.state is ScanState.TEXT:
            self._terminate(line_no)
        elif self.state is ScanState.SEEK_TIMERANGE:
            self._abandon(line_no, "truncated block at end of input")
        return self.records


# =============================================================================
# Public Entry Point
# =============================================================================

def parse(raw_text: Optional[str]) -> CaptionTrack:
    """Parse SRT subtitle text into a CaptionTrack.

    WHY: The caption overlay needs structured, timed records to match
    against the playback clock. Best-effort display beats total failure,
    so malformed input degrades to fewer records rather than an error.

    HOW: Normalises line endings, feeds every line through a BlockScanner,
    then flushes the trailing block.

    Args:
        raw_text: Full contents of the subtitle file. None or "" yields an
            empty track.

    Returns:
        CaptionTrack with records in order of appearance.
    """
    if not raw_text or not isinstance(raw_text, str):
        return CaptionTrack()

    scanner = BlockScanner()
    lines = normalize_newlines(raw_text).split("\n")
    for line_no, line in enumerate(lines, 1):
        scanner.feed(line, line_no)
    records = scanner.finish(len(lines))

    if scanner.skipped:
        logger.debug(
            "Parsed %d caption(s), skipped %d malformed block(s)",
            len(records), scanner.skipped,
        )
    return CaptionTrack.from_records(records)
