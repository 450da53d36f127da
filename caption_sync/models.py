"""Data models for parsed subtitle tracks.

WHY: The parser and the clock synchronizer need a shared, structured
representation of a subtitle file. CaptionRecord is the atomic unit and
CaptionTrack is the ordered collection the synchronizer scans.

HOW: Two dataclasses. CaptionTrack wraps an immutable tuple of records so
a loaded track can only ever be replaced as a whole, never edited.

RULES:
- Times are in seconds (float), not milliseconds.
- sequence_index is the index declared in the file. It is stored for
  export and display only and never used for ordering.
- Track order is the order of appearance in the source text, never
  re-sorted by time.
- start_time <= end_time is expected but not enforced. An inverted record
  simply never matches a playback time.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True)
class CaptionRecord:
    """One caption block from a subtitle file.

    Attributes:
        sequence_index: Index line as declared in the source file.
        start_time: Start of the display window in seconds (inclusive).
        end_time: End of the display window in seconds (inclusive).
        text: Caption text, body lines joined with single spaces and trimmed.
    """
    sequence_index: int
    start_time: float
    end_time: float
    text: str

    def covers(self, current_time: float) -> bool:
        """True if current_time falls inside [start_time, end_time]."""
        return self.start_time <= current_time <= self.end_time


@dataclass(frozen=True)
class CaptionTrack:
    """The ordered caption records of one loaded subtitle file."""
    records: Tuple[CaptionRecord, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[CaptionRecord]) -> "CaptionTrack":
        return cls(records=tuple(records))

    def __iter__(self) -> Iterator[CaptionRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, position: int) -> CaptionRecord:
        return self.records[position]

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def duration(self) -> float:
        """Latest end time in the track, or 0.0 for an empty track."""
        if not self.records:
            return 0.0
        return max(r.end_time for r in self.records)
