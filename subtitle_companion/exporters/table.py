"""Plain-text table exporter for reading a track in the terminal."""

from __future__ import annotations

from caption_sync import CaptionTrack, format_time
from subtitle_companion.exporters.base import BaseExporter


class TableExporter(BaseExporter):
    """One line per caption: position, display time range, text.

    Example line: ``  3  [1:05 - 1:08]  Hello world``
    """

    @property
    def name(self) -> str:
        return "Table"

    def export(self, track: CaptionTrack) -> str:
        if not track:
            return ""
        width = len(str(len(track)))
        rows = []
        for position, record in enumerate(track, 1):
            rows.append("{:>{w}}  [{} - {}]  {}".format(
                position,
                format_time(record.start_time),
                format_time(record.end_time),
                record.text,
                w=width,
            ))
        return "\n".join(rows) + "\n"
