"""SRT exporter: write a parsed track back out as SubRip text.

WHY: Re-rendering what the scanner recovered is the quickest way to see
which blocks of a damaged file survived, and yields a normalised copy.

HOW: One block per record: declared index, "start --> end" line using
seconds_to_srt_time(), the caption text, and a blank separator line.

RULES:
- Declared sequence indices are kept, not renumbered
- Caption text is the collapsed single-line text from the parser
- Media type: "application/x-subrip"
"""

from __future__ import annotations

from caption_sync import CaptionTrack, seconds_to_srt_time
from subtitle_companion.exporters.base import BaseExporter


class SRTExporter(BaseExporter):

    media_type = "application/x-subrip"

    @property
    def name(self) -> str:
        return "SRT"

    def export(self, track: CaptionTrack) -> str:
        lines = []
        for record in track:
            lines.append(str(record.sequence_index))
            lines.append("{} --> {}".format(
                seconds_to_srt_time(record.start_time),
                seconds_to_srt_time(record.end_time),
            ))
            lines.append(record.text)
            lines.append("")
        return "\n".join(lines)
