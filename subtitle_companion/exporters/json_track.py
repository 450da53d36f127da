"""JSON exporter: the parsed track as a browser front end consumes it.

WHY: The original player kept the parsed subtitles as a list of
{startTime, endTime, text} objects in the page. Exporting the same data
as JSON lets a web view (or any other consumer) load a track parsed here
without re-implementing the scanner.

HOW: Builds a plain dict per record and serialises with json.dumps. The
bundled caption_track.schema.json documents and validates the shape.

RULES:
- Top level: {"count": N, "captions": [...]}, count == len(captions)
- Each caption: index (declared), start, end (float seconds), text
- Captions appear in stored order
- Unicode is written as-is (ensure_ascii=False)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from caption_sync import CaptionTrack
from subtitle_companion.exporters.base import BaseExporter

SCHEMA_PATH = Path(__file__).resolve().parent / "caption_track.schema.json"


def track_to_dict(track: CaptionTrack) -> Dict[str, Any]:
    """Convert a CaptionTrack to a JSON-ready dict."""
    captions = [
        {
            "index": record.sequence_index,
            "start": record.start_time,
            "end": record.end_time,
            "text": record.text,
        }
        for record in track
    ]
    return {"count": len(captions), "captions": captions}


class JSONTrackExporter(BaseExporter):

    media_type = "application/json"

    @property
    def name(self) -> str:
        return "JSON"

    def export(self, track: CaptionTrack) -> str:
        return json.dumps(track_to_dict(track), indent=2, ensure_ascii=False)
