"""Track exporter registry.

WHY: The CLI needs a single lookup to find an exporter by the name given
on the command line. Adding a format means one new module and one line.

HOW: EXPORTERS maps string keys to exporter *classes* (not instances).
Callers instantiate as needed: ``exporter = EXPORTERS["json"]()``.

RULES:
- Keys are lowercase identifiers used as --format values
- Values are BaseExporter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subtitle_companion.exporters.json_track import JSONTrackExporter
from subtitle_companion.exporters.srt import SRTExporter
from subtitle_companion.exporters.table import TableExporter

if TYPE_CHECKING:
    from subtitle_companion.exporters.base import BaseExporter

EXPORTERS: dict[str, type[BaseExporter]] = {
    "table": TableExporter,
    "json": JSONTrackExporter,
    "srt": SRTExporter,
}
