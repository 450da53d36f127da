"""Abstract base exporter.

WHY: The CLI prints a parsed track in several shapes (JSON for a browser
front end, SRT, a readable table). A shared interface lets the CLI pick
an exporter by name without knowing its details.

HOW: BaseExporter is an ABC with a ``name`` property, a ``media_type``
class attribute and an ``export()`` method returning the full text.

RULES:
- Subclasses MUST implement ``name`` and ``export()``
- ``export()`` never mutates the track
- Register new exporters in EXPORTERS in exporters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from caption_sync import CaptionTrack


class BaseExporter(ABC):
    """Abstract base for all track exporters."""

    media_type = "text/plain"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SRT'."""

    @abstractmethod
    def export(self, track: CaptionTrack) -> str:
        """Render the whole track as a string."""
