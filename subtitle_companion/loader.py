"""Subtitle and video file loading with upload-level validation.

WHY: The caption core parses whatever text it is given. Deciding which
files the player accepts in the first place is the host's job, exactly as
the browser upload handler used to reject anything that was not SubRip.

HOW: load_subtitle_file() checks existence and file type, then reads the
text with the configured encoding. validate_video_file() only checks the
path, since the host's media element does the actual decoding.

RULES:
- Unknown file types raise UnsupportedSubtitleError / UnsupportedVideoError
  (both ValueError subclasses) before any read happens
- Missing files raise FileNotFoundError
- Undecodable bytes are replaced, never fatal
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from subtitle_companion.config import (
    SUBTITLE_ENCODING,
    SUBTITLE_EXTENSIONS,
    is_subtitle_file,
    is_video_file,
)

logger = logging.getLogger(__name__)


class UnsupportedSubtitleError(ValueError):
    """Raised when a file is not an accepted subtitle type."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            "Please upload a valid SRT file: {} (accepted: {})".format(
                path.name, ", ".join(sorted(SUBTITLE_EXTENSIONS))
            )
        )


class UnsupportedVideoError(ValueError):
    """Raised when a file is not an accepted video type."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("Unsupported video file: {}".format(path.name))


@dataclass
class SubtitleFile:
    """A subtitle file read from disk.

    Attributes:
        name: File name shown in the player (no directory).
        path: Resolved path on disk.
        text: Decoded file contents, ready for caption_sync.parse().
    """

    name: str
    path: Path
    text: str


def load_subtitle_file(path: str | Path, encoding: str = SUBTITLE_ENCODING) -> SubtitleFile:
    """Validate and read a subtitle file.

    Args:
        path: Path to the subtitle file.
        encoding: Text encoding; the default strips a UTF-8 BOM.

    Returns:
        SubtitleFile with the decoded text.

    Raises:
        FileNotFoundError: If the path is not an existing file.
        UnsupportedSubtitleError: If the file type is not accepted.
    """
    p = Path(path).resolve()
    if not p.is_file():
        raise FileNotFoundError("Subtitle file not found: {}".format(p))
    if not is_subtitle_file(p.name):
        raise UnsupportedSubtitleError(p)

    text = p.read_text(encoding=encoding, errors="replace")
    logger.info("Read subtitle file %s (%d chars)", p.name, len(text))
    return SubtitleFile(name=p.name, path=p, text=text)


def validate_video_file(path: str | Path) -> Path:
    """Check that path points at an existing file of a video type.

    Raises:
        FileNotFoundError: If the path is not an existing file.
        UnsupportedVideoError: If the file type is not a video type.
    """
    p = Path(path).resolve()
    if not p.is_file():
        raise FileNotFoundError("Video file not found: {}".format(p))
    if not is_video_file(p.name):
        raise UnsupportedVideoError(p)
    return p
