"""Configuration constants, accepted file types, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Accepted file extensions, media types and the
playback polling cadence are plain data, not buried in the loader or the
CLI, so both can be adjusted without touching logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level sets, strings and floats, each overridable through an
environment variable.

RULES:
- Subtitles are accepted by extension OR by media type (either suffices)
- Extensions are lowercase with a leading dot
- SUBTITLE_POLL_INTERVAL mirrors the browser's timeupdate cadence (~4 Hz)
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import mimetypes
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_set(name: str, default: str) -> set[str]:
    raw = os.getenv(name, default)
    return {item.strip().lower() for item in raw.split(",") if item.strip()}


# ---------------------------------------------------------------------------
# Accepted file types
# ---------------------------------------------------------------------------

SUBTITLE_EXTENSIONS: set[str] = _env_set("SUBTITLE_EXTENSIONS", ".srt")
"""Subtitle file extensions accepted by the loader (lowercase, with dot)."""

SUBTITLE_MEDIA_TYPES: set[str] = _env_set("SUBTITLE_MEDIA_TYPES", "application/x-subrip")
"""Media types accepted for subtitle files regardless of extension."""

VIDEO_EXTENSIONS: set[str] = _env_set(
    "VIDEO_EXTENSIONS",
    ".mp4,.m4v,.mov,.mkv,.webm,.ogv,.avi",
)
"""Video file extensions accepted by the loader (lowercase, with dot)."""

# Not every platform's mimetypes table knows SubRip.
mimetypes.add_type("application/x-subrip", ".srt")

# ---------------------------------------------------------------------------
# Reading and playback defaults
# ---------------------------------------------------------------------------

SUBTITLE_ENCODING = os.getenv("SUBTITLE_ENCODING", "utf-8-sig")
SUBTITLE_POLL_INTERVAL = float(os.getenv("SUBTITLE_POLL_INTERVAL", "0.25"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def guess_media_type(filename: str) -> str | None:
    """Guess a media type from a file name, or None if unknown."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type


def is_subtitle_file(filename: str, media_type: str | None = None) -> bool:
    """True if the file is acceptable as a subtitle upload.

    WHY: The original player accepted a file when either its reported
    media type was SubRip or its name ended in .srt. Browsers often report
    an empty type for .srt files, so the extension check matters.

    RULES:
    - media_type defaults to a guess from the filename
    - Either a known extension or a known media type is enough
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext in SUBTITLE_EXTENSIONS:
        return True
    if media_type is None:
        media_type = guess_media_type(filename)
    return media_type is not None and media_type.lower() in SUBTITLE_MEDIA_TYPES


def is_video_file(filename: str, media_type: str | None = None) -> bool:
    """True if the file has a known video extension or a video/* media type."""
    ext = os.path.splitext(filename)[1].lower()
    if ext in VIDEO_EXTENSIONS:
        return True
    if media_type is None:
        media_type = guess_media_type(filename)
    return media_type is not None and media_type.lower().startswith("video/")
