"""Subtitle Companion: follow SRT captions along a video's playback clock.

WHY: Watching a local video with a separate subtitle file means parsing
the file and keeping the right caption on screen as playback moves,
seeks and restarts. The caption_sync library does the parsing and time
matching; this package is the host around it.

HOW: Four layers, each independently testable:
  loader    : accepts or rejects subtitle/video files, reads the text
  session   : owns the player state and applies UI events
  exporters : render a parsed track as JSON, SRT or a table
  cli       : terminal front end, including simulated playback

RULES:
- All caption logic lives in caption_sync; nothing here re-parses text
- One CaptionTrack is active per session, replaced wholesale on upload
"""

__version__ = "0.1.0"
