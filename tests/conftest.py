"""Shared test fixtures for the subtitle companion test suite.

WHY: Parser, synchronizer, session, exporter and CLI tests all need the
same small, hand-checked subtitle file. Centralizing it here keeps every
test module working from identical input.

HOW: SAMPLE_SRT is a three-block file with known timings. Fixtures expose
the raw text, the parsed track, and a copy written to disk.

RULES:
- Block timings in SAMPLE_SRT are disjoint and in order (sequential track)
- OVERLAPPING_SRT has two blocks that both cover 7.0 seconds
- File fixtures use tmp_path for isolation
"""

from pathlib import Path

import pytest

from caption_sync import CaptionTrack, parse

SAMPLE_SRT = """1
00:00:01,000 --> 00:00:04,000
Hello
world

2
00:00:05,000 --> 00:00:10,000
Second caption

3
00:01:05,500 --> 00:01:08,250
Third caption
spans two lines
"""

OVERLAPPING_SRT = """1
00:00:05,000 --> 00:00:08,000
First overlapping

2
00:00:06,000 --> 00:00:09,000
Second overlapping
"""


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def sample_track() -> CaptionTrack:
    return parse(SAMPLE_SRT)


@pytest.fixture
def overlapping_srt() -> str:
    return OVERLAPPING_SRT


@pytest.fixture
def overlapping_track() -> CaptionTrack:
    return parse(OVERLAPPING_SRT)


@pytest.fixture
def sample_srt_file(tmp_path) -> Path:
    path = tmp_path / "movie.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path
