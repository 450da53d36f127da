"""Tests for the command-line interface.

WHY: The CLI is how users check subtitle files outside a browser. Wrong
exit codes or output on the wrong stream break scripting.

HOW: main() is called with explicit argv; capsys captures stdout/stderr
and SystemExit carries the exit code. Files live in tmp_path.
"""

import argparse
import json

import pytest

from subtitle_companion.cli import build_parser, main, parse_time_argument


class TestParseTimeArgument:

    def test_seconds(self):
        assert parse_time_argument("65.5") == 65.5

    def test_srt_timestamp(self):
        assert parse_time_argument("00:01:05,500") == 65.5

    @pytest.mark.parametrize("bad", ["abc", "-1", "nan", "inf", "1:05"])
    def test_rejects_bad_values(self, bad):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_time_argument(bad)


class TestBuildParser:

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_inspect_defaults(self):
        args = build_parser().parse_args(["inspect", "movie.srt"])
        assert args.command == "inspect"
        assert args.format == "table"

    def test_play_defaults(self):
        args = build_parser().parse_args(["play", "movie.srt"])
        assert args.start == 0.0
        assert args.until is None
        assert args.speed == 1.0


class TestInspectCommand:

    def test_table_output(self, sample_srt_file, capsys):
        main(["inspect", str(sample_srt_file)])
        captured = capsys.readouterr()
        assert "Hello world" in captured.out
        assert "3 caption(s)" in captured.err

    def test_json_output(self, sample_srt_file, capsys):
        main(["inspect", str(sample_srt_file), "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data["count"] == 3

    def test_srt_output(self, sample_srt_file, capsys):
        main(["inspect", str(sample_srt_file), "--format", "srt"])
        assert "00:01:05,500 --> 00:01:08,250" in capsys.readouterr().out

    def test_missing_file_exits_1(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["inspect", str(tmp_path / "missing.srt")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unsupported_file_exits_1(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["inspect", str(path)])
        assert exc_info.value.code == 1
        assert "valid SRT file" in capsys.readouterr().err


class TestAtCommand:

    def test_active_caption(self, sample_srt_file, capsys):
        main(["at", str(sample_srt_file), "6"])
        assert capsys.readouterr().out == "Second caption\n"

    def test_timestamp_argument(self, sample_srt_file, capsys):
        main(["at", str(sample_srt_file), "00:01:06,000"])
        assert capsys.readouterr().out == "Third caption spans two lines\n"

    def test_no_caption_prints_nothing(self, sample_srt_file, capsys):
        main(["at", str(sample_srt_file), "4.5"])
        assert capsys.readouterr().out == ""

    def test_bad_time_exits_2(self, sample_srt_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["at", str(sample_srt_file), "soon"])
        assert exc_info.value.code == 2


class TestPlayCommand:

    def test_prints_captions_from_start_position(self, sample_srt_file, capsys):
        main([
            "play", str(sample_srt_file),
            "--start", "2", "--until", "2.5",
            "--speed", "100", "--interval", "0.001",
        ])
        captured = capsys.readouterr()
        assert "Hello world" in captured.out
        assert "Playing movie.srt" in captured.err

    def test_rejects_unsupported_video(self, sample_srt_file, tmp_path):
        video = tmp_path / "clip.txt"
        video.write_text("x", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["play", str(sample_srt_file), "--video", str(video)])
        assert exc_info.value.code == 1
