"""Command-line interface for the subtitle companion.

WHY: Users need a quick way to check what a subtitle file contains, which
caption shows at a given moment, and how captions change over playback,
without opening a browser. The CLI wires the loader, the player session
and the exporters behind three subcommands.

HOW: argparse with subcommands:
  inspect SUBTITLE [--format table|json|srt]  print the parsed track
  at SUBTITLE TIME                            print the caption at TIME
  play SUBTITLE [--video PATH] [--start S] [--speed X] [--until S]
                                              simulated real-time playback
Status and errors go to stderr; results go to stdout so output can be
piped.

RULES:
- TIME accepts plain seconds ("65.5") or an SRT timestamp ("00:01:05,500")
- `at` prints nothing (exit 0) when no caption is active
- Exit codes: 0 = success, 1 = user error, 130 = interrupted
- -v/--verbose enables DEBUG logging; otherwise LOG_LEVEL from config
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional

from caption_sync import format_time, parse, parse_timestamp
from subtitle_companion import __version__
from subtitle_companion.config import LOG_LEVEL, SUBTITLE_POLL_INTERVAL
from subtitle_companion.exporters import EXPORTERS
from subtitle_companion.loader import load_subtitle_file, validate_video_file
from subtitle_companion.playback import SimulatedClock, run_playback
from subtitle_companion.session import PlayerSession, PlayerState

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def parse_time_argument(value: str) -> float:
    """Read a TIME argument as seconds or as an SRT timestamp.

    Raises:
        argparse.ArgumentTypeError: If the value is neither.
    """
    try:
        seconds = float(value)
    except ValueError:
        try:
            return parse_timestamp(value)
        except ValueError:
            raise argparse.ArgumentTypeError(
                "invalid time '{}': use seconds or HH:MM:SS,mmm".format(value)
            )
    if not math.isfinite(seconds) or seconds < 0:
        raise argparse.ArgumentTypeError("time must be a finite, non-negative number")
    return seconds


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("expected a number, got '{}'".format(value))
    if not number > 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return number


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_inspect(args: argparse.Namespace) -> int:
    subtitle = load_subtitle_file(args.subtitle)
    track = parse(subtitle.text)
    _status("{}: {} caption(s)".format(subtitle.name, len(track)))

    exporter = EXPORTERS[args.format]()
    sys.stdout.write(exporter.export(track))
    if args.format == "json":
        sys.stdout.write("\n")
    return 0


def _cmd_at(args: argparse.Namespace) -> int:
    subtitle = load_subtitle_file(args.subtitle)
    session = PlayerSession()
    session.load_subtitles(subtitle.name, subtitle.text)
    state = session.time_update(args.time)
    if state.current_caption:
        print(state.current_caption)
    return 0


def _cmd_play(args: argparse.Namespace) -> int:
    subtitle = load_subtitle_file(args.subtitle)

    session = PlayerSession()

    def on_change(old: PlayerState, new: PlayerState) -> None:
        if new.current_caption != old.current_caption and new.current_caption:
            print("[{}] {}".format(format_time(new.current_time), new.current_caption), flush=True)

    session.subscribe(on_change)
    session.load_subtitles(subtitle.name, subtitle.text)
    if args.video:
        video_path = validate_video_file(args.video)
        session.load_video(video_path.name, str(video_path))
    else:
        session.load_video(subtitle.name)

    duration = args.until if args.until is not None else session.state.track.duration
    clock = SimulatedClock(duration=duration, speed=args.speed)
    clock.seek(args.start)
    session.video = clock
    session.video_loaded(clock.duration)
    _status("Playing {} ({} captions, {} at {}x)".format(
        session.state.video_name,
        len(session.state.track),
        format_time(clock.duration),
        args.speed,
    ))
    run_playback(session, args.interval)
    return 0


# ---------------------------------------------------------------------------
# Parser and entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running a command.
    """
    parser = argparse.ArgumentParser(
        prog="subtitle_companion",
        description="Parse SRT subtitle files and follow captions along a playback clock.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Print the parsed caption track.")
    inspect_parser.add_argument("subtitle", help="Path to the .srt file.")
    inspect_parser.add_argument(
        "--format",
        choices=sorted(EXPORTERS.keys()),
        default="table",
        help="Output format (default: %(default)s).",
    )
    inspect_parser.set_defaults(handler=_cmd_inspect)

    at_parser = subparsers.add_parser("at", help="Print the caption active at a given time.")
    at_parser.add_argument("subtitle", help="Path to the .srt file.")
    at_parser.add_argument(
        "time",
        type=parse_time_argument,
        help="Playback time in seconds or as HH:MM:SS,mmm.",
    )
    at_parser.set_defaults(handler=_cmd_at)

    play_parser = subparsers.add_parser("play", help="Simulate playback and print captions as they change.")
    play_parser.add_argument("subtitle", help="Path to the .srt file.")
    play_parser.add_argument("--video", default=None, help="Optional video file to name the session after.")
    play_parser.add_argument(
        "--start",
        type=parse_time_argument,
        default=0.0,
        help="Start position (default: %(default)s).",
    )
    play_parser.add_argument(
        "--until",
        type=parse_time_argument,
        default=None,
        help="Stop position (default: end of the last caption).",
    )
    play_parser.add_argument(
        "--speed",
        type=_positive_float,
        default=1.0,
        help="Playback speed multiplier (default: %(default)s).",
    )
    play_parser.add_argument(
        "--interval",
        type=_positive_float,
        default=SUBTITLE_POLL_INTERVAL,
        help="Seconds between clock polls (default: %(default)s).",
    )
    play_parser.set_defaults(handler=_cmd_play)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        code = args.handler(args)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except (OSError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
