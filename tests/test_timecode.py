"""Unit tests for timestamp parsing and display formatting.

WHY: Off-by-one-millisecond or off-by-one-second errors in time conversion
show captions at the wrong moment or print misleading clock strings.

HOW: Exercises parse_timestamp(), seconds_to_srt_time() and format_time()
against hand-computed values and the non-finite edge cases.
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from caption_sync import format_time, parse_timestamp, seconds_to_srt_time
from caption_sync.timecode import as_seconds


class TestParseTimestamp:
    """parse_timestamp() reads fixed-width HH:MM:SS,mmm only."""

    def test_exact_conversion(self):
        assert parse_timestamp("01:02:03,456") == 3723.456

    def test_zero(self):
        assert parse_timestamp("00:00:00,000") == 0.0

    def test_surrounding_whitespace_ignored(self):
        assert parse_timestamp("  00:00:05,250 ") == 5.25

    @pytest.mark.parametrize("bad", [
        "00:00:05.250", "0:00:05,250", "00:05,250", "", "abc", "٠٠:٠٠:٠٥,٢٥٠",
    ])
    def test_invalid_raises_value_error(self, bad):
        with pytest.raises(ValueError, match="Invalid SRT timestamp"):
            parse_timestamp(bad)


class TestSecondsToSrtTime:
    """seconds_to_srt_time() writes HH:MM:SS,mmm rounded to the millisecond."""

    def test_basic(self):
        assert seconds_to_srt_time(3723.456) == "01:02:03,456"

    def test_rounds_float_noise(self):
        assert seconds_to_srt_time(0.1 + 0.2) == "00:00:00,300"

    def test_negative_clamped(self):
        assert seconds_to_srt_time(-1.0) == "00:00:00,000"

    @pytest.mark.parametrize("value", [float("nan"), math.inf, -math.inf, None])
    def test_non_finite_renders_zero(self, value):
        assert seconds_to_srt_time(value) == "00:00:00,000"

    def test_decimal_input(self):
        assert seconds_to_srt_time(Decimal("3723.456")) == "01:02:03,456"


class TestFormatTime:
    """format_time() renders M:SS or H:MM:SS and never raises."""

    def test_minutes_and_seconds(self):
        assert format_time(65) == "1:05"

    def test_hours(self):
        assert format_time(3665) == "1:01:05"

    def test_under_a_minute(self):
        assert format_time(7.9) == "0:07"

    def test_exactly_one_hour(self):
        assert format_time(3600) == "1:00:00"

    def test_large_minutes_without_hours(self):
        assert format_time(3599.999) == "59:59"

    @pytest.mark.parametrize("value", [float("nan"), math.inf, -math.inf, None, "65", True])
    def test_unusable_values_render_placeholder(self, value):
        assert format_time(value) == "00:00"

    def test_negative_clamped_to_zero(self):
        assert format_time(-5) == "0:00"

    @pytest.mark.parametrize("value", [Decimal(65), Fraction(131, 2), Decimal("65.9")])
    def test_other_real_number_types(self, value):
        assert format_time(value) == "1:05"

    def test_decimal_nan_renders_placeholder(self):
        assert format_time(Decimal("NaN")) == "00:00"
        assert format_time(Decimal("sNaN")) == "00:00"


class TestAsSeconds:
    """as_seconds() accepts any real number and rejects everything else."""

    @pytest.mark.parametrize("value, expected", [
        (6, 6.0),
        (6.5, 6.5),
        (Fraction(13, 2), 6.5),
        (Decimal("6.5"), 6.5),
        (math.inf, math.inf),
    ])
    def test_real_numbers(self, value, expected):
        assert as_seconds(value) == expected

    @pytest.mark.parametrize("value", [None, True, False, "6", float("nan"), 10 ** 400, 1j])
    def test_unusable(self, value):
        assert as_seconds(value) is None
