"""Tests for timestamp utility functions."""

import math

import pytest

from opentsdb_reader_core.exceptions import OpenTSDBValueError
from opentsdb_reader_core.utils import (
    MILLISECONDS_PER_SECOND,
    ms_to_seconds,
    parse_number,
    seconds_to_ms,
)


class TestConstants:
    """Test millisecond constants."""

    def test_milliseconds_per_second(self) -> None:
        assert MILLISECONDS_PER_SECOND == 1000


class TestParseNumber:
    """Test parse_number function."""

    def test_parses_numeric_string(self) -> None:
        assert parse_number("12.5") == 12.5

    def test_parses_number(self) -> None:
        assert parse_number(3) == 3.0

    def test_accepts_nan(self) -> None:
        assert math.isnan(parse_number("NaN"))

    def test_rejects_underscore_digit_groups(self) -> None:
        with pytest.raises(OpenTSDBValueError, match="Invalid number"):
            parse_number("1_000")

    def test_rejects_bool(self) -> None:
        with pytest.raises(OpenTSDBValueError):
            parse_number(False)

    def test_error_message_names_kind(self) -> None:
        with pytest.raises(OpenTSDBValueError, match="Invalid sample value"):
            parse_number("n/a", "sample value")


class TestSecondsToMs:
    """Test seconds_to_ms function."""

    def test_converts_zero(self) -> None:
        assert seconds_to_ms(0) == 0

    def test_converts_one_second(self) -> None:
        assert seconds_to_ms(1) == MILLISECONDS_PER_SECOND

    def test_converts_unix_timestamp(self) -> None:
        unix_ts = 1704067200  # 2024-01-01 00:00:00 UTC
        assert seconds_to_ms(unix_ts) == unix_ts * MILLISECONDS_PER_SECOND

    def test_converts_numeric_string(self) -> None:
        assert seconds_to_ms("1704067200") == 1704067200000

    def test_converts_fractional_string(self) -> None:
        assert seconds_to_ms("1704067200.5") == 1704067200500

    def test_rounds_to_nearest_millisecond(self) -> None:
        assert seconds_to_ms(0.0006) == 1
        assert seconds_to_ms(0.0004) == 0

    def test_exact_half_millisecond_rounds_to_even(self) -> None:
        assert seconds_to_ms("0.0625") == 62
        assert seconds_to_ms("0.1875") == 188

    def test_rejects_underscore_digit_groups(self) -> None:
        with pytest.raises(OpenTSDBValueError, match="Invalid timestamp"):
            seconds_to_ms("1_704_067_200")

    def test_returns_integer(self) -> None:
        assert isinstance(seconds_to_ms("1000.25"), int)

    def test_rejects_non_numeric_string(self) -> None:
        with pytest.raises(OpenTSDBValueError, match="Invalid timestamp"):
            seconds_to_ms("yesterday")

    def test_rejects_none(self) -> None:
        with pytest.raises(OpenTSDBValueError):
            seconds_to_ms(None)

    def test_rejects_bool(self) -> None:
        with pytest.raises(OpenTSDBValueError):
            seconds_to_ms(True)

    def test_rejects_infinity(self) -> None:
        with pytest.raises(OpenTSDBValueError):
            seconds_to_ms("inf")

    def test_rejects_nan(self) -> None:
        with pytest.raises(OpenTSDBValueError):
            seconds_to_ms("nan")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            seconds_to_ms("abc")


class TestMsToSeconds:
    """Test ms_to_seconds function."""

    def test_converts_zero(self) -> None:
        assert ms_to_seconds(0) == 0

    def test_converts_one_second(self) -> None:
        assert ms_to_seconds(MILLISECONDS_PER_SECOND) == 1

    def test_truncates_partial_seconds(self) -> None:
        assert ms_to_seconds(1500) == 1

    def test_truncates_negative_toward_zero(self) -> None:
        assert ms_to_seconds(-1500) == -1

    def test_roundtrip(self) -> None:
        original = 1704067200
        assert ms_to_seconds(seconds_to_ms(original)) == original
