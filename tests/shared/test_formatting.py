"""Tests for the shared formatting helpers."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bcncli.shared.errors import ErrorCode, ParseError, ValidationError
from bcncli.shared.formatting import (
    NO_TIMESTAMP,
    epoch_ms_to_iso,
    format_duration,
    format_price,
    humanize_elapsed,
    humanize_remaining,
    parse_id,
    parse_timestamp,
    sanitize_emoji,
)

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1230000, "1.23M"),
            (1000000, "1M"),
            (200000000, "200M"),
            (123000000000, "123B"),
            (999, "999"),
            (1500, "1.5K"),
            (2_500_000_000_000, "2.5T"),
            (0, "0"),
            (-1500, "-1.5K"),
        ],
    )
    def test_units(self, value: int, expected: str) -> None:
        assert format_price(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (123000, "123 000"),
            (-1500, "-1 500"),
            (999, "999"),
            (1234567, "1 234 567"),
            (0, "0"),
        ],
    )
    def test_plain(self, value: int, expected: str) -> None:
        assert format_price(value, plain=True) == expected

    @given(st.integers(min_value=0, max_value=10**18))
    def test_plain_groups_digits_in_threes(self, value: int) -> None:
        formatted = format_price(value, plain=True)

        assert re.fullmatch(r"\d{1,3}( \d{3})*", formatted)
        assert formatted.replace(" ", "") == str(value)


class TestDurations:
    def test_format_duration_components(self) -> None:
        assert format_duration(65) == "1m 5s"
        assert format_duration(3665) == "1h 1m 5s"
        assert format_duration(604800) == "1w"
        assert format_duration(694861) == "1w 1d 1h 1m 1s"
        assert format_duration(0) == "0s"

    def test_humanize_remaining(self) -> None:
        assert humanize_remaining(NOW, NOW) == "0"
        assert humanize_remaining(NOW + timedelta(seconds=65), NOW) == "1m 5s"
        assert humanize_remaining(NOW - timedelta(hours=1), NOW) == "0"

    def test_humanize_elapsed(self) -> None:
        assert humanize_elapsed(NOW - timedelta(seconds=3665), NOW) == "1h 1m 5s"
        assert humanize_elapsed(NOW + timedelta(minutes=5), NOW) == "0"

    def test_accepts_rfc3339_strings(self) -> None:
        assert humanize_elapsed("2024-05-01T11:00:00Z", NOW) == "1h"
        assert humanize_remaining("2024-05-01T14:00:00+02:00", NOW) == "0"

    def test_invalid_timestamp_raises_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            humanize_remaining("yesterday", NOW)
        assert exc_info.value.code == ErrorCode.INVALID_TIMESTAMP

    def test_timestamp_without_offset_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            parse_timestamp("2024-05-01T12:00:00")

    def test_naive_datetime_is_utc(self) -> None:
        assert parse_timestamp(datetime(2024, 5, 1, 12, 0, 0)) == NOW


class TestEpochConversion:
    def test_converts_milliseconds(self) -> None:
        assert epoch_ms_to_iso(1_700_000_000_000) == "2023-11-14T22:13:20Z"

    def test_sub_second_part_is_truncated(self) -> None:
        assert epoch_ms_to_iso(1_700_000_000_999) == "2023-11-14T22:13:20Z"

    @pytest.mark.parametrize("value", [0, -5])
    def test_unset_values(self, value: int) -> None:
        assert epoch_ms_to_iso(value) == NO_TIMESTAMP

    def test_out_of_range_value_is_unset(self) -> None:
        assert epoch_ms_to_iso(10**17) == NO_TIMESTAMP


class TestParseId:
    def test_valid(self) -> None:
        assert parse_id("42") == 42
        assert parse_id("-7") == -7

    @pytest.mark.parametrize("value", ["abc", "1.5", ""])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_id(value)

        assert exc_info.value.code == ErrorCode.INVALID_ID
        assert exc_info.value.message == f"Invalid ID: {value}"


def test_sanitize_emoji() -> None:
    assert sanitize_emoji("<:seaweed:123456>") == ":seaweed:"
    assert sanitize_emoji("🐟") == "🐟"
    assert sanitize_emoji("") == ""
