#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

from datetime import timedelta

import pytest

from flagset._durations import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    DurationError,
    duration_fits,
    format_duration,
    format_nanoseconds,
    parse_duration,
    parse_nanoseconds,
    to_nanoseconds,
)


class TestParse:
    @pytest.mark.parametrize(
        "text, nanoseconds",
        [
            ("0", 0),
            ("-0", 0),
            ("5s", 5 * SECOND),
            ("30s", 30 * SECOND),
            ("1478s", 1478 * SECOND),
            ("-5s", -5 * SECOND),
            ("+5s", 5 * SECOND),
            ("-0s", 0),
            ("5.0s", 5 * SECOND),
            ("5.6s", 5 * SECOND + 600 * MILLISECOND),
            ("5.s", 5 * SECOND),
            (".5s", 500 * MILLISECOND),
            ("1.004s", 1 * SECOND + 4 * MILLISECOND),
            ("10ns", 10),
            ("11us", 11 * MICROSECOND),
            ("12µs", 12 * MICROSECOND),
            ("12μs", 12 * MICROSECOND),
            ("13ms", 13 * MILLISECOND),
            ("14s", 14 * SECOND),
            ("15m", 15 * MINUTE),
            ("16h", 16 * HOUR),
            ("3h30m", 3 * HOUR + 30 * MINUTE),
            ("10.5s4m", 4 * MINUTE + 10 * SECOND + 500 * MILLISECOND),
            ("-2m3.4s", -(2 * MINUTE + 3 * SECOND + 400 * MILLISECOND)),
            ("1h2m3s4ms5us6ns", HOUR + 2 * MINUTE + 3 * SECOND + 4_005_006),
            ("39h9m14.425s", 39 * HOUR + 9 * MINUTE + 14_425 * MILLISECOND),
            ("9223372036854775807ns", (1 << 63) - 1),
            ("-9223372036854775808ns", -(1 << 63)),
        ],
    )
    def test_valid(self, /, text, nanoseconds):
        assert parse_nanoseconds(text) == nanoseconds

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "3",
            "-",
            "s",
            ".",
            "-.",
            ".s",
            "+.s",
            "1d",
            "1.2.3s",
            "3000000h",
            "9223372036854775808ns",
            "-9223372036854775809ns",
            " 1s",
        ],
    )
    def test_invalid(self, /, text):
        with pytest.raises(DurationError):
            parse_nanoseconds(text)

    def test_timedelta(self, /):
        assert parse_duration("1.5s") == timedelta(seconds=1.5)
        assert parse_duration("2h45m") == timedelta(hours=2, minutes=45)
        assert parse_duration("-250ms") == -timedelta(milliseconds=250)

    def test_sub_microsecond_truncation(self, /):
        assert parse_duration("1500ns") == timedelta(microseconds=1)
        assert parse_duration("-1500ns") == -timedelta(microseconds=1)
        assert parse_duration("999ns") == timedelta(0)


class TestFormat:
    @pytest.mark.parametrize(
        "nanoseconds, text",
        [
            (0, "0s"),
            (1, "1ns"),
            (1100, "1.1µs"),
            (2_200_000, "2.2ms"),
            (3_300_000_000, "3.3s"),
            (4 * MINUTE + 5 * SECOND, "4m5s"),
            (4 * MINUTE + 5_001 * MILLISECOND, "4m5.001s"),
            (5 * HOUR + 6 * MINUTE + 7_001 * MILLISECOND, "5h6m7.001s"),
            (8 * MINUTE + 1, "8m0.000000001s"),
            (HOUR, "1h0m0s"),
            (-1500 * MILLISECOND, "-1.5s"),
            (-1, "-1ns"),
            ((1 << 63) - 1, "2562047h47m16.854775807s"),
        ],
    )
    def test_nanoseconds(self, /, nanoseconds, text):
        assert format_nanoseconds(nanoseconds) == text

    def test_timedelta(self, /):
        assert format_duration(timedelta()) == "0s"
        assert format_duration(timedelta(hours=1, minutes=30)) == "1h30m0s"
        assert format_duration(timedelta(milliseconds=-1500)) == "-1.5s"
        assert format_duration(timedelta(microseconds=250)) == "250µs"
        assert format_duration(timedelta(days=1)) == "24h0m0s"

    @pytest.mark.parametrize(
        "value",
        [
            timedelta(0),
            timedelta(microseconds=1),
            timedelta(seconds=59, microseconds=999999),
            timedelta(hours=2, microseconds=5),
            -timedelta(minutes=3, milliseconds=7),
            timedelta(days=400),
        ],
    )
    def test_reparse(self, /, value):
        assert parse_duration(format_duration(value)) == value


class TestFits:
    def test_bounds(self, /):
        limit = timedelta(microseconds=(1 << 63) // 1000)

        assert duration_fits(timedelta())
        assert duration_fits(limit)
        assert duration_fits(-limit)
        assert not duration_fits(limit + timedelta(microseconds=1))
        assert not duration_fits(-limit - timedelta(microseconds=1))
        assert not duration_fits(timedelta(days=200000))

    def test_nanoseconds(self, /):
        assert to_nanoseconds(timedelta(seconds=1, microseconds=5)) == (
            SECOND + 5 * MICROSECOND
        )
        assert to_nanoseconds(-timedelta(microseconds=1)) == -MICROSECOND
