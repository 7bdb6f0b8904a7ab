#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Duration literals such as ``300ms``, ``-1.5h`` or ``2h45m``.

A literal is an optional sign followed by one or more decimal numbers, each
with an optional fraction and a mandatory unit suffix. Valid units are
``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The bare literal
``0`` is also accepted.

Durations are exchanged as :class:`datetime.timedelta`, so anything below a
microsecond is truncated toward zero.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Final

NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1000 * NANOSECOND
MILLISECOND: Final[int] = 1000 * MICROSECOND
SECOND: Final[int] = 1000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE

_UNITS: Final[dict[str, int]] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 = micro symbol
    "μs": MICROSECOND,  # U+03BC = Greek letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NANOSECONDS: Final[int] = (1 << 63) - 1
_MIN_NANOSECONDS: Final[int] = -(1 << 63)
_DIGITS: Final[str] = "0123456789"
_UNIT_STOPS: Final[str] = f"{_DIGITS}."


class DurationError(ValueError):
    """
    A duration literal that could not be parsed.
    """


def _split_digits(text: str, /) -> tuple[str, str]:
    end = 0

    while end < len(text) and text[end] in _DIGITS:
        end += 1

    return text[:end], text[end:]


def parse_nanoseconds(text: str, /) -> int:
    """
    Return the number of nanoseconds spelled by the duration literal *text*.

    Example:
        >>> parse_nanoseconds('1h15m')
        4500000000000
        >>> parse_nanoseconds('-1.5ms')
        -1500000
    """

    orig = text

    negative = False

    if text and text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0

    if not text:
        msg = f"invalid duration {orig!r}"
        raise DurationError(msg)

    total = 0

    while text:
        if text[0] not in _DIGITS and text[0] != ".":
            msg = f"invalid duration {orig!r}"
            raise DurationError(msg)

        whole, text = _split_digits(text)

        fraction = ""

        if text.startswith("."):
            fraction, text = _split_digits(text[1:])

        if not whole and not fraction:
            # no digits (e.g. ".s" or "-.s")
            msg = f"invalid duration {orig!r}"
            raise DurationError(msg)

        end = 0

        while end < len(text) and text[end] not in _UNIT_STOPS:
            end += 1

        unit_name, text = text[:end], text[end:]

        if not unit_name:
            msg = f"missing unit in duration {orig!r}"
            raise DurationError(msg)

        unit = _UNITS.get(unit_name)

        if unit is None:
            msg = f"unknown unit {unit_name!r} in duration {orig!r}"
            raise DurationError(msg)

        total += int(whole or "0") * unit

        if fraction:
            total += int(fraction) * unit // 10 ** len(fraction)

        if total > _MAX_NANOSECONDS + negative:
            msg = f"invalid duration {orig!r}"
            raise DurationError(msg)

    if negative:
        return -total

    return total


def parse_duration(text: str, /) -> timedelta:
    """
    Return the :class:`~datetime.timedelta` spelled by *text*.

    Raises :exc:`DurationError` on malformed input.
    """

    nanoseconds = parse_nanoseconds(text)

    if nanoseconds < 0:
        return -timedelta(microseconds=-nanoseconds // MICROSECOND)

    return timedelta(microseconds=nanoseconds // MICROSECOND)


def _format_fraction(value: int, precision: int, /) -> tuple[int, str]:
    whole, fraction = divmod(value, 10**precision)

    fraction_text = f"{fraction:0{precision}d}".rstrip("0")

    if fraction_text:
        return whole, f".{fraction_text}"

    return whole, ""


def format_nanoseconds(nanoseconds: int, /) -> str:
    """
    Return the canonical literal for *nanoseconds*.

    Values below one second use the largest unit that keeps a non-zero
    integer part (``1.5ms``, ``250µs``); longer values are split into hours,
    minutes and seconds with leading zero units omitted (``1h0m0s``,
    ``2m3.5s``). Zero is ``0s``.
    """

    if nanoseconds < 0:
        sign = "-"
        value = -nanoseconds
    else:
        sign = ""
        value = nanoseconds

    if value == 0:
        return "0s"

    if value < SECOND:
        if value < MICROSECOND:
            return f"{sign}{value}ns"

        if value < MILLISECOND:
            whole, fraction = _format_fraction(value, 3)
            return f"{sign}{whole}{fraction}µs"

        whole, fraction = _format_fraction(value, 6)
        return f"{sign}{whole}{fraction}ms"

    seconds, fraction = _format_fraction(value, 9)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)

    text = f"{seconds}{fraction}s"

    if minutes or hours:
        text = f"{minutes}m{text}"

    if hours:
        text = f"{hours}h{text}"

    return f"{sign}{text}"


def to_nanoseconds(value: timedelta, /) -> int:
    microseconds = (
        value.days * 86400 + value.seconds
    ) * 1_000_000 + value.microseconds

    return microseconds * MICROSECOND


def duration_fits(value: timedelta, /) -> bool:
    """
    Return :data:`True` if *value* can be written as a duration literal that
    parses back, that is, if it fits into a signed 64-bit nanosecond count.
    """

    return _MIN_NANOSECONDS <= to_nanoseconds(value) <= _MAX_NANOSECONDS


def format_duration(value: timedelta, /) -> str:
    """
    Return the canonical literal for *value*.

    Example:
        >>> format_duration(timedelta(hours=1))
        '1h0m0s'
        >>> format_duration(timedelta(milliseconds=1500))
        '1.5s'
        >>> format_duration(timedelta())
        '0s'
    """

    return format_nanoseconds(to_nanoseconds(value))
