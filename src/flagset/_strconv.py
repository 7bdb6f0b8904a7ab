#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Pure conversions between text and the primitive flag types.

The grammar follows the conventions of C-like command-line tools rather than
Python literals: booleans have a fixed set of spellings, integers accept base
prefixes (``0x``, ``0o``, ``0b`` and a bare leading ``0`` for octal) and are
range-checked against a bit size, and floats are rendered in the shortest
``%g`` form.
"""

from __future__ import annotations

import math
import os
import re
import sys
import warnings

from decimal import Decimal
from typing import Final

WORD_SIZE: Final[int] = sys.maxsize.bit_length() + 1


def _read_int_size() -> int:
    text = os.getenv("FLAGSET_INT_SIZE", "")

    if not text:
        return WORD_SIZE

    try:
        size = int(text)
    except ValueError:
        size = 0

    if size < 1:
        warnings.warn(
            f"Ignoring FLAGSET_INT_SIZE={text!r}: not a positive integer",
            RuntimeWarning,
            stacklevel=2,
        )

        return WORD_SIZE

    return size


INT_SIZE: Final[int] = _read_int_size()

ERR_SYNTAX: Final[str] = "invalid syntax"
ERR_RANGE: Final[str] = "value out of range"

_TRUE_SPELLINGS: Final[frozenset[str]] = frozenset(
    ("1", "t", "T", "TRUE", "true", "True")
)
_FALSE_SPELLINGS: Final[frozenset[str]] = frozenset(
    ("0", "f", "F", "FALSE", "false", "False")
)

_BASE_PREFIXES: Final[dict[str, int]] = {"0b": 2, "0o": 8, "0x": 16}
_DIGITS: Final[str] = "0123456789abcdef"

_DECIMAL_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z"
)
_HEX_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"[pP][+-]?[0-9]+\Z"
)
_INFINITY: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:inf|infinity)\Z",
    re.IGNORECASE,
)
_NAN: Final[re.Pattern[str]] = re.compile(r"nan\Z", re.IGNORECASE)

_ESCAPES: Final[dict[str, str]] = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


class NumError(ValueError):
    """
    A failed conversion: *func* is the name of the function that failed, *num*
    is the input text and *err* is either :data:`ERR_SYNTAX` or
    :data:`ERR_RANGE`.
    """

    def __init__(self, /, func: str, num: str, err: str) -> None:
        super().__init__(func, num, err)

        self.func = func
        self.num = num
        self.err = err

    def __str__(self, /) -> str:
        return f"{self.func}: parsing {quote(self.num)}: {self.err}"


def quote(text: str, /) -> str:
    """
    Return *text* as a double-quoted literal with C-style escapes.

    Example:
        >>> print(quote('jokoi'))
        "jokoi"
        >>> print(quote('tab\\there'))
        "tab\\there"
    """

    chunks = ['"']

    for char in text:
        escape = _ESCAPES.get(char)

        if escape is not None:
            chunks.append(escape)
        elif char.isprintable():
            chunks.append(char)
        else:
            code = ord(char)

            if code < 0x20 or code == 0x7F:
                chunks.append(f"\\x{code:02x}")
            elif code < 0x10000:
                chunks.append(f"\\u{code:04x}")
            else:
                chunks.append(f"\\U{code:08x}")

    chunks.append('"')

    return "".join(chunks)


def parse_bool(text: str, /) -> bool:
    """
    Return the boolean spelled by *text*.

    Accepts ``1``, ``t``, ``T``, ``TRUE``, ``true``, ``True``, ``0``, ``f``,
    ``F``, ``FALSE``, ``false``, ``False``. Anything else raises
    :exc:`NumError`.
    """

    if text in _TRUE_SPELLINGS:
        return True

    if text in _FALSE_SPELLINGS:
        return False

    raise NumError("parse_bool", text, ERR_SYNTAX)


def format_bool(value: bool, /) -> str:
    if value:
        return "true"

    return "false"


def _parse_magnitude(func: str, text: str, digits: str, /) -> int:
    # `digits` is `text` without its sign
    prefix = digits[:2].lower()

    if prefix in _BASE_PREFIXES:
        base = _BASE_PREFIXES[prefix]
        body = digits[2:]
        prefixed = True
    elif len(digits) > 1 and digits[0] == "0":
        base = 8
        body = digits[1:]
        prefixed = True
    else:
        base = 10
        body = digits
        prefixed = False

    if "_" in body:
        # underscores are only allowed between digits after a base prefix
        if not prefixed or "__" in body or body.endswith("_"):
            raise NumError(func, text, ERR_SYNTAX)

        body = body.replace("_", "")

    if not body:
        raise NumError(func, text, ERR_SYNTAX)

    # `int()` alone would also accept whitespace and non-ASCII digits
    allowed = _DIGITS[:base]

    for char in body.lower():
        if char not in allowed:
            raise NumError(func, text, ERR_SYNTAX)

    return int(body, base)


def int_fits(value: int, /, bit_size: int = INT_SIZE) -> bool:
    """
    Return :data:`True` if *value* fits into *bit_size* bits as a signed
    (two's complement) integer.
    """

    limit = 1 << (bit_size - 1)

    return -limit <= value < limit


def uint_fits(value: int, /, bit_size: int = INT_SIZE) -> bool:
    return 0 <= value and not value >> bit_size


def parse_int(text: str, /, bit_size: int = INT_SIZE) -> int:
    """
    Return the signed integer spelled by *text*.

    The value must fit into *bit_size* bits (two's complement), otherwise
    :exc:`NumError` with :data:`ERR_RANGE` is raised.

    Example:
        >>> parse_int('-0x10')
        -16
        >>> parse_int('0o17')
        15
        >>> parse_int('017')
        15
    """

    func = "parse_int"

    if not text:
        raise NumError(func, text, ERR_SYNTAX)

    digits = text
    negative = False

    if text[0] in "+-":
        negative = text[0] == "-"
        digits = text[1:]

    if not digits:
        raise NumError(func, text, ERR_SYNTAX)

    magnitude = _parse_magnitude(func, text, digits)

    if negative:
        value = -magnitude
    else:
        value = magnitude

    if not int_fits(value, bit_size):
        raise NumError(func, text, ERR_RANGE)

    return value


def parse_uint(text: str, /, bit_size: int = INT_SIZE) -> int:
    """
    Return the unsigned integer spelled by *text*.

    Signs are not accepted. The value must fit into *bit_size* bits.
    """

    func = "parse_uint"

    if not text:
        raise NumError(func, text, ERR_SYNTAX)

    value = _parse_magnitude(func, text, text)

    if not uint_fits(value, bit_size):
        raise NumError(func, text, ERR_RANGE)

    return value


def parse_float(text: str, /) -> float:
    """
    Return the float spelled by *text*.

    Accepts decimal and hexadecimal (``0x1p-2``) notation, ``inf``,
    ``infinity`` and ``nan`` in any case. Finite text that overflows a double
    raises :exc:`NumError` with :data:`ERR_RANGE`.
    """

    func = "parse_float"

    if _DECIMAL_FLOAT.match(text):
        value = float(text)
    elif _HEX_FLOAT.match(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise NumError(func, text, ERR_RANGE) from None
    elif _INFINITY.match(text):
        return float(text)
    elif _NAN.match(text):
        return math.nan
    else:
        raise NumError(func, text, ERR_SYNTAX)

    if math.isinf(value):
        raise NumError(func, text, ERR_RANGE)

    return value


def format_float(value: float, /) -> str:
    """
    Return the shortest text that parses back to *value*, in ``%g`` style.

    Exponent notation is used when the decimal exponent is less than -4 or at
    least 6.

    Example:
        >>> format_float(0.1)
        '0.1'
        >>> format_float(1e6)
        '1e+06'
        >>> format_float(123456.0)
        '123456'
        >>> format_float(float('inf'))
        '+Inf'
    """

    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        if value > 0:
            return "+Inf"

        return "-Inf"

    if math.copysign(1.0, value) < 0:
        sign = "-"
    else:
        sign = ""

    if value == 0:
        return f"{sign}0"

    # `repr()` already yields the shortest round-trip digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()

    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    point = len(digits) + exponent
    scientific = point - 1

    if scientific < -4 or scientific >= 6:
        mantissa = digits[0]

        if len(digits) > 1:
            mantissa = f"{mantissa}.{digits[1:]}"

        if scientific < 0:
            exponent_sign = "-"
        else:
            exponent_sign = "+"

        return f"{sign}{mantissa}e{exponent_sign}{abs(scientific):02d}"

    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"

    return f"{sign}{digits[:point]}.{digits[point:]}"
