#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from ._strconv import quote
from ._values import Kind, is_bool_flag, kind_of, zero_text_of

if TYPE_CHECKING:
    from ._flagset import Flag

_INDENT: Final[str] = "\n    \t"


def unquote_usage(flag: Flag, /) -> tuple[str, str]:
    """
    Extract a back-quoted name from the usage string of *flag* and return it
    along with the un-quoted usage.

    Given ``"a `name` to show"`` it returns ``("name", "a name to show")``.
    If there are no back quotes, the name is an educated guess of the type
    of the flag's value, or the empty string if the flag is boolean.

    Example:
        >>> from flagset import FlagSet
        >>> flags = FlagSet()
        >>> _ = flags.string('config', '', 'read settings from `path`')
        >>> unquote_usage(flags.lookup('config'))
        ('path', 'read settings from path')
        >>> _ = flags.uint('workers', 4, 'number of workers')
        >>> unquote_usage(flags.lookup('workers'))
        ('uint', 'number of workers')
    """

    usage = flag.usage

    start = usage.find("`")

    if start >= 0:
        end = usage.find("`", start + 1)

        if end >= 0:
            name = usage[start + 1 : end]

            return name, f"{usage[:start]}{name}{usage[end + 1 :]}"

    if is_bool_flag(flag.value):
        return "", usage

    return kind_of(flag.value).placeholder, usage


def is_zero_value(flag: Flag, text: str, /) -> bool:
    """
    Return :data:`True` if *text* is the rendering of a zero value of the
    kind of *flag*, or the :attr:`~flagset.Value.zero_text` declared by its
    value.
    """

    return text == zero_text_of(flag.value)


def format_defaults(flag: Flag, /) -> str:
    # two spaces, the flag, and an optional placeholder; a short
    # single-letter flag keeps its usage on the same line
    line = f"  -{flag.name}"

    name, usage = unquote_usage(flag)

    if name:
        line = f"{line} {name}"

    if len(line) <= 4:
        line = f"{line}\t"
    else:
        line = f"{line}{_INDENT}"

    usage = usage.replace("\n", _INDENT)

    line = f"{line}{usage}"

    if not is_zero_value(flag, flag.default):
        if kind_of(flag.value) is Kind.STRING:
            line = f"{line} (default {quote(flag.default)})"
        else:
            line = f"{line} (default {flag.default})"

    return line
