#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
The process-wide flag set and functions that forward to it.

Several functions here are named after the flag types they define (``bool``,
``int``) and therefore shadow builtins inside this module; builtins are
reached through :mod:`builtins` where needed.
"""

from __future__ import annotations

import builtins
import sys

from typing import TYPE_CHECKING, Any, Final

from ._flagset import EXIT_ON_ERROR, FlagSet

if TYPE_CHECKING:
    from datetime import timedelta

    if sys.version_info >= (3, 9):
        from collections.abc import Callable
    else:
        from typing import Callable

    from ._cell import Cell
    from ._flagset import Flag
    from ._values import Value


def _program_name() -> str:
    if sys.argv:
        return sys.argv[0]

    return ""


COMMAND_LINE: Final[FlagSet] = FlagSet(_program_name(), EXIT_ON_ERROR)


def _default_usage() -> None:
    print(f"Usage of {_program_name()}:", file=COMMAND_LINE.output())

    COMMAND_LINE.print_defaults()


_usage: Callable[[], Any] = _default_usage


def usage() -> None:
    """
    Print a usage message documenting all defined command-line flags to the
    output of :data:`COMMAND_LINE`.

    It is called when an error occurs while parsing flags and can be replaced
    with :func:`set_usage`.
    """

    _usage()


def set_usage(func: Callable[[], Any] | None) -> None:
    """
    Replace the function called by :func:`usage`. :data:`None` restores the
    default one.
    """

    global _usage

    if func is None:
        _usage = _default_usage
    else:
        _usage = func


def _command_line_usage() -> None:
    # looked up on every call so that `set_usage()` takes effect later on
    usage()


COMMAND_LINE.usage = _command_line_usage


def parse() -> None:
    """
    Parse the command-line flags from ``sys.argv[1:]``. Must be called after
    all flags are defined and before flags are accessed by the program.
    """

    COMMAND_LINE.parse(sys.argv[1:])


def parsed() -> builtins.bool:
    return COMMAND_LINE.parsed()


def args() -> list[str]:
    """
    Return the non-flag command-line arguments.
    """

    return COMMAND_LINE.args()


def narg() -> builtins.int:
    return COMMAND_LINE.narg()


def arg(i: builtins.int) -> str:
    return COMMAND_LINE.arg(i)


def nflag() -> builtins.int:
    return COMMAND_LINE.nflag()


def lookup(name: str) -> Flag | None:
    return COMMAND_LINE.lookup(name)


def set(name: str, text: str) -> None:
    """
    Set the value of the named command-line flag.
    """

    COMMAND_LINE.set(name, text)


def visit_all(fn: Callable[[Flag], Any]) -> None:
    COMMAND_LINE.visit_all(fn)


def visit(fn: Callable[[Flag], Any]) -> None:
    COMMAND_LINE.visit(fn)


def print_defaults() -> None:
    """
    Print the default values of all defined command-line flags.
    """

    COMMAND_LINE.print_defaults()


def var(value: Value, name: str, usage: str) -> None:
    COMMAND_LINE.var(value, name, usage)


def bool(name: str, value: builtins.bool, usage: str) -> Cell:
    return COMMAND_LINE.bool(name, value, usage)


def bool_var(cell: Cell, name: str, value: builtins.bool, usage: str) -> None:
    COMMAND_LINE.bool_var(cell, name, value, usage)


def int(name: str, value: builtins.int, usage: str) -> Cell:
    return COMMAND_LINE.int(name, value, usage)


def int_var(cell: Cell, name: str, value: builtins.int, usage: str) -> None:
    COMMAND_LINE.int_var(cell, name, value, usage)


def int64(name: str, value: builtins.int, usage: str) -> Cell:
    return COMMAND_LINE.int64(name, value, usage)


def int64_var(cell: Cell, name: str, value: builtins.int, usage: str) -> None:
    COMMAND_LINE.int64_var(cell, name, value, usage)


def uint(name: str, value: builtins.int, usage: str) -> Cell:
    return COMMAND_LINE.uint(name, value, usage)


def uint_var(cell: Cell, name: str, value: builtins.int, usage: str) -> None:
    COMMAND_LINE.uint_var(cell, name, value, usage)


def uint64(name: str, value: builtins.int, usage: str) -> Cell:
    return COMMAND_LINE.uint64(name, value, usage)


def uint64_var(cell: Cell, name: str, value: builtins.int, usage: str) -> None:
    COMMAND_LINE.uint64_var(cell, name, value, usage)


def float64(name: str, value: float, usage: str) -> Cell:
    return COMMAND_LINE.float64(name, value, usage)


def float64_var(cell: Cell, name: str, value: float, usage: str) -> None:
    COMMAND_LINE.float64_var(cell, name, value, usage)


def string(name: str, value: str, usage: str) -> Cell:
    return COMMAND_LINE.string(name, value, usage)


def string_var(cell: Cell, name: str, value: str, usage: str) -> None:
    COMMAND_LINE.string_var(cell, name, value, usage)


def duration(name: str, value: timedelta, usage: str) -> Cell:
    return COMMAND_LINE.duration(name, value, usage)


def duration_var(cell: Cell, name: str, value: timedelta, usage: str) -> None:
    COMMAND_LINE.duration_var(cell, name, value, usage)
