#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations


class FlagError(Exception):
    """
    The base class for all errors raised by flag sets.
    """


class ParseError(FlagError, ValueError):
    """
    Raised when an argument list or a value text cannot be parsed.

    Flag values raise it with the generic message ``parse error`` when their
    text does not convert; the flag set raises it with a message naming the
    offending token or flag.
    """


class HelpRequested(FlagError):
    """
    Raised when ``-help`` or ``-h`` is given but no such flag is defined.

    This is not a failure: the usage message has already been printed when it
    is raised.
    """

    def __init__(self, /, *args: object) -> None:
        if not args:
            args = ("flag: help requested",)

        super().__init__(*args)


class DefinitionError(FlagError, RuntimeError):
    """
    Raised at registration time for an empty, malformed or duplicate flag
    name. This is a programming mistake, not a problem with the input.
    """


class FatalError(FlagError, RuntimeError):
    """
    Raised by flag sets using :data:`~flagset.PANIC_ON_ERROR` in place of the
    parse error, which is available as ``__cause__``.
    """
