#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

from datetime import timedelta

import pytest

import flagset

from flagset import FlagSet, unquote_usage
from flagset._usage import format_defaults, is_zero_value


class ListValue(flagset.Value):
    def __init__(self, *items):
        self.items = list(items)

    def set(self, text):
        self.items.append(text)

    def __str__(self):
        return f"[{' '.join(self.items)}]"


DEFAULT_OUTPUT = """\
  -A\tfor bootstrapping, allow 'any' type
  -Alongflagname
    \tdisable bounds checking
  -C\ta boolean defaulting to true (default true)
  -D path
    \tset relative path for local imports
  -E string
    \tissue 23543 (default "0")
  -F number
    \ta non-zero number (default 2.7)
  -G float
    \ta float that defaults to zero
  -M string
    \ta multiline
    \thelp
    \tstring
  -N int
    \ta non-zero int (default 27)
  -O\ta flag
    \tmultiline help string (default true)
  -U uint
    \tan unsigned int (default 7)
  -V list
    \ta list of strings (default [a b])
  -Z int
    \tan int that defaults to zero
  -maxT timeout
    \tset timeout for dial
  -wait duration
    \thow long to wait (default 1m30s)
"""


class TestPrintDefaults:
    def test_output(self, /, flags, output):
        flags.bool("A", False, "for bootstrapping, allow 'any' type")
        flags.bool("Alongflagname", False, "disable bounds checking")
        flags.bool("C", True, "a boolean defaulting to true")
        flags.string("D", "", "set relative `path` for local imports")
        flags.string("E", "0", "issue 23543")
        flags.float64("F", 2.7, "a non-zero `number`")
        flags.float64("G", 0.0, "a float that defaults to zero")
        flags.string("M", "", "a multiline\nhelp\nstring")
        flags.int("N", 27, "a non-zero int")
        flags.bool("O", True, "a flag\nmultiline help string")
        flags.uint64("U", 7, "an unsigned int")
        flags.var(ListValue("a", "b"), "V", "a `list` of strings")
        flags.int("Z", 0, "an int that defaults to zero")
        flags.duration("maxT", timedelta(), "set `timeout` for dial")
        flags.duration("wait", timedelta(seconds=90), "how long to wait")

        flags.print_defaults()

        assert output.getvalue() == DEFAULT_OUTPUT

    def test_empty(self, /, flags, output):
        flags.print_defaults()

        assert output.getvalue() == ""

    def test_default_usage(self, /, flags, output):
        flags.int("n", 0, "count")

        flags.default_usage()

        assert output.getvalue() == "Usage of test:\n  -n int\n    \tcount\n"

    def test_default_captured_at_registration(self, /, flags, output):
        n = flags.int("n", 3, "count")

        flags.parse(["-n", "0"])
        flags.print_defaults()

        assert n.get() == 0
        assert output.getvalue() == "  -n int\n    \tcount (default 3)\n"

    def test_quoted_string_default(self, /, flags, output):
        flags.string("s", 'say "hi"\n', "greeting")

        flags.print_defaults()

        assert output.getvalue() == (
            '  -s string\n    \tgreeting (default "say \\"hi\\"\\n")\n'
        )


class TestUnquoteUsage:
    @pytest.mark.parametrize(
        "usage, expected",
        [
            ("a `name` to show", ("name", "a name to show")),
            ("`file`", ("file", "file")),
            ("no quotes", ("int", "no quotes")),
            ("one ` quote", ("int", "one ` quote")),
            ("two `a` `b`", ("a", "two a `b`")),
            ("empty `` name", ("", "empty  name")),
        ],
    )
    def test_int(self, /, flags, usage, expected):
        flags.int("n", 0, usage)

        assert unquote_usage(flags.lookup("n")) == expected

    @pytest.mark.parametrize(
        "define, zero, placeholder",
        [
            (FlagSet.bool, False, ""),
            (FlagSet.int64, 0, "int"),
            (FlagSet.uint, 0, "uint"),
            (FlagSet.float64, 0.0, "float"),
            (FlagSet.string, "", "string"),
        ],
    )
    def test_placeholder(self, /, flags, define, zero, placeholder):
        define(flags, "x", zero, "")

        assert unquote_usage(flags.lookup("x")) == (placeholder, "")

    def test_duration(self, /, flags):
        flags.duration("d", timedelta(), "wait")

        assert unquote_usage(flags.lookup("d")) == ("duration", "wait")

    def test_custom(self, /, flags):
        flags.var(ListValue(), "l", "items")

        assert unquote_usage(flags.lookup("l")) == ("value", "items")


class TestZeroValue:
    @pytest.mark.parametrize(
        "define, zero, text, expected",
        [
            (FlagSet.bool, False, "false", True),
            (FlagSet.bool, False, "true", False),
            (FlagSet.int, 0, "0", True),
            (FlagSet.float64, 0.0, "0", True),
            (FlagSet.float64, 0.0, "0.5", False),
            (FlagSet.string, "", "", True),
            (FlagSet.string, "", "0", False),
            (FlagSet.duration, timedelta(), "0s", True),
            (FlagSet.duration, timedelta(), "0", False),
        ],
    )
    def test_builtin(self, /, flags, define, zero, text, expected):
        define(flags, "x", zero, "")

        assert is_zero_value(flags.lookup("x"), text) is expected

    def test_custom(self, /, flags):
        flags.var(ListValue(), "l", "items")

        flag = flags.lookup("l")

        assert is_zero_value(flag, "")
        assert not is_zero_value(flag, "[]")
        assert format_defaults(flag) == "  -l value\n    \titems (default [])"

    def test_declared_zero_text(self, /, flags, output):
        class Items(ListValue):
            zero_text = "[]"

        flags.var(Items(), "empty", "no items")
        flags.var(Items("a"), "full", "one item")

        assert is_zero_value(flags.lookup("empty"), "[]")
        assert not is_zero_value(flags.lookup("empty"), "")

        flags.print_defaults()

        assert output.getvalue() == (
            "  -empty value\n"
            "    \tno items\n"
            "  -full value\n"
            "    \tone item (default [a])\n"
        )
