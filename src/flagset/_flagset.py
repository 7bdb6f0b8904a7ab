#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import enum
import sys

from logging import Logger, getLogger
from typing import TYPE_CHECKING, Any, Final, TextIO

from ._cell import Cell
from ._errors import DefinitionError, FatalError, HelpRequested, ParseError
from ._strconv import quote
from ._usage import format_defaults
from ._values import (
    BoolValue,
    DurationValue,
    Float64Value,
    Int64Value,
    IntValue,
    StringValue,
    Uint64Value,
    UintValue,
    is_bool_flag,
)
from .meta import DEFAULT, MISSING, DefaultType, MissingType

if TYPE_CHECKING:
    from datetime import timedelta

    from typing import NoReturn

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

    if sys.version_info >= (3, 9):
        from collections.abc import Callable, Iterable
    else:
        from typing import Callable, Iterable

    from ._values import Value, _CellValue

LOGGER: Final[Logger] = getLogger(__name__)

_HELP_NAMES: Final[frozenset[str]] = frozenset(("help", "h"))


class ErrorHandling(enum.Enum):
    """
    Defines how :meth:`FlagSet.parse` behaves if the parse fails.
    """

    CONTINUE_ON_ERROR = 0  # raise the error to the caller
    EXIT_ON_ERROR = 1  # exit with status 2 (0 for -help)
    PANIC_ON_ERROR = 2  # raise FatalError

    def __repr__(self, /) -> str:
        return f"{self.__class__.__module__}.{self._name_}"


CONTINUE_ON_ERROR: Final = ErrorHandling.CONTINUE_ON_ERROR
EXIT_ON_ERROR: Final = ErrorHandling.EXIT_ON_ERROR
PANIC_ON_ERROR: Final = ErrorHandling.PANIC_ON_ERROR


class Flag:
    """
    A registered flag: its name, usage text, value and the text of its value
    at registration time. Flags are never modified after registration.
    """

    __slots__ = (
        "__weakref__",
        "_default",
        "_name",
        "_usage",
        "_value",
    )

    def __new__(
        cls,
        /,
        name: str,
        usage: str,
        value: Value,
        default: str | MissingType = MISSING,
    ) -> Self:
        self = object.__new__(cls)

        if default is MISSING:
            default = str(value)

        self._name = name
        self._usage = usage
        self._value = value
        self._default = default

        return self

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return (
            f"{cls_repr}({self._name!r}, {self._usage!r},"
            f" default={self._default!r})"
        )

    @property
    def name(self, /) -> str:
        return self._name

    @property
    def usage(self, /) -> str:
        return self._usage

    @property
    def value(self, /) -> Value:
        return self._value

    @property
    def default(self, /) -> str:
        """
        The text of the value at registration time, as shown in the usage
        message.
        """

        return self._default


class Outcome(enum.Enum):
    OK = "ok"
    ERROR = "error"
    EXIT = "exit"
    FATAL = "fatal"

    def __repr__(self, /) -> str:
        cls = self.__class__

        return f"{cls.__module__}.{cls.__qualname__}.{self._name_}"


class ParseResult:
    """
    The result of :meth:`FlagSet.try_parse` after the error handling policy
    has been applied.

    :attr:`outcome` is one of :attr:`Outcome.OK`, :attr:`Outcome.ERROR` (the
    caller should see :attr:`error`), :attr:`Outcome.EXIT` (the process
    should end with :attr:`exit_code`) or :attr:`Outcome.FATAL` (an
    unrecoverable error). :meth:`realize` does what the outcome says; call
    sites that want different behavior can inspect the result instead.

    Example:
        >>> from flagset import FlagSet, EXIT_ON_ERROR
        >>> import io
        >>> flags = FlagSet('demo', EXIT_ON_ERROR)
        >>> flags.set_output(io.StringIO())
        >>> result = flags.try_parse(['-nope'])
        >>> result.outcome, result.exit_code
        (flagset.Outcome.EXIT, 2)
    """

    __slots__ = (
        "_error",
        "_exit_code",
        "_outcome",
    )

    def __new__(
        cls,
        /,
        outcome: Outcome = Outcome.OK,
        error: BaseException | None = None,
        exit_code: int = 0,
    ) -> Self:
        self = object.__new__(cls)

        self._outcome = outcome
        self._error = error
        self._exit_code = exit_code

        return self

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        if self._outcome is Outcome.OK:
            return f"{cls_repr}()"

        if self._outcome is Outcome.EXIT:
            return (
                f"{cls_repr}({self._outcome!r}, {self._error!r},"
                f" exit_code={self._exit_code!r})"
            )

        return f"{cls_repr}({self._outcome!r}, {self._error!r})"

    def __bool__(self, /) -> bool:
        """
        Returns :data:`True` if the parse succeeded.
        """

        return self._outcome is Outcome.OK

    def realize(self, /) -> None:
        """
        Act on the outcome: do nothing on success, raise :attr:`error`, exit
        the process via :func:`sys.exit`, or raise :exc:`FatalError` chained
        to :attr:`error`.
        """

        outcome = self._outcome

        if outcome is Outcome.ERROR:
            raise self._error

        if outcome is Outcome.EXIT:
            sys.exit(self._exit_code)

        if outcome is Outcome.FATAL:
            raise FatalError(str(self._error)) from self._error

    @property
    def outcome(self, /) -> Outcome:
        return self._outcome

    @property
    def error(self, /) -> BaseException | None:
        return self._error

    @property
    def exit_code(self, /) -> int:
        return self._exit_code


def _sort_flags(flags: dict[str, Flag] | None, /) -> list[Flag]:
    if not flags:
        return []

    return [flags[name] for name in sorted(flags)]


class FlagSet:
    """
    A set of defined flags.

    Flags are registered with :meth:`var` or one of the typed helpers
    (:meth:`bool`, :meth:`int`, :meth:`string`, ...) and filled in by
    :meth:`parse`. Flag names must be unique within a set.

    The :attr:`usage` attribute is the function called when an error occurs
    while parsing flags; it may be replaced with any callable taking no
    arguments, or set to :data:`None` to use :meth:`default_usage`.

    Example:
        >>> flags = FlagSet('demo')
        >>> verbose = flags.bool('v', False, 'print more')
        >>> count = flags.int('n', 1, 'how many `times`')
        >>> flags.parse(['-v', '-n', '3', 'file.txt'])
        >>> bool(verbose), count.get(), flags.args()
        (True, 3, ['file.txt'])
    """

    __slots__ = (
        "__weakref__",
        "_actual",
        "_args",
        "_error_handling",
        "_formal",
        "_name",
        "_output",
        "_parsed",
        "usage",
    )

    def __new__(
        cls,
        /,
        name: str = "",
        error_handling: ErrorHandling | DefaultType = DEFAULT,
    ) -> Self:
        """
        Create an empty flag set with the given *name* and error handling
        policy (:data:`CONTINUE_ON_ERROR` by default). If the name is not
        empty, it is printed in the default usage message and in error
        messages.
        """

        if error_handling is DEFAULT:
            error_handling = CONTINUE_ON_ERROR

        self = object.__new__(cls)

        self._name = name
        self._error_handling = error_handling

        self._parsed = False
        self._formal = {}
        self._actual = None
        self._args = []
        self._output = None

        self.usage = self.default_usage

        return self

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        object_repr = f"{cls_repr}({self._name!r}, {self._error_handling!r})"

        if self._parsed:
            extra = f"parsed, flags={len(self._formal)}"
        else:
            extra = f"unparsed, flags={len(self._formal)}"

        return f"<{object_repr} at {id(self):#x} [{extra}]>"

    def init(self, /, name: str, error_handling: ErrorHandling) -> None:
        """
        Set the name and error handling policy of the flag set.
        """

        self._name = name
        self._error_handling = error_handling

    @property
    def name(self, /) -> str:
        return self._name

    @property
    def error_handling(self, /) -> ErrorHandling:
        return self._error_handling

    def output(self, /) -> TextIO:
        """
        Return the destination for usage and error messages, which is the
        current :data:`sys.stderr` if no output was set.
        """

        if self._output is None:
            return sys.stderr

        return self._output

    def set_output(self, /, output: TextIO | None) -> None:
        """
        Set the destination for usage and error messages. :data:`None`
        restores the default.
        """

        self._output = output

    def parsed(self, /) -> bool:
        """
        Returns :data:`True` if :meth:`parse` has been called.
        """

        return self._parsed

    def args(self, /) -> list[str]:
        """
        Return the non-flag arguments left after parsing.
        """

        return list(self._args)

    def narg(self, /) -> int:
        return len(self._args)

    def arg(self, /, i: int) -> str:
        """
        Return the *i*-th remaining argument, or the empty string if there is
        no such element.
        """

        if 0 <= i < len(self._args):
            return self._args[i]

        return ""

    def nflag(self, /) -> int:
        """
        Return the number of flags that have been set.
        """

        if self._actual is None:
            return 0

        return len(self._actual)

    def lookup(self, /, name: str) -> Flag | None:
        return self._formal.get(name)

    def set(self, /, name: str, text: str) -> None:
        """
        Set the value of the flag *name* from *text* and record it as set, as
        if it was given on the command line.

        Raises :exc:`LookupError` if there is no such flag; errors from the
        flag's value propagate unchanged.
        """

        flag = self._formal.get(name)

        if flag is None:
            msg = f"no such flag -{name}"
            raise LookupError(msg)

        flag.value.set(text)

        if self._actual is None:
            self._actual = {}

        self._actual[name] = flag

    def visit_all(self, /, fn: Callable[[Flag], Any]) -> None:
        """
        Call *fn* for each defined flag in lexicographical order of names,
        including flags that have not been set.
        """

        for flag in _sort_flags(self._formal):
            fn(flag)

    def visit(self, /, fn: Callable[[Flag], Any]) -> None:
        """
        Call *fn* for each flag that has been set in lexicographical order of
        names.
        """

        for flag in _sort_flags(self._actual):
            fn(flag)

    def print_defaults(self, /) -> None:
        """
        Print the default values of all defined flags to :meth:`output`.

        For an integer flag ``-n`` defined with ``'number of `lines`'`` and a
        default of 7 the output is::

          -n lines
            	number of lines (default 7)

        The ``(default ...)`` part is left out when the default is the zero
        value of the flag's kind. String defaults are quoted.
        """

        output = self.output()

        for flag in _sort_flags(self._formal):
            print(format_defaults(flag), file=output)

    def default_usage(self, /) -> None:
        """
        Print a usage header followed by :meth:`print_defaults`.
        """

        if not self._name:
            print("Usage:", file=self.output())
        else:
            print(f"Usage of {self._name}:", file=self.output())

        self.print_defaults()

    def _call_usage(self, /) -> None:
        usage = self.usage

        try:
            if usage is None:
                self.default_usage()
            else:
                usage()
        except Exception:
            LOGGER.exception("exception calling usage for %r", self)

            raise

    def _failf(self, /, msg: str) -> ParseError:
        # the message goes out first, then the usage
        print(msg, file=self.output())

        self._call_usage()

        return ParseError(msg)

    def _fail_definition(self, /, msg: str) -> NoReturn:
        print(msg, file=self.output())

        raise DefinitionError(msg)

    def var(self, /, value: Value, name: str, usage: str) -> None:
        """
        Define a flag with the specified name and usage string. The type and
        value of the flag are represented by *value*, which typically holds a
        user-defined implementation of :class:`Value`.

        Raises :exc:`DefinitionError` if *name* is empty, starts with ``-``,
        contains ``=`` or is already defined.
        """

        if not name:
            self._fail_definition("flag name is empty")

        if name.startswith("-"):
            self._fail_definition(f"flag {quote(name)} begins with -")

        if "=" in name:
            self._fail_definition(f"flag {quote(name)} contains =")

        if name in self._formal:
            if not self._name:
                self._fail_definition(f"flag redefined: {name}")

            self._fail_definition(f"{self._name} flag redefined: {name}")

        self._formal[name] = flag = Flag(name, usage, value)

        LOGGER.debug("defined flag -%s (default %r)", name, flag.default)

    def _parse_one(self, /) -> bool:
        # returns True if a flag was consumed, False when scanning stops
        args = self._args

        if not args:
            return False

        s = args[0]

        if len(s) < 2 or s[0] != "-":
            return False

        num_minuses = 1

        if s[1] == "-":
            num_minuses += 1

            if len(s) == 2:  # "--" terminates the flags
                self._args = args[1:]

                return False

        name = s[num_minuses:]

        if not name or name[0] == "-" or name[0] == "=":
            self._args = args[1:]

            raise self._failf(f"bad flag syntax: {s}")

        # it's a flag. does it have an argument?
        self._args = args[1:]

        name, separator, value = name.partition("=")
        has_value = bool(separator)

        flag = self._formal.get(name)

        if flag is None:
            if name in _HELP_NAMES:  # special case for nice help message
                self._call_usage()

                raise HelpRequested

            raise self._failf(f"flag provided but not defined: -{name}")

        if is_bool_flag(flag.value):  # special case: doesn't need an arg
            try:
                flag.value.set(value)
            except ValueError as exc:
                if has_value:
                    msg = (
                        f"invalid boolean value {quote(value)}"
                        f" for -{name}: {exc}"
                    )
                else:
                    msg = f"invalid boolean flag {name}: {exc}"

                raise self._failf(msg) from exc
        else:
            # it must have a value, which might be the next argument
            if not has_value and self._args:
                has_value = True
                value, self._args = self._args[0], self._args[1:]

            if not has_value:
                raise self._failf(f"flag needs an argument: -{name}")

            try:
                flag.value.set(value)
            except ValueError as exc:
                msg = f"invalid value {quote(value)} for flag -{name}: {exc}"

                raise self._failf(msg) from exc

        if self._actual is None:
            self._actual = {}

        self._actual[name] = flag

        return True

    def try_parse(self, /, arguments: Iterable[str]) -> ParseResult:
        """
        Parse flag definitions from *arguments*, which should not include the
        command name, and return the outcome chosen by the error handling
        policy instead of acting on it.
        """

        self._parsed = True
        self._args = list(arguments)

        while True:
            try:
                seen = self._parse_one()
            except (HelpRequested, ParseError) as exc:
                error = exc
                break

            if not seen:
                return ParseResult()

        LOGGER.debug("parsing flags of %r failed: %s", self, error)

        error_handling = self._error_handling

        if error_handling is EXIT_ON_ERROR:
            if isinstance(error, HelpRequested):
                return ParseResult(Outcome.EXIT, error, 0)

            return ParseResult(Outcome.EXIT, error, 2)

        if error_handling is PANIC_ON_ERROR:
            return ParseResult(Outcome.FATAL, error)

        return ParseResult(Outcome.ERROR, error)

    def parse(self, /, arguments: Iterable[str]) -> None:
        """
        Parse flag definitions from *arguments*, which should not include the
        command name. Must be called after all flags are defined and before
        flags are accessed by the program.

        Scanning stops just before the first non-flag argument (``-`` is a
        non-flag argument) or after the terminator ``--``. On failure the
        error message and the usage are printed and the error handling policy
        applies: :exc:`ParseError` or :exc:`HelpRequested` is raised, the
        process exits, or :exc:`FatalError` is raised.
        """

        self.try_parse(arguments).realize()

    def _bind(
        self,
        /,
        value_type: type[_CellValue],
        cell: Cell,
        name: str,
        value: Any,
        usage: str,
    ) -> None:
        # every registered default must parse back to itself
        if not value_type.fits(value):
            self._fail_definition(
                f"default value {value!r} out of range for flag -{name}"
            )

        cell.set(value)
        self.var(value_type(cell), name, usage)

    def bool(self, /, name: str, value: bool, usage: str) -> Cell:
        """
        Define a bool flag and return the cell that stores its value.
        """

        cell = Cell(value)
        self.bool_var(cell, name, value, usage)
        return cell

    def bool_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: bool,
        usage: str,
    ) -> None:
        """
        Define a bool flag stored in *cell*, which is set to *value* first.
        """

        self._bind(BoolValue, cell, name, value, usage)

    def int(self, /, name: str, value: int, usage: str) -> Cell:
        cell = Cell(value)
        self.int_var(cell, name, value, usage)
        return cell

    def int_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: int,
        usage: str,
    ) -> None:
        """
        Define an int flag stored in *cell*. Raises :exc:`DefinitionError` if
        *value* does not fit into the word size (see ``FLAGSET_INT_SIZE``).
        """

        self._bind(IntValue, cell, name, value, usage)

    def int64(self, /, name: str, value: int, usage: str) -> Cell:
        cell = Cell(value)
        self.int64_var(cell, name, value, usage)
        return cell

    def int64_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: int,
        usage: str,
    ) -> None:
        self._bind(Int64Value, cell, name, value, usage)

    def uint(self, /, name: str, value: int, usage: str) -> Cell:
        cell = Cell(value)
        self.uint_var(cell, name, value, usage)
        return cell

    def uint_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: int,
        usage: str,
    ) -> None:
        self._bind(UintValue, cell, name, value, usage)

    def uint64(self, /, name: str, value: int, usage: str) -> Cell:
        cell = Cell(value)
        self.uint64_var(cell, name, value, usage)
        return cell

    def uint64_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: int,
        usage: str,
    ) -> None:
        self._bind(Uint64Value, cell, name, value, usage)

    def float64(self, /, name: str, value: float, usage: str) -> Cell:
        cell = Cell(value)
        self.float64_var(cell, name, value, usage)
        return cell

    def float64_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: float,
        usage: str,
    ) -> None:
        self._bind(Float64Value, cell, name, value, usage)

    def string(self, /, name: str, value: str, usage: str) -> Cell:
        cell = Cell(value)
        self.string_var(cell, name, value, usage)
        return cell

    def string_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: str,
        usage: str,
    ) -> None:
        self._bind(StringValue, cell, name, value, usage)

    def duration(self, /, name: str, value: timedelta, usage: str) -> Cell:
        """
        Define a duration flag; the command line accepts literals such as
        ``1h30m`` or ``250ms``.
        """

        cell = Cell(value)
        self.duration_var(cell, name, value, usage)
        return cell

    def duration_var(
        self,
        /,
        cell: Cell,
        name: str,
        value: timedelta,
        usage: str,
    ) -> None:
        """
        Define a duration flag stored in *cell*. Raises
        :exc:`DefinitionError` if *value* exceeds about 292 years in either
        direction, the range of a signed 64-bit nanosecond count.
        """

        self._bind(DurationValue, cell, name, value, usage)
