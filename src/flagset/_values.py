#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import enum
import sys

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Final

from ._durations import (
    DurationError,
    duration_fits,
    format_duration,
    parse_duration,
)
from ._errors import ParseError
from ._strconv import (
    INT_SIZE,
    NumError,
    format_bool,
    format_float,
    int_fits,
    parse_bool,
    parse_float,
    parse_int,
    parse_uint,
    uint_fits,
)

if TYPE_CHECKING:
    from ._cell import Cell

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

PARSE_ERROR_MESSAGE: Final[str] = "parse error"


class Kind(enum.Enum):
    """
    The closed set of built-in value kinds, plus :attr:`VALUE` for
    caller-defined values.

    The kind tells the usage renderer which placeholder to show and what the
    zero value looks like, without inspecting the value's type.
    """

    BOOL = "bool"
    INT = "int"
    INT64 = "int64"
    UINT = "uint"
    UINT64 = "uint64"
    FLOAT64 = "float64"
    STRING = "string"
    DURATION = "duration"
    VALUE = "value"

    @property
    def zero_text(self, /) -> str:
        """
        The rendering of a freshly created zero value of this kind.
        """

        return _ZERO_TEXTS[self]

    @property
    def placeholder(self, /) -> str:
        """
        The argument name shown by :meth:`flagset.FlagSet.print_defaults`.
        """

        return _PLACEHOLDERS[self]


_ZERO_TEXTS: Final[dict[Kind, str]] = {
    Kind.BOOL: "false",
    Kind.INT: "0",
    Kind.INT64: "0",
    Kind.UINT: "0",
    Kind.UINT64: "0",
    Kind.FLOAT64: "0",
    Kind.STRING: "",
    Kind.DURATION: "0s",
    Kind.VALUE: "",
}

_PLACEHOLDERS: Final[dict[Kind, str]] = {
    Kind.BOOL: "",
    Kind.INT: "int",
    Kind.INT64: "int",
    Kind.UINT: "uint",
    Kind.UINT64: "uint",
    Kind.FLOAT64: "float",
    Kind.STRING: "string",
    Kind.DURATION: "duration",
    Kind.VALUE: "value",
}


class Value(ABC):
    """
    The interface to the dynamic value stored in a flag.

    :meth:`set` is called once per occurrence of the flag on the command line
    and must raise :exc:`ValueError` (usually :exc:`flagset.ParseError`) on
    bad text. :meth:`__str__` renders the current value; its result at
    registration time becomes the flag's default text.

    Any object providing these two methods can be registered; subclassing is
    only needed to get :attr:`kind` and :meth:`is_bool_flag` defaults.

    A caller-defined value may set :attr:`zero_text` to the rendering of its
    empty state (such as ``[]`` for a list), so that the usage message leaves
    out a default equal to it.
    """

    __slots__ = ()

    kind: ClassVar[Kind] = Kind.VALUE
    zero_text: ClassVar[str | None] = None

    @abstractmethod
    def set(self, /, text: str) -> None:
        """..."""

    @abstractmethod
    def __str__(self, /) -> str:
        """..."""

    def is_bool_flag(self, /) -> bool:
        """
        Returns :data:`True` if the flag can be given without a value
        (``-name`` rather than ``-name value``). In that case :meth:`set`
        receives an empty string.
        """

        return False


class Getter(Value):
    """
    A :class:`Value` whose current value can be retrieved with :meth:`get`.
    All built-in values are getters.
    """

    __slots__ = ()

    @abstractmethod
    def get(self, /) -> Any:
        """..."""


def kind_of(value: object, /) -> Kind:
    if isinstance(value, Value):
        return value.kind

    return Kind.VALUE


def zero_text_of(value: object, /) -> str:
    text = getattr(value, "zero_text", None)

    if text is None:
        return kind_of(value).zero_text

    return text


def is_bool_flag(value: object, /) -> bool:
    method = getattr(value, "is_bool_flag", None)

    return method is not None and bool(method())


class _CellValue(Getter):
    __slots__ = ("_cell",)

    def __new__(cls, /, cell: Cell) -> Self:
        self = object.__new__(cls)

        self._cell = cell

        return self

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self._cell.get()!r})"

    @classmethod
    def fits(cls, /, value: Any) -> bool:
        """
        Returns :data:`True` if *value* renders to text that :meth:`set`
        accepts back.
        """

        return True

    def get(self, /) -> Any:
        return self._cell.get()

    @property
    def cell(self, /) -> Cell:
        return self._cell


class BoolValue(_CellValue):
    """
    A boolean flag. An empty text (``-name`` with no value) means
    :data:`True`.
    """

    __slots__ = ()

    kind = Kind.BOOL

    def set(self, /, text: str) -> None:
        if not text:
            value = True
        else:
            try:
                value = parse_bool(text)
            except NumError:
                raise ParseError(PARSE_ERROR_MESSAGE) from None

        self._cell.set(value)

    def __str__(self, /) -> str:
        return format_bool(self._cell.get())

    def is_bool_flag(self, /) -> bool:
        return True


class IntValue(_CellValue):
    __slots__ = ()

    kind = Kind.INT
    bit_size: ClassVar[int] = INT_SIZE

    @classmethod
    def fits(cls, /, value: Any) -> bool:
        return int_fits(value, cls.bit_size)

    def set(self, /, text: str) -> None:
        # syntax and range failures are reported the same way
        try:
            value = parse_int(text, self.bit_size)
        except NumError:
            raise ParseError(PARSE_ERROR_MESSAGE) from None

        self._cell.set(value)

    def __str__(self, /) -> str:
        return str(self._cell.get())


class Int64Value(IntValue):
    __slots__ = ()

    kind = Kind.INT64
    bit_size = 64


class UintValue(_CellValue):
    __slots__ = ()

    kind = Kind.UINT
    bit_size: ClassVar[int] = INT_SIZE

    @classmethod
    def fits(cls, /, value: Any) -> bool:
        return uint_fits(value, cls.bit_size)

    def set(self, /, text: str) -> None:
        try:
            value = parse_uint(text, self.bit_size)
        except NumError:
            raise ParseError(PARSE_ERROR_MESSAGE) from None

        self._cell.set(value)

    def __str__(self, /) -> str:
        return str(self._cell.get())


class Uint64Value(UintValue):
    __slots__ = ()

    kind = Kind.UINT64
    bit_size = 64


class Float64Value(_CellValue):
    __slots__ = ()

    kind = Kind.FLOAT64

    def set(self, /, text: str) -> None:
        try:
            value = parse_float(text)
        except NumError:
            raise ParseError(PARSE_ERROR_MESSAGE) from None

        self._cell.set(value)

    def __str__(self, /) -> str:
        return format_float(self._cell.get())


class StringValue(_CellValue):
    __slots__ = ()

    kind = Kind.STRING

    def set(self, /, text: str) -> None:
        self._cell.set(text)

    def __str__(self, /) -> str:
        return self._cell.get()


class DurationValue(_CellValue):
    """
    A :class:`~datetime.timedelta` flag written as a duration literal such as
    ``1h30m`` or ``250ms``.
    """

    __slots__ = ()

    kind = Kind.DURATION

    @classmethod
    def fits(cls, /, value: Any) -> bool:
        return duration_fits(value)

    def set(self, /, text: str) -> None:
        try:
            value = parse_duration(text)
        except DurationError:
            raise ParseError(PARSE_ERROR_MESSAGE) from None

        self._cell.set(value)

    def __str__(self, /) -> str:
        return format_duration(self._cell.get())
