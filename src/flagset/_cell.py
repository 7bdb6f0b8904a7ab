#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, Any

from wrapt import ObjectProxy

if TYPE_CHECKING:
    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self


class Cell(ObjectProxy):
    """
    A storage cell that a flag value is bound to.

    The cell is a transparent proxy for its current value: arithmetic,
    comparisons, truth testing and :func:`str` all act on the value itself,
    so a handle returned by a registration function can be used where the
    value is expected. Parsing replaces the value in place, which is why the
    handle stays valid after :meth:`flagset.FlagSet.parse`.

    Example:
        >>> verbose = Cell(False)
        >>> bool(verbose)
        False
        >>> verbose.set(True)
        >>> bool(verbose)
        True
        >>> port = Cell(8080)
        >>> port + 1
        8081
    """

    __slots__ = ()

    def __init__(self, /, value: Any) -> None:
        super().__init__(value)

    def __reduce__(self, /) -> tuple[Any, ...]:
        return (type(self), (self.__wrapped__,))

    def __reduce_ex__(self, /, protocol: int) -> tuple[Any, ...]:
        return self.__reduce__()

    def __copy__(self, /) -> Self:
        """..."""

        return type(self)(self.__wrapped__)

    def __repr__(self, /) -> str:
        # `self.__class__` reports the class of the wrapped value
        cls = type(self)
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self.__wrapped__!r})"

    def get(self, /) -> Any:
        """
        Return the current value.
        """

        return self.__wrapped__

    def set(self, /, value: Any) -> None:
        """
        Replace the current value.
        """

        self.__wrapped__ = value
