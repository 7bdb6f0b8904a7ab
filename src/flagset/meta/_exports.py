#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import builtins
import sys

from types import FunctionType, ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import MutableMapping
    else:
        from typing import MutableMapping


def _issubmodule(module_name: object, package_name: str, /) -> bool:
    return isinstance(module_name, str) and (
        module_name == package_name
        or module_name.startswith(f"{package_name}.")
    )


def _export_one(package_name: str, qualname: str, value: object, /) -> None:
    if isinstance(value, type):
        if not _issubmodule(value.__module__, package_name):
            return  # skip foreign ones

        # public methods move to the package along with their class
        for attr_name, attr_value in {**vars(value)}.items():
            if attr_name.startswith("_"):
                continue

            if isinstance(attr_value, FunctionType):
                attr_value.__module__ = package_name

        value.__qualname__ = qualname
        value.__module__ = package_name
    elif isinstance(value, FunctionType):
        if not _issubmodule(value.__module__, package_name):
            return  # skip foreign ones

        value.__module__ = package_name


def export(
    package_namespace: ModuleType | MutableMapping[str, object],
    /,
) -> None:
    """
    Prepare *package_namespace* for external use.

    Every public class and function re-exported from a non-public submodule
    (``package._module``) gets its ``__module__`` rewritten to the package
    name, so that reprs and error messages show ``flagset.FlagSet`` rather
    than ``flagset._flagset.FlagSet``. Public subpackages are processed
    recursively. A sorted ``__all__`` is set unless one already exists; names
    of builtins (``int``, ``bool``) are left out of it.

    Typically called as ``export(globals())`` near the end of
    ``__init__.py``.
    """

    if TYPE_CHECKING:
        return

    if isinstance(package_namespace, ModuleType):
        package_name = package_namespace.__name__
        package_namespace = vars(package_namespace)
    else:
        package_name = package_namespace["__name__"]

    public_names = []

    for name, value in {**package_namespace}.items():
        if name.startswith("_"):
            continue  # skip non-public ones

        if isinstance(value, ModuleType):
            if value.__name__.rpartition(".")[0] != package_name:
                continue  # skip indirect ones

            export(value)
        else:
            _export_one(package_name, name, value)

            # star-imports must not replace `int`, `bool` and friends
            if not hasattr(builtins, name):
                public_names.append(name)

    # constants first, then everything else alphabetically
    public_names.sort()
    public_names.sort(key=str.isupper, reverse=True)

    package_namespace.setdefault("__all__", tuple(public_names))
