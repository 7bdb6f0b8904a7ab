#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Small metaprogramming helpers used by the library itself: singleton markers
for "not passed" parameters and the export machinery that makes public
objects look as if they were defined directly in the package.
"""

from ._exports import (
    export as export,
)
from ._markers import (
    DEFAULT as DEFAULT,
    MISSING as MISSING,
    DefaultType as DefaultType,
    MissingType as MissingType,
    SingletonEnum as SingletonEnum,
)
