#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Command-line flag parsing

This package parses command-line flags into typed values:

* a program defines flags on a :class:`FlagSet` (or on the process-wide
  :data:`COMMAND_LINE` set through the module-level functions)
* :meth:`FlagSet.parse` consumes ``-flag``, ``-flag=value`` and
  ``-flag value`` tokens until the first non-flag argument or ``--``
* each flag's value lives in a :class:`Cell` that can be used like the value
  itself

Example:
    >>> import flagset
    >>> flags = flagset.FlagSet('app')
    >>> name = flags.string('name', 'world', 'who to greet')
    >>> flags.parse(['-name', 'flags'])
    >>> f'hello, {name}'
    'hello, flags'
"""

from __future__ import annotations

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"

from . import (  # noqa: F401
    meta,
)
from ._cell import (
    Cell as Cell,
)
from ._commandline import (
    COMMAND_LINE as COMMAND_LINE,
    arg as arg,
    args as args,
    bool as bool,
    bool_var as bool_var,
    duration as duration,
    duration_var as duration_var,
    float64 as float64,
    float64_var as float64_var,
    int as int,
    int64 as int64,
    int64_var as int64_var,
    int_var as int_var,
    lookup as lookup,
    narg as narg,
    nflag as nflag,
    parse as parse,
    parsed as parsed,
    print_defaults as print_defaults,
    set as set,
    set_usage as set_usage,
    string as string,
    string_var as string_var,
    uint as uint,
    uint64 as uint64,
    uint64_var as uint64_var,
    uint_var as uint_var,
    usage as usage,
    var as var,
    visit as visit,
    visit_all as visit_all,
)
from ._errors import (
    DefinitionError as DefinitionError,
    FatalError as FatalError,
    FlagError as FlagError,
    HelpRequested as HelpRequested,
    ParseError as ParseError,
)
from ._flagset import (
    CONTINUE_ON_ERROR as CONTINUE_ON_ERROR,
    EXIT_ON_ERROR as EXIT_ON_ERROR,
    PANIC_ON_ERROR as PANIC_ON_ERROR,
    ErrorHandling as ErrorHandling,
    Flag as Flag,
    FlagSet as FlagSet,
    Outcome as Outcome,
    ParseResult as ParseResult,
)
from ._usage import (
    unquote_usage as unquote_usage,
)
from ._values import (
    BoolValue as BoolValue,
    DurationValue as DurationValue,
    Float64Value as Float64Value,
    Getter as Getter,
    Int64Value as Int64Value,
    IntValue as IntValue,
    Kind as Kind,
    StringValue as StringValue,
    Uint64Value as Uint64Value,
    UintValue as UintValue,
    Value as Value,
)
from ._version import (
    version as __version__,
    version_tuple as __version_tuple__,
)

# prepare for external use
meta.export(globals())
