#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import io
import sys

import pytest

import flagset


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def flags(output):
    flags = flagset.FlagSet("test", flagset.CONTINUE_ON_ERROR)
    flags.set_output(output)

    return flags


@pytest.fixture
def command_line(monkeypatch, output):
    # a clean process-wide set for each test; restored afterwards
    command_line = flagset.COMMAND_LINE

    monkeypatch.setattr(command_line, "_formal", {})
    monkeypatch.setattr(command_line, "_actual", None)
    monkeypatch.setattr(command_line, "_args", [])
    monkeypatch.setattr(command_line, "_parsed", False)
    monkeypatch.setattr(command_line, "_output", output)
    monkeypatch.setattr(sys, "argv", ["prog"])

    try:
        yield command_line
    finally:
        flagset.set_usage(None)
