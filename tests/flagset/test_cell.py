#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import copy
import pickle

from flagset import Cell


class TestCell:
    def test_get_set(self, /):
        cell = Cell(1)

        assert cell.get() == 1

        cell.set(2)

        assert cell.get() == 2

    def test_proxy(self, /):
        cell = Cell(40)

        assert cell + 2 == 42
        assert cell == 40
        assert cell > 39
        assert isinstance(cell, int)
        assert isinstance(cell, Cell)
        assert str(cell) == "40"

    def test_truth(self, /):
        cell = Cell(False)

        assert not cell

        cell.set(True)

        assert cell

    def test_rebinds_type(self, /):
        cell = Cell(None)

        cell.set("text")

        assert cell.upper() == "TEXT"
        assert len(cell) == 4

    def test_repr(self, /):
        assert repr(Cell(3)) == "flagset.Cell(3)"
        assert repr(Cell("x")) == "flagset.Cell('x')"

    def test_copy(self, /):
        cell = Cell([1, 2])
        other = copy.copy(cell)

        assert isinstance(other, Cell)
        assert other.get() is cell.get()

        other.set([3])

        assert cell.get() == [1, 2]

    def test_pickle(self, /):
        cell = Cell({"a": 1})
        other = pickle.loads(pickle.dumps(cell))

        assert isinstance(other, Cell)
        assert other.get() == {"a": 1}
