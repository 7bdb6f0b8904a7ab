#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

version: str = "0.1.0"
version_tuple: tuple[int | str, ...] = (0, 1, 0)
