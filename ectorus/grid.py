#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Explicit p×p torus grid.

Two bitsets track the lattice points
found on the curve and those excluded from it.
A processed line meets the cubic only at its (up to three)
intersections: every other lattice point of that line
is provably not on the curve.

Memory is 2 p^2 bits, hence the MAX_GRID_P bound.
"""

from typing import AbstractSet, Iterator

from ectorus.alias import Point
from ectorus.exceptions import ConfigurationError
from ectorus.line import Line

MAX_GRID_P = 10_000


class Bitset:
    "Fixed size bitset backed by a bytearray."

    def __init__(self, n: int) -> None:
        self.n = n
        self._bits = bytearray((n + 7) >> 3)

    def set(self, i: int) -> None:
        self._bits[i >> 3] |= 1 << (i & 7)

    def get(self, i: int) -> bool:
        return bool(self._bits[i >> 3] >> (i & 7) & 1)

    def count(self) -> int:
        return sum(bin(byte).count("1") for byte in self._bits)


class Grid:
    "FOUND and EXCLUDED bitsets over the p×p torus, index = y*p + x."

    def __init__(self, p: int) -> None:
        if p > MAX_GRID_P:
            raise ConfigurationError(f"p is too big for the explicit grid: {p}")
        self.p = p
        self.found = Bitset(p * p)
        self.excluded = Bitset(p * p)

    def _idx(self, x: int, y: int) -> int:
        return (y % self.p) * self.p + x % self.p

    def mark_found(self, x: int, y: int) -> None:
        self.found.set(self._idx(x, y))

    def mark_excluded(self, x: int, y: int) -> None:
        self.excluded.set(self._idx(x, y))

    def is_found(self, x: int, y: int) -> bool:
        return self.found.get(self._idx(x, y))

    def is_excluded(self, x: int, y: int) -> bool:
        return self.excluded.get(self._idx(x, y))

    def n_found(self) -> int:
        return self.found.count()

    def n_excluded(self) -> int:
        return self.excluded.count()

    def mark_line_exclusions(self, line: Line, keep: AbstractSet[Point]) -> None:
        "Exclude all lattice points of the line but the ones to keep."
        for x, y in line.lattice_points(self.p):
            if (x, y) not in keep:
                self.mark_excluded(x, y)

    def candidates(self) -> Iterator[Point]:
        "Yield the lattice points neither found nor excluded."
        for y in range(self.p):
            for x in range(self.p):
                i = y * self.p + x
                if not self.found.get(i) and not self.excluded.get(i):
                    yield x, y
