#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Tangent and secant lines of a CurveGroup.

A line of the p×p torus is either vertical (x = v)
or non-vertical (y = m*x + c), with m, c, v in [0, p).
That form is canonical: the same geometric line
always yields the same Line (and the same key),
whatever pair of its points it was derived from.

A line meets the cubic in three points, counted with multiplicity,
the point at infinity included for vertical lines.
If P and Q are two of them, the third one is -(P + Q).
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ectorus.alias import INF, Point
from ectorus.curve_group import CurveGroup


@dataclass(frozen=True)
class Line:
    vertical: bool
    m: int = 0
    c: int = 0
    v: int = 0

    @property
    def key(self) -> str:
        if self.vertical:
            return f"v:{self.v}"
        return f"m:{self.m}|c:{self.c}"

    def contains(self, x: int, y: int, p: int) -> bool:
        "Return True if the lattice point (x, y) is on the line."
        if self.vertical:
            return x % p == self.v
        return (self.m * x + self.c - y) % p == 0

    def lattice_points(self, p: int) -> Iterator[Point]:
        "Yield the p lattice points of the line in the p×p torus."
        if self.vertical:
            for y in range(p):
                yield self.v, y
        else:
            for x in range(p):
                yield x, (self.m * x + self.c) % p


def vertical_line(v: int) -> Line:
    return Line(vertical=True, v=v)


def line_from_slope(m: int, P: Point, p: int) -> Line:
    "Return the non-vertical line through P with slope m."
    m %= p
    return Line(vertical=False, m=m, c=(P[1] - m * P[0]) % p)


def line_through(ec: CurveGroup, P: Point, Q: Optional[Point] = None) -> Line:
    """Return the tangent at P (Q missing or equal to P) or the secant through P, Q.

    P and Q must be affine points on the curve.
    """

    if Q is None or Q == P:
        if P[1] == 0:
            # tangent at a 2-torsion point
            return vertical_line(P[0])
        return line_from_slope(ec.tangent_slope(P), P, ec.p)

    if P[0] == Q[0]:
        # vertical secant through P and -P
        return vertical_line(P[0])
    return line_from_slope(ec.secant_slope(P, Q), P, ec.p)


def third_intersection(
    ec: CurveGroup, P: Point, Q: Optional[Point] = None
) -> Tuple[Point, List[Point]]:
    """Return the third intersection R and the affine intersections of the line.

    The line is the tangent at P (Q missing or equal to P)
    or the secant through P and Q.
    R is the point where the line meets the cubic for the third time:
    INF for vertical lines, -(P + Q) otherwise.
    The affine intersections are the distinct affine points
    on both the curve and the line: a line meets the cubic nowhere else.

    It is a pure function: nothing is recorded anywhere.
    """

    if Q is None or Q == P:
        S = ec.double(P)
        if S == INF:
            # vertical tangent at a 2-torsion point
            return INF, _distinct([P, ec.negate(P)])
        R = ec.negate(S)
        return R, _distinct([P, R])

    if ec.are_opposite(P, Q):
        return INF, [P, Q]

    R = ec.negate(ec.add(P, Q))
    return R, _distinct([P, Q, R])


def _distinct(points: List[Point]) -> List[Point]:
    result: List[Point] = []
    for Q in points:
        if Q not in result:
            result.append(Q)
    return result
