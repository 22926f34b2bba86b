#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class.

Note that CurveGroup does not have to be a cyclic group:
there is no generator and no group order here,
as discovering the group points is the whole point of ectorus.
"""

import warnings
from typing import Dict

from ectorus.alias import INF, Integer, Point
from ectorus.exceptions import ConfigurationError, ECTorusValueError
from ectorus.number_theory import is_probable_prime, mod_inv, mod_sqrt
from ectorus.utils import hex_string, int_from_integer, int_repr

HEX_THRESHOLD = 0xFFFFFFFF


def is_singular(p: int, a: int, b: int) -> bool:
    "Return True if 4*a^3 + 27*b^2 = 0 (mod p)."
    return (4 * a * a * a + 27 * b * b) % p == 0


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(
        self, p: Integer, a: Integer, b: Integer, check_validity: bool = True
    ) -> None:

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        if p <= 3:
            raise ConfigurationError(f"p must be > 3: {p}")
        if p % 2 == 0:
            raise ConfigurationError(f"p is not prime: {int_repr(p, HEX_THRESHOLD)}")

        self.p = p
        # a and b are taken mod p
        self._a = a % p
        self._b = b % p

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # Miller-Rabin will do as _probabilistic_ primality test,
        # and a failure is not fatal: the caller may know better
        if not is_probable_prime(self.p):
            err_msg = f"p may not be prime: {int_repr(self.p, HEX_THRESHOLD)}"
            warnings.warn(err_msg, UserWarning)

        if self.is_singular():
            raise ConfigurationError("zero discriminant")

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        result = "CurveGroup("
        result += int_repr(self.p, HEX_THRESHOLD)
        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f", '{hex_string(self._a)}', '{hex_string(self._b)}'"
        else:
            result += f", {self._a}, {self._b}"

        result += ")"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return (self.p, self._a, self._b) == (other.p, other._a, other._b)

    def __hash__(self) -> int:
        return hash((self.p, self._a, self._b))

    def to_dict(self) -> Dict[str, int]:
        return {"p": self.p, "a": self._a, "b": self._b}

    def is_singular(self) -> bool:
        "Return True if the discriminant is zero (mod p)."
        return is_singular(self.p, self._a, self._b)

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if Q == INF:
            return INF
        return Q[0], (self.p - Q[1]) % self.p

    def are_opposite(self, Q1: Point, Q2: Point) -> bool:
        "Return True if Q1 and Q2 are affine points with Q1 = -Q2."
        if INF in (Q1, Q2):
            return False
        return Q1[0] == Q2[0] and (Q1[1] + Q2[1]) % self.p == 0

    # methods using _a, _b, p

    def y2(self, x: int) -> int:
        """Return the right-hand side x^3 + a*x + b (mod p).

        Note that y2(x) might not be a quadratic residue:
        x is a valid x-coordinate only if it is.
        """
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        Note that p - y is also a valid y-coordinate.
        """
        if not 0 <= x < self.p:
            err_msg = "x-coordinate not in 0..p-1: "
            err_msg += int_repr(x, HEX_THRESHOLD)
            raise ECTorusValueError(err_msg)
        try:
            return mod_sqrt(self.y2(x), self.p)
        except ECTorusValueError as e:
            err_msg = "invalid x-coordinate: " + int_repr(x, HEX_THRESHOLD)
            raise ECTorusValueError(err_msg) from e

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if len(Q) != 2:
            raise ECTorusValueError("point must be a tuple[int, int]")
        if Q == INF:
            return True
        if not (0 <= Q[0] < self.p and 0 <= Q[1] < self.p):
            return False
        return self.y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECTorusValueError(f"point not on curve: {Q}")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        "Return the sum of a point with itself."
        self.require_on_curve(Q)
        return self.add_aff(Q, Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R == INF:
            return Q
        if Q == INF:
            return R

        if R[0] == Q[0]:
            # opposite points, including doubling a 2-torsion point
            if (R[1] + Q[1]) % self.p == 0:
                return INF
            return self.double_aff(Q)

        lam = self.secant_slope(Q, R)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q == INF or Q[1] == 0:
            return INF

        lam = self.tangent_slope(Q)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def tangent_slope(self, Q: Point) -> int:
        """Return the slope of the tangent at Q.

        The tangent must not be vertical, i.e. Q[1] != 0.
        """
        num = 3 * Q[0] * Q[0] + self._a
        return num * mod_inv(2 * Q[1], self.p) % self.p

    def secant_slope(self, Q: Point, R: Point) -> int:
        """Return the slope of the secant through Q and R.

        The secant must not be vertical, i.e. Q[0] != R[0].
        """
        return (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p) % self.p
