#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup counting functions.

count_points gives the exact group order with an O(p) Legendre scan:
it is the stopping target of a line walk.

find_all_points is meant to explore low-cardinality CurveGroup,
as an oracle for testing.
"""

from math import isqrt
from typing import List, Tuple

from ectorus.alias import INF, Point
from ectorus.curve_group import CurveGroup
from ectorus.exceptions import ECTorusValueError
from ectorus.number_theory import legendre_symbol


def count_points(ec: CurveGroup) -> int:
    """Return the number of group points, INF included.

    Each x contributes 1 + (y2(x)|p) points:
    two for a non-zero quadratic residue,
    one for zero, none for a non-residue.
    """
    count = 1  # INF
    for x in range(ec.p):
        count += 1 + legendre_symbol(ec.y2(x), ec.p)
    return count


def hasse_bounds(p: int) -> Tuple[int, int]:
    "Return the Hasse interval [p + 1 - 2√p, p + 1 + 2√p] of the group order."
    # 2√p = √(4p), rounded inwards
    r = isqrt(4 * p)
    return p + 1 - r, p + 1 + r


def find_all_points(ec: CurveGroup) -> List[Point]:
    """Attempt to find all group points, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > 10000:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise ECTorusValueError(err_msg)

    points: List[Point] = [INF]
    for x in range(ec.p):
        try:
            y = ec.y(x)
        except ECTorusValueError:
            continue

        points.append((x, y))
        if y != 0:
            points.append((x, ec.p - y))

    return points
