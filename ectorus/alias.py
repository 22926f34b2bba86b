#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# allowed representations are (see ectorus.utils.int_from_integer):
# 3735928559
# -3735928559
# "0xdeadbeef"
# "-0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# The infinity point in affine coordinates.
#
# Over a generic group the 2-torsion points (x, 0) are legitimate
# affine points, so y=0 cannot flag the infinity point:
# negative coordinates are used instead,
# as no reduced affine point can have them.
# It can be checked with 'Q == INF'
INF: Point = (-1, -1)
