#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectorus.number_theory` module."

import pytest

from ectorus import number_theory
from ectorus.exceptions import (
    AlgorithmFailure,
    ECTorusRuntimeError,
    ECTorusValueError,
    NoInverseError,
    NonResidueError,
)
from ectorus.number_theory import (
    is_probable_prime,
    legendre_symbol,
    mod_inv,
    mod_sqrt,
    tonelli,
    xgcd,
)

primes = [
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    257,
    9739,
    10007,
    2 ** 127 - 1,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 521 - 1,
]


def test_xgcd() -> None:
    for a, b in ((240, 46), (17, 5), (0, 7), (12, 18)):
        g, x, y = xgcd(a, b)
        assert a * x + b * y == g


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(NoInverseError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        with pytest.raises(NoInverseError, match="No inverse for 0 mod"):
            mod_inv(p, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            inv = mod_inv(-a, p)
            assert -a * inv % p == 1


def test_mod_inv() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inv(a, m)
                assert a * inv % m == 1
                inv = mod_inv(a + m, m)
                assert a * inv % m == 1
            else:
                err_msg = "No inverse for "
                with pytest.raises(NoInverseError, match=err_msg):
                    mod_inv(a, m)

    # NoInverseError is a ValueError
    with pytest.raises(ValueError):
        mod_inv(6, 9)


def test_legendre_symbol() -> None:
    for p in primes[:29]:  # exhaustable only for small p
        squares = {i * i % p for i in range(1, p)}
        assert legendre_symbol(0, p) == 0
        assert legendre_symbol(p, p) == 0
        for a in range(1, p):
            expected = 1 if a in squares else -1
            assert legendre_symbol(a, p) == expected
            assert legendre_symbol(a + p, p) == expected
            assert legendre_symbol(a - p, p) == expected


def test_mod_sqrt() -> None:
    for p in primes[:29]:  # exhaustable only for small p
        has_root = {0, 1}
        for i in range(2, p):
            has_root.add(i * i % p)
        for i in range(p):
            if i in has_root:
                root1 = mod_sqrt(i, p)
                assert i == (root1 * root1) % p
                root2 = p - root1
                assert i == (root2 * root2) % p
                root = mod_sqrt(i + p, p)
                assert i == (root * root) % p
                assert tonelli(i, p) in (root1, root2, 0)
            else:
                with pytest.raises(NonResidueError, match="no root for "):
                    mod_sqrt(i, p)
                with pytest.raises(NonResidueError, match="no root for "):
                    tonelli(i, p)

    assert mod_sqrt(0, 13) == 0
    assert tonelli(0, 17) == 0


def test_mod_sqrt2() -> None:
    # https://rosettacode.org/wiki/Tonelli-Shanks_algorithm#Python
    ttest = [
        (10, 13),
        (56, 101),
        (1030, 10009),
        (44402, 100049),
        (665820697, 1000000009),
        (881398088036, 1000000000039),
        (41660815127637347468140745042827704103445750172002, 10 ** 50 + 577),
    ]
    for i, p in ttest:
        root = tonelli(i, p)
        assert i == (root * root) % p
        root = mod_sqrt(i, p)
        assert i == (root * root) % p


def test_minus_one_quadr_res() -> None:
    "Ensure that if p = 3 (mod 4) then p - 1 is not a quadratic residue"
    for p in primes:
        if (p % 4) == 3:
            with pytest.raises(NonResidueError, match="no root for "):
                mod_sqrt(p - 1, p)
        else:
            assert p % 4 == 1, "something is badly broken"
            root = mod_sqrt(p - 1, p)
            assert p - 1 == root * root % p


def test_tonelli_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    "A non-residue slipping through the Legendre check breaks the descent."

    real_legendre_symbol = number_theory.legendre_symbol

    def fake_legendre_symbol(a: int, p: int) -> int:
        # 3 is a primitive root mod 17
        return 1 if a % p == 3 else real_legendre_symbol(a, p)

    monkeypatch.setattr(number_theory, "legendre_symbol", fake_legendre_symbol)
    err_msg = "Tonelli-Shanks failure for 3 mod 17"
    with pytest.raises(AlgorithmFailure, match=err_msg):
        number_theory.tonelli(3, 17)

    # AlgorithmFailure is a RuntimeError
    assert issubclass(AlgorithmFailure, ECTorusRuntimeError)
    assert issubclass(AlgorithmFailure, RuntimeError)
    assert issubclass(NonResidueError, ECTorusValueError)


def test_is_probable_prime() -> None:
    for p in [2, 3] + primes:
        assert is_probable_prime(p)

    for n in (-7, 0, 1, 4, 9, 15, 91, 561, 1105, 41041, 10005):
        assert not is_probable_prime(n)

    # strong pseudoprime to bases 2, 3, 5 and 7
    assert not is_probable_prime(3215031751)
    # no small factor
    assert not is_probable_prime((6 * 1000003 + 1) * (12 * 1000003 + 1))
    assert not is_probable_prime((2 ** 127 - 1) * (2 ** 61 - 1))
