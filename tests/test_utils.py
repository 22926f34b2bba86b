#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectorus.utils` module."

import pytest

from ectorus.exceptions import ECTorusValueError
from ectorus.utils import hex_string, int_from_integer, int_repr


def test_int_from_integer() -> None:
    for i in (
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
        2 ** 255 - 19,
        10007,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(str(i))
        assert -i == int_from_integer(str(-i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))

    # digits only: decimal
    assert int_from_integer("11") == 11
    # hex-digits without prefix: hex
    assert int_from_integer("0b") == 11
    assert int_from_integer("de ad") == 0xDEAD
    assert int_from_integer(hex_string(34492435054806958080)) == 34492435054806958080

    with pytest.raises(ECTorusValueError, match="cannot parse integer: "):
        int_from_integer("eleven")


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    int_ = -1
    with pytest.raises(ECTorusValueError, match="negative integer: "):
        hex_string(int_)


def test_int_repr() -> None:
    assert int_repr(11) == "11"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x1FFFFFFFF) == "'01 FFFFFFFF'"
    assert int_repr(0xDEAD, threshold=0xFF) == "'DEAD'"
