#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from ectorus.alias import Integer
from ectorus.exceptions import ECTorusValueError


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "3735928559"
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * b'\xde\xad\xbe\xef'

    Unlike hex-strings in binary-oriented code,
    a bare digit string is read as a decimal number:
    curve parameters are usually written that way.
    A string with hex-digits but no '0x' prefix is read as hex.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        if i.lstrip("-").isdecimal():
            return int(i, 10)
        try:
            i = bytes.fromhex(i)
        except ValueError as e:
            raise ECTorusValueError(f"cannot parse integer: '{i}'") from e

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECTorusValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int, threshold: int = 0xFFFFFFFF) -> str:
    "Return the decimal repr of i, or its quoted hex-string if above threshold."
    return f"'{hex_string(i)}'" if i > threshold else f"{i}"
