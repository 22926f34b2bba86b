#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The two base classes are only meant to discriminate between Exceptions
raised by ectorus from those raised by other codebase:
users are usually better off just dealing with the regular
ValueError and RuntimeError from which the ectorus versions are derived.

The derived classes name the failure kinds of a line walk.
Apart from ConfigurationError and NoSeedFoundError,
they all signal a broken internal invariant, never a retryable condition.
"""


class ECTorusValueError(ValueError):
    pass


class ECTorusRuntimeError(RuntimeError):
    pass


class ConfigurationError(ECTorusValueError):
    "Invalid curve parameters or run options."


class NoInverseError(ECTorusValueError):
    "Modular inverse of a non invertible element."


class NonResidueError(ECTorusValueError):
    "Square root of a quadratic non-residue."


class AlgorithmFailure(ECTorusRuntimeError):
    "Unreachable state in the Tonelli-Shanks descent."


class NoSeedFoundError(ECTorusRuntimeError):
    "The seed search exhausted its retry budget."
