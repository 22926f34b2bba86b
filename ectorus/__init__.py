#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ectorus package."

name = "ectorus"
__version__ = "2026.10.18"
__author__ = "The ectorus developers"
__author_email__ = "devs@ectorus.org"
__copyright__ = "Copyright (C) 2026 The ectorus developers"
__license__ = "MIT License"
