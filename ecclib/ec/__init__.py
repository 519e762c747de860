#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecclib.ec."""

from ecclib.ec.curve import CURVES, CurveParams, secp256k1
from ecclib.ec.field import FieldElement
from ecclib.ec.point import (
    Finite,
    Infinity,
    Point,
    add,
    double,
    double_mult,
    finite,
    infinity,
    mult,
    negate,
    on_same_curve,
)

__all__ = [
    "CURVES",
    "CurveParams",
    "secp256k1",
    "FieldElement",
    "Finite",
    "Infinity",
    "Point",
    "add",
    "double",
    "double_mult",
    "finite",
    "infinity",
    "mult",
    "negate",
    "on_same_curve",
]
