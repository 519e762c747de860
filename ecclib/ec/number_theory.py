#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Scalar arithmetic modulo the group order n is performed on plain ints;
these helpers share the Fermat-based approach of the field layer.
"""

from ecclib.exceptions import ECClibValueError
from ecclib.utils import int_repr


def is_probable_prime(p: int) -> bool:
    """Return True if p passes a base-2 Fermat test.

    Fermat test will do as _probabilistic_ primality test:
    it is meant to catch parameter typos, not adversarial composites.
    """
    if p == 2:
        return True
    return p > 2 and p % 2 == 1 and pow(2, p - 1, p) == 1


def mod_inv(a: int, p: int) -> int:
    """Return the inverse of a (mod p); p must be a prime.

    Fermat's little theorem: a^(p-2) * a = a^(p-1) = 1 (mod p).
    """

    a %= p
    if a == 0:
        raise ECClibValueError(f"no inverse for 0 mod {int_repr(p)}")
    return pow(a, p - 2, p)
