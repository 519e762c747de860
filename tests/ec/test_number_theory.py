#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.ec.number_theory` module."

import pytest

from ecclib.ec.number_theory import is_probable_prime, mod_inv
from ecclib.exceptions import ECClibValueError

primes = [
    2,
    3,
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
    223,
    2 ** 160 - 2 ** 31 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 521 - 1,
]

composites = [-7, 0, 1, 4, 9, 15, 21, 25, 27, 33, 35, 49, 91, 221, 2 ** 256]


def test_is_probable_prime() -> None:
    for p in primes:
        assert is_probable_prime(p)
    for c in composites:
        assert not is_probable_prime(c)


def test_mod_inv_prime() -> None:
    for p in primes:
        if p > 1000:
            test_range = [1, 2, 3, p // 2, p - 2, p - 1]
        else:
            test_range = list(range(1, p))
        for a in test_range:
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            # congruent inputs share the inverse
            assert mod_inv(a + p, p) == inv
            assert mod_inv(a - p, p) == inv

        err_msg = "no inverse for 0 mod "
        with pytest.raises(ECClibValueError, match=err_msg):
            mod_inv(0, p)
        with pytest.raises(ECClibValueError, match=err_msg):
            mod_inv(p, p)
