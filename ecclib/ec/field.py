#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field elements.

A FieldElement is a residue modulo a prime p,
always stored in its normalized representation 0 <= value < p.

The modulus is only checked to be greater than one:
inversion and exponent reduction rely on Fermat's little theorem,
so the caller must guarantee p to be prime.
"""

from __future__ import annotations

from typing import Union

from ecclib.alias import Integer
from ecclib.exceptions import (
    DifferentFieldsError,
    ECClibTypeError,
    ECClibValueError,
    InvalidPrimeError,
)
from ecclib.utils import int_from_integer, int_repr


class FieldElement:
    """Element of the prime field Fp.

    Instances are immutable: arithmetic returns new elements.
    Elements of different fields never mix: a DifferentFieldsError is
    raised instead of promoting or truncating either operand.
    """

    __slots__ = ("_num", "_prime")

    def __init__(self, num: Integer, prime: Integer) -> None:
        num = int_from_integer(num)
        prime = int_from_integer(prime)
        if prime <= 1:
            raise InvalidPrimeError(prime)
        # reduce, shift, reduce: result in [0, prime-1] even for negative num
        self._num = ((num % prime) + prime) % prime
        self._prime = prime

    @property
    def value(self) -> int:
        return self._num

    @property
    def modulus(self) -> int:
        return self._prime

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._num == other._num and self._prime == other._prime

    def __hash__(self) -> int:
        return hash((self._num, self._prime))

    def __repr__(self) -> str:
        return f"FieldElement({int_repr(self._num)}, {int_repr(self._prime)})"

    def __str__(self) -> str:
        return f"FieldElement_{self._prime}({self._num})"

    def _new(self, num: int) -> FieldElement:
        return FieldElement(num, self._prime)

    def _require_same_field(self, other: FieldElement) -> None:
        if not isinstance(other, FieldElement):
            raise ECClibTypeError(f"not a FieldElement: {other!r}")
        if self._prime != other._prime:
            raise DifferentFieldsError(self._prime, other._prime)

    def is_zero(self) -> bool:
        return self._num == 0

    def is_odd(self) -> bool:
        "Return the parity of the normalized residue."
        return self._num % 2 == 1

    def add(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        return self._new((self._num + other._num) % self._prime)

    def sub(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        # adding p avoids the negative intermediate value
        return self._new((self._num - other._num + self._prime) % self._prime)

    def neg(self) -> FieldElement:
        return self._new((self._prime - self._num) % self._prime)

    def mul(self, other: Union[FieldElement, int]) -> FieldElement:
        """Return the product with another element of the same field.

        A plain int is accepted as scalar coefficient,
        e.g. the 3 in 3*x^2.
        """
        if isinstance(other, int) and not isinstance(other, bool):
            return self._new(self._num * other % self._prime)
        self._require_same_field(other)
        return self._new(self._num * other._num % self._prime)

    def pow(self, exponent: int) -> FieldElement:
        """Return self^exponent.

        The exponent is reduced mod p-1 before exponentiating,
        as the multiplicative group has order p-1:
        negative exponents become their non-negative residue
        and yield powers of the inverse.
        The reduction applies to zero too, so 0^e is 1
        whenever e is a multiple of p-1.
        """
        exponent = int_from_integer(exponent)
        n = exponent % (self._prime - 1)
        return self._new(pow(self._num, n, self._prime))

    def inverse(self) -> FieldElement:
        "Return the multiplicative inverse as self^(p-2)."
        if self._num == 0:
            raise ECClibValueError(f"no inverse for 0 mod {int_repr(self._prime)}")
        return self._new(pow(self._num, self._prime - 2, self._prime))

    def div(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        return self.mul(other.inverse())

    # operators are thin wrappers around the named methods

    def __add__(self, other: FieldElement) -> FieldElement:
        return self.add(other)

    def __sub__(self, other: FieldElement) -> FieldElement:
        return self.sub(other)

    def __mul__(self, other: Union[FieldElement, int]) -> FieldElement:
        return self.mul(other)

    def __rmul__(self, other: int) -> FieldElement:
        return self.mul(other)

    def __truediv__(self, other: FieldElement) -> FieldElement:
        return self.div(other)

    def __pow__(self, exponent: int) -> FieldElement:
        return self.pow(exponent)

    def __neg__(self) -> FieldElement:
        return self.neg()
