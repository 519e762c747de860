#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve parameters.

A CurveParams instance is the read-only configuration
(field prime p, curve coefficients a and b, generator G, group order n)
injected into key generation, signing, and verification.

Parameters shipped with the package are stored in _data/curves.json:

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
"""

from __future__ import annotations

import json
import logging
from os import path
from typing import Dict, Sequence, Union

from ecclib.alias import Integer
from ecclib.ec.field import FieldElement
from ecclib.ec.number_theory import is_probable_prime
from ecclib.ec.point import Finite, Infinity, mult
from ecclib.exceptions import (
    DifferentCurvesError,
    ECClibValueError,
    InvalidModulusError,
)
from ecclib.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)


class CurveParams:
    """Prime order subgroup of the points of an elliptic curve over Fp.

    Parameters are checked according to SEC 1 v.2 3.1.1.2.1,
    with primality assessed by a Fermat test.
    """

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Finite, Sequence[Integer]],
        n: Integer,
        name: str = "",
    ) -> None:
        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)
        n = int_from_integer(n)

        # 1. check that p is a prime
        if not is_probable_prime(p):
            raise InvalidModulusError(f"p is not prime: {int_repr(p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if not 0 <= a < p:
            raise ECClibValueError(f"a not in 0..p-1: {a}")
        if not 0 <= b < p:
            raise ECClibValueError(f"b not in 0..p-1: {b}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise ECClibValueError("zero discriminant")

        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        a_fe = FieldElement(a, p)
        b_fe = FieldElement(b, p)
        if isinstance(G, Finite):
            if G.a != a_fe or G.b != b_fe:
                raise DifferentCurvesError()
        elif isinstance(G, Infinity):
            raise ECClibValueError("INF point cannot be a generator")
        else:
            if len(G) != 2:
                raise ECClibValueError("generator must be a sequence[int, int]")
            x_G = FieldElement(int_from_integer(G[0]), p)
            y_G = FieldElement(int_from_integer(G[1]), p)
            G = Finite(x_G, y_G, a_fe, b_fe)

        # 5. Check that n is prime.
        if not is_probable_prime(n):
            raise InvalidModulusError(f"n is not prime: {int_repr(n)}")

        # 7. Check that nG = INF
        if not isinstance(mult(n, G), Infinity):
            raise InvalidModulusError(f"n is not the group order: {int_repr(n)}")

        self.name = name
        self.p = p
        self.a = a
        self.b = b
        self.G = G
        self.INF = Infinity(a_fe, b_fe)
        self.n = n
        # bit-length and byte-length of the group order
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8

    @property
    def field_prime(self) -> int:
        return self.p

    @property
    def generator(self) -> Finite:
        return self.G

    @property
    def order(self) -> int:
        return self.n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveParams):
            return NotImplemented
        return (self.p, self.a, self.b, self.G, self.n) == (
            other.p,
            other.a,
            other.b,
            other.G,
            other.n,
        )

    def __hash__(self) -> int:
        return hash((self.p, self.a, self.b, self.G, self.n))

    def __str__(self) -> str:
        result = f"Curve {self.name}" if self.name else "Curve"
        result += f"\n p   = {int_repr(self.p)}"
        result += f"\n a   = {int_repr(self.a)}"
        result += f"\n b   = {int_repr(self.b)}"
        result += f"\n x_G = {int_repr(self.G.x.value)}"
        result += f"\n y_G = {int_repr(self.G.y.value)}"
        result += f"\n n   = {int_repr(self.n)}"
        return result

    def __repr__(self) -> str:
        result = f"CurveParams({int_repr(self.p)}, {int_repr(self.a)}"
        result += f", {int_repr(self.b)}"
        result += f", ({int_repr(self.G.x.value)}, {int_repr(self.G.y.value)})"
        result += f", {int_repr(self.n)})"
        return result

    def point(self, x: Integer, y: Integer) -> Finite:
        "Return the finite point (x, y) of this curve, checking the equation."
        return Finite(
            FieldElement(x, self.p),
            FieldElement(y, self.p),
            self.G.a,
            self.G.b,
        )

    def is_on_curve(self, P: object) -> bool:
        "Return True if P is a point (INF included) of this curve."
        return isinstance(P, (Infinity, Finite)) and P.a == self.G.a and P.b == self.G.b


def _load_curves(filename: str) -> Dict[str, CurveParams]:
    with open(filename, "r", encoding="ascii") as file_:
        curves_params = json.load(file_)
    curves: Dict[str, CurveParams] = {}
    for ec_name, (p, a, b, G, n) in curves_params.items():
        curves[ec_name] = CurveParams(p, a, b, G, n, ec_name)
        logger.debug("loaded curve parameters: %s", ec_name)
    return curves


datadir = path.join(path.dirname(__file__), "_data")
CURVES = _load_curves(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]
