#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points and group law over Fp.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp,
together with a point at infinity.

A point is one of two variants:

* Infinity(a, b): the group identity of the (a, b) curve
* Finite(x, y, a, b): a point whose coordinates satisfy the equation

The curve coefficients are part of the point itself,
so that the identity element belongs to one specific curve:
infinities of different curves are not equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ecclib.ec.field import FieldElement
from ecclib.exceptions import (
    DifferentCurvesError,
    DifferentFieldsError,
    ECClibTypeError,
    ECClibValueError,
    NotOnCurveError,
)


@dataclass(frozen=True)
class Infinity:
    "The point at infinity of the y^2 = x^3 + a*x + b curve."

    a: FieldElement
    b: FieldElement

    def __post_init__(self) -> None:
        if self.a.modulus != self.b.modulus:
            raise DifferentFieldsError(self.a.modulus, self.b.modulus)

    def __str__(self) -> str:
        return f"INF on y^2 = x^3 + {self.a.value}*x + {self.b.value}"

    def __add__(self, other: Point) -> Point:
        return add(self, other)

    def __rmul__(self, m: int) -> Point:
        return mult(m, self)

    def __neg__(self) -> Point:
        return negate(self)


@dataclass(frozen=True)
class Finite:
    """Affine point (x, y) of the y^2 = x^3 + a*x + b curve.

    The curve equation is verified at construction time,
    whatever the construction path: a NotOnCurveError is raised
    if it does not hold.
    """

    x: FieldElement
    y: FieldElement
    a: FieldElement
    b: FieldElement

    def __post_init__(self) -> None:
        p = self.a.modulus
        for element in (self.b, self.x, self.y):
            if element.modulus != p:
                raise DifferentFieldsError(p, element.modulus)

        # y^2 = x^3 + a*x + b
        lhs = self.y.mul(self.y)
        rhs = self.x.mul(self.x).mul(self.x).add(self.a.mul(self.x)).add(self.b)
        if lhs != rhs:
            raise NotOnCurveError(self.x, self.y)

    def __str__(self) -> str:
        return (
            f"({self.x.value}, {self.y.value}) on "
            f"y^2 = x^3 + {self.a.value}*x + {self.b.value}"
        )

    def __add__(self, other: Point) -> Point:
        return add(self, other)

    def __rmul__(self, m: int) -> Point:
        return mult(m, self)

    def __neg__(self) -> Point:
        return negate(self)


Point = Union[Infinity, Finite]


def finite(x: int, y: int, a: int, b: int, p: int) -> Finite:
    "Return the finite point (x, y) of the y^2 = x^3 + a*x + b curve over Fp."
    return Finite(
        FieldElement(x, p), FieldElement(y, p), FieldElement(a, p), FieldElement(b, p)
    )


def infinity(a: int, b: int, p: int) -> Infinity:
    "Return the point at infinity of the y^2 = x^3 + a*x + b curve over Fp."
    return Infinity(FieldElement(a, p), FieldElement(b, p))


def _require_point(P: Point) -> None:
    if not isinstance(P, (Infinity, Finite)):
        raise ECClibTypeError(f"not a point: {P!r}")


def on_same_curve(P: Point, Q: Point) -> bool:
    "Return True if the two points share the (a, b) curve coefficients."
    return P.a == Q.a and P.b == Q.b


def negate(P: Point) -> Point:
    "Return the opposite point, i.e. the reflection across the x-axis."
    _require_point(P)
    if isinstance(P, Infinity):
        return P
    return Finite(P.x, P.y.neg(), P.a, P.b)


def double(P: Point) -> Point:
    "Return P + P."
    _require_point(P)
    if isinstance(P, Infinity):
        return P

    # vertical tangent
    if P.y.is_zero():
        return Infinity(P.a, P.b)

    # m = (3x^2 + a) / (2y)
    m = P.x.mul(P.x).mul(3).add(P.a).div(P.y.mul(2))
    x3 = m.mul(m).sub(P.x.mul(2))
    y3 = m.mul(P.x.sub(x3)).sub(P.y)
    return Finite(x3, y3, P.a, P.b)


def add(P: Point, Q: Point) -> Point:
    "Return the sum of two points of the same curve."
    _require_point(P)
    _require_point(Q)
    if not on_same_curve(P, Q):
        raise DifferentCurvesError()

    # identity checks precede any coordinate arithmetic
    if isinstance(P, Infinity):
        return Q
    if isinstance(Q, Infinity):
        return P

    if P.x == Q.x:
        if P.y == Q.y:
            return double(P)
        # opposite points
        return Infinity(P.a, P.b)

    # m = (y2 - y1) / (x2 - x1)
    m = Q.y.sub(P.y).div(Q.x.sub(P.x))
    x3 = m.mul(m).sub(P.x).sub(Q.x)
    y3 = m.mul(P.x.sub(x3)).sub(P.y)
    return Finite(x3, y3, P.a, P.b)


def mult(m: int, P: Point) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient.

    It is not constant-time.

    The m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """
    _require_point(P)
    if isinstance(m, bool) or not isinstance(m, int):
        raise ECClibTypeError(f"not an int scalar: {m!r}")
    if m < 0:
        raise ECClibValueError(f"negative m: {hex(m)}")

    # R is the running result, Q the current doubling of P
    R: Point = Infinity(P.a, P.b)
    Q = P
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = add(R, Q)
        # the doubling part of 'double & add'
        Q = double(Q)
        # remove the bit just accounted for
        m >>= 1
    return R


def double_mult(u: int, H: Point, v: int, Q: Point) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients.

    Strauss algorithm consists of a single 'double & add' loop
    for the parallel calculation of u*H and v*Q, efficiently
    using a single 'doubling' for both scalar multiplications.
    The Shamir trick adds the precomputation of H+Q,
    which is to be added in the loop when the binary digits
    of u and v are both equal to 1.

    The result is the same as add(mult(u, H), mult(v, Q)).
    """
    _require_point(H)
    _require_point(Q)
    if not on_same_curve(H, Q):
        raise DifferentCurvesError()
    for m in (u, v):
        if isinstance(m, bool) or not isinstance(m, int):
            raise ECClibTypeError(f"not an int scalar: {m!r}")
    if u < 0:
        raise ECClibValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise ECClibValueError(f"negative second coefficient: {hex(v)}")

    # at each step one of the following points will be added
    T = [Infinity(H.a, H.b), H, Q, add(H, Q)]
    # which one depends on binary digit for that step
    ui = bin(u)[2:]
    vi = bin(v)[2:].zfill(len(ui))
    ui = ui.zfill(len(vi))
    digits = [int(j) + 2 * int(k) for j, k in zip(ui, vi)]
    R = T[digits[0]]
    for i in digits[1:]:
        R = add(double(R), T[i])
    return R
