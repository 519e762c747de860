#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecclib.ec.point` module."

import secrets

import pytest

from ecclib.ec.curve import CURVES, secp256k1
from ecclib.ec.field import FieldElement
from ecclib.ec.point import (
    Finite,
    Infinity,
    add,
    double,
    double_mult,
    finite,
    infinity,
    mult,
    negate,
    on_same_curve,
)
from ecclib.exceptions import (
    DifferentCurvesError,
    DifferentFieldsError,
    ECClibTypeError,
    ECClibValueError,
    NotOnCurveError,
)

# toy curve y^2 = x^3 + 7 over F_223
PRIME = 223
A = 0
B = 7
INF = infinity(A, B, PRIME)


def toy(x: int, y: int) -> Finite:
    return finite(x, y, A, B, PRIME)


def test_construction() -> None:

    for x, y in ((192, 105), (17, 56), (1, 193), (47, 71), (15, 86)):
        P = toy(x, y)
        assert P.x == FieldElement(x, PRIME)
        assert P.y == FieldElement(y, PRIME)

    for x, y in ((200, 119), (42, 99)):
        with pytest.raises(NotOnCurveError, match="is not on the curve"):
            toy(x, y)

    # the offending coordinates are carried by the error
    with pytest.raises(NotOnCurveError) as excinfo:
        toy(200, 119)
    assert excinfo.value.x == FieldElement(200, PRIME)
    assert excinfo.value.y == FieldElement(119, PRIME)

    # zero coordinates in the smallest fields: y^2 = x^3 + x over F_3
    P = finite(0, 0, 1, 0, 3)
    assert double(P) == infinity(1, 0, 3)
    assert mult(3, P) == P
    with pytest.raises(NotOnCurveError):
        finite(0, 1, 1, 0, 3)

    # coordinates are normalized before the curve equation check
    assert toy(192 - PRIME, 105 + 2 * PRIME) == toy(192, 105)

    # mixed fields are rejected, never coerced
    a = FieldElement(A, PRIME)
    b = FieldElement(B, PRIME)
    err_msg = "elements must be in the same field: "
    with pytest.raises(DifferentFieldsError, match=err_msg):
        Finite(FieldElement(192, 227), FieldElement(105, PRIME), a, b)
    with pytest.raises(DifferentFieldsError, match=err_msg):
        x = FieldElement(192, PRIME)
        y = FieldElement(105, PRIME)
        Finite(x, y, a, FieldElement(7, 227))
    with pytest.raises(DifferentFieldsError, match=err_msg):
        Infinity(a, FieldElement(7, 227))


def test_equality() -> None:
    assert toy(192, 105) == toy(192, 105)
    assert toy(192, 105) != toy(17, 56)
    assert INF == infinity(A, B, PRIME)
    assert INF != toy(192, 105)
    # infinities of different curves are different points
    assert INF != infinity(A, 5, PRIME)
    assert INF != infinity(A, B, 227)
    assert INF != secp256k1.INF
    assert len({INF, infinity(0, 7, 223), toy(17, 56), toy(17, 56)}) == 2

    assert on_same_curve(INF, toy(17, 56))
    assert not on_same_curve(INF, secp256k1.G)


def test_add() -> None:

    # identity
    for P in (toy(192, 105), toy(17, 56), toy(47, 71)):
        assert add(P, INF) == P
        assert add(INF, P) == P
        assert P + INF == P
        assert INF + P == P
    assert add(INF, INF) == INF

    # inverse
    for P in (toy(192, 105), toy(17, 56), toy(47, 71)):
        Q = toy(P.x.value, -P.y.value)
        assert add(P, Q) == INF
        assert negate(P) == Q
        assert -P == Q
        assert P + -P == INF
    assert negate(INF) == INF

    # general addition
    assert add(toy(192, 105), toy(17, 56)) == toy(170, 142)
    assert toy(192, 105) + toy(17, 56) == toy(170, 142)
    assert add(toy(17, 56), toy(192, 105)) == toy(170, 142)
    assert add(toy(170, 142), toy(60, 139)) == toy(220, 181)
    assert add(toy(47, 71), toy(17, 56)) == toy(215, 68)
    assert add(toy(143, 98), toy(76, 66)) == toy(47, 71)


def test_double() -> None:
    vectors = (
        ((192, 105), (49, 71)),
        ((143, 98), (64, 168)),
        ((47, 71), (36, 111)),
    )
    for (x, y), (x2, y2) in vectors:
        P = toy(x, y)
        assert double(P) == toy(x2, y2)
        # add dispatches to the doubling rule
        assert add(P, P) == toy(x2, y2)

    # vertical tangent
    P = toy(6, 0)
    assert double(P) == INF
    assert add(P, P) == INF
    assert negate(P) == P

    assert double(INF) == INF


def test_different_curves() -> None:
    P = toy(192, 105)
    err_msg = "points not on the same curve"
    with pytest.raises(DifferentCurvesError, match=err_msg):
        add(P, secp256k1.G)
    with pytest.raises(DifferentCurvesError, match=err_msg):
        add(P, infinity(A, 5, PRIME))
    with pytest.raises(DifferentCurvesError, match=err_msg):
        add(infinity(A, 5, PRIME), P)
    with pytest.raises(DifferentCurvesError, match=err_msg):
        double_mult(1, P, 1, secp256k1.G)

    with pytest.raises(ECClibTypeError, match="not a point: "):
        add(P, (17, 56))  # type: ignore
    with pytest.raises(ECClibTypeError, match="not a point: "):
        double((17, 56))  # type: ignore


def test_mult() -> None:
    P = toy(47, 71)
    multiples = {
        0: INF,
        1: P,
        2: toy(36, 111),
        4: toy(194, 51),
        8: toy(116, 55),
        17: toy(194, 172),
        20: toy(47, 152),
        21: INF,
    }
    for m, Q in multiples.items():
        assert mult(m, P) == Q
        assert m * P == Q

    G = toy(15, 86)
    order_7 = [INF, G, toy(139, 86), toy(69, 137), toy(69, 86), toy(139, 137)]
    order_7 += [toy(15, 137), INF]
    for m, Q in enumerate(order_7):
        assert mult(m, G) == Q
    # cyclic group of order 7
    assert mult(7 * 5 + 3, G) == toy(69, 137)

    assert mult(5, INF) == INF

    with pytest.raises(ECClibValueError, match="negative m: "):
        mult(-1, P)
    with pytest.raises(ECClibTypeError, match="not an int scalar: "):
        mult(2.0, P)  # type: ignore
    with pytest.raises(ECClibTypeError, match="not an int scalar: "):
        mult(True, P)  # type: ignore


def test_mult_distributivity() -> None:
    P = toy(47, 71)
    for m in range(0, 25):
        for n in range(0, 25):
            assert mult(m + n, P) == add(mult(m, P), mult(n, P))
            assert mult(m * n, P) == mult(m, mult(n, P))


def test_double_mult() -> None:
    H = toy(47, 71)
    G = toy(15, 86)
    for u in range(0, 22):
        for v in range(0, 8):
            assert double_mult(u, H, v, G) == add(mult(u, H), mult(v, G))

    ec = secp256k1
    H = mult(secrets.randbelow(ec.n - 1) + 1, ec.G)
    u = secrets.randbelow(ec.n)
    v = secrets.randbelow(ec.n)
    assert double_mult(u, H, v, ec.G) == add(mult(u, H), mult(v, ec.G))
    assert double_mult(0, H, 0, ec.G) == ec.INF
    assert double_mult(1, ec.G, 0, H) == ec.G
    assert double_mult(ec.n, H, ec.n, ec.G) == ec.INF

    with pytest.raises(ECClibValueError, match="negative first coefficient: "):
        double_mult(-1, H, 1, ec.G)
    with pytest.raises(ECClibValueError, match="negative second coefficient: "):
        double_mult(1, H, -1, ec.G)
    with pytest.raises(ECClibTypeError, match="not an int scalar: "):
        double_mult(True, H, 1, ec.G)  # type: ignore
    with pytest.raises(ECClibTypeError, match="not an int scalar: "):
        double_mult(1, H, 2.0, ec.G)  # type: ignore


def test_group_order() -> None:
    for ec in CURVES.values():
        assert mult(ec.n, ec.G) == ec.INF
        assert mult(ec.n - 1, ec.G) == negate(ec.G)
        assert mult(ec.n + 1, ec.G) == ec.G


def test_str() -> None:
    assert str(toy(192, 105)) == "(192, 105) on y^2 = x^3 + 0*x + 7"
    assert str(INF) == "INF on y^2 = x^3 + 0*x + 7"
