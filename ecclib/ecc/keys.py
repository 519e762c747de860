#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private/public key pairs.

A private key is a scalar q in [1, n-1];
its public key is the curve point Q = q*G,
fully determined by the private key.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Tuple, Union

from ecclib.alias import Octets
from ecclib.ec.curve import CurveParams, secp256k1
from ecclib.ec.point import Finite, Infinity, Point, mult
from ecclib.exceptions import (
    DifferentCurvesError,
    ECClibValueError,
    InvalidPrivateKeyError,
)
from ecclib.utils import bytes_from_octets


@dataclass(frozen=True)
class PrivateKey:
    "Scalar in [1, n-1] of the given curve."

    q: int = field(repr=False)
    ec: CurveParams = secp256k1

    def __post_init__(self) -> None:
        if isinstance(self.q, bool) or not isinstance(self.q, int):
            raise InvalidPrivateKeyError(f"not an int private key: {type(self.q)}")
        if not 0 < self.q < self.ec.n:
            raise InvalidPrivateKeyError("private key not in 1..n-1")

    @classmethod
    def generate(cls, ec: CurveParams = secp256k1) -> PrivateKey:
        "Return a private key drawn uniformly from [1, n-1]."
        return cls(1 + secrets.randbelow(ec.n - 1), ec)

    @classmethod
    def from_bytes(cls, data: Octets, ec: CurveParams = secp256k1) -> PrivateKey:
        "Return the private key from its n_size bytes big-endian encoding."
        try:
            data = bytes_from_octets(data, ec.n_size)
        except ValueError as e:
            raise InvalidPrivateKeyError(f"not a private key: {e}") from e
        return cls(int.from_bytes(data, byteorder="big", signed=False), ec)

    def to_bytes(self) -> bytes:
        return self.q.to_bytes(self.ec.n_size, byteorder="big", signed=False)

    def public_key(self) -> PublicKey:
        return PublicKey(mult(self.q, self.ec.G), self.ec)


@dataclass(frozen=True)
class PublicKey:
    "Finite point of the given curve, i.e. q*G for some private key q."

    Q: Finite
    ec: CurveParams = secp256k1

    def __post_init__(self) -> None:
        if isinstance(self.Q, Infinity):
            raise ECClibValueError("INF is not a valid public key")
        if not isinstance(self.Q, Finite):
            raise ECClibValueError(f"not a point: {self.Q!r}")
        if not self.ec.is_on_curve(self.Q):
            raise DifferentCurvesError()


PrvKey = Union[int, bytes, str, PrivateKey]
Key = Union[Point, PublicKey, PrivateKey]


def int_from_prv_key(prv_key: PrvKey, ec: CurveParams = secp256k1) -> int:
    """Return a verified-as-valid private key integer.

    It supports:

    - PrivateKey
    - integer (native int)
    - n_size bytes (bytes or hex-string)
    """

    if isinstance(prv_key, PrivateKey):
        if prv_key.ec != ec:
            raise InvalidPrivateKeyError("private key curve mismatch")
        return prv_key.q

    if isinstance(prv_key, (bytes, str)):
        return PrivateKey.from_bytes(prv_key, ec).q

    if isinstance(prv_key, bool) or not isinstance(prv_key, int):
        raise InvalidPrivateKeyError(f"not a private key: {prv_key!r}")
    if not 0 < prv_key < ec.n:
        raise InvalidPrivateKeyError(f"private key not in 1..n-1: {hex(prv_key)}")
    return prv_key


def point_from_key(key: Key, ec: CurveParams = secp256k1) -> Finite:
    """Return a verified-as-valid public key point.

    It supports:

    - PublicKey
    - PrivateKey, deriving its public key
    - Finite point of the ec curve
    """

    if isinstance(key, PrivateKey):
        key = key.public_key()
    if isinstance(key, PublicKey):
        if key.ec != ec:
            raise DifferentCurvesError()
        return key.Q
    return PublicKey(key, ec).Q  # type: ignore


def gen_keys(
    prv_key: PrvKey | None = None, ec: CurveParams = secp256k1
) -> Tuple[PrivateKey, PublicKey]:
    """Return a private/public key-pair.

    If the private key is not provided,
    it is drawn from the operating system CSPRNG.
    """
    if prv_key is None:
        q = PrivateKey.generate(ec)
    else:
        q = PrivateKey(int_from_prv_key(prv_key, ec), ec)
    return q, q.public_key()
