#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

specialized with canonical 'lower-s' form
to avoid producing malleable signatures.

Functions with a trailing underscore (sign_, verify_, ...) take the
message digest already reduced to a scalar in [0, n-1];
the ones without take the message and hash it first
(see ecclib.hashes.hash_and_reduce).
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass
from hashlib import sha256

from ecclib.alias import HashF, Octets
from ecclib.ec.curve import CurveParams, secp256k1
from ecclib.ec.number_theory import mod_inv
from ecclib.ec.point import Finite, Infinity, double_mult, mult
from ecclib.ecc.keys import Key, PrvKey, int_from_prv_key, point_from_key
from ecclib.ecc.rfc6979_nonce import _rfc6979_nonce_
from ecclib.exceptions import (
    ECClibRuntimeError,
    ECClibValueError,
    InvalidHashError,
    InvalidNonceError,
    InvalidRError,
)
from ecclib.hashes import hash_and_reduce
from ecclib.utils import int_repr

logger = logging.getLogger(__name__)

# sanity cap on randomized-nonce signing attempts
MAX_SIGN_ATTEMPTS = 10_000


@dataclass(frozen=True)
class Sig:
    """ECDSA signature (r, s).

    Both r and s are scalars in [1, n-1];
    there are two valid s values for every signature (s and n - s)
    and signing returns the lower one.
    """

    # 0 < r < ec.n (ec.n is the curve order)
    r: int
    # 0 < s < ec.n (ec.n is the curve order)
    s: int
    ec: CurveParams = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < self.ec.n:
            raise ECClibValueError(f"scalar r not in 1..n-1: {int_repr(abs(self.r))}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < self.ec.n:
            raise ECClibValueError(f"scalar s not in 1..n-1: {int_repr(abs(self.s))}")

    def is_low_s(self) -> bool:
        return self.s <= self.ec.n // 2


def _check_msg_hash(msg_hash: int, ec: CurveParams) -> None:
    if isinstance(msg_hash, bool) or not isinstance(msg_hash, int):
        raise InvalidHashError(f"not an int digest: {msg_hash!r}")
    if not 0 <= msg_hash < ec.n:
        raise InvalidHashError(f"digest not in 0..n-1: {hex(msg_hash)}")


def _sign_(c: int, q: int, nonce: int, lower_s: bool, ec: CurveParams) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # It assume that c is in [0, n-1], while q and nonce are in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = mult(nonce, ec.G)  # 1
    if not isinstance(K, Finite):
        raise InvalidNonceError("failed to sign: nonce*G = INF")

    # affine x_K-coordinate of K is a field element:
    # mod n makes it a scalar
    r = K.x.value % ec.n  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise InvalidRError("failed to sign: r = 0")

    s = mod_inv(nonce, ec.n) * (c + r * q) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise InvalidHashError("failed to sign: s = 0")

    # canonical 'low-s' encoding for ECDSA signatures
    # removes signature malleability
    if lower_s and s > ec.n // 2:
        s = ec.n - s

    return Sig(r, s, ec)


def sign_(
    msg_hash: int,
    prv_key: PrvKey,
    nonce: PrvKey | None = None,
    lower_s: bool = True,
    ec: CurveParams = secp256k1,
    hf: HashF = sha256,
) -> Sig:
    """Sign a digest, already reduced mod n, according to ECDSA.

    If the nonce is not provided, the RFC6979 deterministic nonce is used;
    hf is the hash function HMAC is built upon.
    """
    _check_msg_hash(msg_hash, ec)

    # the secret key q: an integer in the range 1..n-1.
    # SEC 1 v.2 section 3.2.1
    q = int_from_prv_key(prv_key, ec)

    # nonce: an integer in the range 1..n-1.
    if nonce is None:
        nonce = _rfc6979_nonce_(msg_hash, q, ec, hf)  # 1
    else:
        try:
            nonce = int_from_prv_key(nonce, ec)
        except ECClibValueError as e:
            raise InvalidNonceError(f"invalid nonce: {e}") from e

    # second part delegated to helper function
    return _sign_(msg_hash, q, nonce, lower_s, ec)


def sign_random_(
    msg_hash: int,
    prv_key: PrvKey,
    lower_s: bool = True,
    ec: CurveParams = secp256k1,
) -> Sig:
    """Sign a digest, already reduced mod n, with a random nonce.

    The nonce is drawn from the operating system CSPRNG;
    the whole signing step is retried if it results in r = 0 or s = 0.
    """
    _check_msg_hash(msg_hash, ec)
    q = int_from_prv_key(prv_key, ec)

    for _ in range(MAX_SIGN_ATTEMPTS):
        nonce = 1 + secrets.randbelow(ec.n - 1)
        try:
            return _sign_(msg_hash, q, nonce, lower_s, ec)
        except (InvalidRError, InvalidHashError):
            logger.debug("random nonce gave r = 0 or s = 0: retrying")

    err_msg = f"failed to sign after {MAX_SIGN_ATTEMPTS} random nonces"
    raise InvalidNonceError(err_msg)


def sign(
    msg: Octets,
    prv_key: PrvKey,
    nonce: PrvKey | None = None,
    lower_s: bool = True,
    ec: CurveParams = secp256k1,
    hf: HashF = sha256,
) -> Sig:
    """ECDSA signature with canonical low-s preference.

    Implemented according to SEC 1 v.2
    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    a sequence of bits of length *hf_len*,
    whose leftmost *nlen* bits are then reduced mod n.

    RFC6979 is used for deterministic nonce.

    See https://tools.ietf.org/html/rfc6979#section-3.2
    """
    msg_hash = hash_and_reduce(msg, ec, hf)
    return sign_(msg_hash, prv_key, nonce, lower_s, ec, hf)


def _assert_as_valid_(
    c: int, Q: Finite, r: int, s: int, lower_s: bool, ec: CurveParams
) -> None:
    # Private function for test/dev purposes

    if lower_s and s > ec.n // 2:
        raise ECClibValueError("not a low s")

    w = mod_inv(s, ec.n)  # 2
    u = c * w % ec.n  # 3
    v = r * w % ec.n
    # Let K = u*G + v*Q.
    K = double_mult(u, ec.G, v, Q)  # 4

    # Fail if infinite(K).
    if isinstance(K, Infinity):  # 5
        raise ECClibRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K.x.value % ec.n:  # 5
        raise ECClibRuntimeError("signature verification failed")


def assert_as_valid_(
    msg_hash: int,
    key: Key,
    sig: Sig,
    lower_s: bool = False,
) -> None:
    # It raises Errors, while verify should always return True or False
    if not isinstance(sig, Sig):
        raise ECClibValueError(f"not a signature: {sig!r}")
    sig.assert_valid()  # 1
    _check_msg_hash(msg_hash, sig.ec)
    Q = point_from_key(key, sig.ec)
    # second part delegated to helper function
    _assert_as_valid_(msg_hash, Q, sig.r, sig.s, lower_s, sig.ec)


def assert_as_valid(
    msg: Octets,
    key: Key,
    sig: Sig,
    lower_s: bool = False,
    hf: HashF = sha256,
) -> None:
    # It raises Errors, while verify should always return True or False
    if not isinstance(sig, Sig):
        raise ECClibValueError(f"not a signature: {sig!r}")
    msg_hash = hash_and_reduce(msg, sig.ec, hf)
    assert_as_valid_(msg_hash, key, sig, lower_s)


def verify_(
    msg_hash: int,
    key: Key,
    sig: Sig,
    lower_s: bool = False,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

    If lower_s is True, high-s signatures are rejected.
    """
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, key, sig, lower_s)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def verify(
    msg: Octets,
    key: Key,
    sig: Sig,
    lower_s: bool = False,
    hf: HashF = sha256,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    try:
        assert_as_valid(msg, key, sig, lower_s, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
