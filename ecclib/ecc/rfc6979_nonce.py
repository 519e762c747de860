#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic generation of the ephemeral key following RFC6979.

https://tools.ietf.org/html/rfc6979

ECDSA needs to produce, for each signature generation,
a fresh random value (ephemeral key, hereafter designated as nonce).
For effective security, nonce must be chosen randomly and uniformly
from a set of modular integers, using a cryptographically secure
process. Even slight biases in that process may be turned into
attacks on the signature scheme.
Moreover, reusing the same ephemeral key for a different message
signed with the same private key reveals the private key!

RFC6979 turns ECDSA into a deterministic scheme by deriving the nonce
from the private key and the message digest with HMAC:
identical (private key, digest) pairs always yield the identical nonce,
while for whoever does not know the private key the mapping from
digests to nonces is computationally indistinguishable from
a randomly and uniformly chosen function.
"""

import hmac
import logging
from hashlib import sha256

from ecclib.alias import HashF
from ecclib.ec.curve import CurveParams, secp256k1
from ecclib.ecc.keys import PrvKey, int_from_prv_key
from ecclib.exceptions import InvalidHashError, InvalidNonceError
from ecclib.utils import int_from_bits

logger = logging.getLogger(__name__)

# sanity cap on candidate rejections:
# each candidate is rejected with probability about 1 - n/2^nlen,
# i.e. 2^-128 for secp256k1
MAX_NONCE_CANDIDATES = 10_000


def _rfc6979_nonce_(c: int, q: int, ec: CurveParams, hf: HashF) -> int:
    # https://tools.ietf.org/html/rfc6979 section 3.2

    # convert the private key q to an octet sequence of size n_size
    q_bytes = q.to_bytes(ec.n_size, byteorder="big", signed=False)
    # the challenge c is already reduced mod n: same encoding size
    c_bytes = c.to_bytes(ec.n_size, byteorder="big", signed=False)
    bprvbm = q_bytes + c_bytes

    hf_size = hf().digest_size
    v = b"\x01" * hf_size  # 3.2.b
    k = b"\x00" * hf_size  # 3.2.c

    k = hmac.new(k, v + b"\x00" + bprvbm, hf).digest()  # 3.2.d
    v = hmac.new(k, v, hf).digest()  # 3.2.e
    k = hmac.new(k, v + b"\x01" + bprvbm, hf).digest()  # 3.2.f
    v = hmac.new(k, v, hf).digest()  # 3.2.g

    for _ in range(MAX_NONCE_CANDIDATES):  # 3.2.h
        t = b""  # 3.2.h.1
        while len(t) < ec.n_size:  # 3.2.h.2
            v = hmac.new(k, v, hf).digest()
            t += v
        # taking t mod n would introduce a bias:
        # out of range candidates are rejected instead
        nonce = int_from_bits(t, ec.nlen)  # candidate nonce           # 3.2.h.3
        if 0 < nonce < ec.n:  # acceptable values for nonce
            return nonce  # successful candidate
        logger.debug("rejected RFC6979 nonce candidate")
        k = hmac.new(k, v + b"\x00", hf).digest()
        v = hmac.new(k, v, hf).digest()

    err_msg = f"no valid nonce after {MAX_NONCE_CANDIDATES} candidates"
    raise InvalidNonceError(err_msg)


def rfc6979_nonce_(
    msg_hash: int, prv_key: PrvKey, ec: CurveParams = secp256k1, hf: HashF = sha256
) -> int:
    """Return an RFC6979 deterministic ephemeral key (nonce).

    msg_hash is the message digest already reduced to a scalar
    in [0, n-1] (see ecclib.hashes.hash_and_reduce).

    see https://tools.ietf.org/html/rfc6979 section 3.2
    """
    if isinstance(msg_hash, bool) or not isinstance(msg_hash, int):
        raise InvalidHashError(f"not an int digest: {msg_hash!r}")
    if not 0 <= msg_hash < ec.n:
        raise InvalidHashError(f"digest not in 0..n-1: {hex(msg_hash)}")
    q = int_from_prv_key(prv_key, ec)

    return _rfc6979_nonce_(msg_hash, q, ec, hf)
