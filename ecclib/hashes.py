#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from ecclib.alias import HashF, Octets
from ecclib.ec.curve import CurveParams, secp256k1
from ecclib.utils import bytes_from_octets, int_from_bits


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def reduce_to_hlen(msg: Octets, hf: HashF = hashlib.sha256) -> bytes:
    msg = bytes_from_octets(msg)
    # Step 4 of SEC 1 v.2 section 4.1.3
    h = hf()
    h.update(msg)
    return bytes(h.digest())


def int_from_hash(
    msg_hash: Octets, ec: CurveParams = secp256k1, hf: HashF = hashlib.sha256
) -> int:
    """Return the digest as scalar in [0, n-1].

    Steps 5 of SEC 1 v.2 section 4.1.3:
    leftmost ec.nlen bits of the hf_len digest, reduced mod ec.n.
    """
    hf_len = hf().digest_size
    msg_hash = bytes_from_octets(msg_hash, hf_len)
    return int_from_bits(msg_hash, ec.nlen) % ec.n


def hash_and_reduce(
    msg: Octets, ec: CurveParams = secp256k1, hf: HashF = hashlib.sha256
) -> int:
    """Return the message digest reduced to a scalar mod ec.n.

    Text must be encoded to bytes by the caller:
    a str msg is interpreted as hex-string.
    """
    return int_from_hash(reduce_to_hlen(msg, hf), ec, hf)
