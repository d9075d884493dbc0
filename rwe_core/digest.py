#!/usr/bin/env python3
"""
digest.py - Message → vector mixing used as the scheme's "hash"

NOT a cryptographic hash: it is linear in the byte values, trivially
invertible, and collisions are easy to find. It only needs to be
deterministic so that signer, verifier and forger agree on h = H(message).
"""

from typing import Union

import numpy as np

from .vector_math import Vector, VECTOR_N

HASH_BYTE_WINDOW = 32


def _to_bytes(message: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def compute_simple_hash(message: Union[bytes, str], N: int = VECTOR_N) -> Vector:
    """
    Hash message into an N-wide vector.

    h starts as all ones; byte b at position i adds (b·i) mod (b mod 32 + 1)
    to h[i mod N]. Bytes are read unsigned, so the divisor is in [1, 32].

    Args:
        message: bytes (str is UTF-8 encoded first)
        N: vector width

    Returns:
        Vector h
    """
    data = _to_bytes(message)
    acc = np.ones(N, dtype=np.int64)
    for i, b in enumerate(data):
        acc[i % N] += (b * i) % (b % HASH_BYTE_WINDOW + 1)
    return Vector(acc, N)


digest = compute_simple_hash
