#!/usr/bin/env python3
"""
keygen.py - Key generation for the toy RWE signature scheme

PUBLIC / PRIVATE KEY:
=====================
    s, e ← U[-(q//2)+1, q//2]^128      (secret + error)
    a    ← U[-(q//2)+1, q//2]^128      (shared vector)
    t    = (a ∘ s + e) mod q           (the "ase" vector)

    pk = (q, t, a)
    sk = (q, s, e, a)

LƯU Ý về a:
-----------
a được lấy từ cùng phân phối với s, e, tức [-(q//2)+1, q//2], KHÔNG phải
[1, q]. Vì vậy a có thể chứa 0 hoặc số âm.
"""

from typing import NamedTuple, Optional, Tuple
import random

from rwe_core.vector_math import Vector

from .sampling import resolve_modulus, fresh_rng, sample_uniform_vector, sampling_range, trace


class PublicKey(NamedTuple):
    modulus: int
    ase_vector: Vector
    a_vector: Vector


class PrivateKey(NamedTuple):
    modulus: int
    s_vector: Vector
    e_vector: Vector
    a_vector: Vector


KeyPair = Tuple[PublicKey, PrivateKey]


def generate_keypair(modulus: int, rnd: Optional[random.Random] = None,
                     debug: bool = False) -> KeyPair:
    """
    Generate (PublicKey, PrivateKey) over modulus q.

    Args:
        modulus: q, 2 <= q <= MAX_MODULUS
        rnd: optional source of uniform integers (fresh OS-seeded one if None)
        debug: print trace lines to stderr

    Returns:
        (public_key, private_key)

    Raises:
        InvalidArgument: q out of range
    """
    q = resolve_modulus(modulus)
    r = fresh_rng(rnd)

    s_vector = sample_uniform_vector(q, r)
    e_vector = sample_uniform_vector(q, r)
    # Same distribution as s/e, not [1, q]
    a_vector = sample_uniform_vector(q, r)

    ase_vector = a_vector.mul(s_vector).add(e_vector).mod_reduce(q)

    trace("KEYGEN", f"q={q}, range={sampling_range(q)}, "
                    f"ase[:4]={ase_vector.tolist()[:4]}", debug)

    return (PublicKey(q, ase_vector, a_vector),
            PrivateKey(q, s_vector, e_vector, a_vector))
