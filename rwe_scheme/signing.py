#!/usr/bin/env python3
"""
signing.py - Sign / Verify for the toy RWE signature scheme

PROTOCOL (Fiat–Shamir, một lượt):
=================================

SIGN(M, sk):
(a) h  = H(M)
(b) y1, y2 ← U[-(q//2)+1, q//2]^128
(c) w  = (a ∘ y1 + y2) mod q            (commitment, never sent)
(d) c  = (w + h) mod q                  (challenge)
(e) z1 = (s ∘ c + y1) mod q
(f) z2 = (e ∘ c + y2) mod q
    σ  = (c, z1, z2)

VERIFY(M, pk, σ):
(g) reject if z1 == 0 or z2 == 0
(h) tmp = ((a ∘ z1 + z2 - t ∘ c) + h) mod q - c
(i) accept iff tmp == 0

Honest signatures pass because a∘z1 + z2 - t∘c ≡ a∘y1 + y2 = w (mod q).
There is no rejection sampling and no retry on degenerate y1/y2.

The check only ties c to the combination above, never to a commitment the
verifier can recompute, so it can be satisfied without s, e (see forgery.py).
"""

from typing import NamedTuple, Optional, Sequence, Union
import random

from rwe_core.vector_math import Vector
from rwe_core.digest import compute_simple_hash

from .keygen import PublicKey, PrivateKey
from .sampling import fresh_rng, sample_uniform_vector, trace


class Signature(NamedTuple):
    c: Vector
    z1: Vector
    z2: Vector


Message = Union[bytes, str]


def sign(message: Message, private_key: PrivateKey,
         rnd: Optional[random.Random] = None, debug: bool = False) -> Signature:
    """
    Sign message with private key.

    Args:
        message: bytes or str
        private_key: PrivateKey from generate_keypair
        rnd: optional source of uniform integers
        debug: print trace lines to stderr

    Returns:
        Signature (c, z1, z2)
    """
    q = private_key.modulus
    s_vector = private_key.s_vector
    e_vector = private_key.e_vector
    a_vector = private_key.a_vector
    r = fresh_rng(rnd)

    message_hash = compute_simple_hash(message, s_vector.N)

    y1 = sample_uniform_vector(q, r, s_vector.N)
    y2 = sample_uniform_vector(q, r, s_vector.N)

    # Commitment
    w = a_vector.mul(y1).add(y2).mod_reduce(q)

    # Challenge
    c = w.add(message_hash).mod_reduce(q)

    # Responses
    z1 = s_vector.mul(c).add(y1).mod_reduce(q)
    z2 = e_vector.mul(c).add(y2).mod_reduce(q)

    trace("SIGN", f"c[:4]={c.tolist()[:4]}, z1[:4]={z1.tolist()[:4]}, "
                  f"z2[:4]={z2.tolist()[:4]}", debug)

    return Signature(c, z1, z2)


def verify(message: Message, public_key: PublicKey,
           signature: Union[Signature, Sequence[Vector]], debug: bool = False) -> bool:
    """
    Verify signature (c, z1, z2) on message.

    Returns False (never raises) for any well-formed triple of matching
    width; DimensionMismatch if the widths disagree.
    """
    c, z1, z2 = signature

    if z1.is_zero():
        trace("VERIFY", "reject: z1 is the zero vector", debug)
        return False
    if z2.is_zero():
        trace("VERIFY", "reject: z2 is the zero vector", debug)
        return False

    q = public_key.modulus
    a_vector = public_key.a_vector
    ase_vector = public_key.ase_vector

    message_hash = compute_simple_hash(message, c.N)

    tmp = a_vector.mul(z1).add(z2).sub(ase_vector.mul(c))
    tmp = tmp.add(message_hash).mod_reduce(q).sub(c)

    ok = tmp.is_zero()
    if not ok:
        bad = sum(1 for v in tmp if v != 0)
        trace("VERIFY", f"reject: {bad}/{tmp.N} coordinates non-zero", debug)
    else:
        trace("VERIFY", "accept", debug)
    return ok
