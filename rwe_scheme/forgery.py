#!/usr/bin/env python3
"""
forgery.py - Universal forgery against the toy RWE verifier

Chỉ dùng khóa công khai (q, t, a) và h = H(M), KHÔNG cần s, e:

    c  = 1
    z1 = 1
    z2 = (c ∘ t + c - h - a ∘ z1) mod q

Thay vào phương trình kiểm tra:
    a∘z1 + z2 - t∘c ≡ a + (t + 1 - h - a) - t = c - h   (mod q)
    ((c - h) + h) mod q - c = 1 mod q - 1 = 0            (q > 1)

→ verify luôn chấp nhận, với mọi thông điệp, mọi khóa (trừ khi z2 rơi
đúng vào vector 0, xác suất q^-128).
"""

from rwe_core.vector_math import Vector
from rwe_core.digest import compute_simple_hash

from .keygen import PublicKey
from .signing import Signature, Message
from .sampling import trace


def forge(message: Message, public_key: PublicKey, debug: bool = False) -> Signature:
    """
    Build a signature on message that verify() accepts, from pk alone.

    Deterministic: the same (message, public_key) always gives the same
    triple.
    """
    q = public_key.modulus
    ase_vector = public_key.ase_vector
    a_vector = public_key.a_vector
    N = a_vector.N

    message_hash = compute_simple_hash(message, N)

    c = Vector.ones(N)
    z1 = Vector.ones(N)
    z2 = (c.mul(ase_vector).add(c).sub(message_hash)
          .sub(a_vector.mul(z1)).mod_reduce(q))

    trace("FORGE", f"z2[:4]={z2.tolist()[:4]} (c = z1 = 1)", debug)

    return Signature(c, z1, z2)


fake_sign = forge
