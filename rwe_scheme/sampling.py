#!/usr/bin/env python3
"""
sampling.py - Parameters and randomness for the toy RWE scheme

Mọi vector bí mật (s, e), vector công khai a và nhiễu (y1, y2) đều được lấy
từ cùng một phân phối đều trên [-(q//2)+1, q//2].
"""

from typing import Optional, Tuple
import random
import secrets
import sys

from rwe_core.vector_math import Vector, VECTOR_N, check_modulus

# ============================================================================
# PARAMETERS
# ============================================================================

DEFAULT_MODULUS = 929

RWE_PARAMS = {
    'toy': {'modulus': DEFAULT_MODULUS},
    'small': {'modulus': 97},
    'large': {'modulus': 65521},
}


def resolve_modulus(modulus: int) -> int:
    """Keygen needs q >= 2, otherwise the sampling range below is empty."""
    return check_modulus(modulus, minimum=2)


def sampling_range(modulus: int) -> Tuple[int, int]:
    """
    Inclusive range [-(q//2)+1, q//2] used for every random vector.

    Exactly q values, shifted so that the positive side gets the extra one.
    """
    half = modulus // 2
    return -half + 1, half


def fresh_rng(rnd: Optional[random.Random] = None) -> random.Random:
    """Return rnd, or a new Mersenne Twister seeded from the OS."""
    if rnd is not None:
        return rnd
    return random.Random(secrets.randbits(128))


def sample_uniform_vector(modulus: int, rnd: random.Random,
                          N: int = VECTOR_N) -> Vector:
    """
    Sample a vector with coefficients uniform in sampling_range(modulus).

    Args:
        modulus: q
        rnd: source of uniform integers (randint)
        N: vector width

    Returns:
        Vector
    """
    low, high = sampling_range(modulus)
    return Vector.uniform_random(low, high, N, rnd=rnd)


def trace(tag: str, msg: str, debug: bool) -> None:
    if debug:
        print(f"[{tag}] {msg}", file=sys.stderr)
