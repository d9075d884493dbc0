"""
Core primitives for the toy RWE signature scheme

This package contains:
- vector_math: fixed-width integer vectors, element-wise arithmetic, errors
- digest: non-cryptographic message → vector hash
"""

from .vector_math import (
    Vector,
    VECTOR_N,
    MAX_MODULUS,
    DimensionMismatch,
    InvalidArgument,
    DomainError,
    check_modulus,
    vec_add,
    vec_sub,
    vec_mul,
    vec_div,
    vec_mod,
)

from .digest import (
    compute_simple_hash,
    digest,
    HASH_BYTE_WINDOW,
)

__version__ = "1.0.0"

__all__ = [
    'Vector',
    'VECTOR_N',
    'MAX_MODULUS',
    'DimensionMismatch',
    'InvalidArgument',
    'DomainError',
    'check_modulus',
    'vec_add',
    'vec_sub',
    'vec_mul',
    'vec_div',
    'vec_mod',
    'compute_simple_hash',
    'digest',
    'HASH_BYTE_WINDOW',
]
