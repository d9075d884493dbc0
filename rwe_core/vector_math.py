#!/usr/bin/env python3
"""
vector_math.py - Fixed-width integer vectors for the toy RWE signature scheme

Định nghĩa toán học:
- Vector: 128 số nguyên có dấu, mọi phép toán theo từng phần tử (element-wise)
- mul là tích Hadamard a ∘ b, KHÔNG phải tích đa thức trong R_q = Z_q[X]/(X^N+1)
- mod_reduce luôn trả về đại diện trong [0, m), kể cả khi a[i] < 0

Naming convention:
  - a + b      → a.add(b)  /  vec_add(a, b)
  - a - b      → a.sub(b)  /  vec_sub(a, b)
  - a ∘ b      → a.mul(b)  /  vec_mul(a, b)
  - a / b      → a.div(b)  /  vec_div(a, b)
  - a mod m    → a.mod_reduce(m)  /  vec_mod(a, m)
"""

from typing import Any, Iterator, List, Optional
import random

import numpy as np

# =============================
# CONSTANTS & PARAMETERS
# =============================
VECTOR_N = 128              # Fixed vector width
MAX_MODULUS = 2**31 - 1     # a[i]*b[i] for coordinates < MAX_MODULUS fits int64


# =============================
# ERRORS
# =============================
class DimensionMismatch(ValueError):
    """Vectors of different lengths were combined."""


class InvalidArgument(ValueError):
    """A modulus (or other scalar parameter) is outside its valid range."""


class DomainError(ZeroDivisionError):
    """Integer division hit a zero coordinate."""


def check_modulus(modulus: Any, minimum: int = 1) -> int:
    """Validate a modulus and return it as a plain int."""
    if isinstance(modulus, bool) or not isinstance(modulus, (int, np.integer)):
        raise InvalidArgument(f"Modulus must be an integer, got {type(modulus).__name__}")
    modulus = int(modulus)
    if modulus < minimum:
        raise InvalidArgument(f"Modulus must be >= {minimum}, got {modulus}")
    if modulus > MAX_MODULUS:
        raise InvalidArgument(f"Modulus {modulus} exceeds MAX_MODULUS={MAX_MODULUS}")
    return modulus


# =============================
# VECTOR CLASS
# =============================
class Vector:
    """
    Immutable fixed-width integer vector.

    Backed by a read-only numpy int64 array; every operation returns a
    new Vector.
    """

    __slots__ = ("coeffs", "N")

    def __init__(self, coeffs: Any, N: int = VECTOR_N):
        arr = np.array(coeffs, dtype=np.int64)
        if arr.ndim != 1 or arr.shape[0] != N:
            raise DimensionMismatch(f"Vector length {arr.size} != N={N}")
        arr.setflags(write=False)
        self.coeffs = arr
        self.N = N

    @classmethod
    def zeros(cls, N: int = VECTOR_N) -> "Vector":
        """All-zero vector"""
        return cls(np.zeros(N, dtype=np.int64), N)

    @classmethod
    def ones(cls, N: int = VECTOR_N) -> "Vector":
        """All-ones vector"""
        return cls(np.ones(N, dtype=np.int64), N)

    @classmethod
    def uniform_random(cls, low: int, high: int, N: int = VECTOR_N,
                       rnd: Optional[random.Random] = None) -> "Vector":
        """Uniform random vector with coefficients in [low, high] (both inclusive)"""
        if low > high:
            raise InvalidArgument(f"Empty sampling range [{low}, {high}]")
        r = rnd or random
        return cls([r.randint(low, high) for _ in range(N)], N)

    # -----------------------------
    # Arithmetic
    # -----------------------------
    def add(self, other: "Vector") -> "Vector":
        """Element-wise addition"""
        self._check_same(other)
        return Vector(self.coeffs + other.coeffs, self.N)

    def sub(self, other: "Vector") -> "Vector":
        """Element-wise subtraction"""
        self._check_same(other)
        return Vector(self.coeffs - other.coeffs, self.N)

    def mul(self, other: "Vector") -> "Vector":
        """Hadamard product a ∘ b (no convolution, no reduction)"""
        self._check_same(other)
        return Vector(self.coeffs * other.coeffs, self.N)

    def div(self, other: "Vector") -> "Vector":
        """
        Element-wise integer division, truncating toward zero.

        numpy's // floors, so the quotient is computed on absolute values
        and the sign is restored afterwards.
        """
        self._check_same(other)
        zero_at = np.flatnonzero(other.coeffs == 0)
        if zero_at.size:
            raise DomainError(f"Division by zero at coordinate {int(zero_at[0])}")
        quotient = np.abs(self.coeffs) // np.abs(other.coeffs)
        sign = np.sign(self.coeffs) * np.sign(other.coeffs)
        return Vector(quotient * sign, self.N)

    def mod_reduce(self, modulus: int) -> "Vector":
        """
        Reduce every coordinate into [0, modulus).

        Non-negative a[i] → a[i] % m; negative a[i] → m - ((-a[i]) % m).
        When -a[i] is a multiple of m the second branch would give m, which
        is normalized to 0 so the result is always a canonical residue.
        """
        m = check_modulus(modulus)
        pos = self.coeffs % m
        neg = m - ((-self.coeffs) % m)
        out = np.where(self.coeffs >= 0, pos, neg)
        out[out == m] = 0
        return Vector(out, self.N)

    # -----------------------------
    # Inspection
    # -----------------------------
    def is_zero(self) -> bool:
        """True if every coordinate is 0"""
        return not np.any(self.coeffs)

    def tolist(self) -> List[int]:
        return [int(c) for c in self.coeffs]

    def __len__(self) -> int:
        return self.N

    def __iter__(self) -> Iterator[int]:
        return iter(self.tolist())

    def __getitem__(self, i: int) -> int:
        return int(self.coeffs[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.N == other.N and bool(np.array_equal(self.coeffs, other.coeffs))

    def __hash__(self) -> int:
        return hash((self.N, self.coeffs.tobytes()))

    def __repr__(self) -> str:
        head = ", ".join(str(c) for c in self.tolist()[:8])
        tail = ", ..." if self.N > 8 else ""
        return f"Vector([{head}{tail}], N={self.N})"

    def _check_same(self, other: "Vector") -> None:
        """Verify compatible vectors"""
        if not isinstance(other, Vector):
            raise TypeError(f"Expected Vector, got {type(other).__name__}")
        if self.N != other.N:
            raise DimensionMismatch(f"Vector length mismatch: {self.N} vs {other.N}")


# =============================
# FREE FUNCTIONS
# =============================

def vec_add(a: Vector, b: Vector) -> Vector:
    """a + b (componentwise)"""
    return a.add(b)


def vec_sub(a: Vector, b: Vector) -> Vector:
    """a - b (componentwise)"""
    return a.sub(b)


def vec_mul(a: Vector, b: Vector) -> Vector:
    """
    Hadamard (elementwise) product: a ∘ b = [a[0]·b[0], ..., a[N-1]·b[N-1]].
    """
    return a.mul(b)


def vec_div(a: Vector, b: Vector) -> Vector:
    """a / b (componentwise, truncating). Raises DomainError on a zero divisor."""
    return a.div(b)


def vec_mod(a: Vector, modulus: int) -> Vector:
    """a mod m with every coordinate in [0, m)."""
    return a.mod_reduce(modulus)
