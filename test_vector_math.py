#!/usr/bin/env python3
"""
Test fixed-width vector arithmetic and the non-negative modulo
"""
import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__)))

from rwe_core.vector_math import (
    Vector, VECTOR_N, MAX_MODULUS,
    DimensionMismatch, InvalidArgument, DomainError,
    vec_add, vec_sub, vec_mul, vec_div, vec_mod,
)


def pad(values):
    return Vector(list(values) + [0] * (VECTOR_N - len(values)))


def test_negative_modulo():
    """mod keeps results in [0, m) for negative inputs"""
    print("Test 1: negative modulo")
    v = Vector([-1, -5, -130], N=3)
    r = v.mod_reduce(4)
    print(f"  {v.tolist()} mod 4 = {r.tolist()}")
    assert r.tolist() == [3, 3, 2]

    r128 = vec_mod(pad([-1, -5, -130, 7]), 4)
    assert r128.tolist()[:4] == [3, 3, 2, 3]
    print("  ✅ PASSED\n")


def test_modulo_exact_negative_multiple_is_zero():
    """-k·m reduces to 0, not m"""
    print("Test 2: -k*m edge case")
    r = Vector([-4, -8, -929 * 3, 0], N=4)
    assert r.mod_reduce(4).tolist() == [0, 0, 1, 0]
    assert Vector([-929 * 3], N=1).mod_reduce(929).tolist() == [0]
    assert Vector([0, -1, 5], N=3).mod_reduce(1).tolist() == [0, 0, 0]
    print("  ✅ PASSED\n")


def test_modulo_rejects_bad_modulus():
    v = Vector.ones()
    for bad in (0, -3):
        with pytest.raises(InvalidArgument):
            v.mod_reduce(bad)
    with pytest.raises(InvalidArgument):
        v.mod_reduce(MAX_MODULUS + 1)
    with pytest.raises(InvalidArgument):
        v.mod_reduce(4.0)
    # Still a ValueError for callers that catch the built-in
    with pytest.raises(ValueError):
        v.mod_reduce(0)


def test_elementwise_ops():
    """add/sub/mul are index-aligned, mul is Hadamard"""
    print("Test 3: element-wise ops")
    a = Vector([1, 2, 3, -4], N=4)
    b = Vector([5, -6, 7, 8], N=4)
    assert vec_add(a, b).tolist() == [6, -4, 10, 4]
    assert vec_sub(a, b).tolist() == [-4, 8, -4, -12]
    assert vec_mul(a, b).tolist() == [5, -12, 21, -32]
    # no wraparound terms from a ring product
    e0 = pad([1])
    e1 = pad([0, 1])
    assert e0.mul(e1).is_zero()
    print("  ✅ PASSED\n")


def test_division_truncates_toward_zero():
    a = Vector([7, -7, 7, -7, 0], N=5)
    b = Vector([2, 2, -2, -2, 3], N=5)
    assert vec_div(a, b).tolist() == [3, -3, -3, 3, 0]


def test_division_by_zero_coordinate():
    a = Vector.ones()
    b = pad([1, 2, 3])
    with pytest.raises(DomainError) as exc:
        a.div(b)
    assert "coordinate 3" in str(exc.value)
    with pytest.raises(ZeroDivisionError):
        a.div(Vector.zeros())


def test_dimension_mismatch():
    with pytest.raises(DimensionMismatch):
        Vector([1, 2, 3])
    a = Vector([1, 2, 3], N=3)
    b = Vector([1, 2], N=2)
    for op in (vec_add, vec_sub, vec_mul, vec_div):
        with pytest.raises(DimensionMismatch):
            op(a, b)


def test_immutability():
    """Operations return new vectors; storage is read-only"""
    print("Test 4: immutability")
    a = Vector.ones()
    b = a.add(a)
    assert a == Vector.ones()
    assert b.tolist() == [2] * VECTOR_N
    with pytest.raises(ValueError):
        a.coeffs[0] = 5

    src = np.arange(VECTOR_N)
    v = Vector(src)
    src[0] = 99
    assert v[0] == 0
    print("  ✅ PASSED\n")


def test_helpers():
    assert Vector.zeros().is_zero()
    assert not Vector.ones().is_zero()
    assert len(Vector.ones()) == VECTOR_N
    assert list(Vector([4, 5], N=2)) == [4, 5]
    assert Vector([4, 5], N=2) != Vector([4, 6], N=2)
    assert hash(Vector.ones()) == hash(Vector.ones())
    assert "N=128" in repr(Vector.zeros())


def test_uniform_random_range():
    import random
    rnd = random.Random(42)
    v = Vector.uniform_random(-3, 4, rnd=rnd)
    assert all(-3 <= x <= 4 for x in v)
    with pytest.raises(InvalidArgument):
        Vector.uniform_random(1, 0)


if __name__ == '__main__':
    test_negative_modulo()
    test_modulo_exact_negative_multiple_is_zero()
    test_elementwise_ops()
    test_immutability()
