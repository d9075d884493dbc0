#!/usr/bin/env python3
"""
test_forgery.py - Universal forgery from the public key alone
"""
import random
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__)))

from rwe_core.vector_math import Vector
from rwe_core.digest import compute_simple_hash
from rwe_scheme import generate_keypair, sign, verify, forge, fake_sign, PublicKey
from rwe_demo import random_message

MESSAGES = ["hello", "cryptography", "and", "hacking"]


def test_forge_fixed_keypair():
    print("Test 1: forge with fixed keypair")
    pk, _ = generate_keypair(929)
    for message in MESSAGES:
        ok = verify(message, pk, forge(message, pk))
        print(f"  {message!r}: {ok}")
        assert ok
    print("  ✅ PASSED\n")


def test_forge_random_keypair_per_message():
    for message in MESSAGES:
        pk, _ = generate_keypair(929)
        assert verify(message, pk, fake_sign(message, pk))


def test_forge_random_messages():
    print("Test 2: 1000 random messages, fresh keys")
    rnd = random.Random(99)
    for _ in range(1000):
        pk, _ = generate_keypair(929, rnd=rnd)
        message = random_message(rnd, 1000)
        assert verify(message, pk, forge(message, pk))
    print("  ✅ PASSED\n")


@pytest.mark.parametrize("modulus", [2, 3, 17, 97, 929, 65521, 2**31 - 1])
def test_forge_any_modulus(modulus):
    pk, _ = generate_keypair(modulus, rnd=random.Random(modulus))
    for message in MESSAGES + ["", "x" * 5000]:
        assert verify(message, pk, forge(message, pk))


def test_forge_shape_and_determinism():
    pk, _ = generate_keypair(929, rnd=random.Random(4))
    c, z1, z2 = forge("hello", pk)
    assert c == Vector.ones()
    assert z1 == Vector.ones()
    h = compute_simple_hash("hello")
    expected = pk.ase_vector.add(Vector.ones()).sub(h).sub(pk.a_vector).mod_reduce(929)
    assert z2 == expected
    assert forge("hello", pk) == forge("hello", pk)


def test_forge_needs_only_public_values():
    """A key built by hand (no secrets ever existed) is forgeable too"""
    rnd = random.Random(8)
    a = Vector([rnd.randint(-463, 464) for _ in range(128)])
    ase = Vector([rnd.randint(0, 928) for _ in range(128)])
    pk = PublicKey(929, ase, a)
    assert verify("hello", pk, forge("hello", pk))


def test_forged_signature_bound_to_message():
    pk, _ = generate_keypair(929)
    sig = forge("hello", pk)
    assert not verify("world", pk, sig)


def test_forgery_differs_from_honest_signature():
    rnd = random.Random(6)
    pk, sk = generate_keypair(929, rnd=rnd)
    honest = sign("hello", sk, rnd=rnd)
    forged = forge("hello", pk)
    assert honest != forged
    assert verify("hello", pk, honest) and verify("hello", pk, forged)


if __name__ == '__main__':
    test_forge_fixed_keypair()
    test_forge_random_messages()
