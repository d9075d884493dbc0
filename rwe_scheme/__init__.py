"""
rwe_scheme - Toy RWE signature scheme and its universal forgery

Implements a one-pass commit/challenge/response signature over
128-wide integer vectors:
- Key generation: t = (a ∘ s + e) mod q
- Signing: c = (a ∘ y1 + y2 + H(M)) mod q, z = (s ∘ c + y1, e ∘ c + y2)
- Verification: ((a ∘ z1 + z2 - t ∘ c) + H(M)) mod q == c
- Forgery: c = z1 = 1, solve for z2 from the public key alone
"""

from .sampling import (
    DEFAULT_MODULUS,
    RWE_PARAMS,
    sampling_range,
    sample_uniform_vector,
)

from .keygen import (
    generate_keypair,
    PublicKey,
    PrivateKey,
    KeyPair,
)

from .signing import (
    sign,
    verify,
    Signature,
)

from .forgery import (
    forge,
    fake_sign,
)

__all__ = [
    'DEFAULT_MODULUS',
    'RWE_PARAMS',
    'sampling_range',
    'sample_uniform_vector',
    'generate_keypair',
    'PublicKey',
    'PrivateKey',
    'KeyPair',
    'sign',
    'verify',
    'Signature',
    'forge',
    'fake_sign',
]
