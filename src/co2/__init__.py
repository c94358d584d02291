"""
CO2 - public-key cryptography from first principles.

Modular arithmetic, elliptic-curve groups in three shapes with ECDH,
ECDSA and EdDSA on top, and an independent RSA engine.
"""

__version__ = "0.1.0"

# import core modules
from co2.core import (
    DigestHasher,
    FastRandom,
    SecureRandom,
    get_config,
    load_config,
    new_hasher
)

# import elliptic curve protocols
from co2.ecc import (
    CURVES,
    CURVE25519,
    ED25519,
    SECP256K1,
    P256,
    GroupElement,
    get_curve,
    ecdh,
    ecdsa_sign,
    ecdsa_verify,
    eddsa_sign,
    eddsa_verify
)

# import RSA engine
from co2 import rsa

__all__ = [
    'DigestHasher',
    'FastRandom',
    'SecureRandom',
    'get_config',
    'load_config',
    'new_hasher',
    'CURVES',
    'CURVE25519',
    'ED25519',
    'SECP256K1',
    'P256',
    'GroupElement',
    'get_curve',
    'ecdh',
    'ecdsa_sign',
    'ecdsa_verify',
    'eddsa_sign',
    'eddsa_verify',
    'rsa'
]
