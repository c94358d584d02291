#!/usr/bin/env python3
"""
CO2 - ECC Key Utilities
Key-pair generation for any registered curve.
"""

import logging

from ..core.randomness import require_secure

logger = logging.getLogger("co2")


def public_key(curve, private_key):
    # Q = d * G
    return curve.scalar_multiply(private_key, curve.generator())


def generate_key_pair(curve, csprng):
    """
    Generate a key pair on the given curve.

    Private key: random integer d in [1, n-1]
    Public key: point Q = dG

    Args:
        curve: A registered curve
        csprng: SecureRandom generator

    Returns:
        tuple: (private_key, public_key)
    """
    require_secure(csprng)
    logger.info(f"Generating key pair on {curve.name}")

    private_key = csprng.randrange(1, curve.order())
    Q = public_key(curve, private_key)

    # sanity check
    if not curve.validate(Q):
        raise RuntimeError(f"Generated public key not on curve {curve.name}")

    return private_key, Q
