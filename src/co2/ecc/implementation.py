#!/usr/bin/env python3
"""
CO2 - Elliptic Curve Protocols
Diffie-Hellman key agreement, ECDSA and EdDSA, written once against the
AdditiveGroup contract so they run on every registered curve.
"""

import logging

from ..core.modmath import hash_to_integer, mod_div, mod_inverse
from ..core.randomness import require_secure

logger = logging.getLogger("co2")


def _is_point(curve, P):
    # affine pair of ints, or the identity where the curve has one
    if P is None:
        return curve.identity() is None
    return (
        isinstance(P, tuple)
        and len(P) == 2
        and all(isinstance(c, int) for c in P)
    )


def _is_valid_public_key(curve, public_key):
    """
    Check that a public key is a usable group element.

    Rejects anything that is not a point, is not on the curve, is the
    identity, or lies outside the subgroup generated by the base point.
    """
    if not _is_point(curve, public_key):
        logger.debug("Rejecting public key: not a point")
        return False
    if not curve.validate(public_key):
        logger.debug(f"Rejecting public key: not on curve {curve.name}")
        return False
    if curve.is_identity(public_key):
        logger.debug("Rejecting public key: identity element")
        return False
    if not curve.is_identity(curve.scalar_multiply(curve.order(), public_key)):
        logger.debug("Rejecting public key: failed subgroup check")
        return False
    return True


def ecdh(private_key, other_public_key, hasher):
    """
    Compute a Diffie-Hellman shared secret.

    Both parties arrive at the same point because
    d_A * Q_B = d_A * d_B * G = d_B * Q_A; its canonical integer is hashed.

    Args:
        private_key: Own private scalar
        other_public_key: GroupElement holding the other party's public point
        hasher: Hash collaborator

    Returns:
        int: Hashed shared secret
    """
    curve = other_public_key.curve
    if not other_public_key.validate():
        raise ValueError(f"Other party's public key is not on curve {curve.name}")

    shared = curve.scalar_multiply(private_key, other_public_key.point)
    if curve.is_identity(shared):
        raise ValueError("Shared secret computation resulted in the identity element")

    return hash_to_integer(curve.point_to_integer(shared), hasher)


def ecdsa_sign(message, private_key, curve, csprng, hasher):
    """
    Create an ECDSA signature.

    Algorithm:
    1. z = H(m) mod n
    2. k <- random in [1, n-1]      (fresh secret nonce)
    3. r = x(kG) mod n
    4. s = (z + r * d) / k mod n
    5. retry with a new k if r or s is zero

    Args:
        message: Message as an integer
        private_key: Signer's private scalar
        curve: A registered curve
        csprng: SecureRandom generator for the nonce
        hasher: Hash collaborator

    Returns:
        tuple: (r, s)
    """
    require_secure(csprng)
    n = curve.order()
    G = curve.generator()
    z = hash_to_integer(message, hasher) % n

    while True:
        k = csprng.randrange(1, n)
        r = curve.point_to_integer(curve.scalar_multiply(k, G)) % n
        s = mod_div(z + r * private_key, k, n)
        if r != 0 and s != 0:
            return r, s
        logger.debug("Degenerate ECDSA nonce, retrying")


def ecdsa_verify(message, public_key, signature, curve, hasher):
    """
    Verify an ECDSA signature.

    Accepts iff r = x(u1 * G + u2 * Q) mod n with u1 = z / s and
    u2 = r / s. Never raises on malformed input.

    Args:
        message: Message as an integer
        public_key: Signer's public point
        signature: (r, s) tuple
        curve: A registered curve
        hasher: Hash collaborator

    Returns:
        bool: True if the signature is valid
    """
    if not _is_valid_public_key(curve, public_key):
        return False

    n = curve.order()
    try:
        r, s = signature
    except (TypeError, ValueError):
        logger.debug("Rejecting ECDSA signature: not an (r, s) pair")
        return False
    if not (isinstance(r, int) and isinstance(s, int) and 0 < r < n and 0 < s < n):
        logger.debug("Rejecting ECDSA signature: component out of range")
        return False

    z = hash_to_integer(message, hasher) % n
    s_inv = mod_inverse(s, n)
    u1 = z * s_inv % n
    u2 = r * s_inv % n

    X = curve.add(
        curve.scalar_multiply(u1, curve.generator()),
        curve.scalar_multiply(u2, public_key),
    )
    if curve.is_identity(X):
        return False
    return r == curve.point_to_integer(X) % n


def eddsa_sign(message, private_key, curve, csprng, hasher):
    """
    Create an EdDSA-style signature.

    Algorithm:
    1. k <- random in [0, n-1]
    2. R = kG
    3. z = H(m) mod n
    4. s = (k + z * d) mod n

    CRITICAL: k must never repeat across messages, two signatures with
    the same k reveal the private key.

    Args:
        message: Message as an integer
        private_key: Signer's private scalar
        curve: A registered curve
        csprng: SecureRandom generator for the nonce
        hasher: Hash collaborator

    Returns:
        tuple: (R, s)
    """
    require_secure(csprng)
    n = curve.order()

    k = csprng.randrange(0, n)
    R = curve.scalar_multiply(k, curve.generator())
    z = hash_to_integer(message, hasher) % n
    s = (k + z * private_key) % n
    return R, s


def eddsa_verify(message, public_key, signature, curve, hasher):
    """
    Verify an EdDSA-style signature.

    Accepts iff sG == R + zQ. Never raises on malformed input.

    Args:
        message: Message as an integer
        public_key: Signer's public point
        signature: (R, s) tuple
        curve: A registered curve
        hasher: Hash collaborator

    Returns:
        bool: True if the signature is valid
    """
    if not _is_valid_public_key(curve, public_key):
        return False

    n = curve.order()
    try:
        R, s = signature
    except (TypeError, ValueError):
        logger.debug("Rejecting EdDSA signature: not an (R, s) pair")
        return False
    if not (isinstance(s, int) and 0 <= s < n):
        logger.debug("Rejecting EdDSA signature: s out of range")
        return False
    if not (_is_point(curve, R) and curve.validate(R)):
        logger.debug(f"Rejecting EdDSA signature: R not on curve {curve.name}")
        return False

    z = hash_to_integer(message, hasher) % n
    lhs = curve.scalar_multiply(s, curve.generator())
    rhs = curve.add(R, curve.scalar_multiply(z, public_key))
    return lhs == rhs
