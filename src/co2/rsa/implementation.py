#!/usr/bin/env python3
"""
CO2 - RSA Operations
Textbook RSA encryption, decryption and hash-then-sign over integers.
"""

import logging

from ..core.modmath import hash_to_integer

logger = logging.getLogger("co2")


class RSADomainError(ValueError):
    # input outside the open interval (1, n - 1)
    pass


def _check_domain(value, modulus):
    if not (1 < value < modulus - 1):
        raise RSADomainError(f"Value must lie strictly between 1 and n - 1 for a {modulus.bit_length()}-bit modulus")


def encrypt(public_key, message):
    # c = m^e mod n
    n = public_key.modulus
    _check_domain(message, n)
    return pow(message, public_key.exponent, n)


def decrypt(secret_key, ciphertext):
    # m = c^d mod n
    n = secret_key.modulus
    _check_domain(ciphertext, n)
    return pow(ciphertext, secret_key.exponent, n)


def sign(secret_key, message, hasher):
    """
    Sign a message: the hash of m run through the secret exponent.

    Args:
        secret_key: RSASecretKey
        message: Message as an integer
        hasher: Hash collaborator

    Returns:
        int: Signature
    """
    return decrypt(secret_key, hash_to_integer(message, hasher))


def verify(public_key, message, signature, hasher):
    """
    Verify a signature produced by sign().

    Args:
        public_key: RSAPublicKey
        message: Message as an integer
        signature: Integer signature
        hasher: Hash collaborator

    Returns:
        bool: True if the signature matches; False for any mismatch or a
        signature outside (1, n - 1)
    """
    if not isinstance(signature, int):
        return False
    try:
        recovered = encrypt(public_key, signature)
    except RSADomainError:
        logger.debug("Rejecting RSA signature: out of range")
        return False
    return recovered == hash_to_integer(message, hasher)
