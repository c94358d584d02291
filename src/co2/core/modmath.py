#!/usr/bin/env python3
"""
CO2 - Modular Arithmetic
Extended-Euclidean inverse, modular division and the hash-to-integer
mapping shared by every signature scheme.
"""

# sign tags written in front of a hashed integer
SIGN_NEGATIVE = 0
SIGN_ZERO = 1
SIGN_POSITIVE = 2

LIMB_BYTES = 8


def mod_inverse(x, n):
    """
    Compute y such that x * y = gcd(x, n) (mod n).

    Runs the extended Euclidean algorithm over the remainders of n and x,
    tracking the Bezout coefficient of x. When x and n are coprime the
    result is the multiplicative inverse of x.

    Args:
        x: Value to invert
        n: Positive modulus

    Returns:
        int: Bezout coefficient of x, reduced into [0, n)
    """
    if n <= 0:
        raise ValueError(f"Modulus must be positive, got {n}")

    r_old, r = n, x % n
    y_old, y = 0, 1

    while r != 0:
        q, r_new = divmod(r_old, r)
        r_old, r = r, r_new
        y_old, y = y, y_old - q * y

    return y_old % n


def mod_div(x, y, n):
    # x / y (mod n)
    if n <= 0:
        raise ValueError(f"Modulus must be positive, got {n}")
    return (x % n) * mod_inverse(y % n, n) % n


def integer_sign_tag(n):
    if n < 0:
        return SIGN_NEGATIVE
    if n == 0:
        return SIGN_ZERO
    return SIGN_POSITIVE


def integer_limbs(n):
    # little-endian 64-bit limbs of |n|, no limbs for zero
    magnitude = abs(n)
    limb_count = (magnitude.bit_length() + 63) // 64
    return magnitude.to_bytes(limb_count * LIMB_BYTES, 'little')


def hash_to_integer(n, hasher):
    """
    Hash an integer to an integer.

    The hasher receives a one-byte sign tag followed by the little-endian
    limbs of the magnitude of n. The digest is read back as an unsigned
    little-endian integer and the hasher is left reset for reuse.

    Args:
        n: Integer to hash
        hasher: Object with update(bytes) and finalize_and_reset()

    Returns:
        int: Non-negative digest value
    """
    hasher.update(bytes([integer_sign_tag(n)]))
    hasher.update(integer_limbs(n))
    return int.from_bytes(hasher.finalize_and_reset(), 'little')


def message_to_integer(data):
    # messages travel as unsigned big-endian integers
    return int.from_bytes(data, 'big')
