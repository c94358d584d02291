#!/usr/bin/env python3
"""
CO2 - RSA Key Utilities
Probabilistic prime generation and RSA key-pair generation.
"""

import math
import logging
from collections import namedtuple

from ..core.config import SUPPORTED_RSA_KEY_SIZES, get_config
from ..core.modmath import mod_inverse
from ..core.randomness import require_secure

logger = logging.getLogger("co2")

# the first 60 primes
FIRST_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229, 233,
    239, 241, 251, 257, 263, 269, 271, 277, 281,
)


class RSAPublicKey(namedtuple("RSAPublicKey", ["exponent", "modulus"])):
    __slots__ = ()

    @property
    def bits(self):
        return self.modulus.bit_length()


class RSASecretKey(namedtuple("RSASecretKey", ["exponent", "public"])):
    __slots__ = ()

    @property
    def modulus(self):
        return self.public.modulus

    def public_key(self):
        return self.public

    def __repr__(self):
        # keep the secret exponent out of logs and tracebacks
        return f"RSASecretKey(bits={self.public.bits})"


def quick_prime_check(n):
    """
    Trial division by the first 60 primes.

    Never rejects a prime but lets many composites through, so it is only
    a cheap filter in front of Miller-Rabin.
    """
    for p in FIRST_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    return True


def miller_rabin(n, rounds, rng):
    """
    Miller-Rabin probabilistic primality test.

    Each round picks a random witness a in [2, n-1); a composite survives
    a round with probability at most 1/4.

    Args:
        n: Candidate
        rounds: Number of witnesses to try
        rng: Generator for the witnesses, FastRandom is sufficient

    Returns:
        bool: False if n is certainly composite
    """
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    # find r, d such that n - 1 = 2^r * d where d is odd
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    # witness loop
    for _ in range(rounds):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True


def is_prime(n, rng, rounds=None):
    if rounds is None:
        rounds = get_config()["miller_rabin_rounds"]
    return n >= 2 and quick_prime_check(n) and miller_rabin(n, rounds, rng)


def generate_secure_prime(rng, csprng, bits):
    """
    Generate a prime of the given bit length.

    The starting candidate comes from the secure generator; the search
    then steps upward until a candidate passes is_prime. Witnesses for the
    test itself come from rng.

    Args:
        rng: Fast generator for Miller-Rabin witnesses
        csprng: SecureRandom generator for the candidate
        bits: Bit length of the starting candidate

    Returns:
        int: Probable prime
    """
    require_secure(csprng)

    # random odd number with the top bit set
    n = csprng.getrandbits(bits) | (1 << (bits - 1)) | 1
    candidates = 1
    while not is_prime(n, rng):
        n += 1
        candidates += 1

    logger.debug(f"Found {bits}-bit prime after {candidates} candidates")
    return n


def generate_key_pair(rng, csprng, key_size=None):
    """
    Generate an RSA key pair.

    The exponent drawn at random (coprime to lambda(n)) is kept by the
    secret key and its inverse modulo lambda(n) is published. Encryption
    with the public key is undone by decryption with the secret key.

    Args:
        rng: Fast generator for Miller-Rabin witnesses
        csprng: SecureRandom generator for primes and the exponent
        key_size: Modulus size in bits, defaults to the configured size

    Returns:
        RSASecretKey: Secret key embedding its public key
    """
    require_secure(csprng)
    if key_size is None:
        key_size = get_config()["rsa_key_size"]
    key_size = int(key_size)

    # validate key size
    if key_size not in SUPPORTED_RSA_KEY_SIZES:
        raise ValueError(f"Invalid key size: {key_size} bits. Must be one of {SUPPORTED_RSA_KEY_SIZES} bits.")

    logger.info(f"Generating {key_size}-bit RSA key pair")

    # generate primes of key_size/2 bits each
    prime_size = key_size // 2
    p = generate_secure_prime(rng, csprng, prime_size)
    q = generate_secure_prime(rng, csprng, prime_size)

    # ensure p and q are different
    while p == q:
        q = generate_secure_prime(rng, csprng, prime_size)

    n = p * q

    # Carmichael's function: lambda(n) = lcm(p - 1, q - 1)
    lam = (p - 1) * (q - 1) // math.gcd(p - 1, q - 1)

    # choose e uniformly in [1, lambda) with gcd(e, lambda) = 1
    e = csprng.randrange(1, lam)
    while math.gcd(e, lam) != 1:
        logger.debug("Exponent not coprime to lambda(n), drawing again")
        e = csprng.randrange(1, lam)

    d = mod_inverse(e, lam)

    logger.info(f"Generated {n.bit_length()}-bit RSA modulus")
    return RSASecretKey(e, RSAPublicKey(d, n))
