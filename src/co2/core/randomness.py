#!/usr/bin/env python3
"""
CO2 - Randomness Sources
Two deliberately separate generators: a fast one for probabilistic test
witnesses and a cryptographically secure one for anything secret.
"""

import random
from Crypto.Random.random import StrongRandom


class FastRandom:
    """
    Fast, seedable pseudo-random generator.

    Only fit for values that hide nothing, such as Miller-Rabin witnesses.
    """

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def randrange(self, start, stop):
        # uniform integer in [start, stop)
        return self._random.randrange(start, stop)

    def getrandbits(self, k):
        return self._random.getrandbits(k)


class SecureRandom:
    """
    Cryptographically secure generator backed by the operating system
    entropy pool through PyCryptodome.

    Prime candidates, RSA exponents, private keys and signature nonces
    are drawn from here and nowhere else.
    """

    def __init__(self):
        self._random = StrongRandom()

    def randrange(self, start, stop):
        # uniform integer in [start, stop)
        return self._random.randrange(start, stop)

    def getrandbits(self, k):
        return self._random.getrandbits(k)


def require_secure(csprng):
    if not isinstance(csprng, SecureRandom):
        raise TypeError(f"A SecureRandom generator is required here, got {type(csprng).__name__}")
    return csprng
