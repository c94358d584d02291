#!/usr/bin/env python3
"""
CO2 - Hash Collaborator
Reusable digest objects built on cryptography.io hash primitives.
"""

import logging
from cryptography.hazmat.primitives import hashes

from .config import get_config

logger = logging.getLogger("co2")

# map hash names to their corresponding cryptography.io algorithm factories
HASH_ALGORITHMS = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha3_256": hashes.SHA3_256,
    "blake2s": lambda: hashes.BLAKE2s(32),
    "blake2b": lambda: hashes.BLAKE2b(64),
}


class DigestHasher:
    """
    Stateful hasher that can be finalized and reused.

    Wraps a cryptography.io hash context. finalize_and_reset() emits the
    digest of everything fed so far and starts a fresh context, so one
    instance serves the many hash calls a signature makes.
    """

    def __init__(self, algorithm=None):
        self.algorithm = algorithm if algorithm is not None else hashes.SHA256()
        if not isinstance(self.algorithm, hashes.HashAlgorithm):
            raise TypeError(f"Expected a cryptography HashAlgorithm, got {type(self.algorithm).__name__}")
        self._context = hashes.Hash(self.algorithm)

    @property
    def name(self):
        return self.algorithm.name

    @property
    def digest_size(self):
        return self.algorithm.digest_size

    def update(self, data):
        self._context.update(data)

    def finalize_and_reset(self):
        digest = self._context.finalize()
        self._context = hashes.Hash(self.algorithm)
        return digest

    def __repr__(self):
        return f"DigestHasher({self.name})"


def new_hasher(name=None):
    """
    Build a DigestHasher by algorithm name.

    Args:
        name: One of HASH_ALGORITHMS, defaults to the configured hash

    Returns:
        DigestHasher: Fresh hasher
    """
    if name is None:
        name = get_config()["hash_algorithm"]

    factory = HASH_ALGORITHMS.get(name.lower())
    if factory is None:
        raise ValueError(f"Unsupported hash algorithm: {name}. Supported algorithms: {list(HASH_ALGORITHMS.keys())}")

    logger.debug(f"Creating {name} hasher")
    return DigestHasher(factory())
