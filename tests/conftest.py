import pytest

from co2.core import DigestHasher, FastRandom, SecureRandom


@pytest.fixture
def hasher():
    return DigestHasher()


@pytest.fixture
def rng():
    # seeded so witness selection is reproducible
    return FastRandom(1234)


@pytest.fixture
def csprng():
    return SecureRandom()
