from .key_utils import (
    FIRST_PRIMES,
    RSAPublicKey,
    RSASecretKey,
    quick_prime_check,
    miller_rabin,
    is_prime,
    generate_secure_prime,
    generate_key_pair
)
from .implementation import RSADomainError, encrypt, decrypt, sign, verify

__all__ = [
    'FIRST_PRIMES',
    'RSAPublicKey',
    'RSASecretKey',
    'RSADomainError',
    'quick_prime_check',
    'miller_rabin',
    'is_prime',
    'generate_secure_prime',
    'generate_key_pair',
    'encrypt',
    'decrypt',
    'sign',
    'verify'
]
