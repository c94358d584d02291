import logging

from .config import DEFAULT_CONFIG, SUPPORTED_RSA_KEY_SIZES, load_config, get_config, set_config

# configure logging
logger = logging.getLogger("co2")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(get_config()["log_level"]).upper(), logging.WARNING))

# import components
from .modmath import mod_inverse, mod_div, hash_to_integer, message_to_integer
from .hashing import DigestHasher, HASH_ALGORITHMS, new_hasher
from .randomness import FastRandom, SecureRandom, require_secure

__all__ = [
    'DEFAULT_CONFIG',
    'SUPPORTED_RSA_KEY_SIZES',
    'load_config',
    'get_config',
    'set_config',
    'mod_inverse',
    'mod_div',
    'hash_to_integer',
    'message_to_integer',
    'DigestHasher',
    'HASH_ALGORITHMS',
    'new_hasher',
    'FastRandom',
    'SecureRandom',
    'require_secure',
]
