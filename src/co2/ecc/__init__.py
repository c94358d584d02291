from .base import AdditiveGroup, GroupElement, Point
from .weierstrass import WeierstrassCurve
from .montgomery import MontgomeryCurve
from .edwards import TwistedEdwardsCurve, EDWARDS_IDENTITY
from .curves import (
    CURVES,
    CURVE25519,
    ED25519,
    SECP256K1,
    P256,
    SECP256R1,
    get_curve,
    register_curve
)
from .key_utils import generate_key_pair, public_key
from .implementation import (
    ecdh,
    ecdsa_sign,
    ecdsa_verify,
    eddsa_sign,
    eddsa_verify
)

SUPPORTED_CURVES = ["Curve25519", "Ed25519", "secp256k1", "P-256"]

__all__ = [
    'AdditiveGroup',
    'GroupElement',
    'Point',
    'WeierstrassCurve',
    'MontgomeryCurve',
    'TwistedEdwardsCurve',
    'EDWARDS_IDENTITY',
    'CURVES',
    'CURVE25519',
    'ED25519',
    'SECP256K1',
    'P256',
    'SECP256R1',
    'SUPPORTED_CURVES',
    'get_curve',
    'register_curve',
    'generate_key_pair',
    'public_key',
    'ecdh',
    'ecdsa_sign',
    'ecdsa_verify',
    'eddsa_sign',
    'eddsa_verify'
]
