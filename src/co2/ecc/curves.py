#!/usr/bin/env python3
"""
CO2 - Curve Registry
Fixed named curves, built once at import time and shared read-only.
"""

import logging

from ..core.modmath import mod_div
from .base import Point
from .weierstrass import WeierstrassCurve
from .montgomery import MontgomeryCurve
from .edwards import TwistedEdwardsCurve

logger = logging.getLogger("co2")

# dictionary to track curves by name
CURVES = {}


def register_curve(curve, *aliases):
    # refuse any curve whose generator is not on the curve
    if not curve.validate(curve.generator()):
        raise ValueError(f"Generator point not on curve {curve.name}")
    for name in (curve.name,) + aliases:
        CURVES[name] = curve
    return curve


def get_curve(name):
    """
    Look up a registered curve.

    Args:
        name: Curve name, e.g. "Ed25519" or "P-256"

    Returns:
        AdditiveGroup: The shared curve instance
    """
    if name not in CURVES:
        raise ValueError(f"Unsupported curve: {name}. Supported curves: {list(CURVES.keys())}")
    return CURVES[name]


# Curve25519: y^2 = x^3 + 486662x^2 + x over 2^255 - 19
P25519 = (1 << 255) - 19
L25519 = (1 << 252) + 27742317777372353535851937790883648493

CURVE25519 = register_curve(MontgomeryCurve(
    name="Curve25519",
    a=486662,
    b=1,
    p=P25519,
    g=Point(9, 43114425171068552920764898935933967039370386198203806730763910166200978582548),
    n=L25519,
))

# Ed25519: -x^2 + y^2 = 1 + dx^2y^2, birationally equivalent to Curve25519
ED25519 = register_curve(TwistedEdwardsCurve(
    name="Ed25519",
    a=-1,
    d=mod_div(-121665, 121666, P25519),
    p=P25519,
    g=Point(
        15112221349535400772501151409588531511454012693041857206046113283949847762202,
        mod_div(4, 5, P25519),
    ),
    n=L25519,
))

# secp256k1 parameters
SECP256K1 = register_curve(WeierstrassCurve(
    name="secp256k1",
    a=0,
    b=7,
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    g=Point(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
))

# P-256/secp256r1 parameters
P256 = register_curve(WeierstrassCurve(
    name="P-256",
    a=-3,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    g=Point(
        0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    ),
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
), "secp256r1")

SECP256R1 = P256

logger.debug(f"Registered curves: {', '.join(CURVES.keys())}")
