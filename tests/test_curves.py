"""
Tests for the curve shapes, the group contract and the curve registry.
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

from co2.ecc import (
    CURVES,
    CURVE25519,
    ED25519,
    EDWARDS_IDENTITY,
    P256,
    SECP256K1,
    SECP256R1,
    GroupElement,
    Point,
    WeierstrassCurve,
    get_curve,
    register_curve
)

ALL_CURVES = [CURVE25519, ED25519, SECP256K1, P256]
CURVE_IDS = [curve.name for curve in ALL_CURVES]

# y^2 = x^3 + 2x + 3 over F_97, (3, 6) generates a subgroup of order 5
TOY_CURVE = WeierstrassCurve(name="toy", a=2, b=3, p=97, g=Point(3, 6), n=5)


def random_point(curve, csprng):
    return curve.scalar_multiply(csprng.randrange(1, curve.order()), curve.generator())


def test_toy_curve_vector():
    P = Point(3, 6)
    assert TOY_CURVE.validate(P)

    doubled = TOY_CURVE.double(P)
    assert doubled == Point(80, 10)
    assert TOY_CURVE.validate(doubled)

    assert TOY_CURVE.add(P, TOY_CURVE.negate(P)) is None
    assert TOY_CURVE.scalar_multiply(5, P) is None
    assert TOY_CURVE.scalar_multiply(3, P) == TOY_CURVE.negate(doubled)


def test_toy_curve_rejects_point_off_curve():
    assert not TOY_CURVE.validate(Point(3, 7))
    assert TOY_CURVE.validate(None)


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_generator_is_on_its_curve(curve):
    assert curve.validate(curve.generator())


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_identity_is_neutral(curve, csprng):
    P = random_point(curve, csprng)
    assert curve.add(P, curve.identity()) == P
    assert curve.add(curve.identity(), P) == P


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_point_plus_negation_is_identity(curve, csprng):
    P = random_point(curve, csprng)
    assert curve.validate(curve.negate(P))
    assert curve.is_identity(curve.add(P, curve.negate(P)))
    assert curve.is_identity(curve.subtract(P, P))


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_order_times_generator_is_identity(curve):
    assert curve.is_identity(curve.scalar_multiply(curve.order(), curve.generator()))
    assert curve.scalar_multiply(curve.order() + 1, curve.generator()) == curve.generator()


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_addition_is_commutative(curve, csprng):
    for _ in range(3):
        P = random_point(curve, csprng)
        Q = random_point(curve, csprng)
        R = curve.add(P, Q)
        assert R == curve.add(Q, P)
        assert curve.validate(R)


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_scalar_multiplication_distributes(curve, csprng):
    a = csprng.randrange(1, curve.order())
    b = csprng.randrange(1, curve.order())
    G = curve.generator()
    lhs = curve.scalar_multiply(a + b, G)
    rhs = curve.add(curve.scalar_multiply(a, G), curve.scalar_multiply(b, G))
    assert lhs == rhs


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_double_matches_small_multiples(curve):
    G = curve.generator()
    assert curve.double(G) == curve.scalar_multiply(2, G)
    assert curve.add(curve.double(G), G) == curve.scalar_multiply(3, G)
    assert curve.scalar_multiply(1, G) == G
    assert curve.is_identity(curve.scalar_multiply(0, G))


@pytest.mark.parametrize("curve", ALL_CURVES, ids=CURVE_IDS)
def test_negative_scalar_is_rejected(curve):
    with pytest.raises(ValueError):
        curve.scalar_multiply(-1, curve.generator())


def test_edwards_identity_and_negation():
    assert ED25519.identity() == EDWARDS_IDENTITY == Point(0, 1)
    assert ED25519.validate(EDWARDS_IDENTITY)
    G = ED25519.generator()
    assert ED25519.negate(G) == Point(ED25519.p - G.x, G.y)
    assert ED25519.point_to_integer(G) == G.y
    assert ED25519.point_to_integer(EDWARDS_IDENTITY) == 1


def test_ed25519_parameters_derive_from_curve25519():
    p = CURVE25519.p
    assert ED25519.p == p
    assert ED25519.n == CURVE25519.n
    assert ED25519.a == -1
    assert (ED25519.d * 121666) % p == -121665 % p
    assert (ED25519.generator().y * 5) % p == 4


def test_point_at_infinity_has_no_integer():
    with pytest.raises(ValueError):
        P256.point_to_integer(None)
    with pytest.raises(ValueError):
        CURVE25519.point_to_integer(None)


@pytest.mark.parametrize("curve, cryptography_curve", [
    (P256, ec.SECP256R1()),
    (SECP256K1, ec.SECP256K1()),
], ids=["P-256", "secp256k1"])
def test_scalar_multiplication_matches_cryptography(curve, cryptography_curve, csprng):
    k = csprng.randrange(1, curve.order())
    numbers = ec.derive_private_key(k, cryptography_curve).public_key().public_numbers()
    assert curve.scalar_multiply(k, curve.generator()) == Point(numbers.x, numbers.y)


def test_curve25519_matches_x25519(csprng):
    raw = csprng.getrandbits(256).to_bytes(32, "little")
    k = int.from_bytes(raw, "little")
    # RFC 7748 clamping
    k &= ~7
    k &= ~(1 << 255)
    k |= 1 << 254

    public = X25519PrivateKey.from_private_bytes(raw).public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw
    )
    ours = CURVE25519.scalar_multiply(k, CURVE25519.generator())
    assert ours.x == int.from_bytes(public, "little")


def test_registry_lookup():
    assert get_curve("Ed25519") is ED25519
    assert get_curve("Curve25519") is CURVE25519
    assert get_curve("secp256k1") is SECP256K1
    assert get_curve("P-256") is P256
    assert get_curve("secp256r1") is P256
    assert SECP256R1 is P256
    assert set(CURVES) >= {"Curve25519", "Ed25519", "secp256k1", "P-256"}


def test_registry_rejects_unknown_curve():
    with pytest.raises(ValueError):
        get_curve("P-384")


def test_register_curve_rejects_bad_generator():
    bad = WeierstrassCurve(name="bad", a=2, b=3, p=97, g=Point(3, 7), n=5)
    with pytest.raises(ValueError):
        register_curve(bad)
    assert "bad" not in CURVES


def test_group_element_operators(csprng):
    G = ED25519.generator_element()
    P = 5 * G
    assert P == G * 5
    assert P.point == ED25519.scalar_multiply(5, ED25519.generator())
    assert P - G == 4 * G
    assert P + (-P) == ED25519.element(ED25519.identity())
    assert (P - P).is_identity()
    assert P.validate()
    assert P.to_integer() == P.point.y


def test_group_element_equality_requires_same_curve():
    a = P256.element(P256.generator())
    b = SECP256K1.element(P256.generator())
    assert a != b
    assert a == P256.generator_element()


def test_group_element_rejects_mixed_curves():
    a = P256.generator_element()
    b = SECP256K1.generator_element()
    with pytest.raises(TypeError):
        a + b
    with pytest.raises(TypeError):
        a - b
