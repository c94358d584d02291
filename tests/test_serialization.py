"""
Tests for the byte encodings of integers, points, keys and signatures.
"""

import pytest

from co2.core import FastRandom, SecureRandom, message_to_integer
from co2.ecc import ED25519, P256, Point, ecdsa_sign, ecdsa_verify, eddsa_sign, eddsa_verify, generate_key_pair
from co2.rsa import RSAPublicKey, RSASecretKey
from co2.rsa import generate_key_pair as generate_rsa_key_pair
from co2.rsa import sign as rsa_sign
from co2.rsa import verify as rsa_verify
from co2.serialization import (
    decode_fields,
    decode_int,
    decode_point,
    dump_rsa_public_key,
    dump_rsa_secret_key,
    dump_signature,
    encode_fields,
    encode_int,
    encode_point,
    load_rsa_public_key,
    load_rsa_secret_key,
    load_signature
)

MESSAGE = message_to_integer(b"serialize me")


def test_encode_int_layout():
    assert encode_int(0) == b"\x01\x00\x00\x00\x00"
    assert encode_int(1) == b"\x02\x00\x00\x00\x01\x01"
    assert encode_int(-258) == b"\x00\x00\x00\x00\x02\x01\x02"


@pytest.mark.parametrize("n", [0, 1, -1, 255, -256, 2 ** 64, -(2 ** 3071 + 12345)])
def test_int_round_trip(n):
    value, offset = decode_int(encode_int(n))
    assert value == n
    assert offset == len(encode_int(n))


def test_decode_int_at_offset():
    data = encode_int(7) + encode_int(-9)
    first, offset = decode_int(data)
    second, end = decode_int(data, offset)
    assert (first, second) == (7, -9)
    assert end == len(data)


@pytest.mark.parametrize("data", [
    b"",
    b"\x02\x00\x00",
    b"\x02\x00\x00\x00\x02\x01",
    b"\x03\x00\x00\x00\x01\x01",
    b"\x01\x00\x00\x00\x01\x05",
    b"\x02\x00\x00\x00\x00",
])
def test_decode_int_rejects_malformed(data):
    with pytest.raises(ValueError):
        decode_int(data)


def test_point_round_trip():
    G = P256.generator()
    assert decode_point(encode_point(G)) == (G, len(encode_point(G)))
    assert encode_point(None) == b"\x00"
    assert decode_point(b"\x00") == (None, 1)


def test_decode_point_rejects_bad_tag():
    with pytest.raises(ValueError):
        decode_point(b"\x07")
    with pytest.raises(ValueError):
        decode_point(b"")


def test_decode_fields_rejects_trailing_bytes():
    data = encode_fields(1, 2) + b"\x00"
    with pytest.raises(ValueError):
        decode_fields(data, ("int", "int"))


def test_decode_fields_mixed_record():
    data = encode_fields(Point(1, 2), 3, None)
    assert decode_fields(data, ("point", "int", "point")) == (Point(1, 2), 3, None)


def test_decode_fields_rejects_unknown_kind():
    with pytest.raises(ValueError):
        decode_fields(encode_int(1), ("float",))


def test_rsa_keys_round_trip():
    secret = RSASecretKey(65537, RSAPublicKey(2753, 3233))
    assert load_rsa_secret_key(dump_rsa_secret_key(secret)) == secret
    assert load_rsa_public_key(dump_rsa_public_key(secret.public_key())) == secret.public_key()


def test_ecdsa_signature_survives_serialization(csprng, hasher):
    sk, pk = generate_key_pair(P256, csprng)
    signature = ecdsa_sign(MESSAGE, sk, P256, csprng, hasher)
    restored = load_signature(dump_signature(signature, "ecdsa"), "ecdsa")
    assert restored == signature
    assert ecdsa_verify(MESSAGE, pk, restored, P256, hasher)


def test_eddsa_signature_survives_serialization(csprng, hasher):
    sk, pk = generate_key_pair(ED25519, csprng)
    signature = eddsa_sign(MESSAGE, sk, ED25519, csprng, hasher)
    restored = load_signature(dump_signature(signature, "eddsa"), "eddsa")
    assert restored == signature
    assert eddsa_verify(MESSAGE, pk, restored, ED25519, hasher)


def test_rsa_signature_survives_serialization(hasher):
    secret = generate_rsa_key_pair(FastRandom(5), SecureRandom(), key_size=1024)
    public = load_rsa_public_key(dump_rsa_public_key(secret.public_key()))
    signature = rsa_sign(load_rsa_secret_key(dump_rsa_secret_key(secret)), MESSAGE, hasher)
    restored = load_signature(dump_signature(signature, "rsa"), "rsa")
    assert rsa_verify(public, MESSAGE, restored, hasher)


def test_unknown_signature_scheme():
    with pytest.raises(ValueError):
        dump_signature((1, 2), "dsa")
    with pytest.raises(ValueError):
        load_signature(b"", "dsa")
