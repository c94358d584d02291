#!/usr/bin/env python3
"""
CO2 - Serialization
Byte encodings for integers, points, keys and signatures.

Integer: [sign:1][length:4][big-endian magnitude:length]
         sign is 0 for negative, 1 for zero, 2 for positive
Point:   [tag:1] then, for an affine point, x and y as integers
         tag is 0 for the point at infinity, 1 for an affine point
Record:  its fields encoded back to back in declaration order
"""

import struct

from .core.modmath import SIGN_NEGATIVE, SIGN_ZERO, SIGN_POSITIVE, integer_sign_tag
from .ecc.base import Point
from .rsa.key_utils import RSAPublicKey, RSASecretKey

INT_HEADER = struct.Struct(">BI")

POINT_INFINITY = 0
POINT_AFFINE = 1

SIGNATURE_LAYOUTS = {
    "ecdsa": ("int", "int"),
    "eddsa": ("point", "int"),
    "rsa": ("int",),
}


def encode_int(n):
    magnitude = abs(n)
    body = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, 'big')
    return INT_HEADER.pack(integer_sign_tag(n), len(body)) + body


def decode_int(data, offset=0):
    """
    Decode one integer.

    Args:
        data: Encoded bytes
        offset: Where the integer starts

    Returns:
        tuple: (value, offset just past the integer)
    """
    if len(data) < offset + INT_HEADER.size:
        raise ValueError("Truncated integer header")
    sign, length = INT_HEADER.unpack_from(data, offset)
    offset += INT_HEADER.size

    if len(data) < offset + length:
        raise ValueError(f"Truncated integer: expected {length} magnitude bytes")
    magnitude = int.from_bytes(data[offset:offset + length], 'big')
    offset += length

    if sign == SIGN_ZERO:
        if magnitude != 0:
            raise ValueError("Zero sign tag with non-zero magnitude")
        return 0, offset
    if sign not in (SIGN_NEGATIVE, SIGN_POSITIVE) or magnitude == 0:
        raise ValueError(f"Invalid integer sign tag: {sign}")
    return (-magnitude if sign == SIGN_NEGATIVE else magnitude), offset


def encode_point(point):
    if point is None:
        return bytes([POINT_INFINITY])
    x, y = point
    return bytes([POINT_AFFINE]) + encode_int(x) + encode_int(y)


def decode_point(data, offset=0):
    if len(data) <= offset:
        raise ValueError("Truncated point")
    tag = data[offset]
    offset += 1
    if tag == POINT_INFINITY:
        return None, offset
    if tag != POINT_AFFINE:
        raise ValueError(f"Invalid point tag: {tag}")
    x, offset = decode_int(data, offset)
    y, offset = decode_int(data, offset)
    return Point(x, y), offset


def encode_fields(*fields):
    # ints as integers, everything else (pairs or None) as points
    out = b""
    for field in fields:
        if isinstance(field, int):
            out += encode_int(field)
        else:
            out += encode_point(field)
    return out


def decode_fields(data, kinds):
    """
    Decode a record of integers and points.

    Args:
        data: Encoded bytes, consumed entirely
        kinds: Sequence of "int" / "point" naming each field

    Returns:
        tuple: The decoded fields in order
    """
    decoders = {"int": decode_int, "point": decode_point}
    fields = []
    offset = 0
    for kind in kinds:
        if kind not in decoders:
            raise ValueError(f"Unknown field kind: {kind}")
        value, offset = decoders[kind](data, offset)
        fields.append(value)
    if offset != len(data):
        raise ValueError(f"{len(data) - offset} trailing bytes after record")
    return tuple(fields)


def dump_rsa_public_key(public_key):
    return encode_fields(public_key.exponent, public_key.modulus)


def load_rsa_public_key(data):
    return RSAPublicKey(*decode_fields(data, ("int", "int")))


def dump_rsa_secret_key(secret_key):
    public = secret_key.public_key()
    return encode_fields(secret_key.exponent, public.exponent, public.modulus)


def load_rsa_secret_key(data):
    exponent, public_exponent, modulus = decode_fields(data, ("int", "int", "int"))
    return RSASecretKey(exponent, RSAPublicKey(public_exponent, modulus))


def dump_signature(signature, scheme):
    if scheme not in SIGNATURE_LAYOUTS:
        raise ValueError(f"Unsupported signature scheme: {scheme}. Supported schemes: {list(SIGNATURE_LAYOUTS.keys())}")
    if scheme == "rsa":
        return encode_fields(signature)
    return encode_fields(*signature)


def load_signature(data, scheme):
    if scheme not in SIGNATURE_LAYOUTS:
        raise ValueError(f"Unsupported signature scheme: {scheme}. Supported schemes: {list(SIGNATURE_LAYOUTS.keys())}")
    fields = decode_fields(data, SIGNATURE_LAYOUTS[scheme])
    if scheme == "rsa":
        return fields[0]
    return fields
