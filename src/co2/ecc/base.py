#!/usr/bin/env python3
"""
CO2 - Additive Group Base
The contract every curve shape implements, plus GroupElement, a point
bound to the curve it lives on.
"""

from collections import namedtuple

# affine coordinates; short-Weierstrass and Montgomery curves use None
# for the point at infinity, twisted Edwards curves never need it
Point = namedtuple("Point", ["x", "y"])


class AdditiveGroup:
    """
    Base class for an additive group of curve points.

    Subclasses provide identity, generator, order, add, negate, validate
    and point_to_integer. double and scalar_multiply have generic
    defaults built from those.
    """

    def __init__(self, name, p, g, n):
        self.name = name
        self.p = p
        self.g = g
        self.n = n

    def identity(self):
        raise NotImplementedError("Subclasses must implement this method")

    def generator(self):
        return self.g

    def order(self):
        return self.n

    def add(self, P, Q):
        raise NotImplementedError("Subclasses must implement this method")

    def negate(self, P):
        raise NotImplementedError("Subclasses must implement this method")

    def validate(self, P):
        raise NotImplementedError("Subclasses must implement this method")

    def point_to_integer(self, P):
        raise NotImplementedError("Subclasses must implement this method")

    def double(self, P):
        return self.add(P, P)

    def subtract(self, P, Q):
        return self.add(P, self.negate(Q))

    def is_identity(self, P):
        return P == self.identity()

    def scalar_multiply(self, k, P):
        """
        Multiply a point by a non-negative scalar.

        Double-and-add, least significant bit first: the running point is
        doubled once per bit and added into the accumulator whenever the
        bit is set. Not constant-time.

        Args:
            k: Non-negative scalar
            P: Point on this curve

        Returns:
            Point k * P
        """
        if k < 0:
            raise ValueError("Scalar must be non-negative; reduce it modulo the order first")

        result = self.identity()
        while k > 0:
            if k & 1:
                result = self.add(result, P)
            k >>= 1
            # skip the doubling nobody will use
            if k:
                P = self.double(P)
        return result

    def element(self, P):
        return GroupElement(self, P)

    def generator_element(self):
        return GroupElement(self, self.generator())

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"


class GroupElement:
    """
    A point together with the curve it belongs to.

    Arithmetic is only defined between elements of the same curve and
    delegates to that curve's named operations.
    """

    __slots__ = ("curve", "point")

    def __init__(self, curve, point):
        self.curve = curve
        self.point = point

    def _check_same_curve(self, other):
        if not isinstance(other, GroupElement):
            raise TypeError(f"Expected a GroupElement, got {type(other).__name__}")
        if other.curve is not self.curve:
            raise TypeError(f"Cannot combine points of {self.curve.name} and {other.curve.name}")

    def add(self, other):
        self._check_same_curve(other)
        return GroupElement(self.curve, self.curve.add(self.point, other.point))

    def subtract(self, other):
        self._check_same_curve(other)
        return GroupElement(self.curve, self.curve.subtract(self.point, other.point))

    def negate(self):
        return GroupElement(self.curve, self.curve.negate(self.point))

    def multiply(self, k):
        return GroupElement(self.curve, self.curve.scalar_multiply(k, self.point))

    def validate(self):
        return self.curve.validate(self.point)

    def to_integer(self):
        return self.curve.point_to_integer(self.point)

    def is_identity(self):
        return self.curve.is_identity(self.point)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, k):
        if not isinstance(k, int):
            return NotImplemented
        return self.multiply(k)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, GroupElement):
            return NotImplemented
        return self.curve is other.curve and self.point == other.point

    def __hash__(self):
        return hash((id(self.curve), self.point))

    def __repr__(self):
        return f"GroupElement({self.curve.name}, {self.point!r})"
