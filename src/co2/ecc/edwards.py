#!/usr/bin/env python3
"""
CO2 - Twisted Edwards Curves
ax^2 + y^2 = 1 + dx^2y^2 (mod p). The identity is the affine point (0, 1);
there is no point at infinity.
"""

from ..core.modmath import mod_div
from .base import AdditiveGroup, Point

EDWARDS_IDENTITY = Point(0, 1)


class TwistedEdwardsCurve(AdditiveGroup):

    def __init__(self, name, a, d, p, g, n):
        super().__init__(name, p, g, n)
        self.a = a
        self.d = d

    def identity(self):
        return EDWARDS_IDENTITY

    def double(self, P):
        # x' = 2xy / (ax^2 + y^2), y' = (y^2 - ax^2) / (2 - ax^2 - y^2)
        p = self.p
        x, y = P
        ax2 = self.a * x * x
        y2 = y * y
        return Point(
            mod_div(2 * x * y, ax2 + y2, p),
            mod_div(y2 - ax2, 2 - ax2 - y2, p),
        )

    def add(self, P, Q):
        """
        Add two points with the unified twisted Edwards law.

        Equal inputs are routed to double().

        Args:
            P: First point
            Q: Second point

        Returns:
            Point P + Q
        """
        if P == Q:
            return self.double(P)

        p = self.p
        x1, y1 = P
        x2, y2 = Q
        t = self.d * x1 * x2 % p * y1 * y2
        return Point(
            mod_div(x1 * y2 + x2 * y1, 1 + t, p),
            mod_div(y1 * y2 - self.a * x1 * x2, 1 - t, p),
        )

    def negate(self, P):
        x, y = P
        return Point(-x % self.p, y)

    def validate(self, P):
        p = self.p
        x, y = P
        x2 = x * x
        y2 = y * y
        return (self.a * x2 + y2) % p == (1 + self.d * x2 % p * y2) % p

    def point_to_integer(self, P):
        return P[1]
