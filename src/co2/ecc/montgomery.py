#!/usr/bin/env python3
"""
CO2 - Montgomery Curves
by^2 = x^3 + ax^2 + x (mod p), affine coordinates, None is the point at infinity.
"""

from ..core.modmath import mod_div
from .base import AdditiveGroup, Point


class MontgomeryCurve(AdditiveGroup):

    def __init__(self, name, a, b, p, g, n):
        super().__init__(name, p, g, n)
        self.a = a
        self.b = b

    def identity(self):
        return None

    def add(self, P, Q):
        # same case split as the Weierstrass law, Montgomery slope and x3
        if P is None:
            return Q
        if Q is None:
            return P

        p = self.p
        x1, y1 = P
        x2, y2 = Q

        if (x1 - x2) % p == 0:
            if (y1 + y2) % p == 0:
                return None
            lam = mod_div(3 * x1 * x1 + 2 * self.a * x1 + 1, 2 * self.b * y1, p)
        else:
            lam = mod_div(y1 - y2, x1 - x2, p)

        x3 = (self.b * lam * lam - self.a - x1 - x2) % p
        y3 = (lam * (x1 - x3) - y1) % p
        return Point(x3, y3)

    def negate(self, P):
        if P is None:
            return None
        x, y = P
        return Point(x, -y % self.p)

    def validate(self, P):
        if P is None:
            return True
        p = self.p
        x, y = P
        return self.b * y * y % p == (pow(x, 3, p) + self.a * x * x + x) % p

    def point_to_integer(self, P):
        if P is None:
            raise ValueError("The point at infinity has no x-coordinate")
        return P[0]
