"""Points on the SM2 curve in Jacobian projective coordinates."""

from __future__ import annotations

from dataclasses import dataclass

# Curve y^2 = x^3 + a*x + b over GF(P), with base point (GX, GY) of order N.
P = int("FFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFF", 16)
A = int("FFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00000000FFFFFFFFFFFFFFFC", 16)
B = int("28E9FA9E9D9F5E344D5A9E4BCF6509A7F39789F515AB8F92DDBCBD414D940E93", 16)
N = int("FFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFF7203DF6B21C6052B53BBF40939D54123", 16)
GX = int("32C4AE2C1F1981195F9904466A39C9948FE30BBFF2660BE1715A4589334C74C7", 16)
GY = int("BC3736A2F4F6779C59BDCEE36B692153D0A9877CC62A474002DF32E52139F0A0", 16)


@dataclass(frozen=True)
class JacobianPoint:
    """A point (X, Y, Z) standing for the affine point (X/Z^2, Y/Z^3).

    A point with Z == 0 is the point at infinity.
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % P)
        object.__setattr__(self, "y", self.y % P)
        object.__setattr__(self, "z", self.z % P)

    @classmethod
    def from_affine(cls, x: int, y: int) -> JacobianPoint:
        """Lift an affine point; (0, 0) stands for the point at infinity."""
        z = 0 if x % P == 0 and y % P == 0 else 1
        return cls(x, y, z)

    def is_infinity(self) -> bool:
        """Report whether this is the point at infinity."""
        return self.z == 0

    def double(self) -> JacobianPoint:
        """Return 2 * self."""
        if self.is_infinity():
            return self
        x, y, z = self.x, self.y, self.z
        y2 = y * y % P
        z2 = z * z % P
        z4 = z2 * z2 % P
        y4 = y2 * y2 % P
        s = 4 * x * y2 % P
        m = (3 * x * x + A * z4) % P
        x3 = (m * m - 2 * s) % P
        y3 = (m * (s - x3) - 8 * y4) % P
        z3 = ((y + z) * (y + z) - z2 - y2) % P
        return JacobianPoint(x3, y3, z3)

    def add(self, other: JacobianPoint) -> JacobianPoint:
        """Return self + other."""
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        z12 = self.z * self.z % P
        z22 = other.z * other.z % P
        u1 = self.x * z22 % P
        u2 = other.x * z12 % P
        s1 = self.y * z22 * other.z % P
        s2 = other.y * z12 * self.z % P
        if u1 == u2 and s1 == s2:
            return self.double()
        h = (u2 - u1) % P
        r = (s2 - s1) % P
        h2 = h * h % P
        h3 = h2 * h % P
        u1h2 = u1 * h2 % P
        x3 = (r * r - h3 - 2 * u1h2) % P
        y3 = (r * (u1h2 - x3) - s1 * h3) % P
        z3 = self.z * other.z * h % P
        return JacobianPoint(x3, y3, z3)

    def add_affine(self, x: int, y: int) -> JacobianPoint:
        """Return self + (x, y), where (x, y) is an affine point."""
        x %= P
        y %= P
        if x == 0 and y == 0:
            return self
        if self.is_infinity():
            return JacobianPoint(x, y, 1)
        x1, y1, z1 = self.x, self.y, self.z
        z1z1 = z1 * z1 % P
        u2 = x * z1z1 % P
        s2 = y * z1 * z1z1 % P
        h = (u2 - x1) % P
        r = 2 * (s2 - y1) % P
        if h == 0 and r == 0:
            return self.double()
        i = 4 * h * h % P
        j = h * i % P
        v = x1 * i % P
        x3 = (r * r - j - 2 * v) % P
        y3 = (r * (v - x3) - 2 * y1 * j) % P
        z3 = 2 * z1 * h % P
        return JacobianPoint(x3, y3, z3)

    def negate(self) -> JacobianPoint:
        """Return -self."""
        return JacobianPoint(self.x, -self.y, self.z)

    def to_affine(self) -> tuple[int, int]:
        """Return the affine coordinates; the point at infinity gives (0, 0)."""
        if self.is_infinity():
            return 0, 0
        z_inv = pow(self.z, P - 2, P)
        z_inv2 = z_inv * z_inv % P
        return self.x * z_inv2 % P, self.y * z_inv2 * z_inv % P