"""The SM2 recommended 256-bit prime curve and its group operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache

from gmsm.sm2_jacobian import A, B, GX, GY, N, P, JacobianPoint
from gmsm.wnaf import generate_wnaf, wnaf_reversed

# Largest absolute digit produced by the width-4 NAF.
_MAX_DIGIT = 7


def _odd_multiples(x: int, y: int) -> tuple[JacobianPoint, ...]:
    """Return a table whose entry i is i * (x, y) for 0 <= i <= 7."""
    base = JacobianPoint(x, y, 1)
    table = [JacobianPoint(0, 0, 0), base]
    for i in range(2, _MAX_DIGIT + 1, 2):
        doubled = table[i // 2].double()
        table.append(doubled)
        table.append(doubled.add_affine(x, y))
    return tuple(table[: _MAX_DIGIT + 1])


def _multiply(table: tuple[JacobianPoint, ...], k: bytes) -> JacobianPoint:
    """Multiply the point tabulated in table by the scalar k (mod N)."""
    result = JacobianPoint(0, 0, 0)
    for digit in wnaf_reversed(generate_wnaf(k)):
        result = result.double()
        if digit > 0:
            result = result.add(table[digit])
        elif digit < 0:
            result = result.add(table[-digit].negate())
    return result


@dataclass(frozen=True)
class SM2Curve:
    """The curve y^2 = x^3 + a*x + b over GF(p) with base point (gx, gy) of order n.

    Points are affine (x, y) integer pairs; (0, 0) stands for the point at infinity.
    """

    name: str = "SM2-P-256"
    p: int = P
    n: int = N
    a: int = A
    b: int = B
    gx: int = GX
    gy: int = GY
    bit_size: int = 256
    _base_table: tuple[JacobianPoint, ...] = field(
        default_factory=lambda: _odd_multiples(GX, GY), repr=False, compare=False
    )

    def is_on_curve(self, x: int, y: int) -> bool:
        """Report whether (x, y), reduced mod p, satisfies the curve equation."""
        x %= self.p
        y %= self.p
        rhs = (x * x * x + self.a * x + self.b) % self.p
        return rhs == y * y % self.p

    def add(self, x1: int, y1: int, x2: int, y2: int) -> tuple[int, int]:
        """Return the affine sum of (x1, y1) and (x2, y2)."""
        first = JacobianPoint.from_affine(x1, y1)
        second = JacobianPoint.from_affine(x2, y2)
        return first.add(second).to_affine()

    def double(self, x1: int, y1: int) -> tuple[int, int]:
        """Return 2 * (x1, y1)."""
        return JacobianPoint.from_affine(x1, y1).double().to_affine()

    def scalar_mult(self, x: int, y: int, k: bytes) -> tuple[int, int]:
        """Return k * (x, y), where k is a big-endian scalar taken mod n."""
        return _multiply(_odd_multiples(x % self.p, y % self.p), bytes(k)).to_affine()

    def scalar_base_mult(self, k: bytes) -> tuple[int, int]:
        """Return k * G, where k is a big-endian scalar taken mod n."""
        return _multiply(self._base_table, bytes(k)).to_affine()


@cache
def p256_sm2() -> SM2Curve:
    """Return the shared SM2 curve instance."""
    return SM2Curve()