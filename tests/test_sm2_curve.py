import pytest

from gmsm.sm2_curve import SM2Curve, p256_sm2
from gmsm.sm2_jacobian import GX, GY, N, P


def _b(k: int) -> bytes:
    return k.to_bytes(max(1, (k.bit_length() + 7) // 8), "big")


@pytest.fixture
def curve():
    return p256_sm2()


def test_singleton_and_params(curve):
    assert p256_sm2() is curve
    assert curve.name == "SM2-P-256"
    assert curve.bit_size == 256
    assert curve.p == P
    assert curve.n == N
    assert (curve.gx, curve.gy) == (GX, GY)


def test_generator_on_curve(curve):
    assert curve.is_on_curve(GX, GY)
    assert not curve.is_on_curve(GX, GY + 1)


def test_base_mult_one_is_generator(curve):
    assert curve.scalar_base_mult(b"\x01") == (GX, GY)


def test_base_mult_order_is_infinity(curve):
    assert curve.scalar_base_mult(_b(N)) == (0, 0)
    assert curve.scalar_base_mult(b"") == (0, 0)


def test_base_mult_reduces_mod_n(curve):
    assert curve.scalar_base_mult(_b(N + 1)) == (GX, GY)
    assert curve.scalar_base_mult(_b(N + 5)) == curve.scalar_base_mult(b"\x05")


def test_order_minus_one_is_negation(curve):
    assert curve.scalar_base_mult(_b(N - 1)) == (GX, P - GY)


@pytest.mark.parametrize("k", [2, 3, 7, 8, 15, 16, 255, 0x1234567, N - 2])
def test_scalar_mult_matches_base_mult(curve, k):
    assert curve.scalar_mult(GX, GY, _b(k)) == curve.scalar_base_mult(_b(k))


@pytest.mark.parametrize("k", [1, 9, 123456789, N - 3])
def test_results_are_on_curve(curve, k):
    x, y = curve.scalar_base_mult(_b(k))
    assert curve.is_on_curve(x, y)


def test_double_matches_scalar_two(curve):
    assert curve.double(GX, GY) == curve.scalar_base_mult(b"\x02")


def test_add_is_consistent(curve):
    g2 = curve.scalar_base_mult(b"\x02")
    g3 = curve.scalar_base_mult(b"\x03")
    assert curve.add(*g2, *g3) == curve.scalar_base_mult(b"\x05")
    assert curve.add(*g3, *g2) == curve.scalar_base_mult(b"\x05")
    assert curve.add(GX, GY, *g2) == g3


def test_add_with_infinity(curve):
    assert curve.add(GX, GY, 0, 0) == (GX, GY)
    assert curve.add(0, 0, GX, GY) == (GX, GY)
    assert curve.double(0, 0) == (0, 0)


def test_add_inverse_gives_infinity(curve):
    assert curve.add(GX, GY, GX, P - GY) == (0, 0)


def test_scalar_mult_composes(curve):
    q = curve.scalar_base_mult(_b(0xABCDEF))
    lhs = curve.scalar_mult(*q, _b(77))
    rhs = curve.scalar_base_mult(_b(0xABCDEF * 77 % N))
    assert lhs == rhs


def test_scalar_mult_of_other_point_by_order(curve):
    q = curve.scalar_base_mult(_b(42))
    assert curve.scalar_mult(*q, _b(N)) == (0, 0)


def test_new_instance_equal_behaviour():
    fresh = SM2Curve()
    assert fresh == p256_sm2()
    assert fresh.scalar_base_mult(b"\x01") == (GX, GY)