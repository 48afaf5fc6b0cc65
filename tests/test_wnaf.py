import random

import pytest

from gmsm.wnaf import generate_wnaf, wnaf_reversed

N = int("FFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFF7203DF6B21C6052B53BBF40939D54123", 16)


def _value(digits):
    return sum(d << i for i, d in enumerate(digits))


def _scalars():
    rng = random.Random(1234)
    values = [1, 2, 3, 7, 8, 15, 16, 255, 1 << 200, N - 1]
    values += [rng.randrange(1, N) for _ in range(20)]
    return values


@pytest.mark.parametrize("k", _scalars())
def test_digits_represent_scalar(k):
    digits = generate_wnaf(k.to_bytes(32, "big"))
    assert _value(digits) == k


@pytest.mark.parametrize("k", _scalars())
def test_digit_shape(k):
    digits = generate_wnaf(k.to_bytes(32, "big"))
    nonzero = [i for i, d in enumerate(digits) if d]
    assert digits[-1] > 0
    for i in nonzero:
        assert digits[i] % 2 == 1
        assert -8 < digits[i] < 8
    for a, b in zip(nonzero, nonzero[1:]):
        assert b - a >= 4
    assert len(digits) <= k.bit_length() + 1


@pytest.mark.parametrize("data", [b"", bytes(32), N.to_bytes(32, "big")])
def test_zero_scalar(data):
    assert generate_wnaf(data) == [0]


def test_scalar_is_reduced_mod_order():
    k = 123456789
    assert generate_wnaf((N + k).to_bytes(33, "big")) == generate_wnaf(k.to_bytes(4, "big"))


def test_leading_zero_bytes_do_not_matter():
    k = 0xDEADBEEF
    assert generate_wnaf(k.to_bytes(4, "big")) == generate_wnaf(k.to_bytes(32, "big"))


@pytest.mark.parametrize("k", _scalars()[:5])
def test_reversed_round_trip(k):
    digits = generate_wnaf(k.to_bytes(32, "big"))
    rev = wnaf_reversed(digits)
    assert rev[0] == digits[-1]
    assert wnaf_reversed(rev) == digits
    assert len(rev) == len(digits)