"""Width-4 non-adjacent form of SM2 scalars."""

from __future__ import annotations

# Order of the SM2 base point.
_N = int("FFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFF7203DF6B21C6052B53BBF40939D54123", 16)

_WIDTH = 4
_POW2 = 1 << _WIDTH
_SIGN = _POW2 >> 1
_MASK = _POW2 - 1


def generate_wnaf(k: bytes) -> list[int]:
    """Return the width-4 NAF digits of k mod N, least significant first."""
    n = int.from_bytes(bytes(k), "big")
    if n >= _N:
        n %= _N
    wnaf = [0] * (n.bit_length() + 1)
    if n == 0:
        return wnaf

    carry = False
    length = 0
    pos = 0
    while pos <= n.bit_length():
        if (n >> pos) & 1 == int(carry):
            pos += 1
            continue
        n >>= pos
        digit = n & _MASK
        if carry:
            digit += 1
        carry = bool(digit & _SIGN)
        if carry:
            digit -= _POW2
        length += pos
        wnaf[length] = digit
        pos = _WIDTH
    return wnaf[: length + 1]


def wnaf_reversed(wnaf: list[int]) -> list[int]:
    """Return the digits in reverse order, most significant first."""
    return list(reversed(wnaf))