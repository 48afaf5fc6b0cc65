"""The SM3 cryptographic hash function (GB/T 32905-2016)."""

from __future__ import annotations

import struct

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_IV = (
    0x7380166F,
    0x4914B2B9,
    0x172442D7,
    0xDA8A0600,
    0xA96F30BC,
    0x163138AA,
    0xE38DEE4D,
    0xB0FB0E4E,
)


def _rotl(x: int, n: int) -> int:
    n %= 32
    if n == 0:
        return x
    return ((x << n) | (x >> (32 - n))) & _MASK


def _p0(x: int) -> int:
    return x ^ _rotl(x, 9) ^ _rotl(x, 17)


def _p1(x: int) -> int:
    return x ^ _rotl(x, 15) ^ _rotl(x, 23)


_ROUND_CONSTANTS = tuple(
    _rotl(0x79CC4519 if j < 16 else 0x7A879D8A, j) for j in range(64)
)


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Run the SM3 compression function over one 64-byte block."""
    w = list(struct.unpack(">16I", block))
    for j in range(16, 68):
        w.append(
            _p1(w[j - 16] ^ w[j - 9] ^ _rotl(w[j - 3], 15))
            ^ _rotl(w[j - 13], 7)
            ^ w[j - 6]
        )
    w1 = [w[j] ^ w[j + 4] for j in range(64)]

    a, b, c, d, e, f, g, h = state
    for j, tj in enumerate(_ROUND_CONSTANTS):
        if j < 16:
            ff = a ^ b ^ c
            gg = e ^ f ^ g
        else:
            ff = (a & b) | (a & c) | (b & c)
            gg = (e & f) | (~e & _MASK & g)
        a12 = _rotl(a, 12)
        ss1 = _rotl((a12 + e + tj) & _MASK, 7)
        ss2 = ss1 ^ a12
        tt1 = (ff + d + ss2 + w1[j]) & _MASK
        tt2 = (gg + h + ss1 + w[j]) & _MASK
        d, c, b, a = c, _rotl(b, 9), a, tt1
        h, g, f, e = g, _rotl(f, 19), e, _p0(tt2)

    return tuple(
        x ^ y for x, y in zip(state, (a, b, c, d, e, f, g, h))
    )


class SM3:
    """Incremental SM3 hash object with a hashlib-style interface."""

    name = "sm3"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return the hash to its initial, empty state."""
        self._state: tuple[int, ...] = _IV
        self._length = 0
        self._buffer = b""

    def update(self, data: bytes) -> None:
        """Feed more bytes into the running hash."""
        data = bytes(data)
        self._length += len(data)
        buffered = self._buffer + data
        full = len(buffered) - len(buffered) % BLOCK_SIZE
        state = self._state
        for offset in range(0, full, BLOCK_SIZE):
            state = _compress(state, buffered[offset:offset + BLOCK_SIZE])
        self._state = state
        self._buffer = buffered[full:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state unchanged."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = self._buffer + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack(">Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + BLOCK_SIZE])
        return struct.pack(">8I", *state)

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> SM3:
        """Return an independent clone of this hash object."""
        clone = SM3.__new__(SM3)
        clone._state = self._state
        clone._length = self._length
        clone._buffer = self._buffer
        return clone


def new(data: bytes = b"") -> SM3:
    """Create a new SM3 hash object, optionally primed with data."""
    return SM3(data)


def sm3_sum(data: bytes) -> bytes:
    """Return the SM3 digest of data in one call."""
    return SM3(data).digest()