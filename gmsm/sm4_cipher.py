"""The SM4 block cipher (GB/T 32907-2016)."""

from __future__ import annotations

import struct

BLOCK_SIZE = 16

_MASK = 0xFFFFFFFF

_FK = (0xA3B1BAC6, 0x56AA3350, 0x677D9197, 0xB27022DC)

# CK[i] byte j is (4*i + j) * 7 mod 256.
_CK = tuple(
    int.from_bytes(bytes(((4 * i + j) * 7) % 256 for j in range(4)), "big")
    for i in range(32)
)

_SBOX = bytes.fromhex(
    "d690e9fecce13db716b614c228fb2c05"
    "2b679a762abe04c3aa44132649860699"
    "9c4250f491ef987a33540b43edcfac62"
    "e4b31ca9c908e89580df94fa758f3fa6"
    "4707a7fcf37317ba83593c19e6854fa8"
    "686b81b27164da8bf8eb0f4b70569d35"
    "1e240e5e6358d1a225227c3b01217887"
    "d40046579fd327524c3602e7a0c4c89e"
    "eabf8ad240c738b5a3f7f2cef96115a1"
    "e0ae5da49b341a55ad933230f58cb1e3"
    "1df6e22e8266ca60c029 23ab0d534e6f".replace(" ", "")
    + "d5db3745defd8e2f03ff6a726d6c5b51"
    "8d1baf92bbddbc7f11d95c411f105ad8"
    "0ac13188a5cd7bbd2d74d012b8e5b4b0"
    "8969974a0c96777e65b9f109c56ec684"
    "18f07dec3adc4d2079ee5f3ed7cb3948"
)


class SM4Error(ValueError):
    """Raised for invalid SM4 keys or block sizes."""


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _tau(a: int) -> int:
    return int.from_bytes(bytes(_SBOX[b] for b in a.to_bytes(4, "big")), "big")


def _linear(b: int) -> int:
    return b ^ _rotl(b, 2) ^ _rotl(b, 10) ^ _rotl(b, 18) ^ _rotl(b, 24)


def _linear_key(b: int) -> int:
    return b ^ _rotl(b, 13) ^ _rotl(b, 23)


# Combined S-box and linear transform, one table per input byte position
# (least significant byte first).
_T_TABLES = tuple(
    tuple(_linear(_SBOX[v] << (8 * shift)) for v in range(256))
    for shift in range(4)
)


def _round_transform(x: int) -> int:
    t0, t1, t2, t3 = _T_TABLES
    return (
        t0[x & 0xFF]
        ^ t1[(x >> 8) & 0xFF]
        ^ t2[(x >> 16) & 0xFF]
        ^ t3[(x >> 24) & 0xFF]
    )


def _expand_key(key: bytes) -> tuple[int, ...]:
    k = [w ^ f for w, f in zip(struct.unpack(">4I", key), _FK)]
    round_keys = []
    for ck in _CK:
        rk = k[0] ^ _linear_key(_tau(k[1] ^ k[2] ^ k[3] ^ ck))
        round_keys.append(rk)
        k = [k[1], k[2], k[3], rk]
    return tuple(round_keys)


def _crypt(round_keys: tuple[int, ...], block: bytes) -> bytes:
    if len(block) != BLOCK_SIZE:
        raise SM4Error(f"SM4: invalid block size {len(block)}")
    x0, x1, x2, x3 = struct.unpack(">4I", block)
    for rk in round_keys:
        x0, x1, x2, x3 = x1, x2, x3, x0 ^ _round_transform(x1 ^ x2 ^ x3 ^ rk)
    return struct.pack(">4I", x3, x2, x1, x0)


class SM4Cipher:
    """An SM4 cipher bound to one 128-bit key, working on single blocks."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != BLOCK_SIZE:
            raise SM4Error(f"SM4: invalid key size {len(key)}")
        self._encrypt_keys = _expand_key(key)
        self._decrypt_keys = tuple(reversed(self._encrypt_keys))

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        return _crypt(self._encrypt_keys, bytes(block))

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block."""
        return _crypt(self._decrypt_keys, bytes(block))