"""SM4 in Galois/Counter Mode (GCM)."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

from gmsm.sm4_cipher import BLOCK_SIZE, SM4Cipher

_R = 0xE1 << 120


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _gf_mult(x: int, y: int) -> int:
    """Multiply two elements of GF(2^128) in the GCM bit order."""
    z = 0
    v = x
    for i in range(127, -1, -1):
        if (y >> i) & 1:
            z ^= v
        v = (v >> 1) ^ _R if v & 1 else v >> 1
    return z


def _padded_blocks(data: bytes) -> Iterator[bytes]:
    """Yield zero-padded 16-byte blocks of data; empty data gives one zero block."""
    if not data:
        yield bytes(BLOCK_SIZE)
        return
    for offset in range(0, len(data), BLOCK_SIZE):
        yield data[offset:offset + BLOCK_SIZE].ljust(BLOCK_SIZE, b"\x00")


def hash_subkey(key: bytes) -> bytes:
    """Return the GHASH subkey H, the encryption of the all-zero block."""
    return SM4Cipher(key).encrypt_block(bytes(BLOCK_SIZE))


def ghash(h: bytes, aad: bytes, ciphertext: bytes) -> bytes:
    """Compute GHASH over the additional data and the ciphertext.

    The final block holds the byte lengths of aad and ciphertext, each as a
    64-bit big-endian number.
    """
    aad = bytes(aad)
    ciphertext = bytes(ciphertext)
    hk = int.from_bytes(bytes(h), "big")
    lengths = len(aad).to_bytes(8, "big") + len(ciphertext).to_bytes(8, "big")
    x = 0
    for block in chain(_padded_blocks(aad), _padded_blocks(ciphertext), [lengths]):
        x = _gf_mult(x ^ int.from_bytes(block, "big"), hk)
    return x.to_bytes(BLOCK_SIZE, "big")


def _initial_counter(h: bytes, iv: bytes) -> bytes:
    if len(iv) * 8 == 96:
        return iv + b"\x00\x00\x00\x01"
    return ghash(h, b"", iv)


def _increment(counter: bytes) -> bytes:
    # Any byte before the last that would reach 0xFF is reset to zero and
    # carries on; this keeps counters compatible with existing ciphertexts.
    out = bytearray(counter)
    last = len(out) - 1
    if out[last] < 0xFF:
        out[last] += 1
        carry = 0
    else:
        out[last] = 0
        carry = 1
    for i in range(last - 1, -1, -1):
        total = (out[i] + carry) & 0xFF
        if total < 0xFF:
            out[i] = total
            carry = 0
        else:
            out[i] = 0
            carry = 1
    return bytes(out)


def _counter_xor(cipher: SM4Cipher, y0: bytes, data: bytes) -> bytes:
    counter = y0
    out = []
    for offset in range(0, len(data), BLOCK_SIZE):
        counter = _increment(counter)
        keystream = cipher.encrypt_block(counter)
        out.append(_xor(data[offset:offset + BLOCK_SIZE], keystream))
    return b"".join(out)


def gcm_encrypt(key: bytes, iv: bytes, plaintext: bytes, aad: bytes) -> tuple[bytes, bytes]:
    """Encrypt plaintext; return the ciphertext and the 16-byte tag."""
    cipher = SM4Cipher(key)
    h = cipher.encrypt_block(bytes(BLOCK_SIZE))
    y0 = _initial_counter(h, bytes(iv))
    ciphertext = _counter_xor(cipher, y0, bytes(plaintext))
    tag = _xor(cipher.encrypt_block(y0), ghash(h, aad, ciphertext))
    return ciphertext, tag


def gcm_decrypt(key: bytes, iv: bytes, ciphertext: bytes, aad: bytes) -> tuple[bytes, bytes]:
    """Decrypt ciphertext; return the plaintext and the tag computed over it.

    The tag is not checked here: the caller compares it with the one received.
    """
    cipher = SM4Cipher(key)
    h = cipher.encrypt_block(bytes(BLOCK_SIZE))
    y0 = _initial_counter(h, bytes(iv))
    ciphertext = bytes(ciphertext)
    tag = _xor(cipher.encrypt_block(y0), ghash(h, aad, ciphertext))
    plaintext = _counter_xor(cipher, y0, ciphertext)
    return plaintext, tag


def sm4_gcm(key: bytes, iv: bytes, data: bytes, aad: bytes, encrypt: bool) -> tuple[bytes, bytes]:
    """Encrypt or decrypt data in GCM mode, returning (output, tag)."""
    if encrypt:
        return gcm_encrypt(key, iv, data, aad)
    return gcm_decrypt(key, iv, data, aad)