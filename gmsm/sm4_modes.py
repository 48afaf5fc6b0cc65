"""SM4 block modes: ECB, CBC, CFB and OFB with PKCS#7 padding."""

from __future__ import annotations

from collections.abc import Iterator

from gmsm.sm4_cipher import BLOCK_SIZE, SM4Cipher, SM4Error

# Initialisation vector shared by the one-call mode functions.
_iv = bytes(BLOCK_SIZE)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _blocks(data: bytes, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """Yield the complete blocks of data, dropping any trailing partial block."""
    usable = len(data) - len(data) % block_size
    for offset in range(0, usable, block_size):
        yield data[offset:offset + block_size]


def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Append PKCS#7 padding so the length is a multiple of block_size."""
    padding = block_size - len(data) % block_size
    return bytes(data) + bytes([padding]) * padding


def pkcs7_unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Strip PKCS#7 padding, raising SM4Error if it is malformed."""
    data = bytes(data)
    if not data:
        raise SM4Error("Invalid pkcs7 padding (empty input)")
    unpadding = data[-1]
    if unpadding > block_size or unpadding == 0:
        raise SM4Error(
            "Invalid pkcs7 padding (unpadding > BlockSize || unpadding == 0)"
        )
    if unpadding > len(data):
        raise SM4Error("Invalid pkcs7 padding (unpadding > length)")
    if any(b != unpadding for b in data[-unpadding:]):
        raise SM4Error("Invalid pkcs7 padding (pad[i] != unpadding)")
    return data[:-unpadding]


def set_iv(iv: bytes) -> None:
    """Set the IV used by sm4_cbc, sm4_cfb and sm4_ofb."""
    global _iv
    iv = bytes(iv)
    if len(iv) != BLOCK_SIZE:
        raise SM4Error("SM4: invalid iv size")
    _iv = iv


class _CBCMode:
    def __init__(self, cipher: SM4Cipher, iv: bytes) -> None:
        iv = bytes(iv)
        if len(iv) != cipher.block_size:
            raise SM4Error("SM4: IV length must equal block size")
        self._cipher = cipher
        self._chain = iv
        self.block_size = cipher.block_size

    def _check(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) % self.block_size:
            raise SM4Error("SM4: input not full blocks")
        return data


class CBCEncrypter(_CBCMode):
    """CBC encryption that keeps its chaining value between calls."""

    def crypt_blocks(self, data: bytes) -> bytes:
        """Encrypt whole blocks of data and return the ciphertext."""
        out = []
        for block in _blocks(self._check(data), self.block_size):
            self._chain = self._cipher.encrypt_block(_xor(block, self._chain))
            out.append(self._chain)
        return b"".join(out)


class CBCDecrypter(_CBCMode):
    """CBC decryption that keeps its chaining value between calls."""

    def crypt_blocks(self, data: bytes) -> bytes:
        """Decrypt whole blocks of data and return the plaintext."""
        out = []
        for block in _blocks(self._check(data), self.block_size):
            out.append(_xor(self._cipher.decrypt_block(block), self._chain))
            self._chain = block
        return b"".join(out)


def _finish_decrypt(plain: bytes, data: bytes) -> bytes:
    # A trailing partial block leaves zero bytes in the output, as does a bad
    # padding: either way the result is empty.
    padded = plain + bytes(len(data) % BLOCK_SIZE)
    try:
        return pkcs7_unpad(padded)
    except SM4Error:
        return b""


def sm4_ecb(key: bytes, data: bytes, encrypt: bool) -> bytes:
    """Encrypt (with padding) or decrypt (removing padding) in ECB mode."""
    cipher = SM4Cipher(key)
    data = bytes(data)
    if encrypt:
        return b"".join(cipher.encrypt_block(b) for b in _blocks(pkcs7_pad(data)))
    plain = b"".join(cipher.decrypt_block(b) for b in _blocks(data))
    return _finish_decrypt(plain, data)


def sm4_cbc(key: bytes, data: bytes, encrypt: bool) -> bytes:
    """Encrypt (with padding) or decrypt (removing padding) in CBC mode."""
    cipher = SM4Cipher(key)
    data = bytes(data)
    if encrypt:
        return CBCEncrypter(cipher, _iv).crypt_blocks(pkcs7_pad(data))
    whole = data[: len(data) - len(data) % BLOCK_SIZE]
    plain = CBCDecrypter(cipher, _iv).crypt_blocks(whole)
    return _finish_decrypt(plain, data)


def sm4_cfb(key: bytes, data: bytes, encrypt: bool) -> bytes:
    """Encrypt (with padding) or decrypt (removing padding) in 128-bit CFB mode."""
    cipher = SM4Cipher(key)
    data = bytes(data)
    source = pkcs7_pad(data) if encrypt else data
    feedback = _iv
    out = []
    for block in _blocks(source):
        result = _xor(cipher.encrypt_block(feedback), block)
        out.append(result)
        feedback = result if encrypt else block
    joined = b"".join(out)
    return joined if encrypt else _finish_decrypt(joined, data)


def sm4_ofb(key: bytes, data: bytes, encrypt: bool) -> bytes:
    """Encrypt (with padding) or decrypt (removing padding) in OFB mode."""
    cipher = SM4Cipher(key)
    data = bytes(data)
    source = pkcs7_pad(data) if encrypt else data
    keystream = _iv
    out = []
    for block in _blocks(source):
        keystream = cipher.encrypt_block(keystream)
        out.append(_xor(keystream, block))
    joined = b"".join(out)
    return joined if encrypt else _finish_decrypt(joined, data)