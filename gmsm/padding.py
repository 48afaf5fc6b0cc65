"""Streaming PKCS#7 padding and block-mode encryption over file-like objects."""

from __future__ import annotations

from typing import BinaryIO, Protocol

_CHUNK = 1024


class PaddingError(ValueError):
    """Raised when PKCS#7 padding is malformed."""


class BlockMode(Protocol):
    block_size: int

    def crypt_blocks(self, data: bytes) -> bytes: ...


class PKCS7PaddingReader:
    """Reads a stream and appends PKCS#7 padding after its last byte."""

    def __init__(self, instream: BinaryIO, block_size: int) -> None:
        self._in = instream
        self.block_size = block_size
        self._count = 0
        self._file_done = False
        self._padding: bytes | None = None

    def _make_padding(self) -> bytes:
        if self._padding is None:
            size = self.block_size - self._count % self.block_size
            self._padding = bytes([size]) * size
        return self._padding

    def read(self, size: int = -1) -> bytes:
        """Return up to size bytes of padded data; b"" once everything is read."""
        if size is None or size < 0:
            rest = b""
            if not self._file_done:
                rest = self._in.read() or b""
                self._count += len(rest)
                self._file_done = True
            padding = self._make_padding()
            self._padding = b""
            return rest + padding

        out = b""
        if not self._file_done:
            chunk = self._in.read(size) or b""
            self._count += len(chunk)
            if len(chunk) == size:
                return chunk
            self._file_done = True
            out = chunk
        padding = self._make_padding()
        take = padding[: size - len(out)]
        self._padding = padding[len(take):]
        return out + take


class PKCS7PaddingWriter:
    """Writes to a stream, holding back the last block to strip its padding."""

    def __init__(self, outstream: BinaryIO, block_size: int) -> None:
        self._out = outstream
        self.block_size = block_size
        self._cache = bytearray()

    def write(self, data: bytes) -> int:
        """Buffer data, passing on everything but the last block_size bytes."""
        self._cache += data
        excess = len(self._cache) - self.block_size
        if excess > 0:
            self._out.write(bytes(self._cache[:excess]))
            del self._cache[:excess]
        return len(data)

    def final(self) -> None:
        """Strip the padding from the held-back block and write the rest."""
        block = bytes(self._cache)
        if len(block) != self.block_size:
            raise PaddingError("invalid PKCS#7 padding")
        if not block:
            return
        unpadding = block[-1]
        if unpadding > self.block_size or unpadding == 0:
            raise PaddingError("invalid PKCS#7 padding")
        self._out.write(block[: len(block) - unpadding])
        self._cache.clear()


def _chunk_size(block_size: int) -> int:
    return block_size * max(1, _CHUNK // block_size)


def p7_block_encrypt(encrypter: BlockMode, instream: BinaryIO, outstream: BinaryIO) -> None:
    """Pad instream with PKCS#7, encrypt it and write the result to outstream."""
    reader = PKCS7PaddingReader(instream, encrypter.block_size)
    size = _chunk_size(encrypter.block_size)
    while chunk := reader.read(size):
        outstream.write(encrypter.crypt_blocks(chunk))


def p7_block_decrypt(decrypter: BlockMode, instream: BinaryIO, outstream: BinaryIO) -> None:
    """Decrypt instream, strip its PKCS#7 padding and write to outstream."""
    writer = PKCS7PaddingWriter(outstream, decrypter.block_size)
    size = _chunk_size(decrypter.block_size)
    while chunk := instream.read(size):
        writer.write(decrypter.crypt_blocks(chunk))
    writer.final()