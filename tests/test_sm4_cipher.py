import pytest

from gmsm.sm4_cipher import BLOCK_SIZE, SM4Cipher, SM4Error

STANDARD_KEY = bytes.fromhex("0123456789abcdeffedcba9876543210")
STANDARD_CIPHERTEXT = bytes.fromhex("681edf34d206965e86b3e94f536e4246")
DATA = bytes(
    [0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF,
     0xFE, 0xDC, 0xBA, 0x98, 0x76, 0x54, 0x32, 0x10]
)


def test_standard_vector_encrypt():
    cipher = SM4Cipher(STANDARD_KEY)
    assert cipher.encrypt_block(STANDARD_KEY) == STANDARD_CIPHERTEXT


def test_standard_vector_decrypt():
    cipher = SM4Cipher(STANDARD_KEY)
    assert cipher.decrypt_block(STANDARD_CIPHERTEXT) == STANDARD_KEY


def test_round_trip_with_source_key():
    cipher = SM4Cipher(b"1234567890abcdef")
    encrypted = cipher.encrypt_block(DATA)
    assert encrypted != DATA
    assert len(encrypted) == BLOCK_SIZE
    assert cipher.decrypt_block(encrypted) == DATA


@pytest.mark.parametrize("key", [b"1234567890abcdefg", b"1234", b""])
def test_invalid_key_length(key):
    with pytest.raises(SM4Error, match=f"invalid key size {len(key)}"):
        SM4Cipher(key)


@pytest.mark.parametrize("block", [b"", b"short", bytes(17)])
def test_invalid_block_length(block):
    cipher = SM4Cipher(STANDARD_KEY)
    with pytest.raises(SM4Error):
        cipher.encrypt_block(block)
    with pytest.raises(SM4Error):
        cipher.decrypt_block(block)


def test_different_keys_give_different_ciphertexts():
    a = SM4Cipher(b"1234567890abcdef").encrypt_block(DATA)
    b = SM4Cipher(b"1234567890abcdeg").encrypt_block(DATA)
    assert a != b


def test_encryption_is_deterministic():
    first = SM4Cipher(STANDARD_KEY).encrypt_block(DATA)
    second = SM4Cipher(STANDARD_KEY).encrypt_block(DATA)
    assert first == second


def test_block_size_attribute():
    assert SM4Cipher(STANDARD_KEY).block_size == 16