# gmsm

The SM3 hash, the SM4 block cipher and the group arithmetic of the SM2
elliptic curve, in pure Python with no dependencies beyond the standard
library.

- **SM3** (`gmsm.sm3`): a 256-bit hash with a `hashlib`-style interface.
- **SM4** (`gmsm.sm4_cipher`, `gmsm.sm4_modes`, `gmsm.sm4_gcm`): a 128-bit
  block cipher, usable on single blocks or through the ECB, CBC, CFB, OFB and
  GCM modes.
- **Streaming PKCS#7** (`gmsm.padding`): padding and block-mode encryption
  over file-like objects.
- **SM2 curve** (`gmsm.sm2_curve`, `gmsm.sm2_jacobian`, `gmsm.wnaf`): point
  addition, doubling and scalar multiplication on the SM2 recommended curve.

## Installation

```
pip install .
```

## SM3

```python
from gmsm import sm3

print(sm3.sm3_sum(b"abc").hex())

h = sm3.new(b"part one, ")
h.update(b"part two")
print(h.hexdigest())
```

`SM3` objects also offer `digest()`, `copy()` and `reset()`. Calling
`digest()` does not change the running state.

## SM4

```python
from gmsm.sm4_cipher import SM4Cipher
from gmsm import sm4_modes, sm4_gcm

key = bytes(16)  # all-zero demo key

block = SM4Cipher(key).encrypt_block(bytes(16))

ciphertext = sm4_modes.sm4_cbc(key, b"hello world", True)
plaintext = sm4_modes.sm4_cbc(key, ciphertext, False)

iv = bytes(12)
ct, tag = sm4_gcm.gcm_encrypt(key, iv, b"hello", b"header")
pt, check = sm4_gcm.gcm_decrypt(key, iv, ct, b"header")
assert tag == check
```

A key that is not 16 bytes long raises `SM4Error`. `sm4_ecb`, `sm4_cbc`,
`sm4_cfb` and `sm4_ofb` add PKCS#7 padding when they encrypt and strip it
when they decrypt. If the padding is malformed, decryption returns `b""`.
CBC, CFB and OFB use a module-wide IV, all zeros at first, which
`sm4_modes.set_iv` replaces. `pkcs7_pad` and `pkcs7_unpad` can also be called
on their own.

`gcm_decrypt` does not check the tag. It returns the tag computed over the
ciphertext, and the caller compares that with the tag received. A 12-byte IV
is used directly. Any other IV length is run through `ghash` first.
`sm4_gcm(key, iv, data, aad, encrypt)` picks between the two functions.

## Streaming PKCS#7

```python
import io
from gmsm.sm4_cipher import SM4Cipher
from gmsm.sm4_modes import CBCEncrypter, CBCDecrypter
from gmsm.padding import p7_block_encrypt, p7_block_decrypt

block = SM4Cipher(bytes(16))
iv = bytes(16)

encrypted = io.BytesIO()
p7_block_encrypt(CBCEncrypter(block, iv), io.BytesIO(b"stream data"), encrypted)
encrypted.seek(0)

decrypted = io.BytesIO()
p7_block_decrypt(CBCDecrypter(block, iv), encrypted, decrypted)
assert decrypted.getvalue() == b"stream data"
```

`PKCS7PaddingReader` and `PKCS7PaddingWriter` can also be used on their own.
The writer's `final()` raises `PaddingError` if the padding is invalid.

## SM2 curve arithmetic

```python
from gmsm.sm2_curve import p256_sm2

curve = p256_sm2()
scalar = (12345).to_bytes(32, "big")

x, y = curve.scalar_base_mult(scalar)
assert curve.is_on_curve(x, y)
assert (x, y) == curve.scalar_mult(curve.gx, curve.gy, scalar)

dx, dy = curve.double(x, y)
assert (dx, dy) == curve.add(x, y, x, y)
```

Points are affine `(x, y)` integer pairs. `(0, 0)` stands for the point at
infinity. Scalars are big-endian bytes and are reduced modulo the group order
`curve.n`. Multiplication uses the width-4 non-adjacent form from
`gmsm.wnaf.generate_wnaf`. `gmsm.sm2_jacobian.JacobianPoint` provides the
underlying projective-coordinate operations.

## What this package does not do

The package provides the SM2 curve and its group operations only. It has no
SM2 key generation, signing, verification, public-key encryption, ASN.1
ciphertext or signature encoding, key exchange or point compression. It also
has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```