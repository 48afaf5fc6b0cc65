"""SM3 hashing, SM4 block cipher and modes, and SM2 curve arithmetic."""

__version__ = "0.1.0"
__all__ = [
    "padding",
    "sm2_curve",
    "sm2_jacobian",
    "sm3",
    "sm4_cipher",
    "sm4_gcm",
    "sm4_modes",
    "wnaf",
]