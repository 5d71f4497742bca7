"""CBC + PKCS#7 helpers (use library)."""

import os
from cryptography.hazmat.primitives import padding

from envcrypt.crypto.ciphers import CipherSpec, build_cipher
from envcrypt.errors import DecryptionIntegrityError

IV_CHARS = 16  # hex characters kept from the random IV


def generate_iv() -> str:
    """16 random bytes -> lowercase hex, first 16 characters."""
    return os.urandom(16).hex()[:IV_CHARS]


def cbc_encrypt(spec: CipherSpec, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Pad with PKCS#7 and encrypt. Returns raw ciphertext bytes."""
    cipher = build_cipher(spec, key, iv)
    padder = padding.PKCS7(spec.block_bits).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def cbc_decrypt(spec: CipherSpec, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypt and strip PKCS#7 padding. Returns raw plaintext bytes."""
    cipher = build_cipher(spec, key, iv)
    decryptor = cipher.decryptor()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError as exc:
        raise DecryptionIntegrityError(f"wrong final block length: {exc}") from exc

    unpadder = padding.PKCS7(spec.block_bits).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise DecryptionIntegrityError("bad decrypt: invalid padding") from exc
