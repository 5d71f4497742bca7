"""Encrypt / decrypt environment-variable payloads with a CBC block cipher."""

import logging

from envcrypt.crypto.cbc import generate_iv
from envcrypt.crypto.ciphers import supported_algorithms
from envcrypt.decryption import decrypt, decrypt_options
from envcrypt.encryption import encrypt, encrypt_options
from envcrypt.errors import (
    DecryptionIntegrityError,
    EnvCryptError,
    InvalidAlgorithm,
    InvalidEncoding,
    InvalidIVLength,
    InvalidKeyLength,
    JsonParseError,
)
from envcrypt.models import CryptOptions, DecryptOptions, DecryptResult, EncryptResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "encrypt",
    "decrypt",
    "encrypt_options",
    "decrypt_options",
    "generate_iv",
    "supported_algorithms",
    "CryptOptions",
    "DecryptOptions",
    "EncryptResult",
    "DecryptResult",
    "EnvCryptError",
    "InvalidAlgorithm",
    "InvalidKeyLength",
    "InvalidIVLength",
    "InvalidEncoding",
    "DecryptionIntegrityError",
    "JsonParseError",
]
