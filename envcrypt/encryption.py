"""Encrypt a serialized env payload into an encoded ciphertext string + IV."""

import json
import logging
from collections.abc import Mapping
from typing import Optional

from envcrypt import codec, config
from envcrypt.crypto.cbc import cbc_encrypt, generate_iv
from envcrypt.crypto.ciphers import as_bytes, check_sizes, lookup
from envcrypt.errors import EnvCryptError
from envcrypt.models import CryptOptions, EncryptResult, Payload, Secret

logger = logging.getLogger(__name__)


def serialize_envs(envs: Payload, encoding: str) -> bytes:
    """
    Turn the payload into plaintext bytes.
    bytes are taken as-is, text is interpreted per `encoding`, and mappings are
    dumped to compact JSON first (same output as JSON.stringify).
    """
    if isinstance(envs, (bytes, bytearray, memoryview)):
        return bytes(envs)
    if isinstance(envs, Mapping):
        envs = json.dumps(envs, separators=(",", ":"), ensure_ascii=False)
    try:
        return codec.to_bytes(envs, encoding)
    except ValueError as exc:
        raise EnvCryptError(f"envs is not valid {encoding} text: {exc}") from exc


def encrypt(
    envs: Payload,
    *,
    secret: Secret,
    algorithm: Optional[str] = None,
    encoding: Optional[str] = None,
    input: Optional[str] = None,
    iv: Optional[str] = None,
) -> EncryptResult:
    """
    Encrypt `envs` with `algorithm` (CBC) and `secret`.

    Example:
        encrypt('{"ABC":"123"}', secret="abcdefghijklmnopqrstuv1234567890")
        -> EncryptResult(encrypted_envs="d4706e...", iv="507e1b56bd09de07")

    A fresh IV is generated unless `iv` is given. Raises InvalidAlgorithm,
    InvalidKeyLength or InvalidIVLength before anything is encrypted.
    """
    algorithm, encoding, input = config.resolve(algorithm, encoding, input)
    # fail on bad encoding names before touching the cipher
    codec.normalize(encoding)
    codec.normalize(input)

    spec = lookup(algorithm)
    if iv is None:
        iv = generate_iv()
    key = as_bytes(secret)
    iv_bytes = as_bytes(iv)
    check_sizes(spec, key, iv_bytes)

    plaintext = serialize_envs(envs, encoding)
    ciphertext = cbc_encrypt(spec, key, iv_bytes, plaintext)
    logger.debug(
        "encrypted %d bytes with %s (%s -> %s)", len(plaintext), spec.name, encoding, input
    )
    return EncryptResult(codec.to_text(ciphertext, input), iv)


def encrypt_options(options: CryptOptions) -> EncryptResult:
    return encrypt(
        options.envs,
        secret=options.secret,
        algorithm=options.algorithm,
        encoding=options.encoding,
        input=options.input,
        iv=options.iv,
    )
