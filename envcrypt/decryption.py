"""Decrypt an encoded ciphertext string back into the env payload (+ parsed JSON)."""

import json
import logging
from typing import Optional, Union

from envcrypt import codec, config
from envcrypt.crypto.cbc import cbc_decrypt
from envcrypt.crypto.ciphers import as_bytes, check_sizes, lookup
from envcrypt.errors import DecryptionIntegrityError, JsonParseError
from envcrypt.models import DecryptOptions, DecryptResult, Secret

logger = logging.getLogger(__name__)


def decrypt(
    envs: Union[str, bytes],
    *,
    secret: Secret,
    iv: str,
    algorithm: Optional[str] = None,
    encoding: Optional[str] = None,
    input: Optional[str] = None,
) -> DecryptResult:
    """
    Decrypt `envs` (ciphertext text encoded per `input`) and parse it as JSON.

    Raises:
        InvalidAlgorithm / InvalidKeyLength / InvalidIVLength on bad parameters
        DecryptionIntegrityError when ciphertext, key and IV don't match up
        JsonParseError when the plaintext is not JSON
    """
    algorithm, encoding, input = config.resolve(algorithm, encoding, input)
    codec.normalize(encoding)
    codec.normalize(input)

    spec = lookup(algorithm)
    key = as_bytes(secret)
    iv_bytes = as_bytes(iv)
    check_sizes(spec, key, iv_bytes)

    if isinstance(envs, (bytes, bytearray)):
        envs = bytes(envs).decode("latin-1")
    try:
        ciphertext = codec.to_bytes(envs, input)
    except ValueError as exc:
        raise DecryptionIntegrityError(f"ciphertext is not valid {input}: {exc}") from exc

    plaintext = cbc_decrypt(spec, key, iv_bytes, ciphertext)
    decrypted_envs = codec.to_text(plaintext, encoding)
    logger.debug(
        "decrypted %d bytes with %s (%s -> %s)", len(ciphertext), spec.name, input, encoding
    )

    return DecryptResult(decrypted_envs, parse_json(decrypted_envs))


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str):
    """Strict JSON: no NaN/Infinity, nesting limited by the recursion limit."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        logger.debug("decrypted payload is not JSON: %s", exc.msg)
        raise JsonParseError(f"decrypted envs are not valid JSON: {exc.msg}", exc.doc, exc.pos) from exc
    except (ValueError, RecursionError) as exc:
        logger.debug("decrypted payload is not JSON: %s", exc)
        raise JsonParseError(f"decrypted envs are not valid JSON: {exc}", text) from exc


def decrypt_options(options: DecryptOptions) -> DecryptResult:
    return decrypt(
        options.envs,
        secret=options.secret,
        iv=options.iv,
        algorithm=options.algorithm,
        encoding=options.encoding,
        input=options.input,
    )
