"""CBC cipher registry: algorithm names -> cryptography primitives, plus key/IV checks."""

import logging
from typing import Callable, Dict, List, NamedTuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm, Cipher, algorithms, modes

from envcrypt.errors import InvalidAlgorithm, InvalidIVLength, InvalidKeyLength

logger = logging.getLogger(__name__)


class CipherSpec(NamedTuple):
    name: str
    algorithm: Callable[[bytes], BlockCipherAlgorithm]
    key_size: int  # bytes
    block_size: int  # bytes

    @property
    def block_bits(self) -> int:
        return self.block_size * 8


def _register(table: Dict[str, CipherSpec], family: str, algorithm, key_bits: int):
    spec = CipherSpec(f"{family}-{key_bits}-cbc", algorithm, key_bits // 8, 16)
    table[spec.name] = spec
    # short openssl-style alias, e.g. aes256 == aes-256-cbc
    table[f"{family}{key_bits}"] = spec


REGISTRY: Dict[str, CipherSpec] = {}
for _bits in (128, 192, 256):
    _register(REGISTRY, "aes", algorithms.AES, _bits)
    _register(REGISTRY, "camellia", algorithms.Camellia, _bits)

FAMILIES = ("aes", "camellia")


def supported_algorithms() -> List[str]:
    """Canonical names accepted by lookup()."""
    return sorted({spec.name for spec in REGISTRY.values()})


def lookup(algorithm: str) -> CipherSpec:
    if not isinstance(algorithm, str):
        raise InvalidAlgorithm(repr(algorithm), "algorithm name must be a string")
    spec = REGISTRY.get(algorithm.strip().lower())
    if spec is None:
        family = algorithm.strip().lower().split("-", 1)[0]
        if family in FAMILIES:
            raise InvalidAlgorithm(algorithm, "only CBC mode is supported")
        raise InvalidAlgorithm(algorithm)
    return spec


def as_bytes(value: Union[str, bytes]) -> bytes:
    """Secrets and IV strings are used as their UTF-8 bytes."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return value.encode("utf-8")


def check_sizes(spec: CipherSpec, key: bytes, iv: bytes):
    """Key first, then IV. Raises InvalidKeyLength / InvalidIVLength."""
    if len(key) != spec.key_size:
        raise InvalidKeyLength(spec.name, spec.key_size, len(key))
    if len(iv) != spec.block_size:
        raise InvalidIVLength(spec.name, spec.block_size, len(iv))


def build_cipher(spec: CipherSpec, key: bytes, iv: bytes) -> Cipher:
    """
    Validate key and IV sizes against `spec`, then return a CBC Cipher.
    Nothing is encrypted before both checks pass.
    """
    check_sizes(spec, key, iv)
    try:
        return Cipher(spec.algorithm(key), modes.CBC(iv))
    except UnsupportedAlgorithm as exc:
        logger.debug("backend rejected %s: %s", spec.name, exc)
        raise InvalidAlgorithm(spec.name, "not supported by the crypto backend") from exc
