"""Named byte <-> text encodings (utf8, ascii, latin1, base64, base64url, hex, utf16le)."""

import base64
import binascii
from typing import Callable, Dict, Tuple

from envcrypt.errors import InvalidEncoding

ALIASES = {
    "utf8": "utf8",
    "utf-8": "utf8",
    "ascii": "ascii",
    "latin1": "latin1",
    "binary": "latin1",
    "base64": "base64",
    "base64url": "base64url",
    "hex": "hex",
    "utf16le": "utf16le",
    "utf-16le": "utf16le",
    "ucs2": "utf16le",
    "ucs-2": "utf16le",
}


def _low_bytes(text: str) -> bytes:
    # one byte per code unit, high bits dropped
    return bytes(ord(ch) & 0xFF for ch in text)


def _b64_decode(text: str) -> bytes:
    # accepts both alphabets, missing padding and embedded whitespace
    cleaned = "".join(text.split()).replace("-", "+").replace("_", "/").rstrip("=")
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned, validate=True)


def _hex_decode(text: str) -> bytes:
    if len(text) % 2:
        raise binascii.Error("Odd-length hex string")
    return bytes.fromhex(text)


# name -> (text -> bytes, bytes -> text)
_CODECS: Dict[str, Tuple[Callable[[str], bytes], Callable[[bytes], str]]] = {
    "utf8": (
        lambda s: s.encode("utf-8"),
        lambda b: b.decode("utf-8", errors="replace"),
    ),
    "ascii": (
        _low_bytes,
        lambda b: bytes(x & 0x7F for x in b).decode("ascii"),
    ),
    "latin1": (
        _low_bytes,
        lambda b: b.decode("latin-1"),
    ),
    "base64": (
        _b64_decode,
        lambda b: base64.b64encode(b).decode("ascii"),
    ),
    "base64url": (
        _b64_decode,
        lambda b: base64.urlsafe_b64encode(b).decode("ascii").rstrip("="),
    ),
    "hex": (
        _hex_decode,
        lambda b: b.hex(),
    ),
    "utf16le": (
        lambda s: s.encode("utf-16-le"),
        lambda b: b[: len(b) - len(b) % 2].decode("utf-16-le", errors="replace"),
    ),
}


def normalize(encoding: str) -> str:
    """Return the canonical name for an encoding, or raise InvalidEncoding."""
    try:
        return ALIASES[encoding.lower()]
    except (KeyError, AttributeError):
        raise InvalidEncoding(encoding) from None


def to_bytes(text: str, encoding: str) -> bytes:
    """
    Interpret `text` per `encoding`.
    Malformed base64/hex raises ValueError (binascii.Error).
    """
    return _CODECS[normalize(encoding)][0](text)


def to_text(data: bytes, encoding: str) -> str:
    """Render raw bytes as text per `encoding`."""
    return _CODECS[normalize(encoding)][1](data)
