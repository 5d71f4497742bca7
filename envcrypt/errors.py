"""Exceptions raised by encrypt/decrypt."""


class EnvCryptError(ValueError):
    """Base class for every envcrypt failure."""


class InvalidAlgorithm(EnvCryptError):
    def __init__(self, algorithm: str, reason: str = "unknown cipher"):
        self.algorithm = algorithm
        super().__init__(f"Invalid algorithm {algorithm!r}: {reason}")


class InvalidKeyLength(EnvCryptError):
    def __init__(self, algorithm: str, expected: int, actual: int):
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid key length for {algorithm}: expected {expected} bytes, got {actual}"
        )


class InvalidIVLength(EnvCryptError):
    def __init__(self, algorithm: str, expected: int, actual: int):
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid initialization vector for {algorithm}: expected {expected} bytes, got {actual}"
        )


class InvalidEncoding(EnvCryptError):
    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Unknown encoding: {encoding!r}")


class DecryptionIntegrityError(EnvCryptError):
    """Ciphertext, key and IV do not fit together (bad padding, bad length, bad text)."""


class JsonParseError(EnvCryptError):
    """Decrypted plaintext is not JSON."""

    def __init__(self, msg: str, doc: str = "", pos: int = 0):
        self.doc = doc
        self.pos = pos
        super().__init__(msg)
