"""Process-wide defaults, read from the environment / .env."""

import os
from dotenv import dotenv_values, find_dotenv

DEFAULT_ALGORITHM = "aes-256-cbc"
DEFAULT_ENCODING = "utf8"
DEFAULT_INPUT = "hex"


def setting(name: str, default: str) -> str:
    """
    Look up `name` in the process environment, then in the nearest .env
    (searched from the working directory), then fall back to `default`.
    The .env file is only read, never copied into os.environ.
    """
    value = os.getenv(name)
    if value is None:
        path = find_dotenv(usecwd=True)
        if path:
            value = dotenv_values(path).get(name)
    return value if value is not None else default


def resolve(algorithm=None, encoding=None, input=None):
    """
    Fill in missing (None) call arguments from the configured defaults.
    Returns (algorithm, encoding, input).
    """
    if algorithm is None:
        algorithm = setting("ENVCRYPT_ALGORITHM", DEFAULT_ALGORITHM)
    if encoding is None:
        encoding = setting("ENVCRYPT_ENCODING", DEFAULT_ENCODING)
    if input is None:
        input = setting("ENVCRYPT_INPUT", DEFAULT_INPUT)
    return algorithm, encoding, input
