"""Option and result types for encrypt/decrypt."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, NamedTuple, Optional, Union

Payload = Union[str, bytes, Mapping[str, Any]]
Secret = Union[str, bytes]

# camelCase keys used by JavaScript consumers of the same payloads
_CAMEL_KEYS = {
    "encryptedEvs": "encrypted_envs",
    "decryptedEnvs": "decrypted_envs",
    "decryptedResult": "decrypted_result",
}


def _pick(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        key = _CAMEL_KEYS.get(key, key)
        if key in names:
            kwargs[key] = value
    return kwargs


@dataclass(frozen=True)
class CryptOptions:
    envs: Payload
    secret: Secret
    algorithm: Optional[str] = None
    encoding: Optional[str] = None
    input: Optional[str] = None
    iv: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CryptOptions":
        return cls(**_pick(cls, data))


@dataclass(frozen=True)
class DecryptOptions:
    envs: str
    secret: Secret
    iv: str
    algorithm: Optional[str] = None
    encoding: Optional[str] = None
    input: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DecryptOptions":
        return cls(**_pick(cls, data))


class EncryptResult(NamedTuple):
    encrypted_envs: str
    iv: str

    def as_dict(self) -> Dict[str, str]:
        return {"encryptedEvs": self.encrypted_envs, "iv": self.iv}


class DecryptResult(NamedTuple):
    decrypted_envs: str
    decrypted_result: Any

    def as_dict(self) -> Dict[str, Any]:
        return {"decryptedEnvs": self.decrypted_envs, "decryptedResult": self.decrypted_result}
