from dataclasses import dataclass
from enum import Enum
from typing import Dict


class IdentKind(str, Enum):
    USER_AGENT = "user_agent"
    REFERER = "referer"
    API_KEY = "api_key"
    EMAIL = "email"


# Credentials sent as HTTP headers; the rest go in the query string
_HEADER_NAMES = {
    IdentKind.USER_AGENT: "User-Agent",
    IdentKind.REFERER: "Referer",
}

_PARAM_NAMES = {
    IdentKind.API_KEY: "key",
    IdentKind.EMAIL: "email",
}


@dataclass(frozen=True)
class IdentificationMethod:
    """How the client identifies itself to the Nominatim server.

    The public instance requires a valid User-Agent or Referer; private
    deployments may use an API key or a contact email instead.
    """

    kind: IdentKind
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"Identification value for {self.kind.value} must be a non-empty string")

    @classmethod
    def from_user_agent(cls, user_agent: str) -> "IdentificationMethod":
        return cls(IdentKind.USER_AGENT, user_agent)

    @classmethod
    def from_referer(cls, referer: str) -> "IdentificationMethod":
        return cls(IdentKind.REFERER, referer)

    @classmethod
    def from_api_key(cls, key: str) -> "IdentificationMethod":
        return cls(IdentKind.API_KEY, key)

    @classmethod
    def from_email(cls, email: str) -> "IdentificationMethod":
        return cls(IdentKind.EMAIL, email)

    def headers(self) -> Dict[str, str]:
        name = _HEADER_NAMES.get(self.kind)
        return {name: self.value} if name else {}

    def params(self) -> Dict[str, str]:
        name = _PARAM_NAMES.get(self.kind)
        return {name: self.value} if name else {}
