"""Credential providers for the Brave Search node."""

import os
from typing import Any, Protocol

from bravenode.config.schema import BraveSearchConfig

CREDENTIAL_TYPE = "braveSearchApi"
API_KEY_ENV = "BRAVE_API_KEY"


class CredentialProvider(Protocol):
    """Resolves named credentials; called once per item."""

    def get_credentials(self, name: str) -> dict[str, Any] | None: ...


class StaticCredentialProvider:
    """Serve credentials from an in-memory mapping."""

    def __init__(self, credentials: dict[str, dict[str, Any]] | None = None):
        self._credentials = dict(credentials or {})

    @classmethod
    def for_api_key(cls, api_key: str) -> "StaticCredentialProvider":
        return cls({CREDENTIAL_TYPE: {"apiKey": api_key}})

    def get_credentials(self, name: str) -> dict[str, Any] | None:
        return self._credentials.get(name)


class ConfigCredentialProvider:
    """Read the API key from config, falling back to ``BRAVE_API_KEY``."""

    def __init__(self, config: BraveSearchConfig | None = None):
        self.config = config or BraveSearchConfig()

    def get_credentials(self, name: str) -> dict[str, Any] | None:
        if name != CREDENTIAL_TYPE:
            return None
        api_key = self.config.api_key or os.environ.get(API_KEY_ENV, "")
        return {"apiKey": api_key}
