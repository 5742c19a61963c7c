"""Client configuration.

Sources, in order of precedence:
    1. Arguments passed to :class:`AzureOpenAIConfiguration`
    2. Environment variables, via :meth:`AzureOpenAIConfiguration.from_env`
    3. Built-in defaults (``config/defaults.py``)

Environment Variables
---------------------
AZURE_OPENAI_RESOURCE_NAME, AZURE_OPENAI_API_KEY (required);
AZURE_OPENAI_API_VERSION, AZURE_OPENAI_TIMEOUT_SECONDS,
AZURE_OPENAI_ENDPOINT (optional).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .defaults import (
    AZURE_OPENAI_DEFAULT_API_VERSION,
    AZURE_OPENAI_DEFAULT_TIMEOUT_SECONDS,
    AZURE_OPENAI_HOST_TEMPLATE,
)
from .env import (
    ENV_API_KEY,
    ENV_API_VERSION,
    ENV_ENDPOINT,
    ENV_RESOURCE_NAME,
    ENV_TIMEOUT_SECONDS,
    get_env,
    is_placeholder,
    parse_env_float,
)


@dataclass(frozen=True)
class AzureOpenAIConfiguration:
    """Immutable connection settings for one Azure OpenAI resource.

    Attributes:
        resource_name: Azure resource name; forms the default host.
        api_key: Value sent in the ``api-key`` header.
        api_version: ``api-version`` query parameter.
        timeout_seconds: Default per-request timeout.
        endpoint: Full base URL overriding the resource host (proxies,
            sovereign clouds, tests).
    """

    resource_name: str
    api_key: str
    api_version: str = AZURE_OPENAI_DEFAULT_API_VERSION
    timeout_seconds: float = AZURE_OPENAI_DEFAULT_TIMEOUT_SECONDS
    endpoint: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.resource_name or not self.resource_name.strip():
            raise ValueError("resource_name must be a non-empty string")
        if not self.api_key or not self.api_key.strip():
            raise ValueError("api_key must be a non-empty string")
        if not self.api_version:
            raise ValueError("api_version must be a non-empty string")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

    @property
    def base_url(self) -> str:
        if self.endpoint:
            return self.endpoint.rstrip("/")
        return AZURE_OPENAI_HOST_TEMPLATE.format(resource=self.resource_name)

    def __repr__(self) -> str:
        return (
            f"AzureOpenAIConfiguration(resource_name={self.resource_name!r}, api_key='***', "
            f"api_version={self.api_version!r}, timeout_seconds={self.timeout_seconds!r}, "
            f"endpoint={self.endpoint!r})"
        )

    @classmethod
    def from_env(cls) -> Optional["AzureOpenAIConfiguration"]:
        """Build a configuration from the environment.

        Returns None when the resource name or API key is missing or looks
        like a placeholder. A malformed timeout raises ``ValueError``.
        """
        resource = get_env(ENV_RESOURCE_NAME)
        api_key = get_env(ENV_API_KEY)
        if resource is None or api_key is None or is_placeholder(resource) or is_placeholder(api_key):
            return None
        timeout = parse_env_float(ENV_TIMEOUT_SECONDS)
        return cls(
            resource_name=resource,
            api_key=api_key,
            api_version=get_env(ENV_API_VERSION) or AZURE_OPENAI_DEFAULT_API_VERSION,
            timeout_seconds=AZURE_OPENAI_DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout,
            endpoint=get_env(ENV_ENDPOINT),
        )


__all__ = ["AzureOpenAIConfiguration", "is_placeholder"]
