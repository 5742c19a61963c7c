"""azure_openai_client.config.defaults
===================================

Small, stable default values for client configuration. Plain constants
only; this module imports nothing from the rest of the package.
"""

from __future__ import annotations

# Service API version sent as the ``api-version`` query parameter.
AZURE_OPENAI_DEFAULT_API_VERSION = "2024-06-01"

# Per-request timeout applied when neither the configuration nor the call
# overrides it.
AZURE_OPENAI_DEFAULT_TIMEOUT_SECONDS = 60.0

# Resource host template; ``{resource}`` is the Azure resource name.
AZURE_OPENAI_HOST_TEMPLATE = "https://{resource}.openai.azure.com"

__all__ = [
    "AZURE_OPENAI_DEFAULT_API_VERSION",
    "AZURE_OPENAI_DEFAULT_TIMEOUT_SECONDS",
    "AZURE_OPENAI_HOST_TEMPLATE",
]
