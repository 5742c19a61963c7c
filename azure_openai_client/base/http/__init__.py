"""HTTP transport ownership for the client."""

from .client import HttpTransport

__all__ = ["HttpTransport"]
