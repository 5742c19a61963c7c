"""HTTP transport handle with explicit ownership.

Purpose:
    Wrap the ``httpx.Client`` used by :class:`AzureOpenAIClient` and record
    whether this library created it. Only an owned client is ever closed;
    a caller-supplied client stays under the caller's control.

Lifecycle & cleanup:
    - Owned clients are closed by :meth:`HttpTransport.close`, which is
      idempotent and never raises.
    - A ``weakref.finalize`` hook closes an owned client when the handle is
      garbage-collected or the interpreter exits, whichever comes first.
"""

from __future__ import annotations

import logging
import weakref
from typing import Optional

import httpx

from ..logging import get_logger, log_event


def _close_quietly(client: httpx.Client, logger: logging.Logger) -> None:
    """Close ``client`` and log, rather than raise, any teardown failure."""
    try:
        client.close()
    except Exception as exc:  # teardown may run at interpreter exit
        log_event(logger, "transport.close_error", level=logging.WARNING, error=str(exc))


class HttpTransport:
    """Pooled ``httpx.Client`` plus an ownership flag.

    Parameters:
        client: Caller-owned client. When ``None`` a new client is created
            and owned by this handle.
        timeout_seconds: Default timeout for an owned client.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, timeout_seconds: float = 60.0) -> None:
        self._logger = get_logger("azure_openai.transport")
        if client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(timeout_seconds))
            self._owns_client = True
            self._finalizer: Optional[weakref.finalize] = weakref.finalize(
                self, _close_quietly, self._client, self._logger
            )
        else:
            self._client = client
            self._owns_client = False
            self._finalizer = None

    @property
    def client(self) -> httpx.Client:
        return self._client

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        """Close the underlying client if owned; safe to call repeatedly."""
        if self._finalizer is not None:
            self._finalizer()


__all__ = ["HttpTransport"]
