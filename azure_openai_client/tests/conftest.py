"""Pytest configuration for the client test suite.

HTTP is exercised through ``httpx.MockTransport`` on a caller-owned
``httpx.Client``; no test touches the network.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List

import httpx
import pytest

from azure_openai_client import AzureOpenAIClient, AzureOpenAIConfiguration
from azure_openai_client.base.logging import BASE_LOGGER_NAME, LOG_LEVEL_ENV, get_logger

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def config() -> AzureOpenAIConfiguration:
    return AzureOpenAIConfiguration(resource_name="contoso", api_key="secret-key")


@pytest.fixture()
def make_client(config) -> Iterator[Callable[[Handler], AzureOpenAIClient]]:
    """Build clients whose requests are answered by ``handler``."""

    http_clients: List[httpx.Client] = []

    def _make(handler: Handler) -> AzureOpenAIClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return AzureOpenAIClient(config, http_client=http_client)

    yield _make
    for c in http_clients:
        c.close()


@pytest.fixture()
def log_capture(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[logging.LogRecord]]:
    """Collect records from the client logger at DEBUG level.

    The base logger does not propagate, so the handler is attached to it
    directly rather than to the root logger.
    """
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    records: List[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = lambda record: records.append(record)  # type: ignore
    base = get_logger(BASE_LOGGER_NAME)
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)
