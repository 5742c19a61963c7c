"""Transport ownership: owned clients are closed, caller clients never are."""
from __future__ import annotations

import gc

import httpx

from azure_openai_client import AzureOpenAIClient
from azure_openai_client.base.http import HttpTransport


def test_owned_client_closed_once():
    transport = HttpTransport(timeout_seconds=5)
    assert transport.owns_client and not transport.closed  # nosec B101
    assert transport.client.timeout.read == 5  # nosec B101
    transport.close()
    transport.close()
    assert transport.closed  # nosec B101


def test_caller_client_left_open():
    with httpx.Client() as http_client:
        transport = HttpTransport(http_client)
        assert not transport.owns_client  # nosec B101
        transport.close()
        assert not http_client.is_closed  # nosec B101


def test_owned_client_closed_on_collection():
    transport = HttpTransport()
    inner = transport.client
    del transport
    gc.collect()
    assert inner.is_closed  # nosec B101


def test_client_context_manager_closes_owned_transport(config):
    with AzureOpenAIClient(config) as client:
        inner = client.transport.client
        assert client.transport.owns_client  # nosec B101
    assert inner.is_closed  # nosec B101
    client.shutdown()


def test_client_close_keeps_caller_client(config):
    with httpx.Client() as http_client:
        client = AzureOpenAIClient(config, http_client=http_client)
        client.close()
        assert not http_client.is_closed  # nosec B101
