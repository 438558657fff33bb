"""Pytest fixtures for simple-rest tests."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from simple_rest.client import HttpxClientAdapter, RestClientHandle


@pytest.fixture
def handle() -> RestClientHandle:
    """Create an empty in-memory client handle."""
    return RestClientHandle()


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    """Create an httpx client with no default Accept-Encoding header.

    The client is never used to send requests.
    """
    client = httpx.Client()
    client.headers.pop("Accept-Encoding", None)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def adapter(http_client: httpx.Client) -> HttpxClientAdapter:
    """Wrap the httpx client fixture in the RestClient adapter."""
    return HttpxClientAdapter(http_client)
