"""Build configured clients from ClientSettings."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from simple_rest.client import HttpxClientAdapter
from simple_rest.encoding import ACCEPT_ENCODING
from simple_rest.extensions import ClientT, with_cookie, with_credentials, with_encoding
from simple_rest.settings import ClientSettings, load_settings

logger = logging.getLogger(__name__)


def apply_settings(client: ClientT, settings: ClientSettings) -> ClientT:
    """Apply encodings, credentials and cookies from settings to a client.

    Args:
        client: Client handle to mutate
        settings: Parsed client settings

    Returns:
        The same client handle
    """
    for token in settings.accept_encoding:
        with_encoding(client, token)

    credentials = settings.credentials
    if credentials is not None:
        with_credentials(client, credentials)

    for name, value in settings.cookies.items():
        with_cookie(client, name, value)

    return client


@contextmanager
def build_client(settings: ClientSettings | None = None) -> Iterator[HttpxClientAdapter]:
    """Create an httpx-backed client configured from settings.

    This is a context manager that closes the underlying httpx client.

    Args:
        settings: Client settings (loaded from os.environ if not given)

    Yields:
        HttpxClientAdapter wrapping a configured httpx.Client

    Example:
        with build_client() as client:
            response = client.client.get("/status")
    """
    if settings is None:
        settings = load_settings()

    http_client = httpx.Client(
        base_url=settings.base_url,
        timeout=settings.timeout,
        follow_redirects=True,
    )

    try:
        # Configured encodings replace httpx's default Accept-Encoding
        if settings.accept_encoding:
            http_client.headers.pop(ACCEPT_ENCODING, None)

        adapter = apply_settings(HttpxClientAdapter(http_client), settings)
        logger.debug(
            f"Built client base_url={settings.base_url!r} "
            f"{ACCEPT_ENCODING}={adapter.headers.get(ACCEPT_ENCODING)!r}"
        )
        yield adapter
    finally:
        http_client.close()
