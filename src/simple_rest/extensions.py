"""Fluent helpers that configure a client handle in place.

Every helper validates its arguments first, mutates the handle, and
returns the same handle so calls can be chained:

    client = with_any_encoding(with_cookie(handle, "session", "abc"))
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

from simple_rest.client import Cookie, RestClient
from simple_rest.encoding import ACCEPT_ENCODING, DEFLATE, GZIP, merge_encoding
from simple_rest.errors import MissingArgumentError, require

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound=RestClient)


def with_encoding(client: ClientT, token: str) -> ClientT:
    """Ensure the Accept-Encoding header lists token.

    Args:
        client: Client handle to mutate
        token: Content-coding to advertise (e.g. "gzip", "br")

    Returns:
        The same client handle

    Raises:
        MissingArgumentError: If client is None or token is None/blank
    """
    require(client, "client")
    if token is None or not token.strip():
        raise MissingArgumentError("token", message="Encoding token is missing or blank")

    current = client.headers.get(ACCEPT_ENCODING)
    merged = merge_encoding(current, token.strip())
    if merged != current:
        client.headers[ACCEPT_ENCODING] = merged
        logger.debug(f"{ACCEPT_ENCODING} set to {merged!r}")
    return client


def with_gzip_encoding(client: ClientT) -> ClientT:
    """Add gzip to the Accept-Encoding header."""
    return with_encoding(client, GZIP)


def with_deflate_encoding(client: ClientT) -> ClientT:
    """Add deflate to the Accept-Encoding header."""
    return with_encoding(client, DEFLATE)


def with_any_encoding(client: ClientT) -> ClientT:
    """Add both gzip and deflate to the Accept-Encoding header."""
    require(client, "client")
    return with_deflate_encoding(with_gzip_encoding(client))


def with_credentials(client: ClientT, credentials: Any) -> ClientT:
    """Assign credentials to the client, replacing any previous value.

    Args:
        client: Client handle to mutate
        credentials: Credential value understood by the client
            (Credentials, an httpx auth object, a (user, password) tuple, ...)

    Returns:
        The same client handle

    Raises:
        MissingArgumentError: If client or credentials is None
    """
    require(client, "client")
    require(credentials, "credentials")

    client.credentials = credentials
    logger.debug(f"Credentials set ({type(credentials).__name__})")
    return client


@overload
def with_cookie(client: ClientT, cookie: Cookie, /) -> ClientT: ...


@overload
def with_cookie(client: ClientT, name: str, value: str | None, /) -> ClientT: ...


def with_cookie(
    client: ClientT,
    cookie_or_name: Cookie | str | None,
    value: str | None = None,
    /,
) -> ClientT:
    """Append a cookie to the client's cookie collection.

    Accepts either a Cookie or a name/value pair. Cookies are appended
    as-is: no deduplication and no attribute validation.

    Args:
        client: Client handle to mutate
        cookie_or_name: Cookie instance, or the cookie name
        value: Cookie value when a name is given (None becomes "")

    Returns:
        The same client handle

    Raises:
        MissingArgumentError: If client, cookie or name is None
    """
    require(client, "client")
    if cookie_or_name is None:
        raise MissingArgumentError("name" if value is not None else "cookie")

    if isinstance(cookie_or_name, Cookie):
        cookie = cookie_or_name
    else:
        cookie = Cookie(name=cookie_or_name, value="" if value is None else value)

    client.cookies.append(cookie)
    logger.debug(f"Cookie {cookie.name!r} added")
    return client
