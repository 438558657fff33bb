"""Client handle types consumed by the fluent helpers.

The helpers only need three capabilities from a client:
- A mutable header mapping
- A credential slot
- An appendable cookie collection

RestClient describes that surface. RestClientHandle is a plain in-memory
implementation and HttpxClientAdapter binds it to an httpx client.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cookie:
    """A single request cookie.

    Attributes:
        name: Cookie name
        value: Cookie value
        domain: Domain the cookie is scoped to ("" for any)
        path: Path the cookie is scoped to
    """

    name: str
    value: str = ""
    domain: str = ""
    path: str = "/"


@dataclass(frozen=True)
class Credentials:
    """Username/password pair for basic authentication."""

    username: str
    password: str = field(default="", repr=False)

    def to_auth(self) -> httpx.BasicAuth:
        """Convert to an httpx auth object."""
        return httpx.BasicAuth(self.username, self.password)


@runtime_checkable
class CookieCollection(Protocol):
    """Ordered collection that cookies can be appended to."""

    def append(self, cookie: Cookie) -> None: ...


@runtime_checkable
class RestClient(Protocol):
    """Narrow view of an HTTP client that the helpers mutate."""

    headers: MutableMapping[str, str]
    credentials: Any
    cookies: CookieCollection


@dataclass
class RestClientHandle:
    """In-memory client handle.

    Useful on its own to collect request configuration, or in tests.
    Headers are stored as httpx.Headers, so names are case-insensitive.

    Attributes:
        headers: Request headers
        credentials: Credential value (None until assigned)
        cookies: Cookies in the order they were added
    """

    headers: httpx.Headers = field(default_factory=httpx.Headers)
    credentials: Any = None
    cookies: list[Cookie] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)


class HttpxCookies:
    """Cookie collection backed by an httpx cookie jar.

    Keeps insertion order for iteration and mirrors every cookie
    into the jar so it is sent with requests.
    """

    def __init__(self, jar: httpx.Cookies) -> None:
        self._jar = jar
        self._cookies: list[Cookie] = []

    def append(self, cookie: Cookie) -> None:
        self._jar.set(cookie.name, cookie.value, domain=cookie.domain, path=cookie.path)
        self._cookies.append(cookie)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)


class HttpxClientAdapter:
    """Expose an httpx client through the RestClient protocol.

    Args:
        client: httpx.Client or httpx.AsyncClient to adapt

    Example:
        with httpx.Client() as http:
            client = with_gzip_encoding(HttpxClientAdapter(http))
    """

    def __init__(self, client: httpx.Client | httpx.AsyncClient) -> None:
        self.client = client
        self.cookies = HttpxCookies(client.cookies)
        self._credentials: Any = None

    @property
    def headers(self) -> httpx.Headers:
        return self.client.headers

    @property
    def credentials(self) -> Any:
        return self._credentials

    @credentials.setter
    def credentials(self, value: Any) -> None:
        # Credentials become BasicAuth; anything else httpx accepts as auth passes through
        auth = value.to_auth() if isinstance(value, Credentials) else value
        self.client.auth = auth
        self._credentials = value
        logger.debug(f"Auth set to {type(auth).__name__}")
