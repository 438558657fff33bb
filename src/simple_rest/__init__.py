"""simple-rest: fluent helpers for configuring HTTP clients."""

__version__ = "0.1.0"

from simple_rest.client import (
    Cookie,
    CookieCollection,
    Credentials,
    HttpxClientAdapter,
    RestClient,
    RestClientHandle,
)
from simple_rest.encoding import ACCEPT_ENCODING, DEFLATE, GZIP, merge_encoding, parse_encodings
from simple_rest.errors import ConfigError, MissingArgumentError, RestError
from simple_rest.extensions import (
    with_any_encoding,
    with_cookie,
    with_credentials,
    with_deflate_encoding,
    with_encoding,
    with_gzip_encoding,
)
from simple_rest.factory import apply_settings, build_client
from simple_rest.settings import ClientSettings, load_settings

__all__ = [
    # Client handles
    "Cookie",
    "CookieCollection",
    "Credentials",
    "HttpxClientAdapter",
    "RestClient",
    "RestClientHandle",
    # Encoding
    "ACCEPT_ENCODING",
    "DEFLATE",
    "GZIP",
    "merge_encoding",
    "parse_encodings",
    # Helpers
    "with_any_encoding",
    "with_cookie",
    "with_credentials",
    "with_deflate_encoding",
    "with_encoding",
    "with_gzip_encoding",
    # Configuration
    "ClientSettings",
    "apply_settings",
    "build_client",
    "load_settings",
    # Errors
    "ConfigError",
    "MissingArgumentError",
    "RestError",
]
