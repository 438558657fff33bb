"""Accept-Encoding header parsing and merging."""

from __future__ import annotations

ACCEPT_ENCODING = "Accept-Encoding"

GZIP = "gzip"
DEFLATE = "deflate"


def parse_encodings(value: str | None) -> list[str]:
    """Split an Accept-Encoding value into normalized tokens.

    Parameters such as ``;q=0.5`` are dropped and tokens are lower-cased,
    so ``"GZIP;q=1.0, deflate"`` yields ``["gzip", "deflate"]``.

    Args:
        value: Raw header value (None or blank yields an empty list)

    Returns:
        Tokens in header order, empty entries skipped
    """
    if not value:
        return []

    tokens = []
    for part in value.split(","):
        token = part.split(";", 1)[0].strip().lower()
        if token:
            tokens.append(token)
    return tokens


def merge_encoding(value: str | None, token: str) -> str:
    """Return the header value with token present exactly once.

    A missing or blank value (or one holding only separators) is treated
    as absent and replaced by token.
    An existing value that already lists the token is returned unchanged.
    """
    existing = parse_encodings(value)
    if not existing:
        return token
    if token.strip().lower() in existing:
        return value
    # Trailing separators are dropped before appending
    base = value.rstrip(", \t")
    return f"{base}, {token}"
