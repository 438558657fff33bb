"""Environment-driven client configuration.

Parses SIMPLE_REST_* environment variables into a typed ClientSettings
object. This is the only place where env vars are read.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from simple_rest.client import Credentials
from simple_rest.encoding import parse_encodings
from simple_rest.errors import ConfigError


class ClientSettings(BaseModel):
    """Client configuration applied by simple_rest.factory.

    Attributes:
        base_url: Base URL for relative request paths.
        timeout: Request timeout in seconds.
        accept_encoding: Content-codings to advertise, in order.
        username: Basic auth username (optional).
        password: Basic auth password (requires username).
        cookies: Cookies to send with every request, in order.
    """

    base_url: str = Field(default="", description="SIMPLE_REST_BASE_URL - Base URL")
    timeout: float = Field(default=30.0, gt=0, description="SIMPLE_REST_TIMEOUT - Timeout in seconds")
    accept_encoding: list[str] = Field(
        default_factory=list,
        description="SIMPLE_REST_ACCEPT_ENCODING - Comma-separated encodings (e.g. 'gzip, deflate')",
    )
    username: str | None = Field(default=None, description="SIMPLE_REST_USERNAME - Basic auth user")
    password: str | None = Field(
        default=None, repr=False, description="SIMPLE_REST_PASSWORD - Basic auth password"
    )
    cookies: dict[str, str] = Field(
        default_factory=dict, description="SIMPLE_REST_COOKIES - Cookies as 'a=1; b=2'"
    )

    @field_validator("accept_encoding", mode="before")
    @classmethod
    def parse_accept_encoding(cls, v: Any) -> Any:
        """Parse comma-separated string into tokens."""
        if isinstance(v, str):
            return parse_encodings(v)
        return v

    @field_validator("cookies", mode="before")
    @classmethod
    def parse_cookies(cls, v: Any) -> Any:
        """Parse 'name=value; name2=value2' into a dict."""
        if not isinstance(v, str):
            return v
        cookies: dict[str, str] = {}
        for pair in v.split(";"):
            if not pair.strip():
                continue
            name, sep, value = pair.partition("=")
            if not sep or not name.strip():
                raise ValueError(f"Invalid cookie pair: {pair.strip()!r}")
            cookies[name.strip()] = value.strip()
        return cookies

    @model_validator(mode="after")
    def check_credentials(self) -> ClientSettings:
        if self.password is not None and not self.username:
            raise ValueError("password is set but username is missing")
        return self

    @property
    def credentials(self) -> Credentials | None:
        """Credentials built from username/password, if configured."""
        if not self.username:
            return None
        return Credentials(self.username, self.password or "")


# Environment variable names (single source of truth)
ENV_VARS = {
    "base_url": "SIMPLE_REST_BASE_URL",
    "timeout": "SIMPLE_REST_TIMEOUT",
    "accept_encoding": "SIMPLE_REST_ACCEPT_ENCODING",
    "username": "SIMPLE_REST_USERNAME",
    "password": "SIMPLE_REST_PASSWORD",
    "cookies": "SIMPLE_REST_COOKIES",
}


def load_settings(environ: Mapping[str, str] | None = None) -> ClientSettings:
    """Load client settings from environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Parsed ClientSettings

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    kwargs: dict[str, Any] = {}
    for field_name, env_var in ENV_VARS.items():
        value = environ.get(env_var)
        if value is not None:
            kwargs[field_name] = value

    try:
        return ClientSettings(**kwargs)
    except ValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ()
        field_name = str(loc[0]) if loc else None
        variable = ENV_VARS.get(field_name) if field_name else None
        # Never echo secrets back in the error
        value = None if field_name in (None, "password") else kwargs.get(field_name)
        raise ConfigError(
            f"Invalid client settings: {error['msg']}",
            variable=variable,
            value=value,
        ) from e
