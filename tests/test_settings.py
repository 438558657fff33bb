"""Tests for environment-driven client settings."""

from __future__ import annotations

import pytest

from simple_rest.client import Credentials
from simple_rest.errors import ConfigError
from simple_rest.settings import ENV_VARS, ClientSettings, load_settings


class TestClientSettings:
    """Tests for ClientSettings parsing."""

    def test_defaults(self) -> None:
        settings = ClientSettings()
        assert settings.base_url == ""
        assert settings.timeout == 30.0
        assert settings.accept_encoding == []
        assert settings.credentials is None
        assert settings.cookies == {}

    def test_parses_accept_encoding_string(self) -> None:
        settings = ClientSettings(accept_encoding="gzip, deflate;q=0.5")
        assert settings.accept_encoding == ["gzip", "deflate"]

    def test_accepts_accept_encoding_list(self) -> None:
        settings = ClientSettings(accept_encoding=["br"])
        assert settings.accept_encoding == ["br"]

    def test_parses_cookie_string_in_order(self) -> None:
        settings = ClientSettings(cookies="b=2; a=1;  empty=")
        assert list(settings.cookies.items()) == [("b", "2"), ("a", "1"), ("empty", "")]

    def test_credentials_from_username_password(self) -> None:
        settings = ClientSettings(username="alice", password="s3cret")
        assert settings.credentials == Credentials("alice", "s3cret")

    def test_credentials_without_password(self) -> None:
        settings = ClientSettings(username="alice")
        assert settings.credentials == Credentials("alice", "")

    def test_repr_hides_password(self) -> None:
        settings = ClientSettings(username="alice", password="s3cret")
        assert "s3cret" not in repr(settings)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_empty_environment(self) -> None:
        assert load_settings({}) == ClientSettings()

    def test_reads_all_variables(self) -> None:
        env = {
            "SIMPLE_REST_BASE_URL": "https://api.example.com",
            "SIMPLE_REST_TIMEOUT": "5.5",
            "SIMPLE_REST_ACCEPT_ENCODING": "gzip,deflate",
            "SIMPLE_REST_USERNAME": "alice",
            "SIMPLE_REST_PASSWORD": "s3cret",
            "SIMPLE_REST_COOKIES": "session=abc",
        }

        settings = load_settings(env)

        assert settings.base_url == "https://api.example.com"
        assert settings.timeout == 5.5
        assert settings.accept_encoding == ["gzip", "deflate"]
        assert settings.credentials == Credentials("alice", "s3cret")
        assert settings.cookies == {"session": "abc"}

    def test_ignores_unrelated_variables(self) -> None:
        settings = load_settings({"HOME": "/root", "SIMPLE_REST_TIMEOUT": "10"})
        assert settings.timeout == 10.0

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLE_REST_BASE_URL", "https://env.example.com")
        assert load_settings().base_url == "https://env.example.com"

    def test_invalid_timeout_raises(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings({"SIMPLE_REST_TIMEOUT": "soon"})
        assert exc_info.value.variable == "SIMPLE_REST_TIMEOUT"
        assert exc_info.value.value == "soon"

    def test_non_positive_timeout_raises(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings({"SIMPLE_REST_TIMEOUT": "0"})
        assert exc_info.value.variable == "SIMPLE_REST_TIMEOUT"

    def test_invalid_cookie_raises(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings({"SIMPLE_REST_COOKIES": "novalue"})
        assert exc_info.value.variable == "SIMPLE_REST_COOKIES"

    def test_password_without_username_raises(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings({"SIMPLE_REST_PASSWORD": "s3cret"})
        assert "username" in str(exc_info.value)
        assert "s3cret" not in str(exc_info.value)

    def test_env_var_table_covers_all_fields(self) -> None:
        assert set(ENV_VARS) == set(ClientSettings.model_fields)
