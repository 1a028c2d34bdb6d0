"""Tests for configuration resolution from arguments and the environment."""

from __future__ import annotations

import pytest

from cuentica.config import resolve_config
from cuentica.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT_MS
from cuentica.exceptions import ConfigError
from cuentica.models import CacheConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CUENTICA_API_TOKEN",
        "CUENTICA_API_URL",
        "CUENTICA_TIMEOUT_MS",
        "CUENTICA_DEBUG",
        "CUENTICA_CACHE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


class TestToken:
    def test_missing_token_raises(self) -> None:
        with pytest.raises(ConfigError, match="CUENTICA_API_TOKEN"):
            resolve_config()

    def test_empty_env_token_counts_as_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_API_TOKEN", "  ")
        with pytest.raises(ConfigError):
            resolve_config()

    def test_token_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_API_TOKEN", "env-token")
        assert resolve_config().api_token == "env-token"

    def test_explicit_token_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_API_TOKEN", "env-token")
        assert resolve_config(api_token="explicit").api_token == "explicit"


class TestPrecedence:
    def test_defaults(self) -> None:
        config = resolve_config(api_token="t")
        assert config.api_url == DEFAULT_API_URL
        assert config.timeout_ms == DEFAULT_TIMEOUT_MS
        assert config.debug is False
        assert config.cache.enabled is True

    def test_env_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_API_TOKEN", "t")
        monkeypatch.setenv("CUENTICA_API_URL", "https://sandbox.test")
        monkeypatch.setenv("CUENTICA_TIMEOUT_MS", "5000")
        monkeypatch.setenv("CUENTICA_DEBUG", "yes")
        monkeypatch.setenv("CUENTICA_CACHE_ENABLED", "off")

        config = resolve_config()
        assert config.api_url == "https://sandbox.test"
        assert config.timeout_ms == 5000
        assert config.debug is True
        assert config.cache.enabled is False

    def test_explicit_values_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_API_URL", "https://env.test")
        monkeypatch.setenv("CUENTICA_TIMEOUT_MS", "5000")
        monkeypatch.setenv("CUENTICA_DEBUG", "1")

        config = resolve_config(
            api_token="t", api_url="https://explicit.test", timeout_ms=100, debug=False,
        )
        assert config.api_url == "https://explicit.test"
        assert config.timeout_ms == 100
        assert config.debug is False

    def test_cache_enabled_overrides_cache_config(self) -> None:
        config = resolve_config(
            api_token="t", cache=CacheConfig(list_ttl_ms=10), cache_enabled=False,
        )
        assert config.cache.enabled is False
        assert config.cache.list_ttl_ms == 10

    def test_logger_is_passed_through(self) -> None:
        def sink(message, data):
            return None

        assert resolve_config(api_token="t", logger=sink).logger is sink


class TestInvalidValues:
    def test_non_integer_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_TIMEOUT_MS", "fast")
        with pytest.raises(ConfigError, match="CUENTICA_TIMEOUT_MS"):
            resolve_config(api_token="t")

    def test_non_boolean_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUENTICA_DEBUG", "maybe")
        with pytest.raises(ConfigError, match="CUENTICA_DEBUG"):
            resolve_config(api_token="t")

    def test_negative_timeout(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config(api_token="t", timeout_ms=-1)
