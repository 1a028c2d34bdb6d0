"""Configuration resolution with environment variables and explicit overrides.

The client keeps no configuration on disk.  Settings come from two places:

* **Explicit values** passed by the caller (keyword arguments).
* **Environment variables**:

  ``CUENTICA_API_TOKEN``
      Value of the ``X-AUTH-TOKEN`` header.  Required.
  ``CUENTICA_API_URL``
      Base URL, for sandboxes and proxies.
  ``CUENTICA_TIMEOUT_MS``
      Timeout for a whole exchange, in milliseconds.
  ``CUENTICA_DEBUG``
      ``1``/``true``/``yes``/``on`` enables debug diagnostics.
  ``CUENTICA_CACHE_ENABLED``
      ``0``/``false``/``no``/``off`` disables the response cache.

:func:`resolve_config` merges the two into a
:class:`~cuentica.models.ClientConfig`.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Optional

from pydantic import ValidationError

from cuentica.exceptions import ConfigError
from cuentica.models import CacheConfig, ClientConfig

ENV_API_TOKEN = "CUENTICA_API_TOKEN"
ENV_API_URL = "CUENTICA_API_URL"
ENV_TIMEOUT_MS = "CUENTICA_TIMEOUT_MS"
ENV_DEBUG = "CUENTICA_DEBUG"
ENV_CACHE_ENABLED = "CUENTICA_CACHE_ENABLED"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


# --- Environment parsing ---


def _env(name: str) -> Optional[str]:
    """Return a stripped environment value, treating empty strings as unset."""
    value = os.environ.get(name, "").strip()
    return value or None


def _env_int(name: str) -> Optional[int]:
    raw = _env(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str) -> Optional[bool]:
    raw = _env(name)
    if raw is None:
        return None
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}")


# --- Precedence resolution ---


def resolve_config(
    api_token: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    debug: Optional[bool] = None,
    cache_enabled: Optional[bool] = None,
    cache: Optional[CacheConfig] = None,
    logger: Optional[Callable[[str, Any], None]] = None,
) -> ClientConfig:
    """Resolve client settings with full precedence chain.

    Precedence (high to low):
        1. Explicit arguments
        2. Environment variables (``CUENTICA_*``)
        3. Defaults from :class:`~cuentica.models.ClientConfig`

    Args:
        api_token: API token; falls back to ``CUENTICA_API_TOKEN``.
        api_url: Base URL; falls back to ``CUENTICA_API_URL``.
        timeout_ms: Timeout in ms; falls back to ``CUENTICA_TIMEOUT_MS``.
        debug: Debug diagnostics; falls back to ``CUENTICA_DEBUG``.
        cache_enabled: Toggle the cache; falls back to
            ``CUENTICA_CACHE_ENABLED``.  Overrides ``cache.enabled``.
        cache: Full cache settings (TTLs).
        logger: Custom diagnostics sink.

    Returns:
        The effective :class:`~cuentica.models.ClientConfig`.

    Raises:
        ConfigError: If no token is available or a value is invalid.
    """
    # 1 > 2. Explicit values win over the environment
    token = api_token if api_token is not None else _env(ENV_API_TOKEN)
    if not token:
        raise ConfigError(f"{ENV_API_TOKEN} environment variable is not set")

    url = api_url if api_url is not None else _env(ENV_API_URL)
    timeout = timeout_ms if timeout_ms is not None else _env_int(ENV_TIMEOUT_MS)
    debug_flag = debug if debug is not None else _env_bool(ENV_DEBUG)
    enabled = cache_enabled if cache_enabled is not None else _env_bool(ENV_CACHE_ENABLED)

    cache_config = cache or CacheConfig()
    if enabled is not None:
        cache_config = cache_config.model_copy(update={"enabled": enabled})

    # 3. Only pass what was resolved so model defaults fill the rest
    fields: dict[str, Any] = {"api_token": token, "cache": cache_config}
    if url is not None:
        fields["api_url"] = url
    if timeout is not None:
        fields["timeout_ms"] = timeout
    if debug_flag is not None:
        fields["debug"] = debug_flag
    if logger is not None:
        fields["logger"] = logger

    try:
        return ClientConfig(**fields)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc
