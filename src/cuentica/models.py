"""Pydantic models shared across the cuentica client.

**Configuration models** -- accepted by :class:`~cuentica.client.CuenticaClient`
and produced by :func:`~cuentica.config.resolve_config`:
    :class:`CacheConfig` and :class:`ClientConfig`.

**Request/response models** -- the shapes that flow through the request
engine and the three call shapes:
    :class:`HTTPMethod`, :class:`RequestOptions`, :class:`PaginationInfo`,
    :class:`PaginatedResponse`, :class:`CachedResponse`,
    :class:`DownloadedFile`, and :class:`UploadResult`.

Resource payloads (customers, invoices, ...) are passed through as decoded
JSON; the API's field set drifts too often for a strict schema to help.
The few request bodies worth validating live in :mod:`cuentica.payloads`.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from cuentica.constants import (
    DEFAULT_API_URL,
    DEFAULT_CURRENT_PAGE,
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_TOTAL_ITEMS,
    DEFAULT_TOTAL_PAGES,
    CacheTTL,
)


# --- Configuration ---


class CacheConfig(BaseModel):
    """In-memory response cache settings."""

    enabled: bool = Field(default=True, description="Enable response caching")
    list_ttl_ms: int = Field(
        default=CacheTTL.LIST, ge=0, description="TTL for list and entity reads"
    )
    static_ttl_ms: int = Field(
        default=CacheTTL.STATIC, ge=0, description="TTL for company and tag reads"
    )


class ClientConfig(BaseModel):
    """Settings for a single :class:`~cuentica.client.CuenticaClient`.

    ``api_token`` is validated by the client itself so that a missing token
    surfaces as :class:`~cuentica.exceptions.ConfigError` rather than a
    pydantic validation error.

    Example::

        ClientConfig(
            api_token="secret",
            timeout_ms=10_000,
            cache=CacheConfig(list_ttl_ms=60_000),
        )
    """

    model_config = ConfigDict(extra="forbid")

    api_token: str = Field(default="", description="Value of the X-AUTH-TOKEN header")
    api_url: str = Field(default=DEFAULT_API_URL, description="API base URL")
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS, gt=0, description="Timeout for a whole exchange"
    )
    debug: bool = Field(default=False, description="Emit debug diagnostics")
    logger: Optional[Callable[[str, Any], None]] = Field(
        default=None,
        description="Custom diagnostics sink called as logger(message, data)",
    )
    cache: CacheConfig = Field(default_factory=CacheConfig)


# --- Requests ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods the Cuentica API uses."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestOptions(BaseModel):
    """Descriptor of one logical API call.

    Built per call by the call-shape methods on
    :class:`~cuentica.client.CuenticaClient` and never persisted.
    ``skip_cache`` is only consulted by the cache-aware call shapes; the
    request engine ignores it.
    """

    method: HTTPMethod
    path: str
    body: Any = None
    query: Optional[dict[str, Any]] = None
    skip_cache: bool = False

    @property
    def cacheable(self) -> bool:
        """Whether a successful response may be stored in the cache."""
        return self.method == HTTPMethod.GET and not self.skip_cache


# --- Responses ---


class PaginationInfo(BaseModel):
    """Pagination state reported by the server in response headers.

    This reflects what the server actually did; the API is known to ignore
    a requested ``page_size`` and cap list responses.
    """

    current_page: int = DEFAULT_CURRENT_PAGE
    total_pages: int = DEFAULT_TOTAL_PAGES
    total_items: int = DEFAULT_TOTAL_ITEMS
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE


class PaginatedResponse(BaseModel):
    """One page of a list endpoint together with its pagination info."""

    items: Any = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)


class CachedResponse(BaseModel):
    """A decoded response tagged with its cache provenance."""

    data: Any = None
    cached: bool = False


class DownloadedFile(BaseModel):
    """Raw bytes of a binary download and the MIME type the server declared."""

    content: bytes
    mime_type: str = "application/octet-stream"


class UploadResult(BaseModel):
    """Acknowledgement returned by attachment uploads."""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
