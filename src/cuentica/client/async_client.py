"""Asynchronous HTTP client for the Cuentica API.

This module provides :class:`CuenticaClient`, the single choke point that
talks to the network.  It wraps :class:`httpx.AsyncClient` and layers on:

- **Auth injection** -- the static ``X-AUTH-TOKEN`` header on every call.
- **Header discipline** -- ``Content-Type: application/json`` is only sent
  when a body is present; the API rejects bodyless GETs that carry it with
  an "Invalid Json" error.
- **Timeout** -- one duration bounds the whole exchange; expiry surfaces as
  :class:`~cuentica.exceptions.NetworkError`.
- **Error mapping** -- 429 becomes
  :class:`~cuentica.exceptions.RateLimitError`, every other non-2xx an
  :class:`~cuentica.exceptions.ApiError`.
- **Response caching** -- an in-memory :class:`~cuentica.cache.ResponseCache`
  for GET requests, owned by the client instance.

Resource endpoints build on three call shapes: :meth:`CuenticaClient.request`
(plain), :meth:`CuenticaClient.cached_request` (cache-aware, tagged with
provenance) and :meth:`CuenticaClient.paginated_request` (cache-aware, with
pagination read from response headers).  Writes never invalidate the cache
on their own; each endpoint declares its invalidation scope.

There is no retry: every failure reaches the caller on the first attempt.
"""

from __future__ import annotations

import asyncio
import copy
import json
from typing import Any, Mapping, NoReturn, Optional, Union

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from cuentica.cache import ResponseCache
from cuentica.cache.cache import stringify_query_value
from cuentica.constants import AUTH_HEADER, HEADER_RETRY_AFTER, CacheKeyPrefix
from cuentica.exceptions import ApiError, ConfigError, NetworkError, RateLimitError
from cuentica.models import (
    CachedResponse,
    ClientConfig,
    DownloadedFile,
    HTTPMethod,
    PaginatedResponse,
    RequestOptions,
    UploadResult,
)
from cuentica.output import OutputManager, get_output
from cuentica.client.response import (
    parse_error_body,
    parse_pagination_headers,
    parse_response_body,
)

_MISSING = object()
_JSON_BODY = TypeAdapter(Any)


class CuenticaClient:
    """Async client for the Cuentica API.

    Can be used as an async context manager, which opens and closes the
    underlying transport.  Used without one, the transport is created on the
    first request and released by :meth:`aclose`.

    Args:
        config: Client settings.  When omitted, one is built from
            ``**options`` (``api_token=...``, ``timeout_ms=...``).
        cache: Response cache to use instead of a fresh one built from
            ``config.cache``.
        output: Diagnostics sink.  Defaults to a verbose manager when
            ``config.debug`` is set, otherwise the global one.
        transport: Custom :mod:`httpx` transport (tests use
            :class:`httpx.MockTransport`).
        **options: Fields for :class:`~cuentica.models.ClientConfig`.  With
            *config* given they replace its values, so
            ``CuenticaClient(config, timeout_ms=5_000)`` keeps the rest of
            *config*.

    Raises:
        ConfigError: If no API token is configured or an option is invalid.

    Example::

        async with CuenticaClient(api_token="secret") as client:
            page = await client.paginated_request("GET", "/customer", query={"page": 1})
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        cache: Optional[ResponseCache] = None,
        output: Optional[OutputManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ) -> None:
        if config is None or options:
            # Options override the fields of an explicit config.
            fields = {**dict(config or {}), **options}
            try:
                config = ClientConfig(**fields)
            except ValidationError as exc:
                raise ConfigError(f"Invalid client configuration: {exc}") from exc
        if not config.api_token:
            raise ConfigError("API token is required")

        self._config = config
        self._cache = cache if cache is not None else ResponseCache(config.cache)
        self._output = output or (OutputManager(verbose=True) if config.debug else None)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_env(
        cls,
        *,
        output: Optional[OutputManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ) -> CuenticaClient:
        """Create a client from ``CUENTICA_*`` environment variables.

        Args:
            output: Diagnostics sink, as for the constructor.
            transport: Custom :mod:`httpx` transport.
            **overrides: Explicit settings that take precedence over the
                environment (see :func:`~cuentica.config.resolve_config`).

        Raises:
            ConfigError: If ``CUENTICA_API_TOKEN`` is not set and no token
                was passed.
        """
        from cuentica.config import resolve_config

        return cls(resolve_config(**overrides), output=output, transport=transport)

    @property
    def config(self) -> ClientConfig:
        """The settings this client was built with."""
        return self._config

    @property
    def cache(self) -> ResponseCache:
        """The response cache owned by this client."""
        return self._cache

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> CuenticaClient:
        self._http()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport and drop every cached response."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._cache.clear()

    # ------------------------------------------------------------------ #
    # Call shapes
    # ------------------------------------------------------------------ #

    async def request(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        *,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make an API request and return the decoded body.  Never cached.

        Args:
            method: ``GET``, ``POST``, ``PUT`` or ``DELETE``.
            path: URL path appended to the API base URL.
            body: JSON-serialisable value or pydantic model.
            query: Query parameters; ``None`` values are dropped.

        Returns:
            The decoded response body (``{}`` for 204 No Content).

        Raises:
            RateLimitError: On 429.
            ApiError: On any other 4xx / 5xx.
            NetworkError: On timeout, transport failure, or invalid JSON.
        """
        options = self._options(method, path, body, query)
        data, _ = await self._make_request(options)
        return data

    async def cached_request(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        *,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        skip_cache: bool = False,
    ) -> CachedResponse:
        """Make an API request, serving GETs from the cache when possible.

        Only ``GET`` requests without ``skip_cache`` are looked up and
        stored; the TTL comes from :meth:`ResponseCache.ttl_for`.  The cache
        keeps its own copy of the data, so callers may mutate what they get.

        Returns:
            A :class:`~cuentica.models.CachedResponse` whose ``cached``
            flag tells whether the network was skipped.
        """
        options = self._options(method, path, body, query, skip_cache)
        key = ResponseCache.key_for(options.path, options.query)

        if options.cacheable:
            hit = self._cache.get(key, _MISSING)
            if hit is not _MISSING:
                self._log("Cache hit", {"path": options.path, "key": key})
                return CachedResponse(data=copy.deepcopy(hit), cached=True)

        data, _ = await self._make_request(options)

        if options.cacheable:
            ttl = self._cache.ttl_for(options.path)
            self._cache.set(key, copy.deepcopy(data), ttl)
            self._log("Cache set", {"path": options.path, "key": key, "ttl": ttl})

        return CachedResponse(data=data, cached=False)

    async def paginated_request(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        *,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        skip_cache: bool = False,
    ) -> PaginatedResponse:
        """Fetch one page of a list endpoint with its pagination info.

        The items and the :class:`~cuentica.models.PaginationInfo` read from
        the response headers are cached together for cacheable requests.
        Non-cacheable requests always go to the network.  As with
        :meth:`cached_request`, the returned page is a copy.
        """
        options = self._options(method, path, body, query, skip_cache)
        key = ResponseCache.key_for(options.path, options.query)

        if options.cacheable:
            hit = self._cache.get(key)
            if isinstance(hit, PaginatedResponse):
                self._log("Cache hit (paginated)", {"path": options.path, "key": key})
                return hit.model_copy(deep=True)

        data, headers = await self._make_request(options)
        page = PaginatedResponse(items=data, pagination=parse_pagination_headers(headers))

        if options.cacheable:
            ttl = self._cache.ttl_for(options.path)
            self._cache.set(key, page.model_copy(deep=True), ttl)
            self._log("Cache set (paginated)", {"path": options.path, "key": key, "ttl": ttl})

        return page

    # ------------------------------------------------------------------ #
    # Cache management
    # ------------------------------------------------------------------ #

    def invalidate_cache(self, prefix: Union[CacheKeyPrefix, str]) -> int:
        """Drop every cached response for a resource.  Returns the count removed."""
        return self._cache.invalidate(prefix)

    def delete_from_cache(self, key: str) -> bool:
        """Drop one cached response by exact key (e.g. ``"customer/42"``)."""
        return self._cache.delete(key)

    def clear_cache(self) -> None:
        """Drop every cached response."""
        self._cache.clear()

    def get_cache_stats(self) -> dict[str, Any]:
        """Return ``{"size": ..., "keys": [...]}`` for live cache entries."""
        return self._cache.stats()

    # ------------------------------------------------------------------ #
    # File transfer
    # ------------------------------------------------------------------ #

    async def download(self, path: str) -> DownloadedFile:
        """Download a binary resource (invoice PDF, attachment).

        The body is returned as raw bytes together with the declared MIME
        type; no JSON decoding happens on success.
        """
        self._log("Downloading file", {"path": path})
        response = await self._send("GET", path, headers=self._auth_headers())

        if not response.is_success:
            self._raise_for_status(response)

        return DownloadedFile(
            content=response.content,
            mime_type=response.headers.get("content-type", "application/octet-stream"),
        )

    async def upload(
        self,
        path: str,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> UploadResult:
        """Upload a file as the ``file`` part of a multipart request.

        Returns:
            The API's acknowledgement, normally just the new ``id``.
        """
        self._log("Uploading file", {"path": path, "filename": filename, "mime_type": mime_type})
        headers = self._auth_headers()
        headers["Accept"] = "application/json"
        response = await self._send(
            "POST", path, headers=headers, files={"file": (filename, content, mime_type)},
        )

        if not response.is_success:
            self._raise_for_status(response)
        if response.status_code == 204:
            return UploadResult()

        try:
            payload = response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON response from {path}", exc) from exc
        return UploadResult(**payload) if isinstance(payload, dict) else UploadResult()

    # ------------------------------------------------------------------ #
    # Request engine
    # ------------------------------------------------------------------ #

    async def _make_request(self, options: RequestOptions) -> tuple[Any, httpx.Headers]:
        """Perform one HTTP exchange and return ``(decoded_body, headers)``."""
        headers = {"Accept": "application/json", **self._auth_headers()}
        content: Optional[str] = None

        # Content-Type on a bodyless request makes the API answer "Invalid Json".
        if options.body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(_encode_body(options.body))

        params = _filter_query(options.query)
        method = options.method.value

        self._log(f"{method} {options.path}", {"has_body": content is not None, "query": params})
        if content is not None and self._config.debug:
            self._log("Request body", options.body)

        response = await self._send(
            method, options.path, headers=headers, params=params or None, content=content,
        )

        if response.status_code == 204:
            return {}, httpx.Headers()

        if not response.is_success:
            self._raise_for_status(response)

        try:
            data = parse_response_body(response)
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON response from {options.path}", exc) from exc

        self._log(f"Response {response.status_code}", {"path": options.path})
        return data, response.headers

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request under the configured timeout, wrapping transport errors."""
        client = self._http()
        try:
            return await asyncio.wait_for(
                client.request(method, path, **kwargs),
                timeout=self._config.timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise NetworkError(NetworkError.TIMEOUT_MESSAGE, exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc) or type(exc).__name__, exc) from exc

    def _raise_for_status(self, response: httpx.Response) -> NoReturn:
        """Raise the typed error for a non-2xx *response*."""
        status = response.status_code
        body = parse_error_body(response)
        self._log(f"Error {status}", body)

        if status == 429:
            raise RateLimitError(
                retry_after=RateLimitError.retry_after_from_header(
                    response.headers.get(HEADER_RETRY_AFTER)
                ),
                details=body,
            )
        raise ApiError.from_response(status, body)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.api_url,
                timeout=self._config.timeout_ms / 1000,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    def _auth_headers(self) -> dict[str, str]:
        return {AUTH_HEADER: self._config.api_token}

    def _options(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        body: Any,
        query: Optional[Mapping[str, Any]],
        skip_cache: bool = False,
    ) -> RequestOptions:
        if not isinstance(method, HTTPMethod):
            method = HTTPMethod(method.upper())
        return RequestOptions(
            method=method,
            path=path,
            body=body,
            query=dict(query) if query is not None else None,
            skip_cache=skip_cache,
        )

    def _log(self, message: str, data: Any = None) -> None:
        if self._config.logger is not None:
            self._config.logger(message, data)
            return
        output = self._output or get_output()
        suffix = f" {data}" if data is not None else ""
        output.debug(f"[CuenticaClient] {message}{suffix}")


def _filter_query(query: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Drop ``None`` values and render the rest as wire strings."""
    if not query:
        return {}
    return {
        name: stringify_query_value(value)
        for name, value in query.items()
        if value is not None
    }


def _encode_body(body: Any) -> Any:
    """Convert *body* to plain JSON values with pydantic's encoders.

    Dates become ISO strings and nested models are dumped; anything pydantic
    cannot encode raises instead of being stringified.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return _JSON_BODY.dump_python(body, mode="json")
