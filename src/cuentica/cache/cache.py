"""In-memory response cache with per-entry TTL and prefix invalidation.

Entries live in a plain ``dict`` owned by a single
:class:`~cuentica.client.CuenticaClient`; nothing is shared between client
instances and nothing outlives the process.  Expiry is lazy: :meth:`get`
drops the one entry it found stale, and :meth:`stats` sweeps everything.

Cache keys are derived from the request path and query parameters so that
logically identical requests resolve to the same entry regardless of
parameter ordering::

    ResponseCache.key_for("/customer", {"page": 1, "q": "acme"})
    # -> "customer?page=1&q=acme"

See Also:
    :class:`~cuentica.models.CacheConfig` -- ``enabled`` flag and the two
    TTLs (``list_ttl_ms``, ``static_ttl_ms``).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from cuentica.constants import STATIC_PATH_SEGMENTS, CacheKeyPrefix
from cuentica.models import CacheConfig

_MISSING = object()


@dataclass(frozen=True)
class CacheEntry:
    """A stored value, when it was stored (ms) and how long it stays fresh (ms)."""

    value: Any
    stored_at: float
    ttl_ms: int

    def is_expired(self, now_ms: float) -> bool:
        return now_ms - self.stored_at > self.ttl_ms


def stringify_query_value(value: Any) -> str:
    """Render a query value the way it is sent on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ResponseCache:
    """Process-memory cache for decoded API responses.

    None of the methods raise: the cache is best-effort and must never
    break a request.

    Args:
        config: Cache configuration.  Defaults to :class:`CacheConfig()`.
        clock: Callable returning the current time in seconds.  Defaults to
            :func:`time.monotonic`; tests pass a fake clock.

    Example::

        cache = ResponseCache(CacheConfig(list_ttl_ms=60_000))
        cache.set("customer/1", {"id": 1})
        cache.get("customer/1")          # {"id": 1}
        cache.invalidate("customer")     # 1
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or CacheConfig()
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @property
    def enabled(self) -> bool:
        """Whether caching is enabled."""
        return self._config.enabled

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------ #
    # Key/value operations
    # ------------------------------------------------------------------ #

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default*.

        A stale entry is deleted and reported as missing.  A disabled cache
        always returns *default*.
        """
        if not self._config.enabled:
            return default

        entry = self._entries.get(key)
        if entry is None:
            return default

        if entry.is_expired(self._now_ms()):
            del self._entries[key]
            return default

        return entry.value

    def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        """Store *value* under *key*, replacing any previous entry.

        Args:
            key: Cache key, normally from :meth:`key_for`.
            value: Decoded response to store.
            ttl_ms: Time-to-live in milliseconds.  Defaults to the list TTL.
        """
        if not self._config.enabled:
            return

        effective_ttl = self._config.list_ttl_ms if ttl_ms is None else ttl_ms
        self._entries[key] = CacheEntry(
            value=value, stored_at=self._now_ms(), ttl_ms=effective_ttl,
        )

    def has(self, key: str) -> bool:
        """Return ``True`` if *key* holds a fresh entry."""
        return self.get(key, _MISSING) is not _MISSING

    def delete(self, key: str) -> bool:
        """Remove the entry stored under exactly *key*.

        Returns:
            ``True`` if an entry existed.
        """
        return self._entries.pop(key, _MISSING) is not _MISSING

    def invalidate(self, prefix: Union[CacheKeyPrefix, str]) -> int:
        """Remove every entry whose key starts with *prefix*.

        Args:
            prefix: A :class:`~cuentica.constants.CacheKeyPrefix` (or its
                string value).  Must be the singular resource segment.

        Returns:
            Number of entries removed.
        """
        pattern = prefix.value if isinstance(prefix, CacheKeyPrefix) else prefix
        matched = [key for key in self._entries if key.startswith(pattern)]
        for key in matched:
            del self._entries[key]
        return len(matched)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def stats(self) -> dict[str, Any]:
        """Sweep expired entries, then report what is left.

        Returns:
            A ``dict`` with ``size`` (live entry count) and ``keys`` (the live
            keys in insertion order).
        """
        self._clean_expired()
        return {
            "size": len(self._entries),
            "keys": list(self._entries),
        }

    # ------------------------------------------------------------------ #
    # Policy
    # ------------------------------------------------------------------ #

    @staticmethod
    def key_for(path: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Build the cache key for a request.

        The leading slash of *path* is removed.  Query entries whose value is
        ``None`` are dropped, the rest are sorted by name and appended as
        ``?k=v&k=v``.
        """
        base = path[1:] if path.startswith("/") else path
        if not query:
            return base

        params = "&".join(
            f"{name}={stringify_query_value(query[name])}"
            for name in sorted(query)
            if query[name] is not None
        )
        return f"{base}?{params}" if params else base

    def ttl_for(self, path: str) -> int:
        """Return the TTL (ms) to use for responses from *path*.

        Company and tag data change far less often than transactional lists,
        so any path with a ``company`` or ``tag`` segment gets the static TTL.
        """
        segments = path.split("?", 1)[0].split("/")
        if any(segment in STATIC_PATH_SEGMENTS for segment in segments):
            return self._config.static_ttl_ms
        return self._config.list_ttl_ms

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def _clean_expired(self) -> None:
        now = self._now_ms()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
