"""In-memory response caching for cuentica.

This package provides :class:`ResponseCache`, the TTL cache that backs the
cache-aware call shapes of :class:`~cuentica.client.CuenticaClient`.
Entries are keyed by request path and sorted query parameters, expire per
entry, and can be dropped in bulk by resource prefix (see
:class:`~cuentica.constants.CacheKeyPrefix`).

Each client owns its own cache, configured by the ``cache`` section of
:class:`~cuentica.models.ClientConfig`.
"""

from cuentica.cache.cache import CacheEntry, ResponseCache

__all__ = ["CacheEntry", "ResponseCache"]
