"""Shared plumbing for resource endpoints.

Every resource maps to one singular path segment (``/customer``,
``/invoice``, ...) which is also its :class:`~cuentica.constants.CacheKeyPrefix`.
:class:`ResourceEndpoint` builds paths from that segment, and
:class:`CrudEndpoint` adds the get/create/update/delete operations most
resources share.  After every successful write the endpoint drops its
cached lists and, for single-entity writes, the entity's own entry; the
client never does this on its own.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Union

from cuentica.client import CuenticaClient
from cuentica.constants import CacheKeyPrefix
from cuentica.models import PaginatedResponse

EntityId = Union[int, str]


class ResourceEndpoint:
    """Base class binding a resource prefix to a :class:`CuenticaClient`."""

    prefix: ClassVar[CacheKeyPrefix]

    def __init__(self, client: CuenticaClient) -> None:
        self._client = client

    @property
    def path(self) -> str:
        """Collection path, e.g. ``/customer``."""
        return f"/{self.prefix.value}"

    def _item_path(self, entity_id: EntityId, *suffix: str) -> str:
        return "/".join([self.path, str(entity_id), *suffix])

    async def _list(self, query: dict[str, Any]) -> PaginatedResponse:
        return await self._client.paginated_request("GET", self.path, query=query)

    def _forget(self, entity_id: Optional[EntityId] = None) -> None:
        """Drop cached lists for this resource and, optionally, one entity."""
        self._client.invalidate_cache(self.prefix)
        if entity_id is not None:
            self._client.delete_from_cache(f"{self.prefix.value}/{entity_id}")


class CrudEndpoint(ResourceEndpoint):
    """Resource supporting get, create, update and delete by id."""

    async def get(self, entity_id: EntityId) -> Any:
        """Fetch one entity, served from the cache when fresh."""
        result = await self._client.cached_request("GET", self._item_path(entity_id))
        return result.data

    async def create(self, data: Any) -> Any:
        """Create an entity and return it as the API echoes it back."""
        result = await self._client.request("POST", self.path, body=data)
        self._forget()
        return result

    async def update(self, entity_id: EntityId, data: Any) -> Any:
        """Update an entity (partial payloads are accepted by the API)."""
        result = await self._client.request("PUT", self._item_path(entity_id), body=data)
        self._forget(entity_id)
        return result

    async def delete(self, entity_id: EntityId) -> None:
        await self._client.request("DELETE", self._item_path(entity_id))
        self._forget(entity_id)


def match_tax_id(items: Any, tax_id: str) -> Optional[Any]:
    """Pick the entry whose ``cif`` equals *tax_id*, else the first one.

    The API's ``q`` filter is a fuzzy search, so an exact CIF match is
    preferred when the result holds several entries.
    """
    if not isinstance(items, list) or not items:
        return None
    wanted = tax_id.upper()
    for item in items:
        if isinstance(item, dict) and str(item.get("cif") or "").upper() == wanted:
            return item
    return items[0]
