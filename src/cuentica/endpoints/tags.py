"""Tag operations.  Tags are read-only through the API."""

from __future__ import annotations

from typing import Any, Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import ResourceEndpoint
from cuentica.models import PaginatedResponse

ALL_TAGS_PAGE_SIZE = 300


class TagEndpoint(ResourceEndpoint):
    prefix = CacheKeyPrefix.TAG

    async def list(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        return await self._list({"page": page, "page_size": page_size})

    async def get_all(self) -> Any:
        """Return every tag in a single oversized page."""
        result = await self.list(page_size=ALL_TAGS_PAGE_SIZE)
        return result.items
