"""Company profile of the authenticated account."""

from __future__ import annotations

from typing import Any

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import ResourceEndpoint


class CompanyEndpoint(ResourceEndpoint):
    prefix = CacheKeyPrefix.COMPANY

    async def get(self) -> Any:
        """Fetch the company profile.  Cached with the static TTL."""
        result = await self._client.cached_request("GET", self.path)
        return result.data
