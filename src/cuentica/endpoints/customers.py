"""Customer (cliente) operations."""

from __future__ import annotations

from typing import Any, Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, match_tax_id
from cuentica.models import PaginatedResponse


class CustomerEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.CUSTOMER

    async def list(
        self,
        q: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        return await self._list({"q": q, "page": page, "page_size": page_size})

    async def search_by_cif(self, cif: str) -> Optional[Any]:
        """Find a customer by CIF/NIF, or ``None`` when nothing matches."""
        result = await self.list(q=cif)
        return match_tax_id(result.items, cif)
