"""Provider (proveedor) operations.

The API requires both ``nombre`` and ``business_name`` as well as an
undocumented ``business_type`` when creating a provider.
"""

from __future__ import annotations

from typing import Any, Optional

from cuentica.constants import COMPANY_CIF_PREFIXES, CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, match_tax_id
from cuentica.models import PaginatedResponse
from cuentica.payloads import ProviderCreate


def infer_business_type(tax_id: str) -> str:
    """Return ``"company"`` for a CIF of a legal entity, else ``"individual"``.

    >>> infer_business_type("B12345678")
    'company'
    >>> infer_business_type("12345678Z")
    'individual'
    """
    if tax_id[:1].upper() in COMPANY_CIF_PREFIXES:
        return "company"
    return "individual"


class ProviderEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.PROVIDER

    async def list(
        self,
        q: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        """List providers, optionally filtered by a free-text query."""
        return await self._list({"q": q, "page": page, "page_size": page_size})

    async def search_by_cif(self, cif: str) -> Optional[Any]:
        """Find a provider by CIF/NIF, or ``None`` when nothing matches."""
        result = await self.list(q=cif)
        return match_tax_id(result.items, cif)

    async def find_or_create(self, tax_id: str, business_name: str) -> Any:
        """Return the provider with *tax_id*, creating it when missing.

        Only the fields the API accepts on creation are sent: ``cif``
        (upper-cased), ``nombre`` and ``business_name`` (both the given
        name), the inferred ``business_type`` and ``pais="ES"``.
        """
        existing = await self.search_by_cif(tax_id)
        if existing is not None:
            return existing

        return await self.create(
            ProviderCreate(
                cif=tax_id.upper(),
                nombre=business_name,
                business_name=business_name,
                business_type=infer_business_type(tax_id),
            )
        )
