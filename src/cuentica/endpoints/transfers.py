"""Transfer operations: money moved between the company's own accounts."""

from __future__ import annotations

from typing import Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint
from cuentica.models import PaginatedResponse


class TransferEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.TRANSFER

    async def list(
        self,
        origin_account: Optional[int] = None,
        destination_account: Optional[int] = None,
        payment_method: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        return await self._list(
            {
                "origin_account": origin_account,
                "destination_account": destination_account,
                "payment_method": payment_method,
                "initial_date": date_from,
                "end_date": date_to,
                "page": page,
                "page_size": page_size,
            }
        )
