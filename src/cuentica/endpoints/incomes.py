"""Income (ingreso) operations, attachments and charges."""

from __future__ import annotations

from typing import Any, Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, EntityId
from cuentica.models import DownloadedFile, PaginatedResponse, UploadResult


class IncomeEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.INCOME

    async def list(
        self,
        customer_id: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        order_field: Optional[str] = None,
        order_direction: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        # /income expects initial_date/end_date
        return await self._list(
            {
                "customer_id": customer_id,
                "initial_date": date_from,
                "end_date": date_to,
                "order_field": order_field,
                "order_direction": order_direction,
                "page": page,
                "page_size": page_size,
            }
        )

    async def get_attachment(self, income_id: EntityId) -> DownloadedFile:
        return await self._client.download(self._item_path(income_id, "attachment"))

    async def attach_file(
        self,
        income_id: EntityId,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> UploadResult:
        result = await self._client.upload(
            self._item_path(income_id, "attachment"), content, filename, mime_type,
        )
        self._forget(income_id)
        return result

    async def delete_attachment(self, income_id: EntityId) -> None:
        await self._client.request("DELETE", self._item_path(income_id, "attachment"))
        self._forget(income_id)

    async def update_charges(self, income_id: EntityId, data: Any) -> Any:
        """Replace the payment records (charges) of an income."""
        result = await self._client.request(
            "PUT", self._item_path(income_id, "charges"), body=data,
        )
        self._forget(income_id)
        return result
