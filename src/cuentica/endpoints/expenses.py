"""Expense (gasto) operations and their file attachments."""

from __future__ import annotations

from typing import Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, EntityId
from cuentica.models import DownloadedFile, PaginatedResponse, UploadResult


class ExpenseEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.EXPENSE

    async def list(
        self,
        provider_id: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        """List expenses.

        Unlike the other dated resources, ``/expense`` takes ``date_from``
        and ``date_to`` under those names.
        """
        return await self._list(
            {
                "provider_id": provider_id,
                "date_from": date_from,
                "date_to": date_to,
                "page": page,
                "page_size": page_size,
            }
        )

    async def attach_file(
        self,
        expense_id: EntityId,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> UploadResult:
        result = await self._client.upload(
            self._item_path(expense_id, "attachment"), content, filename, mime_type,
        )
        self._forget(expense_id)
        return result

    async def get_attachment(self, expense_id: EntityId) -> DownloadedFile:
        return await self._client.download(self._item_path(expense_id, "attachment"))
