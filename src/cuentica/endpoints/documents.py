"""Document operations: uploaded receipts and files awaiting assignment."""

from __future__ import annotations

from typing import Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, EntityId
from cuentica.models import DownloadedFile, PaginatedResponse


class DocumentEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.DOCUMENT

    async def list(
        self,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        extension: Optional[str] = None,
        assignment: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        """List documents, filtered by date, file extension or assignment state."""
        return await self._list(
            {
                "initial_date": date_from,
                "end_date": date_to,
                "extension": extension,
                "assignment": assignment,
                "page": page,
                "page_size": page_size,
            }
        )

    async def get_attachment(self, document_id: EntityId) -> DownloadedFile:
        return await self._client.download(self._item_path(document_id, "attachment"))
