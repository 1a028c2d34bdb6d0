"""Invoice (factura) operations, including PDF download and Verifactu voiding."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from cuentica.constants import INVOICE_STATUSES, CacheKeyPrefix
from cuentica.endpoints.base import CrudEndpoint, EntityId
from cuentica.models import DownloadedFile, PaginatedResponse


class InvoiceEndpoint(CrudEndpoint):
    prefix = CacheKeyPrefix.INVOICE

    async def list(
        self,
        customer_id: Optional[int] = None,
        status: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        serie: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        order_field: Optional[str] = None,
        order_direction: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        """List invoices.

        Dates are ``YYYY-MM-DD`` strings and are sent as
        ``initial_date``/``end_date``.  *tags* are sent comma-joined.

        Raises:
            ValueError: If *status* is not one of
                :data:`~cuentica.constants.INVOICE_STATUSES`.
        """
        if status is not None and status not in INVOICE_STATUSES:
            raise ValueError(f"Unknown invoice status: {status!r}")
        return await self._list(
            {
                "customer_id": customer_id,
                "status": status,
                "initial_date": date_from,
                "end_date": date_to,
                "serie": serie,
                "tags": ",".join(tags) if tags else None,
                "order_field": order_field,
                "order_direction": order_direction,
                "page": page,
                "page_size": page_size,
            }
        )

    async def download_pdf(self, invoice_id: EntityId) -> DownloadedFile:
        return await self._client.download(self._item_path(invoice_id, "pdf"))

    async def send_by_email(self, invoice_id: EntityId, email: Optional[str] = None) -> None:
        """Email the invoice, to *email* or to the customer's address on file."""
        await self._client.request(
            "POST",
            self._item_path(invoice_id, "email"),
            body={"email": email} if email else None,
        )

    async def void(self, invoice_id: EntityId) -> Any:
        """Void an invoice already registered with Verifactu."""
        result = await self._client.request("POST", self._item_path(invoice_id, "void"))
        self._forget(invoice_id)
        return result

    async def get_public_link(self, invoice_id: EntityId) -> Any:
        """Return the unauthenticated public URL of an invoice."""
        return await self._client.request("GET", self._item_path(invoice_id, "public"))

    async def update_charges(self, invoice_id: EntityId, data: Any) -> Any:
        """Replace the payment records (charges) of an invoice."""
        result = await self._client.request(
            "PUT", self._item_path(invoice_id, "charges"), body=data,
        )
        self._forget(invoice_id)
        return result
