"""High-level entry point grouping every resource endpoint behind one object.

Example::

    async with CuenticaAPI.from_env() as api:
        company = await api.company.get()
        page = await api.invoices.list(date_from="2024-01-01", page_size=50)
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from cuentica.client import CuenticaClient
from cuentica.endpoints import (
    AccountEndpoint,
    CompanyEndpoint,
    CustomerEndpoint,
    DocumentEndpoint,
    ExpenseEndpoint,
    IncomeEndpoint,
    InvoiceEndpoint,
    ProviderEndpoint,
    TagEndpoint,
    TransferEndpoint,
)
from cuentica.models import ClientConfig
from cuentica.output import OutputManager


class CuenticaAPI:
    """One :class:`CuenticaClient` shared by all resource endpoints.

    Args:
        config: Client settings, or ``None`` to build them from ``**options``.
        client: An already configured client to share instead of building one.
        output: Diagnostics sink forwarded to the client.
        transport: Custom :mod:`httpx` transport forwarded to the client.
        **options: :class:`~cuentica.models.ClientConfig` fields, applied over
            *config* when both are given.

    Raises:
        ConfigError: If no API token is configured.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        client: Optional[CuenticaClient] = None,
        output: Optional[OutputManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ) -> None:
        if client is None:
            client = CuenticaClient(config, output=output, transport=transport, **options)
        self.client = client
        self.providers = ProviderEndpoint(client)
        self.expenses = ExpenseEndpoint(client)
        self.customers = CustomerEndpoint(client)
        self.invoices = InvoiceEndpoint(client)
        self.accounts = AccountEndpoint(client)
        self.company = CompanyEndpoint(client)
        self.incomes = IncomeEndpoint(client)
        self.documents = DocumentEndpoint(client)
        self.tags = TagEndpoint(client)
        self.transfers = TransferEndpoint(client)

    @classmethod
    def from_env(
        cls,
        *,
        output: Optional[OutputManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ) -> CuenticaAPI:
        """Build the API from ``CUENTICA_*`` environment variables.

        Explicit *overrides* win over the environment.

        Raises:
            ConfigError: If ``CUENTICA_API_TOKEN`` is not set and no token
                was passed.
        """
        return cls(client=CuenticaClient.from_env(output=output, transport=transport, **overrides))

    async def __aenter__(self) -> CuenticaAPI:
        await self.client.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client and drop its cache."""
        await self.client.aclose()


def create_cuentica_api(**overrides: Any) -> CuenticaAPI:
    """Shorthand for :meth:`CuenticaAPI.from_env`."""
    return CuenticaAPI.from_env(**overrides)
