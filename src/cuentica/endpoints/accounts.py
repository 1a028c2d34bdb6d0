"""Bank and cash account operations."""

from __future__ import annotations

from typing import Any, Optional

from cuentica.constants import CacheKeyPrefix
from cuentica.endpoints.base import EntityId, ResourceEndpoint
from cuentica.models import PaginatedResponse


class AccountEndpoint(ResourceEndpoint):
    prefix = CacheKeyPrefix.ACCOUNT

    async def list(
        self,
        active: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedResponse:
        return await self._list({"active": active, "page": page, "page_size": page_size})

    async def get(self, account_id: EntityId) -> Any:
        result = await self._client.cached_request("GET", self._item_path(account_id))
        return result.data

    async def get_default(self) -> Any:
        """Return the account flagged ``is_default``, else the first one.

        Raises:
            LookupError: If the company has no accounts at all.
        """
        result = await self.list()
        accounts = result.items if isinstance(result.items, list) else []

        for account in accounts:
            if isinstance(account, dict) and account.get("is_default"):
                return account
        if accounts:
            return accounts[0]
        raise LookupError("No payment accounts found")
