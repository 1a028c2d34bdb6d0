"""cuentica -- Async Python client for the Cuentica accounting API.

The client issues authenticated HTTP calls, caches GET responses in memory
with per-resource TTLs, and turns every failure into one of a small set of
typed exceptions.  Resource endpoints (customers, invoices, expenses, ...)
sit on top of three call shapes: plain, cache-aware, and paginated.

Typical usage::

    from cuentica import CuenticaAPI

    async with CuenticaAPI.from_env() as api:
        page = await api.customers.list(q="acme")
        for customer in page.items:
            ...

Modules:
    api: :class:`CuenticaAPI`, the endpoint aggregate.
    client: :class:`CuenticaClient`, the request engine and call shapes.
    cache: In-memory TTL cache with prefix invalidation.
    config: Environment-aware configuration resolution.
    exceptions: Exception hierarchy rooted at :class:`CuenticaError`.
    expense_types: Expense type codes the API accepts, with descriptions.
    models: Pydantic models shared across the package.
    output: Diagnostics written to stderr with Rich.
    payloads: Validated bodies for provider and expense creation.
"""

from cuentica.api import CuenticaAPI, create_cuentica_api
from cuentica.cache import ResponseCache
from cuentica.client import CuenticaClient
from cuentica.config import resolve_config
from cuentica.constants import (
    COMPANY_CIF_PREFIXES,
    INDIVIDUAL_NIF_PREFIXES,
    RATE_LIMITS,
    CacheKeyPrefix,
    CacheTTL,
)
from cuentica.exceptions import (
    ApiError,
    ConfigError,
    CuenticaError,
    NetworkError,
    RateLimitError,
)
from cuentica.expense_types import (
    EXPENSE_CATEGORIES,
    EXPENSE_TYPE_CODES,
    EXPENSE_TYPES,
    get_expense_type_description,
    is_valid_expense_type,
)
from cuentica.models import (
    CacheConfig,
    CachedResponse,
    ClientConfig,
    DownloadedFile,
    PaginatedResponse,
    PaginationInfo,
    UploadResult,
)
from cuentica.payloads import ExpenseCreate, ExpenseLine, ExpensePayment, ProviderCreate

__version__ = "0.1.0"

__all__ = [
    "COMPANY_CIF_PREFIXES",
    "EXPENSE_CATEGORIES",
    "EXPENSE_TYPES",
    "EXPENSE_TYPE_CODES",
    "INDIVIDUAL_NIF_PREFIXES",
    "RATE_LIMITS",
    "ApiError",
    "CacheConfig",
    "CacheKeyPrefix",
    "CacheTTL",
    "CachedResponse",
    "ClientConfig",
    "ConfigError",
    "CuenticaAPI",
    "CuenticaClient",
    "CuenticaError",
    "DownloadedFile",
    "ExpenseCreate",
    "ExpenseLine",
    "ExpensePayment",
    "NetworkError",
    "PaginatedResponse",
    "PaginationInfo",
    "ProviderCreate",
    "RateLimitError",
    "ResponseCache",
    "UploadResult",
    "create_cuentica_api",
    "get_expense_type_description",
    "is_valid_expense_type",
    "resolve_config",
]
