"""Fixed values of the Cuentica API and of this client.

Groups the constants that describe the external API (default host, auth
and pagination headers, quotas, the tax and payment vocabulary it accepts)
with the cache defaults of this client.  Values documented here were
confirmed against the live API, which does not always agree with its own
documentation.
"""

from __future__ import annotations

import enum

DEFAULT_API_URL = "https://api.cuentica.com"
"""Production host used when no ``api_url`` override is configured."""

DEFAULT_TIMEOUT_MS = 30_000
"""Upper bound for a whole HTTP exchange, in milliseconds."""

AUTH_HEADER = "X-AUTH-TOKEN"


class CacheTTL:
    """Default time-to-live values for cached responses, in milliseconds."""

    LIST = 5 * 60 * 1000
    """Transactional list and entity reads (5 minutes)."""

    STATIC = 10 * 60 * 1000
    """Company and tag data, which rarely change (10 minutes)."""


class CacheKeyPrefix(str, enum.Enum):
    """Resource prefixes accepted by cache invalidation.

    Each value is the *singular* path segment the API uses.  Cache keys are
    derived from request paths, so invalidating with a plural or decorated
    name (``customers``, ``/customer``) silently matches nothing.
    """

    CUSTOMER = "customer"
    INVOICE = "invoice"
    EXPENSE = "expense"
    PROVIDER = "provider"
    ACCOUNT = "account"
    INCOME = "income"
    DOCUMENT = "document"
    TAG = "tag"
    TRANSFER = "transfer"
    COMPANY = "company"


STATIC_PATH_SEGMENTS = frozenset({CacheKeyPrefix.COMPANY.value, CacheKeyPrefix.TAG.value})
"""Path segments whose responses get the static TTL."""


# --- Pagination headers ---

HEADER_PAGE = "X-Page"
HEADER_TOTAL_PAGES = "X-Total-Pages"
HEADER_TOTAL_COUNT = "X-Total-Count"
HEADER_PER_PAGE = "X-Per-Page"
HEADER_RETRY_AFTER = "Retry-After"

DEFAULT_CURRENT_PAGE = 1
DEFAULT_TOTAL_PAGES = 1
DEFAULT_TOTAL_ITEMS = 0
DEFAULT_ITEMS_PER_PAGE = 25


# --- Tax identifiers ---

COMPANY_CIF_PREFIXES = frozenset("ABCDEFGHJNPQRSUVW")
"""First letters of a Spanish CIF that identify a legal entity."""

INDIVIDUAL_NIF_PREFIXES = frozenset("XYZ")
"""First letters of a foreigner's NIE.  A Spanish DNI starts with a digit."""


# --- Accounting vocabulary ---

VAT_RATES = (0, 4, 10, 12, 21)
"""IVA percentages accepted on expense and invoice lines."""

PAYMENT_METHODS = (
    "cash",
    "wire_transfer",
    "direct_debit",
    "check",
    "credit_card",
    "promissory_note",
    "other",
)

DOCUMENT_TYPES = ("invoice", "ticket")
"""Kinds of supporting document an expense can be recorded against."""

INVOICE_STATUSES = ("draft", "sent", "paid", "overdue", "cancelled")

RATE_LIMITS = {"requests_per_five_minutes": 600, "requests_per_day": 7200}
"""Published request quotas per token. Exceeding them yields HTTP 429."""
