"""Resource endpoints built on the client's call shapes.

Each endpoint maps method calls to literal paths and query parameter names
and declares which cached entries its writes invalidate.
"""

from cuentica.endpoints.accounts import AccountEndpoint
from cuentica.endpoints.base import CrudEndpoint, ResourceEndpoint
from cuentica.endpoints.company import CompanyEndpoint
from cuentica.endpoints.customers import CustomerEndpoint
from cuentica.endpoints.documents import DocumentEndpoint
from cuentica.endpoints.expenses import ExpenseEndpoint
from cuentica.endpoints.incomes import IncomeEndpoint
from cuentica.endpoints.invoices import InvoiceEndpoint
from cuentica.endpoints.providers import ProviderEndpoint, infer_business_type
from cuentica.endpoints.tags import TagEndpoint
from cuentica.endpoints.transfers import TransferEndpoint

__all__ = [
    "AccountEndpoint",
    "CompanyEndpoint",
    "CrudEndpoint",
    "CustomerEndpoint",
    "DocumentEndpoint",
    "ExpenseEndpoint",
    "IncomeEndpoint",
    "InvoiceEndpoint",
    "ProviderEndpoint",
    "ResourceEndpoint",
    "TagEndpoint",
    "TransferEndpoint",
    "infer_business_type",
]
