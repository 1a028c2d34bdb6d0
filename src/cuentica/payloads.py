"""Typed request bodies for the create calls the API is strict about.

Most resources accept their body as a plain ``dict``.  Providers and
expenses have required fields the published docs leave out, and expense
lines take a VAT *percentage* and a specific expense code, so malformed
bodies are caught here before a request is sent.  Any endpoint ``create``
or ``update`` accepts these models in place of a dict; they are serialized
with ``model_dump(mode="json", exclude_none=True)``.

Example::

    expense = ExpenseCreate(
        date="2024-03-01",
        document_type="invoice",
        provider=42,
        expense_lines=[
            ExpenseLine(description="Hosting", base=100, tax=21, expense_type="6290004"),
        ],
        payments=[ExpensePayment(date="2024-03-01", amount=121, payment_method="credit_card")],
    )
    await api.expenses.create(expense)
"""

from __future__ import annotations

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from cuentica.constants import DOCUMENT_TYPES, PAYMENT_METHODS, VAT_RATES
from cuentica.expense_types import is_valid_expense_type


def _one_of(value: str, allowed: tuple[str, ...], what: str) -> str:
    if value not in allowed:
        raise ValueError(f"{what} must be one of {', '.join(allowed)}")
    return value


# --- Providers ---


class ProviderCreate(BaseModel):
    """Body of ``POST /provider``.

    ``nombre`` and ``business_name`` are both required by the API and
    usually carry the same name.
    """

    cif: str = Field(description="CIF/NIF/NIE, upper-cased by the API")
    nombre: str
    business_name: str
    business_type: Literal["company", "individual"]
    pais: str = Field(default="ES", description="ISO country code")
    address: Optional[str] = None
    town: Optional[str] = None
    postal_code: Optional[str] = None
    region: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    web: Optional[str] = None
    notes: Optional[str] = None


# --- Expenses ---


class ExpenseLine(BaseModel):
    """One line of an expense."""

    description: str
    base: float = Field(description="Taxable base amount")
    tax: int = Field(description="VAT percentage, not the tax amount")
    retention: float = Field(default=0, ge=0, description="IRPF retention percentage")
    imputation: float = Field(
        default=100, ge=0, le=100, description="Share attributed to the business, in percent"
    )
    expense_type: str = Field(description="Specific expense code such as 6290006")

    @field_validator("tax")
    @classmethod
    def validate_tax(cls, v: int) -> int:
        if v not in VAT_RATES:
            raise ValueError(f"tax must be a VAT rate in {VAT_RATES}")
        return v

    @field_validator("expense_type")
    @classmethod
    def validate_expense_type(cls, v: str) -> str:
        if not is_valid_expense_type(v):
            raise ValueError(f"unknown expense type code {v!r}")
        return v


class ExpensePayment(BaseModel):
    """A payment settling (part of) an expense."""

    date: datetime.date
    amount: float
    payment_method: str
    origin_account: Optional[int] = Field(default=None, description="Paying account id")
    paid: bool = True

    @field_validator("payment_method")
    @classmethod
    def validate_payment_method(cls, v: str) -> str:
        return _one_of(v, PAYMENT_METHODS, "payment_method")


class ExpenseCreate(BaseModel):
    """Body of ``POST /expense``.

    ``document_type`` and ``draft`` are required by the API even though its
    documentation omits them.
    """

    date: datetime.date
    document_type: str
    provider: int = Field(description="Provider id")
    draft: bool = False
    document_number: Optional[str] = None
    annotations: Optional[str] = None
    tags: Optional[list[str]] = None
    cash_criteria: Optional[bool] = None
    vat_eu: Optional[bool] = None
    expense_lines: list[ExpenseLine] = Field(min_length=1)
    payments: list[ExpensePayment] = Field(default_factory=list)

    @field_validator("document_type")
    @classmethod
    def validate_document_type(cls, v: str) -> str:
        return _one_of(v, DOCUMENT_TYPES, "document_type")
