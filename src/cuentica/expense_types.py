"""Expense type codes accepted by ``/expense`` lines.

The published chart of accounts lists generic codes (``628``, ``629``), but
the API rejects those and wants the specific sub-account (``6280006``,
``6290001``...).  The set below was collected from the API's own validation
errors.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

EXPENSE_TYPES: dict[str, str] = {
    # Compras
    "600": "Compras de productos para vender",
    "601": "Compras de materias primas",
    "602": "Compras de otros aprovisionamientos",
    "607": "Trabajos realizados por otras empresas",
    # Alquileres
    "6210001": "Alquileres de locales",
    "6210002": "Alquileres de equipos",
    "6210003": "Otros alquileres",
    "622": "Reparaciones y conservación",
    # Servicios profesionales
    "6230001": "Asesoría fiscal y contable",
    "6230002": "Asesoría laboral",
    "6230005": "Otros servicios profesionales",
    "624": "Transportes",
    "625": "Primas de seguros",
    "626": "Servicios bancarios y similares",
    "627": "Publicidad, propaganda y relaciones públicas",
    # Suministros
    "6280003": "Combustible",
    "6280004": "Electricidad",
    "6280005": "Agua",
    "6280006": "Teléfono y comunicaciones",
    "6280007": "Otros suministros",
    # Otros servicios
    "6290001": "Material de oficina",
    "6290002": "Restauración y hostelería",
    "6290003": "Viajes y desplazamientos",
    "6290004": "Hosting y servicios web",
    "6290005": "Formación y cursos",
    "6290006": "Otros servicios externos",
    # Impuestos
    "6310001": "Impuestos municipales (IBI, tasas...)",
    "6310002": "Impuestos autonómicos",
    # Sueldos y seguridad social
    "6400000": "Sueldos de socios/administradores",
    "6400001": "Sueldos de empleados",
    "6420000": "Seguridad social autónomos (RETA)",
    "6420001": "Seguridad social régimen general",
    "678": "Gastos extraordinarios",
    "680": "Amortización del inmovilizado intangible",
    "681": "Amortización del inmovilizado material",
    "699": "Otros gastos financieros",
}
"""Spanish description per code, as shown in the Cuentica web app."""

EXPENSE_TYPE_CODES = frozenset(EXPENSE_TYPES) | {
    # Accepted by the API but without a description of their own.
    "475",
    "4720099",
    "520",
    "545",
    "662",
    "669",
}


class ExpenseCategory(NamedTuple):
    name: str
    codes: tuple[str, ...]


EXPENSE_CATEGORIES: dict[str, ExpenseCategory] = {
    "purchases": ExpenseCategory("Compras", ("600", "601", "602", "607")),
    "rentals": ExpenseCategory("Alquileres", ("6210001", "6210002", "6210003")),
    "repairs": ExpenseCategory("Reparaciones", ("622",)),
    "professional_services": ExpenseCategory(
        "Servicios profesionales", ("6230001", "6230002", "6230005")
    ),
    "transport": ExpenseCategory("Transportes", ("624",)),
    "insurance": ExpenseCategory("Seguros", ("625",)),
    "banking": ExpenseCategory("Servicios bancarios", ("626",)),
    "advertising": ExpenseCategory("Publicidad", ("627",)),
    "utilities": ExpenseCategory(
        "Suministros", ("6280003", "6280004", "6280005", "6280006", "6280007")
    ),
    "other_services": ExpenseCategory(
        "Otros servicios",
        ("6290001", "6290002", "6290003", "6290004", "6290005", "6290006"),
    ),
    "taxes": ExpenseCategory("Impuestos", ("6310001", "6310002")),
    "payroll": ExpenseCategory("Nóminas", ("6400000", "6400001", "6420000", "6420001")),
}
"""Codes grouped the way the web app groups them for selection."""


def is_valid_expense_type(code: str) -> bool:
    """Return whether the API accepts *code* as an ``expense_type``."""
    return code in EXPENSE_TYPE_CODES


def get_expense_type_description(code: str) -> Optional[str]:
    """Return the description of *code*, or ``None`` if it has none.

    >>> get_expense_type_description("6280006")
    'Teléfono y comunicaciones'
    >>> get_expense_type_description("475") is None
    True
    """
    return EXPENSE_TYPES.get(code)
