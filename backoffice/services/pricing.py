"""
Pricing arithmetic for quotes, invoices and packages.

All functions are pure. Amounts are floats and are never rounded here;
rounding happens only when a value is formatted for display.
"""
from typing import Iterable, NamedTuple

from backoffice.models.document import LineItem


class DocumentTotals(NamedTuple):
    subtotal: float
    tax_amount: float
    total: float


def line_total(quantity: float, unit_price: float) -> float:
    return quantity * unit_price


def subtotal(line_items: Iterable[LineItem]) -> float:
    """
    Sum the stored ``total`` of each line.

    Totals are not recomputed from quantity and unit price; callers keep
    ``total`` in sync whenever either changes.
    """
    return sum((item.total for item in line_items), 0.0)


def tax_amount(subtotal_amount: float, tax_rate: float) -> float:
    """Flat tax, ``tax_rate`` given as a percentage (6 means 6%)"""
    return subtotal_amount * (tax_rate / 100)


def total(subtotal_amount: float, tax: float) -> float:
    return subtotal_amount + tax


def document_totals(line_items: Iterable[LineItem], tax_rate: float) -> DocumentTotals:
    """Subtotal, tax and grand total for a set of line items"""
    sub = subtotal(line_items)
    tax = tax_amount(sub, tax_rate)
    return DocumentTotals(subtotal=sub, tax_amount=tax, total=total(sub, tax))
