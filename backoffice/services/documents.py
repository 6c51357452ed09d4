"""
Quote and invoice lifecycle: numbering, totals and conversion.

Every function returns a new record and leaves its input untouched. Statuses
can be set to any value here; see ``backoffice.services.status`` for the
optional transition table.
"""
from datetime import date, timedelta
from typing import Iterable, Optional, TypeVar, Union

from backoffice.config import Settings, get_settings
from backoffice.models.document import Invoice, InvoiceStatus, LineItem, PaymentMethod, Quote, QuoteStatus
from backoffice.services import numbering
from backoffice.services.pricing import document_totals, line_total
from backoffice.utils.helpers import today

Document = TypeVar("Document", Quote, Invoice)


# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------

def build_line_item(
    description: str,
    quantity: float,
    unit_price: float,
    product_id: Optional[str] = None,
    department_id: Optional[str] = None,
    item_id: Optional[str] = None,
) -> LineItem:
    return LineItem(
        id=item_id or numbering.generate_line_item_id(),
        description=description,
        quantity=quantity,
        unit_price=unit_price,
        total=line_total(quantity, unit_price),
        product_id=product_id,
        department_id=department_id,
    )


def update_line_item(
    item: LineItem,
    quantity: Optional[float] = None,
    unit_price: Optional[float] = None,
    description: Optional[str] = None,
) -> LineItem:
    """Copy of ``item`` with the given fields changed and ``total`` resynced"""
    changes = {}
    if quantity is not None:
        changes["quantity"] = quantity
    if unit_price is not None:
        changes["unit_price"] = unit_price
    if description is not None:
        changes["description"] = description

    updated = item.model_copy(update=changes)
    updated.total = line_total(updated.quantity, updated.unit_price)
    return updated


def _copy_items(line_items: Iterable[LineItem]) -> list[LineItem]:
    return [item.model_copy(deep=True) for item in line_items]


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def build_quote(
    customer_id: str,
    customer_name: str,
    customer_email: str,
    line_items: Iterable[LineItem] = (),
    tax_rate: Optional[float] = None,
    status: QuoteStatus = QuoteStatus.DRAFT,
    quote_number: Optional[str] = None,
    created_date: Optional[date] = None,
    valid_until: Optional[date] = None,
    notes: Optional[str] = None,
    quote_id: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Quote:
    settings = settings or get_settings()
    created = created_date or today()
    items = _copy_items(line_items)
    rate = settings.DEFAULT_TAX_RATE if tax_rate is None else tax_rate
    totals = document_totals(items, rate)

    return Quote(
        id=quote_id or numbering.generate_document_id("qt"),
        quote_number=quote_number or numbering.generate_quote_number(created),
        customer_id=customer_id,
        customer_name=customer_name,
        customer_email=customer_email,
        line_items=items,
        subtotal=totals.subtotal,
        tax_rate=rate,
        tax_amount=totals.tax_amount,
        total=totals.total,
        status=status,
        created_date=created,
        valid_until=valid_until or created + timedelta(days=settings.QUOTE_VALID_DAYS),
        notes=notes,
    )


def build_invoice(
    customer_id: str,
    customer_name: str,
    customer_email: str,
    line_items: Iterable[LineItem] = (),
    tax_rate: Optional[float] = None,
    status: InvoiceStatus = InvoiceStatus.DRAFT,
    invoice_number: Optional[str] = None,
    created_date: Optional[date] = None,
    due_date: Optional[date] = None,
    notes: Optional[str] = None,
    payment_method: Optional[PaymentMethod] = None,
    invoice_id: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Invoice:
    settings = settings or get_settings()
    created = created_date or today()
    items = _copy_items(line_items)
    rate = settings.DEFAULT_TAX_RATE if tax_rate is None else tax_rate
    totals = document_totals(items, rate)

    invoice = Invoice(
        id=invoice_id or numbering.generate_document_id("inv"),
        invoice_number=invoice_number or numbering.generate_invoice_number(created),
        customer_id=customer_id,
        customer_name=customer_name,
        customer_email=customer_email,
        line_items=items,
        subtotal=totals.subtotal,
        tax_rate=rate,
        tax_amount=totals.tax_amount,
        total=totals.total,
        created_date=created,
        due_date=due_date or created + timedelta(days=settings.INVOICE_DUE_DAYS),
        payment_method=payment_method,
        notes=notes,
    )
    return set_invoice_status(invoice, status, on=created)


def recalculate(document: Document) -> Document:
    """Copy of a quote or invoice with totals re-derived from its line items"""
    totals = document_totals(document.line_items, document.tax_rate)
    return document.model_copy(update=totals._asdict(), deep=True)


def revise(
    document: Document,
    line_items: Optional[Iterable[LineItem]] = None,
    tax_rate: Optional[float] = None,
) -> Document:
    """Replace line items and/or tax rate, then recompute totals"""
    changes = {}
    if line_items is not None:
        changes["line_items"] = _copy_items(line_items)
    if tax_rate is not None:
        changes["tax_rate"] = tax_rate
    return recalculate(document.model_copy(update=changes, deep=True))


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

def set_quote_status(quote: Quote, status: Union[QuoteStatus, str]) -> Quote:
    return quote.model_copy(update={"status": QuoteStatus(status)}, deep=True)


def set_invoice_status(
    invoice: Invoice,
    status: Union[InvoiceStatus, str],
    on: Optional[date] = None,
) -> Invoice:
    """
    Apply ``status`` and keep ``paid_date`` consistent with it.

    Moving to Paid stamps ``paid_date`` unless one is already recorded;
    any other status clears it.
    """
    status = InvoiceStatus(status)
    if status == InvoiceStatus.PAID:
        paid_date = invoice.paid_date or on or today()
    else:
        paid_date = None
    return invoice.model_copy(update={"status": status, "paid_date": paid_date}, deep=True)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def convert_quote_to_invoice(
    quote: Quote,
    on: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> Invoice:
    """
    Build a draft invoice from a quote.

    Line items are deep-copied and the quote's totals are carried over as-is
    rather than recomputed.
    """
    settings = settings or get_settings()
    created = on or today()
    return Invoice(
        id=numbering.generate_document_id("inv"),
        invoice_number=numbering.generate_invoice_number(created),
        customer_id=quote.customer_id,
        customer_name=quote.customer_name,
        customer_email=quote.customer_email,
        line_items=_copy_items(quote.line_items),
        subtotal=quote.subtotal,
        tax_rate=quote.tax_rate,
        tax_amount=quote.tax_amount,
        total=quote.total,
        status=InvoiceStatus.DRAFT,
        created_date=created,
        due_date=created + timedelta(days=settings.INVOICE_DUE_DAYS),
        notes=f"Converted from Quote {quote.quote_number}. {quote.notes or ''}",
    )
