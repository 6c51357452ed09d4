"""
Status transition tables for quotes and invoices.

The lifecycle functions accept any status; this module is the opt-in check
the service layer runs when ENFORCE_STATUS_TRANSITIONS is enabled.
"""
from typing import Dict, FrozenSet, Union

from backoffice.exceptions import InvalidStatusTransition
from backoffice.models.document import InvoiceStatus, QuoteStatus

QUOTE_TRANSITIONS: Dict[QuoteStatus, FrozenSet[QuoteStatus]] = {
    QuoteStatus.DRAFT: frozenset({QuoteStatus.SENT, QuoteStatus.ACCEPTED, QuoteStatus.REJECTED}),
    QuoteStatus.SENT: frozenset({QuoteStatus.ACCEPTED, QuoteStatus.REJECTED, QuoteStatus.DRAFT}),
    QuoteStatus.REJECTED: frozenset({QuoteStatus.DRAFT}),
    QuoteStatus.ACCEPTED: frozenset(),
}

INVOICE_TRANSITIONS: Dict[InvoiceStatus, FrozenSet[InvoiceStatus]] = {
    InvoiceStatus.DRAFT: frozenset({InvoiceStatus.SENT, InvoiceStatus.PAID}),
    InvoiceStatus.SENT: frozenset({InvoiceStatus.PAID, InvoiceStatus.OVERDUE, InvoiceStatus.DRAFT}),
    InvoiceStatus.OVERDUE: frozenset({InvoiceStatus.PAID, InvoiceStatus.SENT}),
    InvoiceStatus.PAID: frozenset(),
}

_TABLES = {
    "quote": (QuoteStatus, QUOTE_TRANSITIONS),
    "invoice": (InvoiceStatus, INVOICE_TRANSITIONS),
}


def can_transition(kind: str, from_status: Union[str, QuoteStatus, InvoiceStatus], to_status) -> bool:
    """True if ``kind`` ("quote" or "invoice") may move between the two statuses"""
    if kind not in _TABLES:
        raise ValueError(f"Unknown document kind: {kind}. Available: {list(_TABLES.keys())}")
    status_type, table = _TABLES[kind]
    source, target = status_type(from_status), status_type(to_status)
    return source == target or target in table[source]


def validate_transition(kind: str, from_status, to_status) -> None:
    if not can_transition(kind, from_status, to_status):
        status_type, _ = _TABLES[kind]
        raise InvalidStatusTransition(kind, status_type(from_status).value, status_type(to_status).value)
