"""
Quote and invoice status transition tables.
"""
import pytest

from backoffice.exceptions import InvalidStatusTransition
from backoffice.models.document import InvoiceStatus, QuoteStatus
from backoffice.services.status import can_transition, validate_transition


@pytest.mark.parametrize("source, target", [
    ("Draft", "Sent"),
    ("Draft", "Accepted"),
    ("Sent", "Rejected"),
    ("Rejected", "Draft"),
    ("Accepted", "Accepted"),
])
def test_allowed_quote_moves(source, target):
    assert can_transition("quote", source, target)


@pytest.mark.parametrize("source, target", [
    ("Accepted", "Draft"),
    ("Accepted", "Rejected"),
    ("Rejected", "Accepted"),
])
def test_blocked_quote_moves(source, target):
    assert not can_transition("quote", source, target)


def test_invoice_table():
    assert can_transition("invoice", InvoiceStatus.DRAFT, InvoiceStatus.PAID)
    assert can_transition("invoice", InvoiceStatus.OVERDUE, InvoiceStatus.PAID)
    assert not can_transition("invoice", InvoiceStatus.PAID, InvoiceStatus.DRAFT)
    assert not can_transition("invoice", InvoiceStatus.DRAFT, InvoiceStatus.OVERDUE)


def test_validate_transition_raises():
    with pytest.raises(InvalidStatusTransition, match="Cannot move invoice from 'Paid' to 'Draft'"):
        validate_transition("invoice", InvoiceStatus.PAID, "Draft")


def test_validate_transition_passes():
    validate_transition("quote", QuoteStatus.SENT, QuoteStatus.ACCEPTED)


def test_unknown_kind():
    with pytest.raises(ValueError, match="Unknown document kind"):
        can_transition("order", "Draft", "Sent")


def test_unknown_status():
    with pytest.raises(ValueError):
        can_transition("quote", "Draft", "Paid")
