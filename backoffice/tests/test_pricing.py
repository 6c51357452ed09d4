"""
Pricing arithmetic - line totals, subtotal, tax and grand total.
"""
import pytest

from backoffice.services.documents import build_line_item
from backoffice.services.pricing import document_totals, line_total, subtotal, tax_amount, total
from backoffice.utils.helpers import format_currency, round_currency


def test_line_total():
    assert line_total(3, 12.5) == 37.5


def test_line_total_negative_price_is_not_rejected():
    assert line_total(2, -5) == -10


def test_subtotal_sums_stored_totals():
    items = [build_line_item("Stickers", 4, 2.5), build_line_item("Poster", 1, 30)]
    assert subtotal(items) == sum(item.total for item in items) == 40


def test_subtotal_uses_stored_total_not_quantity_times_price():
    item = build_line_item("Stickers", 4, 2.5)
    item.quantity = 100  # edited without resyncing total
    assert subtotal([item]) == 10


def test_subtotal_of_nothing():
    assert subtotal([]) == 0


@pytest.mark.parametrize("amount, rate", [(200, 6), (99.99, 8.25), (0, 10), (1500, 0)])
def test_tax_and_total(amount, rate):
    tax = tax_amount(amount, rate)
    assert tax == pytest.approx(amount * rate / 100)
    assert total(amount, tax) == pytest.approx(amount + amount * rate / 100)


def test_quote_scenario_totals():
    items = [build_line_item("Cards", 2, 50), build_line_item("Banner", 1, 100)]
    totals = document_totals(items, 6)
    assert totals.subtotal == 200
    assert totals.tax_amount == pytest.approx(12)
    assert totals.total == pytest.approx(212)


def test_float_drift_is_left_for_presentation():
    items = [build_line_item(f"Sheet {i}", 1, 0.1) for i in range(10)]
    result = subtotal(items)
    assert result == pytest.approx(1.0)
    assert round_currency(result) == 1.0


def test_round_currency_half_up():
    assert round_currency(2.675) == 2.68
    assert round_currency(0.125) == 0.13


def test_format_currency():
    assert format_currency(1234.5) == "RM1,234.50"
    assert format_currency(-5) == "-RM5.00"
