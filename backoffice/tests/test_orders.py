"""
Invoice to production order splitting.
"""
from datetime import date

import pytest

from backoffice.models.order import DeliveryMethod, Priority
from backoffice.services.documents import build_invoice, build_line_item
from backoffice.services.orders import (
    CREATED_ACTION,
    SPLIT_CREATED_ACTION,
    convert_invoice_to_orders,
    group_by_department,
    map_line_items_to_order_items,
    suffix_for,
)


def _invoice(customer, items, number="INV-2024-0107"):
    return build_invoice(
        **customer,
        line_items=items,
        invoice_number=number,
        created_date=date(2024, 7, 1),
        due_date=date(2024, 7, 15),
    )


# ===================== MAPPING =====================


def test_line_items_map_to_order_items():
    item = build_line_item("Mugs", 12, 8.5, product_id="prod-mug", department_id="apparel")
    [mapped] = map_line_items_to_order_items([item], "dept-general")
    assert mapped.id == item.id
    assert mapped.name == "Mugs"
    assert mapped.quantity == 12
    assert mapped.total_price == 102
    assert mapped.unit_price == 8.5
    assert mapped.product_id == "prod-mug"
    assert mapped.department_id == "apparel"
    assert mapped.status == "pending"


def test_untagged_items_take_default_department():
    [mapped] = map_line_items_to_order_items([build_line_item("Flyers", 1, 10)], "dept-general")
    assert mapped.department_id == "dept-general"


def test_group_by_department_keeps_first_seen_order():
    items = map_line_items_to_order_items([
        build_line_item("a", 1, 1, department_id="signage"),
        build_line_item("b", 1, 1, department_id="apparel"),
        build_line_item("c", 1, 1, department_id="signage"),
        build_line_item("d", 1, 1, department_id="print"),
    ])
    groups = group_by_department(items)
    assert list(groups) == ["signage", "apparel", "print"]
    assert [i.name for i in groups["signage"]] == ["a", "c"]


@pytest.mark.parametrize("index, suffix", [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA")])
def test_suffix_for(index, suffix):
    assert suffix_for(index) == suffix


# ===================== SINGLE ORDER =====================


def test_single_department_gives_one_order(customer):
    invoice = _invoice(customer, [build_line_item("Flyers", 2, 30), build_line_item("Poster", 1, 40)])
    [order] = convert_invoice_to_orders(invoice, "dept-general")

    assert order.order_number == "ORD-2024-0107"
    assert order.group_id is None
    assert order.department_id == "dept-general"
    assert order.total_amount == invoice.subtotal == 100
    assert len(order.items) == 2


def test_order_defaults(customer):
    invoice = _invoice(customer, [build_line_item("Flyers", 2, 30)])
    [order] = convert_invoice_to_orders(invoice)

    assert order.status == "new-order"
    assert order.priority == Priority.NORMAL
    assert order.delivery_method == DeliveryMethod.PICKUP
    assert order.due_date == date(2024, 7, 15)
    assert order.paid_amount == 0
    assert order.created_at == order.updated_at
    assert order.customer_name == customer["customer_name"]
    assert order.customer_email == customer["customer_email"]
    assert order.customer_id == customer["customer_id"]


def test_single_order_history(customer):
    invoice = _invoice(customer, [build_line_item("Flyers", 2, 30)])
    [order] = convert_invoice_to_orders(invoice)
    [entry] = order.history
    assert entry.action == CREATED_ACTION
    assert entry.user_id == entry.user_role == "system"
    assert entry.notes == "Generated from INV-2024-0107"


def test_items_tagged_with_default_department_are_not_split(customer):
    invoice = _invoice(customer, [
        build_line_item("Flyers", 1, 10, department_id="dept-general"),
        build_line_item("Poster", 1, 20),
    ])
    orders = convert_invoice_to_orders(invoice, "dept-general")
    assert len(orders) == 1
    assert orders[0].group_id is None


def test_empty_invoice_gives_zero_total_order(customer):
    [order] = convert_invoice_to_orders(_invoice(customer, []), "dept-general")
    assert order.items == []
    assert order.total_amount == 0
    assert order.order_number == "ORD-2024-0107"


def test_invoice_status_is_not_checked(customer):
    invoice = _invoice(customer, [build_line_item("Flyers", 1, 10)])
    assert invoice.status.value == "Draft"
    assert len(convert_invoice_to_orders(invoice)) == 1


# ===================== SPLIT =====================


def test_split_by_department(split_invoice):
    orders = convert_invoice_to_orders(split_invoice, "dept-general")

    assert [o.order_number for o in orders] == ["ORD-2024-0001-A", "ORD-2024-0001-B"]
    assert [o.department_id for o in orders] == ["print", "apparel"]
    assert [o.total_amount for o in orders] == [100, 100]
    assert orders[0].group_id is not None
    assert orders[0].group_id.startswith("GRP-")
    assert orders[0].group_id == orders[1].group_id


def test_split_totals_reconcile(customer):
    items = [
        build_line_item("Banner", 1, 120.4, department_id="signage"),
        build_line_item("Hoodies", 7, 45.9, department_id="apparel"),
        build_line_item("Flyers", 500, 0.13),
        build_line_item("Decals", 30, 1.75, department_id="signage"),
    ]
    invoice = _invoice(customer, items)
    orders = convert_invoice_to_orders(invoice, "dept-general")

    assert len(orders) == 3
    assert [o.department_id for o in orders] == ["signage", "apparel", "dept-general"]
    assert [o.order_number[-2:] for o in orders] == ["-A", "-B", "-C"]
    assert len({o.group_id for o in orders}) == 1
    assert sum(o.total_amount for o in orders) == pytest.approx(sum(i.total for i in invoice.line_items))
    assert [len(o.items) for o in orders] == [2, 1, 1]


def test_split_history_cites_group(split_invoice):
    orders = convert_invoice_to_orders(split_invoice)
    for order in orders:
        [entry] = order.history
        assert entry.action == SPLIT_CREATED_ACTION
        assert entry.notes == f"Generated from INV-2024-0001, Group ID: {order.group_id}"


def test_invoice_is_not_modified(split_invoice):
    before = split_invoice.model_dump()
    convert_invoice_to_orders(split_invoice)
    assert split_invoice.model_dump() == before
