"""
Invoice to production order conversion.

Line items are grouped by production department. A single department (or
none) gives one order; several departments give one order per department,
numbered -A, -B, ... in the order the departments first appear on the
invoice, all sharing one group id.
"""
import logging
import uuid
from typing import Dict, List, Optional

from backoffice.models.document import Invoice, LineItem
from backoffice.models.order import ActivityLog, OrderItem, PENDING_ITEM_STATUS, ProductionOrder
from backoffice.services import numbering
from backoffice.utils.helpers import epoch_millis, utc_now

logger = logging.getLogger(__name__)

SYSTEM_USER = "system"
CREATED_ACTION = "Order created from Invoice"
SPLIT_CREATED_ACTION = "Order created from Invoice (Split)"


def suffix_for(index: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA, 27 -> AB, ..."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(65 + remainder) + letters
    return letters


def map_line_items_to_order_items(
    line_items: List[LineItem],
    default_department_id: str = "",
) -> List[OrderItem]:
    fallback_prefix = f"oi-{epoch_millis()}"
    return [
        OrderItem(
            id=item.id or f"{fallback_prefix}-{idx}",
            name=item.description,
            quantity=item.quantity,
            status=PENDING_ITEM_STATUS,
            department_id=item.department_id or default_department_id,
            total_price=item.total,
            unit_price=item.unit_price,
            product_id=item.product_id,
        )
        for idx, item in enumerate(line_items)
    ]


def group_by_department(items: List[OrderItem]) -> Dict[str, List[OrderItem]]:
    """Partition items by department, keys in first-seen order"""
    groups: Dict[str, List[OrderItem]] = {}
    for item in items:
        groups.setdefault(item.department_id, []).append(item)
    return groups


def _system_entry(action: str, notes: str) -> ActivityLog:
    return ActivityLog(
        id=uuid.uuid4().hex,
        action=action,
        user_id=SYSTEM_USER,
        user_name="System",
        user_role=SYSTEM_USER,
        timestamp=utc_now(),
        notes=notes,
    )


def _draft_order(
    invoice: Invoice,
    order_number: str,
    department_id: str,
    items: List[OrderItem],
    history: ActivityLog,
    group_id: Optional[str] = None,
) -> ProductionOrder:
    now = utc_now()
    return ProductionOrder(
        order_number=order_number,
        customer_id=invoice.customer_id,
        customer_name=invoice.customer_name,
        customer_email=invoice.customer_email,
        department_id=department_id,
        due_date=invoice.due_date,
        items=items,
        total_amount=sum((item.total_price for item in items), 0.0),
        paid_amount=0.0,
        group_id=group_id,
        history=[history],
        created_at=now,
        updated_at=now,
    )


def convert_invoice_to_orders(invoice: Invoice, default_department_id: str = "") -> List[ProductionOrder]:
    """
    Build production order drafts from an invoice.

    Never fails: an invoice without line items yields one zero-total order.
    The invoice status is not checked.
    """
    items = map_line_items_to_order_items(invoice.line_items, default_department_id)
    groups = group_by_department(items)
    base_order_number = numbering.order_number_for_invoice(invoice.invoice_number)

    if len(groups) <= 1:
        entry = _system_entry(CREATED_ACTION, f"Generated from {invoice.invoice_number}")
        order = _draft_order(invoice, base_order_number, default_department_id, items, entry)
        logger.info(f"Invoice {invoice.invoice_number} -> order {order.order_number}")
        return [order]

    group_id = numbering.generate_group_id()
    orders = []
    for idx, (department_id, dept_items) in enumerate(groups.items()):
        entry = _system_entry(
            SPLIT_CREATED_ACTION,
            f"Generated from {invoice.invoice_number}, Group ID: {group_id}",
        )
        orders.append(_draft_order(
            invoice,
            f"{base_order_number}-{suffix_for(idx)}",
            department_id,
            dept_items,
            entry,
            group_id=group_id,
        ))

    logger.info(
        f"Invoice {invoice.invoice_number} split into {len(orders)} orders "
        f"across departments {list(groups.keys())} ({group_id})"
    )
    return orders
