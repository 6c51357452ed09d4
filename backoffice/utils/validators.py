"""
Input validation utilities

The pricing core accepts whatever it is given; these checks run in the
service layer before a document is assembled.
"""
from typing import Iterable, Optional

from backoffice.exceptions import ValidationError
from backoffice.models.document import LineItem
from backoffice.models.package import PackageItem


def validate_customer(customer_id: Optional[str], customer_name: Optional[str]) -> None:
    """A document must name an existing customer or agent"""
    if not customer_id:
        raise ValidationError("customer_id", "Customer ID is required")
    if not customer_name or not customer_name.strip():
        raise ValidationError("customer_name", "Customer name is required")


def validate_tax_rate(tax_rate: float) -> float:
    if tax_rate < 0:
        raise ValidationError("tax_rate", "Tax rate must not be negative")
    return tax_rate


def validate_line_item(item: LineItem) -> LineItem:
    if not item.description or not item.description.strip():
        raise ValidationError("description", "Line item description is required")
    if item.quantity <= 0:
        raise ValidationError("quantity", f"Quantity must be positive (got {item.quantity})")
    if item.unit_price < 0:
        raise ValidationError("unit_price", f"Unit price must not be negative (got {item.unit_price})")
    return item


def validate_line_items(items: Iterable[LineItem]) -> list[LineItem]:
    return [validate_line_item(item) for item in items]


def validate_amount(field: str, amount: float) -> float:
    """Non-negative money amount, e.g. a pinned package price"""
    if amount < 0:
        raise ValidationError(field, f"{field} must not be negative")
    return amount


def validate_package_item(item: PackageItem) -> PackageItem:
    if item.quantity <= 0:
        raise ValidationError("quantity", f"Quantity must be positive (got {item.quantity})")
    if item.unit_price is not None and item.unit_price < 0:
        raise ValidationError("unit_price", f"Unit price must not be negative (got {item.unit_price})")
    if item.product.base_price < 0:
        raise ValidationError("base_price", f"Base price must not be negative (got {item.product.base_price})")
    return item


def validate_package_items(items: Iterable[PackageItem]) -> list[PackageItem]:
    return [validate_package_item(item) for item in items]
