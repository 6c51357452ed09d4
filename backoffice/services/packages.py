"""
Package price composition.

A package carries two aggregates derived from its items: the catalog
(original) price and the bundle sale price. The sale price is tagged as
either computed from the items or overridden by an operator; an override
survives item edits until it is explicitly reset.
"""
import logging
from typing import Iterable, Optional

from backoffice.models.package import (
    ComputedPrice,
    OverriddenPrice,
    Package,
    PackageItem,
    PackagePricing,
    ProductRef,
)

logger = logging.getLogger(__name__)


def recompute(items: Iterable[PackageItem]) -> PackagePricing:
    """Original and sale price for a list of package items (items returned unchanged)"""
    items = list(items)
    original_price = 0.0
    price = 0.0
    for item in items:
        original_price += item.product.base_price * item.quantity
        price += (item.unit_price or 0) * item.quantity
    return PackagePricing(items=items, original_price=original_price, price=price)


def apply_items(package: Package, items: Iterable[PackageItem]) -> Package:
    """Replace the item list and refresh both aggregates"""
    pricing = recompute(item.model_copy(deep=True) for item in items)
    if package.is_price_overridden:
        price = package.price.model_copy()
    else:
        price = ComputedPrice(amount=pricing.price)
    return package.model_copy(
        update={"items": pricing.items, "original_price": pricing.original_price, "price": price},
        deep=True,
    )


def computed_price(package: Package) -> float:
    """What the sale price would be if it were tracking the items"""
    return recompute(package.items).price


def override_price(package: Package, amount: float) -> Package:
    logger.debug(f"Package {package.id} price pinned at {amount}")
    return package.model_copy(update={"price": OverriddenPrice(amount=amount)}, deep=True)


def reset_price(package: Package) -> Package:
    """Drop an override so the sale price follows the items again"""
    return package.model_copy(
        update={"price": ComputedPrice(amount=computed_price(package))},
        deep=True,
    )


# ---------------------------------------------------------------------------
# Item edits
# ---------------------------------------------------------------------------

def add_item(
    package: Package,
    product: ProductRef,
    quantity: float = 1,
    unit_price: Optional[float] = None,
    variant_description: Optional[str] = None,
) -> Package:
    """Append a product; its bundle unit price defaults to the catalog base price"""
    item = PackageItem(
        product_id=product.id,
        product=product,
        quantity=quantity,
        unit_price=product.base_price if unit_price is None else unit_price,
        variant_description=variant_description,
    )
    return apply_items(package, [*package.items, item])


def remove_item(package: Package, index: int) -> Package:
    items = list(package.items)
    del items[index]
    return apply_items(package, items)


def update_item(
    package: Package,
    index: int,
    quantity: Optional[float] = None,
    unit_price: Optional[float] = None,
    variant_description: Optional[str] = None,
) -> Package:
    changes = {}
    if quantity is not None:
        changes["quantity"] = quantity
    if unit_price is not None:
        changes["unit_price"] = unit_price
    if variant_description is not None:
        changes["variant_description"] = variant_description

    items = list(package.items)
    items[index] = items[index].model_copy(update=changes)
    return apply_items(package, items)
