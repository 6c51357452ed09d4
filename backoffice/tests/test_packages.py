"""
Package price composition.
"""
import pytest

from backoffice.models.package import ComputedPrice, OverriddenPrice, Package, PackageItem, ProductRef
from backoffice.services.packages import (
    add_item,
    apply_items,
    computed_price,
    override_price,
    recompute,
    remove_item,
    reset_price,
    update_item,
)

TSHIRT = ProductRef(id="prod-tee", name="Cotton T-shirt", base_price=20)
CAP = ProductRef(id="prod-cap", name="Embroidered cap", base_price=10)


def _item(product, quantity, unit_price=None):
    return PackageItem(product_id=product.id, product=product, quantity=quantity, unit_price=unit_price)


@pytest.fixture()
def bundle_items():
    return [_item(TSHIRT, 2, 15), _item(CAP, 1, 8)]


@pytest.fixture()
def package(bundle_items):
    return apply_items(Package(id="pkg-1", name="Team starter kit"), bundle_items)


def test_recompute_scenario(bundle_items):
    pricing = recompute(bundle_items)
    assert pricing.original_price == 50
    assert pricing.price == 38
    assert pricing.items == bundle_items


def test_recompute_is_idempotent(bundle_items):
    first = recompute(bundle_items)
    second = recompute(bundle_items)
    assert (first.original_price, first.price) == (second.original_price, second.price)


def test_missing_unit_price_counts_as_zero():
    pricing = recompute([_item(TSHIRT, 3)])
    assert pricing.original_price == 60
    assert pricing.price == 0


def test_recompute_empty():
    pricing = recompute([])
    assert pricing.original_price == 0
    assert pricing.price == 0


def test_apply_items_sets_computed_price(package):
    assert package.original_price == 50
    assert package.price == ComputedPrice(amount=38)
    assert package.sale_price == 38
    assert not package.is_price_overridden


def test_add_item_defaults_unit_price_to_base_price(package):
    updated = add_item(package, ProductRef(id="prod-mug", name="Mug", base_price=12), quantity=2)
    assert updated.items[-1].unit_price == 12
    assert updated.original_price == 74
    assert updated.sale_price == 62
    assert len(package.items) == 2


def test_remove_and_update_item(package):
    fewer = remove_item(package, 1)
    assert fewer.original_price == 40
    assert fewer.sale_price == 30

    more = update_item(package, 0, quantity=5)
    assert more.original_price == 110
    assert more.sale_price == 83

    cheaper = update_item(package, 1, unit_price=5)
    assert cheaper.sale_price == 35


def test_override_survives_item_edits(package):
    pinned = override_price(package, 35)
    assert pinned.is_price_overridden
    assert pinned.price == OverriddenPrice(amount=35)

    edited = update_item(pinned, 0, quantity=3)
    assert edited.sale_price == 35
    assert edited.is_price_overridden
    assert edited.original_price == 70
    assert computed_price(edited) == 53


def test_reset_price_tracks_items_again(package):
    pinned = update_item(override_price(package, 35), 0, quantity=3)
    reset = reset_price(pinned)
    assert not reset.is_price_overridden
    assert reset.sale_price == 53


def test_price_round_trips_through_dump(package):
    pinned = override_price(package, 35)
    restored = Package.model_validate(pinned.model_dump())
    assert restored.price == OverriddenPrice(amount=35)
