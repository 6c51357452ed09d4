"""
Package (product bundle) records
"""
from datetime import date
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ProductRef(BaseModel):
    """Catalog product as seen from a package"""
    id: str
    name: str
    base_price: float


class PackageItem(BaseModel):
    product_id: str
    product: ProductRef
    quantity: float = 1
    unit_price: Optional[float] = None  # sale price per unit inside the bundle
    variant_description: Optional[str] = None


class ComputedPrice(BaseModel):
    """Sale price still tracking sum(unit_price * quantity)"""
    kind: Literal["computed"] = "computed"
    amount: float = 0.0


class OverriddenPrice(BaseModel):
    """Sale price pinned by an operator"""
    kind: Literal["overridden"] = "overridden"
    amount: float


PackagePrice = Annotated[Union[ComputedPrice, OverriddenPrice], Field(discriminator="kind")]


class PackagePricing(BaseModel):
    """Result of recomputing a package's aggregates from its items"""
    items: List[PackageItem]
    original_price: float
    price: float


class Package(BaseModel):
    id: str
    name: str
    description: str = ""
    price: PackagePrice = Field(default_factory=ComputedPrice)
    original_price: float = 0.0
    items: List[PackageItem] = []
    image: Optional[str] = None
    campaign_start: Optional[date] = None
    campaign_end: Optional[date] = None
    is_active: bool = True

    @property
    def sale_price(self) -> float:
        return self.price.amount

    @property
    def is_price_overridden(self) -> bool:
        return isinstance(self.price, OverriddenPrice)
