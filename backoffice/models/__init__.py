from backoffice.models.document import LineItem, Quote, Invoice, QuoteStatus, InvoiceStatus, PaymentMethod
from backoffice.models.package import (
    ProductRef,
    PackageItem,
    Package,
    PackagePricing,
    ComputedPrice,
    OverriddenPrice,
)
from backoffice.models.order import ProductionOrder, OrderItem, ActivityLog, Priority, DeliveryMethod

__all__ = [
    "LineItem",
    "Quote",
    "Invoice",
    "QuoteStatus",
    "InvoiceStatus",
    "PaymentMethod",
    "ProductRef",
    "PackageItem",
    "Package",
    "PackagePricing",
    "ComputedPrice",
    "OverriddenPrice",
    "ProductionOrder",
    "OrderItem",
    "ActivityLog",
    "Priority",
    "DeliveryMethod",
]
