"""
Quote and invoice records
"""
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, model_validator


class QuoteStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class InvoiceStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    PAID = "Paid"
    OVERDUE = "Overdue"


class PaymentMethod(str, Enum):
    INVOICE = "invoice"
    ONLINE = "online"
    WALLET = "wallet"


class LineItem(BaseModel):
    """Priced row shared by quotes and invoices"""
    id: str
    description: str
    quantity: float
    unit_price: float
    total: float = 0.0  # quantity * unit_price when omitted; the lifecycle helpers keep it in sync
    product_id: Optional[str] = None  # catalog lookup only
    department_id: Optional[str] = None  # production department, used when splitting orders

    @model_validator(mode="before")
    @classmethod
    def fill_total(cls, data):
        if isinstance(data, dict) and data.get("total") is None:
            quantity, unit_price = data.get("quantity"), data.get("unit_price")
            try:
                data = {**data, "total": float(quantity) * float(unit_price)}
            except (TypeError, ValueError):
                pass  # left to field validation
        return data


class Quote(BaseModel):
    id: str
    quote_number: str
    customer_id: str
    customer_name: str
    customer_email: str
    line_items: List[LineItem] = []
    subtotal: float = 0.0
    tax_rate: float = 0.0  # percent
    tax_amount: float = 0.0
    total: float = 0.0
    status: QuoteStatus = QuoteStatus.DRAFT
    created_date: date
    valid_until: date
    notes: Optional[str] = None


class Invoice(BaseModel):
    id: str
    invoice_number: str
    customer_id: str
    customer_name: str
    customer_email: str
    line_items: List[LineItem] = []
    subtotal: float = 0.0
    tax_rate: float = 0.0  # percent
    tax_amount: float = 0.0
    total: float = 0.0
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_date: date
    due_date: Optional[date] = None
    paid_date: Optional[date] = None  # only while status is Paid
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
