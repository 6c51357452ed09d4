"""
Production order drafts handed to the order-management system
"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

NEW_ORDER_STATUS = "new-order"
PENDING_ITEM_STATUS = "pending"


class Priority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class DeliveryMethod(str, Enum):
    PICKUP = "pickup"
    COURIER = "courier"


class ActivityLog(BaseModel):
    """Audit entry on an order's history"""
    id: str
    action: str
    from_status: Optional[str] = None
    to_status: Optional[str] = None
    user_id: str
    user_name: str
    user_role: str
    timestamp: datetime
    notes: Optional[str] = None


class OrderItem(BaseModel):
    id: str
    name: str
    quantity: float
    status: str = PENDING_ITEM_STATUS
    department_id: str = ""
    total_price: float = 0.0
    unit_price: float = 0.0
    product_id: Optional[str] = None


class ProductionOrder(BaseModel):
    id: Optional[str] = None  # assigned when stored
    order_number: str
    customer_id: Optional[str] = None
    customer_name: str
    customer_email: str
    department_id: str = ""
    status: str = NEW_ORDER_STATUS
    priority: Priority = Priority.NORMAL
    due_date: Optional[date] = None
    items: List[OrderItem] = []
    total_amount: float = 0.0
    paid_amount: float = 0.0
    group_id: Optional[str] = None  # shared by orders split from one invoice
    delivery_method: DeliveryMethod = DeliveryMethod.PICKUP
    history: List[ActivityLog] = []
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None
