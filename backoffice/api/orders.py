"""
Production order endpoints (read-only; orders are created from invoices)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from backoffice.models.order import ProductionOrder
from backoffice.services.back_office import BackOfficeService, get_service

router = APIRouter()


@router.get("/", response_model=List[ProductionOrder])
async def list_orders(
    group_id: Optional[str] = Query(None),
    service: BackOfficeService = Depends(get_service),
):
    """List orders, optionally only the siblings of one split group"""
    return service.list_orders(group_id=group_id)


@router.get("/{order_id}", response_model=ProductionOrder)
async def get_order(order_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        return service.get_order(order_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Order not found")
