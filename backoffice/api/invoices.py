"""
Invoices API endpoints
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from backoffice.api.common import LineItemInput, http_error, to_line_items
from backoffice.models.document import Invoice, InvoiceStatus, PaymentMethod
from backoffice.models.order import ProductionOrder
from backoffice.services.back_office import BackOfficeService, get_service

router = APIRouter()


class InvoiceCreate(BaseModel):
    customer_id: str
    customer_name: str
    customer_email: str = ""
    line_items: List[LineItemInput] = []
    tax_rate: Optional[float] = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class InvoiceUpdate(BaseModel):
    line_items: Optional[List[LineItemInput]] = None
    tax_rate: Optional[float] = None
    due_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


class ConvertToOrders(BaseModel):
    default_department_id: Optional[str] = None


@router.get("/", response_model=List[Invoice])
async def list_invoices(
    status: Optional[InvoiceStatus] = Query(None),
    service: BackOfficeService = Depends(get_service),
):
    """List invoices, newest first"""
    return service.list_invoices(status=status)


@router.post("/", response_model=Invoice, status_code=201)
async def create_invoice(data: InvoiceCreate, service: BackOfficeService = Depends(get_service)):
    try:
        return service.create_invoice(
            data.customer_id,
            data.customer_name,
            data.customer_email,
            to_line_items(data.line_items),
            tax_rate=data.tax_rate,
            status=data.status,
            due_date=data.due_date,
            payment_method=data.payment_method,
            notes=data.notes,
        )
    except ValueError as e:
        raise http_error(e)


@router.get("/{invoice_id}", response_model=Invoice)
async def get_invoice(invoice_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        return service.get_invoice(invoice_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Invoice not found")


@router.put("/{invoice_id}", response_model=Invoice)
async def update_invoice(invoice_id: str, data: InvoiceUpdate, service: BackOfficeService = Depends(get_service)):
    try:
        return service.update_invoice(
            invoice_id,
            line_items=to_line_items(data.line_items) if data.line_items is not None else None,
            tax_rate=data.tax_rate,
            due_date=data.due_date,
            payment_method=data.payment_method,
            notes=data.notes,
        )
    except ValueError as e:
        raise http_error(e)


@router.put("/{invoice_id}/status", response_model=Invoice)
async def update_invoice_status(
    invoice_id: str,
    data: InvoiceStatusUpdate,
    service: BackOfficeService = Depends(get_service),
):
    """Set the status; paid_date follows the Paid status"""
    try:
        return service.set_invoice_status(invoice_id, data.status)
    except ValueError as e:
        raise http_error(e)


@router.post("/{invoice_id}/orders", response_model=List[ProductionOrder], status_code=201)
async def convert_invoice_to_orders(
    invoice_id: str,
    data: Optional[ConvertToOrders] = None,
    service: BackOfficeService = Depends(get_service),
):
    """Create production orders from the invoice, one per department"""
    department = data.default_department_id if data else None
    try:
        return service.convert_invoice(invoice_id, default_department_id=department)
    except ValueError as e:
        raise http_error(e)


@router.delete("/{invoice_id}")
async def delete_invoice(invoice_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        service.delete_invoice(invoice_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return {"message": "Invoice deleted"}
