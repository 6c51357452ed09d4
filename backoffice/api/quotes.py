"""
Quotes API endpoints
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from backoffice.api.common import LineItemInput, http_error, to_line_items
from backoffice.models.document import Invoice, Quote, QuoteStatus
from backoffice.services.back_office import BackOfficeService, get_service

router = APIRouter()


class QuoteCreate(BaseModel):
    customer_id: str
    customer_name: str
    customer_email: str = ""
    line_items: List[LineItemInput] = []
    tax_rate: Optional[float] = None
    status: QuoteStatus = QuoteStatus.DRAFT
    valid_until: Optional[date] = None
    notes: Optional[str] = None


class QuoteUpdate(BaseModel):
    line_items: Optional[List[LineItemInput]] = None
    tax_rate: Optional[float] = None
    valid_until: Optional[date] = None
    notes: Optional[str] = None


class QuoteStatusUpdate(BaseModel):
    status: QuoteStatus


@router.get("/", response_model=List[Quote])
async def list_quotes(
    status: Optional[QuoteStatus] = Query(None),
    service: BackOfficeService = Depends(get_service),
):
    """List quotes, newest first"""
    return service.list_quotes(status=status)


@router.post("/", response_model=Quote, status_code=201)
async def create_quote(data: QuoteCreate, service: BackOfficeService = Depends(get_service)):
    try:
        return service.create_quote(
            data.customer_id,
            data.customer_name,
            data.customer_email,
            to_line_items(data.line_items),
            tax_rate=data.tax_rate,
            status=data.status,
            valid_until=data.valid_until,
            notes=data.notes,
        )
    except ValueError as e:
        raise http_error(e)


@router.get("/{quote_id}", response_model=Quote)
async def get_quote(quote_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        return service.get_quote(quote_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Quote not found")


@router.put("/{quote_id}", response_model=Quote)
async def update_quote(quote_id: str, data: QuoteUpdate, service: BackOfficeService = Depends(get_service)):
    """Edit line items, tax rate, validity or notes; totals are recomputed"""
    try:
        return service.update_quote(
            quote_id,
            line_items=to_line_items(data.line_items) if data.line_items is not None else None,
            tax_rate=data.tax_rate,
            valid_until=data.valid_until,
            notes=data.notes,
        )
    except ValueError as e:
        raise http_error(e)


@router.put("/{quote_id}/status", response_model=Quote)
async def update_quote_status(quote_id: str, data: QuoteStatusUpdate, service: BackOfficeService = Depends(get_service)):
    try:
        return service.set_quote_status(quote_id, data.status)
    except ValueError as e:
        raise http_error(e)


@router.post("/{quote_id}/convert", response_model=Invoice, status_code=201)
async def convert_quote(quote_id: str, service: BackOfficeService = Depends(get_service)):
    """Accept the quote and create a draft invoice from it"""
    try:
        return service.accept_quote(quote_id)
    except ValueError as e:
        raise http_error(e)


@router.delete("/{quote_id}")
async def delete_quote(quote_id: str, service: BackOfficeService = Depends(get_service)):
    try:
        service.delete_quote(quote_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Quote not found")
    return {"message": "Quote deleted"}
