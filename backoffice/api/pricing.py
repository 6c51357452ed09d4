"""
Stateless pricing preview used by the quote and invoice forms
"""
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from backoffice.api.common import LineItemInput, to_line_items
from backoffice.models.document import LineItem
from backoffice.services.pricing import document_totals
from backoffice.utils.helpers import format_currency

router = APIRouter()


class TotalsRequest(BaseModel):
    line_items: List[LineItemInput] = []
    tax_rate: float = 0.0


class TotalsResponse(BaseModel):
    line_items: List[LineItem]
    subtotal: float
    tax_rate: float
    tax_amount: float
    total: float
    display: dict


@router.post("/totals", response_model=TotalsResponse)
async def preview_totals(data: TotalsRequest):
    """Compute line totals, subtotal, tax and grand total without storing anything"""
    items = to_line_items(data.line_items)
    totals = document_totals(items, data.tax_rate)
    return {
        "line_items": items,
        "subtotal": totals.subtotal,
        "tax_rate": data.tax_rate,
        "tax_amount": totals.tax_amount,
        "total": totals.total,
        "display": {
            "subtotal": format_currency(totals.subtotal),
            "tax_amount": format_currency(totals.tax_amount),
            "total": format_currency(totals.total),
        },
    }
