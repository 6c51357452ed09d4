"""
Request schemas and error mapping shared by the document routes
"""
from typing import List, Optional

from fastapi import HTTPException
from pydantic import BaseModel

from backoffice.exceptions import DocumentConflictError, DocumentNotFoundError, InvalidStatusTransition
from backoffice.models.document import LineItem
from backoffice.services.documents import build_line_item


class LineItemInput(BaseModel):
    """Line item as submitted by the form; ``total`` is always derived"""
    id: Optional[str] = None
    description: str
    quantity: float = 1
    unit_price: float = 0.0
    product_id: Optional[str] = None
    department_id: Optional[str] = None


def to_line_items(items: List[LineItemInput]) -> List[LineItem]:
    return [
        build_line_item(
            item.description,
            item.quantity,
            item.unit_price,
            product_id=item.product_id,
            department_id=item.department_id,
            item_id=item.id,
        )
        for item in items
    ]


def http_error(error: ValueError) -> HTTPException:
    """Map service-layer errors onto HTTP status codes"""
    if isinstance(error, DocumentNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, (DocumentConflictError, InvalidStatusTransition)):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))
