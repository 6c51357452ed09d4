"""
In-memory document repository.

Records go in and come out as deep copies, so nothing a caller holds can
change what is stored. Quote and invoice numbers are unique per store; a
duplicate is reported as a conflict for the caller to retry.
"""
import uuid
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from backoffice.exceptions import DocumentConflictError, DocumentNotFoundError
from backoffice.models.document import Invoice, Quote
from backoffice.models.order import ProductionOrder
from backoffice.models.package import Package

Record = TypeVar("Record", bound=BaseModel)


class RecordCollection(Generic[Record]):
    """Insertion-ordered snapshot store keyed by record id"""

    def __init__(self, kind: str, number_field: Optional[str] = None):
        self.kind = kind
        self.number_field = number_field
        self._records: Dict[str, Record] = {}

    def add(self, record: Record) -> Record:
        if self.number_field:
            number = getattr(record, self.number_field)
            if self.has_number(number):
                raise DocumentConflictError(self.kind, number)
        if record.id in self._records:
            raise DocumentConflictError(self.kind, record.id, f"{self.kind.capitalize()} id '{record.id}' already exists")
        self._records[record.id] = record.model_copy(deep=True)
        return record.model_copy(deep=True)

    def get(self, record_id: str) -> Record:
        if record_id not in self._records:
            raise DocumentNotFoundError(self.kind, record_id)
        return self._records[record_id].model_copy(deep=True)

    def update(self, record: Record) -> Record:
        if record.id not in self._records:
            raise DocumentNotFoundError(self.kind, record.id)
        if self.number_field:
            number = getattr(record, self.number_field)
            for other in self._records.values():
                if other.id != record.id and getattr(other, self.number_field) == number:
                    raise DocumentConflictError(self.kind, number)
        self._records[record.id] = record.model_copy(deep=True)
        return record.model_copy(deep=True)

    def delete(self, record_id: str) -> None:
        if record_id not in self._records:
            raise DocumentNotFoundError(self.kind, record_id)
        del self._records[record_id]

    def list(self) -> List[Record]:
        """Newest first"""
        return [r.model_copy(deep=True) for r in reversed(self._records.values())]

    def has_number(self, number: str) -> bool:
        return any(getattr(r, self.number_field) == number for r in self._records.values())

    def __len__(self) -> int:
        return len(self._records)


class DocumentRepository:
    """Quotes, invoices, production orders and packages for one shop"""

    def __init__(self):
        self.quotes: RecordCollection[Quote] = RecordCollection("quote", "quote_number")
        self.invoices: RecordCollection[Invoice] = RecordCollection("invoice", "invoice_number")
        self.orders: RecordCollection[ProductionOrder] = RecordCollection("order", "order_number")
        self.packages: RecordCollection[Package] = RecordCollection("package")

    def add_orders(self, orders: List[ProductionOrder]) -> List[ProductionOrder]:
        """Store order drafts, assigning ids to those without one"""
        for order in orders:
            if self.orders.has_number(order.order_number):
                raise DocumentConflictError("order", order.order_number)

        stored = []
        for order in orders:
            if not order.id:
                order = order.model_copy(update={"id": f"ord-{uuid.uuid4().hex}"})
            stored.append(self.orders.add(order))
        return stored
