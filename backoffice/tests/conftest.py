"""
Test fixtures - fresh in-memory repository + HTTP client bound to the FastAPI app
"""
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from backoffice.config import Settings
from backoffice.main import app
from backoffice.models.document import Invoice, Quote
from backoffice.services.back_office import BackOfficeService, get_service
from backoffice.services.documents import build_invoice, build_line_item, build_quote
from backoffice.services.repository import DocumentRepository


@pytest.fixture()
def service():
    """Service with default (permissive) settings and an empty repository"""
    return BackOfficeService(repository=DocumentRepository(), settings=Settings())


@pytest.fixture()
def strict_service():
    """Service that enforces the status transition tables"""
    return BackOfficeService(
        repository=DocumentRepository(),
        settings=Settings(ENFORCE_STATUS_TRANSITIONS=True),
    )


@pytest.fixture()
def customer():
    return {"customer_id": "cus-1", "customer_name": "Aina Rahman", "customer_email": "aina@example.com"}


@pytest.fixture()
def sample_quote(customer) -> Quote:
    """2 x 50 + 1 x 100 at 6% tax"""
    return build_quote(
        customer["customer_id"],
        customer["customer_name"],
        customer["customer_email"],
        [
            build_line_item("Business cards", 2, 50),
            build_line_item("Roll-up banner", 1, 100),
        ],
        tax_rate=6,
        quote_number="QT-2024-0042",
        created_date=date(2024, 3, 1),
        notes="Rush job",
    )


@pytest.fixture()
def split_invoice(customer) -> Invoice:
    """INV-2024-0001 with one print item and one apparel item, 100 each"""
    return build_invoice(
        customer["customer_id"],
        customer["customer_name"],
        customer["customer_email"],
        [
            build_line_item("A5 flyers", 1, 100, department_id="print"),
            build_line_item("Printed t-shirts", 10, 10, department_id="apparel"),
        ],
        tax_rate=0,
        invoice_number="INV-2024-0001",
        created_date=date(2024, 5, 1),
    )


@pytest_asyncio.fixture()
async def client(service):
    """httpx AsyncClient bound to the FastAPI app, backed by the fresh service"""
    app.dependency_overrides[get_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as ac:
        yield ac

    app.dependency_overrides.clear()
