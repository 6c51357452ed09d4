"""
Back-office workflow over the pricing core.

Validates caller input, runs the lifecycle/splitting/packaging functions and
stores the resulting snapshots in a DocumentRepository. Generated quote and
invoice numbers that collide with a stored document are regenerated a few
times before the conflict is reported.
"""
from datetime import date
from typing import Callable, Iterable, List, Optional, Union

from backoffice.config import Settings, get_settings
from backoffice.exceptions import DocumentConflictError, InvalidStatusTransition
from backoffice.models.document import Invoice, InvoiceStatus, LineItem, PaymentMethod, Quote, QuoteStatus
from backoffice.models.order import ProductionOrder
from backoffice.models.package import Package, PackageItem
from backoffice.services import documents, orders, packages
from backoffice.services import status as status_rules
from backoffice.services.numbering import generate_document_id
from backoffice.services.repository import DocumentRepository, RecordCollection
from backoffice.utils.logger import get_logger
from backoffice.utils.validators import (
    validate_amount,
    validate_customer,
    validate_line_items,
    validate_package_items,
    validate_tax_rate,
)

logger = get_logger(__name__)


class BackOfficeService:
    """Quote, invoice, order and package workflows for one shop"""

    def __init__(self, repository: Optional[DocumentRepository] = None, settings: Optional[Settings] = None):
        self.repository = repository or DocumentRepository()
        self.settings = settings or get_settings()

    def _store_numbered(self, build: Callable[[], Union[Quote, Invoice]], collection: RecordCollection):
        """Build and store a numbered document, regenerating on number collisions"""
        attempts = max(1, self.settings.NUMBER_GENERATION_ATTEMPTS)
        for attempt in range(1, attempts + 1):
            document = build()
            try:
                return collection.add(document)
            except DocumentConflictError as e:
                logger.warning(f"{e} (attempt {attempt}/{attempts})")
                if attempt == attempts:
                    raise

    def _check_transition(self, kind: str, current, target) -> None:
        if self.settings.ENFORCE_STATUS_TRANSITIONS:
            status_rules.validate_transition(kind, current, target)

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------

    def create_quote(
        self,
        customer_id: str,
        customer_name: str,
        customer_email: str,
        line_items: Iterable[LineItem],
        tax_rate: Optional[float] = None,
        status: QuoteStatus = QuoteStatus.DRAFT,
        valid_until: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> Quote:
        validate_customer(customer_id, customer_name)
        items = validate_line_items(line_items)
        if tax_rate is not None:
            validate_tax_rate(tax_rate)

        quote = self._store_numbered(
            lambda: documents.build_quote(
                customer_id, customer_name, customer_email, items,
                tax_rate=tax_rate, status=status, valid_until=valid_until, notes=notes,
                settings=self.settings,
            ),
            self.repository.quotes,
        )
        logger.info(f"Created quote {quote.quote_number} for {customer_name} (total {quote.total})")
        return quote

    def get_quote(self, quote_id: str) -> Quote:
        return self.repository.quotes.get(quote_id)

    def list_quotes(self, status: Optional[QuoteStatus] = None) -> List[Quote]:
        quotes = self.repository.quotes.list()
        if status is not None:
            quotes = [q for q in quotes if q.status == status]
        return quotes

    def update_quote(
        self,
        quote_id: str,
        line_items: Optional[Iterable[LineItem]] = None,
        tax_rate: Optional[float] = None,
        valid_until: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> Quote:
        quote = self.repository.quotes.get(quote_id)
        if line_items is not None:
            line_items = validate_line_items(line_items)
        if tax_rate is not None:
            validate_tax_rate(tax_rate)

        quote = documents.revise(quote, line_items=line_items, tax_rate=tax_rate)
        if valid_until is not None:
            quote.valid_until = valid_until
        if notes is not None:
            quote.notes = notes
        return self.repository.quotes.update(quote)

    def set_quote_status(self, quote_id: str, new_status: Union[QuoteStatus, str]) -> Quote:
        quote = self.repository.quotes.get(quote_id)
        self._check_transition("quote", quote.status, new_status)
        updated = self.repository.quotes.update(documents.set_quote_status(quote, new_status))
        logger.info(f"Quote {quote.quote_number}: {quote.status.value} -> {updated.status.value}")
        return updated

    def delete_quote(self, quote_id: str) -> None:
        self.repository.quotes.delete(quote_id)

    def accept_quote(self, quote_id: str) -> Invoice:
        """
        Store the draft invoice converted from a quote, then mark the quote Accepted.

        A quote is converted at most once. If the invoice cannot be stored the
        quote keeps its previous status.
        """
        quote = self.repository.quotes.get(quote_id)
        if quote.status == QuoteStatus.ACCEPTED:
            raise InvalidStatusTransition(
                "quote", quote.status.value, QuoteStatus.ACCEPTED.value,
                f"Quote {quote.quote_number} has already been accepted",
            )
        self._check_transition("quote", quote.status, QuoteStatus.ACCEPTED)

        invoice = self._store_numbered(
            lambda: documents.convert_quote_to_invoice(quote, settings=self.settings),
            self.repository.invoices,
        )
        self.repository.quotes.update(documents.set_quote_status(quote, QuoteStatus.ACCEPTED))
        logger.info(f"Converted quote {quote.quote_number} into invoice {invoice.invoice_number}")
        return invoice

    # ------------------------------------------------------------------
    # Invoices
    # ------------------------------------------------------------------

    def create_invoice(
        self,
        customer_id: str,
        customer_name: str,
        customer_email: str,
        line_items: Iterable[LineItem],
        tax_rate: Optional[float] = None,
        status: InvoiceStatus = InvoiceStatus.DRAFT,
        due_date: Optional[date] = None,
        payment_method: Optional[PaymentMethod] = None,
        notes: Optional[str] = None,
    ) -> Invoice:
        validate_customer(customer_id, customer_name)
        items = validate_line_items(line_items)
        if tax_rate is not None:
            validate_tax_rate(tax_rate)

        invoice = self._store_numbered(
            lambda: documents.build_invoice(
                customer_id, customer_name, customer_email, items,
                tax_rate=tax_rate, status=status, due_date=due_date,
                payment_method=payment_method, notes=notes,
                settings=self.settings,
            ),
            self.repository.invoices,
        )
        logger.info(f"Created invoice {invoice.invoice_number} for {customer_name} (total {invoice.total})")
        return invoice

    def get_invoice(self, invoice_id: str) -> Invoice:
        return self.repository.invoices.get(invoice_id)

    def list_invoices(self, status: Optional[InvoiceStatus] = None) -> List[Invoice]:
        invoices = self.repository.invoices.list()
        if status is not None:
            invoices = [i for i in invoices if i.status == status]
        return invoices

    def update_invoice(
        self,
        invoice_id: str,
        line_items: Optional[Iterable[LineItem]] = None,
        tax_rate: Optional[float] = None,
        due_date: Optional[date] = None,
        payment_method: Optional[PaymentMethod] = None,
        notes: Optional[str] = None,
    ) -> Invoice:
        invoice = self.repository.invoices.get(invoice_id)
        if line_items is not None:
            line_items = validate_line_items(line_items)
        if tax_rate is not None:
            validate_tax_rate(tax_rate)

        invoice = documents.revise(invoice, line_items=line_items, tax_rate=tax_rate)
        if due_date is not None:
            invoice.due_date = due_date
        if payment_method is not None:
            invoice.payment_method = PaymentMethod(payment_method)
        if notes is not None:
            invoice.notes = notes
        return self.repository.invoices.update(invoice)

    def set_invoice_status(self, invoice_id: str, new_status: Union[InvoiceStatus, str]) -> Invoice:
        invoice = self.repository.invoices.get(invoice_id)
        self._check_transition("invoice", invoice.status, new_status)
        updated = self.repository.invoices.update(documents.set_invoice_status(invoice, new_status))
        logger.info(f"Invoice {invoice.invoice_number}: {invoice.status.value} -> {updated.status.value}")
        return updated

    def delete_invoice(self, invoice_id: str) -> None:
        self.repository.invoices.delete(invoice_id)

    def convert_invoice(self, invoice_id: str, default_department_id: Optional[str] = None) -> List[ProductionOrder]:
        """Split an invoice into production orders and store them"""
        invoice = self.repository.invoices.get(invoice_id)
        if default_department_id is None:
            default_department_id = self.settings.DEFAULT_DEPARTMENT_ID
        drafts = orders.convert_invoice_to_orders(invoice, default_department_id)
        return self.repository.add_orders(drafts)

    # ------------------------------------------------------------------
    # Production orders
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> ProductionOrder:
        return self.repository.orders.get(order_id)

    def list_orders(self, group_id: Optional[str] = None) -> List[ProductionOrder]:
        result = self.repository.orders.list()
        if group_id is not None:
            result = [o for o in result if o.group_id == group_id]
        return result

    # ------------------------------------------------------------------
    # Packages
    # ------------------------------------------------------------------

    def create_package(
        self,
        name: str,
        items: Iterable[PackageItem] = (),
        description: str = "",
        price: Optional[float] = None,
        is_active: bool = True,
        campaign_start: Optional[date] = None,
        campaign_end: Optional[date] = None,
        image: Optional[str] = None,
    ) -> Package:
        """New package; a given ``price`` pins the sale price instead of tracking the items"""
        package = Package(
            id=generate_document_id("pkg"),
            name=name,
            description=description,
            is_active=is_active,
            campaign_start=campaign_start,
            campaign_end=campaign_end,
            image=image,
        )
        package = packages.apply_items(package, validate_package_items(items))
        if price is not None:
            package = packages.override_price(package, validate_amount("price", price))
        logger.info(f"Created package '{name}' ({len(package.items)} items, price {package.sale_price})")
        return self.repository.packages.add(package)

    def get_package(self, package_id: str) -> Package:
        return self.repository.packages.get(package_id)

    def list_packages(self, active_only: bool = False) -> List[Package]:
        result = self.repository.packages.list()
        if active_only:
            result = [p for p in result if p.is_active]
        return result

    def set_package_items(self, package_id: str, items: Iterable[PackageItem]) -> Package:
        package = packages.apply_items(self.repository.packages.get(package_id), validate_package_items(items))
        return self.repository.packages.update(package)

    def override_package_price(self, package_id: str, amount: float) -> Package:
        package = self.repository.packages.get(package_id)
        package = packages.override_price(package, validate_amount("price", amount))
        return self.repository.packages.update(package)

    def reset_package_price(self, package_id: str) -> Package:
        package = packages.reset_price(self.repository.packages.get(package_id))
        return self.repository.packages.update(package)

    def delete_package(self, package_id: str) -> None:
        self.repository.packages.delete(package_id)


back_office_service = BackOfficeService()


def get_service() -> BackOfficeService:
    """FastAPI dependency; tests override it with a fresh service"""
    return back_office_service
