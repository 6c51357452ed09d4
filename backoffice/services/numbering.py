"""
Human-readable identifiers for documents, line items and split groups.

Document numbers follow ``{PREFIX}-{YYYY}-{dddd}`` with a random four-digit
suffix. Nothing here checks uniqueness; the repository rejects duplicates
and the service layer retries with a fresh number.
"""
import random
import string
import uuid
from datetime import date
from typing import Optional

from backoffice.utils.helpers import epoch_millis, today

QUOTE_PREFIX = "QT"
INVOICE_PREFIX = "INV"
ORDER_PREFIX = "ORD"
GROUP_PREFIX = "GRP"

_rng = random.SystemRandom()


def generate_document_number(prefix: str, on: Optional[date] = None) -> str:
    year = (on or today()).year
    return f"{prefix}-{year}-{_rng.randint(1000, 9999)}"


def generate_quote_number(on: Optional[date] = None) -> str:
    return generate_document_number(QUOTE_PREFIX, on)


def generate_invoice_number(on: Optional[date] = None) -> str:
    return generate_document_number(INVOICE_PREFIX, on)


def generate_line_item_id() -> str:
    suffix = "".join(_rng.choice(string.ascii_lowercase + string.digits) for _ in range(9))
    return f"li-{epoch_millis()}-{suffix}"


def generate_document_id(prefix: str) -> str:
    """Opaque record id, e.g. ``inv-5f0c...``"""
    return f"{prefix}-{uuid.uuid4().hex}"


def generate_group_id() -> str:
    return f"{GROUP_PREFIX}-{epoch_millis()}"


def order_number_for_invoice(invoice_number: str) -> str:
    """ORD- followed by the invoice number with its INV- prefix removed"""
    return f"{ORDER_PREFIX}-{invoice_number.replace(INVOICE_PREFIX + '-', '', 1)}"
