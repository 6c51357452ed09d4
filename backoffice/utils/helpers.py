"""
General helper utilities
"""
import time
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from backoffice.config import get_settings


def round_currency(amount: float) -> float:
    """Round to two decimals, half-up. Presentation only; totals stay unrounded."""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    """Format amount in the shop currency, e.g. RM1,234.50"""
    symbol = get_settings().CURRENCY_SYMBOL
    rounded = round_currency(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def today() -> date:
    return date.today()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    return int(time.time() * 1000)
