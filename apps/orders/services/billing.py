"""Pricing, billing periods and mock payment gateway identifiers."""

import calendar
import secrets
import string
import time
from datetime import datetime
from decimal import Decimal
from typing import Tuple

from apps.catalog.models import CatalogProduct
from ..models import BillingCycle

_ID_ALPHABET = string.ascii_lowercase + string.digits


def add_months(moment: datetime, months: int) -> datetime:
    """
    Shift ``moment`` by whole calendar months.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29), never a day in March.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def billing_period(billing_cycle: str, start: datetime) -> Tuple[datetime, datetime]:
    """Return (start, end) of the first period for a billing cycle."""
    months = 12 if billing_cycle == BillingCycle.YEARLY else 1
    return start, add_months(start, months)


def subscription_price(catalog_product: CatalogProduct, billing_cycle: str) -> Decimal:
    if billing_cycle == BillingCycle.YEARLY:
        return catalog_product.yearly_service_fee or Decimal('0.00')
    return catalog_product.monthly_service_fee or Decimal('0.00')


def _mock_gateway_id(prefix: str) -> str:
    millis = int(time.time() * 1000)
    suffix = ''.join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{prefix}_{millis}_{suffix}"


def new_gateway_subscription_id() -> str:
    return _mock_gateway_id('sub')


def new_gateway_transaction_id() -> str:
    return _mock_gateway_id('txn')
