"""Service fee arithmetic."""

from decimal import Decimal, ROUND_HALF_UP

YEARLY_DISCOUNT = Decimal('0.90')
CENT = Decimal('0.01')


def compute_yearly_fee(monthly_service_fee: Decimal) -> Decimal:
    """
    Twelve months at a 10% discount, rounded half-up to cents.

    >>> compute_yearly_fee(Decimal('2.99'))
    Decimal('32.29')
    """
    yearly = Decimal(monthly_service_fee) * 12 * YEARLY_DISCOUNT
    return yearly.quantize(CENT, rounding=ROUND_HALF_UP)
