"""
Money helpers shared by the pricing services.

Amounts are carried as Decimal end to end. Floats are converted through
their shortest string form so binary noise (0.1 + 0.2) never reaches a
total.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from ..config import MONEY_PLACES

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def round_money(amount: Decimal) -> Decimal:
    """
    Round to 2 decimal places for currency (half up).

    Precision is widened for the call so amounts with more than 26 integer
    digits still round instead of raising InvalidOperation.
    """
    amount = Decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def coerce_decimal(raw: Any) -> Decimal:
    """
    Convert loosely typed numeric input to a finite Decimal.

    Anything that is not a finite number, or a string holding one, becomes 0:
    None, blank strings, words, containers, booleans, NaN and infinities.

    Examples:
        coerce_decimal("12.5") -> Decimal("12.5")
        coerce_decimal(0.1) -> Decimal("0.1")
        coerce_decimal("abc") -> Decimal("0")
        coerce_decimal(float("inf")) -> Decimal("0")
    """
    # bool is an int subclass; a checkbox value is not an amount
    if isinstance(raw, bool):
        return ZERO

    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int):
        value = Decimal(raw)
    elif isinstance(raw, float):
        value = Decimal(repr(raw))
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return ZERO
        try:
            value = Decimal(text)
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not value.is_finite():
        return ZERO
    return value
