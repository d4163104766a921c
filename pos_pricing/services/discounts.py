"""
Discount composition.

Discounts are applied in order, each one against the balance left after the
discounts before it. Two stacked 10% discounts on 1000 take 100 and then 90
(190 in total), the way stacked promotions are priced at the register.

Every step is clamped so the balance never goes below zero, whatever the
input. Upstream validation is not assumed to have run.
"""

from decimal import Decimal
from typing import Iterable, List

from ..schemas.discounts import DiscountKind, DiscountSpec
from .money import HUNDRED, ZERO, coerce_decimal


def compose_discount_steps(base: Decimal, discounts: Iterable[DiscountSpec]) -> List[Decimal]:
    """
    Compute the amount taken by each discount in sequence.

    Args:
        base: Amount the first discount applies to (negative counts as 0)
        discounts: Discounts in the order they apply

    Returns:
        One unrounded amount per discount, in input order
    """
    remaining = max(ZERO, coerce_decimal(base))
    steps = []

    for spec in discounts:
        value = coerce_decimal(spec.value)
        if spec.kind == DiscountKind.PERCENTAGE:
            percent = min(max(value, ZERO), HUNDRED)
            step = remaining * percent / HUNDRED
        else:
            step = min(max(value, ZERO), remaining)

        steps.append(step)
        remaining = max(ZERO, remaining - step)

    return steps


def compose_discounts(base: Decimal, discounts: Iterable[DiscountSpec]) -> Decimal:
    """Total discount for a sequence; never more than max(0, base)."""
    return sum(compose_discount_steps(base, discounts), ZERO)
