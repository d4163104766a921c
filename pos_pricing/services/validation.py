"""
Discount input validation.

The discount field at the register is free-form, so its value is first
normalized to a finite number and then checked against the cart:

- a discount can never be negative
- a percentage discount can be at most 100%
- a fixed discount can be at most the tax-inclusive subtotal

The boundaries themselves (0, exactly 100%, exactly the subtotal) are valid.
All rules are checked independently so one call reports every problem.
"""

import logging
from decimal import Decimal
from typing import Any, List, Optional

from ..schemas.discounts import DiscountKind
from .money import HUNDRED, ZERO, coerce_decimal

logger = logging.getLogger(__name__)

DISCOUNT_NEGATIVE_MESSAGE = "Discount must be a positive number"
DISCOUNT_PERCENTAGE_MESSAGE = "Percentage discount cannot exceed 100%"
DISCOUNT_FIXED_MESSAGE = "Fixed discount cannot exceed the tax-inclusive subtotal"


def normalize_discount_input(raw: Any) -> Decimal:
    """
    Turn raw discount input into a finite Decimal.

    Numbers and numeric strings keep their value; anything else (None,
    words, NaN, infinities, containers) becomes 0.
    """
    return coerce_decimal(raw)


def parse_discount_kind(kind: Any) -> Optional[DiscountKind]:
    """Return the DiscountKind for an enum member or its name, else None."""
    try:
        return DiscountKind(kind)
    except (ValueError, TypeError):
        return None


def validate_discount(value: Any, kind: Any, taxed_subtotal: Any) -> List[str]:
    """
    Check a discount against the bounds for its kind.

    Args:
        value: Discount value (normalized before checking)
        kind: DiscountKind or its name ("PERCENTAGE", "FIXED_AMOUNT")
        taxed_subtotal: Tax-inclusive subtotal the discount applies to

    Returns:
        List of violation messages; empty when the discount is valid
    """
    errors = []
    amount = normalize_discount_input(value)
    subtotal = normalize_discount_input(taxed_subtotal)
    discount_kind = parse_discount_kind(kind)

    if discount_kind is None:
        errors.append(f"Unknown discount type: {kind!r}")
    if amount < ZERO:
        errors.append(DISCOUNT_NEGATIVE_MESSAGE)
    if discount_kind == DiscountKind.PERCENTAGE and amount > HUNDRED:
        errors.append(DISCOUNT_PERCENTAGE_MESSAGE)
    if discount_kind == DiscountKind.FIXED_AMOUNT and amount > subtotal:
        errors.append(DISCOUNT_FIXED_MESSAGE)

    if errors:
        logger.debug("Discount %s %s rejected: %s", amount, kind, errors)
    return errors


def is_valid_discount(value: Any, kind: Any, taxed_subtotal: Any) -> bool:
    """True when validate_discount reports no violations."""
    return not validate_discount(value, kind, taxed_subtotal)
