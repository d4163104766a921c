"""
Cart Totals Calculation.

This module ties tax decomposition and discount composition together into
the CartTotals shown at checkout:

    lines + profiles + policy -> decompose_cart -> taxed subtotal
    taxed subtotal + discounts -> compose_discounts -> total

Discounts always apply to the tax-inclusive subtotal. The total is clamped
at zero, so a discount larger than the cart (validated or not) yields a free
sale, never a negative one.
"""

import logging
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..schemas.cart import CartLine, CartTotals, TaxPolicy
from ..schemas.discounts import DiscountSpec
from .discounts import compose_discount_steps, compose_discounts
from .money import ZERO, round_money
from .tax import TaxSummary, decompose_cart
from .validation import normalize_discount_input, parse_discount_kind, validate_discount

logger = logging.getLogger(__name__)


def apply_discounts(summary: TaxSummary, discounts: Iterable[DiscountSpec]) -> CartTotals:
    """
    Apply a discount sequence to an already decomposed cart.

    Args:
        summary: Result of decompose_cart
        discounts: Discounts in the order they apply

    Returns:
        CartTotals with every monetary field rounded to cents
    """
    subtotal_with_tax = summary.subtotal_with_tax
    discount_amount = round_money(compose_discounts(subtotal_with_tax, discounts))
    total = round_money(max(ZERO, subtotal_with_tax - discount_amount))

    logger.debug(
        "Cart totals: %d item(s), taxed subtotal %s, discount %s, total %s",
        summary.item_count,
        subtotal_with_tax,
        discount_amount,
        total,
    )

    return CartTotals(
        subtotal=summary.subtotal,
        subtotal_with_tax=subtotal_with_tax,
        discount_amount=discount_amount,
        tax_amount=summary.tax_amount,
        total=total,
        item_count=summary.item_count,
        lines=summary.lines,
    )


def compute_totals_with_discounts(
    lines: Iterable[CartLine],
    product_profiles: Optional[Mapping[str, Any]],
    discounts: Iterable[DiscountSpec],
    tax_policy: Optional[TaxPolicy] = None,
) -> CartTotals:
    """Compute cart totals with a stacked discount sequence."""
    summary = decompose_cart(lines, product_profiles, tax_policy)
    return apply_discounts(summary, discounts)


def compute_totals(
    lines: Iterable[CartLine],
    product_profiles: Optional[Mapping[str, Any]],
    discount_value: Any,
    discount_kind: Any,
    tax_policy: Optional[TaxPolicy] = None,
) -> CartTotals:
    """
    Compute cart totals with a single discount.

    Args:
        lines: Cart lines (may be empty)
        product_profiles: Tax profiles keyed by product_id; may omit products
        discount_value: Raw discount value; normalized, so junk counts as 0
        discount_kind: DiscountKind or its name
        tax_policy: Store tax policy; built-in defaults when None

    Returns:
        CartTotals for the cart
    """
    value = normalize_discount_input(discount_value)
    kind = parse_discount_kind(discount_kind)

    discounts = []
    if kind is None:
        logger.warning("Unknown discount type %r, no discount applied", discount_kind)
    elif value != ZERO:
        discounts.append(DiscountSpec(kind=kind, value=value))

    return compute_totals_with_discounts(lines, product_profiles, discounts, tax_policy)


def validate_discounts(discounts: Sequence[DiscountSpec], taxed_subtotal: Decimal) -> List[str]:
    """
    Validate a stacked discount sequence against the cart.

    Each discount is checked against the balance left by the discounts
    before it, so two fixed discounts cannot together exceed the subtotal.
    With more than one discount, messages are prefixed with the discount's
    1-based position.
    """
    errors = []
    remaining = max(ZERO, taxed_subtotal)
    steps = compose_discount_steps(remaining, discounts)

    for position, (spec, step) in enumerate(zip(discounts, steps), start=1):
        for message in validate_discount(spec.value, spec.kind, remaining):
            errors.append(f"Discount {position}: {message}" if len(discounts) > 1 else message)
        remaining = max(ZERO, remaining - step)

    return errors
