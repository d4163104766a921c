"""
Services Package for POS Pricing
================================

Pure pricing functions. Nothing in this package performs I/O or keeps
state between calls, so every function is safe to call from concurrent
requests.

Modules:
--------
- **tax.py**: Per-line tax decomposition and cart aggregates
- **discounts.py**: Sequential discount composition
- **validation.py**: Discount input normalization and bounds checks
- **pricing.py**: compute_totals, tying the above together
- **money.py**: Decimal rounding and coercion helpers

Usage:
------
    from pos_pricing.services import compute_totals, validate_discount

    totals = compute_totals(lines, profiles, "10", "PERCENTAGE", policy)
    errors = validate_discount(raw_value, "FIXED_AMOUNT", totals.subtotal_with_tax)
"""

from .discounts import compose_discount_steps, compose_discounts
from .money import coerce_decimal, round_money
from .pricing import (
    apply_discounts,
    compute_totals,
    compute_totals_with_discounts,
    validate_discounts,
)
from .tax import (
    LineTax,
    LineTaxTerms,
    TaxSummary,
    decompose_cart,
    decompose_line,
    lookup_profile,
    resolve_line_tax,
)
from .validation import (
    DISCOUNT_FIXED_MESSAGE,
    DISCOUNT_NEGATIVE_MESSAGE,
    DISCOUNT_PERCENTAGE_MESSAGE,
    is_valid_discount,
    normalize_discount_input,
    parse_discount_kind,
    validate_discount,
)

__all__ = [
    # Tax
    "LineTax",
    "LineTaxTerms",
    "TaxSummary",
    "decompose_cart",
    "decompose_line",
    "lookup_profile",
    "resolve_line_tax",
    # Discounts
    "compose_discount_steps",
    "compose_discounts",
    # Validation
    "DISCOUNT_FIXED_MESSAGE",
    "DISCOUNT_NEGATIVE_MESSAGE",
    "DISCOUNT_PERCENTAGE_MESSAGE",
    "is_valid_discount",
    "normalize_discount_input",
    "parse_discount_kind",
    "validate_discount",
    # Totals
    "apply_discounts",
    "compute_totals",
    "compute_totals_with_discounts",
    "validate_discounts",
    # Money
    "coerce_decimal",
    "round_money",
]
