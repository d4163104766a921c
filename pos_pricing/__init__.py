"""
POS cart pricing engine.

Turns cart lines, product tax profiles and a store tax policy into
tax-correct, discount-correct totals, and validates discount input before
it is accepted.

    from pos_pricing import CartLine, TaxPolicy, compute_totals

    totals = compute_totals(
        [CartLine(product_id="sku-1", quantity=1, unit_price="100")],
        {},
        10,
        "PERCENTAGE",
        TaxPolicy(),
    )
"""

from .schemas import (
    CartLine,
    CartTotals,
    DiscountKind,
    DiscountSpec,
    LineBreakdown,
    ProductTaxProfile,
    TaxPolicy,
)
from .services import (
    compose_discount_steps,
    compose_discounts,
    compute_totals,
    compute_totals_with_discounts,
    is_valid_discount,
    normalize_discount_input,
    validate_discount,
    validate_discounts,
)

__all__ = [
    "CartLine",
    "CartTotals",
    "DiscountKind",
    "DiscountSpec",
    "LineBreakdown",
    "ProductTaxProfile",
    "TaxPolicy",
    "compose_discount_steps",
    "compose_discounts",
    "compute_totals",
    "compute_totals_with_discounts",
    "is_valid_discount",
    "normalize_discount_input",
    "validate_discount",
    "validate_discounts",
]
