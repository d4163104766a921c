"""
Tax decomposition for cart lines.

For each line this module decides whether tax applies and in which
direction, then splits the line amount into its pre-tax and tax parts:

- Tax-exclusive price: tax is added on top (subtotal * rate / 100).
- Tax-inclusive price: the subtotal is extracted by division
  (price / (1 + rate / 100)); the tax is what remains.

Product overrides win over the store policy, which wins over the built-in
defaults in pos_pricing.config. Missing or malformed catalog data never
blocks a sale; the line falls back to the policy instead.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from ..schemas.cart import CartLine, LineBreakdown, ProductTaxProfile, TaxPolicy
from .money import HUNDRED, ZERO, round_money

logger = logging.getLogger(__name__)

ONE = Decimal("1")


@dataclass(frozen=True)
class LineTaxTerms:
    """Effective tax settings for one line after fallbacks are applied."""

    apply_tax: bool
    rate: Decimal
    included: bool


@dataclass(frozen=True)
class LineTax:
    """Unrounded decomposition of one line amount."""

    terms: LineTaxTerms
    subtotal: Decimal
    tax: Decimal
    subtotal_with_tax: Decimal


@dataclass(frozen=True)
class TaxSummary:
    """
    Cart-level tax aggregates, rounded to cents.

    subtotal_with_tax is the sum of the two rounded aggregates rather than
    a rounding of the exact sum, so the receipt always adds up. It can be one
    cent above round(subtotal + tax) when both parts round up: 3 x 19.955 at
    10% exclusive gives 59.87 + 5.99 = 65.86 where the exact sum is 65.8515.
    """

    subtotal: Decimal
    tax_amount: Decimal
    item_count: int
    lines: List[LineBreakdown] = field(default_factory=list)

    @property
    def subtotal_with_tax(self) -> Decimal:
        """Tax-inclusive subtotal (subtotal + tax)."""
        return self.subtotal + self.tax_amount


def resolve_line_tax(
    profile: Optional[ProductTaxProfile],
    policy: TaxPolicy,
) -> LineTaxTerms:
    """
    Resolve the tax settings for a line.

    Args:
        profile: The product's tax overrides, or None when the product is unknown
        policy: Store tax policy used for anything the product does not set

    Returns:
        LineTaxTerms with the effective apply_tax / rate / included values
    """
    taxable = True
    rate = policy.default_tax_rate_percent
    included = policy.prices_include_tax_by_default

    if profile is not None:
        if profile.taxable is not None:
            taxable = profile.taxable
        if profile.tax_rate is not None:
            rate = profile.tax_rate
        if profile.tax_included is not None:
            included = profile.tax_included

    return LineTaxTerms(
        apply_tax=policy.tax_enabled and taxable,
        rate=rate,
        included=included,
    )


def decompose_line(
    line: CartLine,
    profile: Optional[ProductTaxProfile],
    policy: TaxPolicy,
) -> LineTax:
    """Split a line amount into subtotal and tax without rounding."""
    terms = resolve_line_tax(profile, policy)
    amount = line.line_total

    if not terms.apply_tax:
        return LineTax(terms, subtotal=amount, tax=ZERO, subtotal_with_tax=amount)

    if terms.included:
        subtotal = amount / (ONE + terms.rate / HUNDRED)
        return LineTax(terms, subtotal=subtotal, tax=amount - subtotal, subtotal_with_tax=amount)

    tax = amount * terms.rate / HUNDRED
    return LineTax(terms, subtotal=amount, tax=tax, subtotal_with_tax=amount + tax)


def lookup_profile(
    profiles: Optional[Mapping[str, Any]],
    product_id: str,
) -> Optional[ProductTaxProfile]:
    """
    Find the tax profile for a product.

    Entries may be ProductTaxProfile instances, plain dicts, or catalog row
    objects. Returns None (use the policy) when the product is missing or its
    entry does not validate.
    """
    if not profiles:
        return None

    raw = profiles.get(product_id)
    if raw is None:
        logger.debug("No tax profile for product %s, using policy defaults", product_id)
        return None
    if isinstance(raw, ProductTaxProfile):
        return raw

    try:
        return ProductTaxProfile.model_validate(raw)
    except ValidationError as e:
        logger.warning(
            "Invalid tax profile for product %s (%d error(s)), using policy defaults",
            product_id,
            e.error_count(),
        )
        return None


def _line_breakdown(line: CartLine, decomposed: LineTax) -> LineBreakdown:
    subtotal = round_money(decomposed.subtotal)
    tax = round_money(decomposed.tax)
    return LineBreakdown(
        product_id=line.product_id,
        quantity=line.quantity,
        line_total=round_money(line.line_total),
        taxable=decomposed.terms.apply_tax,
        tax_rate=decomposed.terms.rate,
        tax_included=decomposed.terms.included,
        subtotal=subtotal,
        tax_amount=tax,
        subtotal_with_tax=subtotal + tax,
    )


def decompose_cart(
    lines: Iterable[CartLine],
    profiles: Optional[Mapping[str, Any]],
    policy: Optional[TaxPolicy] = None,
) -> TaxSummary:
    """
    Decompose every line and aggregate the cart's tax figures.

    Per-line amounts are summed unrounded; only the aggregates are rounded,
    so rounding error does not compound across lines.

    Args:
        lines: Cart lines (may be empty)
        profiles: Tax profiles keyed by product_id; may omit products
        policy: Store tax policy. None means tax enabled at the built-in
                default rate with tax-exclusive prices.

    Returns:
        TaxSummary with rounded subtotal/tax, item count and line breakdown
    """
    if policy is None:
        policy = TaxPolicy()
        logger.warning(
            "No tax policy supplied, using built-in default rate of %s%%",
            policy.default_tax_rate_percent,
        )

    subtotal = ZERO
    tax = ZERO
    item_count = 0
    breakdown = []

    for line in lines:
        decomposed = decompose_line(line, lookup_profile(profiles, line.product_id), policy)
        subtotal += decomposed.subtotal
        tax += decomposed.tax
        item_count += line.quantity
        breakdown.append(_line_breakdown(line, decomposed))

    return TaxSummary(
        subtotal=round_money(subtotal),
        tax_amount=round_money(tax),
        item_count=item_count,
        lines=breakdown,
    )
