"""
Cart Schemas for POS Pricing
============================

This module defines the Pydantic models that flow into and out of the
pricing engine: cart lines, per-product tax profiles, the store tax policy,
and the computed totals.

All models are frozen. The engine never mutates its inputs, and a
CartTotals value is recomputed on every call rather than updated in place.

Tax Fallback Precedence:
------------------------
Each tax setting on a line is resolved in this order:

1. **Product override**: the field on the product's ProductTaxProfile
2. **Store policy**: the matching field on the TaxPolicy
3. **Built-in constant**: the defaults in pos_pricing.config

A field left as None on ProductTaxProfile means "not overridden".

Catalog Field Names:
--------------------
Product rows coming from the catalog use the names ``iva_rate``,
``iva_included`` and ``is_taxable``. ProductTaxProfile accepts those as
aliases, and can be validated straight from a row object:

    profile = ProductTaxProfile.model_validate(product_row)

Usage:
------
    line = CartLine(product_id="sku-1", quantity=2, unit_price="19.99")
    policy = TaxPolicy(default_tax_rate_percent=21, prices_include_tax_by_default=True)
    profiles = {"sku-1": ProductTaxProfile(tax_rate=10)}
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from ..config import (
    DEFAULT_PRICES_INCLUDE_TAX,
    DEFAULT_TAX_ENABLED,
    DEFAULT_TAX_RATE_PERCENT,
    MAX_LINE_AMOUNT,
)


logger = logging.getLogger(__name__)

# Store settings flag -> TaxPolicy field
_STORE_FLAG_FIELDS = {
    "taxEnabled": "tax_enabled",
    "taxIncludedInPrices": "prices_include_tax_by_default",
}

_FLAG_ADAPTER = TypeAdapter(bool)


class CartLine(BaseModel):
    """
    One line of the cart as entered at the register.

    Attributes:
        product_id: Catalog identifier used to look up the tax profile
        quantity: Number of units, always positive
        unit_price: Price per unit as shown on the shelf
        line_total: unit_price * quantity, before tax decomposition.
            Computed when omitted. Both amounts are capped at MAX_LINE_AMOUNT.
    """
    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(ge=0, le=MAX_LINE_AMOUNT)
    line_total: Decimal = Field(ge=0, le=MAX_LINE_AMOUNT)

    @model_validator(mode="before")
    @classmethod
    def default_line_total(cls, data: Any) -> Any:
        """Fill line_total from unit_price and quantity when it is missing."""
        if not isinstance(data, dict) or data.get("line_total") is not None:
            return data
        try:
            unit_price = Decimal(str(data["unit_price"]))
            quantity = int(data["quantity"])
        except (KeyError, TypeError, ValueError, InvalidOperation):
            # Leave it to field validation to report what is wrong
            return data
        return {**data, "line_total": unit_price * quantity}


class ProductTaxProfile(BaseModel):
    """
    Per-product tax overrides.

    Every field is optional; None falls back to the store TaxPolicy.

    Attributes:
        tax_rate: Tax rate in percent (0-100)
        tax_included: True when the product price already contains tax
        taxable: False for tax-exempt products
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        validation_alias=AliasChoices("tax_rate", "iva_rate"),
    )
    tax_included: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("tax_included", "iva_included"),
    )
    taxable: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("taxable", "is_taxable"),
    )


class TaxPolicy(BaseModel):
    """
    Store-wide tax configuration.

    Attributes:
        tax_enabled: Master switch; when False no line is taxed
        default_tax_rate_percent: Rate for products without their own rate
        prices_include_tax_by_default: Whether prices are entered tax-inclusive
            for products that do not say otherwise
    """
    model_config = ConfigDict(frozen=True)

    tax_enabled: bool = DEFAULT_TAX_ENABLED
    default_tax_rate_percent: Decimal = Field(default=DEFAULT_TAX_RATE_PERCENT, ge=0, le=100)
    prices_include_tax_by_default: bool = DEFAULT_PRICES_INCLUDE_TAX

    @classmethod
    def from_store_settings(cls, settings: Optional[Mapping[str, Any]]) -> "TaxPolicy":
        """
        Build a policy from the store settings saved by the admin screens.

        Accepts either the bare settings mapping or one wrapped under a
        ``storeSettings`` key:

            {"storeSettings": {"taxEnabled": true, "taxRate": 0.10,
                               "taxIncludedInPrices": false}}

        ``taxRate`` is stored as a fraction (0.10 == 10%). Values above 1
        are taken as already being a percentage. Flags accept the usual
        JSON and form spellings ("false", "0", "no"). Missing or unreadable
        entries keep the built-in defaults and unreadable ones are logged.
        """
        if not isinstance(settings, Mapping):
            if settings:
                logger.warning("Ignoring store settings of type %s", type(settings).__name__)
            return cls()

        store_settings = settings.get("storeSettings", settings)
        if not isinstance(store_settings, Mapping):
            if store_settings is not None:
                logger.warning(
                    "Ignoring storeSettings of type %s", type(store_settings).__name__
                )
            return cls()

        values = {}

        for key, field_name in _STORE_FLAG_FIELDS.items():
            raw_flag = store_settings.get(key)
            if raw_flag is None:
                continue
            try:
                values[field_name] = _FLAG_ADAPTER.validate_python(raw_flag)
            except ValidationError:
                logger.warning("Ignoring invalid store %s %r", key, raw_flag)

        raw_rate = store_settings.get("taxRate")
        if raw_rate is not None:
            try:
                rate = Decimal(str(raw_rate))
            except InvalidOperation:
                rate = None
            if rate is None or not rate.is_finite() or rate < 0 or rate > 100:
                logger.warning("Ignoring invalid store taxRate %r", raw_rate)
            else:
                values["default_tax_rate_percent"] = rate * 100 if rate <= 1 else rate

        return cls(**values)


class LineBreakdown(BaseModel):
    """
    Tax decomposition of a single cart line.

    Monetary fields (line_total included) are rounded to cents for display.
    Cart totals are summed from the unrounded amounts, so the rounded lines
    may differ from the totals by a cent.
    """
    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    line_total: Decimal
    taxable: bool
    tax_rate: Decimal
    tax_included: bool
    subtotal: Decimal
    tax_amount: Decimal
    subtotal_with_tax: Decimal


class CartTotals(BaseModel):
    """
    Computed totals for a cart.

    Attributes:
        subtotal: Sum of line amounts before tax
        subtotal_with_tax: subtotal + tax_amount
        discount_amount: Total discount taken off subtotal_with_tax
        tax_amount: Sum of tax across lines
        total: max(0, subtotal_with_tax - discount_amount)
        item_count: Sum of line quantities
        lines: Per-line breakdown, in cart order
    """
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    subtotal_with_tax: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total: Decimal
    item_count: int
    lines: List[LineBreakdown] = Field(default_factory=list)
