"""
Discount Schemas.

Defines the discount kinds supported at the register and the DiscountSpec model that
describes one discount in a stacked sequence.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiscountKind(str, Enum):
    """How a discount value is interpreted."""
    PERCENTAGE = "PERCENTAGE"  # 0-100, applied to the remaining balance
    FIXED_AMOUNT = "FIXED_AMOUNT"  # absolute currency amount

    @classmethod
    def _missing_(cls, value):
        # Accept "percentage", " fixed_amount " and similar from UI controls
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class DiscountSpec(BaseModel):
    """One discount in a sequence, applied after every discount before it."""
    model_config = ConfigDict(frozen=True)

    kind: DiscountKind
    value: Decimal
