"""
Tests for the pricing API endpoints.
"""
from decimal import Decimal

import pytest

from pos_pricing.services.validation import (
    DISCOUNT_FIXED_MESSAGE,
    DISCOUNT_NEGATIVE_MESSAGE,
    DISCOUNT_PERCENTAGE_MESSAGE,
)


def mixed_cart_body(discounts=None):
    return {
        "lines": [
            {"product_id": "A", "quantity": 1, "unit_price": "100"},
            {"product_id": "B", "quantity": 1, "unit_price": "110"},
        ],
        "products": {
            "A": {"iva_rate": 10, "iva_included": False},
            "B": {"tax_rate": 10, "tax_included": True},
        },
        "discounts": discounts or [],
        "tax_policy": {
            "tax_enabled": True,
            "default_tax_rate_percent": "10",
            "prices_include_tax_by_default": False,
        },
    }


class TestQuoteEndpoint:
    """POST /pricing/quote"""

    def test_quote_with_percentage_discount(self, client):
        resp = client.post(
            "/pricing/quote",
            json=mixed_cart_body([{"kind": "PERCENTAGE", "value": "10"}]),
        )
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["subtotal"]) == Decimal("200.00")
        assert Decimal(data["tax_amount"]) == Decimal("20.00")
        assert Decimal(data["subtotal_with_tax"]) == Decimal("220.00")
        assert Decimal(data["discount_amount"]) == Decimal("22.00")
        assert Decimal(data["total"]) == Decimal("198.00")
        assert data["item_count"] == 2
        assert [line["product_id"] for line in data["lines"]] == ["A", "B"]

    def test_versioned_path(self, client):
        resp = client.post("/api/v1/pricing/quote", json=mixed_cart_body())
        assert resp.status_code == 200
        assert Decimal(resp.json()["total"]) == Decimal("220.00")

    def test_empty_cart(self, client):
        resp = client.post("/pricing/quote", json={"lines": []})
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["total"]) == 0
        assert data["item_count"] == 0
        assert data["lines"] == []

    def test_fixed_discount_equal_to_subtotal_is_accepted(self, client):
        resp = client.post(
            "/pricing/quote",
            json=mixed_cart_body([{"kind": "FIXED_AMOUNT", "value": "220.00"}]),
        )
        assert resp.status_code == 200
        assert Decimal(resp.json()["total"]) == 0

    def test_fixed_discount_over_subtotal_is_rejected(self, client):
        resp = client.post(
            "/pricing/quote",
            json=mixed_cart_body([{"kind": "FIXED_AMOUNT", "value": "220.01"}]),
        )
        assert resp.status_code == 422
        assert resp.json()["detail"] == {"errors": [DISCOUNT_FIXED_MESSAGE]}

    def test_percentage_over_100_is_rejected(self, client):
        resp = client.post(
            "/pricing/quote",
            json=mixed_cart_body([{"kind": "PERCENTAGE", "value": "100.01"}]),
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"] == [DISCOUNT_PERCENTAGE_MESSAGE]

    def test_stacked_discount_errors_are_numbered(self, client):
        resp = client.post(
            "/pricing/quote",
            json=mixed_cart_body([
                {"kind": "FIXED_AMOUNT", "value": "200"},
                {"kind": "FIXED_AMOUNT", "value": "30"},
            ]),
        )
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"] == [f"Discount 2: {DISCOUNT_FIXED_MESSAGE}"]

    @pytest.mark.parametrize("line", [
        {"product_id": "A", "quantity": 0, "unit_price": "10"},
        {"product_id": "A", "quantity": 1, "unit_price": "-1"},
        {"product_id": "A", "quantity": 1},
    ])
    def test_malformed_line_is_rejected(self, client, line):
        resp = client.post("/pricing/quote", json={"lines": [line]})
        assert resp.status_code == 422

    def test_missing_policy_uses_defaults(self, client):
        body = {"lines": [{"product_id": "X", "quantity": 2, "unit_price": "5"}]}
        resp = client.post("/pricing/quote", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["subtotal"]) == Decimal("10.00")
        assert Decimal(data["tax_amount"]) == Decimal("1.00")


class TestDiscountCheckEndpoint:
    """POST /pricing/discounts/validate"""

    def test_valid_discount(self, client):
        resp = client.post(
            "/pricing/discounts/validate",
            json={"value": "15", "kind": "PERCENTAGE", "taxed_subtotal": "50"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["valid"] is True
        assert data["errors"] == []
        assert Decimal(data["value"]) == Decimal("15")

    def test_invalid_discount_lists_errors(self, client):
        resp = client.post(
            "/pricing/discounts/validate",
            json={"value": -5, "kind": "FIXED_AMOUNT", "taxed_subtotal": "50"},
        )
        data = resp.json()
        assert data["valid"] is False
        assert data["errors"] == [DISCOUNT_NEGATIVE_MESSAGE]

    def test_junk_value_is_normalized_to_zero(self, client):
        resp = client.post(
            "/pricing/discounts/validate",
            json={"value": "abc", "kind": "FIXED_AMOUNT", "taxed_subtotal": "50"},
        )
        data = resp.json()
        assert data["valid"] is True
        assert Decimal(data["value"]) == 0

    def test_unknown_kind_is_rejected_by_schema(self, client):
        resp = client.post(
            "/pricing/discounts/validate",
            json={"value": 5, "kind": "BOGO", "taxed_subtotal": "50"},
        )
        assert resp.status_code == 422
