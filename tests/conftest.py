import pytest
from fastapi.testclient import TestClient

from pos_pricing.app_factory import create_app
from pos_pricing.schemas import ProductTaxProfile, TaxPolicy
from tests.test_helpers import make_line


@pytest.fixture
def policy():
    """Store policy: tax on, 10%, prices entered without tax."""
    return TaxPolicy(
        tax_enabled=True,
        default_tax_rate_percent=10,
        prices_include_tax_by_default=False,
    )


@pytest.fixture
def mixed_cart():
    """Two lines at 10%: one tax-exclusive at 100, one tax-inclusive at 110."""
    lines = [make_line("A", "100"), make_line("B", "110")]
    profiles = {
        "A": ProductTaxProfile(tax_rate=10, tax_included=False),
        "B": ProductTaxProfile(tax_rate=10, tax_included=True),
    }
    return lines, profiles


@pytest.fixture
def client():
    """FastAPI TestClient for the pricing API."""
    with TestClient(create_app()) as test_client:
        yield test_client
