from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import ProductModel


@pytest.fixture(autouse=True)
def _use_db(db):
    """Every test gets the (in-memory) test database."""


@pytest.fixture()
def api_client():
    """DRF APIClient speaking JSON to /api/products."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient that always sends a known X-Request-ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def sample_product():
    """A product row written straight to storage, bypassing the API."""
    return ProductModel.objects.create(
        name="Widget Alpha",
        description="A fine widget",
        price=Decimal("19.99"),
        stock_quantity=100,
    )
