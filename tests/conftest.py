"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test_key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# PostgREST builder methods that return the builder itself
CHAIN_METHODS = ("select", "eq", "ilike", "order", "range", "limit")


def _make_table(data=None, count=None, error=None):
    table = Mock()
    for method in CHAIN_METHODS:
        getattr(table, method).return_value = table
    if error is not None:
        table.execute = AsyncMock(side_effect=error)
    else:
        table.execute = AsyncMock(return_value=Mock(data=data or [], count=count))
    return table


@pytest.fixture
def make_table():
    """Factory for a chainable mock of one Supabase table"""
    return _make_table


@pytest.fixture
def supabase_tables():
    """Per-table mocks; replace entries to change what a table returns"""
    return {
        "products": _make_table(),
        "vendors": _make_table(),
        "categories": _make_table(),
    }


@pytest.fixture
def mock_supabase_client(supabase_tables):
    """Mock async Supabase client"""
    client = Mock()
    client.table.side_effect = lambda name: supabase_tables[name]
    return client


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database wired to the mock client"""
    from storefront.services.database import Database

    return Database(mock_supabase_client)


@pytest.fixture
def sample_product():
    """Sample product row (price comes back as a string)"""
    return {
        "id": 1,
        "slug": "torque-wrench",
        "name": "Torque Wrench",
        "sku": "TW-100",
        "price": "19.99",
        "description": "Click-type torque wrench",
        "vendor_id": 7,
        "category_id": 3,
    }


@pytest.fixture
def unpriced_product():
    """Product row without a price"""
    return {
        "id": "b6c1d1b0-4f5e-4b49-9d7c-1d2f3a4b5c6d",
        "slug": "lift-quote",
        "name": "Two-Post Lift (call for price)",
        "sku": None,
        "price": None,
        "description": None,
        "vendor_id": None,
        "category_id": None,
    }


@pytest.fixture
def sample_vendors():
    return [{"id": 7, "name": "Acme Tools"}, {"id": 8, "name": "Bolt & Co"}]


@pytest.fixture
def sample_categories():
    return [{"id": 3, "name": "Hand Tools"}, {"id": 4, "name": "Lifts"}]


@pytest.fixture
def app(mock_database):
    """Fresh app (own cart sessions) with the database dependency overridden"""
    from api.index import create_app
    from storefront.routers.deps import get_db

    application = create_app()
    application.dependency_overrides[get_db] = lambda: mock_database
    return application


@pytest.fixture
def client(app):
    """Test client"""
    from fastapi.testclient import TestClient

    return TestClient(app)
