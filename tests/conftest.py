"""
Pytest fixtures for the inventory API test suite.

Provides:
- a fresh file-backed SQLite database per test (threads need real connections)
- sessions and a session factory bound to it
- a FastAPI TestClient with ``get_db`` pointed at the test database
- product / seller factories
"""

import os

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("PRODUCTS_USERNAME", "admin")
os.environ.setdefault("PRODUCTS_PASSWORD", "s3cret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import itertools
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from inventory_api.database import Base, build_engine, get_db
from inventory_api.main import app
from inventory_api.models.brands import Brand  # noqa: F401
from inventory_api.models.categories import Category  # noqa: F401
from inventory_api.models.products import Product
from inventory_api.models.sellers import Seller
from inventory_api.services.factories import generate_product_code

_sku_counter = itertools.count(1)


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'inventory_test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/auth/products",
        json={"username": "admin", "password": "s3cret"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def make_product(db):
    def _make_product(stock: int = 0, **overrides) -> Product:
        n = next(_sku_counter)
        fields = {
            "name": f"Product {n}",
            "category": "Tools",
            "brand": "Acme",
            "price": Decimal("9.99"),
            "stock": stock,
            "sku": f"SKU-{n:05d}",
            "code": generate_product_code(),
        }
        fields.update(overrides)

        product = Product(**fields)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make_product


@pytest.fixture
def make_seller(db):
    def _make_seller(**overrides) -> Seller:
        fields = {
            "name": "Jane Seller",
            "email": "jane@example.com",
            "phone": "+1 555 0100",
            "address": "1 Market Street",
        }
        fields.update(overrides)

        seller = Seller(**fields)
        db.add(seller)
        db.commit()
        db.refresh(seller)
        return seller

    return _make_seller


@pytest.fixture
def stock_of(session_factory):
    """Read a product's stock through a fresh session."""

    def _stock_of(product_id: int) -> int:
        with session_factory() as session:
            return session.query(Product.stock).filter(Product.id == product_id).scalar()

    return _stock_of


@pytest.fixture
def record_count(session_factory):
    def _record_count(model, product_id: int) -> int:
        with session_factory() as session:
            return session.query(model).filter(model.product_id == product_id).count()

    return _record_count

