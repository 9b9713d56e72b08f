"""Pytest configuration and fixtures."""

import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# Set test environment before anything reads settings
_tmpdir = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmpdir}/test.db"
os.environ["SESSION_BACKEND"] = "memory"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from storefront.db.base import Base, import_models
from storefront.db.session import engine, SessionLocal
from storefront.db.models.product import Product
from storefront.main import app
from storefront.services.user_service import user_service

import_models()


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    """Create a test database session."""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def products(db):
    """A small vinyl catalog; product 5 is the one the cart tests buy."""
    rows = [
        Product(id=1, title="Kind of Blue", artist="Miles Davis", price=29.99, image="kob.png", year=1959, genre="jazz", stock=4),
        Product(id=2, title="Blue Train", artist="John Coltrane", price=24.5, image="bt.png", year=1957, genre="jazz", stock=2),
        Product(id=3, title="Rumours", artist="Fleetwood Mac", price=31.0, image="rum.png", year=1977, genre="rock", stock=7),
        Product(id=4, title="Blue", artist="Joni Mitchell", price=27.0, image="blue.png", year=1971, genre="folk", stock=1),
        Product(id=5, title="Abbey Road", artist="The Beatles", price=35.0, image="ar.png", year=1969, genre="rock", stock=9),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def alice_id(db):
    return user_service.register(db, "Alice", "alice@x.com", "alice", "secret1")


@pytest.fixture
def bob_id(db):
    return user_service.register(db, "Bob", "bob@x.com", "bob", "hunter22")


@pytest.fixture
def client():
    """Create a test client (runs startup handlers)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client():
    """Factory for extra clients, each with its own cookie jar."""
    clients = []

    def _make():
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)
