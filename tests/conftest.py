"""Pytest configuration for the catalog public API tests."""

from __future__ import annotations

import os

# Antes de importar publicapi: settings são lidas uma vez
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_CATALOG", "false")
os.environ.setdefault("CATALOG_BASE_URL", "https://cdn.example.test")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_COLORS", "false")

from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from publicapi.infra.bootstrap import ensure_catalog_seed
from publicapi.models import create_db_and_tables

CATALOG_BASE_URL = os.environ["CATALOG_BASE_URL"]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def seeded_session_factory(session_factory):
    ensure_catalog_seed(session_factory)
    return session_factory


@pytest.fixture
def db(seeded_session_factory):
    with seeded_session_factory() as session:
        yield session


@pytest.fixture
def client(seeded_session_factory):
    from fastapi.testclient import TestClient

    from apps.api_main import app
    from publicapi.infra.session import get_session

    def _override_session():
        with seeded_session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    # sem `with`: o startup (create_all + seed na BD real) não corre
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def make_item(
    id_item: int,
    *,
    brand: int = 1,
    type_: int = 1,
    picture_uri: str | None = None,
    price: str = "10.00",
) -> SimpleNamespace:
    """Entidade de catálogo fora do ORM, para stores em memória."""
    return SimpleNamespace(
        id=id_item,
        name=f"Item {id_item}",
        description=f"Description {id_item}",
        price=Decimal(price),
        picture_uri=picture_uri if picture_uri is not None else f"images/products/{id_item}.png",
        catalog_type_id=type_,
        catalog_brand_id=brand,
    )


class InMemoryItemStore:
    """Store de itens que avalia as especificações em memória e regista chamadas."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.count_calls = []
        self.list_calls = []

    def count(self, spec):
        self.count_calls.append(spec)
        return sum(1 for row in self.rows if spec.is_satisfied_by(row))

    def list(self, spec):
        self.list_calls.append(spec)
        matching = [row for row in self.rows if spec.is_satisfied_by(row)]
        end = spec.skip + spec.take if spec.take else None
        return matching[spec.skip : end]
