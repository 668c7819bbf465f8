from __future__ import annotations

from sqlalchemy.engine import Engine

from publicapi.infra.base import Base
from publicapi.models.catalog import CatalogBrand, CatalogItem, CatalogType


def create_db_and_tables(bind: Engine | None = None) -> None:
    if bind is None:
        from publicapi.infra.session import engine as bind

    Base.metadata.create_all(bind)


__all__ = ["CatalogBrand", "CatalogItem", "CatalogType", "create_db_and_tables"]
