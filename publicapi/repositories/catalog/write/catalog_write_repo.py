from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from publicapi.models.catalog import CatalogBrand, CatalogItem, CatalogType


class CatalogWriteRepository:
    """
    Escritas do catálogo (usadas pelo seed no arranque).
    Não faz commit: isso é responsabilidade da UoW.
    """

    def __init__(self, db: Session):
        self.db = db

    def is_empty(self) -> bool:
        return not self.db.scalar(select(func.count()).select_from(CatalogItem))

    def add_brands(self, names: Iterable[tuple[int, str]]) -> int:
        rows = [CatalogBrand(id=id_brand, name=name) for id_brand, name in names]
        self.db.add_all(rows)
        return len(rows)

    def add_types(self, names: Iterable[tuple[int, str]]) -> int:
        rows = [CatalogType(id=id_type, name=name) for id_type, name in names]
        self.db.add_all(rows)
        return len(rows)

    def add_items(self, items: Iterable[dict]) -> int:
        rows = [CatalogItem(**data) for data in items]
        self.db.add_all(rows)
        self.db.flush()
        return len(rows)
