from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from publicapi.models.catalog import CatalogBrand


class CatalogBrandReadRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[CatalogBrand]:
        return list(self.db.scalars(select(CatalogBrand).order_by(CatalogBrand.id)).all())
