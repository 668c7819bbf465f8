from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from publicapi.models.catalog import CatalogType


class CatalogTypeReadRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[CatalogType]:
        return list(self.db.scalars(select(CatalogType).order_by(CatalogType.id)).all())
