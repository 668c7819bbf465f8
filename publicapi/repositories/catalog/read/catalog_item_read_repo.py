from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from publicapi.domains.catalog.specifications import (
    CatalogFilterPaginatedSpecification,
    CatalogFilterSpecification,
)
from publicapi.models.catalog import CatalogItem


class CatalogItemReadRepository:
    """
    Consultas de leitura para itens do catálogo, descritas por especificações.
    Ordem por defeito: id ascendente (estável entre páginas).
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, id_item: int) -> CatalogItem | None:
        return self.db.get(CatalogItem, id_item)

    # Helpers internos --------------------------------------------
    @staticmethod
    def _apply_criteria(stmt: Select, spec: CatalogFilterSpecification) -> Select:
        for field, value in spec.criteria().items():
            stmt = stmt.where(getattr(CatalogItem, field) == value)
        return stmt

    # Consultas ---------------------------------------------------
    def count(self, spec: CatalogFilterSpecification) -> int:
        """Total de itens que satisfazem o filtro (ignora skip/take)."""
        stmt = self._apply_criteria(select(func.count()).select_from(CatalogItem), spec)
        return int(self.db.scalar(stmt) or 0)

    def list(self, spec: CatalogFilterPaginatedSpecification) -> list[CatalogItem]:
        stmt = self._apply_criteria(select(CatalogItem), spec).order_by(CatalogItem.id)
        if spec.skip:
            stmt = stmt.offset(spec.skip)
        if spec.limit is not None:
            stmt = stmt.limit(spec.limit)
        return list(self.db.scalars(stmt).all())
