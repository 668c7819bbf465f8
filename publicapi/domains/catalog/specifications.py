# publicapi/domains/catalog/specifications.py
"""
Especificações de consulta do catálogo.

Descrevem QUE itens interessam (igualdade em marca/tipo, janela skip/take)
sem depender do motor de armazenamento. O repositório SQLAlchemy traduz
`criteria()` para WHERE; stores em memória usam `is_satisfied_by()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CatalogFilterSpecification:
    """AND de filtros opcionais; `None` = sem filtro nessa dimensão."""

    brand_id: int | None = None
    type_id: int | None = None

    def criteria(self) -> dict[str, int]:
        crit: dict[str, int] = {}
        # 0 é um filtro válido, só None significa "todos"
        if self.brand_id is not None:
            crit["catalog_brand_id"] = self.brand_id
        if self.type_id is not None:
            crit["catalog_type_id"] = self.type_id
        return crit

    def is_satisfied_by(self, item: Any) -> bool:
        return all(getattr(item, field) == value for field, value in self.criteria().items())


@dataclass(frozen=True, slots=True)
class CatalogFilterPaginatedSpecification(CatalogFilterSpecification):
    """
    Filtro + janela de paginação.

    take == 0 significa sem limite (todas as linhas a partir de skip).
    """

    skip: int = 0
    take: int = 0

    @property
    def limit(self) -> int | None:
        return self.take if self.take > 0 else None
