# publicapi/domains/catalog/ports.py
"""
Contratos dos colaboradores usados pelos use cases do catálogo.

Qualquer objeto com estes métodos serve (repositório SQLAlchemy, store em
memória nos testes, ...). Implementações têm de ser seguras para uso
concorrente ou ser criadas por request.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from publicapi.domains.catalog.specifications import (
    CatalogFilterPaginatedSpecification,
    CatalogFilterSpecification,
)
from publicapi.schemas.catalog_items import CatalogItemOut


class ItemStore(Protocol):
    def count(self, spec: CatalogFilterSpecification) -> int: ...

    def list(self, spec: CatalogFilterPaginatedSpecification) -> Sequence[Any]: ...


class PictureUriComposer(Protocol):
    def compose_pic_uri(self, uri_template: str | None) -> str | None: ...


EntityMapper = Callable[[Any], CatalogItemOut]
