"""
UseCase para listar tipos do catálogo (dimensão de filtro da listagem).
"""

from __future__ import annotations

from publicapi.domains.catalog.services.mappers import map_catalog_type_to_out
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_types import ListCatalogTypesResponse


def execute(uow: UoW, *, correlation_id: str) -> ListCatalogTypesResponse:
    types = uow.catalog_types.list_all()
    return ListCatalogTypesResponse(
        correlation_id=correlation_id,
        catalog_types=[map_catalog_type_to_out(t) for t in types],
    )
