"""
UseCase para listar marcas do catálogo (dimensão de filtro da listagem).
"""

from __future__ import annotations

from publicapi.domains.catalog.services.mappers import map_catalog_brand_to_out
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_brands import ListCatalogBrandsResponse


def execute(uow: UoW, *, correlation_id: str) -> ListCatalogBrandsResponse:
    brands = uow.catalog_brands.list_all()
    return ListCatalogBrandsResponse(
        correlation_id=correlation_id,
        catalog_brands=[map_catalog_brand_to_out(b) for b in brands],
    )
