from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from publicapi.core.deps import (
    get_catalog_item_mapper,
    get_correlation_id,
    get_uow,
    get_uri_composer,
)
from publicapi.domains.catalog.ports import EntityMapper
from publicapi.domains.catalog.services.uri_composer import UriComposer
from publicapi.domains.catalog.usecases.catalog_items.get_catalog_item import (
    execute as uc_get_catalog_item,
)
from publicapi.domains.catalog.usecases.catalog_items.list_catalog_items import (
    execute as uc_list_catalog_items,
)
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_items import (
    GetByIdCatalogItemResponse,
    ListPagedCatalogItemRequest,
    ListPagedCatalogItemResponse,
)

router = APIRouter(prefix="/catalog-items", tags=["CatalogItemEndpoints"])

UowDep = Annotated[UoW, Depends(get_uow)]
UriComposerDep = Annotated[UriComposer, Depends(get_uri_composer)]
MapperDep = Annotated[EntityMapper, Depends(get_catalog_item_mapper)]
CorrelationDep = Annotated[str, Depends(get_correlation_id)]


@router.get(
    "",
    summary="List Catalog Items (paged)",
    response_model=ListPagedCatalogItemResponse,
)
def list_catalog_items(
    uow: UowDep,
    uri_composer: UriComposerDep,
    mapper: MapperDep,
    correlation_id: CorrelationDep,
    page_size: int | None = Query(None, alias="pageSize", ge=0),
    page_index: int | None = Query(None, alias="pageIndex", ge=0),
    catalog_brand_id: int | None = Query(None, alias="catalogBrandId"),
    catalog_type_id: int | None = Query(None, alias="catalogTypeId"),
):
    request = ListPagedCatalogItemRequest(
        page_size=page_size,
        page_index=page_index,
        catalog_brand_id=catalog_brand_id,
        catalog_type_id=catalog_type_id,
        correlation_id=correlation_id,
    )
    # store resolvido por request a partir da UoW
    return uc_list_catalog_items(
        uow.catalog_items,
        request,
        uri_composer=uri_composer,
        mapper=mapper,
    )


@router.get(
    "/{catalog_item_id}",
    summary="Get Catalog Item by ID",
    response_model=GetByIdCatalogItemResponse,
)
def get_catalog_item(
    uow: UowDep,
    uri_composer: UriComposerDep,
    mapper: MapperDep,
    correlation_id: CorrelationDep,
    catalog_item_id: int = Path(..., ge=1),
):
    return uc_get_catalog_item(
        uow,
        id_item=catalog_item_id,
        correlation_id=correlation_id,
        uri_composer=uri_composer,
        mapper=mapper,
    )
