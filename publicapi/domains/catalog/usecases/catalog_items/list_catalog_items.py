# publicapi/domains/catalog/usecases/catalog_items/list_catalog_items.py
# Lista itens do catálogo com paginação e filtros por marca/tipo

from __future__ import annotations

import logging

from publicapi.domains.catalog.ports import EntityMapper, ItemStore, PictureUriComposer
from publicapi.domains.catalog.services.mappers import map_catalog_item_to_out
from publicapi.domains.catalog.services.pagination import compute_page_count
from publicapi.domains.catalog.specifications import (
    CatalogFilterPaginatedSpecification,
    CatalogFilterSpecification,
)
from publicapi.schemas.catalog_items import (
    ListPagedCatalogItemRequest,
    ListPagedCatalogItemResponse,
)

log = logging.getLogger("pubapi.catalog.list_catalog_items")


def execute(
    store: ItemStore,
    request: ListPagedCatalogItemRequest,
    *,
    uri_composer: PictureUriComposer,
    mapper: EntityMapper = map_catalog_item_to_out,
) -> ListPagedCatalogItemResponse:
    """
    Lista itens do catálogo (paginado).

    O store é passado por chamada (vem da UoW do request); nada fica
    guardado entre chamadas. Qualquer erro do store, mapper ou composer é
    registado e relançado tal como veio.
    """
    try:
        response = ListPagedCatalogItemResponse(correlation_id=request.correlation_id)

        # 1) total de itens que satisfazem o filtro (sem paginação)
        filter_spec = CatalogFilterSpecification(
            brand_id=request.catalog_brand_id,
            type_id=request.catalog_type_id,
        )
        total_items = store.count(filter_spec)
        log.info("Total items received from database: %s", total_items)

        # 2) página pedida, pela ordem do store
        paged_spec = CatalogFilterPaginatedSpecification(
            skip=request.page_index * request.page_size,
            take=request.page_size,
            brand_id=request.catalog_brand_id,
            type_id=request.catalog_type_id,
        )
        items = store.list(paged_spec)

        # 3) entidade -> DTO, depois URI absoluto por item
        response.catalog_items.extend(mapper(item) for item in items)
        for dto in response.catalog_items:
            dto.picture_uri = uri_composer.compose_pic_uri(dto.picture_uri)

        response.page_count = compute_page_count(total_items, request.page_size)
        return response

    except Exception:
        log.exception("Failed to list catalog items. Cannot move further.")
        raise
