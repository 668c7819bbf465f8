# publicapi/domains/catalog/usecases/catalog_items/get_catalog_item.py
from __future__ import annotations

from publicapi.core.errors import NotFound
from publicapi.domains.catalog.ports import EntityMapper, PictureUriComposer
from publicapi.domains.catalog.services.mappers import map_catalog_item_to_out
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_items import GetByIdCatalogItemResponse


def execute(
    uow: UoW,
    *,
    id_item: int,
    correlation_id: str,
    uri_composer: PictureUriComposer,
    mapper: EntityMapper = map_catalog_item_to_out,
) -> GetByIdCatalogItemResponse:
    item = uow.catalog_items.get(id_item)
    if item is None:
        raise NotFound(f"Catalog item {id_item} not found.")

    dto = mapper(item)
    dto.picture_uri = uri_composer.compose_pic_uri(dto.picture_uri)
    return GetByIdCatalogItemResponse(correlation_id=correlation_id, catalog_item=dto)
