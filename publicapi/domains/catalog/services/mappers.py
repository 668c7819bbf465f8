# publicapi/domains/catalog/services/mappers.py
# Conversão de entidades ORM para schemas de saída (sem efeitos colaterais)

from __future__ import annotations

from publicapi.models.catalog import CatalogBrand, CatalogItem, CatalogType
from publicapi.schemas.catalog_brands import CatalogBrandOut
from publicapi.schemas.catalog_items import CatalogItemOut
from publicapi.schemas.catalog_types import CatalogTypeOut


def map_catalog_item_to_out(item: CatalogItem) -> CatalogItemOut:
    return CatalogItemOut(
        id=item.id,
        name=item.name,
        description=item.description,
        price=float(item.price) if item.price is not None else 0.0,
        picture_uri=item.picture_uri,
        catalog_type_id=item.catalog_type_id,
        catalog_brand_id=item.catalog_brand_id,
    )


def map_catalog_brand_to_out(brand: CatalogBrand) -> CatalogBrandOut:
    return CatalogBrandOut(id=brand.id, name=brand.name)


def map_catalog_type_to_out(catalog_type: CatalogType) -> CatalogTypeOut:
    return CatalogTypeOut(id=catalog_type.id, name=catalog_type.name)
