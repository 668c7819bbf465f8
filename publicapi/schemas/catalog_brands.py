from __future__ import annotations

from pydantic import Field

from publicapi.schemas.common import BaseResponse, CamelModel


class CatalogBrandOut(CamelModel):
    id: int
    name: str


class ListCatalogBrandsResponse(BaseResponse):
    catalog_brands: list[CatalogBrandOut] = Field(default_factory=list)
