from __future__ import annotations

from pydantic import Field

from publicapi.schemas.common import BaseResponse, CamelModel


class CatalogTypeOut(CamelModel):
    id: int
    name: str


class ListCatalogTypesResponse(BaseResponse):
    catalog_types: list[CatalogTypeOut] = Field(default_factory=list)
