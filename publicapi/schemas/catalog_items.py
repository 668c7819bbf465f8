# publicapi/schemas/catalog_items.py
from __future__ import annotations

import uuid

from pydantic import Field, field_validator

from publicapi.schemas.common import BaseResponse, CamelModel


class CatalogItemOut(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: float
    picture_uri: str | None = None
    catalog_type_id: int
    catalog_brand_id: int


class ListPagedCatalogItemRequest(CamelModel):
    """
    Pedido de listagem paginada.

    page_size/page_index ausentes passam a 0; page_index é zero-based.
    Os valores não são validados aqui (contrato do chamador).
    """

    page_size: int = 0
    page_index: int = 0
    catalog_brand_id: int | None = None
    catalog_type_id: int | None = None
    correlation_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    @field_validator("page_size", "page_index", mode="before")
    @classmethod
    def _none_as_zero(cls, v):
        return 0 if v is None else v


class ListPagedCatalogItemResponse(BaseResponse):
    catalog_items: list[CatalogItemOut] = Field(default_factory=list)
    page_count: int = 0


class GetByIdCatalogItemResponse(BaseResponse):
    catalog_item: CatalogItemOut
