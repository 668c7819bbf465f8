from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from publicapi.core.deps import get_correlation_id, get_uow
from publicapi.domains.catalog.usecases.brands import list_brands as uc_list_brands
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_brands import ListCatalogBrandsResponse

router = APIRouter(prefix="/catalog-brands", tags=["CatalogBrandEndpoints"])
UowDep = Annotated[UoW, Depends(get_uow)]


@router.get("", response_model=ListCatalogBrandsResponse, summary="List Catalog Brands")
def list_catalog_brands(uow: UowDep, correlation_id: Annotated[str, Depends(get_correlation_id)]):
    return uc_list_brands.execute(uow, correlation_id=correlation_id)
