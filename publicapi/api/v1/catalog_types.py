from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from publicapi.core.deps import get_correlation_id, get_uow
from publicapi.domains.catalog.usecases.types import list_types as uc_list_types
from publicapi.infra.uow import UoW
from publicapi.schemas.catalog_types import ListCatalogTypesResponse

router = APIRouter(prefix="/catalog-types", tags=["CatalogTypeEndpoints"])
UowDep = Annotated[UoW, Depends(get_uow)]


@router.get("", response_model=ListCatalogTypesResponse, summary="List Catalog Types")
def list_catalog_types(uow: UowDep, correlation_id: Annotated[str, Depends(get_correlation_id)]):
    return uc_list_types.execute(uow, correlation_id=correlation_id)
