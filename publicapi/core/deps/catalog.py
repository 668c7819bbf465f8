# Colaboradores do catálogo resolvidos uma vez por processo
from functools import lru_cache

from publicapi.core.config import get_settings
from publicapi.domains.catalog.ports import EntityMapper
from publicapi.domains.catalog.services.mappers import map_catalog_item_to_out
from publicapi.domains.catalog.services.uri_composer import UriComposer


@lru_cache
def get_uri_composer() -> UriComposer:
    return UriComposer(get_settings().CATALOG_BASE_URL)


def get_catalog_item_mapper() -> EntityMapper:
    return map_catalog_item_to_out
