from .uow import get_uow
from .catalog import get_catalog_item_mapper, get_uri_composer
from .context import get_correlation_id

__all__ = [
    "get_uow",
    "get_uri_composer",
    "get_catalog_item_mapper",
    "get_correlation_id",
]
