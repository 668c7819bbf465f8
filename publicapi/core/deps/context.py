import uuid

from publicapi.core.logging import get_correlation_id as current_correlation_id


async def get_correlation_id() -> str:
    """Correlation id do request (definido pelo middleware) ou um novo."""
    return current_correlation_id() or str(uuid.uuid4())
