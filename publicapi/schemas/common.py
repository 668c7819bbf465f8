from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Atributos em snake_case, JSON em camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseResponse(CamelModel):
    correlation_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
