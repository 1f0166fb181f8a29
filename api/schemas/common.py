# api/schemas/common.py
from typing import Annotated, Generic, List, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Strict so that "5" or 5.0 are rejected rather than coerced
PositiveId = Annotated[int, Field(strict=True, gt=0)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Both spellings are accepted on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginatedResponse(CamelModel, Generic[T]):
    item: List[T]
    total: int
    page: int
    limit: int
    has_next_page: bool
