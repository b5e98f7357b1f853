"""Common schema bases used across API endpoints.

Every request and response body uses camelCase property names on the wire
while Python code keeps snake_case attribute names.

Reference:
    - src/application/dtos/__init__.py
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request bodies: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CamelResponse(CamelModel):
    """Base for response bodies built from application DTOs.

    DTOs are plain dataclasses whose attribute names match the schema field
    names, so conversion is attribute-driven.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_dto(cls, dto: Any) -> Self:
        """Convert an application DTO (dataclass) to this response schema."""
        return cls.model_validate(dto)
