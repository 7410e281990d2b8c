from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class CamelSchema(SQLModel):
    """Base de los schemas del API: snake_case en Python, camelCase en JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelSchema):
    success: bool = True


class MessageResponse(CamelSchema):
    message: str
