from sqlmodel import Field
from datetime import datetime

from schemas.common_schema import CamelSchema


class LoginRequest(CamelSchema):
    password: str = Field(min_length=1)


class AccessTokenResponse(CamelSchema):
    """Schema usado para la respuesta del endpoint de login."""
    access_token: str
    token_type: str = Field(default="bearer")
    expires_at: datetime
