from sqlmodel import Field
from typing import Optional
from datetime import datetime

from schemas.common_schema import CamelSchema


class SettingsBase(CamelSchema):
    restaurant_name: str = Field(min_length=1, max_length=100)
    restaurant_name_en: str = Field(min_length=1, max_length=100)
    logo: Optional[str] = Field(default=None, max_length=500)


class SettingsUpdate(SettingsBase):
    pass


class SettingsRead(SettingsBase):
    id: int
    created_at: datetime
    updated_at: datetime
