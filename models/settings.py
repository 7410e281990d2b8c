from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from models.categories import utc_now

# Clave fija: un segundo INSERT choca con la clave primaria
SETTINGS_ID = 1


class RestaurantSettings(SQLModel, table=True):
    """Registro único con la marca del restaurante (nombre y logo)."""
    __tablename__ = "settings"

    id: Optional[int] = Field(default=SETTINGS_ID, primary_key=True)
    restaurant_name: str = Field(max_length=100, nullable=False)
    restaurant_name_en: str = Field(max_length=100, nullable=False)
    logo: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
