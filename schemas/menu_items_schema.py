import math
from decimal import Decimal, InvalidOperation
from typing import Optional, Any
from datetime import datetime

from pydantic import field_validator
from sqlmodel import Field

from schemas.common_schema import CamelSchema
from schemas.categories_schema import CategoryRead

PRICE_ERROR = "Price must be a non-negative number"


def parse_price(value: Any) -> float:
    """
    Convierte el precio recibido (número o texto) a float.

    Nunca sustituye un valor inválido por 0: texto no numérico, NaN,
    infinito, booleanos y negativos se rechazan con ValueError.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(PRICE_ERROR)
    if isinstance(value, str):
        value = value.strip()
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(PRICE_ERROR)
    if not amount.is_finite() or amount < 0:
        raise ValueError(PRICE_ERROR)

    price = float(amount)
    if math.isinf(price):
        raise ValueError(PRICE_ERROR)
    return price


class MenuItemBase(CamelSchema):
    name: str = Field(min_length=1, max_length=100)
    name_ar: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    description_ar: Optional[str] = Field(default=None, max_length=500)
    price: float
    image: Optional[str] = Field(default=None, max_length=500)  # URL externa
    category_id: int

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value):
        return parse_price(value)


class MenuItemCreate(MenuItemBase):
    sort_order: Optional[int] = 0
    is_active: bool = True
    is_available: bool = True


class MenuItemUpdate(MenuItemBase):
    """Sobrescritura completa, incluidos precio y ambos indicadores."""
    id: int
    sort_order: int = 0
    is_active: bool
    is_available: bool


class MenuItemRead(MenuItemBase):
    id: int
    sort_order: int
    is_active: bool
    is_available: bool
    created_at: datetime
    updated_at: datetime
    category: Optional[CategoryRead] = None
