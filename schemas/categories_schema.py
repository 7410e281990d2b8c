from sqlmodel import Field
from typing import Optional
from datetime import datetime

from schemas.common_schema import CamelSchema


# Base Schema (Campos de entrada/negocio)
class CategoryBase(CamelSchema):
    name: str = Field(min_length=1, max_length=100)
    name_ar: str = Field(min_length=1, max_length=100)
    icon: Optional[str] = Field(default=None, max_length=20)


class CategoryCreate(CategoryBase):
    # Un sortOrder omitido (o null) se guarda como 0
    sort_order: Optional[int] = 0


class CategoryUpdate(CategoryBase):
    """Sobrescritura completa de una categoría identificada por id."""
    id: int
    sort_order: int = 0
    is_active: bool


# Schema para la lectura
class CategoryRead(CategoryBase):
    id: int
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CategoryWithCount(CategoryRead):
    item_count: int = 0
