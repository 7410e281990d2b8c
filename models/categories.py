from datetime import datetime, timezone
from typing import Optional, List
from sqlmodel import Field, SQLModel, Relationship


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Category(SQLModel, table=True):
    """Modelo para 'categories' (agrupación del menú)."""
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, nullable=False)
    name_ar: str = Field(max_length=100, nullable=False)
    icon: Optional[str] = Field(default=None, max_length=20)
    sort_order: int = Field(default=0, nullable=False)
    is_active: bool = Field(default=True, nullable=False)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relaciones
    menu_items: List["MenuItem"] = Relationship(back_populates="category")

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .menu_items import MenuItem
