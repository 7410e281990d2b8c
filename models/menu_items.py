from sqlmodel import Field, Relationship, SQLModel
from typing import Optional
from datetime import datetime

from models.categories import utc_now


class MenuItem(SQLModel, table=True):
    """Modelo para 'menu_items'. Visible al público solo si is_active e is_available."""
    __tablename__ = "menu_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    name_ar: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    description_ar: Optional[str] = Field(default=None, max_length=500)
    price: float = Field(ge=0, description="Precio del ítem del menú")
    image: Optional[str] = Field(default=None, max_length=500)  # URL externa
    category_id: int = Field(foreign_key="categories.id", index=True, nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    is_available: bool = Field(default=True, nullable=False)
    sort_order: int = Field(default=0, nullable=False)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    # Relaciones
    category: Optional["Category"] = Relationship(back_populates="menu_items")

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from models.categories import Category
