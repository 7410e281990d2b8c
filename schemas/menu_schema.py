from typing import List, Optional

from schemas.common_schema import CamelSchema
from schemas.categories_schema import CategoryRead, CategoryWithCount
from schemas.menu_items_schema import MenuItemRead
from schemas.settings_schema import SettingsRead


class PublicMenuResponse(CamelSchema):
    """Vista pública: marca, categorías activas e ítems visibles."""
    settings: SettingsRead
    categories: List[CategoryRead]
    items: List[MenuItemRead]


class AdminMenuResponse(CamelSchema):
    categories: List[CategoryWithCount]
    items: List[MenuItemRead]


class SeedResponse(CamelSchema):
    message: str
    categories: Optional[int] = None
    items: Optional[int] = None
