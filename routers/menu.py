import logging
from fastapi import APIRouter, Query
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional

from core.database import SessionDep
from core.exceptions import StorageError
from core.menu_filters import ALL_CATEGORIES, active_categories, filter_admin_items, filter_public_items
from core.security import AdminDep
from routers.categories import list_categories_with_count
from routers.menu_items import query_menu_items
from routers.settings import get_or_create_settings
from schemas.categories_schema import CategoryRead
from schemas.menu_items_schema import MenuItemRead
from schemas.menu_schema import AdminMenuResponse, PublicMenuResponse
from schemas.settings_schema import SettingsRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/menu", tags=["MENU"])


@router.get("", response_model=PublicMenuResponse, summary="Menú público")
def read_public_menu(
    session: SessionDep,
    category: str = Query(default=ALL_CATEGORIES, description="ID de categoría o 'all'."),
    search: Optional[str] = Query(default=None),
):
    """Marca del restaurante, categorías activas e ítems visibles para el público."""
    try:
        settings_db = get_or_create_settings(session)
        categories = list_categories_with_count(session)
        items = [MenuItemRead.model_validate(item) for item in query_menu_items(session)]
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error building public menu")
        raise StorageError("Failed to fetch menu")

    return PublicMenuResponse(
        settings=SettingsRead.model_validate(settings_db),
        categories=[CategoryRead.model_validate(c.model_dump()) for c in active_categories(categories)],
        items=filter_public_items(items, category, search),
    )


@router.get("/admin", response_model=AdminMenuResponse, summary="Listado de administración")
def read_admin_menu(
    session: SessionDep,
    admin: AdminDep,
    search: Optional[str] = Query(default=None),
):
    try:
        categories = list_categories_with_count(session)
        items = [MenuItemRead.model_validate(item) for item in query_menu_items(session)]
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error building admin menu")
        raise StorageError("Failed to fetch menu")

    return AdminMenuResponse(categories=categories, items=filter_admin_items(items, search))
