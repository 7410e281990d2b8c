import logging
from fastapi import APIRouter, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlmodel import select, col
from typing import List, Optional
from datetime import datetime, timezone

# --- Importaciones de Core ---
from core.database import SessionDep
from core.exceptions import NotFoundError, StorageError, ValidationError
from core.menu_filters import PUBLIC_SEARCH_FIELDS, matches_search
from core.security import AdminDep

# --- Importaciones de Modelos y Schemas ---
from models.menu_items import MenuItem
from models.categories import Category
from schemas.menu_items_schema import MenuItemCreate, MenuItemRead, MenuItemUpdate
from schemas.common_schema import SuccessResponse

logger = logging.getLogger(__name__)

# --- Configuración del Router ---
router = APIRouter(prefix="/api/menu-items", tags=["MENU ITEMS"])


def query_menu_items(
    session,
    category_id: Optional[int] = None,
    search: Optional[str] = None,
    active_only: bool = False,
) -> List[MenuItem]:
    """
    Consulta de ítems con su categoría cargada.

    Orden: sort_order ascendente y, como desempate, los más recientes primero.
    La búsqueda se aplica sobre las filas ya leídas (el listado no se pagina):
    '%' y '_' son literales y las mayúsculas se comparan con casefold de
    Python, igual que en /api/menu, también fuera del ASCII en SQLite.
    """
    query = select(MenuItem).options(selectinload(MenuItem.category))

    if category_id is not None:
        query = query.where(MenuItem.category_id == category_id)

    if active_only:
        query = query.where(MenuItem.is_active == True, MenuItem.is_available == True)

    query = query.order_by(
        col(MenuItem.sort_order).asc(),
        col(MenuItem.created_at).desc(),
        col(MenuItem.id).desc(),
    )
    items = session.exec(query).all()

    if search:
        items = [item for item in items if matches_search(item, search, PUBLIC_SEARCH_FIELDS)]
    return items


def ensure_category_exists(session, category_id: int) -> Category:
    category_db = session.get(Category, category_id)
    if not category_db:
        raise ValidationError(f"Category {category_id} does not exist")
    return category_db


def integrity_error(session, item_data, action: str):
    """
    Traduce un IntegrityError tras el rollback: si la categoría ya no existe
    es una referencia colgante (400); cualquier otra violación es StorageError.
    """
    session.rollback()
    if session.get(Category, item_data.category_id) is None:
        logger.warning("Menu item rejected: category %s no longer exists", item_data.category_id)
        return ValidationError(f"Category {item_data.category_id} does not exist")

    logger.exception("Integrity error while trying to %s menu item", action)
    return StorageError(f"Failed to {action} menu item")


# ======================================================================
# ENDPOINT 1: LISTAR Y FILTRAR ÍTEMS DE MENÚ (GET /api/menu-items)
# ======================================================================

@router.get("", response_model=List[MenuItemRead], summary="Listar y filtrar ítems de menú")
def read_menu_items(
    session: SessionDep,
    category_id: Optional[int] = Query(default=None, alias="categoryId", description="Filtrar por ID de categoría."),
    search: Optional[str] = Query(default=None, description="Buscar en nombres y descripciones (parcial, sin distinguir mayúsculas)."),
    active_only: bool = Query(default=False, alias="activeOnly", description="Solo ítems activos y disponibles."),
):
    try:
        items = query_menu_items(session, category_id=category_id, search=search, active_only=active_only)
        return [MenuItemRead.model_validate(item) for item in items]
    except SQLAlchemyError:
        logger.exception("Error fetching menu items")
        raise StorageError("Failed to fetch menu items")


# ----------------------------------------------------------------------
# ENDPOINT 2: CREAR ÍTEM DE MENÚ (POST /api/menu-items)
# ----------------------------------------------------------------------

@router.post("", response_model=MenuItemRead, summary="Crear nuevo ítem de menú")
def create_menu_item(item_data: MenuItemCreate, session: SessionDep, admin: AdminDep):
    try:
        ensure_category_exists(session, item_data.category_id)

        data = item_data.model_dump()
        if data.get("sort_order") is None:
            data["sort_order"] = 0

        menu_db = MenuItem.model_validate(data)
        session.add(menu_db)
        session.commit()
        session.refresh(menu_db)
        logger.info("Menu item %s created in category %s", menu_db.id, menu_db.category_id)
        return MenuItemRead.model_validate(menu_db)

    except IntegrityError:
        raise integrity_error(session, item_data, "create")
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error creating menu item")
        raise StorageError("Failed to create menu item")


# ----------------------------------------------------------------------
# ENDPOINT 3: ACTUALIZAR ÍTEM DE MENÚ (PUT /api/menu-items)
# ----------------------------------------------------------------------

@router.put("", response_model=MenuItemRead, summary="Actualizar ítem de menú (sobrescritura completa)")
def update_menu_item(item_data: MenuItemUpdate, session: SessionDep, admin: AdminDep):
    try:
        menu_db = session.get(MenuItem, item_data.id)
        if not menu_db:
            raise NotFoundError("Menu item not found")

        ensure_category_exists(session, item_data.category_id)

        menu_db.sqlmodel_update(item_data.model_dump(exclude={"id"}))
        menu_db.updated_at = datetime.now(timezone.utc)

        session.add(menu_db)
        session.commit()
        session.refresh(menu_db)
        return MenuItemRead.model_validate(menu_db)

    except IntegrityError:
        raise integrity_error(session, item_data, "update")
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error updating menu item %s", item_data.id)
        raise StorageError("Failed to update menu item")


# ----------------------------------------------------------------------
# ENDPOINT 4: ELIMINAR ÍTEM DE MENÚ (DELETE /api/menu-items?id=)
# ----------------------------------------------------------------------

@router.delete("", response_model=SuccessResponse, summary="Eliminar ítem de menú")
def delete_menu_item(
    session: SessionDep,
    admin: AdminDep,
    id: Optional[int] = Query(default=None, description="ID del ítem a eliminar."),
):
    if id is None:
        raise ValidationError("Menu item ID is required")

    try:
        menu_db = session.get(MenuItem, id)
        if not menu_db:
            raise NotFoundError("Menu item not found")

        session.delete(menu_db)
        session.commit()
        logger.info("Menu item %s deleted", id)
        return SuccessResponse()

    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting menu item %s", id)
        raise StorageError("Failed to delete menu item")
