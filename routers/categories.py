import logging
from fastapi import APIRouter, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, func
from datetime import datetime, timezone
from typing import List, Optional

# Importa las dependencias del Core
from core.database import SessionDep
from core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from core.security import AdminDep

# Importa los modelos y schemas
from models.categories import Category
from models.menu_items import MenuItem
from schemas.categories_schema import CategoryCreate, CategoryRead, CategoryUpdate, CategoryWithCount
from schemas.common_schema import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["CATEGORIES"])


def list_categories_with_count(session) -> List[CategoryWithCount]:
    """Todas las categorías por sort_order ascendente, con su número de ítems."""
    statement = (
        select(Category, func.count(MenuItem.id))
        .outerjoin(MenuItem, MenuItem.category_id == Category.id)
        .group_by(Category.id)
        .order_by(Category.sort_order.asc(), Category.id.asc())
    )
    return [
        CategoryWithCount(**CategoryRead.model_validate(category).model_dump(), item_count=count)
        for category, count in session.exec(statement).all()
    ]


# --- ENDPOINTS ---

# 1. Listar categorías (GET)
# Ruta: /api/categories
@router.get("", response_model=List[CategoryWithCount], summary="Listar categorías con conteo de ítems")
def list_categories(session: SessionDep):
    try:
        return list_categories_with_count(session)
    except SQLAlchemyError:
        logger.exception("Error fetching categories")
        raise StorageError("Failed to fetch categories")


# 2. Crear una nueva categoría (POST)
# Ruta: /api/categories
@router.post("", response_model=CategoryRead, summary="Crear categoría")
def create_category(category_data: CategoryCreate, session: SessionDep, admin: AdminDep):
    try:
        data = category_data.model_dump()
        if data.get("sort_order") is None:
            data["sort_order"] = 0

        category_db = Category.model_validate(data)
        session.add(category_db)
        session.commit()
        session.refresh(category_db)
        logger.info("Category %s created (%s)", category_db.id, category_db.name)
        return CategoryRead.model_validate(category_db)

    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error creating category")
        raise StorageError("Failed to create category")


# 3. Actualizar una categoría (PUT) - sobrescritura completa
# Ruta: /api/categories
@router.put("", response_model=CategoryRead, summary="Actualizar categoría")
def update_category(category_data: CategoryUpdate, session: SessionDep, admin: AdminDep):
    try:
        category_db = session.get(Category, category_data.id)
        if not category_db:
            raise NotFoundError("Category not found")

        category_db.sqlmodel_update(category_data.model_dump(exclude={"id"}))
        category_db.updated_at = datetime.now(timezone.utc)

        session.add(category_db)
        session.commit()
        session.refresh(category_db)
        return CategoryRead.model_validate(category_db)

    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error updating category %s", category_data.id)
        raise StorageError("Failed to update category")


# 4. Eliminar una categoría (DELETE)
# Ruta: /api/categories?id=
@router.delete("", response_model=SuccessResponse, summary="Eliminar categoría sin ítems")
def delete_category(
    session: SessionDep,
    admin: AdminDep,
    id: Optional[int] = Query(default=None, description="ID de la categoría a eliminar."),
):
    """
    Elimina físicamente una categoría. Se rechaza (no se propaga en cascada)
    si todavía tiene ítems asociados.
    """
    if id is None:
        raise ValidationError("Category ID is required")

    try:
        category_db = session.get(Category, id)
        if not category_db:
            raise NotFoundError("Category not found")

        items_count = session.exec(
            select(func.count(MenuItem.id)).where(MenuItem.category_id == id)
        ).one()
        if items_count > 0:
            raise ConflictError("Cannot delete category with items. Please delete or move items first.")

        session.delete(category_db)
        session.commit()
        logger.info("Category %s deleted", id)
        return SuccessResponse()

    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error deleting category %s", id)
        raise StorageError("Failed to delete category")
