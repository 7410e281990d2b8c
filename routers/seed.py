import logging
from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, func, Session

from core.database import SessionDep
from core.exceptions import StorageError
from core.security import AdminDep
from core.seed_data import category_rows, item_rows
from models.categories import Category
from models.menu_items import MenuItem
from schemas.menu_schema import SeedResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/seed", tags=["SEED"])


def seed_catalog(session: Session) -> SeedResponse:
    """
    Carga el catálogo de ejemplo si no hay ninguna categoría.

    Las categorías se insertan primero (flush) para capturar sus ids; los
    ítems se construyen a partir de esos ids, todo en un único commit.
    """
    existing = session.exec(select(func.count(Category.id))).one()
    if existing > 0:
        return SeedResponse(message="Database already seeded")

    categories = {}
    for key, fields in category_rows().items():
        category_db = Category(**fields)
        session.add(category_db)
        categories[key] = category_db
    session.flush()

    category_ids = {key: category_db.id for key, category_db in categories.items()}
    items = [MenuItem(**fields) for fields in item_rows(category_ids)]
    session.add_all(items)
    session.commit()

    logger.info("Catalog seeded with %s categories and %s items", len(categories), len(items))
    return SeedResponse(
        message="Database seeded successfully",
        categories=len(categories),
        items=len(items),
    )


@router.get("", response_model=SeedResponse, response_model_exclude_none=True, summary="Poblar el catálogo de ejemplo")
def seed(session: SessionDep, admin: AdminDep):
    try:
        return seed_catalog(session)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error seeding database")
        raise StorageError("Failed to seed database")
