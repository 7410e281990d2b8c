import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from core.config import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite no valida claves foráneas salvo que se active por conexión."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    new_engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    enable_sqlite_foreign_keys(new_engine)
    return new_engine


# El motor de la base de datos
engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)


def create_db_and_tables(target_engine: Engine = engine):
    """Crea todas las tablas definidas en los modelos si no existen."""
    # Importar TODOS los modelos aquí para registrarlos en el metadata
    from models.categories import Category
    from models.menu_items import MenuItem
    from models.settings import RestaurantSettings

    SQLModel.metadata.create_all(target_engine)


def get_session():
    """Generador para obtener la sesión de la base de datos."""
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def ping_database(target_engine: Engine) -> bool:
    """
    Ejecuta una consulta mínima para comprobar (o despertar) la conexión
    con la base de datos.
    """
    logger.info("Pinging database...")
    try:
        with Session(target_engine) as session:
            session.execute(text("SELECT 1"))
        logger.info("Database ping succeeded")
        return True
    except Exception:
        logger.exception("Database ping failed")
        return False
