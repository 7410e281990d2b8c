import logging
from fastapi import APIRouter
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session
from datetime import datetime, timezone

# Importa dependencias del Core
from core.config import settings as app_settings
from core.database import SessionDep
from core.exceptions import StorageError
from core.security import AdminDep

from models.settings import RestaurantSettings, SETTINGS_ID
from schemas.settings_schema import SettingsRead, SettingsUpdate

logger = logging.getLogger(__name__)

# Un único endpoint que opera sobre un recurso singular
router = APIRouter(prefix="/api/settings", tags=["SETTINGS"])


# --- FUNCIONES AUXILIARES: el ÚNICO registro ---

def get_or_create_settings(session: Session) -> RestaurantSettings:
    """
    Devuelve el registro de configuración. Si todavía no existe, lo crea
    con los valores por defecto configurados.

    Si otra petición lo inserta primero, la clave primaria fija rechaza
    este INSERT y se devuelve el registro ya guardado.
    """
    settings_db = session.get(RestaurantSettings, SETTINGS_ID)
    if settings_db:
        return settings_db

    settings_db = RestaurantSettings(
        id=SETTINGS_ID,
        restaurant_name=app_settings.DEFAULT_RESTAURANT_NAME,
        restaurant_name_en=app_settings.DEFAULT_RESTAURANT_NAME_EN,
        logo=None,
    )
    session.add(settings_db)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.info("Restaurant settings created by a concurrent request")
        return session.get(RestaurantSettings, SETTINGS_ID)

    session.refresh(settings_db)
    logger.info("Default restaurant settings created")
    return settings_db


def upsert_settings(session: Session, data: SettingsUpdate) -> RestaurantSettings:
    """Crea el registro si no existe; si existe, lo actualiza en su lugar."""
    settings_db = session.get(RestaurantSettings, SETTINGS_ID)

    if settings_db is None:
        settings_db = RestaurantSettings(id=SETTINGS_ID, **data.model_dump())
        session.add(settings_db)
        try:
            session.commit()
            session.refresh(settings_db)
            return settings_db
        except IntegrityError:
            # Creado entre la lectura y el INSERT: se actualiza ese registro
            session.rollback()
            settings_db = session.get(RestaurantSettings, SETTINGS_ID)

    settings_db.sqlmodel_update(data.model_dump())
    settings_db.updated_at = datetime.now(timezone.utc)

    session.add(settings_db)
    session.commit()
    session.refresh(settings_db)
    return settings_db


# --- ENDPOINT 1: OBTENER CONFIGURACIÓN (GET /api/settings) ---

@router.get("", response_model=SettingsRead, summary="Obtener la configuración del restaurante")
def read_settings(session: SessionDep):
    try:
        return SettingsRead.model_validate(get_or_create_settings(session))
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error fetching settings")
        raise StorageError("Failed to fetch settings")


# --- ENDPOINT 2: ACTUALIZAR CONFIGURACIÓN (PUT /api/settings) ---

@router.put("", response_model=SettingsRead, summary="Crear o actualizar la configuración del restaurante")
def update_settings(settings_data: SettingsUpdate, session: SessionDep, admin: AdminDep):
    try:
        return SettingsRead.model_validate(upsert_settings(session, settings_data))
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error updating settings")
        raise StorageError("Failed to update settings")
