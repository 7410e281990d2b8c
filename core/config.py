from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Cargar variables de entorno desde .env antes de leer la configuración
load_dotenv()


class Settings(BaseSettings):
    """Configuración de la aplicación, leída del entorno y de .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Base de datos
    DATABASE_URL: str = "sqlite:///./menu.db"
    DB_ECHO: bool = False

    # Servidor
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    PORT: int = 10000

    # Acceso de administración
    AUTH_REQUIRED: bool = False
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_PASSWORD_HASH: Optional[str] = None
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Valores por defecto del registro de configuración del restaurante
    DEFAULT_RESTAURANT_NAME: str = "مطعم الذواقة"
    DEFAULT_RESTAURANT_NAME_EN: str = "Restaurant"


settings = Settings()
