import logging
import sys
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import uvicorn

# --- Configuración de Path para Módulos Hermanos ---
ROOT_DIR = Path(__file__).parent.parent
sys.path.append(str(ROOT_DIR))
# ------------------------------------------------------------------------

from core.config import settings
from core.database import create_db_and_tables, engine, ping_database
from core.exceptions import MenuAppError

# --- Importación de Routers ---
from routers import auth
from routers import categories
from routers import menu
from routers import menu_items
from routers import seed
from routers import settings as settings_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


app = FastAPI(
    title="API Menú del Restaurante",
    version="1.0.0",
    description="Catálogo público de categorías e ítems y administración del menú.",
)


@app.on_event("startup")
def startup():
    """
    Función que se ejecuta al iniciar la aplicación.
    1. Configura el logging.
    2. Crea las tablas.
    3. Realiza un 'ping' a la DB.
    """
    configure_logging()
    logger.info("Running startup hooks...")

    create_db_and_tables()
    logger.info("Tables verified")

    ping_database(engine)


# --- Manejo de errores: todas las respuestas de error son {"error": "..."} ---

@app.exception_handler(MenuAppError)
async def menu_app_error_handler(request: Request, exc: MenuAppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


# --- Configuración de CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Inclusión de Routers (Rutas de la API) ---
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(menu_items.router)
app.include_router(settings_router.router)
app.include_router(seed.router)
app.include_router(menu.router)


# --- Ruta Raíz de Bienvenida ---
@app.get("/", tags=["API Health"])
def read_root():
    """Verifica que la API está en línea."""
    return {"message": "Restaurant menu API online"}


# --- Ejecución Local ---
if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
