import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.main import app
from core.config import settings
from core.database import enable_sqlite_foreign_keys, get_session

# Registrar todas las tablas en el metadata
from models.categories import Category
from models.menu_items import MenuItem
from models.settings import RestaurantSettings


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="auth_required")
def auth_required_fixture(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)
    yield


@pytest.fixture(name="drinks")
def drinks_fixture(client):
    response = client.post(
        "/api/categories",
        json={"name": "Drinks", "nameAr": "المشروبات", "icon": "🥤", "sortOrder": 3},
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture(name="make_item")
def make_item_fixture(client):
    """Crea un ítem de menú vía API con valores por defecto sobrescribibles."""
    def _make_item(category_id, **overrides):
        payload = {
            "name": "Iced Latte",
            "nameAr": "لاتيه مثلج",
            "description": "Cold coffee latte with milk",
            "descriptionAr": "قهوة لاتيه باردة مع الحليب",
            "price": "15.00",
            "categoryId": category_id,
        }
        payload.update(overrides)
        return client.post("/api/menu-items", json=payload)

    return _make_item
