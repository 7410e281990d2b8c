import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.settings import RestaurantSettings, SETTINGS_ID
from routers.settings import get_or_create_settings, upsert_settings
from schemas.settings_schema import SettingsUpdate


def test_get_creates_default_settings(client, session):
    assert session.query(RestaurantSettings).count() == 0

    response = client.get("/api/settings")
    assert response.status_code == 200
    body = response.json()
    assert body["restaurantName"] == "مطعم الذواقة"
    assert body["restaurantNameEn"] == "Restaurant"
    assert body["logo"] is None
    assert session.query(RestaurantSettings).count() == 1

    # Una segunda lectura no duplica el registro
    assert client.get("/api/settings").json()["id"] == body["id"]
    assert session.query(RestaurantSettings).count() == 1


def test_put_before_get_creates_single_row(client, session):
    payload = {"restaurantName": "مطعم البحر", "restaurantNameEn": "Sea Restaurant", "logo": "https://example.com/logo.png"}
    first = client.put("/api/settings", json=payload)
    assert first.status_code == 200
    assert first.json()["restaurantNameEn"] == "Sea Restaurant"
    assert session.query(RestaurantSettings).count() == 1

    second = client.put("/api/settings", json={**payload, "restaurantNameEn": "Sea House", "logo": None})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["logo"] is None
    assert session.query(RestaurantSettings).count() == 1

    assert client.get("/api/settings").json()["restaurantNameEn"] == "Sea House"


def test_put_updates_default_row_in_place(client, session):
    created = client.get("/api/settings").json()
    updated = client.put(
        "/api/settings",
        json={"restaurantName": "مطعم", "restaurantNameEn": "Diner", "logo": None},
    ).json()
    assert updated["id"] == created["id"]
    assert session.query(RestaurantSettings).count() == 1


def test_put_requires_names(client):
    response = client.put("/api/settings", json={"logo": None})
    assert response.status_code == 400
    assert "error" in response.json()


def stale_first_get(session, monkeypatch):
    """La primera lectura no ve el registro, como si otra petición lo insertara justo después."""
    real_get = session.get
    calls = []

    def get(model, ident, **kwargs):
        calls.append(ident)
        if len(calls) == 1:
            return None
        return real_get(model, ident, **kwargs)

    monkeypatch.setattr(session, "get", get)


def insert_from_other_session(engine, name_en):
    with Session(engine) as other:
        other.add(RestaurantSettings(id=SETTINGS_ID, restaurant_name="مطعم", restaurant_name_en=name_en))
        other.commit()


def test_get_or_create_after_concurrent_insert_keeps_one_row(engine, session, monkeypatch):
    insert_from_other_session(engine, "First Writer")
    stale_first_get(session, monkeypatch)

    settings_db = get_or_create_settings(session)
    assert settings_db.restaurant_name_en == "First Writer"
    assert session.query(RestaurantSettings).count() == 1


def test_upsert_after_concurrent_insert_updates_that_row(engine, session, monkeypatch):
    insert_from_other_session(engine, "First Writer")
    stale_first_get(session, monkeypatch)

    settings_db = upsert_settings(
        session, SettingsUpdate(restaurant_name="مطعم البحر", restaurant_name_en="Sea House")
    )
    assert settings_db.id == SETTINGS_ID
    assert settings_db.restaurant_name_en == "Sea House"
    assert session.query(RestaurantSettings).count() == 1


def test_second_settings_row_is_rejected(session):
    session.add(RestaurantSettings(restaurant_name="أ", restaurant_name_en="A"))
    session.commit()
    session.add(RestaurantSettings(restaurant_name="ب", restaurant_name_en="B"))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()
