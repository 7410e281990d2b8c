from sqlalchemy.exc import SQLAlchemyError

from routers import menu as menu_router


def test_public_menu(client, drinks, make_item):
    hidden = client.post(
        "/api/categories", json={"name": "Hidden", "nameAr": "مخفي", "sortOrder": 9}
    ).json()
    client.put(
        "/api/categories",
        json={"id": hidden["id"], "name": "Hidden", "nameAr": "مخفي", "sortOrder": 9, "isActive": False},
    )
    make_item(drinks["id"])
    make_item(drinks["id"], name="Mango Smoothie", nameAr="سموذي مانجو", description=None,
              descriptionAr=None, isAvailable=False)

    body = client.get("/api/menu").json()
    assert body["settings"]["restaurantNameEn"] == "Restaurant"
    assert [c["name"] for c in body["categories"]] == ["Drinks"]
    assert [i["name"] for i in body["items"]] == ["Iced Latte"]

    filtered = client.get("/api/menu", params={"category": hidden["id"]}).json()
    assert filtered["items"] == []

    searched = client.get("/api/menu", params={"search": "latte"}).json()
    assert [i["name"] for i in searched["items"]] == ["Iced Latte"]


def test_admin_menu_lists_disabled_items(client, drinks, make_item):
    make_item(drinks["id"], isActive=False)
    make_item(drinks["id"], name="Mango Smoothie", nameAr="سموذي مانجو", isAvailable=False)

    body = client.get("/api/menu/admin").json()
    assert body["categories"][0]["itemCount"] == 2
    assert sorted(i["name"] for i in body["items"]) == ["Iced Latte", "Mango Smoothie"]

    searched = client.get("/api/menu/admin", params={"search": "mango"}).json()
    assert [i["name"] for i in searched["items"]] == ["Mango Smoothie"]


def test_health(client):
    assert client.get("/").json() == {"message": "Restaurant menu API online"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_admin_menu_storage_failure_rolls_back(client, session, monkeypatch):
    rollbacks = []
    real_rollback = session.rollback

    def failing_query(session, **kwargs):
        raise SQLAlchemyError("connection lost")

    def tracked_rollback():
        rollbacks.append(True)
        real_rollback()

    monkeypatch.setattr(menu_router, "query_menu_items", failing_query)
    monkeypatch.setattr(session, "rollback", tracked_rollback)

    response = client.get("/api/menu/admin")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch menu"}
    assert rollbacks == [True]
