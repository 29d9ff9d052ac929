def _save(client, firebase_uid="uid-1", **fields):
    payload = {"firebase_uid": firebase_uid}
    payload.update(fields)
    return client.post("/settings", json=payload)


def test_settings_missing_returns_null(client, make_user):
    make_user(client)

    response = client.get("/settings/uid-1")

    assert response.status_code == 200
    assert response.json() is None


def test_save_settings_creates_row(client, make_user):
    user = make_user(client)

    response = _save(client, face_id_enabled=True, use_24_hour_time=False, theme="dark")

    assert response.status_code == 200
    row = response.json()
    assert row["user_id"] == user["id"]
    assert row["face_id_enabled"] is True
    assert row["use_24_hour_time"] is False
    assert row["theme"] == "dark"
    assert row["created_at"]
    assert row["updated_at"]
    assert "firebase_uid" not in row


def test_save_settings_twice_keeps_one_row(client, make_user):
    make_user(client)
    first = _save(client, face_id_enabled=True, theme="dark").json()

    second = _save(client, face_id_enabled=False, use_24_hour_time=True, theme="light").json()

    assert second["id"] == first["id"]
    assert second["face_id_enabled"] is False
    assert second["use_24_hour_time"] is True
    assert second["theme"] == "light"

    fetched = client.get("/settings/uid-1").json()
    assert fetched["id"] == first["id"]
    assert fetched["theme"] == "light"


def test_identical_saves_are_idempotent(client, make_user):
    make_user(client)
    first = _save(client, theme="dark").json()
    second = _save(client, theme="dark").json()

    assert second["id"] == first["id"]
    assert second["theme"] == "dark"


def test_settings_unknown_user_is_404(client):
    assert client.get("/settings/nobody").status_code == 404

    response = _save(client, "nobody", theme="dark")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
