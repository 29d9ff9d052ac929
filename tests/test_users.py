def test_upsert_creates_user(client, make_user):
    user = make_user(client, "uid-new", name="Dee")

    assert user["firebase_uid"] == "uid-new"
    assert user["name"] == "Dee"
    assert user["email"] == "uid-new@example.com"
    assert user["login_provider"] == "google.com"
    assert user["profile_image"] is None
    assert user["id"]
    assert user["created_at"]


def test_upsert_same_uid_updates_single_row(client, make_user):
    first = make_user(client, "uid-1", name="Old Name", email="old@example.com")
    second = make_user(
        client,
        "uid-1",
        name="New Name",
        email="new@example.com",
        profile_image="https://example.com/a.png",
        login_provider="password",
    )

    assert second["id"] == first["id"]
    assert second["created_at"] == first["created_at"]
    assert second["name"] == "New Name"
    assert second["email"] == "new@example.com"
    assert second["profile_image"] == "https://example.com/a.png"
    assert second["login_provider"] == "password"

    fetched = client.get("/users/uid-1").json()
    assert fetched["id"] == first["id"]
    assert fetched["name"] == "New Name"
    assert fetched["login_provider"] == "password"


def test_upsert_overwrites_omitted_fields_with_null(client, make_user):
    make_user(client, "uid-1", name="Named")

    response = client.post("/users", json={"firebase_uid": "uid-1"})

    assert response.status_code == 200
    assert response.json()["name"] is None
    assert response.json()["email"] is None


def test_get_unknown_user_returns_null(client):
    response = client.get("/users/nobody")

    assert response.status_code == 200
    assert response.json() is None


def test_upsert_requires_firebase_uid(client):
    response = client.post("/users", json={"email": "x@example.com"})

    assert response.status_code == 422


def test_users_keep_separate_rows(client, make_user):
    a = make_user(client, "uid-a")
    b = make_user(client, "uid-b")

    assert a["id"] != b["id"]
    assert client.get("/users/uid-a").json()["email"] == "uid-a@example.com"
    assert client.get("/users/uid-b").json()["email"] == "uid-b@example.com"
