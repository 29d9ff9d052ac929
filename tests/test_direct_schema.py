def test_unknown_uid_reads_are_empty(direct_client):
    assert direct_client.get("/shortcuts/nobody").json() == []
    assert direct_client.get("/history/nobody").json() == []
    assert direct_client.get("/settings/nobody").json() is None
    assert direct_client.get("/users/nobody").json() is None


def test_rows_are_keyed_by_firebase_uid(direct_client):
    response = direct_client.post(
        "/shortcuts",
        json={"firebase_uid": "no-user-row", "title": "Docs", "url": "https://docs.example.com"},
    )

    assert response.status_code == 200
    shortcut = response.json()
    assert shortcut["firebase_uid"] == "no-user-row"
    assert "user_id" not in shortcut
    assert shortcut["is_pinned"] is False

    listed = direct_client.get("/shortcuts/no-user-row").json()
    assert [s["id"] for s in listed] == [shortcut["id"]]


def test_direct_history_and_settings(direct_client, make_user):
    make_user(direct_client, "uid-d")

    visit = direct_client.post(
        "/history", json={"firebase_uid": "uid-d", "url": "https://a.example.com"}
    ).json()
    assert visit["firebase_uid"] == "uid-d"
    assert visit["title"] is None

    first = direct_client.post("/settings", json={"firebase_uid": "uid-d", "theme": "dark"}).json()
    second = direct_client.post("/settings", json={"firebase_uid": "uid-d", "theme": "light"}).json()
    assert second["id"] == first["id"]
    assert second["firebase_uid"] == "uid-d"
    assert "user_id" not in second
    assert direct_client.get("/settings/uid-d").json()["theme"] == "light"


def test_direct_users_upsert(direct_client, make_user):
    first = make_user(direct_client, "uid-d", name="One")
    second = make_user(direct_client, "uid-d", name="Two")

    assert second["id"] == first["id"]
    assert direct_client.get("/users/uid-d").json()["name"] == "Two"
