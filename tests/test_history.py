def _visit(client, title, firebase_uid="uid-1"):
    response = client.post(
        "/history",
        json={
            "firebase_uid": firebase_uid,
            "title": title,
            "url": f"https://{title.lower()}.example.com",
        },
    )
    assert response.status_code == 200
    return response.json()


def test_record_visit(client, make_user):
    user = make_user(client)

    entry = _visit(client, "Docs")

    assert entry["title"] == "Docs"
    assert entry["url"] == "https://docs.example.com"
    assert entry["user_id"] == user["id"]
    assert entry["visited_at"]
    assert "firebase_uid" not in entry


def test_list_history_newest_first(client, make_user):
    make_user(client)
    first = _visit(client, "First")
    second = _visit(client, "Second")
    third = _visit(client, "Third")

    response = client.get("/history/uid-1")

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [third["id"], second["id"], first["id"]]


def test_repeat_visits_are_separate_entries(client, make_user):
    make_user(client)
    _visit(client, "Same")
    _visit(client, "Same")

    assert len(client.get("/history/uid-1").json()) == 2


def test_history_for_user_without_visits_is_empty(client, make_user):
    make_user(client)

    response = client.get("/history/uid-1")

    assert response.status_code == 200
    assert response.json() == []


def test_history_unknown_user_is_404(client):
    assert client.get("/history/nobody").json() == {"error": "User not found"}

    response = client.post("/history", json={"firebase_uid": "nobody", "url": "https://x.example.com"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_history_entries_cannot_be_edited_or_deleted(client, make_user):
    make_user(client)
    _visit(client, "Kept")

    assert client.put("/history/uid-1", json={"title": "x"}).status_code == 405
    assert client.delete("/history/uid-1").status_code == 405
    assert len(client.get("/history/uid-1").json()) == 1
