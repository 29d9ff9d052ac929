from fastapi.testclient import TestClient

from dbrowser.config import Settings
from dbrowser.main import LIVENESS_TEXT, create_app


def test_root_returns_liveness_text(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == LIVENESS_TEXT
    assert response.headers["content-type"].startswith("text/plain")


def test_test_db_returns_database_clock(client):
    response = client.get("/test-db")

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, list)
    assert len(body) == 1
    assert body[0]["now"]


def test_health_reports_database_and_schema(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "development"
    assert body["checks"] == {"database": "connected", "schema_mode": "linked"}


def test_health_reports_direct_schema(direct_client):
    assert direct_client.get("/health").json()["checks"]["schema_mode"] == "direct"


def test_correlation_id_is_echoed(client):
    response = client.get("/", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["X-Correlation-ID"] == "req-42"


def test_correlation_id_is_generated(client):
    response = client.get("/")

    assert response.headers["X-Correlation-ID"]


def test_database_routes_fail_with_envelope_before_startup():
    # No context manager: lifespan never runs, so no engine exists
    app = create_app(Settings(database_url="sqlite+aiosqlite://"))
    test_client = TestClient(app)

    response = test_client.get("/test-db")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Database not initialized. Call init_database() first."
    }
    assert test_client.get("/").status_code == 200


def test_unexpected_error_uses_envelope():
    app = create_app(Settings(database_url="sqlite+aiosqlite://"))

    @app.get("/explode")
    async def explode():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"error": "kaboom"}


def test_cors_preflight_allows_any_origin(client):
    response = client.options(
        "/shortcuts/uid-1",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_header_on_simple_request(client):
    response = client.get("/", headers={"Origin": "https://app.example.com"})

    assert response.headers["access-control-allow-origin"] == "*"
