import ssl

import pytest
from fastapi.testclient import TestClient

from dbrowser.accounts.infrastructure.models import UserModel
from dbrowser.config import Settings
from dbrowser.infrastructure.database import get_engine, get_session, ssl_connect_args
from dbrowser.main import create_app

POSTGRES_URL = "postgresql+asyncpg://u:p@db.example.com:5432/app"


def test_engine_uses_app_settings():
    app = create_app(Settings(database_url="sqlite+aiosqlite://", debug=True))

    with TestClient(app):
        assert get_engine().sync_engine.echo is True


def test_engine_echo_off_by_default(client):
    assert get_engine().sync_engine.echo is False


def test_postgres_connects_over_unverified_tls():
    args = ssl_connect_args(Settings(database_url=POSTGRES_URL), POSTGRES_URL)

    context = args["ssl"]
    assert isinstance(context, ssl.SSLContext)
    assert context.check_hostname is False
    assert context.verify_mode == ssl.CERT_NONE


def test_tls_can_be_disabled():
    assert ssl_connect_args(Settings(database_url=POSTGRES_URL, db_ssl=False), POSTGRES_URL) == {}


def test_ssl_query_parameter_wins():
    url = POSTGRES_URL + "?ssl=require"

    assert ssl_connect_args(Settings(database_url=url), url) == {}


def test_session_does_not_commit_on_its_own(client):
    async def add_without_commit():
        sessions = get_session()
        session = await sessions.__anext__()
        session.add(UserModel(firebase_uid="uncommitted"))
        await session.flush()
        with pytest.raises(StopAsyncIteration):
            await sessions.__anext__()

    client.portal.call(add_without_commit)

    assert client.get("/users/uncommitted").json() is None
