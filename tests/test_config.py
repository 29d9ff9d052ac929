import pytest
from pydantic import ValidationError

from dbrowser.accounts.infrastructure import (
    FirebaseUidResolver,
    UserKeyResolver,
    build_owner_resolver,
)
from dbrowser.config import Settings
from dbrowser.core import ConfigurationException
from dbrowser.infrastructure.database import Base, DirectBase, get_metadata


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.schema_mode == "linked"
    assert settings.cors_origins == ["*"]


def test_invalid_environment_rejected():
    with pytest.raises(ValidationError):
        Settings(environment="qa")


def test_invalid_schema_mode_rejected():
    with pytest.raises(ValidationError):
        Settings(schema_mode="hybrid")


@pytest.mark.parametrize(
    "url",
    [
        "postgres://u:p@db.example.com:5432/app",
        "postgresql://u:p@db.example.com:5432/app",
    ],
)
def test_postgres_urls_use_asyncpg(url):
    settings = Settings(database_url=url)

    assert settings.database_url == "postgresql+asyncpg://u:p@db.example.com:5432/app"


def test_other_urls_untouched():
    assert Settings(database_url="sqlite+aiosqlite://").database_url == "sqlite+aiosqlite://"


def test_metadata_per_schema_mode():
    assert get_metadata("linked") is Base.metadata
    assert get_metadata("direct") is DirectBase.metadata
    assert set(Base.metadata.tables) == {"users", "settings", "shortcuts", "history"}
    assert set(DirectBase.metadata.tables) == {"users", "settings", "shortcuts", "history"}

    with pytest.raises(ConfigurationException):
        get_metadata("hybrid")


def test_owner_resolver_per_schema_mode():
    assert isinstance(build_owner_resolver(None, "linked"), UserKeyResolver)
    assert isinstance(build_owner_resolver(None, "direct"), FirebaseUidResolver)

    with pytest.raises(ConfigurationException):
        build_owner_resolver(None, "hybrid")
