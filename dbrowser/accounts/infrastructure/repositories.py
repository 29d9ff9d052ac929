"""
Accounts Infrastructure Repositories
=====================================

SQLAlchemy implementations of the accounts repositories.

Upserts are single ``INSERT ... ON CONFLICT DO UPDATE ... RETURNING``
statements, so no read-modify-write race exists between two requests for
the same user.
"""

from typing import Optional, Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dbrowser.accounts.application import (
    IUserRepository, ISettingsRepository, IOwnerResolver,
    UserUpsertRequest, SettingsSaveRequest
)
from dbrowser.accounts.infrastructure.models import (
    UserModel, USER_MODELS, SETTINGS_MODELS
)
from dbrowser.config import SchemaMode
from dbrowser.core import UserNotFoundException, ConfigurationException
from dbrowser.infrastructure.database import dialect_insert, utcnow


class SQLAlchemyUserRepository(IUserRepository):
    """SQLAlchemy implementation for users."""

    def __init__(self, session: AsyncSession, schema_mode: str = SchemaMode.LINKED):
        self._session = session
        self._model = USER_MODELS[schema_mode]

    async def upsert(self, request: UserUpsertRequest) -> Any:
        """Insert a user or overwrite the profile of an existing firebase_uid."""
        stmt = dialect_insert(self._session, self._model).values(
            firebase_uid=request.firebase_uid,
            email=request.email,
            name=request.name,
            profile_image=request.profile_image,
            login_provider=request.login_provider,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["firebase_uid"],
            set_={
                "email": stmt.excluded.email,
                "name": stmt.excluded.name,
                "profile_image": stmt.excluded.profile_image,
                "login_provider": stmt.excluded.login_provider,
            },
        )

        result = await self._session.scalars(
            stmt.returning(self._model),
            execution_options={"populate_existing": True},
        )
        return result.one()

    async def get_by_firebase_uid(self, firebase_uid: str) -> Optional[Any]:
        """Get user by external ID."""
        stmt = select(self._model).where(self._model.firebase_uid == firebase_uid)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()


class SQLAlchemySettingsRepository(ISettingsRepository):
    """SQLAlchemy implementation for settings, one row per owner."""

    def __init__(self, session: AsyncSession, schema_mode: str = SchemaMode.LINKED):
        self._session = session
        self._model = SETTINGS_MODELS[schema_mode]
        self._owner = getattr(self._model, self._model.OWNER_COLUMN)

    async def get_by_owner(self, owner_key: Any) -> Optional[Any]:
        stmt = select(self._model).where(self._owner == owner_key)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, owner_key: Any, request: SettingsSaveRequest) -> Any:
        """Insert settings or replace every preference of the existing row."""
        stmt = dialect_insert(self._session, self._model).values(
            **{self._model.OWNER_COLUMN: owner_key},
            face_id_enabled=request.face_id_enabled,
            use_24_hour_time=request.use_24_hour_time,
            theme=request.theme,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[self._model.OWNER_COLUMN],
            set_={
                "face_id_enabled": stmt.excluded.face_id_enabled,
                "use_24_hour_time": stmt.excluded.use_24_hour_time,
                "theme": stmt.excluded.theme,
                "updated_at": utcnow(),
            },
        )

        result = await self._session.scalars(
            stmt.returning(self._model),
            execution_options={"populate_existing": True},
        )
        return result.one()


class UserKeyResolver(IOwnerResolver):
    """Resolves a firebase_uid to users.id (linked schema)."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def resolve(self, firebase_uid: str) -> Any:
        stmt = select(UserModel.id).where(UserModel.firebase_uid == firebase_uid)
        result = await self._session.execute(stmt)
        user_id = result.scalar_one_or_none()
        if user_id is None:
            raise UserNotFoundException(firebase_uid)
        return user_id


class FirebaseUidResolver(IOwnerResolver):
    """Owned rows are keyed by the uid itself (direct schema)."""

    async def resolve(self, firebase_uid: str) -> Any:
        return firebase_uid


def build_owner_resolver(session: AsyncSession, schema_mode: str) -> IOwnerResolver:
    """Pick the resolver matching a schema variant."""
    if schema_mode == SchemaMode.LINKED:
        return UserKeyResolver(session)
    if schema_mode == SchemaMode.DIRECT:
        return FirebaseUidResolver()
    raise ConfigurationException(f"Unknown schema mode: {schema_mode}")
