"""
Accounts Application Services
==============================

Application services for users and settings.

Orchestrates the repositories; each public method maps to one endpoint.
"""

from typing import Optional, Any
from abc import ABC, abstractmethod

from dbrowser.accounts.application.dto import UserUpsertRequest, SettingsSaveRequest
from dbrowser.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces ==========

class IUserRepository(ABC):
    """Interface for user data access."""

    @abstractmethod
    async def upsert(self, request: UserUpsertRequest) -> Any:
        """Insert a user or update the one with the same firebase_uid."""

    @abstractmethod
    async def get_by_firebase_uid(self, firebase_uid: str) -> Optional[Any]:
        """Get user by external ID."""


class ISettingsRepository(ABC):
    """Interface for settings data access."""

    @abstractmethod
    async def get_by_owner(self, owner_key: Any) -> Optional[Any]:
        """Get the settings row of an owner."""

    @abstractmethod
    async def upsert(self, owner_key: Any, request: SettingsSaveRequest) -> Any:
        """Insert or replace the settings row of an owner."""


class IOwnerResolver(ABC):
    """
    Maps a firebase_uid to the key owned rows are stored under.

    The linked schema looks up users.id and raises UserNotFoundException
    when there is no such user. The direct schema uses the uid itself.
    """

    @abstractmethod
    async def resolve(self, firebase_uid: str) -> Any:
        """Return the owner key for a firebase_uid."""


# ========== Application Services ==========

class UserService:
    """Service for user profiles."""

    def __init__(self, user_repo: IUserRepository):
        self._users = user_repo

    async def upsert_user(self, request: UserUpsertRequest) -> Any:
        """
        Create or update a user.

        A second call with the same firebase_uid overwrites the profile
        fields and keeps the row id.
        """
        user = await self._users.upsert(request)
        logger.info(
            "User upserted",
            extra={"firebase_uid": request.firebase_uid, "user_id": str(user.id)}
        )
        return user

    async def get_user(self, firebase_uid: str) -> Optional[Any]:
        """Get a user, or None when the uid is unknown."""
        return await self._users.get_by_firebase_uid(firebase_uid)


class SettingsService:
    """Service for per-user settings."""

    def __init__(self, settings_repo: ISettingsRepository, resolver: IOwnerResolver):
        self._settings = settings_repo
        self._resolver = resolver

    async def get_settings(self, firebase_uid: str) -> Optional[Any]:
        owner_key = await self._resolver.resolve(firebase_uid)
        return await self._settings.get_by_owner(owner_key)

    async def save_settings(self, request: SettingsSaveRequest) -> Any:
        """Upsert settings; repeating the same request leaves one unchanged row."""
        owner_key = await self._resolver.resolve(request.firebase_uid)
        row = await self._settings.upsert(owner_key, request)
        logger.info(
            "Settings saved",
            extra={"firebase_uid": request.firebase_uid, "settings_id": str(row.id)}
        )
        return row
