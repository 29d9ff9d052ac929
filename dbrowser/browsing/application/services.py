"""
Browsing Application Services
==============================

Application services for shortcuts and browsing history.

Both resources are owned by a user; the owner key comes from the
accounts module's resolver, so these services never care which schema
variant is active.
"""

from typing import Optional, List, Any
from abc import ABC, abstractmethod

from dbrowser.accounts.application import IOwnerResolver
from dbrowser.browsing.application.dto import (
    ShortcutCreateRequest, ShortcutUpdateRequest, HistoryCreateRequest
)
from dbrowser.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces ==========

class IShortcutRepository(ABC):
    """Interface for shortcut data access."""

    @abstractmethod
    async def list_for_owner(self, owner_key: Any) -> List[Any]:
        """Shortcuts of an owner, pinned first, newest first."""

    @abstractmethod
    async def create(self, owner_key: Any, request: ShortcutCreateRequest) -> Any:
        """Create new shortcut."""

    @abstractmethod
    async def update(self, shortcut_id: str, request: ShortcutUpdateRequest) -> Optional[Any]:
        """Replace a shortcut's fields. None when the id matches nothing."""

    @abstractmethod
    async def delete(self, shortcut_id: str) -> int:
        """Delete a shortcut, returning the number of rows removed."""


class IHistoryRepository(ABC):
    """Interface for history data access. Append-only."""

    @abstractmethod
    async def list_for_owner(self, owner_key: Any) -> List[Any]:
        """Visits of an owner, newest first."""

    @abstractmethod
    async def create(self, owner_key: Any, request: HistoryCreateRequest) -> Any:
        """Append a visit."""


# ========== Application Services ==========

class ShortcutService:
    """Service for bookmarked shortcuts."""

    def __init__(self, shortcut_repo: IShortcutRepository, resolver: IOwnerResolver):
        self._shortcuts = shortcut_repo
        self._resolver = resolver

    async def list_shortcuts(self, firebase_uid: str) -> List[Any]:
        owner_key = await self._resolver.resolve(firebase_uid)
        return await self._shortcuts.list_for_owner(owner_key)

    async def add_shortcut(self, request: ShortcutCreateRequest) -> Any:
        owner_key = await self._resolver.resolve(request.firebase_uid)
        shortcut = await self._shortcuts.create(owner_key, request)
        logger.info(
            "Shortcut created",
            extra={"firebase_uid": request.firebase_uid, "shortcut_id": str(shortcut.id)}
        )
        return shortcut

    async def update_shortcut(self, shortcut_id: str, request: ShortcutUpdateRequest) -> Optional[Any]:
        """
        Replace a shortcut.

        Shortcuts are addressed by their own id; the owner is not checked.
        """
        shortcut = await self._shortcuts.update(shortcut_id, request)
        logger.info(
            "Shortcut updated",
            extra={"shortcut_id": shortcut_id, "found": shortcut is not None}
        )
        return shortcut

    async def delete_shortcut(self, shortcut_id: str) -> int:
        deleted = await self._shortcuts.delete(shortcut_id)
        logger.info(
            "Shortcut deleted",
            extra={"shortcut_id": shortcut_id, "rows_deleted": deleted}
        )
        return deleted


class HistoryService:
    """Service for browsing history."""

    def __init__(self, history_repo: IHistoryRepository, resolver: IOwnerResolver):
        self._history = history_repo
        self._resolver = resolver

    async def list_history(self, firebase_uid: str) -> List[Any]:
        owner_key = await self._resolver.resolve(firebase_uid)
        return await self._history.list_for_owner(owner_key)

    async def record_visit(self, request: HistoryCreateRequest) -> Any:
        owner_key = await self._resolver.resolve(request.firebase_uid)
        return await self._history.create(owner_key, request)
