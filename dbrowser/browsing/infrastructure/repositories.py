"""
Browsing Infrastructure Repositories
=====================================

SQLAlchemy implementations of the browsing repositories.
"""

from typing import List, Optional, Any
from uuid import UUID, uuid4

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from dbrowser.browsing.application import (
    IShortcutRepository, IHistoryRepository,
    ShortcutCreateRequest, ShortcutUpdateRequest, HistoryCreateRequest
)
from dbrowser.browsing.infrastructure.models import SHORTCUT_MODELS, HISTORY_MODELS
from dbrowser.config import SchemaMode
from dbrowser.core import RepositoryException


def _parse_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise RepositoryException(f'invalid input syntax for type uuid: "{value}"')


class SQLAlchemyShortcutRepository(IShortcutRepository):
    """SQLAlchemy implementation for shortcuts."""

    def __init__(self, session: AsyncSession, schema_mode: str = SchemaMode.LINKED):
        self._session = session
        self._model = SHORTCUT_MODELS[schema_mode]
        self._owner = getattr(self._model, self._model.OWNER_COLUMN)

    async def list_for_owner(self, owner_key: Any) -> List[Any]:
        """List shortcuts, pinned first then newest first."""
        stmt = (
            select(self._model)
            .where(self._owner == owner_key)
            .order_by(self._model.is_pinned.desc(), self._model.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def create(self, owner_key: Any, request: ShortcutCreateRequest) -> Any:
        model = self._model(
            id=uuid4(),
            title=request.title,
            url=request.url,
            icon=request.icon,
            is_pinned=request.is_pinned or False,
            **{self._model.OWNER_COLUMN: owner_key}
        )

        self._session.add(model)
        await self._session.flush()

        return model

    async def update(self, shortcut_id: str, request: ShortcutUpdateRequest) -> Optional[Any]:
        model = await self._session.get(self._model, _parse_id(shortcut_id))
        if not model:
            return None

        model.title = request.title
        model.url = request.url
        model.icon = request.icon
        model.is_pinned = request.is_pinned or False

        await self._session.flush()

        return model

    async def delete(self, shortcut_id: str) -> int:
        stmt = delete(self._model).where(self._model.id == _parse_id(shortcut_id))
        result = await self._session.execute(stmt)
        return result.rowcount or 0


class SQLAlchemyHistoryRepository(IHistoryRepository):
    """SQLAlchemy implementation for history entries."""

    def __init__(self, session: AsyncSession, schema_mode: str = SchemaMode.LINKED):
        self._session = session
        self._model = HISTORY_MODELS[schema_mode]
        self._owner = getattr(self._model, self._model.OWNER_COLUMN)

    async def list_for_owner(self, owner_key: Any) -> List[Any]:
        """List visits, newest first."""
        stmt = (
            select(self._model)
            .where(self._owner == owner_key)
            .order_by(self._model.visited_at.desc())
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def create(self, owner_key: Any, request: HistoryCreateRequest) -> Any:
        model = self._model(
            id=uuid4(),
            title=request.title,
            url=request.url,
            **{self._model.OWNER_COLUMN: owner_key}
        )

        self._session.add(model)
        await self._session.flush()

        return model
