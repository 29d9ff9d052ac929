"""
Browsing Infrastructure Models
===============================

SQLAlchemy ORM models for shortcuts and history entries.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import String, DateTime, Boolean, Text, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from dbrowser.config import SchemaMode
from dbrowser.infrastructure.database import Base, DirectBase, utcnow


class ShortcutColumns:
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class HistoryColumns:
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    title: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)

    visited_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class ShortcutModel(ShortcutColumns, Base):
    """
    Database model for a bookmarked shortcut.

    Maps to the 'shortcuts' table.
    """
    __tablename__ = "shortcuts"

    OWNER_COLUMN = "user_id"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )


class HistoryModel(HistoryColumns, Base):
    """
    Database model for a visited page.

    Maps to the 'history' table. Rows are append-only.
    """
    __tablename__ = "history"

    OWNER_COLUMN = "user_id"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )


class DirectShortcutModel(ShortcutColumns, DirectBase):
    __tablename__ = "shortcuts"

    OWNER_COLUMN = "firebase_uid"

    firebase_uid: Mapped[str] = mapped_column(String(128), nullable=False, index=True)


class DirectHistoryModel(HistoryColumns, DirectBase):
    __tablename__ = "history"

    OWNER_COLUMN = "firebase_uid"

    firebase_uid: Mapped[str] = mapped_column(String(128), nullable=False, index=True)


SHORTCUT_MODELS = {
    SchemaMode.LINKED: ShortcutModel,
    SchemaMode.DIRECT: DirectShortcutModel,
}

HISTORY_MODELS = {
    SchemaMode.LINKED: HistoryModel,
    SchemaMode.DIRECT: DirectHistoryModel,
}
