"""
Accounts Infrastructure Models
===============================

SQLAlchemy ORM models for users and their settings.

Each table exists once per schema variant. The shared columns live in
mixins; the concrete classes only add the owner column.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import String, DateTime, Boolean, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from dbrowser.config import SchemaMode
from dbrowser.infrastructure.database import Base, DirectBase, utcnow


class UserColumns:
    """Profile columns of the users table."""

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # External identity (Firebase Auth uid)
    firebase_uid: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)

    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    profile_image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    login_provider: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class SettingsColumns:
    """Preference columns of the settings table."""

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    face_id_enabled: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, default=False)
    use_24_hour_time: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, default=False)
    theme: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class UserModel(UserColumns, Base):
    """
    Database model for a user.

    Maps to the 'users' table.
    """
    __tablename__ = "users"


class SettingsModel(SettingsColumns, Base):
    """
    Database model for per-user settings, keyed by users.id.

    Maps to the 'settings' table. One row per user.
    """
    __tablename__ = "settings"

    OWNER_COLUMN = "user_id"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True
    )


class DirectUserModel(UserColumns, DirectBase):
    """Users table of the direct schema. Identical columns."""
    __tablename__ = "users"


class DirectSettingsModel(SettingsColumns, DirectBase):
    """Settings keyed directly by firebase_uid."""
    __tablename__ = "settings"

    OWNER_COLUMN = "firebase_uid"

    firebase_uid: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)


USER_MODELS = {
    SchemaMode.LINKED: UserModel,
    SchemaMode.DIRECT: DirectUserModel,
}

SETTINGS_MODELS = {
    SchemaMode.LINKED: SettingsModel,
    SchemaMode.DIRECT: DirectSettingsModel,
}
