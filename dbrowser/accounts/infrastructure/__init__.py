"""
Accounts Infrastructure Layer
==============================

Infrastructure implementations for the accounts module.

Contains:
- Models: SQLAlchemy ORM models (both schema variants)
- Repositories: Data access implementations and owner resolvers
"""

from dbrowser.accounts.infrastructure.models import (
    UserModel,
    SettingsModel,
    DirectUserModel,
    DirectSettingsModel,
)
from dbrowser.accounts.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemySettingsRepository,
    UserKeyResolver,
    FirebaseUidResolver,
    build_owner_resolver,
)

__all__ = [
    "UserModel",
    "SettingsModel",
    "DirectUserModel",
    "DirectSettingsModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemySettingsRepository",
    "UserKeyResolver",
    "FirebaseUidResolver",
    "build_owner_resolver",
]
