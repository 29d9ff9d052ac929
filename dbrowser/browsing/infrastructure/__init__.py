"""
Browsing Infrastructure Layer
==============================

Infrastructure implementations for the browsing module.

Contains:
- Models: SQLAlchemy ORM models (both schema variants)
- Repositories: Data access implementations
"""

from dbrowser.browsing.infrastructure.models import (
    ShortcutModel,
    HistoryModel,
    DirectShortcutModel,
    DirectHistoryModel,
)
from dbrowser.browsing.infrastructure.repositories import (
    SQLAlchemyShortcutRepository,
    SQLAlchemyHistoryRepository,
)

__all__ = [
    "ShortcutModel",
    "HistoryModel",
    "DirectShortcutModel",
    "DirectHistoryModel",
    "SQLAlchemyShortcutRepository",
    "SQLAlchemyHistoryRepository",
]
