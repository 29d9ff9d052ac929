"""
Browsing Application Layer
===========================

Application layer for the browsing module.

Contains:
- Services: Business logic orchestration
- DTOs: Data transfer objects for API serialization
"""

from dbrowser.browsing.application.dto import (
    ShortcutCreateRequest,
    ShortcutUpdateRequest,
    HistoryCreateRequest,
    ShortcutResponse,
    HistoryEntryResponse,
    MessageResponse,
)
from dbrowser.browsing.application.services import (
    ShortcutService,
    HistoryService,
    IShortcutRepository,
    IHistoryRepository,
)

__all__ = [
    # DTOs
    "ShortcutCreateRequest",
    "ShortcutUpdateRequest",
    "HistoryCreateRequest",
    "ShortcutResponse",
    "HistoryEntryResponse",
    "MessageResponse",
    # Services
    "ShortcutService",
    "HistoryService",
    # Repository Interfaces
    "IShortcutRepository",
    "IHistoryRepository",
]
