"""
Accounts Application Layer
===========================

Application layer for the accounts module.

Contains:
- Services: Business logic orchestration
- DTOs: Data transfer objects for API serialization
"""

from dbrowser.accounts.application.dto import (
    UserUpsertRequest,
    SettingsSaveRequest,
    UserResponse,
    SettingsResponse,
)
from dbrowser.accounts.application.services import (
    UserService,
    SettingsService,
    IUserRepository,
    ISettingsRepository,
    IOwnerResolver,
)

__all__ = [
    # DTOs
    "UserUpsertRequest",
    "SettingsSaveRequest",
    "UserResponse",
    "SettingsResponse",
    # Services
    "UserService",
    "SettingsService",
    # Repository Interfaces
    "IUserRepository",
    "ISettingsRepository",
    "IOwnerResolver",
]
