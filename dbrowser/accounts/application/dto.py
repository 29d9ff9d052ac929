"""
Accounts Application DTOs
==========================

Data Transfer Objects for the accounts API layer.

Request bodies are trusted as sent: only types are checked, and missing
optional fields are written as NULL.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


# ========== Request DTOs ==========

class UserUpsertRequest(BaseModel):
    """Request model for creating or updating a user."""
    firebase_uid: str = Field(..., min_length=1, description="Firebase Auth uid")
    email: Optional[str] = Field(None, description="Account email")
    name: Optional[str] = Field(None, description="Display name")
    profile_image: Optional[str] = Field(None, description="Avatar URL")
    login_provider: Optional[str] = Field(None, description="e.g. google.com, password")


class SettingsSaveRequest(BaseModel):
    """Request model for saving a user's settings."""
    firebase_uid: str = Field(..., min_length=1, description="Firebase Auth uid")
    face_id_enabled: Optional[bool] = Field(None, description="Biometric lock")
    use_24_hour_time: Optional[bool] = Field(None, description="24-hour clock")
    theme: Optional[str] = Field(None, description="UI theme")


# ========== Response DTOs ==========

class UserResponse(BaseModel):
    """A users row."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    firebase_uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    profile_image: Optional[str] = None
    login_provider: Optional[str] = None
    created_at: datetime


class SettingsResponse(BaseModel):
    """
    A settings row.

    Carries ``user_id`` in the linked schema and ``firebase_uid`` in the
    direct schema; the other field is left unset and dropped from output.
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: Optional[UUID] = None
    firebase_uid: Optional[str] = None
    face_id_enabled: Optional[bool] = None
    use_24_hour_time: Optional[bool] = None
    theme: Optional[str] = None
    created_at: datetime
    updated_at: datetime
