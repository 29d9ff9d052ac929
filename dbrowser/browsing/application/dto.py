"""
Browsing Application DTOs
==========================

Data Transfer Objects for the browsing API layer.

Pydantic models for request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


# ========== Request DTOs ==========

class ShortcutCreateRequest(BaseModel):
    """Request model for adding a shortcut."""
    firebase_uid: str = Field(..., min_length=1, description="Owner's Firebase uid")
    title: Optional[str] = Field(None, description="Label shown on the tile")
    url: Optional[str] = Field(None, description="Target URL")
    icon: Optional[str] = Field(None, description="Icon URL or data URI")
    is_pinned: Optional[bool] = Field(None, description="Pinned tiles sort first")


class ShortcutUpdateRequest(BaseModel):
    """
    Request model for replacing a shortcut.

    Every field is written; omitted ones become NULL (``is_pinned`` false).
    """
    title: Optional[str] = None
    url: Optional[str] = None
    icon: Optional[str] = None
    is_pinned: Optional[bool] = None


class HistoryCreateRequest(BaseModel):
    """Request model for recording a visit."""
    firebase_uid: str = Field(..., min_length=1, description="Owner's Firebase uid")
    title: Optional[str] = Field(None, description="Page title")
    url: Optional[str] = Field(None, description="Visited URL")


# ========== Response DTOs ==========

class ShortcutResponse(BaseModel):
    """
    A shortcuts row.

    Owned by ``user_id`` (linked schema) or ``firebase_uid`` (direct schema).
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: Optional[UUID] = None
    firebase_uid: Optional[str] = None
    title: str
    url: str
    icon: Optional[str] = None
    is_pinned: bool
    created_at: datetime


class HistoryEntryResponse(BaseModel):
    """A history row."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: Optional[UUID] = None
    firebase_uid: Optional[str] = None
    title: Optional[str] = None
    url: str
    visited_at: datetime


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str
