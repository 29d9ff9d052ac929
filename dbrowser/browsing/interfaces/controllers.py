"""
Browsing Controllers (API Routes)
==================================

FastAPI routes for shortcuts and history.

Controllers delegate to application services.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dbrowser.infrastructure.database import get_session
from dbrowser.accounts.infrastructure import build_owner_resolver
from dbrowser.browsing.application import (
    ShortcutService, HistoryService,
    ShortcutCreateRequest, ShortcutUpdateRequest, HistoryCreateRequest,
    ShortcutResponse, HistoryEntryResponse, MessageResponse
)
from dbrowser.browsing.infrastructure import (
    SQLAlchemyShortcutRepository,
    SQLAlchemyHistoryRepository
)
from dbrowser.shared.api.dependencies import get_schema_mode

router = APIRouter()


# ========== Example payloads for Swagger ==========

SHORTCUT_CREATE_EXAMPLE = {
    "firebase_uid": "kX3pQ9sLm2Vd8RtY1wZa",
    "title": "GitHub",
    "url": "https://github.com",
    "icon": "https://github.com/favicon.ico",
    "is_pinned": True
}

SHORTCUT_LIST_EXAMPLE = [
    {
        "id": "5f1d7a9e-0c3b-4e8a-b1f2-6d4c8e2a9b70",
        "user_id": "0b7e2c1a-4f7e-4d55-9a43-3f1c1d2b9e10",
        "title": "GitHub",
        "url": "https://github.com",
        "icon": "https://github.com/favicon.ico",
        "is_pinned": True,
        "created_at": "2024-01-15T10:00:00Z"
    }
]

HISTORY_LIST_EXAMPLE = [
    {
        "id": "c2a4e6f8-1b3d-4f5a-8c7e-9d0b2f4a6c81",
        "user_id": "0b7e2c1a-4f7e-4d55-9a43-3f1c1d2b9e10",
        "title": "Python docs",
        "url": "https://docs.python.org/3/",
        "visited_at": "2024-01-15T10:05:00Z"
    }
]


# ========== Dependencies ==========

async def get_shortcut_service(
    session: AsyncSession = Depends(get_session),
    schema_mode: str = Depends(get_schema_mode)
) -> ShortcutService:
    """Get shortcut service instance."""
    return ShortcutService(
        SQLAlchemyShortcutRepository(session, schema_mode),
        build_owner_resolver(session, schema_mode)
    )


async def get_history_service(
    session: AsyncSession = Depends(get_session),
    schema_mode: str = Depends(get_schema_mode)
) -> HistoryService:
    """Get history service instance."""
    return HistoryService(
        SQLAlchemyHistoryRepository(session, schema_mode),
        build_owner_resolver(session, schema_mode)
    )


# ========== Shortcuts ==========

@router.get(
    "/shortcuts/{firebase_uid}",
    tags=["Shortcuts"],
    response_model=List[ShortcutResponse],
    response_model_exclude_unset=True,
    summary="List a user's shortcuts",
    description="""
    Pinned shortcuts first, then newest first.

    In the linked schema an unknown uid yields `404 {"error": "User not found"}`;
    in the direct schema it yields an empty list.
    """,
    responses={
        200: {"content": {"application/json": {"example": SHORTCUT_LIST_EXAMPLE}}},
        404: {"description": "User not found"}
    }
)
async def list_shortcuts(
    firebase_uid: str,
    service: ShortcutService = Depends(get_shortcut_service)
):
    shortcuts = await service.list_shortcuts(firebase_uid)
    return [ShortcutResponse.model_validate(s) for s in shortcuts]


@router.post(
    "/shortcuts",
    tags=["Shortcuts"],
    response_model=ShortcutResponse,
    response_model_exclude_unset=True,
    summary="Add a shortcut",
    openapi_extra={
        "requestBody": {"content": {"application/json": {"example": SHORTCUT_CREATE_EXAMPLE}}}
    },
    responses={404: {"description": "User not found"}}
)
async def add_shortcut(
    payload: ShortcutCreateRequest,
    session: AsyncSession = Depends(get_session),
    service: ShortcutService = Depends(get_shortcut_service)
):
    shortcut = await service.add_shortcut(payload)
    await session.commit()
    return ShortcutResponse.model_validate(shortcut)


@router.put(
    "/shortcuts/{shortcut_id}",
    tags=["Shortcuts"],
    response_model=Optional[ShortcutResponse],
    response_model_exclude_unset=True,
    summary="Replace a shortcut",
    description="Overwrites title, url, icon and is_pinned. Returns `null` for an unknown id."
)
async def update_shortcut(
    shortcut_id: str,
    payload: ShortcutUpdateRequest,
    session: AsyncSession = Depends(get_session),
    service: ShortcutService = Depends(get_shortcut_service)
):
    shortcut = await service.update_shortcut(shortcut_id, payload)
    await session.commit()
    return ShortcutResponse.model_validate(shortcut) if shortcut else None


@router.delete(
    "/shortcuts/{shortcut_id}",
    tags=["Shortcuts"],
    response_model=MessageResponse,
    summary="Delete a shortcut"
)
async def delete_shortcut(
    shortcut_id: str,
    session: AsyncSession = Depends(get_session),
    service: ShortcutService = Depends(get_shortcut_service)
):
    await service.delete_shortcut(shortcut_id)
    await session.commit()
    return MessageResponse(message="Shortcut deleted")


# ========== History ==========

@router.get(
    "/history/{firebase_uid}",
    tags=["History"],
    response_model=List[HistoryEntryResponse],
    response_model_exclude_unset=True,
    summary="List a user's history",
    description="Newest visit first.",
    responses={
        200: {"content": {"application/json": {"example": HISTORY_LIST_EXAMPLE}}},
        404: {"description": "User not found"}
    }
)
async def list_history(
    firebase_uid: str,
    service: HistoryService = Depends(get_history_service)
):
    entries = await service.list_history(firebase_uid)
    return [HistoryEntryResponse.model_validate(e) for e in entries]


@router.post(
    "/history",
    tags=["History"],
    response_model=HistoryEntryResponse,
    response_model_exclude_unset=True,
    summary="Record a visit",
    responses={404: {"description": "User not found"}}
)
async def record_visit(
    payload: HistoryCreateRequest,
    session: AsyncSession = Depends(get_session),
    service: HistoryService = Depends(get_history_service)
):
    entry = await service.record_visit(payload)
    await session.commit()
    return HistoryEntryResponse.model_validate(entry)
