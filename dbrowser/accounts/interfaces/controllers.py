"""
Accounts Controllers (API Routes)
==================================

FastAPI routes for users and settings.

Controllers are thin - they delegate to application services.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dbrowser.infrastructure.database import get_session
from dbrowser.accounts.application import (
    UserService, SettingsService,
    UserUpsertRequest, SettingsSaveRequest,
    UserResponse, SettingsResponse
)
from dbrowser.accounts.infrastructure import (
    SQLAlchemyUserRepository,
    SQLAlchemySettingsRepository,
    build_owner_resolver
)
from dbrowser.shared.api.dependencies import get_schema_mode

router = APIRouter(tags=["Accounts"])


# ========== Example payloads for Swagger ==========

USER_RESPONSE_EXAMPLE = {
    "id": "0b7e2c1a-4f7e-4d55-9a43-3f1c1d2b9e10",
    "firebase_uid": "kX3pQ9sLm2Vd8RtY1wZa",
    "email": "d@example.com",
    "name": "D",
    "profile_image": "https://lh3.googleusercontent.com/a/avatar",
    "login_provider": "google.com",
    "created_at": "2024-01-15T10:00:00Z"
}

SETTINGS_RESPONSE_EXAMPLE = {
    "id": "6a0f4e58-2c1b-4d1e-8f9a-9b3e7c5d2a11",
    "user_id": "0b7e2c1a-4f7e-4d55-9a43-3f1c1d2b9e10",
    "face_id_enabled": True,
    "use_24_hour_time": False,
    "theme": "dark",
    "created_at": "2024-01-15T10:00:00Z",
    "updated_at": "2024-01-16T08:30:00Z"
}


# ========== Dependencies ==========

async def get_user_service(
    session: AsyncSession = Depends(get_session),
    schema_mode: str = Depends(get_schema_mode)
) -> UserService:
    """Get user service instance."""
    return UserService(SQLAlchemyUserRepository(session, schema_mode))


async def get_settings_service(
    session: AsyncSession = Depends(get_session),
    schema_mode: str = Depends(get_schema_mode)
) -> SettingsService:
    """Get settings service instance."""
    return SettingsService(
        SQLAlchemySettingsRepository(session, schema_mode),
        build_owner_resolver(session, schema_mode)
    )


# ========== Route Handlers ==========

@router.post(
    "/users",
    response_model=UserResponse,
    summary="Create or update a user",
    description="""
    Upsert a user keyed by `firebase_uid`. Repeating the call for the same
    uid overwrites email, name, profile_image and login_provider.
    """,
    responses={200: {"content": {"application/json": {"example": USER_RESPONSE_EXAMPLE}}}}
)
async def upsert_user(
    payload: UserUpsertRequest,
    session: AsyncSession = Depends(get_session),
    service: UserService = Depends(get_user_service)
):
    user = await service.upsert_user(payload)
    await session.commit()
    return UserResponse.model_validate(user)


@router.get(
    "/users/{firebase_uid}",
    response_model=Optional[UserResponse],
    summary="Get a user",
    description="Returns the user row, or `null` when the uid is unknown."
)
async def get_user(
    firebase_uid: str,
    service: UserService = Depends(get_user_service)
):
    user = await service.get_user(firebase_uid)
    return UserResponse.model_validate(user) if user else None


@router.get(
    "/settings/{firebase_uid}",
    response_model=Optional[SettingsResponse],
    response_model_exclude_unset=True,
    summary="Get a user's settings",
    description="""
    Returns the settings row, or `null` when none was saved yet.

    In the linked schema an unknown uid yields `404 {"error": "User not found"}`.
    """,
    responses={
        200: {"content": {"application/json": {"example": SETTINGS_RESPONSE_EXAMPLE}}},
        404: {"description": "User not found"}
    }
)
async def get_settings(
    firebase_uid: str,
    service: SettingsService = Depends(get_settings_service)
):
    row = await service.get_settings(firebase_uid)
    return SettingsResponse.model_validate(row) if row else None


@router.post(
    "/settings",
    response_model=SettingsResponse,
    response_model_exclude_unset=True,
    summary="Save a user's settings",
    description="Upsert the single settings row of a user.",
    responses={404: {"description": "User not found"}}
)
async def save_settings(
    payload: SettingsSaveRequest,
    session: AsyncSession = Depends(get_session),
    service: SettingsService = Depends(get_settings_service)
):
    row = await service.save_settings(payload)
    await session.commit()
    return SettingsResponse.model_validate(row)
