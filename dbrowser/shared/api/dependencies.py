"""
Shared API Dependencies
========================

FastAPI dependencies used by every module's controllers.
"""

from fastapi import Request

from dbrowser.config import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_schema_mode(request: Request) -> str:
    """Schema variant the running application stores rows in."""
    return get_app_settings(request).schema_mode
