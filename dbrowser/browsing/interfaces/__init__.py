"""
Browsing Interfaces Layer
==========================

Interface adapters (controllers) for the browsing module.

Contains:
- Controllers: FastAPI route handlers
"""

from dbrowser.browsing.interfaces.controllers import router as browsing_router

__all__ = ["browsing_router"]
