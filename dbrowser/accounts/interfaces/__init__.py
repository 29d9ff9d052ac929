"""
Accounts Interfaces Layer
==========================

Interface adapters (controllers) for the accounts module.

Contains:
- Controllers: FastAPI route handlers
"""

from dbrowser.accounts.interfaces.controllers import router as accounts_router

__all__ = ["accounts_router"]
