"""
D's Browser Backend
===================

FastAPI service backing the browser-companion app: user profiles,
settings, shortcuts and browsing history on PostgreSQL.
"""

__version__ = "1.0.0"
