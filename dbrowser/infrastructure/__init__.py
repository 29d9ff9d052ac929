"""
Infrastructure Layer
=====================

Low-level technical concerns shared by every module:
- Database engine and session management
"""
