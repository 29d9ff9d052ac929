"""
Shared Kernel Module
====================

This module contains shared infrastructure used across all bounded
contexts (accounts and browsing).

Architecture Pattern: Modular Monolith
- Each module (accounts, browsing) is a bounded context
- Shared kernel contains only generic infrastructure

DO NOT add business logic from accounts or browsing to shared kernel.
"""

__version__ = "1.0.0"
