"""
Accounts Module
===============

Bounded Context for the people using the browser and their preferences.

Responsibilities:
- Upsert user profiles keyed by their Firebase uid
- Store one settings row per user
- Resolve a Firebase uid to the key owned rows are stored under
"""

__version__ = "1.0.0"
