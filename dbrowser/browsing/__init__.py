"""
Browsing Module
===============

Bounded Context for what a user does in the browser.

Responsibilities:
- Shortcuts: bookmarked tiles, pinned ones listed first
- History: append-only log of visited pages, newest first
"""

__version__ = "1.0.0"
