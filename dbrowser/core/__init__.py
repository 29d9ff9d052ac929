"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from dbrowser.core.exceptions import (
    ApplicationException,
    RepositoryException,
    ResourceNotFoundException,
    UserNotFoundException,
    ConfigurationException,
)

__all__ = [
    "ApplicationException",
    "RepositoryException",
    "ResourceNotFoundException",
    "UserNotFoundException",
    "ConfigurationException",
]
