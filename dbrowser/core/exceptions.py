"""
Core Exceptions
================

Custom exceptions for the application.

These exceptions define domain-specific errors that can be caught and handled
at the API boundary, where they are turned into JSON error envelopes.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" with id '{resource_id}'"
        message += " not found"
        super().__init__(message, details)


class UserNotFoundException(ResourceNotFoundException):
    """No users row matches the given firebase_uid."""

    def __init__(self, firebase_uid: Optional[str] = None):
        self.firebase_uid = firebase_uid
        super().__init__("User", details={"firebase_uid": firebase_uid})


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""
