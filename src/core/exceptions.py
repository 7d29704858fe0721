"""
Core Exceptions
================

Custom exceptions for the application.

Storage and lookup failures are distinct classes so the HTTP layer can
branch on the kind of error instead of inspecting messages.
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


class ValidationException(ApplicationException):
    """Exception for validation errors."""


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


class TodoNotFoundException(ResourceNotFoundException):
    """No todo row matched the given id."""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__("Todo", str(todo_id), {"todo_id": todo_id})


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class StartupException(ConfigurationException):
    """Raised when the service cannot finish its startup sequence."""

    def __init__(self, step: str, message: str, details: Optional[dict] = None):
        self.step = step
        super().__init__(f"{step}: {message}", details or {"step": step})
