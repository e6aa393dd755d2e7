"""
Custom Exceptions

This module defines custom exceptions for better error handling
and more specific error messages.

Route handlers translate these into HTTP responses:
- InvalidEntityIdError -> 400
- StorageError -> 500 (generic message, details logged only)
"""


class StudioException(Exception):
    """Base exception for the studio backend."""
    pass


class InvalidEntityIdError(StudioException):
    """Raised when a path id is not an integer."""

    def __init__(self, raw_id: str):
        self.raw_id = raw_id
        super().__init__(f"Invalid id: '{raw_id}'")


class StorageError(StudioException):
    """Raised when storage operations fail."""

    def __init__(self, message: str, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(f"Storage error: {message}")


class UsernameTakenError(StudioException):
    """Raised when a user is created with a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' is already taken")
