"""Custom exceptions for todoapp."""


class TodoAppError(Exception):
    """Base exception for all todoapp errors."""


class ValidationError(TodoAppError, ValueError):
    """Raised when a required text field is None or blank, or a tag name is taken."""


class RepositoryFactoryError(TodoAppError):
    """Raised when the configured backend kind is missing or unsupported."""


class BackendConnectionError(TodoAppError):
    """Raised when the relational backend cannot be reached at construction time."""
