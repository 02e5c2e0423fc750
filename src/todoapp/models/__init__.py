"""todoapp domain models.

This package contains the SQLAlchemy-mapped entities (Todo, Tag), the pydantic
configuration models and the application exceptions.
"""

from .config_models import AppConfig, DatabaseConfig, DatabaseType, MongoConfig, MySqlConfig
from .core import Base, Tag, Todo, todo_tags
from .exceptions import (
    BackendConnectionError,
    RepositoryFactoryError,
    TodoAppError,
    ValidationError,
)

__all__ = [
    # Entities
    "Base",
    "Todo",
    "Tag",
    "todo_tags",
    # Config models
    "AppConfig",
    "DatabaseConfig",
    "DatabaseType",
    "MongoConfig",
    "MySqlConfig",
    # Exceptions
    "TodoAppError",
    "ValidationError",
    "RepositoryFactoryError",
    "BackendConnectionError",
]
