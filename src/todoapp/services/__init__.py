"""Service layer for todoapp."""

from .config_service import ConfigService
from .todo_service import TodoService

__all__ = ["ConfigService", "TodoService"]
