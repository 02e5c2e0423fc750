"""Relational adapter module - SQLAlchemy storage implementation."""

from todoapp.adapters.sql.connection import SqlDatabase, build_url
from todoapp.adapters.sql.tag_repository import SqlTagRepository
from todoapp.adapters.sql.todo_repository import SqlTodoRepository

__all__ = [
    "SqlDatabase",
    "SqlTodoRepository",
    "SqlTagRepository",
    "build_url",
]
