"""Adapters module - Repository implementations for different storage backends.

This package contains concrete implementations (adapters) for the repository interfaces:
- sql: relational database through SQLAlchemy
- mongo: MongoDB document store through pymongo
"""

from .mongo import MongoTagRepository, MongoTodoRepository
from .sql import SqlTagRepository, SqlTodoRepository

__all__ = [
    # Relational adapters
    "SqlTodoRepository",
    "SqlTagRepository",
    # Document adapters
    "MongoTodoRepository",
    "MongoTagRepository",
]
