"""Repository interfaces for todoapp.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- todoapp.adapters.sql (relational database through SQLAlchemy)
- todoapp.adapters.mongo (MongoDB through pymongo)
"""

from .repository import TagRepository, TodoRepository

__all__ = [
    "TodoRepository",
    "TagRepository",
]
