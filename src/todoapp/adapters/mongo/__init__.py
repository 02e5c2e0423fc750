"""MongoDB adapter module - document storage implementation."""

from todoapp.adapters.mongo.connection import MongoConnection
from todoapp.adapters.mongo.tag_repository import MongoTagRepository
from todoapp.adapters.mongo.todo_repository import MongoTodoRepository

__all__ = [
    "MongoConnection",
    "MongoTodoRepository",
    "MongoTagRepository",
]
