"""
Strategy Pattern: Storage Strategy Container

A storage strategy bundles the todo and tag repositories of one backend
together with that backend's transaction control. The factory builds exactly
one strategy at startup; services never know which backend they are using.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todoapp.adapters.mongo import MongoConnection, MongoTagRepository, MongoTodoRepository
from todoapp.adapters.sql import SqlDatabase, SqlTagRepository, SqlTodoRepository
from todoapp.repositories import TagRepository, TodoRepository


class StorageStrategy(ABC):
    """
    Abstract base class for storage strategies.

    A strategy encapsulates ALL repository implementations for a given
    storage backend (either relational or MongoDB), sharing one connection.
    """

    @abstractmethod
    def get_todo_repository(self) -> TodoRepository:
        """Get todo repository implementation for this strategy."""

    @abstractmethod
    def get_tag_repository(self) -> TagRepository:
        """Get tag repository implementation for this strategy."""

    def begin_transaction(self) -> None:
        """Begin a unit of work. Backends without transactions ignore it."""

    def commit_transaction(self) -> None:
        """Commit the current unit of work, if any."""

    def rollback_transaction(self) -> None:
        """Roll back the current unit of work, if any."""

    @abstractmethod
    def close(self) -> None:
        """Release the backend connection."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Get storage type identifier (for logging/debugging)."""


class RelationalStorageStrategy(StorageStrategy):
    """
    Relational storage strategy.

    Both repositories operate on the single session owned by ``database``,
    and transaction control goes through the relational adapter.
    """

    def __init__(self, database: SqlDatabase):
        self.database = database
        self._todo_repo = SqlTodoRepository(database)
        self._tag_repo = SqlTagRepository(database)

    def get_todo_repository(self) -> SqlTodoRepository:
        return self._todo_repo

    def get_tag_repository(self) -> SqlTagRepository:
        return self._tag_repo

    def begin_transaction(self) -> None:
        self._todo_repo.begin_transaction()

    def commit_transaction(self) -> None:
        self._todo_repo.commit_transaction()

    def rollback_transaction(self) -> None:
        self._todo_repo.rollback_transaction()

    def close(self) -> None:
        self.database.close()

    @property
    def storage_type(self) -> str:
        return "mysql"


class DocumentStorageStrategy(StorageStrategy):
    """
    MongoDB storage strategy.

    The todo repository resolves tag IDs through the very tag repository this
    strategy exposes. MongoDB writes are not wrapped in transactions.
    """

    def __init__(self, connection: MongoConnection):
        self.connection = connection
        database = connection.connect()
        self._tag_repo = MongoTagRepository(database)
        self._todo_repo = MongoTodoRepository(database, self._tag_repo)

    def get_todo_repository(self) -> MongoTodoRepository:
        return self._todo_repo

    def get_tag_repository(self) -> MongoTagRepository:
        return self._tag_repo

    @property
    def is_connected(self) -> bool:
        return self._todo_repo.is_connected

    def close(self) -> None:
        self.connection.close()

    @property
    def storage_type(self) -> str:
        return "mongodb"
