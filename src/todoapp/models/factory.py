"""Repository factory for instantiating the correct storage adapters.

The factory reads the backend kind from an explicit ``AppConfig`` and builds
one ``StorageStrategy`` holding a todo repository and a tag repository that
share one connection. There is no fallback: a missing or unknown backend kind
is fatal.
"""

from __future__ import annotations

from todoapp.adapters.mongo import MongoConnection
from todoapp.adapters.sql import SqlDatabase
from todoapp.models.config_models import AppConfig, DatabaseType
from todoapp.models.exceptions import RepositoryFactoryError
from todoapp.models.storage_strategy import (
    DocumentStorageStrategy,
    RelationalStorageStrategy,
    StorageStrategy,
)
from todoapp.repositories import TagRepository, TodoRepository
from todoapp.utils.logger import get_logger


class RepositoryFactory:
    """Factory for creating repository instances based on configuration.

    The strategy is created on first use and then reused, so
    ``get_todo_repository`` and ``get_tag_repository`` always return a
    consistent pair.
    """

    def __init__(self, config: AppConfig):
        """Initialize the repository factory.

        Args:
            config: Application configuration naming the backend and its
                connection parameters
        """
        self.config = config
        self._strategy: StorageStrategy | None = None
        self._logger = get_logger("factory")

    @property
    def database_type(self) -> DatabaseType:
        """Determine the backend kind from configuration.

        Raises:
            RepositoryFactoryError: If the type is absent or unsupported
        """
        raw = self.config.database.type
        if not raw:
            raise RepositoryFactoryError("No database type configured")
        try:
            return DatabaseType(raw)
        except ValueError as e:
            raise RepositoryFactoryError(f"Unsupported database type: {raw}") from e

    def create_strategy(self) -> StorageStrategy:
        """Build a new storage strategy for the configured backend.

        Raises:
            RepositoryFactoryError: If the backend kind is absent or unsupported
            BackendConnectionError: If the relational backend is unreachable
        """
        db_type = self.database_type

        if db_type is DatabaseType.MYSQL:
            mysql = self.config.mysql
            database = SqlDatabase(mysql.url, mysql.username, mysql.password, echo=mysql.echo)
            strategy: StorageStrategy = RelationalStorageStrategy(database)
        else:
            mongo = self.config.mongodb
            connection = MongoConnection(mongo.host, mongo.port, mongo.database)
            strategy = DocumentStorageStrategy(connection)

        self._logger.info("storage backend selected: %s", strategy.storage_type)
        return strategy

    @property
    def strategy(self) -> StorageStrategy:
        if self._strategy is None:
            self._strategy = self.create_strategy()
        return self._strategy

    def get_todo_repository(self) -> TodoRepository:
        """Get the todo repository of the shared strategy."""
        return self.strategy.get_todo_repository()

    def get_tag_repository(self) -> TagRepository:
        """Get the tag repository of the shared strategy."""
        return self.strategy.get_tag_repository()

    def close(self) -> None:
        if self._strategy is not None:
            self._strategy.close()
            self._strategy = None
