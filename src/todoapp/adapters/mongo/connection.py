"""MongoDB connection management.

``MongoConnection`` owns the single ``MongoClient`` shared by the todo and tag
repositories of one factory invocation. When the server cannot be reached at
construction time the connection hands out ``None`` instead of a database and
the repositories run in disconnected mode.
"""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from todoapp.utils.logger import get_logger

DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 2000


class MongoConnection:
    """Lazily connected MongoDB client for one database."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 27017,
        database_name: str = "todoapp",
        *,
        client: MongoClient | None = None,
        server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    ):
        """Initialize the connection.

        Args:
            host: MongoDB host name
            port: MongoDB port
            database_name: Database holding the todos and tags collections
            client: Optional pre-built client (tests pass a mongomock client)
            server_selection_timeout_ms: How long the construction-time ping waits
        """
        self.host = host
        self.port = port
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client = client
        self._database: Database | None = None
        self._logger = get_logger("adapters.mongo")

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(
                self.host,
                self.port,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
        return self._client

    def connect(self) -> Database | None:
        """Return the database, or None if the server does not answer a ping."""
        if self._database is not None:
            return self._database

        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            self._logger.warning(
                "MongoDB at %s:%s unreachable, running disconnected: %s",
                self.host,
                self.port,
                e,
            )
            return None

        self._database = self.client[self.database_name]
        self._logger.info("connected to MongoDB %s:%s/%s", self.host, self.port, self.database_name)
        return self._database

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
