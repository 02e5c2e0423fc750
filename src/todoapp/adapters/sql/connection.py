"""Relational database connection management.

``SqlDatabase`` owns the SQLAlchemy engine and the single long-lived session
the relational repositories operate on. It also exposes explicit transaction
control; the repositories themselves never commit.
"""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from todoapp.models import Base
from todoapp.models.exceptions import BackendConnectionError
from todoapp.utils.logger import get_logger


def build_url(url: str | URL, username: str | None = None, password: str | None = None) -> URL:
    """Merge separately configured credentials into a database URL.

    Credentials already present in ``url`` win over the separate values.

    Args:
        url: SQLAlchemy database URL (e.g. "mysql+pymysql://localhost:3306/todoapp")
        username: Optional user name
        password: Optional password

    Returns:
        Parsed URL object
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        return parsed
    if parsed.username is None and username:
        parsed = parsed.set(username=username, password=password)
    return parsed


def _is_in_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class SqlDatabase:
    """Engine plus one shared session for the relational backend.

    Provides:
    - Schema creation for the todos, tags and todo_tags tables
    - A single session shared by the todo and tag repositories
    - begin/commit/rollback that never nest and are no-ops when redundant

    Raises:
        BackendConnectionError: If the database cannot be reached while the
            schema is being created
    """

    def __init__(
        self,
        url: str | URL,
        username: str | None = None,
        password: str | None = None,
        *,
        echo: bool = False,
    ):
        self._logger = get_logger("adapters.sql")
        self.url = build_url(url, username, password)

        engine_kwargs: dict = {"echo": echo}
        if _is_in_memory_sqlite(self.url):
            # One connection for the whole process, or the in-memory db vanishes
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_pre_ping"] = True

        try:
            self.engine: Engine = create_engine(self.url, **engine_kwargs)
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            self._logger.error(
                "relational backend unavailable: %s",
                self.url.render_as_string(hide_password=True),
            )
            raise BackendConnectionError(f"Database initialization failed: {e}") from e

        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.session: Session = self._session_factory()
        self._logger.info(
            "relational backend ready: %s", self.url.render_as_string(hide_password=True)
        )

    def begin_transaction(self) -> None:
        """Begin a transaction unless one is already active."""
        if not self.session.in_transaction():
            self.session.begin()

    def commit_transaction(self) -> None:
        """Commit the active transaction, if any."""
        if self.session.in_transaction():
            self.session.commit()

    def rollback_transaction(self) -> None:
        """Roll back the active transaction, if any."""
        if self.session.in_transaction():
            self.session.rollback()

    def close(self) -> None:
        """Close the session and release pooled connections."""
        self.session.close()
        self.engine.dispose()
