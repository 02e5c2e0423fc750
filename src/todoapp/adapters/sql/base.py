"""Shared behaviour of the SQLAlchemy repositories."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from todoapp.adapters.sql.connection import SqlDatabase
from todoapp.models import Base
from todoapp.utils.logger import get_logger

EntityT = TypeVar("EntityT", bound=Base)


class SqlRepositoryBase(Generic[EntityT]):
    """CRUD on one mapped entity class through the database's shared session.

    The repository never commits: transaction boundaries belong to
    ``SqlDatabase`` and are exposed here through the ``*_transaction`` methods.
    """

    entity_class: type[EntityT]

    def __init__(self, database: SqlDatabase):
        """Initialize the repository.

        Args:
            database: Connection manager supplying the shared session
        """
        self.database = database
        self._logger = get_logger("adapters.sql")

    @property
    def session(self) -> Session:
        return self.database.session

    def find_all(self) -> list[EntityT]:
        return list(self.session.scalars(select(self.entity_class)).all())

    def find_by_id(self, entity_id: int) -> EntityT | None:
        if entity_id is None:
            return None
        return self.session.get(self.entity_class, entity_id)

    def save(self, entity: EntityT) -> EntityT:
        """Insert a new entity or merge a detached one.

        A new entity is added and flushed so it receives its generated ID; the
        same instance is returned. An entity that already has an ID is merged,
        and the session-managed copy is returned instead of the argument.
        """
        if entity.id is None:
            self.session.add(entity)
            self.session.flush()
            self._logger.debug("inserted %r", entity)
            return entity

        managed = self.session.merge(entity)
        self.session.flush()
        self._logger.debug("merged %r", managed)
        return managed

    def delete(self, entity: EntityT) -> None:
        if entity in self.session:
            self.session.delete(entity)
        elif entity.id is None:
            return
        else:
            # A detached instance cannot be deleted; remove the managed one
            managed = self.session.get(self.entity_class, entity.id)
            if managed is None:
                return
            self.session.delete(managed)
        self.session.flush()
        self._logger.debug("deleted %s id=%s", self.entity_class.__name__, entity.id)

    def delete_by_id(self, entity_id: int) -> None:
        entity = self.find_by_id(entity_id)
        if entity is not None:
            self.session.delete(entity)
            self.session.flush()
            self._logger.debug("deleted %s id=%s", self.entity_class.__name__, entity_id)

    def begin_transaction(self) -> None:
        self.database.begin_transaction()

    def commit_transaction(self) -> None:
        self.database.commit_transaction()

    def rollback_transaction(self) -> None:
        self.database.rollback_transaction()
