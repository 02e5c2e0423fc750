"""Shared behaviour of the MongoDB repositories.

Each repository keeps its own integer ID sequence for its collection. The
sequence resumes from the highest stored ``_id`` when the repository is
constructed, so restarting the process never reuses an ID.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database

from todoapp.models import Base
from todoapp.utils.logger import get_logger

EntityT = TypeVar("EntityT", bound=Base)


class MongoRepositoryBase(ABC, Generic[EntityT]):
    """CRUD on one collection with upsert-by-id saves.

    With ``database=None`` the repository is disconnected: reads return
    nothing, deletes do nothing, and ``save`` still assigns an ID but persists
    nothing.
    """

    collection_name: str

    def __init__(self, database: Database | None):
        self._collection: Collection | None = (
            database[self.collection_name] if database is not None else None
        )
        self._logger = get_logger("adapters.mongo")
        self._next_id = 1
        self._initialize_next_id()

    @property
    def is_connected(self) -> bool:
        return self._collection is not None

    @property
    def next_id(self) -> int:
        return self._next_id

    def _initialize_next_id(self) -> None:
        if self._collection is None:
            return
        last = self._collection.find_one(sort=[("_id", DESCENDING)])
        if last is not None:
            self._next_id = int(last["_id"]) + 1

    @abstractmethod
    def _to_document(self, entity: EntityT) -> dict[str, Any]:
        """Serialize an entity into its stored document."""

    @abstractmethod
    def _from_document(self, doc: dict[str, Any]) -> EntityT:
        """Rebuild an entity from a stored document."""

    def _find_many(self, query: dict[str, Any]) -> list[EntityT]:
        if self._collection is None:
            return []
        return [self._from_document(doc) for doc in self._collection.find(query)]

    def _find_one(self, query: dict[str, Any]) -> EntityT | None:
        if self._collection is None:
            return None
        doc = self._collection.find_one(query)
        return self._from_document(doc) if doc is not None else None

    def find_all(self) -> list[EntityT]:
        return self._find_many({})

    def find_by_id(self, entity_id: int) -> EntityT | None:
        if entity_id is None:
            return None
        return self._find_one({"_id": entity_id})

    def save(self, entity: EntityT) -> EntityT:
        """Assign the next ID if needed, then replace-or-insert by ID.

        Returns the same instance that was passed in.
        """
        if entity.id is None:
            entity.id = self._next_id
            self._next_id += 1

        if self._collection is None:
            self._logger.debug("disconnected, %r not persisted", entity)
            return entity

        self._collection.replace_one({"_id": entity.id}, self._to_document(entity), upsert=True)
        self._logger.debug("upserted %r into %s", entity, self.collection_name)
        return entity

    def delete(self, entity: EntityT) -> None:
        if entity.id is not None:
            self.delete_by_id(entity.id)

    def delete_by_id(self, entity_id: int) -> None:
        if self._collection is None:
            return
        self._collection.delete_one({"_id": entity_id})

    def delete_all(self) -> None:
        """Empty the collection and restart the ID sequence at 1."""
        if self._collection is not None:
            self._collection.delete_many({})
        self._next_id = 1
