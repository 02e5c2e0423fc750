"""MongoDB implementation of TodoRepository.

Todo documents store their tags as a list of tag IDs (``tagIds``), not as
embedded tag documents. Reading a todo resolves every ID through the tag
repository; IDs whose tag no longer exists are dropped from the result.
"""

from __future__ import annotations

import re
from typing import Any

from pymongo.database import Database

from todoapp.adapters.mongo.base import MongoRepositoryBase
from todoapp.adapters.mongo.tag_repository import MongoTagRepository
from todoapp.models import Tag, Todo
from todoapp.repositories import TodoRepository


class MongoTodoRepository(MongoRepositoryBase[Todo], TodoRepository):
    """Todos stored in the ``todos`` collection."""

    collection_name = "todos"

    def __init__(self, database: Database | None, tag_repository: MongoTagRepository):
        """Initialize the repository.

        Args:
            database: MongoDB database, or None for disconnected mode
            tag_repository: Repository used to resolve ``tagIds`` into tags
        """
        self.tag_repository = tag_repository
        super().__init__(database)

    def _to_document(self, todo: Todo) -> dict[str, Any]:
        return {
            "_id": todo.id,
            "description": todo.description,
            "done": todo.done,
            "tagIds": sorted(tag.id for tag in todo.tags if tag.id is not None),
        }

    def _from_document(self, doc: dict[str, Any]) -> Todo:
        todo = Todo(doc["description"], done=doc.get("done", False))
        todo.id = doc["_id"]

        tags: set[Tag] = set()
        for tag_id in doc.get("tagIds") or []:
            tag = self.tag_repository.find_by_id(tag_id)
            if tag is not None:
                tags.add(tag)
        todo.tags = tags
        return todo

    def find_by_done(self, done: bool) -> list[Todo]:
        return self._find_many({"done": done})

    def find_by_description_containing(self, keyword: str) -> list[Todo]:
        return self._find_many({"description": {"$regex": re.escape(keyword), "$options": "i"}})

    def find_by_tag(self, tag: Tag) -> list[Todo]:
        if tag.id is None:
            return []
        return self._find_many({"tagIds": tag.id})
