"""MongoDB implementation of TagRepository."""

from __future__ import annotations

import re
from typing import Any

from todoapp.adapters.mongo.base import MongoRepositoryBase
from todoapp.models import Tag
from todoapp.repositories import TagRepository


class MongoTagRepository(MongoRepositoryBase[Tag], TagRepository):
    """Tags stored as ``{"_id": int, "name": str}`` in the ``tags`` collection."""

    collection_name = "tags"

    def _to_document(self, tag: Tag) -> dict[str, Any]:
        return {"_id": tag.id, "name": tag.name}

    def _from_document(self, doc: dict[str, Any]) -> Tag:
        tag = Tag(doc["name"])
        tag.id = doc["_id"]
        return tag

    def find_by_name(self, name: str) -> Tag | None:
        return self._find_one({"name": name})

    def find_by_name_containing(self, keyword: str) -> list[Tag]:
        return self._find_many({"name": {"$regex": re.escape(keyword), "$options": "i"}})
