"""SQLAlchemy implementation of TagRepository."""

from __future__ import annotations

from sqlalchemy import select

from todoapp.adapters.sql.base import SqlRepositoryBase
from todoapp.models import Tag
from todoapp.repositories import TagRepository


class SqlTagRepository(SqlRepositoryBase[Tag], TagRepository):
    """Relational implementation of tag repository."""

    entity_class = Tag

    def find_by_name(self, name: str) -> Tag | None:
        stmt = select(Tag).where(Tag.name == name).limit(1)
        return self.session.scalars(stmt).first()

    def find_by_name_containing(self, keyword: str) -> list[Tag]:
        stmt = select(Tag).where(Tag.name.icontains(keyword, autoescape=True))
        return list(self.session.scalars(stmt).all())
