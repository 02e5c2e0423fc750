"""SQLAlchemy implementation of TodoRepository."""

from __future__ import annotations

from sqlalchemy import select

from todoapp.adapters.sql.base import SqlRepositoryBase
from todoapp.models import Tag, Todo
from todoapp.repositories import TodoRepository


class SqlTodoRepository(SqlRepositoryBase[Todo], TodoRepository):
    """Relational implementation of todo repository."""

    entity_class = Todo

    def find_by_done(self, done: bool) -> list[Todo]:
        stmt = select(Todo).where(Todo.done == done)
        return list(self.session.scalars(stmt).all())

    def find_by_description_containing(self, keyword: str) -> list[Todo]:
        """Substring match on the description, case folded and with LIKE wildcards escaped."""
        stmt = select(Todo).where(Todo.description.icontains(keyword, autoescape=True))
        return list(self.session.scalars(stmt).all())

    def find_by_tag(self, tag: Tag) -> list[Todo]:
        if tag.id is None:
            return []
        stmt = select(Todo).where(Todo._tags.any(Tag.id == tag.id))
        return list(self.session.scalars(stmt).all())
