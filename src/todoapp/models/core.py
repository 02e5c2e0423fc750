"""Todo and Tag domain entities.

Both entities are mapped to the relational schema with SQLAlchemy declarative
mapping. The document adapter uses the same classes as plain transient objects,
so the in-memory relationship behaviour is identical on both backends.

Equality and hashing follow two rules:

- Two entities are equal only when both carry the same non-null ``id``.
  An entity without an ``id`` is equal only to itself.
- The hash is derived from ``description`` (Todo) or ``name`` (Tag), never
  from ``id``, so an entity placed in a set before it is persisted can still
  be found after it receives an ``id``.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship, validates

from todoapp.models.exceptions import ValidationError


class Base(DeclarativeBase):
    """Declarative base holding the metadata for all todoapp tables."""


todo_tags = Table(
    "todo_tags",
    Base.metadata,
    Column("todo_id", ForeignKey("todos.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Todo(Base):
    """A task record with a description, a completion flag and a set of tags.

    Attributes:
        id: Surrogate key, None until the todo is first saved
        description: Task text (must not be None)
        done: Completion status, False at construction
        tags: Copy of the tags attached to this todo
    """

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    _tags: Mapped[set[Tag]] = relationship(
        secondary=todo_tags,
        back_populates="_todos",
        lazy="selectin",
    )

    def __init__(self, description: str, done: bool = False):
        self.description = description
        self.done = done

    @validates("description")
    def _validate_description(self, key: str, value: str | None) -> str:
        if value is None:
            raise ValidationError("Todo description cannot be None")
        return value

    @property
    def tags(self) -> set[Tag]:
        """Return a copy of the tag set; mutating it does not affect the todo."""
        return set(self._tags)

    @tags.setter
    def tags(self, tags: Iterable[Tag] | None) -> None:
        self._tags = set(tags) if tags is not None else set()

    def add_tag(self, tag: Tag) -> None:
        """Attach a tag; the todo also shows up in ``tag.todos``."""
        self._tags.add(tag)

    def remove_tag(self, tag: Tag) -> None:
        """Detach a tag from both sides of the relationship."""
        self._tags.discard(tag)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Todo):
            return NotImplemented
        return self.id is not None and other.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.description)

    def __repr__(self) -> str:
        return f"Todo(id={self.id!r}, description={self.description!r}, done={self.done!r})"


class Tag(Base):
    """A named label attachable to many todos.

    Attributes:
        id: Surrogate key, None until the tag is first saved
        name: Label text (must not be None)
        todos: Copy of the todos this tag is attached to
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # A list, not a set: the todo hash follows its description, which can change
    _todos: Mapped[list[Todo]] = relationship(
        secondary=todo_tags,
        back_populates="_tags",
    )

    def __init__(self, name: str):
        self.name = name

    @validates("name")
    def _validate_name(self, key: str, value: str | None) -> str:
        if value is None:
            raise ValidationError("Tag name cannot be None")
        return value

    @property
    def todos(self) -> set[Todo]:
        """Return a copy of the todo set; mutating it does not affect the tag."""
        return set(self._todos)

    @todos.setter
    def todos(self, todos: Iterable[Todo] | None) -> None:
        unique: list[Todo] = []
        for todo in todos or ():
            if todo not in unique:
                unique.append(todo)
        self._todos = unique

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Tag):
            return NotImplemented
        return self.id is not None and other.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Tag(id={self.id!r}, name={self.name!r})"
