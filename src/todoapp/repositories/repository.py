"""Repository abstraction layer for todoapp.

This module defines the abstract base classes (interfaces) for both repository
types, following the hexagonal architecture (Ports & Adapters) pattern.

Repositories hide whether todos and tags live in a relational database or in a
document store. Two rules hold for every implementation:

- Find operations never raise for a missing entity; they return None or an
  empty list. ``delete_by_id`` on an unknown id is a silent no-op.
- ``save`` may return a different object than the one passed in (the
  relational adapter returns the session-managed copy after a merge).
  Callers must keep using the returned instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todoapp.models import Tag, Todo


class TodoRepository(ABC):
    """Abstract base class for todo persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Todo]:
        """Return every stored todo."""
        raise NotImplementedError("TodoRepository.find_all() must be implemented by adapter")

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Todo | None:
        """Get a todo by ID.

        Args:
            todo_id: Surrogate key of the todo

        Returns:
            The todo, or None if no todo has this ID
        """
        raise NotImplementedError("TodoRepository.find_by_id() must be implemented by adapter")

    @abstractmethod
    def save(self, todo: Todo) -> Todo:
        """Insert the todo if it has no ID, otherwise update it.

        Args:
            todo: Todo to persist

        Returns:
            The persisted todo, carrying its ID. May be a distinct object
            from the argument.
        """
        raise NotImplementedError("TodoRepository.save() must be implemented by adapter")

    @abstractmethod
    def delete(self, todo: Todo) -> None:
        """Delete a todo by reference. A todo without ID is ignored."""
        raise NotImplementedError("TodoRepository.delete() must be implemented by adapter")

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Delete a todo by ID. Unknown IDs are ignored."""
        raise NotImplementedError("TodoRepository.delete_by_id() must be implemented by adapter")

    @abstractmethod
    def find_by_done(self, done: bool) -> list[Todo]:
        """Return the todos whose completion status equals ``done``."""
        raise NotImplementedError("TodoRepository.find_by_done() must be implemented by adapter")

    @abstractmethod
    def find_by_description_containing(self, keyword: str) -> list[Todo]:
        """Return the todos whose description contains ``keyword``, ignoring case."""
        raise NotImplementedError(
            "TodoRepository.find_by_description_containing() must be implemented by adapter"
        )

    @abstractmethod
    def find_by_tag(self, tag: Tag) -> list[Todo]:
        """Return the todos carrying ``tag``. An unsaved tag matches nothing."""
        raise NotImplementedError("TodoRepository.find_by_tag() must be implemented by adapter")


class TagRepository(ABC):
    """Abstract base class for tag persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Tag]:
        """Return every stored tag."""
        raise NotImplementedError("TagRepository.find_all() must be implemented by adapter")

    @abstractmethod
    def find_by_id(self, tag_id: int) -> Tag | None:
        """Get a tag by ID, or None if it does not exist."""
        raise NotImplementedError("TagRepository.find_by_id() must be implemented by adapter")

    @abstractmethod
    def save(self, tag: Tag) -> Tag:
        """Insert the tag if it has no ID, otherwise update it.

        Returns:
            The persisted tag. May be a distinct object from the argument.
        """
        raise NotImplementedError("TagRepository.save() must be implemented by adapter")

    @abstractmethod
    def delete(self, tag: Tag) -> None:
        """Delete a tag by reference. A tag without ID is ignored."""
        raise NotImplementedError("TagRepository.delete() must be implemented by adapter")

    @abstractmethod
    def delete_by_id(self, tag_id: int) -> None:
        """Delete a tag by ID. Unknown IDs are ignored."""
        raise NotImplementedError("TagRepository.delete_by_id() must be implemented by adapter")

    @abstractmethod
    def find_by_name(self, name: str) -> Tag | None:
        """Return the tag with exactly this name, or None."""
        raise NotImplementedError("TagRepository.find_by_name() must be implemented by adapter")

    @abstractmethod
    def find_by_name_containing(self, keyword: str) -> list[Tag]:
        """Return the tags whose name contains ``keyword``, ignoring case."""
        raise NotImplementedError(
            "TagRepository.find_by_name_containing() must be implemented by adapter"
        )
