"""Todo service - Business logic for todo and tag operations.

The service is the only component that touches both repositories at once.
Every use case validates its input before any storage call is made. Lookups of
unknown IDs are never errors: they yield None or an empty list.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from todoapp.models import Tag, Todo, ValidationError
from todoapp.models.storage_strategy import StorageStrategy
from todoapp.repositories import TagRepository, TodoRepository
from todoapp.utils.logger import get_logger

T = TypeVar("T")


def _require_text(value: str | None, what: str) -> str:
    """Return ``value`` trimmed, rejecting None and blank strings."""
    if value is None:
        raise ValidationError(f"{what} cannot be None")
    stripped = value.strip()
    if not stripped:
        raise ValidationError(f"{what} cannot be empty")
    return stripped


def _require_id(value: int | None, what: str) -> int:
    if value is None:
        raise ValidationError(f"{what} cannot be None")
    return value


class TodoService:
    """Service for todo and tag business logic.

    This service encapsulates business rules and orchestrates operations over
    the todo and tag repositories. When a transaction manager is given (any
    ``StorageStrategy``), every mutating use case runs inside
    begin/commit and is rolled back if it raises.
    """

    def __init__(
        self,
        todo_repository: TodoRepository,
        tag_repository: TagRepository,
        transaction_manager: StorageStrategy | None = None,
    ):
        """Initialize the todo service.

        Args:
            todo_repository: TodoRepository implementation for data access
            tag_repository: TagRepository implementation for data access
            transaction_manager: Optional strategy providing transaction control
        """
        self.todo_repository = todo_repository
        self.tag_repository = tag_repository
        self.transaction_manager = transaction_manager
        self._logger = get_logger("services.todo")

    @classmethod
    def from_strategy(cls, strategy: StorageStrategy) -> TodoService:
        """Build a service over both repositories of ``strategy``."""
        return cls(
            strategy.get_todo_repository(),
            strategy.get_tag_repository(),
            transaction_manager=strategy,
        )

    def _execute_with_transaction(self, operation: Callable[[], T]) -> T:
        if self.transaction_manager is None:
            return operation()

        self.transaction_manager.begin_transaction()
        try:
            result = operation()
        except Exception:
            self.transaction_manager.rollback_transaction()
            raise
        self.transaction_manager.commit_transaction()
        return result

    # ------------------------------------------------------------------
    # Todos
    # ------------------------------------------------------------------

    def get_all_todos(self) -> list[Todo]:
        return self.todo_repository.find_all()

    def get_todo_by_id(self, todo_id: int) -> Todo | None:
        return self.todo_repository.find_by_id(todo_id)

    def save_todo(self, todo: Todo) -> Todo:
        """Persist ``todo``; always keep using the returned instance."""
        return self._execute_with_transaction(lambda: self.todo_repository.save(todo))

    def create_todo(self, description: str | None) -> Todo:
        """Create a new todo.

        Args:
            description: Task text; surrounding whitespace is trimmed

        Returns:
            Saved Todo with its ID

        Raises:
            ValidationError: If description is None or blank
        """
        text = _require_text(description, "Todo description")
        todo = self.save_todo(Todo(text))
        self._logger.info("todo created: id=%s", todo.id)
        return todo

    def update_todo_description(self, todo_id: int, description: str | None) -> Todo | None:
        """Replace a todo's description. Returns None if the todo does not exist."""
        text = _require_text(description, "Todo description")

        def operation() -> Todo | None:
            todo = self.todo_repository.find_by_id(todo_id)
            if todo is None:
                return None
            todo.description = text
            return self.todo_repository.save(todo)

        return self._execute_with_transaction(operation)

    def delete_todo(self, todo_id: int) -> None:
        self._execute_with_transaction(lambda: self.todo_repository.delete_by_id(todo_id))
        self._logger.info("todo deleted: id=%s", todo_id)

    def _set_done(self, todo_id: int, done: bool) -> Todo | None:
        def operation() -> Todo | None:
            todo = self.todo_repository.find_by_id(todo_id)
            if todo is None:
                return None
            todo.done = done
            return self.todo_repository.save(todo)

        return self._execute_with_transaction(operation)

    def mark_todo_complete(self, todo_id: int) -> Todo | None:
        return self._set_done(todo_id, True)

    def mark_todo_incomplete(self, todo_id: int) -> Todo | None:
        return self._set_done(todo_id, False)

    def toggle_todo_done(self, todo_id: int) -> bool | None:
        """Flip a todo's completion status.

        Returns:
            The new status, or None if the todo does not exist
        """

        def operation() -> bool | None:
            todo = self.todo_repository.find_by_id(todo_id)
            if todo is None:
                return None
            todo.done = not todo.done
            return self.todo_repository.save(todo).done

        return self._execute_with_transaction(operation)

    def get_completed_todos(self) -> list[Todo]:
        return self.todo_repository.find_by_done(True)

    def get_incomplete_todos(self) -> list[Todo]:
        return self.todo_repository.find_by_done(False)

    def search_todos(self, keyword: str | None) -> list[Todo]:
        """Case-insensitive description search; a blank keyword returns everything."""
        if keyword is None or not keyword.strip():
            return self.todo_repository.find_all()
        return self.todo_repository.find_by_description_containing(keyword.strip())

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def get_all_tags(self) -> list[Tag]:
        return self.tag_repository.find_all()

    def get_tag_by_id(self, tag_id: int) -> Tag | None:
        return self.tag_repository.find_by_id(tag_id)

    def save_tag(self, tag: Tag) -> Tag:
        return self._execute_with_transaction(lambda: self.tag_repository.save(tag))

    def create_tag(self, name: str | None) -> Tag:
        """Create a new tag.

        Raises:
            ValidationError: If name is None, blank, or already taken
        """
        text = _require_text(name, "Tag name")
        if self.tag_repository.find_by_name(text) is not None:
            raise ValidationError(f"Tag with name '{text}' already exists")

        tag = self.save_tag(Tag(text))
        self._logger.info("tag created: id=%s", tag.id)
        return tag

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag and detach it from every todo. Todos are kept."""

        def operation() -> None:
            tag = self.tag_repository.find_by_id(tag_id)
            if tag is None:
                return
            for todo in self.todo_repository.find_by_tag(tag):
                todo.remove_tag(tag)
                self.todo_repository.save(todo)
            self.tag_repository.delete_by_id(tag_id)

        self._execute_with_transaction(operation)
        self._logger.info("tag deleted: id=%s", tag_id)

    def find_tag_by_name(self, name: str) -> Tag | None:
        return self.tag_repository.find_by_name(name)

    def search_tags(self, keyword: str | None) -> list[Tag]:
        if keyword is None or not keyword.strip():
            return self.tag_repository.find_all()
        return self.tag_repository.find_by_name_containing(keyword.strip())

    # ------------------------------------------------------------------
    # Relationship
    # ------------------------------------------------------------------

    def add_tag_to_todo(self, todo_id: int | None, tag_id: int | None) -> Todo | None:
        """Attach a tag to a todo.

        Returns:
            The saved todo, or None if either entity does not exist

        Raises:
            ValidationError: If either ID is None
        """
        todo_id = _require_id(todo_id, "Todo id")
        tag_id = _require_id(tag_id, "Tag id")

        def operation() -> Todo | None:
            todo = self.todo_repository.find_by_id(todo_id)
            tag = self.tag_repository.find_by_id(tag_id)
            if todo is None or tag is None:
                return None
            todo.add_tag(tag)
            return self.todo_repository.save(todo)

        return self._execute_with_transaction(operation)

    def remove_tag_from_todo(self, todo_id: int | None, tag_id: int | None) -> Todo | None:
        """Detach a tag from a todo. Returns None if either entity does not exist."""
        todo_id = _require_id(todo_id, "Todo id")
        tag_id = _require_id(tag_id, "Tag id")

        def operation() -> Todo | None:
            todo = self.todo_repository.find_by_id(todo_id)
            tag = self.tag_repository.find_by_id(tag_id)
            if todo is None or tag is None:
                return None
            todo.remove_tag(tag)
            return self.todo_repository.save(todo)

        return self._execute_with_transaction(operation)

    def find_todos_by_tag(self, tag: Tag | None) -> list[Todo]:
        if tag is None:
            raise ValidationError("Tag cannot be None")
        return self.todo_repository.find_by_tag(tag)

    def find_todos_by_tag_id(self, tag_id: int) -> list[Todo]:
        tag = self.tag_repository.find_by_id(tag_id)
        if tag is None:
            return []
        return self.todo_repository.find_by_tag(tag)
