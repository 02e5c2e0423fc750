"""UI-facing controller.

The controller sits between a user interface and ``TodoService``. It filters
out empty input before it reaches the service and reports failures as
None/False instead of raising, so a UI can bind widgets straight to it.
"""

from __future__ import annotations

from todoapp.models import Tag, Todo
from todoapp.services.todo_service import TodoService


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class TodoController:
    """Thin adapter from user actions to service calls."""

    def __init__(self, todo_service: TodoService):
        self.todo_service = todo_service

    def add_todo(self, description: str | None) -> Todo | None:
        """Create a todo, or return None if the description is empty."""
        if _blank(description):
            return None
        return self.todo_service.create_todo(description.strip())

    def add_tag(self, tag_name: str | None) -> Tag | None:
        """Create a tag, or return None if the name is empty or already used."""
        if _blank(tag_name):
            return None
        name = tag_name.strip()
        if self.todo_service.find_tag_by_name(name) is not None:
            return None
        return self.todo_service.create_tag(name)

    def delete_todo(self, todo_id: int | None) -> bool:
        if todo_id is None:
            return False
        self.todo_service.delete_todo(todo_id)
        return True

    def update_todo_description(self, todo_id: int | None, new_description: str | None) -> bool:
        if todo_id is None or _blank(new_description):
            return False
        return self.todo_service.update_todo_description(todo_id, new_description) is not None

    def delete_tag(self, tag_id: int | None) -> bool:
        if tag_id is None:
            return False
        self.todo_service.delete_tag(tag_id)
        return True

    def toggle_todo_done(self, todo_id: int | None) -> bool | None:
        """Flip completion; returns the new status or None if not found."""
        if todo_id is None:
            return None
        return self.todo_service.toggle_todo_done(todo_id)

    def search_todos(self, keyword: str | None) -> list[Todo]:
        if _blank(keyword):
            return self.todo_service.get_all_todos()
        return self.todo_service.search_todos(keyword.strip())

    def get_all_todos(self) -> list[Todo]:
        return self.todo_service.get_all_todos()

    def get_all_tags(self) -> list[Tag]:
        return self.todo_service.get_all_tags()

    def add_tag_to_todo(self, todo_id: int | None, tag_id: int | None) -> bool:
        if todo_id is None or tag_id is None:
            return False
        return self.todo_service.add_tag_to_todo(todo_id, tag_id) is not None

    def remove_tag_from_todo(self, todo_id: int | None, tag_id: int | None) -> bool:
        if todo_id is None or tag_id is None:
            return False
        return self.todo_service.remove_tag_from_todo(todo_id, tag_id) is not None
