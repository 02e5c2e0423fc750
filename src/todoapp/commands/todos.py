"""Todo management commands."""

import typer

from todoapp.utils import exit_codes
from todoapp.utils.typer_helpers import SuggestingGroup
from todoapp.utils.ui.formatters import (
    format_error,
    format_output,
    format_success,
    todo_to_dict,
)

from .context import get_controller
from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Todo management commands")


def _not_found(what: str, item_id: int) -> typer.Exit:
    format_error(f"{what} {item_id} not found")
    return typer.Exit(code=exit_codes.ERROR_NOT_FOUND)


@app.command("list")
@command_wrapper
def list_todos(
    done: bool | None = typer.Option(
        None, "--done/--pending", help="Only completed or only pending todos"
    ),
    tag: str | None = typer.Option(None, "--tag", help="Only todos carrying this tag"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List todos."""
    service = get_controller().todo_service

    if tag is not None:
        found = service.find_tag_by_name(tag)
        todos = service.find_todos_by_tag(found) if found is not None else []
    elif done is True:
        todos = service.get_completed_todos()
    elif done is False:
        todos = service.get_incomplete_todos()
    else:
        todos = service.get_all_todos()

    if tag is not None and done is not None:
        todos = [t for t in todos if t.done == done]
    format_output([todo_to_dict(t) for t in todos], output)


@app.command("add")
@command_wrapper
def add_todo(
    description: str = typer.Argument(..., help="Todo description"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Create a new todo."""
    todo = get_controller().add_todo(description)
    if todo is None:
        format_error("Description must not be empty")
        raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS)
    format_success(f"Todo created: {todo.id}")
    format_output(todo_to_dict(todo), output)


@app.command("edit")
@command_wrapper
def edit_todo(
    todo_id: int = typer.Argument(..., help="Todo ID"),
    description: str = typer.Argument(..., help="New description"),
) -> None:
    """Change the description of a todo."""
    if not description.strip():
        format_error("Description must not be empty")
        raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS)
    if not get_controller().update_todo_description(todo_id, description):
        raise _not_found("Todo", todo_id)
    format_success(f"Todo updated: {todo_id}")


@app.command("toggle")
@command_wrapper
def toggle_todo(todo_id: int = typer.Argument(..., help="Todo ID")) -> None:
    """Flip a todo between done and pending."""
    done = get_controller().toggle_todo_done(todo_id)
    if done is None:
        raise _not_found("Todo", todo_id)
    format_success(f"Todo {todo_id} is now {'done' if done else 'pending'}")


@app.command("done")
@command_wrapper
def complete_todo(todo_id: int = typer.Argument(..., help="Todo ID")) -> None:
    """Mark a todo as done."""
    if get_controller().todo_service.mark_todo_complete(todo_id) is None:
        raise _not_found("Todo", todo_id)
    format_success(f"Todo {todo_id} marked as done")


@app.command("undo")
@command_wrapper
def reopen_todo(todo_id: int = typer.Argument(..., help="Todo ID")) -> None:
    """Mark a todo as pending again."""
    if get_controller().todo_service.mark_todo_incomplete(todo_id) is None:
        raise _not_found("Todo", todo_id)
    format_success(f"Todo {todo_id} marked as pending")


@app.command("delete")
@command_wrapper
def delete_todo(
    todo_id: int = typer.Argument(..., help="Todo ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a todo."""
    controller = get_controller()
    if controller.todo_service.get_todo_by_id(todo_id) is None:
        raise _not_found("Todo", todo_id)
    if not yes:
        typer.confirm(f"Delete todo {todo_id}?", abort=True)
    controller.delete_todo(todo_id)
    format_success(f"Todo deleted: {todo_id}")


@app.command("search")
@command_wrapper
def search_todos(
    keyword: str = typer.Argument("", help="Text to look for (case-insensitive)"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Search todos by description."""
    todos = get_controller().search_todos(keyword)
    format_output([todo_to_dict(t) for t in todos], output)


@app.command("tag")
@command_wrapper
def tag_todo(
    todo_id: int = typer.Argument(..., help="Todo ID"),
    tag_id: int = typer.Argument(..., help="Tag ID"),
) -> None:
    """Attach a tag to a todo."""
    if not get_controller().add_tag_to_todo(todo_id, tag_id):
        format_error(f"Todo {todo_id} or tag {tag_id} not found")
        raise typer.Exit(code=exit_codes.ERROR_NOT_FOUND)
    format_success(f"Tag {tag_id} added to todo {todo_id}")


@app.command("untag")
@command_wrapper
def untag_todo(
    todo_id: int = typer.Argument(..., help="Todo ID"),
    tag_id: int = typer.Argument(..., help="Tag ID"),
) -> None:
    """Detach a tag from a todo."""
    if not get_controller().remove_tag_from_todo(todo_id, tag_id):
        format_error(f"Todo {todo_id} or tag {tag_id} not found")
        raise typer.Exit(code=exit_codes.ERROR_NOT_FOUND)
    format_success(f"Tag {tag_id} removed from todo {todo_id}")
