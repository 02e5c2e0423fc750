"""Tag management commands."""

import typer

from todoapp.utils import exit_codes
from todoapp.utils.typer_helpers import SuggestingGroup
from todoapp.utils.ui.formatters import (
    format_error,
    format_output,
    format_success,
    tag_to_dict,
)

from .context import get_controller
from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Tag management commands")


@app.command("list")
@command_wrapper
def list_tags(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """List all tags."""
    tags = get_controller().get_all_tags()
    format_output([tag_to_dict(t) for t in tags], output)


@app.command("add")
@command_wrapper
def add_tag(
    name: str = typer.Argument(..., help="Tag name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Create a new tag."""
    tag = get_controller().add_tag(name)
    if tag is None:
        format_error("Tag name is empty or already in use")
        raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS)
    format_success(f"Tag created: {tag.id}")
    format_output(tag_to_dict(tag), output)


@app.command("delete")
@command_wrapper
def delete_tag(
    tag_id: int = typer.Argument(..., help="Tag ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a tag and detach it from every todo."""
    controller = get_controller()
    if controller.todo_service.get_tag_by_id(tag_id) is None:
        format_error(f"Tag {tag_id} not found")
        raise typer.Exit(code=exit_codes.ERROR_NOT_FOUND)
    if not yes:
        typer.confirm(f"Delete tag {tag_id}?", abort=True)
    controller.delete_tag(tag_id)
    format_success(f"Tag deleted: {tag_id}")


@app.command("search")
@command_wrapper
def search_tags(
    keyword: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Search tags by name."""
    tags = get_controller().todo_service.search_tags(keyword)
    format_output([tag_to_dict(t) for t in tags], output)
