"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

from todoapp.models import Tag, Todo

console = Console()


def todo_to_dict(todo: Todo) -> dict[str, Any]:
    """Serialize a todo for output, tags sorted by name."""
    return {
        "id": todo.id,
        "description": todo.description,
        "done": todo.done,
        "tags": sorted(tag.name for tag in todo.tags),
    }


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    return {"id": tag.id, "name": tag.name}


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_table(data)


def format_table(data: Any) -> None:
    """Format a list of dictionaries (or a single one) as a table."""
    if not data:
        console.print("[yellow]No items found[/yellow]")
        return

    items = data if isinstance(data, list) else [data]
    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title())

    for item in items:
        table.add_row(*[_format_cell(item.get(column)) for column in columns])

    console.print(table)


def _format_cell(value: Any) -> str:
    if isinstance(value, bool):
        return "[green]✓[/green]" if value else "[dim]·[/dim]"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return ""
    return str(value)


def format_quiet(data: Any) -> None:
    """Print only IDs, one per line."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if isinstance(item, dict) and "id" in item:
            print(item["id"])


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")
