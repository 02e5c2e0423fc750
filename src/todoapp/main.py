"""Main entry point for the todoapp CLI."""

import typer
from rich.console import Console

from todoapp import __version__
from todoapp.commands import tags, todos
from todoapp.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="todoapp",
    cls=SuggestingGroup,
    help="Manage todos and tags on MongoDB or MySQL",
    no_args_is_help=True,
)

console = Console()

app.add_typer(todos.app, name="todos", help="Todo management commands")
app.add_typer(tags.app, name="tags", help="Tag management commands")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todoapp[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
