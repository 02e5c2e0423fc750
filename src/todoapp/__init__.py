"""todoapp - todo-list manager backed by MongoDB or a relational database."""

__version__ = "1.0.0"
