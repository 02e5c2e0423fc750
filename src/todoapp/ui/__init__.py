"""User-interface collaborators."""

from .controller import TodoController

__all__ = ["TodoController"]
