"""Bootstrap of the storage strategy and controller for CLI commands.

The configuration is read once per process; the resulting strategy and
controller are cached so every command in that process shares one connection.
"""

from __future__ import annotations

import atexit
from functools import lru_cache

from todoapp.models.factory import RepositoryFactory
from todoapp.services.config_service import ConfigService
from todoapp.services.todo_service import TodoService
from todoapp.ui.controller import TodoController


@lru_cache(maxsize=1)
def get_controller() -> TodoController:
    """Build the controller for the configured backend.

    Raises:
        RepositoryFactoryError: If the backend kind is missing or unsupported
        BackendConnectionError: If the relational backend is unreachable
    """
    config = ConfigService().config
    strategy = RepositoryFactory(config).create_strategy()
    atexit.register(strategy.close)
    return TodoController(TodoService.from_strategy(strategy))
