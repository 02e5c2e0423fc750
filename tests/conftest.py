"""Shared test fixtures and configuration.

Provides both storage backends in throwaway form: an in-memory SQLite database
for the relational adapter and a mongomock database for the document adapter.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import mongomock
import pytest

from todoapp.adapters.mongo import MongoConnection, MongoTagRepository, MongoTodoRepository
from todoapp.adapters.sql import SqlDatabase, SqlTagRepository, SqlTodoRepository
from todoapp.models.storage_strategy import DocumentStorageStrategy, RelationalStorageStrategy
from todoapp.services.todo_service import TodoService


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Keep the rotating log file out of the real user log directory."""
    import todoapp.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("todoapp").handlers.clear()
    with patch("todoapp.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("todoapp").handlers.clear()


# ---------------------------------------------------------------------------
# Relational backend
# ---------------------------------------------------------------------------


@pytest.fixture()
def sql_database():
    database = SqlDatabase("sqlite://")
    yield database
    database.close()


@pytest.fixture()
def sql_tag_repository(sql_database):
    return SqlTagRepository(sql_database)


@pytest.fixture()
def sql_todo_repository(sql_database):
    return SqlTodoRepository(sql_database)


@pytest.fixture()
def sql_strategy(sql_database):
    return RelationalStorageStrategy(sql_database)


# ---------------------------------------------------------------------------
# Document backend
# ---------------------------------------------------------------------------


@pytest.fixture()
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture()
def mongo_database(mongo_client):
    return mongo_client["todoapp_test"]


@pytest.fixture()
def mongo_tag_repository(mongo_database):
    return MongoTagRepository(mongo_database)


@pytest.fixture()
def mongo_todo_repository(mongo_database, mongo_tag_repository):
    return MongoTodoRepository(mongo_database, mongo_tag_repository)


@pytest.fixture()
def mongo_strategy(mongo_client):
    connection = MongoConnection(database_name="todoapp_test", client=mongo_client)
    return DocumentStorageStrategy(connection)


# ---------------------------------------------------------------------------
# Either backend
# ---------------------------------------------------------------------------


@pytest.fixture(params=["mysql", "mongodb"])
def strategy(request):
    """Run the test once against each backend."""
    if request.param == "mysql":
        database = SqlDatabase("sqlite://")
        strategy = RelationalStorageStrategy(database)
    else:
        connection = MongoConnection(database_name="todoapp_test", client=mongomock.MongoClient())
        strategy = DocumentStorageStrategy(connection)
    yield strategy
    strategy.close()


@pytest.fixture()
def todo_repository(strategy):
    return strategy.get_todo_repository()


@pytest.fixture()
def tag_repository(strategy):
    return strategy.get_tag_repository()


@pytest.fixture()
def todo_service(strategy):
    return TodoService.from_strategy(strategy)
