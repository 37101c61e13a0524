"""Root conftest — shared test configuration and store fixtures."""

import logging
import os

import pytest
from mongomock_motor import AsyncMongoMockClient

# Ensure tests never reach a real MongoDB server
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("PORT", "8080")

from todo_api.config import Settings  # noqa: E402
from todo_api.infrastructure.database import TodoStore  # noqa: E402


@pytest.fixture
def settings():
    return Settings(
        port=8080, mongo_uri="mongodb://localhost:27017", _env_file=None,
    )


@pytest.fixture
def store(settings):
    """TodoStore over a fresh in-memory mongomock client."""
    return TodoStore(
        AsyncMongoMockClient(), settings.mongo_database, settings.mongo_collection,
    )


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Remove root handlers installed by setup_logging() during the test."""
    before = set(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "todo_api" and handler not in before:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
