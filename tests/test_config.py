"""Test configuration, logging setup and the error hierarchy."""
import io
import logging

import pytest

from core.errors import IncorrectDataError, NotFoundError, ServiceError
from core.logging_setup import setup_logging
from todo.config import CacheConfig, SearchConfig, TodoConfig


def test_default_config():
    config = TodoConfig.default()
    assert config.search == SearchConfig(default_page_size=10, max_page_size=100)
    assert config.cache.enabled is True
    assert config.cache.ttl_seconds == 300.0


def test_config_is_frozen():
    config = TodoConfig.default()
    with pytest.raises(AttributeError):
        config.search = SearchConfig()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TODO_DEFAULT_PAGE_SIZE", "20")
    monkeypatch.setenv("TODO_MAX_PAGE_SIZE", "40")
    monkeypatch.setenv("TODO_CACHE_ENABLED", "false")
    monkeypatch.setenv("TODO_CACHE_TTL_SECONDS", "1.5")
    monkeypatch.setenv("TODO_CACHE_MAX_ENTRIES", "7")

    config = TodoConfig.from_env()
    assert config.search == SearchConfig(default_page_size=20, max_page_size=40)
    assert config.cache == CacheConfig(enabled=False, ttl_seconds=1.5, max_entries=7)


def test_cache_config_creates_manager():
    manager = CacheConfig(ttl_seconds=5, max_entries=3).create_manager()
    cache = manager.get_cache("tasks")
    assert (cache.ttl_seconds, cache.max_entries) == (5, 3)


def test_setup_logging_filters_third_party_noise():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        setup_logging(level=logging.INFO, stream=stream)
        logging.getLogger("todo.service").info("saved task")
        logging.getLogger("sqlalchemy.engine").info("SELECT 1")
        logging.getLogger("sqlalchemy.engine").warning("pool exhausted")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)

    output = stream.getvalue()
    assert "todo.service: saved task" in output
    assert "SELECT 1" not in output
    assert "pool exhausted" in output


def test_error_hierarchy():
    err = IncorrectDataError("missed param: email", field="email")
    assert isinstance(err, ServiceError)
    assert isinstance(err, ValueError)
    assert err.to_dict() == {
        "error_type": "IncorrectDataError",
        "message": "missed param: email",
        "context": {"field": "email"},
    }

    missing = NotFoundError("Category", 3)
    assert str(missing) == "Category with ID '3' not found"
