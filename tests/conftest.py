"""Shared test fixtures and configuration for the test suite."""

import itertools
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Generator

import pytest

from taskbook.config import Settings, StoreConfig
from taskbook.services.task_service import TaskService
from taskbook.services.task_store import JsonTaskStore
from taskbook.utils.logging import ColoredFormatter

FIXED_NOW = datetime(2025, 7, 1, 9, 30, 15, 123456)


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of the task document inside a per-test directory."""
    return tmp_path / "data" / "tasks_database.json"


@pytest.fixture
def test_settings(tmp_path: Path, store_path: Path) -> Settings:
    """Create test settings pointing at temporary paths."""
    return Settings(
        store_path=store_path,
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def store_config(test_settings: Settings) -> StoreConfig:
    """Store configuration built from the test settings."""
    return test_settings.store_config()


@pytest.fixture
def task_store(store_config: StoreConfig) -> JsonTaskStore:
    """Create a task store on the temporary document."""
    return JsonTaskStore(store_config)


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic task identifiers."""
    counter = itertools.count(1)
    return lambda: f"00000000-0000-4000-8000-{next(counter):012d}"


@pytest.fixture
def fixed_now() -> datetime:
    """The instant returned by the test clock."""
    return FIXED_NOW


@pytest.fixture
def task_service(
    task_store: JsonTaskStore, id_factory: Callable[[], str], fixed_now: datetime
) -> TaskService:
    """Create a task service with fixed ids and a frozen clock."""
    return TaskService(task_store, id_factory=id_factory, clock=lambda: fixed_now)


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Remove the handlers installed by setup_logging once the test is done."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler) or isinstance(handler.formatter, ColoredFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


# Test data fixtures
@pytest.fixture
def sample_task_data() -> dict:
    """Sample task data for testing."""
    return {
        "title": "Mua sách",
        "description": "Sách Công nghệ phần mềm.",
        "due_date_text": "2025-07-20",
        "priority_level": "Cao",
        "is_recurring": False,
    }
