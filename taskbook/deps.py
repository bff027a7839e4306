"""Wiring helpers for the task book."""

from functools import lru_cache
from typing import Optional

from .config import Settings
from .services.task_service import TaskService
from .services.task_store import JsonTaskStore


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()


def build_task_service(settings: Optional[Settings] = None) -> TaskService:
    """Build a task service backed by the configured JSON store."""
    settings = settings or get_settings()
    return TaskService(JsonTaskStore(settings.store_config()))
