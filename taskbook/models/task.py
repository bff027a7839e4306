"""Domain models for the personal task book."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

# A task as stored in the JSON document.
TaskRecord = Dict[str, Any]

DEFAULT_RECURRENCE_PATTERN = "Chưa xác định"


class TaskPriority(str, Enum):
    """Task priority levels, in the store's locale."""
    LOW = "Thấp"
    MEDIUM = "Trung bình"
    HIGH = "Cao"

    @classmethod
    def values(cls) -> list:
        return [priority.value for priority in cls]


class TaskStatus(str, Enum):
    """Task status enumeration."""
    NOT_COMPLETED = "Chưa hoàn thành"


class Task(BaseModel):
    """Task domain model."""

    id: str = Field(..., description="Unique task identifier (UUID)")
    title: str = Field(..., min_length=1, description="Task title")
    description: str = Field(default="", description="Task description")
    due_date: str = Field(..., description="Due date, formatted as YYYY-MM-DD")
    priority: TaskPriority = Field(..., description="Task priority")
    status: TaskStatus = Field(default=TaskStatus.NOT_COMPLETED, description="Task status")
    created_at: str = Field(..., description="Creation timestamp, ISO-8601")
    last_updated_at: str = Field(..., description="Last update timestamp, ISO-8601")
    is_recurring: bool = Field(..., description="Whether the task repeats")
    recurrence_pattern: Optional[str] = Field(None, description="Recurrence pattern, recurring tasks only")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True

    @model_validator(mode="after")
    def _match_recurrence(self) -> "Task":
        """Keep recurrence_pattern in step with the validated is_recurring flag."""
        if not self.is_recurring:
            self.recurrence_pattern = None
        elif self.recurrence_pattern is None:
            self.recurrence_pattern = DEFAULT_RECURRENCE_PATTERN
        return self

    @classmethod
    def new(
        cls,
        *,
        task_id: str,
        title: str,
        description: str,
        due_date: str,
        priority: TaskPriority,
        is_recurring: bool,
        now: datetime,
    ) -> "Task":
        """Build a freshly created task; both timestamps come from ``now``."""
        timestamp = now.isoformat()
        return cls(
            id=task_id,
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            created_at=timestamp,
            last_updated_at=timestamp,
            is_recurring=is_recurring,
        )

    def to_record(self) -> TaskRecord:
        """Serialize to a store record; ``recurrence_pattern`` is left out when unset."""
        record = self.model_dump(mode="json")
        if record.get("recurrence_pattern") is None:
            record.pop("recurrence_pattern", None)
        return record
