"""Request/result schemas for the task book."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .models.task import Task


class TaskCreate(BaseModel):
    """Schema for creating a new task.

    Fields are deliberately unconstrained; validation happens in
    ``TaskService.create_task`` so that every failure maps to a result code.
    """
    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field("", description="Task description")
    due_date: Optional[str] = Field(None, description="Due date text, YYYY-MM-DD")
    priority: Optional[str] = Field(None, description="Priority level")
    is_recurring: bool = Field(False, description="Whether the task repeats")


class TaskErrorCode(str, Enum):
    """Failure kinds reported by the task book."""
    # Validation failures, returned to the caller
    INVALID_TITLE = "invalid_title"
    MISSING_DUE_DATE = "missing_due_date"
    INVALID_DUE_DATE = "invalid_due_date"
    INVALID_PRIORITY = "invalid_priority"
    DUPLICATE_TASK = "duplicate_task"

    # Persistence failures
    STORE_READ_FAILURE = "store_read_failure"
    STORE_WRITE_FAILURE = "store_write_failure"


class CreateTaskResult(BaseModel):
    """Outcome of a task creation attempt."""
    task: Optional[Task] = Field(None, description="Created task, None on validation failure")
    error: Optional[TaskErrorCode] = Field(None, description="Failure kind")
    message: str = Field(..., description="Human-readable outcome")
    persisted: bool = Field(default=False, description="Whether the task reached the store")

    @property
    def ok(self) -> bool:
        """True when a task was created, whether or not it was persisted."""
        return self.task is not None
