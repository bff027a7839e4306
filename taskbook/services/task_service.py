"""Task service: validation, duplicate detection and task creation."""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional
from uuid import uuid4

from ..messages import error_message, success_message
from ..models.task import Task, TaskPriority, TaskRecord
from ..schemas import CreateTaskResult, TaskCreate, TaskErrorCode
from .task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def random_task_id() -> str:
    """Return a random 128-bit UUID4 as a string."""
    return str(uuid4())


class TaskService:
    """Service for creating tasks in a JSON-backed store."""

    def __init__(
        self,
        store: JsonTaskStore,
        id_factory: Callable[[], str] = random_task_id,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the task service.

        Args:
            store: Store adapter holding the task document
            id_factory: Produces identifiers for new tasks
            clock: Returns the current date-time
        """
        self.store = store
        self._id_factory = id_factory
        self._clock = clock
        logger.info("Task service initialized")

    @property
    def date_format(self) -> str:
        return self.store.config.date_format

    def create_task(
        self,
        title: Optional[str],
        description: Optional[str],
        due_date_text: Optional[str],
        priority_level: Optional[str],
        is_recurring: bool,
    ) -> CreateTaskResult:
        """Create a new task.

        Checks run in a fixed order and stop at the first failure: title,
        due date presence, due date format, priority, then duplicates against
        the stored tasks. Failures never touch the store.

        Args:
            title: Task title
            description: Task description
            due_date_text: Due date in the configured format
            priority_level: One of the ``TaskPriority`` values
            is_recurring: Whether the task repeats

        Returns:
            Result holding the created task, or the failure code and message
        """
        if title is None or not title.strip():
            return self._failure(TaskErrorCode.INVALID_TITLE)

        if due_date_text is None or not due_date_text.strip():
            return self._failure(TaskErrorCode.MISSING_DUE_DATE)

        due_date = self.parse_due_date(due_date_text)
        if due_date is None:
            return self._failure(TaskErrorCode.INVALID_DUE_DATE)

        if priority_level not in TaskPriority.values():
            return self._failure(TaskErrorCode.INVALID_PRIORITY)

        title = title.strip()
        tasks = self.store.load_all()

        if self.find_duplicate(tasks, title, due_date) is not None:
            return self._failure(TaskErrorCode.DUPLICATE_TASK, title=title)

        task = Task.new(
            task_id=self._id_factory(),
            title=title,
            description=description or "",
            due_date=due_date,
            priority=TaskPriority(priority_level),
            is_recurring=is_recurring,
            now=self._clock(),
        )

        tasks.append(task.to_record())
        persisted = self.store.save_all(tasks)

        if not persisted:
            logger.warning(f"Task {task.id} was created but not persisted to {self.store.config.path}")
            return CreateTaskResult(
                task=task,
                error=TaskErrorCode.STORE_WRITE_FAILURE,
                message=error_message(TaskErrorCode.STORE_WRITE_FAILURE, task_id=task.id),
                persisted=False,
            )

        logger.info(f"Created task {task.id}: {task.title} (due {task.due_date})")
        return CreateTaskResult(task=task, message=success_message(task.id), persisted=True)

    def create_task_from_schema(self, task_data: TaskCreate) -> CreateTaskResult:
        """Create a new task from schema.

        Args:
            task_data: Task creation data

        Returns:
            Creation result
        """
        return self.create_task(
            title=task_data.title,
            description=task_data.description,
            due_date_text=task_data.due_date,
            priority_level=task_data.priority,
            is_recurring=task_data.is_recurring,
        )

    def parse_due_date(self, text: str) -> Optional[str]:
        """Return ``text`` normalized to the date format, or None if it is not a valid date.

        The parsed date has to format back to exactly ``text``: this rejects
        unpadded fields and stray whitespace that strptime would tolerate.
        """
        try:
            parsed = datetime.strptime(text, self.date_format).date()
        except ValueError:
            return None
        # glibc does not zero-pad %Y below year 1000
        formatted = parsed.strftime(self.date_format.replace("%Y", f"{parsed.year:04d}"))
        if formatted != text:
            return None
        return formatted

    def find_duplicate(
        self, tasks: Iterable[TaskRecord], title: str, due_date: str
    ) -> Optional[TaskRecord]:
        """Find a stored task with the same title (ignoring case) and due date.

        Args:
            tasks: Stored task records
            title: Trimmed title of the new task
            due_date: Formatted due date of the new task

        Returns:
            The first matching record, or None
        """
        wanted = title.lower()
        for existing in tasks:
            existing_title = existing.get("title")
            if not isinstance(existing_title, str):
                continue
            if existing_title.strip().lower() == wanted and existing.get("due_date") == due_date:
                return existing
        return None

    @staticmethod
    def _failure(code: TaskErrorCode, **context: str) -> CreateTaskResult:
        message = error_message(code, **context)
        logger.info(f"Task not created ({code.value}): {message}")
        return CreateTaskResult(error=code, message=message)
