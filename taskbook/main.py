"""Command-line entry point for the task book."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .deps import build_task_service, get_settings
from .models.task import TaskPriority
from .schemas import CreateTaskResult, TaskCreate
from .services.task_service import TaskService
from .utils.logging import setup_logging

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_NOT_PERSISTED = 2

DEMO_STEPS = [
    (
        "Thêm nhiệm vụ hợp lệ",
        TaskCreate(
            title="Mua sách",
            description="Sách Công nghệ phần mềm.",
            due_date="2025-07-20",
            priority="Cao",
        ),
    ),
    (
        "Thêm nhiệm vụ trùng lặp",
        TaskCreate(
            title="Mua sách",
            description="Sách Công nghệ phần mềm.",
            due_date="2025-07-20",
            priority="Cao",
        ),
    ),
    (
        "Thêm nhiệm vụ lặp lại",
        TaskCreate(
            title="Tập thể dục",
            description="Tập gym 1 tiếng.",
            due_date="2025-07-21",
            priority="Trung bình",
            is_recurring=True,
        ),
    ),
    (
        "Thêm nhiệm vụ với tiêu đề rỗng",
        TaskCreate(
            title="",
            description="Nhiệm vụ không có tiêu đề.",
            due_date="2025-07-22",
            priority="Thấp",
        ),
    ),
]


def exit_code(result: CreateTaskResult) -> int:
    if not result.ok:
        return EXIT_REJECTED
    if not result.persisted:
        return EXIT_NOT_PERSISTED
    return EXIT_OK


def run_demo(service: TaskService) -> List[CreateTaskResult]:
    """Replay the demonstration calls, printing each outcome."""
    results = []
    for label, task_data in DEMO_STEPS:
        print(f"\n▶ {label}:")
        result = service.create_task_from_schema(task_data)
        print(result.message)
        results.append(result)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskbook", description="Personal task book backed by a JSON file.")
    parser.add_argument("--store", type=Path, default=None, help="Path to the JSON task document.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Run the demonstration scenario.")

    add = subparsers.add_parser("add", help="Add one task.")
    add.add_argument("title", help="Task title.")
    add.add_argument("--due", required=True, help="Due date, YYYY-MM-DD.")
    add.add_argument("--description", default="", help="Task description.")
    add.add_argument(
        "--priority",
        default=TaskPriority.MEDIUM.value,
        help=f"One of: {', '.join(TaskPriority.values())}.",
    )
    add.add_argument("--recurring", action="store_true", help="Mark the task as recurring.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the CLI."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.store is not None:
        settings = settings.model_copy(update={"store_path": args.store})
    setup_logging(settings)

    service = build_task_service(settings)

    if args.command == "demo":
        results = run_demo(service)
        if any(result.ok and not result.persisted for result in results):
            return EXIT_NOT_PERSISTED
        return EXIT_OK

    result = service.create_task(
        title=args.title,
        description=args.description,
        due_date_text=args.due,
        priority_level=args.priority,
        is_recurring=args.recurring,
    )
    print(result.message)
    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
