"""User-facing message text for task book outcomes."""

from typing import Optional

from .models.task import TaskPriority
from .schemas import TaskErrorCode

ERROR_MESSAGES = {
    TaskErrorCode.INVALID_TITLE: "Lỗi: Tiêu đề không được để trống.",
    TaskErrorCode.MISSING_DUE_DATE: "Lỗi: Ngày đến hạn không được để trống.",
    TaskErrorCode.INVALID_DUE_DATE: (
        "Lỗi: Ngày đến hạn không hợp lệ. Vui lòng sử dụng định dạng YYYY-MM-DD."
    ),
    TaskErrorCode.INVALID_PRIORITY: (
        "Lỗi: Mức độ ưu tiên không hợp lệ. Vui lòng chọn từ: "
        + ", ".join(TaskPriority.values())
        + "."
    ),
    TaskErrorCode.DUPLICATE_TASK: "Lỗi: Nhiệm vụ '{title}' đã tồn tại với cùng ngày đến hạn.",
    TaskErrorCode.STORE_WRITE_FAILURE: (
        "Cảnh báo: Nhiệm vụ với ID {task_id} đã được tạo nhưng chưa được lưu vào database."
    ),
}

SUCCESS_MESSAGE = "Đã thêm nhiệm vụ mới thành công với ID: {task_id}"


def error_message(code: TaskErrorCode, **context: Optional[str]) -> str:
    """Render the message for an error code, filling in any context fields."""
    return ERROR_MESSAGES[code].format(**context)


def success_message(task_id: str) -> str:
    return SUCCESS_MESSAGE.format(task_id=task_id)
