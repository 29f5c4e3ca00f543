"""Exception types shared by the validation layer, gateway and repositories."""


class TaskValidationError(ValueError):
    """Client-fault input error. Rendered as HTTP 400."""

    default_message = "Invalid input"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyTitle(TaskValidationError):
    default_message = "Title is required"


class TitleTooLong(TaskValidationError):
    default_message = "Title too long"


class InvalidPriority(TaskValidationError):
    default_message = "Invalid priority"


class InvalidDueDate(TaskValidationError):
    default_message = "Invalid dueDate"


class InvalidType(TaskValidationError):
    default_message = "Invalid type"


class TaskServiceError(RuntimeError):
    """Persistence failure. Rendered as HTTP 500 with a generic message."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TaskNotFoundError(LookupError):
    """Raised by repositories when updating a task id that does not exist."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
