REQUIRED_MESSAGE = "The field is required."


class TaskboardError(Exception):
    """Base exception for taskboard domain errors."""

    pass


class ValidationError(TaskboardError):
    """Raised when input for a field is rejected before or during a write."""

    def __init__(self, field: str, message: str = REQUIRED_MESSAGE):
        super().__init__(message)
        self.field = field
        self.message = message


class KeywordNotFoundError(ValidationError):
    """Raised when a task references keyword ids that do not exist."""

    def __init__(self, missing_ids: list[int]):
        ids = ", ".join(str(i) for i in missing_ids)
        super().__init__("keyword_ids", f"Unknown keyword ids: {ids}")
        self.missing_ids = missing_ids


class NotFoundError(TaskboardError):
    pass


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class MigrationError(TaskboardError):
    """Raised when a database migration fails."""

    pass
