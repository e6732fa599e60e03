"""Failure kinds raised by the task API and the HTTP status each maps to."""


class TaskServiceError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(TaskServiceError):
    """Required input missing from the request body."""

    status_code = 400


class NotFound(TaskServiceError):
    """No task matched a well-formed identifier."""

    status_code = 404

    def __init__(self, task_id):
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class InvalidIdentifier(TaskServiceError):
    """The route identifier is not a valid ObjectId.

    Kept apart from StorageError so the two can get different status codes
    later; both currently answer 500 with the raw message.
    """

    status_code = 500


class StorageError(TaskServiceError):
    """Any failure reported by the MongoDB driver."""

    status_code = 500
