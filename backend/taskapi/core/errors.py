"""Error vocabulary shared by the repository, service and HTTP layers.

Messages are part of the HTTP contract: handlers write them verbatim
(plus a trailing newline) as the plain-text response body.
"""


class TaskAPIError(Exception):
    message = "task api error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ValidationError(TaskAPIError):
    """Input rejected before it reaches storage."""


class EmptyIdError(ValidationError):
    message = "ID cannot be empty"


class InvalidIdError(ValidationError):
    message = "the id is invalid"


class EmptyTitleError(ValidationError):
    message = "title cannot be empty"


class EmptyStatusError(ValidationError):
    message = "status cannot be empty"


class InvalidStatusError(ValidationError):
    message = "the status is invalid"


class InvalidPayloadError(TaskAPIError):
    message = "invalid request payload"


class TaskNotFoundError(TaskAPIError):
    message = "task not found"


class StorageError(TaskAPIError):
    """Any fault raised by the database driver, carrying its message."""

    message = "storage error"
