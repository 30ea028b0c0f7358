"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_ID = "INVALID_ID"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE = "DUPLICATE"
    CONFLICT = "CONFLICT"
    CANCELLATION_WINDOW = "CANCELLATION_WINDOW"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when a business validation rule is violated."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        self.field = field


class InvalidIdError(DomainError):
    """Raised when an identifier is missing or not positive."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"{resource} ID must be positive",
        )
        self.resource = resource


class NotFoundError(DomainError):
    """Raised when a resource does not exist in its store."""

    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"{resource} not found with ID: {resource_id}",
        )
        self.resource = resource
        self.resource_id = resource_id


class DuplicateError(DomainError):
    """Raised when a uniqueness rule is violated."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.DUPLICATE, message=message)


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)


class TeamInUseError(ConflictError):
    """Raised when deleting a team that an event still references."""

    def __init__(self, team_id: object) -> None:
        super().__init__(f"Team is still scheduled in an event: {team_id}")
        self.team_id = team_id


class EventValidationError(ValidationError):
    """Raised when an event fails validation."""


class InvalidEventIdError(InvalidIdError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__("Event")


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: object) -> None:
        super().__init__("Event", event_id)


class DuplicateEventNameError(DuplicateError):
    """Raised when an event name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Event name already exists: {name}")
        self.name = name


class CancellationWindowError(DomainError):
    """Raised when an event is too close to its start to be canceled."""

    def __init__(self, notice_hours: int = 24) -> None:
        super().__init__(
            code=ErrorCode.CANCELLATION_WINDOW,
            message=(
                f"You can't cancel an event less than {notice_hours} hours "
                "before it starts."
            ),
        )
