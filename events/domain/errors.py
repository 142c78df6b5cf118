"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_FORMAT = "INVALID_FORMAT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    REFERENCED_EVENT_MISSING = "REFERENCED_EVENT_MISSING"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code, user-safe message and offending field."""

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidFormatError(DomainError):
    """Raised when a date or time string cannot be parsed or is out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.INVALID_FORMAT, message=message, field=field)


class ValidationError(DomainError):
    """Raised when a field is missing, empty, or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message, field=field)


class ReferentialIntegrityError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REFERENCED_EVENT_MISSING,
            message="Referenced event does not exist",
            field="event_id",
        )


class StoreConnectionError(DomainError):
    """Raised when the store connection could not be established."""

    def __init__(self, message: str = "Could not connect to the event store") -> None:
        super().__init__(code=ErrorCode.STORE_UNAVAILABLE, message=message)


class DuplicateSlugError(DomainError):
    """Raised when an event slug collides with an existing event."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f"An event with slug '{slug}' already exists",
            field="slug",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
            field="event_id",
        )
