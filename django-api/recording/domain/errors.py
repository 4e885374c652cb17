"""Domain error codes for the recording module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    MISSING_FIELD = "MISSING_FIELD"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
    STORAGE_TIMEOUT = "STORAGE_TIMEOUT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidIdentifierError(DomainError):
    """Raised when a client, visitor or session ID is malformed."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_IDENTIFIER,
            message=f"{field} is malformed, does not conform to hex format.",
        )
        self.field = field


class InvalidPaginationError(DomainError):
    """Raised when offset or limit is not a non-negative integer."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGINATION,
            message=f"{parameter} does not match the format expected, expected a non-negative number.",
        )
        self.parameter = parameter


class MissingFieldError(DomainError):
    """Raised when a mandatory field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f"{field} needs to be provided.",
        )
        self.field = field


class SessionNotFoundError(DomainError):
    """Raised when a session is not found."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class StorageError(DomainError):
    """Raised when the store cannot complete an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_ERROR,
            message="Something went wrong when talking to the store.",
        )
        self.operation = operation


class StorageTimeoutError(DomainError):
    """Raised when a store operation exceeds its time budget."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_TIMEOUT,
            message="The store did not respond in time.",
        )
        self.operation = operation
