"""Operation status enumeration for backend and cache operations."""

from enum import Enum


class OperationStatus(Enum):
    """Outcome of a storage operation.

    Attributes:
        SUCCESS: Operation completed
        TRANSIENT_ERROR: Retryable failure (connection, throttling)
        PERMANENT_ERROR: Non-retryable failure (read-only store, bad input)
        NOT_FOUND: Record does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
