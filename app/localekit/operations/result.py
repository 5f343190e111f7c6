"""Operation result dataclass.

Uniform result returned by translation backends and by the engine's
save/delete operations.
"""

from dataclasses import dataclass
from typing import Any, Optional

from localekit.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from storage operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a retryable error result (timeouts, throttling, connection loss)."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a non-retryable error result (rejected writes, invalid data)."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code="NOT_FOUND")
