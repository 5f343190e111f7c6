"""Operation result types shared by backends, cache stores and the engine."""

from localekit.operations.result import OperationResult
from localekit.operations.status import OperationStatus

__all__ = ["OperationResult", "OperationStatus"]
