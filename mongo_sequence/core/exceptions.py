# mongo_sequence/core/exceptions.py
from typing import Any, Optional


class SequenceError(Exception):
    """Base exception for mongo_sequence"""
    def __init__(
        self,
        message: str,
        error_code: str = "SEQUENCE_ERROR",
        details: Optional[Any] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(message)


class CounterNotFoundError(SequenceError):
    """Raised when the atomic increment returns no document for a counter"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"No counter document returned for sequence '{name}'",
            error_code="COUNTER_NOT_FOUND",
        )


class NotIntegerValueError(SequenceError):
    """Raised when a counter's stored value is not an integer"""
    def __init__(self, name: str, value: Any = None, details: Optional[Any] = None):
        self.name = name
        self.value = value
        message = f"Value of sequence '{name}' is not an integer"
        if value is not None:
            message += f" (got {type(value).__name__})"
        super().__init__(
            message=message,
            error_code="NOT_INT_VALUE",
            details=details,
        )


class SequenceNotConfiguredError(SequenceError):
    """Raised when the default sequence is used before setup_default_sequence()"""
    def __init__(self, message: str = "Default sequence is not configured; call setup_default_sequence() first"):
        super().__init__(message=message, error_code="NOT_CONFIGURED")
