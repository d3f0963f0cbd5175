"""Custom exception classes for the pager."""

from typing import Any

from pager.utils.constants import ERROR_CODE_INVALID_ARGUMENT


class PagerError(Exception):
    """
    Base exception for all pager errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class InvalidArgumentError(PagerError, ValueError):
    """Raised when a pager input cannot be used for page arithmetic."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_ARGUMENT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
