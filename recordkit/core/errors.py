"""
Error Handling
==============

Standardized error codes and exceptions.
"""

from typing import Any, Optional


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Standardized error codes."""

    # Records (RECORD_001 - RECORD_010)
    INVALID_ORDER = "RECORD_001"

    # General
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Custom Exceptions
# =============================================================================

class RecordKitError(Exception):
    """Base library exception with a structured error detail."""

    def __init__(
        self,
        code: str,
        message: str,
        field: Optional[str] = None,
        **extra: Any,
    ):
        self.code = code
        self.message = message
        self.field = field
        self.extra = extra

        detail = {
            "code": code,
            "message": message,
        }

        if field:
            detail["field"] = field

        detail.update(extra)

        self.detail = detail
        super().__init__(message)


class ValidationError(RecordKitError):
    """Validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = ErrorCodes.VALIDATION_ERROR,
        **extra: Any,
    ):
        super().__init__(
            code=code,
            message=message,
            field=field,
            **extra,
        )
