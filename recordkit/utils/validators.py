"""
Validators
==========

UUID validation utilities.
"""

import re
from typing import Any

from recordkit.core.errors import ValidationError


RE_UUID = re.compile(
    r"\A[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\Z",
    re.IGNORECASE,
)


def is_uuid(value: Any) -> bool:
    """Check if a value is a canonical 8-4-4-4-12 UUID string."""
    if not isinstance(value, str):
        return False
    return RE_UUID.fullmatch(value) is not None


def validate_uuid(uuid_str: str, field_name: str = "id") -> str:
    """
    Validate UUID format.

    Args:
        uuid_str: UUID string to validate
        field_name: Field name for error message

    Returns:
        Validated UUID string

    Raises:
        ValidationError: If UUID is invalid
    """
    if not is_uuid(uuid_str):
        raise ValidationError(
            message="Invalid UUID format",
            field=field_name,
        )

    return uuid_str
