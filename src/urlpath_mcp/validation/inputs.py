"""Input validation for MCP tool parameters."""

from typing import Any

from ..codec import OsFamily, PathContext, get_default_context


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize validation error.

        Args:
            field: The field that failed validation
            message: Description of what went wrong
        """
        super().__init__(message)
        self.field = field
        self.message = message

    def to_error_response(self) -> dict[str, str]:
        """Convert to MCP-compatible error response.

        Returns:
            Error dict with status, error_code, and message fields
        """
        return {
            "status": "error",
            "error_code": "validation_error",
            "message": f"{self.field}: {self.message}",
        }


def validate_path_input(value: Any, *, max_length: int, field: str = "value") -> str:
    """Validate a path or URL string passed to a codec tool.

    The empty string is accepted; every string has a well-defined encoding.

    Args:
        value: Raw tool argument
        max_length: Maximum accepted length in characters
        field: Parameter name used in error messages

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is missing, not a string, or too long
    """
    if value is None:
        raise ValidationError(field, f"{field} parameter is required")
    if not isinstance(value, str):
        raise ValidationError(
            field, f"{field} must be a string, got {type(value).__name__}"
        )
    if len(value) > max_length:
        raise ValidationError(
            field, f"{field} is too long: {len(value)} characters (max {max_length})"
        )
    return value


def validate_os_family(os_family: str | None) -> PathContext:
    """Resolve an optional os_family argument to a PathContext.

    Args:
        os_family: "windows", "posix" (case-insensitive), or None for the
                   configured default

    Returns:
        PathContext to encode with

    Raises:
        ValidationError: If os_family is not a recognized value
    """
    if os_family is None:
        return get_default_context()

    try:
        return PathContext(OsFamily(os_family.strip().lower()))
    except (ValueError, AttributeError) as e:
        valid = ", ".join(f.value for f in OsFamily)
        raise ValidationError(
            "os_family", f"os_family must be one of: {valid}, got {os_family!r}"
        ) from e
