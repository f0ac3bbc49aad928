"""Input validation utilities."""

from .inputs import ValidationError, validate_os_family, validate_path_input

__all__ = [
    "ValidationError",
    "validate_os_family",
    "validate_path_input",
]
