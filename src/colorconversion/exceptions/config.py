"""Settings-related exceptions."""

from typing import Any

from .base import ColorConversionError


class SettingsValidationError(ColorConversionError, ValueError):
    """Converter settings fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str):
        """
        Initialize settings validation error.

        Args:
            field: The settings field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
        """
        user_msg = f"Invalid converter setting for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value passed to ConverterSettings"
        if "log_level" in field.lower():
            recovery += "\nValid levels: DEBUG, INFO, WARNING, ERROR"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Settings validation failed for {field}={value!r}: {error_msg}",
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
