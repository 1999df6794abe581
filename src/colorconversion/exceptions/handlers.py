"""
Centralized error handling utilities.

Two layers meet here:

1. **Pydantic validation** - The value models reject bad input with a
   `pydantic.ValidationError`.
2. **Library exceptions** - Callers get a typed `ColorConversionError`
   with a user message, a technical message and a recovery hint.

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Color dict lacks a channel | `wrap_validation_error` | `raise wrap_validation_error(e, RedGreenBlue) from e` |
| Settings value invalid | `wrap_settings_error` | `raise wrap_settings_error(e) from e` |
| Logged critical section | `ErrorContext` | `with ErrorContext("set color", logger_instance=logger): ...` |

## Example: Converting Pydantic Errors

```python
from pydantic import ValidationError
from colorconversion.exceptions import wrap_validation_error

try:
    color = RedGreenBlue.model_validate({"red": 300, "green": 0, "blue": 0})
except ValidationError as e:
    # ColorValueError: Invalid RedGreenBlue value for 'red': ...
    raise wrap_validation_error(e, RedGreenBlue) from e
```

Missing fields take precedence over range problems, so a dict without
`blue` always reports the shape error first.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

from .base import ColorConversionError
from .config import SettingsValidationError
from .validation import ColorValidationError, ColorValueError, MissingColorFieldsError


logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) if loc else "color"


def wrap_validation_error(
    error: ValidationError, model_type: type[BaseModel]
) -> ColorValidationError:
    """
    Convert a Pydantic validation error on a color model to a library exception.

    Args:
        error: The Pydantic ValidationError
        model_type: The color model class that failed validation

    Returns:
        MissingColorFieldsError if any required field is absent,
        otherwise a ColorValueError for the first failing field
    """
    model_name = model_type.__name__
    required = tuple(model_type.model_fields)
    errors = error.errors()

    missing = [_field_name(err.get("loc", ())) for err in errors if err.get("type") == "missing"]
    if missing:
        return MissingColorFieldsError(model_name, missing, required)

    first_error = errors[0] if errors else {}
    return ColorValueError(
        model_name=model_name,
        field=_field_name(first_error.get("loc", ())),
        value=first_error.get("input"),
        error_msg=first_error.get("msg", "validation failed"),
    )


def wrap_settings_error(error: ValidationError) -> SettingsValidationError:
    """
    Convert a Pydantic validation error on ConverterSettings.

    Args:
        error: The Pydantic ValidationError

    Returns:
        A SettingsValidationError describing every failing field
    """
    errors = error.errors()
    if len(errors) == 1:
        first_error = errors[0]
        return SettingsValidationError(
            field=_field_name(first_error.get("loc", ())),
            value=first_error.get("input"),
            error_msg=first_error.get("msg", "validation failed"),
        )

    error_lines = [
        f"  - {_field_name(err.get('loc', ()))}: {err.get('msg', 'validation failed')}"
        for err in errors
    ]
    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
    return SettingsValidationError(field="multiple fields", value=None, error_msg=combined_msg)


class ErrorContext:
    """
    Context manager that logs a failed operation and lets the error propagate.

    Library errors are logged with their technical message; anything else
    is logged with its traceback.

    Example:
        ```python
        with ErrorContext("set color", logger_instance=logger):
            normalized = self._normalize(color, model)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        log_level: int = logging.ERROR
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            log_level: Level used when the operation fails
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.log_level = log_level

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
        elif isinstance(exc_val, ColorConversionError):
            self.logger.log(
                self.log_level,
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.log(
                self.log_level,
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )
        return False
