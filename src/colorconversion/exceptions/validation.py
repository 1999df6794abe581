"""Input validation exceptions.

This module defines the errors raised before any conversion runs:
- ColorValidationError: Base class for rejected color input
- MissingColorFieldsError: A color object lacks required channels
- ColorValueError: A channel is the wrong type or out of range
- HexLengthError: A hex string is not 6 or 7 characters long
- UnknownColorNameError: A color name is not in the bundled table
- UnknownColorModelError: A model tag is not one of the supported ones

All of them also derive from ValueError so plain `except ValueError`
callers keep working.
"""

from typing import Any, Iterable

from .base import ColorConversionError


SUPPORTED_MODELS_HINT = "Use one of: hex, rgb, hsl, hwb, hsv, cmyk, name."


class ColorValidationError(ColorConversionError, ValueError):
    """Color input was rejected before conversion."""


class MissingColorFieldsError(ColorValidationError):
    """Color object is missing one or more required fields."""

    def __init__(self, model_name: str, missing: Iterable[str], required: Iterable[str]):
        """
        Initialize missing-fields error.

        Args:
            model_name: Name of the color model (e.g. "RedGreenBlue")
            missing: Field names that were absent
            required: All field names the model requires
        """
        self.missing = tuple(missing)
        self.required = tuple(required)

        user_msg = (
            f"Invalid color object. Missing required properties: "
            f"{', '.join(self.missing)}"
        )
        recovery = f"A {model_name} color needs all of: {', '.join(self.required)}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"{model_name} missing fields {self.missing}",
            model_name=model_name,
            recovery_hint=recovery,
        )


class ColorValueError(ColorValidationError):
    """A color component has the wrong type or lies outside its range."""

    def __init__(
        self,
        model_name: str,
        field: str,
        value: Any,
        error_msg: str,
        recovery_hint: str | None = None,
    ):
        """
        Initialize color value error.

        Args:
            model_name: Name of the color model being validated
            field: Component that failed validation
            value: The rejected value
            error_msg: Why the value was rejected
            recovery_hint: Suggestion for fixing the value (defaults to a range hint)
        """
        self.field = field
        self.value = value

        user_msg = f"Invalid {model_name} value for '{field}': {error_msg}"
        tech_msg = f"{user_msg} (received {value!r} of type {type(value).__name__})"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            model_name=model_name,
            recovery_hint=recovery_hint or f"Pass an integer within the valid range for '{field}'",
        )


class HexLengthError(ColorValidationError):
    """Hex string does not have 6 digits (optionally prefixed by '#')."""

    def __init__(self, value: str):
        """
        Initialize hex length error.

        Args:
            value: The rejected hex string
        """
        self.value = value

        digits = len(value.removeprefix("#"))
        user_msg = (
            "Unexpected hex color length: expected 6 hex digits with an optional "
            f"leading '#', but got {digits} digits"
        )

        super().__init__(
            user_message=user_msg,
            technical_message=f"{user_msg}: {value!r}",
            model_name="hex",
            recovery_hint="Use six hex digits with an optional leading '#', e.g. '#00bfff'",
        )


class UnknownColorNameError(ColorValidationError):
    """Color name is not part of the bundled name table."""

    def __init__(self, name: str):
        """
        Initialize unknown color name error.

        Args:
            name: The name that could not be resolved
        """
        self.name = name

        super().__init__(
            user_message=f"Unknown color name: '{name}'",
            model_name="name",
            recovery_hint="Use a CSS color name such as 'deepskyblue' or 'rebeccapurple'",
        )


class UnknownColorModelError(ColorConversionError, ValueError):
    """Model tag is not one of the supported color models."""

    def __init__(self, model: Any):
        """
        Initialize unknown model error.

        Args:
            model: The unrecognized model tag
        """
        self.model = model

        super().__init__(
            user_message=f'Invalid color model for "{model}"',
            recovery_hint=SUPPORTED_MODELS_HINT,
        )
