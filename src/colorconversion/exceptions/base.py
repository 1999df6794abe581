"""Base exception class for colorconversion.

Every error raised by the library derives from ColorConversionError and
carries two renderings of the same problem: a short `user_message` for
display and a `technical_message` for logs, which adds the rejected value
and its type where one is known.
"""

from typing import Optional


class ColorConversionError(Exception):
    """
    Base exception for all colorconversion errors.

    Attributes:
        user_message: Message shown by str()
        technical_message: Message written by ErrorContext when logging
        model_name: Color model the failing input was meant for, if any
        recovery_hint: How to correct the input, if there is a known fix
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        model_name: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.model_name = model_name
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """Return the user message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
