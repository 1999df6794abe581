"""Converter settings model."""

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from colorconversion.exceptions import wrap_settings_error


class ConverterSettings(BaseModel):
    """Behaviour switches for conversions and converter logging.

    Settings live in memory only; there is no config file.
    """

    model_config = ConfigDict(frozen=True)

    legacy_hwb_gray_scale: bool = Field(
        default=False,
        description=(
            "Scale the achromatic HWB gray by 100 instead of 255. "
            "Reproduces older output where whiteness + blackness >= 100 "
            "produced grays in 0-100 rather than 0-255."
        ),
    )
    failure_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level used when a converter rejects a new color",
    )

    @property
    def hwb_gray_scale(self) -> int:
        """Multiplier applied to the normalized gray of an achromatic HWB color."""
        return 100 if self.legacy_hwb_gray_scale else 255

    @property
    def failure_log_level_number(self) -> int:
        """`failure_log_level` as a `logging` level number."""
        return logging.getLevelName(self.failure_log_level)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConverterSettings":
        """
        Build settings from a plain mapping.

        Args:
            data: Field values; missing fields use their defaults

        Raises:
            SettingsValidationError: If any value fails validation
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise wrap_settings_error(e) from e
