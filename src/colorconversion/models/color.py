"""Color value models.

Every color representation is a frozen, strict Pydantic model: instances are
hashable value objects, and integer channels never accept floats, bools or
numeric strings. `RedGreenBlue` is the canonical form every other model
normalizes through.
"""

import re
from collections.abc import Mapping
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from colorconversion.exceptions import ColorValueError, wrap_validation_error

ModelT = TypeVar("ModelT", bound="ColorBase")

_HEX_DIGITS = re.compile(r"^[0-9a-f]{6}$")


class ColorBase(BaseModel):
    """Shared behaviour for the channel-based color models."""

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def coerce(cls: type[ModelT], color: Any) -> ModelT:
        """Return `color` as an instance of this model.

        Accepts an existing instance or a mapping with the model's keys.

        Raises:
            MissingColorFieldsError: If required keys are absent
            ColorValueError: If a value has the wrong type or range, or if
                `color` is neither an instance nor a mapping
        """
        if isinstance(color, cls):
            return color
        if not isinstance(color, Mapping):
            raise ColorValueError(
                model_name=cls.__name__,
                field="color",
                value=color,
                error_msg=f"expected a {cls.__name__} or a mapping of its fields",
                recovery_hint=f"Pass a dict with keys: {', '.join(cls.model_fields)}",
            )
        try:
            return cls.model_validate(dict(color))
        except ValidationError as e:
            raise wrap_validation_error(e, cls) from e

    def as_tuple(self) -> tuple[int, ...]:
        """Return the channel values in declaration order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)


class RedGreenBlue(ColorBase):
    """Standard 8-bit RGB color (0-255 per channel)."""

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "RedGreenBlue":
        """Create black."""
        return cls(red=0, green=0, blue=0)


class HueSaturationLightness(ColorBase):
    """HSL color.

    Hue is in degrees and may lie outside [0, 360); it is only reduced
    modulo 360 on output.
    """

    hue: int = Field(description="Hue in degrees")
    saturation: int = Field(ge=0, le=100, description="Saturation (0-100%)")
    lightness: int = Field(ge=0, le=100, description="Lightness (0-100%)")


class HueSaturationValue(ColorBase):
    """HSV color (value is brightness)."""

    hue: int = Field(description="Hue in degrees")
    saturation: int = Field(ge=0, le=100, description="Saturation (0-100%)")
    value: int = Field(ge=0, le=100, description="Value (0-100%)")


class HueWhitenessBlackness(ColorBase):
    """HWB color."""

    hue: int = Field(description="Hue in degrees")
    whiteness: int = Field(ge=0, le=100, description="Whiteness (0-100%)")
    blackness: int = Field(ge=0, le=100, description="Blackness (0-100%)")

    @property
    def is_achromatic(self) -> bool:
        """True when whiteness and blackness together leave no room for hue."""
        return self.whiteness + self.blackness >= 100


class CyanMagentaYellowKey(ColorBase):
    """CMYK color with every component in percent."""

    cyan: int = Field(ge=0, le=100, description="Cyan (0-100%)")
    magenta: int = Field(ge=0, le=100, description="Magenta (0-100%)")
    yellow: int = Field(ge=0, le=100, description="Yellow (0-100%)")
    key: int = Field(ge=0, le=100, description="Key/black (0-100%)")


class NameColor(BaseModel):
    """An entry of the color name table."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(min_length=1, description="Lowercase color name")
    hex_value: str = Field(description="Six lowercase hex digits, no '#'")

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Store names lowercase."""
        return v.lower()

    @field_validator("hex_value")
    @classmethod
    def normalize_hex_value(cls, v: str) -> str:
        """Strip a leading '#' and require six hex digits."""
        v = v.removeprefix("#").lower()
        if not _HEX_DIGITS.match(v):
            raise ValueError("hex_value must be six hex digits")
        return v


ColorRepresentation = Union[
    str,
    RedGreenBlue,
    HueSaturationLightness,
    HueSaturationValue,
    HueWhitenessBlackness,
    CyanMagentaYellowKey,
]
"""Any value a converter can hold; the active variant is given by a ColorModel tag."""
