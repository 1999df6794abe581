"""Enumerations for colorconversion."""

from enum import Enum

from colorconversion.exceptions import UnknownColorModelError


class ColorModel(str, Enum):
    """Tags identifying which representation a color value uses."""

    HEX = "hex"  # "#rrggbb" string, '#' optional on input
    RGB = "rgb"  # RedGreenBlue
    HSL = "hsl"  # HueSaturationLightness
    HWB = "hwb"  # HueWhitenessBlackness
    HSV = "hsv"  # HueSaturationValue
    CMYK = "cmyk"  # CyanMagentaYellowKey
    NAME = "name"  # Color name from the bundled table

    @classmethod
    def parse(cls, model: "str | ColorModel") -> "ColorModel":
        """Resolve a tag case-insensitively.

        Raises:
            UnknownColorModelError: If `model` is not a supported tag
        """
        if isinstance(model, cls):
            return model
        if isinstance(model, str):
            try:
                return cls(model.lower())
            except ValueError:
                raise UnknownColorModelError(model) from None
        raise UnknownColorModelError(model)

    @classmethod
    def ordered(cls) -> tuple["ColorModel", ...]:
        """Models in the order returned by ColorConverter.get_all_color_models()."""
        return (cls.NAME, cls.HEX, cls.RGB, cls.HSL, cls.HWB, cls.HSV, cls.CMYK)
