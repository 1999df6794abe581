"""Data models for colorconversion."""

from .color import (
    ColorBase,
    ColorRepresentation,
    CyanMagentaYellowKey,
    HueSaturationLightness,
    HueSaturationValue,
    HueWhitenessBlackness,
    NameColor,
    RedGreenBlue,
)
from .enums import ColorModel
from .settings import ConverterSettings

__all__ = [
    # Models
    "ColorBase",
    "ColorRepresentation",
    "CyanMagentaYellowKey",
    "HueSaturationLightness",
    "HueSaturationValue",
    "HueWhitenessBlackness",
    "NameColor",
    "RedGreenBlue",
    # Enums
    "ColorModel",
    # Settings
    "ConverterSettings",
]
