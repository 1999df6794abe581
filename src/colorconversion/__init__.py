"""colorconversion: convert colors between hex, RGB, HSL, HWB, HSV, CMYK and names."""

__version__ = "0.1.0"

from .conversions import (
    cmyk_to_rgb,
    hex_to_name,
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    name_to_hex,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
)
from .core import ColorConverter
from .exceptions import ColorConversionError
from .models import (
    ColorModel,
    ConverterSettings,
    CyanMagentaYellowKey,
    HueSaturationLightness,
    HueSaturationValue,
    HueWhitenessBlackness,
    NameColor,
    RedGreenBlue,
)

__all__ = [
    # Converter
    "ColorConverter",
    "ConverterSettings",
    # Models
    "ColorModel",
    "CyanMagentaYellowKey",
    "HueSaturationLightness",
    "HueSaturationValue",
    "HueWhitenessBlackness",
    "NameColor",
    "RedGreenBlue",
    # Conversions
    "cmyk_to_rgb",
    "hex_to_name",
    "hex_to_rgb",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hwb_to_rgb",
    "name_to_hex",
    "rgb_to_cmyk",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hwb",
    # Errors
    "ColorConversionError",
]
