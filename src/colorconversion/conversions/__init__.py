"""
Color Model Conversions
=======================

Pure, stateless functions that convert one color representation to another.
Every function validates its input first and raises a `ColorValidationError`
subclass instead of clamping.

RGB <-> Hex:
    rgb_to_hex(color) -> "#rrggbb"
    hex_to_rgb("#rrggbb" | "rrggbb") -> RedGreenBlue

RGB <-> HSL / HWB / HSV / CMYK:
    rgb_to_hsl, hsl_to_rgb
    rgb_to_hwb, hwb_to_rgb(color, gray_scale=255)
    rgb_to_hsv, hsv_to_rgb
    rgb_to_cmyk, cmyk_to_rgb

Hex <-> Name:
    hex_to_name(hex) -> name | None
    name_to_hex(name) -> "rrggbb" | None

Inputs may be the matching model or a plain dict with the same keys.

Examples
--------
>>> from colorconversion.conversions import hex_to_rgb, rgb_to_hsl
>>> rgb = hex_to_rgb("#00bfff")
>>> rgb_to_hsl(rgb)
HueSaturationLightness(hue=195, saturation=100, lightness=50)
"""

from .cmyk import cmyk_to_rgb, rgb_to_cmyk
from .hexadecimal import hex_to_rgb, normalize_hex, rgb_to_hex
from .hsl import hsl_to_rgb, rgb_to_hsl
from .hsv import hsv_to_rgb, rgb_to_hsv
from .hwb import hwb_to_rgb, rgb_to_hwb
from .names import hex_to_name, name_to_hex

__all__ = [
    # Hex
    "hex_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    # HSL
    "hsl_to_rgb",
    "rgb_to_hsl",
    # HWB
    "hwb_to_rgb",
    "rgb_to_hwb",
    # HSV
    "hsv_to_rgb",
    "rgb_to_hsv",
    # CMYK
    "cmyk_to_rgb",
    "rgb_to_cmyk",
    # Names
    "hex_to_name",
    "name_to_hex",
]
