"""RGB <-> hexadecimal conversions."""

import re
from typing import Any

from colorconversion.exceptions import ColorValueError, HexLengthError
from colorconversion.models import RedGreenBlue

_HEX_DIGITS = re.compile(r"^[0-9a-f]{6}$")
HEX_HINT = "Use six hex digits with an optional leading '#', e.g. '#00bfff'"


def normalize_hex(color: Any) -> str:
    """
    Validate a hex color string and return its six lowercase digits.

    Args:
        color: Hex string, with or without a leading '#'

    Returns:
        str: Six lowercase hex digits without '#'

    Raises:
        ColorValueError: If `color` is not a string or has non-hex digits
        HexLengthError: If `color` is not 6 digits (7 characters with '#')

    Example:
        >>> normalize_hex("#00BFFF")
        '00bfff'
    """
    if not isinstance(color, str):
        raise ColorValueError(
            model_name="hex",
            field="color",
            value=color,
            error_msg="expected a string",
            recovery_hint=HEX_HINT,
        )

    digits = color[1:] if color.startswith("#") else color
    if len(digits) != 6:
        raise HexLengthError(color)

    digits = digits.lower()
    if not _HEX_DIGITS.match(digits):
        raise ColorValueError(
            model_name="hex",
            field="color",
            value=color,
            error_msg="contains characters that are not hexadecimal digits",
            recovery_hint=HEX_HINT,
        )
    return digits


def rgb_to_hex(color: RedGreenBlue | dict) -> str:
    """
    Convert an RGB color to a '#rrggbb' string.

    Args:
        color: RedGreenBlue or mapping with red, green and blue

    Returns:
        str: '#' followed by two lowercase hex digits per channel

    Raises:
        MissingColorFieldsError: If a channel is missing
        ColorValueError: If a channel is not an integer in 0-255

    Example:
        >>> rgb_to_hex({"red": 0, "green": 191, "blue": 255})
        '#00bfff'
    """
    rgb = RedGreenBlue.coerce(color)
    return f"#{rgb.red:02x}{rgb.green:02x}{rgb.blue:02x}"


def hex_to_rgb(color: str) -> RedGreenBlue:
    """
    Convert a hex string to RGB.

    Args:
        color: Six hex digits with an optional leading '#'

    Returns:
        RedGreenBlue: Parsed channels (always within 0-255)

    Raises:
        HexLengthError: If the string has the wrong length
        ColorValueError: If `color` is not a string or is not hexadecimal
    """
    digits = normalize_hex(color)
    red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RedGreenBlue(red=red, green=green, blue=blue)
