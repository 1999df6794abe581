"""Hex <-> color name lookups against the bundled name table."""

from typing import Any, Optional

from colorconversion.colors import HEX_TO_NAME, NAME_TO_HEX
from colorconversion.exceptions import ColorValueError

from .hexadecimal import normalize_hex


def hex_to_name(color: str) -> Optional[str]:
    """
    Look up the name of a hex color.

    Matching ignores case and a leading '#'. Aliases sharing a value
    resolve to the first name in the table.

    Returns:
        The color name, or None if the table has no entry for it

    Raises:
        HexLengthError: If the string has the wrong length
        ColorValueError: If `color` is not a string or is not hexadecimal
    """
    return HEX_TO_NAME.get(normalize_hex(color))


def name_to_hex(color: Any) -> Optional[str]:
    """
    Look up the hex value of a color name, ignoring case.

    Returns:
        Six lowercase hex digits without '#', or None if the name is unknown

    Raises:
        ColorValueError: If `color` is not a string
    """
    if not isinstance(color, str):
        raise ColorValueError(
            model_name="name",
            field="color",
            value=color,
            error_msg="not a color name string",
            recovery_hint="Pass the color name as a string, e.g. 'deepskyblue'",
        )
    return NAME_TO_HEX.get(color.lower())
