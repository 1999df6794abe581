"""RGB <-> CMYK conversions.

Both directions round once, after all arithmetic.
"""

from colorconversion.models import CyanMagentaYellowKey, RedGreenBlue
from colorconversion.utils import round_half_up


def rgb_to_cmyk(color: RedGreenBlue | dict) -> CyanMagentaYellowKey:
    """
    Convert RGB to CMYK.

    Pure black maps to cyan = magenta = yellow = 0, key = 100.

    Raises:
        MissingColorFieldsError: If a channel is missing
        ColorValueError: If a channel is not an integer in 0-255
    """
    rgb = RedGreenBlue.coerce(color)

    r = rgb.red / 255
    g = rgb.green / 255
    b = rgb.blue / 255
    max_rgb = max(r, g, b)

    def ink(channel: float) -> int:
        if max_rgb == 0:
            return 0
        return round_half_up((1 - channel / max_rgb) * 100)

    return CyanMagentaYellowKey(
        cyan=ink(r),
        magenta=ink(g),
        yellow=ink(b),
        key=round_half_up((1 - max_rgb) * 100),
    )


def cmyk_to_rgb(color: CyanMagentaYellowKey | dict) -> RedGreenBlue:
    """
    Convert CMYK to RGB.

    Raises:
        MissingColorFieldsError: If a component is missing
        ColorValueError: If a component is not an integer in 0-100
    """
    cmyk = CyanMagentaYellowKey.coerce(color)

    max_rgb = 1 - cmyk.key / 100

    def channel(ink: int) -> int:
        return round_half_up((1 - ink / 100) * max_rgb * 255)

    return RedGreenBlue(
        red=channel(cmyk.cyan),
        green=channel(cmyk.magenta),
        blue=channel(cmyk.yellow),
    )
