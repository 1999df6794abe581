"""RGB <-> HSL conversions."""

from colorconversion.models import HueSaturationLightness, RedGreenBlue
from colorconversion.utils import clamp, round_half_up


def rgb_to_hsl(color: RedGreenBlue | dict) -> HueSaturationLightness:
    """
    Convert RGB to HSL using the min/max/delta algorithm.

    Args:
        color: RedGreenBlue or mapping with red, green and blue

    Returns:
        HueSaturationLightness: hue in [0, 360), saturation and lightness in percent

    Raises:
        MissingColorFieldsError: If a channel is missing
        ColorValueError: If a channel is not an integer in 0-255
    """
    rgb = RedGreenBlue.coerce(color)

    r = rgb.red / 255
    g = rgb.green / 255
    b = rgb.blue / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        # Achromatic (gray)
        hue = 0.0
        saturation = 0.0
    else:
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)

        if max_c == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif max_c == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HueSaturationLightness(
        hue=round_half_up(hue * 360) % 360,
        saturation=round_half_up(saturation * 100),
        lightness=round_half_up(lightness * 100),
    )


def hsl_to_rgb(color: HueSaturationLightness | dict) -> RedGreenBlue:
    """
    Convert HSL to RGB.

    Each channel is `l - chroma * clamp(min(n - 3, 9 - n), -1, 1)` with
    `n = (offset + hue / 30) mod 12` and offsets 0, 8 and 4 for red, green
    and blue.

    Args:
        color: HueSaturationLightness or mapping with hue, saturation and lightness

    Returns:
        RedGreenBlue: Channels in 0-255

    Raises:
        MissingColorFieldsError: If a component is missing
        ColorValueError: If a component has the wrong type or range
    """
    hsl = HueSaturationLightness.coerce(color)

    s = hsl.saturation / 100
    l = hsl.lightness / 100
    chroma = s * min(l, 1 - l)

    def component(offset: int) -> float:
        n = (offset + hsl.hue / 30) % 12
        return l - chroma * clamp(min(n - 3, 9 - n), -1, 1)

    return RedGreenBlue(
        red=round_half_up(component(0) * 255),
        green=round_half_up(component(8) * 255),
        blue=round_half_up(component(4) * 255),
    )
