"""RGB <-> HSV conversions."""

import math

from colorconversion.models import HueSaturationValue, RedGreenBlue
from colorconversion.utils import round_half_up

from .hsl import rgb_to_hsl


def rgb_to_hsv(color: RedGreenBlue | dict) -> HueSaturationValue:
    """
    Convert RGB to HSV.

    Saturation is `1 - min / max` on the raw 0-255 channels (the ratio does
    not depend on scale), value is `max / 255`, and the hue is the HSL hue.

    Raises:
        MissingColorFieldsError: If a channel is missing
        ColorValueError: If a channel is not an integer in 0-255
    """
    rgb = RedGreenBlue.coerce(color)
    hue = rgb_to_hsl(rgb).hue

    min_c = min(rgb.as_tuple())
    max_c = max(rgb.as_tuple())

    saturation = 1 - min_c / max_c if max_c != 0 else 0
    value = max_c / 255

    return HueSaturationValue(
        hue=hue % 360,
        saturation=round_half_up(saturation * 100),
        value=round_half_up(value * 100),
    )


def hsv_to_rgb(color: HueSaturationValue | dict) -> RedGreenBlue:
    """
    Convert HSV to RGB with the chroma / hue-segment algorithm.

    Args:
        color: HueSaturationValue or mapping with hue, saturation and value

    Returns:
        RedGreenBlue: Channels in 0-255

    Raises:
        MissingColorFieldsError: If a component is missing
        ColorValueError: If a component has the wrong type or range
    """
    hsv = HueSaturationValue.coerce(color)

    s = hsv.saturation / 100
    v = hsv.value / 100

    chroma = v * s
    # Segments are taken on [0, 360) so every hue lands in one of the six branches
    hue_segment = (hsv.hue % 360) / 60
    intermediate = chroma * (1 - abs(hue_segment % 2 - 1))
    m = v - chroma

    segment = math.floor(hue_segment)
    if segment == 0:
        r, g, b = chroma, intermediate, 0.0
    elif segment == 1:
        r, g, b = intermediate, chroma, 0.0
    elif segment == 2:
        r, g, b = 0.0, chroma, intermediate
    elif segment == 3:
        r, g, b = 0.0, intermediate, chroma
    elif segment == 4:
        r, g, b = intermediate, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, intermediate

    return RedGreenBlue(
        red=round_half_up((r + m) * 255),
        green=round_half_up((g + m) * 255),
        blue=round_half_up((b + m) * 255),
    )
