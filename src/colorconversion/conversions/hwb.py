"""RGB <-> HWB conversions."""

from colorconversion.models import (
    HueSaturationLightness,
    HueWhitenessBlackness,
    RedGreenBlue,
)
from colorconversion.utils import round_half_up

from .hsl import hsl_to_rgb, rgb_to_hsl

DEFAULT_GRAY_SCALE = 255


def rgb_to_hwb(color: RedGreenBlue | dict) -> HueWhitenessBlackness:
    """
    Convert RGB to HWB.

    Whiteness is the smallest channel, blackness is one minus the largest;
    the hue is the HSL hue of the same color.

    Raises:
        MissingColorFieldsError: If a channel is missing
        ColorValueError: If a channel is not an integer in 0-255
    """
    rgb = RedGreenBlue.coerce(color)
    hue = rgb_to_hsl(rgb).hue

    whiteness = min(rgb.as_tuple()) / 255
    blackness = 1 - max(rgb.as_tuple()) / 255

    return HueWhitenessBlackness(
        hue=hue % 360,
        whiteness=round_half_up(whiteness * 100),
        blackness=round_half_up(blackness * 100),
    )


def hwb_to_rgb(
    color: HueWhitenessBlackness | dict, gray_scale: int = DEFAULT_GRAY_SCALE
) -> RedGreenBlue:
    """
    Convert HWB to RGB.

    When whiteness + blackness >= 100 the color is a gray whose level is
    `whiteness / (whiteness + blackness)`, scaled by `gray_scale`. Otherwise
    the fully saturated hue (HSL with saturation 100, lightness 50) is
    blended toward white and black.

    Args:
        color: HueWhitenessBlackness or mapping with hue, whiteness and blackness
        gray_scale: Multiplier for the achromatic gray. 255 keeps grays in
            byte range; 100 reproduces the legacy output.

    Raises:
        MissingColorFieldsError: If a component is missing
        ColorValueError: If a component has the wrong type or range
    """
    hwb = HueWhitenessBlackness.coerce(color)

    w = hwb.whiteness / 100
    b = hwb.blackness / 100

    if hwb.is_achromatic:
        gray = round_half_up(w / (w + b) * gray_scale)
        return RedGreenBlue(red=gray, green=gray, blue=gray)

    pure = hsl_to_rgb(HueSaturationLightness(hue=hwb.hue, saturation=100, lightness=50))

    def blend(channel: int) -> int:
        return round_half_up((channel / 255 * (1 - w - b) + w) * 255)

    return RedGreenBlue(
        red=blend(pure.red),
        green=blend(pure.green),
        blue=blend(pure.blue),
    )
