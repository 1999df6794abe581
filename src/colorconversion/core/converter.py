"""Stateful color converter."""

import logging
from typing import Any, Callable, Optional

from colorconversion.conversions import (
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
from colorconversion.exceptions import ErrorContext, UnknownColorNameError
from colorconversion.models import (
    ColorModel,
    ColorRepresentation,
    ConverterSettings,
    CyanMagentaYellowKey,
    HueSaturationLightness,
    HueSaturationValue,
    HueWhitenessBlackness,
    RedGreenBlue,
)

logger = logging.getLogger(__name__)


_FROM_RGB: dict[ColorModel, Callable[[RedGreenBlue], Any]] = {
    ColorModel.HEX: rgb_to_hex,
    ColorModel.HSL: rgb_to_hsl,
    ColorModel.HWB: rgb_to_hwb,
    ColorModel.HSV: rgb_to_hsv,
    ColorModel.CMYK: rgb_to_cmyk,
}


class ColorConverter:
    """
    Holds a current color and answers it in any supported model.

    The color is normalized to RGB whenever it is set; every query converts
    from that stored RGB value and nothing is cached.

    State:
        color: The last accepted color, as given (hex/name strings) or as
            its validated model
        current_model: The ColorModel tag of `color`
        normalized_color: `color` as RedGreenBlue

    Failure Handling:
        A new color is fully validated and normalized before any field is
        replaced, so a rejected color leaves the converter unchanged.

    Threading:
        Instances are meant to have a single owner. Concurrent reads are
        safe; concurrent calls to `set_new_color` need external locking.

    Example:
        ```python
        converter = ColorConverter("hex", "#00bfff")
        converter.convert_to("rgb")   # RedGreenBlue(red=0, green=191, blue=255)
        converter.convert_to("name")  # "deepskyblue"
        ```
    """

    def __init__(
        self,
        current_model: "str | ColorModel",
        color: ColorRepresentation | dict,
        settings: Optional[ConverterSettings] = None,
    ):
        """
        Initialize the converter with its first color.

        Args:
            current_model: Model tag of `color` (case-insensitive)
            color: Color value in that model
            settings: Conversion and logging settings (defaults apply if None)

        Raises:
            UnknownColorModelError: If `current_model` is not supported
            ColorValidationError: If `color` is not valid for the model
        """
        self.settings = settings or ConverterSettings()
        self._color: ColorRepresentation
        self._current_model: ColorModel
        self._normalized_color: RedGreenBlue

        self.set_new_color(color, current_model)
        logger.info(f"ColorConverter initialized with {self._current_model.value} color")

    @property
    def color(self) -> ColorRepresentation:
        """Get the last accepted color."""
        return self._color

    @property
    def current_model(self) -> ColorModel:
        """Get the model tag of the last accepted color."""
        return self._current_model

    @property
    def normalized_color(self) -> RedGreenBlue:
        """Get the current color as RGB."""
        return self._normalized_color

    def set_new_color(
        self, new_color: ColorRepresentation | dict, new_model: "str | ColorModel"
    ) -> None:
        """
        Replace the current color.

        Args:
            new_color: Color value in `new_model`
            new_model: Model tag of `new_color` (case-insensitive)

        Raises:
            UnknownColorModelError: If `new_model` is not supported
            ColorValidationError: If `new_color` is not valid for the model
        """
        with ErrorContext(
            f"set {new_model!r} color",
            logger_instance=logger,
            log_level=self.settings.failure_log_level_number,
        ):
            model = ColorModel.parse(new_model)
            color, normalized = self._normalize(new_color, model)

        self._color = color
        self._current_model = model
        self._normalized_color = normalized
        logger.debug(f"Color set to {model.value} {color!r} -> {normalized!r}")

    def _normalize(
        self, color: Any, model: ColorModel
    ) -> tuple[ColorRepresentation, RedGreenBlue]:
        """
        Validate `color` under `model` and convert it to RGB.

        Returns:
            Tuple of (color to store, normalized RGB)
        """
        if model is ColorModel.HEX:
            return color, hex_to_rgb(color)

        if model is ColorModel.NAME:
            hex_value = name_to_hex(color)
            if hex_value is None:
                raise UnknownColorNameError(color)
            return color, hex_to_rgb(hex_value)

        if model is ColorModel.RGB:
            rgb = RedGreenBlue.coerce(color)
            return rgb, rgb

        if model is ColorModel.HSL:
            hsl = HueSaturationLightness.coerce(color)
            return hsl, hsl_to_rgb(hsl)

        if model is ColorModel.HWB:
            hwb = HueWhitenessBlackness.coerce(color)
            return hwb, hwb_to_rgb(hwb, gray_scale=self.settings.hwb_gray_scale)

        if model is ColorModel.HSV:
            hsv = HueSaturationValue.coerce(color)
            return hsv, hsv_to_rgb(hsv)

        cmyk = CyanMagentaYellowKey.coerce(color)
        return cmyk, cmyk_to_rgb(cmyk)

    def convert_to(self, target_model: "str | ColorModel") -> ColorRepresentation | None:
        """
        Return the current color in another model.

        Args:
            target_model: Model tag to convert to (case-insensitive)

        Returns:
            The color in `target_model`. For "name", None when the color has
            no entry in the name table.

        Raises:
            UnknownColorModelError: If `target_model` is not supported
        """
        model = ColorModel.parse(target_model)

        if model is ColorModel.RGB:
            return self._normalized_color

        if model is ColorModel.NAME:
            return hex_to_name(rgb_to_hex(self._normalized_color))

        return _FROM_RGB[model](self._normalized_color)

    def get_all_color_models(self) -> tuple[ColorRepresentation | None, ...]:
        """
        Return the current color in every model.

        Returns:
            Tuple of (name or None, hex, rgb, hsl, hwb, hsv, cmyk)
        """
        return tuple(self.convert_to(model) for model in ColorModel.ordered())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current_model={self._current_model.value!r}, "
            f"normalized_color={self._normalized_color!r})"
        )
