"""Tests for ColorConverter."""

import logging

import pytest

from colorconversion import ColorConverter, ConverterSettings
from colorconversion.exceptions import (
    ColorValueError,
    HexLengthError,
    MissingColorFieldsError,
    UnknownColorModelError,
    UnknownColorNameError,
)
from colorconversion.models import (
    ColorModel,
    CyanMagentaYellowKey,
    HueSaturationLightness,
    HueSaturationValue,
    HueWhitenessBlackness,
    RedGreenBlue,
)


class TestConstruction:
    """Test creating a converter."""

    @pytest.mark.unit
    def test_from_hex(self, converter, deep_sky_blue):
        """Test state after construction from hex."""
        assert converter.current_model is ColorModel.HEX
        assert converter.color == "#00bfff"
        assert converter.normalized_color == deep_sky_blue

    @pytest.mark.unit
    def test_from_dict(self):
        """Test that dict input is stored as the validated model."""
        converter = ColorConverter("hsl", {"hue": 195, "saturation": 100, "lightness": 50})
        assert converter.color == HueSaturationLightness(hue=195, saturation=100, lightness=50)
        assert converter.normalized_color == RedGreenBlue(red=0, green=191, blue=255)

    @pytest.mark.unit
    def test_from_name(self, deep_sky_blue):
        """Test construction from a color name."""
        converter = ColorConverter("name", "DeepSkyBlue")
        assert converter.current_model is ColorModel.NAME
        assert converter.normalized_color == deep_sky_blue

    @pytest.mark.unit
    @pytest.mark.parametrize("model", ["HEX", "Hex", ColorModel.HEX])
    def test_model_tag_case_insensitive(self, model, deep_sky_blue):
        """Test model tags in any case or as enum members."""
        assert ColorConverter(model, "#00bfff").normalized_color == deep_sky_blue

    @pytest.mark.unit
    def test_unknown_model(self):
        """Test that an unsupported model tag raises."""
        with pytest.raises(UnknownColorModelError) as exc_info:
            ColorConverter("xyz", "#00bfff")

        assert str(exc_info.value) == 'Invalid color model for "xyz"'

    @pytest.mark.unit
    def test_unknown_name(self):
        """Test that an unknown color name raises."""
        with pytest.raises(UnknownColorNameError):
            ColorConverter("name", "notacolor")

    @pytest.mark.unit
    def test_invalid_color(self):
        """Test that invalid input is rejected at construction."""
        with pytest.raises(MissingColorFieldsError):
            ColorConverter("rgb", {"red": 0, "green": 0})

        with pytest.raises(HexLengthError):
            ColorConverter("hex", "#fff")

    @pytest.mark.unit
    def test_repr(self, converter):
        """Test repr shows model and RGB value."""
        text = repr(converter)
        assert text.startswith("ColorConverter(current_model='hex'")
        assert "red=0, green=191, blue=255" in text


class TestConvertTo:
    """Test converting the current color."""

    @pytest.mark.integration
    def test_every_model(self, converter, deep_sky_blue):
        """Test #00bfff in each model."""
        assert converter.convert_to("name") == "deepskyblue"
        assert converter.convert_to("hex") == "#00bfff"
        assert converter.convert_to("rgb") == deep_sky_blue
        assert converter.convert_to("hsl") == HueSaturationLightness(
            hue=195, saturation=100, lightness=50
        )
        assert converter.convert_to("hwb") == HueWhitenessBlackness(
            hue=195, whiteness=0, blackness=0
        )
        assert converter.convert_to("hsv") == HueSaturationValue(
            hue=195, saturation=100, value=100
        )
        assert converter.convert_to("cmyk") == CyanMagentaYellowKey(
            cyan=100, magenta=25, yellow=0, key=0
        )

    @pytest.mark.unit
    def test_repeatable(self, converter):
        """Test that repeated queries give the same answer."""
        assert converter.convert_to("hsl") == converter.convert_to("HSL")

    @pytest.mark.unit
    def test_no_name(self):
        """Test that an unnamed color converts to None."""
        converter = ColorConverter("rgb", {"red": 1, "green": 2, "blue": 3})
        assert converter.convert_to("name") is None
        assert converter.convert_to("hex") == "#010203"

    @pytest.mark.unit
    def test_unknown_target(self, converter):
        """Test that an unsupported target raises."""
        with pytest.raises(UnknownColorModelError):
            converter.convert_to("lab")

    @pytest.mark.integration
    def test_hsl_to_hex(self):
        """Test an HSL input converted to hex."""
        converter = ColorConverter("hsl", {"hue": 200, "saturation": 28, "lightness": 35})
        assert converter.convert_to("hex") == "#406272"

    @pytest.mark.unit
    def test_legacy_hwb_gray_scale(self, legacy_settings):
        """Test that legacy settings scale achromatic HWB by 100."""
        hwb = {"hue": 0, "whiteness": 50, "blackness": 50}

        assert ColorConverter("hwb", hwb).convert_to("rgb") == RedGreenBlue(
            red=128, green=128, blue=128
        )
        assert ColorConverter("hwb", hwb, settings=legacy_settings).convert_to(
            "rgb"
        ) == RedGreenBlue(red=50, green=50, blue=50)


class TestGetAllColorModels:
    """Test get_all_color_models."""

    @pytest.mark.integration
    def test_order_and_values(self, converter, deep_sky_blue):
        """Test the fixed order of every representation."""
        assert converter.get_all_color_models() == (
            "deepskyblue",
            "#00bfff",
            deep_sky_blue,
            HueSaturationLightness(hue=195, saturation=100, lightness=50),
            HueWhitenessBlackness(hue=195, whiteness=0, blackness=0),
            HueSaturationValue(hue=195, saturation=100, value=100),
            CyanMagentaYellowKey(cyan=100, magenta=25, yellow=0, key=0),
        )

    @pytest.mark.unit
    def test_name_slot_is_none(self):
        """Test the name slot for a color without a name."""
        converter = ColorConverter("hex", "#010203")
        models = converter.get_all_color_models()
        assert len(models) == 7
        assert models[0] is None


class TestSetNewColor:
    """Test replacing the current color."""

    @pytest.mark.unit
    def test_replaces_state(self, converter):
        """Test that all state moves to the new color."""
        converter.set_new_color({"cyan": 0, "magenta": 0, "yellow": 0, "key": 100}, "cmyk")

        assert converter.current_model is ColorModel.CMYK
        assert converter.color == CyanMagentaYellowKey(cyan=0, magenta=0, yellow=0, key=100)
        assert converter.normalized_color == RedGreenBlue.off()
        assert converter.convert_to("name") == "black"

    @pytest.mark.unit
    @pytest.mark.parametrize("color,model,error", [
        ({"red": 300, "green": 0, "blue": 0}, "rgb", ColorValueError),
        ({"hue": 0, "saturation": 0}, "hsl", MissingColorFieldsError),
        ("#12345", "hex", HexLengthError),
        ("notacolor", "name", UnknownColorNameError),
        ("#ffffff", "xyz", UnknownColorModelError),
    ])
    def test_failure_leaves_state_unchanged(self, converter, deep_sky_blue, color, model, error):
        """Test that a rejected color keeps the previous one."""
        with pytest.raises(error):
            converter.set_new_color(color, model)

        assert converter.current_model is ColorModel.HEX
        assert converter.color == "#00bfff"
        assert converter.normalized_color == deep_sky_blue

    @pytest.mark.unit
    def test_failure_is_logged(self, converter, caplog):
        """Test that rejections are logged at WARNING by default."""
        with pytest.raises(HexLengthError):
            converter.set_new_color("#fff", "hex")

        failures = [r for r in caplog.records if "Failed to set" in r.getMessage()]
        assert len(failures) == 1
        assert failures[0].levelno == logging.WARNING

    @pytest.mark.unit
    def test_failure_log_level_setting(self, caplog):
        """Test that the failure log level comes from settings."""
        converter = ColorConverter(
            "hex", "#00bfff", settings=ConverterSettings(failure_log_level="DEBUG")
        )
        caplog.set_level(logging.WARNING)

        with pytest.raises(HexLengthError):
            converter.set_new_color("#fff", "hex")

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
