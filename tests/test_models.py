"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from colorconversion.exceptions import (
    ColorValueError,
    MissingColorFieldsError,
    UnknownColorModelError,
)
from colorconversion.models import (
    ColorModel,
    CyanMagentaYellowKey,
    HueSaturationLightness,
    HueWhitenessBlackness,
    NameColor,
    RedGreenBlue,
)


class TestRedGreenBlue:
    """Test RedGreenBlue model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = RedGreenBlue(red=100, green=50, blue=25)
        assert color.red == 100
        assert color.green == 50
        assert color.blue == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValidationError):
            RedGreenBlue(red=256, green=0, blue=0)

        with pytest.raises(ValidationError):
            RedGreenBlue(red=0, green=-1, blue=0)

    @pytest.mark.unit
    def test_rejects_non_integers(self):
        """Test that floats and numeric strings are not coerced."""
        with pytest.raises(ValidationError):
            RedGreenBlue(red=1.5, green=0, blue=0)

        with pytest.raises(ValidationError):
            RedGreenBlue(red="12", green=0, blue=0)

    @pytest.mark.unit
    def test_frozen(self):
        """Test that colors are immutable and hashable."""
        color = RedGreenBlue(red=1, green=2, blue=3)
        with pytest.raises(ValidationError):
            color.red = 10

        assert len({color, RedGreenBlue(red=1, green=2, blue=3)}) == 1

    @pytest.mark.unit
    def test_off(self):
        """Test black factory method."""
        assert RedGreenBlue.off() == RedGreenBlue(red=0, green=0, blue=0)

    @pytest.mark.unit
    def test_as_tuple(self):
        """Test channel tuple in declaration order."""
        assert RedGreenBlue(red=10, green=20, blue=30).as_tuple() == (10, 20, 30)


class TestCoerce:
    """Test ColorBase.coerce."""

    @pytest.mark.unit
    def test_instance_passes_through(self):
        """Test that an instance is returned unchanged."""
        color = RedGreenBlue(red=1, green=2, blue=3)
        assert RedGreenBlue.coerce(color) is color

    @pytest.mark.unit
    def test_mapping_is_validated(self):
        """Test that a dict becomes a model."""
        color = HueSaturationLightness.coerce({"hue": 195, "saturation": 100, "lightness": 50})
        assert color == HueSaturationLightness(hue=195, saturation=100, lightness=50)

    @pytest.mark.unit
    def test_missing_fields(self):
        """Test that absent keys raise a shape error."""
        with pytest.raises(MissingColorFieldsError) as exc_info:
            RedGreenBlue.coerce({"red": 0, "green": 0})

        assert exc_info.value.missing == ("blue",)
        assert exc_info.value.required == ("red", "green", "blue")

    @pytest.mark.unit
    def test_out_of_range(self):
        """Test that an out-of-range value raises a range error."""
        with pytest.raises(ColorValueError) as exc_info:
            CyanMagentaYellowKey.coerce({"cyan": 0, "magenta": 0, "yellow": 0, "key": 101})

        assert exc_info.value.field == "key"
        assert exc_info.value.value == 101

    @pytest.mark.unit
    def test_wrong_model_instance(self):
        """Test that another color model is not accepted."""
        hsl = HueSaturationLightness(hue=0, saturation=0, lightness=0)
        with pytest.raises(ColorValueError):
            RedGreenBlue.coerce(hsl)

    @pytest.mark.unit
    def test_non_mapping(self):
        """Test that a tuple is rejected."""
        with pytest.raises(ColorValueError):
            RedGreenBlue.coerce((0, 0, 0))


class TestHueModels:
    """Test hue-based models."""

    @pytest.mark.unit
    def test_hue_is_not_range_checked(self):
        """Test that hue may lie outside [0, 360) on input."""
        assert HueSaturationLightness(hue=400, saturation=50, lightness=50).hue == 400
        assert HueSaturationLightness(hue=-30, saturation=50, lightness=50).hue == -30

    @pytest.mark.unit
    def test_percent_range(self):
        """Test that percentages must be 0-100."""
        with pytest.raises(ValidationError):
            HueSaturationLightness(hue=0, saturation=101, lightness=50)

    @pytest.mark.unit
    def test_hwb_achromatic(self):
        """Test the whiteness + blackness >= 100 boundary."""
        assert HueWhitenessBlackness(hue=0, whiteness=50, blackness=50).is_achromatic
        assert HueWhitenessBlackness(hue=0, whiteness=70, blackness=60).is_achromatic
        assert not HueWhitenessBlackness(hue=0, whiteness=49, blackness=50).is_achromatic


class TestNameColor:
    """Test NameColor model."""

    @pytest.mark.unit
    def test_normalizes_values(self):
        """Test that name is lowercased and '#' is stripped."""
        entry = NameColor(name="DeepSkyBlue", hex_value="#00BFFF")
        assert entry.name == "deepskyblue"
        assert entry.hex_value == "00bfff"

    @pytest.mark.unit
    def test_invalid_hex_value(self):
        """Test that hex_value must be six hex digits."""
        with pytest.raises(ValidationError):
            NameColor(name="broken", hex_value="12345")

        with pytest.raises(ValidationError):
            NameColor(name="broken", hex_value="zzzzzz")


class TestColorModel:
    """Test ColorModel enum."""

    @pytest.mark.unit
    def test_parse_case_insensitive(self):
        """Test tag lookup ignores case."""
        assert ColorModel.parse("HEX") is ColorModel.HEX
        assert ColorModel.parse("Cmyk") is ColorModel.CMYK
        assert ColorModel.parse(ColorModel.NAME) is ColorModel.NAME

    @pytest.mark.unit
    def test_parse_unknown(self):
        """Test that unknown tags raise."""
        with pytest.raises(UnknownColorModelError):
            ColorModel.parse("xyz")

        with pytest.raises(UnknownColorModelError):
            ColorModel.parse(3)

    @pytest.mark.unit
    def test_ordered(self):
        """Test the fixed all-models order."""
        assert [m.value for m in ColorModel.ordered()] == [
            "name", "hex", "rgb", "hsl", "hwb", "hsv", "cmyk"
        ]

    @pytest.mark.unit
    def test_str_enum_compares_to_tag(self):
        """Test that members compare equal to their lowercase tag."""
        assert ColorModel.HSV == "hsv"
