"""Pytest fixtures for tests."""

import pytest

from colorconversion import ColorConverter, ConverterSettings, RedGreenBlue


@pytest.fixture
def deep_sky_blue():
    """RGB value of #00bfff."""
    return RedGreenBlue(red=0, green=191, blue=255)


@pytest.fixture
def converter():
    """Create a converter holding #00bfff."""
    return ColorConverter("hex", "#00bfff")


@pytest.fixture
def legacy_settings():
    """Settings reproducing the legacy HWB gray scale."""
    return ConverterSettings(legacy_hwb_gray_scale=True)
