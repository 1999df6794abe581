"""Generic utility modules for colorconversion.

- numbers: Rounding and clamping helpers
"""

from .numbers import clamp, round_half_up

__all__ = ["clamp", "round_half_up"]
