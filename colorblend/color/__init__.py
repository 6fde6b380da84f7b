"""
Colors, color spaces, and interpolation between colors.

:class:`Color` is an immutable 24-bit RGB color. :class:`ColorSpace` selects
the color space for :func:`interpolate`, and :class:`HueDirection` the arc
traveled by the hue in the polar HCL color space. The low-level conversion
functions live in :mod:`colorblend.color.conversion`.
"""
__all__ = (
    'Color',
    'ColorSpace',
    'Coordinate',
    'HueDirection',
    'hue_delta',
    'interpolate',
)

from .interpolation import hue_delta, interpolate
from .object import Color
from .space import ColorSpace, Coordinate, HueDirection
