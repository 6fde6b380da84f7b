"""
Color text in the terminal with smooth or stepped gradients.

:class:`GradientSpec` configures a gradient, :func:`progress_for` maps a
character or line to its progress along the gradient, :func:`interpolate` maps
the progress to a color, and :func:`render` turns lines of text into
truecolor escape sequences.
"""
__version__ = '1.0.0'

__all__ = (
    'Color',
    'ColorSpace',
    'GradientDirection',
    'GradientSpec',
    'HueDirection',
    'interpolate',
    'progress_for',
    'read_lines',
    'render',
    'write_gradient',
)

from .color import Color, ColorSpace, HueDirection, interpolate
from .gradient import GradientDirection, GradientSpec, progress_for
from .render import read_lines, render, write_gradient
