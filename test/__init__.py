__all__ = (
    'TestAnsi',
    'TestColor',
    'TestColorSpace',
    'TestCommandLine',
    'TestGradientPlotter',
    'TestGradientSpec',
    'TestHueDelta',
    'TestInterpolate',
    'TestProgress',
    'TestReadLines',
    'TestRender',
)

from .test_cli import TestCommandLine
from .test_color import TestAnsi, TestColor, TestColorSpace
from .test_gradient import TestGradientSpec, TestProgress
from .test_interpolation import TestHueDelta, TestInterpolate
from .test_plot import TestGradientPlotter
from .test_render import TestReadLines, TestRender
