"""The exceptions raised by colorblend"""


class ColorblendError(Exception):
    """The root of colorblend's exception hierarchy."""


class ConfigurationError(ColorblendError, ValueError):
    """
    An invalid gradient configuration. All configuration errors are detected
    before any input is read or any output is written.
    """


class InvalidColor(ConfigurationError):
    """A color that is not in ``#RRGGBB`` format."""


class UnsupportedColorSpace(ConfigurationError):
    """A color space selector other than ``rgb``, ``hcl``, or ``lab``."""


class UnsupportedHueDirection(ConfigurationError):
    """A hue direction other than the three supported arcs."""


class UnsupportedGradientDirection(ConfigurationError):
    """A gradient direction other than horizontal or vertical."""


class InputError(ColorblendError):
    """A failure while reading the input stream."""
