"""
Interpolation between two colors.

Interpolation in :attr:`ColorSpace.RGB` is componentwise and linear. For
:attr:`ColorSpace.HCL` and :attr:`ColorSpace.LAB`, both colors are converted
into the perceptual color space first, then interpolated, and then converted
back into 24-bit RGB, which clamps out-of-gamut results.

HCL has a hue, which is an angle. Hence there are two arcs between any two
hues and :class:`HueDirection` determines which one to travel. Achromatic
colors, i.e., grays including black and white, have a powerless hue. When
interpolating with such a color, the other color's hue is used for both, so
that a gradient from red to white does not detour through other hues.
"""
import math

from .object import Color
from .space import ColorSpace, HueDirection


# Extrapolated coordinates saturate at this magnitude, which is far outside
# every gamut yet keeps the cubes in CIE Lab conversion finite.
_COORDINATE_LIMIT = 1e6


def hue_delta(start: float, end: float, direction: HueDirection) -> float:
    """
    Determine the signed rotation in degrees from the start hue to the end
    hue, with both hues between 0 and 360.

    The result is in (-180, 180] for :attr:`HueDirection.SHORTEST`, in [0, 360)
    for :attr:`HueDirection.CLOCKWISE`, and in (-360, 0] for
    :attr:`HueDirection.COUNTER_CLOCKWISE`.
    """
    if direction is HueDirection.CLOCKWISE:
        return ((end - start) + 360) % 360
    elif direction is HueDirection.COUNTER_CLOCKWISE:
        return -(((start - end) + 360) % 360)

    delta = end - start
    if delta > 180:
        delta -= 360
    elif delta <= -180:
        delta += 360
    return delta


def _prepare_hues(h1: float, h2: float) -> tuple[float, float]:
    """Normalize the hues to 0–360 and replace powerless hues."""
    if math.isnan(h1) and math.isnan(h2):
        return 0.0, 0.0
    if math.isnan(h1):
        h1 = h2
    elif math.isnan(h2):
        h2 = h1
    return h1 % 360, h2 % 360


def interpolate(
    start: str | Color,
    end: str | Color,
    progress: float,
    space: str | ColorSpace = ColorSpace.RGB,
    hue_direction: str | HueDirection = HueDirection.SHORTEST,
) -> Color:
    """
    Interpolate between the two colors.

    Args:
        start: is the color for progress 0, possibly as a ``#RRGGBB`` string
        end: is the color for progress 1, possibly as a ``#RRGGBB`` string
        progress: is the fraction of the way from start to end; values outside
            0–1 extrapolate linearly, saturating far outside the gamut
        space: is the color space for interpolation
        hue_direction: is the arc traveled by the hue; it only affects polar
            color spaces
    Returns:
        the interpolated color, clamped to 24-bit RGB
    Raises:
        InvalidColor: if either color is a malformed string
        UnsupportedColorSpace: if the color space is not recognized
        UnsupportedHueDirection: if the hue direction is not recognized

    This function is pure.
    """
    start = Color.of(start)
    end = Color.of(end)
    space = ColorSpace.resolve(space)
    hue_direction = HueDirection.resolve(hue_direction)

    c1 = start.to(space.tag)
    c2 = end.to(space.tag)
    angular_index = space.angular_index

    coordinates: list[float] = []
    h1 = h2 = 0.0
    if angular_index >= 0:
        h1, h2 = _prepare_hues(c1[angular_index], c2[angular_index])

    for index, (v1, v2) in enumerate(zip(c1, c2)):
        if index == angular_index:
            delta = hue_delta(h1, h2, hue_direction)
            coordinates.append((h1 + progress * delta) % 360)
        else:
            value = v1 + progress * (v2 - v1)
            coordinates.append(
                min(max(value, -_COORDINATE_LIMIT), _COORDINATE_LIMIT)
            )

    return Color.from_space(space.tag, *coordinates)
