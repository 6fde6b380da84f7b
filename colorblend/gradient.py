"""
Gradients and the mapping from a gradient unit's position to its progress.

A gradient spans some number of units, which are characters for
:attr:`GradientDirection.HORIZONTAL` and lines for
:attr:`GradientDirection.VERTICAL`. The progress of a unit is its relative
position within that span, so that the first unit has progress 0 and the last
unit has progress 1.
"""
import dataclasses
import enum
import math
from typing import Self

from .color import Color, ColorSpace, HueDirection, interpolate
from .error import ConfigurationError, UnsupportedGradientDirection


class GradientDirection(enum.StrEnum):
    """
    The direction of a gradient.

    Attributes:
        HORIZONTAL: colors characters by their position in the text
        VERTICAL: colors characters by the index of their line
    """
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @classmethod
    def resolve(cls, direction: 'str | GradientDirection') -> Self:
        """Resolve the gradient direction or its name."""
        if isinstance(direction, cls):
            return direction
        try:
            return cls(str(direction).casefold())
        except ValueError:
            raise UnsupportedGradientDirection(
                f'unsupported gradient direction "{direction}"; '
                'must be horizontal or vertical'
            ) from None


def progress_for(
    position: int,
    total_units: int,
    invert: bool = False,
    steps: int = 0,
) -> float:
    """
    Determine the progress for the unit at the zero-based position.

    Args:
        position: is the zero-based index of the unit
        total_units: is the number of units spanned by the gradient
        invert: flips the progress to run from 1 to 0
        steps: quantizes the progress to multiples of ``1/steps`` if positive
    Returns:
        the progress

    A gradient spanning at most one unit is entirely the start color. Hence
    its progress is 0, irrespective of inversion and steps.

    With steps, the progress is rounded half up to the nearest multiple of
    ``1/steps``, i.e., it takes one of ``steps + 1`` distinct levels. Negative
    steps are a configuration error and must be rejected before calling this
    function.
    """
    if total_units <= 1:
        return 0.0

    progress = position / (total_units - 1)
    if invert:
        progress = 1.0 - progress
    if steps > 0:
        progress = math.floor(progress * steps + 0.5) / steps
    return progress


@dataclasses.dataclass(frozen=True, slots=True)
class GradientSpec:
    """
    A gradient's configuration.

    Attributes:
        start: is the color at progress 0
        end: is the color at progress 1
        space: is the color space for interpolation
        hue_direction: is the arc traveled by the hue in polar color spaces
        direction: is the direction of the gradient
        invert: swaps the start and end of the gradient
        steps: is the number of discrete steps or 0 for a continuous gradient

    The constructor accepts colors as ``#RRGGBB`` strings and enumeration
    constants by name and coerces them. It raises a
    :class:`.ConfigurationError` on invalid values.

    Instances of this class are immutable.
    """
    start: Color = Color(0xff, 0x00, 0xff)
    end: Color = Color(0x00, 0xff, 0xff)
    space: ColorSpace = ColorSpace.RGB
    hue_direction: HueDirection = HueDirection.SHORTEST
    direction: GradientDirection = GradientDirection.HORIZONTAL
    invert: bool = False
    steps: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, 'start', Color.of(self.start))
        object.__setattr__(self, 'end', Color.of(self.end))
        object.__setattr__(self, 'space', ColorSpace.resolve(self.space))
        object.__setattr__(
            self, 'hue_direction', HueDirection.resolve(self.hue_direction)
        )
        object.__setattr__(
            self, 'direction', GradientDirection.resolve(self.direction)
        )

        if not isinstance(self.steps, int) or isinstance(self.steps, bool):
            raise ConfigurationError(f'steps {self.steps!r} is not an integer')
        if self.steps < 0:
            raise ConfigurationError(f'steps {self.steps} is negative')

    def progress(self, position: int, total_units: int) -> float:
        """Determine the progress for the unit at the position."""
        return progress_for(position, total_units, self.invert, self.steps)

    def color_for(self, progress: float) -> Color:
        """Determine the color for the progress."""
        return interpolate(
            self.start, self.end, progress, self.space, self.hue_direction
        )

    def color_at(self, position: int, total_units: int) -> Color:
        """Determine the color for the unit at the position."""
        return self.color_for(self.progress(position, total_units))

    def sample(self, count: int) -> list[Color]:
        """Sample the gradient at ``count`` evenly spaced units."""
        return [self.color_at(position, count) for position in range(count)]
