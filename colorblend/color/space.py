"""
Metadata about the color spaces used for interpolation and the hue directions
for polar color spaces.
"""
import dataclasses
import enum
from typing import Literal, Self

from ..error import UnsupportedColorSpace, UnsupportedHueDirection


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A color space coordinate.

    Attributes:
        name: the single-letter name of the coordinate
        label: the human-readable name of the coordinate
        type: the optional type for common coordinate semantics

    An **angle** is a floating point number representing a rotation between 0
    and 360 degrees; used for the *hue* in polar color spaces. An **int** is an
    integral byte value between 0 and 255.

    Instances of this class are immutable.
    """
    name: str
    label: str
    type: None | Literal['angle', 'int'] = None

    def __post_init__(self) -> None:
        if len(self.name) != 1:
            raise ValueError('coordinate must have single-letter name')

    @property
    def angular(self) -> bool:
        """Flag for this coordinate representing an angle."""
        return self.type == 'angle'

    @property
    def integral(self) -> bool:
        """Flag for this coordinate having integer values only."""
        return self.type == 'int'


_RGB_COORDINATES = (
    Coordinate('r', 'red', 'int'),
    Coordinate('g', 'green', 'int'),
    Coordinate('b', 'blue', 'int'),
)

_HCL_COORDINATES = (
    Coordinate('h', 'hue', 'angle'),
    Coordinate('c', 'chroma'),
    Coordinate('l', 'luminance'),
)

_LAB_COORDINATES = (
    Coordinate('L', 'lightness'),
    Coordinate('a', 'green-red'),
    Coordinate('b', 'blue-yellow'),
)


class ColorSpace(enum.StrEnum):
    """
    The color space used for interpolating between two colors.

    Attributes:
        RGB: interpolates 24-bit RGB channels componentwise
        HCL: interpolates the cylindrical form of CIE Lab, i.e., hue, chroma,
            and luminance, with the hue following a :class:`HueDirection`
        LAB: interpolates CIE Lab componentwise

    The value of each constant is its command line name. Its :attr:`tag`
    names the corresponding node in the conversion graph of
    :mod:`colorblend.color.conversion`.
    """
    RGB = 'rgb'
    HCL = 'hcl'
    LAB = 'lab'

    @property
    def tag(self) -> str:
        """The tag of the color format in the conversion graph."""
        return 'rgb256' if self is ColorSpace.RGB else self.value

    @property
    def coordinates(self) -> tuple[Coordinate, Coordinate, Coordinate]:
        """The coordinates of this color space."""
        if self is ColorSpace.RGB:
            return _RGB_COORDINATES
        elif self is ColorSpace.HCL:
            return _HCL_COORDINATES
        else:
            return _LAB_COORDINATES

    @property
    def polar(self) -> bool:
        """Flag for this color space having polar coordinates."""
        return any(c.angular for c in self.coordinates)

    @property
    def angular_index(self) -> int:
        """
        Determine the index of the angular coordinate. If the color space is
        polar, this property provides the angular coordinate's index.
        Otherwise, it is -1.
        """
        for index, coordinate in enumerate(self.coordinates):
            if coordinate.angular:
                return index
        return -1

    @classmethod
    def resolve(cls, space: 'str | ColorSpace') -> Self:
        """
        Resolve the color space or its name. Names are matched
        case-insensitively.
        """
        if isinstance(space, cls):
            return space
        try:
            return cls(str(space).casefold())
        except ValueError:
            raise UnsupportedColorSpace(
                f'unsupported color space "{space}"; '
                f'must be one of {", ".join(s.value for s in cls)}'
            ) from None


class HueDirection(enum.StrEnum):
    """
    The arc traveled by the hue of polar color spaces.

    Attributes:
        SHORTEST: takes the shorter of the two arcs, which never exceeds 180°
        CLOCKWISE: always travels towards increasing hues
        COUNTER_CLOCKWISE: always travels towards decreasing hues

    Hue directions have no effect on color spaces without hue.
    """
    SHORTEST = 'shortest'
    CLOCKWISE = 'clockwise'
    COUNTER_CLOCKWISE = 'counter-clockwise'

    @classmethod
    def resolve(cls, direction: 'str | HueDirection') -> Self:
        """Resolve the hue direction or its name."""
        if isinstance(direction, cls):
            return direction
        try:
            return cls(str(direction).casefold())
        except ValueError:
            raise UnsupportedHueDirection(
                f'unsupported hue direction "{direction}"; '
                f'must be one of {", ".join(d.value for d in cls)}'
            ) from None
