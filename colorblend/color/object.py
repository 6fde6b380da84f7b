"""The color object"""
import dataclasses
from typing import Self

from ..error import InvalidColor
from .conversion import clamp_byte, get_converter
from .serde import parse_hex, stringify


@dataclasses.dataclass(frozen=True, slots=True)
class Color:
    """
    A color in 24-bit RGB.

    Attributes:
        r: is the red channel
        g: is the green channel
        b: is the blue channel

    All three channels are integers between 0 and 255, inclusive. Colors
    computed in other color spaces are clamped to that range when converted
    back with :meth:`from_space`, never wrapped.

    Instances of this class are immutable. Colors format as lower-case
    hashed hexadecimal, e.g., ``#ff00ff``.
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in zip('rgb', (self.r, self.g, self.b)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidColor(f'{name} channel {value!r} is not an integer')
            if not 0 <= value <= 255:
                raise InvalidColor(f'{name} channel {value} is not between 0 and 255')

    @classmethod
    def parse(cls, color: str) -> Self:
        """Parse the color in ``#RRGGBB`` format."""
        return cls(*parse_hex(color))

    @classmethod
    def of(cls, color: 'str | Color') -> Self:
        """Coerce the color or its hashed hexadecimal string to a color."""
        if isinstance(color, cls):
            return color
        return cls.parse(color)  # type: ignore[arg-type]

    @classmethod
    def from_space(cls, tag: str, c1: float, c2: float, c3: float) -> Self:
        """
        Create a new color from the coordinates in the tagged color format or
        space. The result is rounded and clamped to 24-bit RGB.
        """
        if tag == 'rgb256':
            return cls(clamp_byte(c1), clamp_byte(c2), clamp_byte(c3))
        return cls(*get_converter(tag, 'rgb256')(c1, c2, c3))

    @property
    def coordinates(self) -> tuple[int, int, int]:
        """The three channels as a tuple."""
        return self.r, self.g, self.b

    def to(self, tag: str) -> tuple[float, float, float]:
        """Convert this color to the tagged color format or space."""
        return get_converter('rgb256', tag)(*self.coordinates)

    def srgb(self) -> tuple[float, float, float]:
        """Convert to sRGB with coordinates between 0 and 1."""
        return self.to('srgb')

    def lab(self) -> tuple[float, float, float]:
        """Convert to CIE Lab."""
        return self.to('lab')

    def hcl(self) -> tuple[float, float, float]:
        """Convert to HCL. The hue of achromatic colors is not-a-number."""
        return self.to('hcl')

    def __str__(self) -> str:
        return stringify(*self.coordinates)
