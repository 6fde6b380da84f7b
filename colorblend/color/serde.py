"""Support for serializing and deserializing color values"""
import re
from typing import cast, Literal, NoReturn, overload

from ..error import InvalidColor


_HEX_DIGITS = re.compile(r'[0-9a-fA-F]{6}')


@overload
def _check(
    is_valid: Literal[False], value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise InvalidColor(
            f'hex color "{value}" {deficiency}; expected format is #RRGGBB'
        )
    return


def parse_hex(color: str) -> tuple[int, int, int]:
    """
    Parse the string specifying a color in hashed hexadecimal format. The
    string must have a leading ``#`` followed by exactly six hexadecimal
    digits, in either case. Surrounding whitespace, the three-digit shorthand,
    and an alpha channel all are rejected.
    """
    _check(isinstance(color, str), color, 'is not a string')
    _check(color.startswith('#'), color, 'does not start with "#"')
    digits = color[1:]
    _check(len(digits) == 6, color, 'does not have 6 digits')
    _check(_HEX_DIGITS.fullmatch(digits) is not None, color, 'has non-hex digits')

    return cast(
        tuple[int, int, int],
        tuple(int(digits[n:n+2], base=16) for n in range(0, 6, 2)),
    )


def stringify(r: int, g: int, b: int) -> str:
    """Format the 24-bit RGB coordinates in lower-case hashed hexadecimal."""
    return '#' + ''.join(f'{c:02x}' for c in (r, g, b))
