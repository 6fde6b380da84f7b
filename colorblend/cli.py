"""
The colorblend command line tool, which colors text read from standard input
with a gradient.
"""
import argparse
import sys
from typing import Any, NoReturn, TextIO

from . import __version__
from .color import Color, ColorSpace, HueDirection
from .error import ConfigurationError, InputError, InvalidColor
from .gradient import GradientDirection, GradientSpec
from .render import read_lines, text_input, write_gradient


class ArgumentParser(argparse.ArgumentParser):
    """
    An argument parser that raises a :class:`.ConfigurationError` instead of
    exiting with status 2. That way, :func:`main` reports all configuration
    errors the same way.
    """

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def hex_color(value: str) -> Color:
    """Parse the command line argument as a color in ``#RRGGBB`` format."""
    try:
        return Color.parse(value)
    except InvalidColor as x:
        raise argparse.ArgumentTypeError(str(x))


def step_count(value: str) -> int:
    """Parse the command line argument as a non-negative integer."""
    try:
        steps = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'"{value}" is not an integer')
    if steps < 0:
        raise argparse.ArgumentTypeError('cannot be negative')
    return steps


def add_gradient_options(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add command line arguments to configure the gradient."""
    parser.add_argument(
        '-s', '--start-color',
        type=hex_color,
        default=Color.parse('#FF00FF'),
        metavar='COLOR',
        help='starting color in #RRGGBB notation (default: #FF00FF, magenta)',
    )
    parser.add_argument(
        '-e', '--end-color',
        type=hex_color,
        default=Color.parse('#00FFFF'),
        metavar='COLOR',
        help='ending color in #RRGGBB notation (default: #00FFFF, cyan)',
    )
    parser.add_argument(
        '-d', '--gradient-direction',
        choices=[d.value for d in GradientDirection],
        default=GradientDirection.HORIZONTAL.value,
        help='color by character or by line (default: horizontal)',
    )
    parser.add_argument(
        '-c', '--colorspace',
        choices=[s.value for s in ColorSpace],
        default=ColorSpace.RGB.value,
        help='color space for interpolation (default: rgb)',
    )
    parser.add_argument(
        '--hue-direction',
        choices=[d.value for d in HueDirection],
        default=HueDirection.SHORTEST.value,
        help='arc traveled by the hue; only applies to hcl (default: shortest)',
    )
    parser.add_argument(
        '--steps',
        type=step_count,
        default=0,
        help='number of discrete color steps, with 0 for a smooth gradient',
    )
    parser.add_argument(
        '-i', '--invert',
        action='store_true',
        help='swap start and end of the gradient',
    )
    return parser


def create_parser() -> ArgumentParser:
    """Create a command line argument parser."""
    parser = ArgumentParser(
        prog='colorblend',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description='Apply a color gradient to text read from standard input.',
        epilog="""\
examples:
  echo "Hello, World!" | colorblend
  echo "Colorful!" | colorblend --start-color '#FF0000' --end-color '#00FF00'
  echo "Stepped!" | colorblend --steps 5 -s '#FF0000' -e '#0000FF'
  ls -l | colorblend --gradient-direction vertical -s '#FF0000' -e '#0000FF'
  echo "Inverted!" | colorblend --invert
  echo "HCL Gradient!" | colorblend -s '#FF0000' -e '#0000FF' \\
      --colorspace hcl --hue-direction clockwise
""",
    )
    add_gradient_options(parser)
    parser.add_argument(
        '--version',
        action='version',
        version=f'colorblend v{__version__}',
    )
    return parser


def gradient_from_options(options: Any) -> GradientSpec:
    """Create the gradient specification from the parsed options."""
    return GradientSpec(
        start=options.start_color,
        end=options.end_color,
        space=ColorSpace.resolve(options.colorspace),
        hue_direction=HueDirection.resolve(options.hue_direction),
        direction=GradientDirection.resolve(options.gradient_direction),
        invert=options.invert,
        steps=options.steps,
    )


def main(
    argv: None | list[str] = None,
    *,
    stdin: None | TextIO = None,
    stdout: None | TextIO = None,
    stderr: None | TextIO = None,
) -> int:
    """
    Run colorblend and return its exit status. The configuration is validated
    in full before any input is read.
    """
    stderr = sys.stderr if stderr is None else stderr
    parser = create_parser()

    try:
        options = parser.parse_args(argv)
        gradient = gradient_from_options(options)
    except ConfigurationError as x:
        print(f'Error: {x}\n', file=stderr)
        parser.print_help(stderr)
        return 1

    if stdin is None:
        stdin = text_input(sys.stdin.buffer)
    stdout = sys.stdout if stdout is None else stdout

    try:
        lines = read_lines(stdin)
    except InputError as x:
        print(f'Error: {x}', file=stderr)
        return 1

    write_gradient(lines, gradient, stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
