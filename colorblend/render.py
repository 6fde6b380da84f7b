"""
Rendering text with a gradient.

The renderer emits a 24-bit foreground color before every character and a
single reset at the very end. Since a vertical gradient depends on the number
of lines, input must be read in full before rendering, whereas output is
written as it is produced.
"""
import io
from collections.abc import Iterator, Sequence
from typing import BinaryIO, TextIO

from .ansi import foreground, RESET
from .error import InputError
from .gradient import GradientDirection, GradientSpec


def text_input(buffer: BinaryIO) -> TextIO:
    """
    Wrap the binary stream for reading UTF-8 text. Invalid UTF-8 decodes to
    U+FFFD. Lines end with ``\\n`` only, so a lone ``\\r`` stays part of
    its line.
    """
    return io.TextIOWrapper(buffer, encoding='utf8', errors='replace', newline='\n')


def read_lines(stream: TextIO) -> list[str]:
    """
    Read all lines from the stream. Each line loses its line terminator,
    ``\\n`` or ``\\r\\n``. An empty stream has no lines, whereas a stream with
    only a newline has one empty line.
    """
    lines: list[str] = []
    try:
        for line in stream:
            if line.endswith('\n'):
                line = line[:-1]
                if line.endswith('\r'):
                    line = line[:-1]
            lines.append(line)
    except (OSError, UnicodeDecodeError) as x:
        raise InputError(f'error reading input: {x}') from x
    return lines


def count_units(lines: Sequence[str], direction: GradientDirection) -> int:
    """
    Count the gradient units, i.e., code points for horizontal and lines for
    vertical gradients.
    """
    if direction is GradientDirection.VERTICAL:
        return len(lines)
    return sum(len(line) for line in lines)


def render(lines: Sequence[str], gradient: GradientSpec) -> Iterator[str]:
    """
    Render the lines with the gradient. This generator yields the output
    fragments in order; joined, they form the complete output.
    """
    vertical = gradient.direction is GradientDirection.VERTICAL
    total = count_units(lines, gradient.direction)
    position = 0

    last_progress: None | float = None
    escape = ''

    def escape_at(position: int) -> str:
        nonlocal last_progress, escape

        progress = gradient.progress(position, total)
        if progress != last_progress:
            last_progress = progress
            escape = foreground(*gradient.color_for(progress).coordinates)
        return escape

    for index, line in enumerate(lines):
        if vertical:
            if not line and total > 1:
                # An empty line still takes its share of the gradient
                yield escape_at(index) + '\n'
                continue

            for character in line:
                yield escape_at(index) + character
        else:
            for character in line:
                yield escape_at(position) + character
                position += 1

        yield '\n'

    yield RESET + '\n'


def write_gradient(
    lines: Sequence[str], gradient: GradientSpec, stream: TextIO
) -> None:
    """Render the lines with the gradient and write them to the stream."""
    for fragment in render(lines, gradient):
        stream.write(fragment)
    stream.flush()
