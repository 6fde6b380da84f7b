import io
import unittest

from colorblend.color import Color
from colorblend.error import InputError
from colorblend.gradient import GradientDirection, GradientSpec
from colorblend.render import (
    count_units, read_lines, render, text_input, write_gradient,
)


BLACK = '\x1b[38;2;0;0;0m'
GRAY = '\x1b[38;2;128;128;128m'
WHITE = '\x1b[38;2;255;255;255m'
RESET = '\x1b[0m'


def gradient(**kwargs: object) -> GradientSpec:
    return GradientSpec(Color(0, 0, 0), Color(255, 255, 255), **kwargs)  # type: ignore[arg-type]


def rendered(lines: list[str], spec: GradientSpec) -> str:
    return ''.join(render(lines, spec))


class BrokenStream(io.StringIO):
    def __iter__(self) -> 'BrokenStream':
        raise OSError('device unplugged')


class TestRender(unittest.TestCase):

    def test_empty(self) -> None:
        self.assertEqual(rendered([], gradient()), RESET + '\n')
        self.assertEqual(
            rendered([], gradient(direction=GradientDirection.VERTICAL)),
            RESET + '\n',
        )

    def test_horizontal(self) -> None:
        self.assertEqual(
            rendered(['AB'], gradient()),
            f'{BLACK}A{WHITE}B\n{RESET}\n',
        )
        # Positions accumulate across lines
        self.assertEqual(
            rendered(['AB', 'C'], gradient()),
            f'{BLACK}A{GRAY}B\n{WHITE}C\n{RESET}\n',
        )

    def test_horizontal_empty_lines(self) -> None:
        self.assertEqual(rendered(['', ''], gradient()), f'\n\n{RESET}\n')
        self.assertEqual(
            rendered(['A', '', 'B'], gradient()),
            f'{BLACK}A\n\n{WHITE}B\n{RESET}\n',
        )

    def test_code_points(self) -> None:
        self.assertEqual(
            rendered(['aé'], gradient()),
            f'{BLACK}a{WHITE}é\n{RESET}\n',
        )
        self.assertEqual(count_units(['héllo', '世界'], GradientDirection.HORIZONTAL), 7)
        self.assertEqual(count_units(['héllo', '世界'], GradientDirection.VERTICAL), 2)

    def test_vertical(self) -> None:
        vertical = gradient(direction=GradientDirection.VERTICAL)
        self.assertEqual(
            rendered(['X', 'Y'], vertical),
            f'{BLACK}X\n{WHITE}Y\n{RESET}\n',
        )
        self.assertEqual(
            rendered(['XY'], vertical),
            f'{BLACK}X{BLACK}Y\n{RESET}\n',
        )

    def test_vertical_empty_lines(self) -> None:
        vertical = gradient(direction=GradientDirection.VERTICAL)
        self.assertEqual(
            rendered(['X', '', 'Y'], vertical),
            f'{BLACK}X\n{GRAY}\n{WHITE}Y\n{RESET}\n',
        )
        # A single empty line is a single unit and has no color
        self.assertEqual(rendered([''], vertical), f'\n{RESET}\n')

    def test_invert_and_steps(self) -> None:
        self.assertEqual(
            rendered(['AB'], gradient(invert=True)),
            f'{WHITE}A{BLACK}B\n{RESET}\n',
        )
        self.assertEqual(
            rendered(['ABCD'], gradient(steps=1)),
            f'{BLACK}A{BLACK}B{WHITE}C{WHITE}D\n{RESET}\n',
        )

    def test_write(self) -> None:
        stream = io.StringIO()
        write_gradient(['AB'], gradient(), stream)
        self.assertEqual(stream.getvalue(), f'{BLACK}A{WHITE}B\n{RESET}\n')


class TestReadLines(unittest.TestCase):

    def test_lines(self) -> None:
        self.assertEqual(read_lines(io.StringIO('')), [])
        self.assertEqual(read_lines(io.StringIO('\n')), [''])
        self.assertEqual(read_lines(io.StringIO('x')), ['x'])
        self.assertEqual(read_lines(io.StringIO('a\r\nb\n')), ['a', 'b'])
        self.assertEqual(read_lines(io.StringIO('a\n\nb')), ['a', '', 'b'])

    def test_carriage_returns(self) -> None:
        self.assertEqual(read_lines(text_input(io.BytesIO(b'a\rb\n'))), ['a\rb'])
        self.assertEqual(
            read_lines(text_input(io.BytesIO(b'a\r\nb\r\n'))), ['a', 'b']
        )
        self.assertEqual(
            read_lines(text_input(io.BytesIO(b'\r\rx'))), ['\r\rx']
        )

    def test_invalid_utf8(self) -> None:
        self.assertEqual(
            read_lines(text_input(io.BytesIO(b'a\xffb\n'))), ['a\ufffdb']
        )

    def test_error(self) -> None:
        with self.assertRaises(InputError):
            read_lines(BrokenStream('text'))
