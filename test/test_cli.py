import contextlib
import io
import unittest

from colorblend import __version__
from colorblend.cli import create_parser, gradient_from_options, main
from colorblend.color import Color, ColorSpace, HueDirection
from colorblend.gradient import GradientDirection
from colorblend.render import text_input


class UntouchableStream(io.StringIO):
    """A stream that records whether it was read."""

    def __init__(self) -> None:
        super().__init__('text\n')
        self.touched = False

    def __iter__(self) -> 'UntouchableStream':
        self.touched = True
        return super().__iter__()

    def read(self, size: None | int = -1) -> str:
        self.touched = True
        return super().read(size)

    def readline(self, size: None | int = -1) -> str:  # type: ignore[override]
        self.touched = True
        return super().readline(size)


class BrokenStream(io.StringIO):
    def __iter__(self) -> 'BrokenStream':
        raise OSError('device unplugged')


def run(
    argv: list[str], text: str = ''
) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    status = main(argv, stdin=io.StringIO(text), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


class TestCommandLine(unittest.TestCase):

    def test_defaults(self) -> None:
        options = create_parser().parse_args([])
        gradient = gradient_from_options(options)
        self.assertEqual(gradient.start, Color(255, 0, 255))
        self.assertEqual(gradient.end, Color(0, 255, 255))
        self.assertIs(gradient.space, ColorSpace.RGB)
        self.assertIs(gradient.hue_direction, HueDirection.SHORTEST)
        self.assertIs(gradient.direction, GradientDirection.HORIZONTAL)
        self.assertFalse(gradient.invert)
        self.assertEqual(gradient.steps, 0)

    def test_options(self) -> None:
        options = create_parser().parse_args([
            '-s', '#000000', '--end-color', '#abcdef', '-d', 'vertical',
            '--colorspace', 'hcl', '--hue-direction', 'counter-clockwise',
            '--steps', '4', '--invert',
        ])
        gradient = gradient_from_options(options)
        self.assertEqual(gradient.start, Color(0, 0, 0))
        self.assertEqual(gradient.end, Color(0xab, 0xcd, 0xef))
        self.assertIs(gradient.space, ColorSpace.HCL)
        self.assertIs(gradient.hue_direction, HueDirection.COUNTER_CLOCKWISE)
        self.assertIs(gradient.direction, GradientDirection.VERTICAL)
        self.assertTrue(gradient.invert)
        self.assertEqual(gradient.steps, 4)

    def test_colorize(self) -> None:
        status, out, err = run(['-s', '#000000', '-e', '#FFFFFF'], 'AB')
        self.assertEqual(status, 0)
        self.assertEqual(
            out, '\x1b[38;2;0;0;0mA\x1b[38;2;255;255;255mB\n\x1b[0m\n'
        )
        self.assertEqual(err, '')

    def test_vertical(self) -> None:
        status, out, _ = run(
            ['-s', '#000000', '-e', '#FFFFFF', '--gradient-direction', 'vertical'],
            'X\nY\n',
        )
        self.assertEqual(status, 0)
        self.assertEqual(
            out, '\x1b[38;2;0;0;0mX\n\x1b[38;2;255;255;255mY\n\x1b[0m\n'
        )

    def test_carriage_return(self) -> None:
        stdout = io.StringIO()
        status = main(
            ['-s', '#000000', '-e', '#FFFFFF'],
            stdin=text_input(io.BytesIO(b'a\rb\n')),
            stdout=stdout,
            stderr=io.StringIO(),
        )
        self.assertEqual(status, 0)
        self.assertEqual(
            stdout.getvalue(),
            '\x1b[38;2;0;0;0ma\x1b[38;2;128;128;128m\r'
            '\x1b[38;2;255;255;255mb\n\x1b[0m\n',
        )

    def test_empty_input(self) -> None:
        status, out, _ = run([], '')
        self.assertEqual(status, 0)
        self.assertEqual(out, '\x1b[0m\n')

    def test_hue_direction(self) -> None:
        argv = ['-s', '#FF0000', '-e', '#0000FF', '--colorspace', 'hcl']
        _, shortest, _ = run(argv, 'ABC')
        _, clockwise, _ = run([*argv, '--hue-direction', 'clockwise'], 'ABC')
        self.assertNotEqual(shortest, clockwise)

    def test_configuration_errors(self) -> None:
        for argv in (
            ['--start-color', 'red'],
            ['--end-color', '#12345'],
            ['--gradient-direction', 'diagonal'],
            ['--colorspace', 'xyz'],
            ['--hue-direction', 'sideways'],
            ['--steps', '-1'],
            ['--steps=-3'],
            ['--steps', 'many'],
            ['--no-such-flag'],
            ['extra', 'arguments'],
        ):
            with self.subTest(argv=argv):
                stdin = UntouchableStream()
                stdout = io.StringIO()
                stderr = io.StringIO()
                status = main(argv, stdin=stdin, stdout=stdout, stderr=stderr)

                self.assertEqual(status, 1)
                self.assertFalse(stdin.touched)
                self.assertEqual(stdout.getvalue(), '')
                self.assertTrue(stderr.getvalue().startswith('Error: '))
                self.assertIn('usage: colorblend', stderr.getvalue())

    def test_input_error(self) -> None:
        stdout = io.StringIO()
        stderr = io.StringIO()
        status = main([], stdin=BrokenStream(), stdout=stdout, stderr=stderr)
        self.assertEqual(status, 1)
        self.assertEqual(stdout.getvalue(), '')
        self.assertIn('device unplugged', stderr.getvalue())

    def test_informational(self) -> None:
        for flag, expected in (
            ('--version', f'colorblend v{__version__}\n'),
            ('--help', '--start-color'),
        ):
            with self.subTest(flag=flag):
                out = io.StringIO()
                with contextlib.redirect_stdout(out):
                    with self.assertRaises(SystemExit) as context:
                        main([flag], stdin=UntouchableStream())
                self.assertEqual(context.exception.code, 0)
                self.assertIn(expected, out.getvalue())
