"""Low-level support for assembling ANSI escape sequences"""
import enum


class Ansi(enum.StrEnum):
    """
    An enumeration of ANSI escape sequence components.

    Attributes:
        ESC: is the escape character by itself
        CSI: starts a control sequence; it is defined with the two-character C0
            sequence and not the one-character C1 sequence, since the latter
            conflicts with UTF-8

    All enumeration constants are strings and hence can be directly used when
    assembling ANSI escape sequences. For example:

    .. code-block:: python

        print(f"{Ansi.CSI}38;2;255;0;255m" "Parrot!" f"{Ansi.CSI}0m")

    prints a magenta parrot. :meth:`fuse` saves on counting semicolons, so
    that the same escape sequence can also be written as:

    .. code-block:: python

        Ansi.fuse(Ansi.CSI, 38, 2, 255, 0, 255, 'm')
    """
    ESC = '\x1b'
    CSI = '\x1b['

    @staticmethod
    def fuse(*fragments: None | int | str) -> str:
        """
        Fuse the ANSI escape sequence fragments into a single string. This
        method treats ``None`` as a default parameter and replaces it with an
        empty string. It also inserts semicolons between parameters, i.e., when
        two successive arguments are either ``None`` or an integer.
        """
        processed: list[str] = []
        previous_was_parameter = False

        for fragment in fragments:
            current_is_parameter = fragment is None or isinstance(fragment, int)
            if previous_was_parameter and current_is_parameter:
                processed.append(';')
            processed.append('' if fragment is None else str(fragment))
            previous_was_parameter = current_is_parameter

        return ''.join(processed)


RESET = Ansi.fuse(Ansi.CSI, 0, 'm')
"""The SGR sequence resetting all attributes, i.e., ``ESC[0m``."""


def foreground(r: int, g: int, b: int) -> str:
    """Create the SGR sequence selecting the 24-bit foreground color."""
    return Ansi.fuse(Ansi.CSI, 38, 2, r, g, b, 'm')
