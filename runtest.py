#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import os
import subprocess
import sys
import traceback
import unittest

from colorblend import GradientSpec, render
from colorblend.ansi import RESET


HEADING = GradientSpec(start='#3178ea', end='#ff00ff', space='hcl')  # type: ignore[arg-type]
FAILURE = GradientSpec(start='#ff0000', end='#ffca00')  # type: ignore[arg-type]


if __name__ == "__main__":
    stream = sys.stdout
    isatty = stream.isatty()

    def styled(gradient: GradientSpec, text: str) -> str:
        if not isatty:
            return text
        # Drop the trailing newline after the reset
        return "".join(render([text], gradient)).removesuffix(f"\n{RESET}\n") + RESET

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    def h1(text: str) -> str:
        return "\n" + styled(HEADING, f"━━━ {text} ".ljust(70, "━"))

    def h2(text: str) -> str:
        return f"\n─── {text}"

    println(h1("1. Setup"))
    println(h2("PYTHONIOENCODING"))
    println(os.environ.get("PYTHONIOENCODING", "n/a"))
    println(h2("PYTHONUTF8"))
    println(os.environ.get("PYTHONUTF8", "n/a"))
    println(h2("Standard Out/Err Encoding"))
    println(sys.stdout.encoding)
    println(sys.stderr.encoding)
    println(h2("Python"))
    println(f"{sys.executable}")
    println(h2("Python Path"))
    for path in sys.path:
        println(f"{path}")
    println(h2("Current Directory"))
    println(f"{os.getcwd()}")

    println(h1("2. Type Checking"))
    try:
        subprocess.run([sys.executable, "-m", "pyright", "colorblend"], check=True)
    except subprocess.CalledProcessError:
        println(styled(FAILURE, "colorblend failed to type check!"))
        sys.exit(1)

    println(h1("3. Unit Testing"))
    try:
        runner = unittest.main(
            module="test",
            exit=False,
            testRunner=unittest.TextTestRunner(stream=stream),
        )
        sys.exit(not runner.result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace[:-1]))
        println(styled(FAILURE, trace[-1]))
        sys.exit(1)
