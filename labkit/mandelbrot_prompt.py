"""Interactive Mandelbrot test that reads points until one part is zero."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from labkit.mandelbrot import DEFAULT_ITERATIONS, Orbit, describe

PROMPT = "Enter a complex number (real and imaginary parts): "


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Prompt for points and judge each on one shared orbit; stop when a part is zero.

    Returns 1 on malformed input and 0 when the loop ends normally.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    orbit = Orbit()
    tokens = (token for line in stdin for token in line.split())
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            real, imag = float(next(tokens)), float(next(tokens))
        except (StopIteration, ValueError):
            stderr.write("Invalid input. Please enter two numbers.\n")
            return 1
        if real == 0 or imag == 0:
            return 0
        inside = orbit.is_in_mandelbrot(complex(real, imag), DEFAULT_ITERATIONS)
        stdout.write(describe(real, imag, inside) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prompt on the standard streams."""
    return run()


if __name__ == "__main__":
    sys.exit(main())