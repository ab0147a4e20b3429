"""Membership test for the Mandelbrot set, with a small command-line front end."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

ESCAPE_RADIUS = 2.0
DEFAULT_ITERATIONS = 1000


class Orbit:
    """Iterates z -> z*z + c; z carries over from one test to the next."""

    def __init__(self, start: complex = 0j) -> None:
        self.z = complex(start)

    def is_in_mandelbrot(self, c: complex, iterations: int = DEFAULT_ITERATIONS) -> bool:
        """Return False as soon as |z| exceeds the escape radius, True otherwise."""
        for _ in range(iterations):
            self.z = self.z * self.z + c
            if math.hypot(self.z.real, self.z.imag) > ESCAPE_RADIUS:
                return False
        return True


def is_in_mandelbrot(c: complex, iterations: int = DEFAULT_ITERATIONS) -> bool:
    """Test ``c`` with an orbit that starts at zero."""
    return Orbit().is_in_mandelbrot(c, iterations)


def describe(real: float, imag: float, inside: bool) -> str:
    """Render the verdict for the point ``real + imag*i``."""
    verdict = "in" if inside else "not in"
    return f"{real:f} + {imag:f}i is {verdict} the Mandelbrot set"


def _parse(text: str, kind):
    """Parse a whole argument; an empty one reads as zero."""
    if not text:
        return kind(0)
    if text[-1].isspace() or "_" in text:
        raise ValueError(text)
    if kind is int:
        return int(text, 10)
    try:
        return float(text)
    except ValueError:
        if "x" not in text.lower():
            raise
        return float.fromhex(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Decide whether the point given on the command line is in the set."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 2 <= len(args) <= 3:
        sys.stderr.write("Usage: mandelbrot <real> <imaginary> [<N>]\n")
        return 1

    values = []
    for text, kind in zip(args, (float, float, int)):
        try:
            values.append(_parse(text, kind))
        except ValueError:
            what = "integer" if kind is int else "number"
            sys.stderr.write(f"Error: '{text}' is not a valid {what}.\n")
            return 1

    real, imag = values[:2]
    iterations = values[2] if len(values) == 3 else DEFAULT_ITERATIONS
    print(describe(real, imag, is_in_mandelbrot(complex(real, imag), iterations)))
    return 0


if __name__ == "__main__":
    sys.exit(main())