"""Maximum subarray sum computed three ways over a reproducible random array."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Sequence
from itertools import accumulate

_MASK32 = 0xFFFFFFFF


class CRandom:
    """The additive-feedback generator behind the C library's srand/rand."""

    def __init__(self, seed: int = 1) -> None:
        seed = (seed & _MASK32) or 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        state = [word]
        for _ in range(30):
            hi = int(word / 127773)
            word = 16807 * (word - hi * 127773) - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word)
        state += state[:3]
        self._window = deque((value & _MASK32 for value in state), maxlen=34)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._window[3] + self._window[31]) & _MASK32
        self._window.append(value)
        return value

    def rand(self) -> int:
        """Return the next value in 0..2**31-1."""
        return self._step() >> 1


def generate_random_array(n: int, seed: int) -> list[int]:
    """Return ``n`` values between -25 and 74 drawn from a generator seeded with ``seed``."""
    if n < 0:
        raise ValueError("array size must not be negative")
    rng = CRandom(seed)
    return [rng.rand() % 100 - 25 for _ in range(n)]


def max_subarray_cubic(values: Sequence[int]) -> int:
    """Best sum of a contiguous run, summing every run afresh."""
    n = len(values)
    return max((sum(values[a:b]) for a in range(n) for b in range(a + 1, n + 1)), default=0) if n else 0


def max_subarray_quadratic(values: Sequence[int]) -> int:
    """Best sum of a contiguous run, extending running sums from each start."""
    return max((s for a in range(len(values)) for s in accumulate(values[a:])), default=0)


def max_subarray_linear(values: Sequence[int]) -> int:
    """Best sum of a contiguous run by Kadane's algorithm."""
    best = running = 0
    for value in values:
        running = max(value, running + value)
        best = max(best, running)
    return best


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of each algorithm on the array for the given seed and size."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write("Usage: max_subarray <seed> <size>\n")
        return 1
    try:
        values = generate_random_array(_atoi(args[1]), _atoi(args[0]))
    except ValueError:
        sys.stderr.write("Memory allocation failed\n")
        return 1
    for algorithm in (max_subarray_cubic, max_subarray_quadratic, max_subarray_linear):
        print(max(0, algorithm(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())