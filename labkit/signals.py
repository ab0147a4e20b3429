"""Send a byte to another process one bit at a time with SIGUSR1 and SIGUSR2."""

from __future__ import annotations

import os
import re
import signal
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

BITS_PER_MESSAGE = 8
DEFAULT_DELAY = 0.001


@dataclass
class BitReceiver:
    """Assembles a byte from bits pushed most significant first."""

    value: int = 0
    count: int = 0

    def push(self, bit: int) -> int | None:
        """Shift ``bit`` in; return the byte once eight bits have arrived."""
        if self.count >= BITS_PER_MESSAGE:
            raise RuntimeError("all bits of the message have already been received")
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, not {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count += 1
        return self.value if self.count == BITS_PER_MESSAGE else None


def message_bits(message: int) -> list[int]:
    """The low eight bits of ``message``, most significant first."""
    return [(message >> shift) & 1 for shift in reversed(range(BITS_PER_MESSAGE))]


def send_message(pid: int, message: int, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``pid`` once per bit: SIGUSR1 for 0, SIGUSR2 for 1."""
    for bit in message_bits(message):
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        time.sleep(delay)


class _Complete(Exception):
    pass


def receiver_main(argv: Sequence[str] | None = None) -> int:
    """Print this process's PID, then wait for eight bits and print the byte."""
    receiver = BitReceiver()
    print(f"My PID is {os.getpid()}", flush=True)

    def on_signal(signum: int, frame: object) -> None:
        value = receiver.push(0 if signum == signal.SIGUSR1 else 1)
        if value is not None:
            raise _Complete(value)

    previous = {}
    try:
        for signum in (signal.SIGUSR1, signal.SIGUSR2):
            previous[signum] = signal.signal(signum, on_signal)
        while True:
            time.sleep(1)
    except _Complete as done:
        print(f"Received {done.args[0]}", flush=True)
        return 0
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def sender_main(argv: Sequence[str] | None = None) -> int:
    """Ask for a receiver PID and a message, then send the message."""
    tokens = (token for line in sys.stdin for token in line.split())
    values = []
    for prompt, what in (("Enter receiver PID: ", "PID"), ("Enter message: ", "message")):
        sys.stdout.write(prompt)
        sys.stdout.flush()
        match = re.match(r"[+-]?\d+", next(tokens, ""))
        if match is None:
            sys.stderr.write(f"Invalid {what}. Please enter an integer.\n")
            return 1
        values.append(int(match.group()))

    try:
        send_message(*values)
    except OSError as exc:
        sys.stderr.write(f"kill: {exc.strerror}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(sender_main())