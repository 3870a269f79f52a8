"""Latching SIGINT and toggling SIGQUIT by blocking and unblocking signals."""

from __future__ import annotations

import signal
import sys
import time
from typing import Sequence, TextIO

DETECTED_MESSAGE = "SIGINT detected. Unblocking SIGQUIT.\n"


def _announce(signum: int, state: str, out: TextIO | None) -> None:
    if signum == signal.SIGQUIT:
        stream = sys.stdout if out is None else out
        stream.write(f"SIGQUIT (ctrl-\\) {state}.\n")


def block_signal(signum: int, out: TextIO | None = None) -> None:
    """Add ``signum`` to the blocked set of the calling thread."""
    signal.pthread_sigmask(signal.SIG_BLOCK, {signum})
    _announce(signum, "blocked", out)


def unblock_signal(signum: int, out: TextIO | None = None) -> None:
    """Remove ``signum`` from the blocked set of the calling thread."""
    signal.pthread_sigmask(signal.SIG_UNBLOCK, {signum})
    _announce(signum, "unblocked", out)


class SigintLatch:
    """Remembers that SIGINT arrived, and releases SIGQUIT once it has."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out
        self.triggered = False

    def install(self) -> None:
        """Make this latch the SIGINT handler."""
        signal.signal(signal.SIGINT, self.handle)

    def handle(self, signum: int, frame: object) -> None:
        """Signal handler: record SIGINT, ignore anything else."""
        if signum != signal.SIGINT:
            return
        block_signal(signal.SIGINT, self.out)
        self.triggered = True
        unblock_signal(signal.SIGINT, self.out)

    def poll(self) -> bool:
        """Check the latch with SIGINT held off; unblock SIGQUIT once set."""
        block_signal(signal.SIGINT, self.out)
        if self.triggered:
            stream = sys.stdout if self.out is None else self.out
            stream.write(DETECTED_MESSAGE)
            unblock_signal(signal.SIGINT, self.out)
            unblock_signal(signal.SIGQUIT, self.out)
        else:
            unblock_signal(signal.SIGINT, self.out)
        return self.triggered


def main(argv: Sequence[str] | None = None) -> int:
    """Block SIGQUIT until a SIGINT arrives, checking once a second."""
    latch = SigintLatch()
    latch.install()
    block_signal(signal.SIGQUIT)
    while True:
        latch.poll()
        sys.stdout.flush()
        time.sleep(1)