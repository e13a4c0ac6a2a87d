"""Signal handling for the resptree CLI.

SIGPIPE (where the platform has it) and SIGINT are recorded instead of killing
the process, so that the tree writer can stop cleanly and the CLI can exit with
the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can be abandoned gracefully.

    Each handler fires once: after recording the signal it reinstates the
    handler that was active before, so a second Ctrl+C behaves as usual.

    Attributes:
        sigpipe_received: Event set when a SIGPIPE signal is received.
        sigint_received: Event set when a SIGINT signal is received.
        original_sigpipe_handler: SIGPIPE handler in place before installation.
        original_sigint_handler: SIGINT handler in place before installation.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status matching the received signal, or None if none was received."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers of the singleton."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Silence standard output at exit after an interruption.

    Pointing stdout at the null device keeps the interpreter from reporting a
    second broken pipe while flushing during shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
