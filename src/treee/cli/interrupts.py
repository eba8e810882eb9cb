"""Interruption tracking for the treee CLI.

SIGPIPE (the reader of a pipe went away, as in ``treee | head``) and SIGINT
(Ctrl+C) do not abort the listing mid-line. The handler only records which signal
arrived first; the writer polls that record and stops producing output, and
``main`` exits with the shell's conventional status for the signal.
"""

import signal
from types import FrameType
from typing import Callable, Dict, Optional, Union

# Statuses a shell reports for a process killed by a signal
SIGNAL_EXIT_BASE = 128

_Handler = Union[Callable[[int, Optional[FrameType]], object], int, None]


class Interrupts:
    """Records the first stopping signal received by the process.

    Attributes:
        signals: The signal numbers this instance watches.
    """

    def __init__(self) -> None:
        self.signals = (signal.SIGPIPE, signal.SIGINT)
        self._received: Optional[int] = None
        self._previous: Dict[int, _Handler] = {}

    def install(self) -> None:
        """Route the watched signals to ``record``, remembering the handlers they replace."""
        for signum in self.signals:
            self._previous[signum] = signal.signal(signum, self.record)

    def record(self, signum: int, frame: Optional[FrameType]) -> None:
        """Signal handler. Only the first signal counts.

        The replaced handler is reinstated, so a second Ctrl+C is not swallowed.
        """
        if self._received is None:
            self._received = signum
        previous = self._previous.get(signum)
        signal.signal(signum, signal.SIG_DFL if previous is None else previous)

    def interrupted(self) -> bool:
        return self._received is not None

    def exit_status(self) -> Optional[int]:
        """Return 141 after SIGPIPE, 130 after SIGINT, None if no signal arrived."""
        if self._received is None:
            return None
        return SIGNAL_EXIT_BASE + self._received


interrupts = Interrupts()


def install_handlers() -> None:
    """Start tracking SIGPIPE and SIGINT for this process."""
    interrupts.install()
