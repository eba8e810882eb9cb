"""Safe output writing utilities for treee CLI.

This module provides a safe writing interface that handles
signals and interruptions gracefully.
"""

import errno
import os
import types
from typing import Optional, Type

from treee.cli.interrupts import interrupts


class SafeWriter:
    """Signal-aware writer for a file descriptor.

    Writes go straight to the descriptor, so every line reaches the terminal or pipe
    as soon as it is produced. Once SIGPIPE or SIGINT has been received, or the
    reader has gone away, further writes raise BrokenPipeError.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, fd: int):
        """Initialize the safe writer.

        Args:
            fd: File descriptor to write to, typically ``sys.stdout.fileno()``.

        Raises:
            TypeError: If fd is not an integer.
        """
        if not isinstance(fd, int):
            raise TypeError(f"Expected int, got {type(fd).__name__}")
        self.fd = fd
        self._closed = False

    def write(self, data: str) -> None:
        """Safely write data with signal checking.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if interrupts.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8", errors="surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Mark the writer as closed. The descriptor itself belongs to the caller."""
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
