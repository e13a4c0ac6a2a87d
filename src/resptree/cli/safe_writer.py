"""Line-oriented output writer aware of broken pipes and interruptions."""

import errno
import os
import types
from typing import Optional, Type

from resptree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text lines straight to a file descriptor.

    Writing goes through ``os.write`` so that nothing is left in a Python-level
    buffer when the reader goes away. Once SIGPIPE or SIGINT has been recorded,
    or the descriptor reports EPIPE, every further write raises
    ``BrokenPipeError`` so the caller can stop producing output.

    Attributes:
        fd: The file descriptor being written to.
        encoding: Encoding applied to each line.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write_line("├── src")
    """

    def __init__(self, fd: int, encoding: str = "utf-8") -> None:
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self.encoding = encoding
        self._closed = False

    def write(self, data: str) -> None:
        """Write ``data`` as-is.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding, errors="replace")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a newline."""
        self.write(line + "\n")

    def close(self) -> None:
        """Mark the writer closed. The descriptor is owned by the caller and stays open."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
