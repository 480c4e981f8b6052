"""Read a file descriptor one line at a time.

A :class:`LineReader` keeps the bytes it has read past the end of the
current line separately for every descriptor. Calls for different
descriptors can therefore be interleaved freely. Lines are returned as
``bytes`` with their terminating newline, if they had one. ``None``
signals the end of the input.
"""

import os
from typing import Dict, Optional

BUFFER_SIZE = 4096


class LineReader:
    """Line-by-line reader over any number of file descriptors."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytearray] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line read from ``fd``, or ``None`` at end of input.

        The returned line keeps its trailing newline. A final line without
        one is returned as it stands. Once the input is exhausted, the state
        kept for ``fd`` is dropped. A read error drops that state too and is
        raised as ``OSError``.
        """
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        pending = self._pending.setdefault(fd, bytearray())
        searched = 0
        while True:
            newline = pending.find(b"\n", searched)
            if newline >= 0:
                line = bytes(pending[: newline + 1])
                del pending[: newline + 1]
                return line
            searched = len(pending)
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self.forget(fd)
                raise
            if not chunk:
                break
            pending += chunk
        self.forget(fd)
        return bytes(pending) or None

    def forget(self, fd: int) -> None:
        """Discard anything buffered for ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)