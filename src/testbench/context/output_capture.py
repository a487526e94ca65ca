"""Fd-level stdout/stderr capture for isolated cases.

The child side points fd 1 and fd 2 at the write end of the output channel,
so output from the case body, C extensions, and subprocesses it starts all
land in the channel. The harness side drains the read end without blocking.
"""

from __future__ import annotations

import io
import os
import sys
from dataclasses import dataclass, field

READ_CHUNK = 65536


class _ChannelWriter(io.TextIOBase):
    """Replacement for sys.stdout/stderr inside the child.

    Writes go straight to the channel fd, unbuffered. The fd is non-blocking:
    when the pipe is full the remainder of the write is dropped instead of
    raising into the case body.
    """

    def __init__(self, fd: int, encoding: str = "utf-8") -> None:
        self._fd = fd
        self._encoding = encoding

    def write(self, s: str) -> int:
        data = s.encode(self._encoding, errors="replace")
        try:
            while data:
                written = os.write(self._fd, data)
                data = data[written:]
        except BlockingIOError:
            pass
        return len(s)

    def flush(self) -> None:
        pass

    def writable(self) -> bool:
        return True

    @property
    def encoding(self) -> str:
        return self._encoding

    def fileno(self) -> int:
        return self._fd

    def isatty(self) -> bool:
        return False


def redirect_to_channel(write_fd: int) -> None:
    """Point stdout and stderr of the current process at ``write_fd``.

    Only ever called in the forked child; the harness keeps its streams.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass
    for target in (1, 2):
        os.dup2(write_fd, target)
        os.set_blocking(target, False)
    if write_fd not in (1, 2):
        os.close(write_fd)
    sys.stdout = _ChannelWriter(1)
    sys.stderr = _ChannelWriter(2)


@dataclass
class ChannelDrain:
    """Harness-side reader for one channel of an isolated case.

    Attributes
    ----------
    fd
        Read end of the pipe; switched to non-blocking on construction.
    limit
        Keep at most this many bytes; the rest is read and discarded so the
        writer never stalls. None keeps everything.
    """

    fd: int
    limit: int | None = None
    data: bytearray = field(default_factory=bytearray)
    eof: bool = False
    closed: bool = False

    def __post_init__(self) -> None:
        os.set_blocking(self.fd, False)

    def read_available(self) -> bool:
        """Read until the pipe is empty. Returns True once EOF was seen."""
        while not self.eof:
            try:
                chunk = os.read(self.fd, READ_CHUNK)
            except BlockingIOError:
                return False
            if not chunk:
                self.eof = True
                break
            if self.limit is None:
                self.data.extend(chunk)
            elif len(self.data) < self.limit:
                self.data.extend(chunk[: self.limit - len(self.data)])
        return True

    def close(self) -> None:
        if not self.closed:
            os.close(self.fd)
            self.closed = True

    def getvalue(self) -> bytes:
        return bytes(self.data)


def reindent(output: bytes, depth: int) -> list[str]:
    """Split captured output into lines indented two spaces per depth level."""
    text = output.decode("utf-8", errors="replace")
    indent = "  " * depth
    return [f"{indent}{line}" for line in text.splitlines()]
