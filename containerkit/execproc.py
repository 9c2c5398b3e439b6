"""Post-processing of the output stream returned by a command run in a container."""

from __future__ import annotations

import io
import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import BinaryIO

STDIN_STREAM = 0
STDOUT_STREAM = 1
STDERR_STREAM = 2
SYSTEMERR_STREAM = 3

_HEADER = struct.Struct(">B3xI")


class DemultiplexError(ValueError):
    """Raised when a multiplexed stream reports an error or is malformed."""


@dataclass
class ProcessOptions:
    """Options applied to the reader returned by a command execution."""

    reader: BinaryIO


ProcessOption = Callable[[ProcessOptions], None]


def _read_exactly(reader: BinaryIO, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = reader.read(size - len(chunks))
        if not chunk:
            break
        chunks += chunk
    return bytes(chunks)


def demultiplex(stream: bytes | bytearray | BinaryIO) -> tuple[bytes, bytes]:
    """Split a Docker multiplexed stream into its stdout and stderr content.

    Each frame is an 8-byte header (stream type, three padding bytes and a
    big-endian payload size) followed by the payload. Stdin frames count as
    stdout. A truncated final frame is dropped. Raises ``DemultiplexError``
    for a daemon error frame or an unknown stream type.
    """
    if isinstance(stream, (bytes, bytearray, memoryview)):
        reader: BinaryIO = io.BytesIO(bytes(stream))
    else:
        reader = stream

    out = bytearray()
    err = bytearray()
    while True:
        header = _read_exactly(reader, _HEADER.size)
        if len(header) < _HEADER.size:
            break
        kind, size = _HEADER.unpack(header)

        if kind in (STDIN_STREAM, STDOUT_STREAM):
            target = out
        elif kind == STDERR_STREAM:
            target = err
        elif kind == SYSTEMERR_STREAM:
            payload = _read_exactly(reader, size)
            raise DemultiplexError(
                "error from daemon in stream: " + payload.decode("utf-8", errors="replace")
            )
        else:
            raise DemultiplexError(f"Unrecognized input header: {kind}")

        payload = _read_exactly(reader, size)
        if len(payload) < size:
            break
        target += payload

    return bytes(out), bytes(err)


def multiplexed() -> ProcessOption:
    """Return an option that replaces the reader with its demultiplexed stdout."""

    def apply(opts: ProcessOptions) -> None:
        stdout, _ = demultiplex(opts.reader)
        opts.reader = io.BytesIO(stdout)

    return apply


def apply_options(reader: BinaryIO, *args: ProcessOption) -> BinaryIO:
    """Apply each option in turn to ``reader`` and return the resulting reader."""
    opts = ProcessOptions(reader)
    for option in args:
        option(opts)
    return opts.reader