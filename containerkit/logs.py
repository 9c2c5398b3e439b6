"""Container log records, log consumers and the logger used for diagnostics."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TextIO

STDOUT_LOG = "STDOUT"
STDERR_LOG = "STDERR"

PACKAGE_PATH = "containerkit"

_SERVER_INFO_MESSAGE = (
    "%s - Connected to docker: \n"
    "  Server Version: %s\n"
    "  API Version: %s\n"
    "  Operating System: %s\n"
    "  Total Memory: %s MB\n"
)


@dataclass(frozen=True)
class Log:
    """A message produced by a process: its stream type and raw content."""

    log_type: str
    content: bytes


class LogConsumer(ABC):
    """Anything that handles container log messages."""

    @abstractmethod
    def accept(self, log: Log) -> None:
        """Handle one log message."""


class Logging(ABC):
    """The interface of the loggers used for diagnostic output."""

    @abstractmethod
    def printf(self, format: str, *args: Any) -> None:
        """Log a message built with printf-style formatting."""


class StandardLogger(Logging):
    """Writes timestamped lines to a text stream, standard error by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def printf(self, format: str, *args: Any) -> None:
        message = format % args if args else format
        if not message.endswith("\n"):
            message += "\n"
        stamp = time.strftime("%Y/%m/%d %H:%M:%S")
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(f"{stamp} {message}")
        stream.flush()


LOGGER: Logging = StandardLogger()


@dataclass(frozen=True)
class LoggerOption:
    """An option that installs a logger on provider options."""

    logger: Logging

    def apply_generic_to(self, opts: Any) -> None:
        """Set the logger on generic provider options."""
        opts.logger = self.logger

    def apply_docker_to(self, opts: Any) -> None:
        """Set the logger on Docker provider options."""
        opts.logger = self.logger


def with_logger(logger: Logging) -> LoggerOption:
    """Return an option that replaces the default logger with ``logger``."""
    return LoggerOption(logger)


class DockerInfoClient(Protocol):
    """The part of a Docker client that server information is read from."""

    def info(self) -> Mapping[str, Any]: ...

    def client_version(self) -> str: ...


def log_docker_server_info(client: DockerInfoClient, logger: Logging) -> None:
    """Log the Docker server's version, API version, OS and memory.

    A failure to fetch the information is logged instead of raised.
    """
    try:
        info = client.info()
    except Exception as exc:  # noqa: BLE001 - any client failure is reported
        logger.printf("failed getting information about docker server: %s", exc)
        return

    logger.printf(
        _SERVER_INFO_MESSAGE,
        PACKAGE_PATH,
        info.get("ServerVersion", ""),
        client.client_version(),
        info.get("OperatingSystem", ""),
        int(info.get("MemTotal", 0)) // 1024 // 1024,
    )